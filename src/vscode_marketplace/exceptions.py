"""
Custom exceptions for the VS Code Marketplace client.

Every lookup that finds nothing raises one of these instead of returning an
empty value. Each exception carries an ``ErrorKind`` tag so callers can
branch on ``error.kind`` without inspecting the exception type.

Network and file system failures are not wrapped here; they surface as the
``requests`` or ``OSError`` exceptions raised by the underlying layer.
"""

from datetime import datetime, timezone
from enum import Enum


class ErrorKind(Enum):
    """Tag identifying which marketplace failure occurred."""

    GENERIC = "generic"
    EXTENSION_NOT_FOUND = "extension_not_found"
    VERSION_NOT_FOUND = "version_not_found"
    VSIX_FILE_NOT_FOUND = "vsix_file_not_found"


class VSCodeExtensionError(Exception):
    """
    Base exception for all marketplace client errors.

    Attributes:
        message: The primary error message.
        error_code: Optional numeric code for the error.
        details: Optional additional context about the error.
        timestamp: UTC time at which the error was created.
        kind: The ``ErrorKind`` tag of this error.
    """

    kind = ErrorKind.GENERIC

    def __init__(
        self,
        message: str,
        error_code: int | None = None,
        details: str | None = None,
    ) -> None:
        """
        Initialize the exception.

        Args:
            message: The primary error message.
            error_code: Optional numeric code representing the error.
            details: Optional additional context about the error.
        """
        self.message = message
        self.error_code = error_code
        self.details = details
        self.timestamp = datetime.now(timezone.utc)
        super().__init__(message)

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} - {self.details}"
        return self.message


class ExtensionNotFoundError(VSCodeExtensionError):
    """
    Exception raised when the gallery returns no extension for an identifier.

    Attributes:
        extension_id: The "<publisher>.<extension>" identifier that was queried.
    """

    kind = ErrorKind.EXTENSION_NOT_FOUND

    def __init__(self, extension_id: str, details: str | None = None) -> None:
        super().__init__(f'Extension "{extension_id}" not found.', details=details)
        self.extension_id = extension_id


class VersionNotFoundError(VSCodeExtensionError):
    """
    Exception raised when no version of an extension matches the requested one.

    Attributes:
        extension_id: The "<publisher>.<extension>" identifier.
        version: The version string that was requested.
    """

    kind = ErrorKind.VERSION_NOT_FOUND

    def __init__(
        self, extension_id: str, version: str, details: str | None = None
    ) -> None:
        super().__init__(
            f'Version "{version}" for extension "{extension_id}" not found.',
            details=details,
        )
        self.extension_id = extension_id
        self.version = version


class VsixFileNotFoundError(VSCodeExtensionError):
    """
    Exception raised when a version has no VSIX package in its file list.

    Attributes:
        extension_id: The "<publisher>.<extension>" identifier.
    """

    kind = ErrorKind.VSIX_FILE_NOT_FOUND

    def __init__(self, extension_id: str, details: str | None = None) -> None:
        super().__init__(
            f'VSIX file for extension "{extension_id}" not found.', details=details
        )
        self.extension_id = extension_id
