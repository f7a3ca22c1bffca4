"""
Facade over the marketplace service.

``VSCodeMarketplaceClient`` exposes the five public operations. The
module-level functions of the same names delegate to a shared default client,
so simple callers need not construct anything.
"""

from typing import Iterable, Optional

import requests

from vscode_marketplace.constants import DEFAULT_OUTPUT_DIR
from vscode_marketplace.models import ExtensionInfo, ExtensionVersion
from vscode_marketplace.service import VSCodeMarketplaceService


class VSCodeMarketplaceClient:
    """Entry point for querying extensions and downloading VSIX packages."""

    def __init__(
        self,
        service: Optional[VSCodeMarketplaceService] = None,
        session: Optional[requests.Session] = None,
    ):
        self.service = service or VSCodeMarketplaceService(session=session)

    def get_extension_info(
        self, publisher: str, extension: str, flags: Iterable[int]
    ) -> ExtensionInfo:
        """
        Retrieve extension information for a given publisher and extension name.

        Parameters:
            publisher (str): The publisher's name.
            extension (str): The extension's name.
            flags (Iterable[int]): QueryFlag values that determine the response details.

        Raises:
            ExtensionNotFoundError: If no extension is found.
        """
        return self.service.get_extension_info(publisher, extension, flags)

    def get_extension_version(
        self, publisher: str, extension: str, version: Optional[str] = None
    ) -> ExtensionVersion:
        """
        Retrieve a specific version or, when `version` is omitted, the latest version.

        Raises:
            ExtensionNotFoundError: If no extension is found.
            VersionNotFoundError: If the requested version is not listed.
        """
        return self.service.get_extension_version(publisher, extension, version)

    def get_latest_version(self, publisher: str, extension: str) -> str:
        """Retrieve the latest version string of an extension."""
        return self.service.get_latest_version(publisher, extension)

    def get_vsix_download_url(
        self, publisher: str, extension: str, version: Optional[str] = None
    ) -> str:
        """
        Retrieve the VSIX download URL of the latest (or the given) version.

        Raises:
            VsixFileNotFoundError: If the version has no VSIX package.
        """
        return self.service.get_vsix_download_url(publisher, extension, version)

    def download_extension_vsix(
        self,
        publisher: str,
        extension: str,
        output_dir: str = DEFAULT_OUTPUT_DIR,
        version: Optional[str] = None,
    ) -> str:
        """
        Download the VSIX file of the latest (or the given) version.

        Parameters:
            publisher (str): The publisher's name.
            extension (str): The extension's name.
            output_dir (str): Directory the file is saved in, the current directory by default.
            version (Optional[str]): Exact version to download instead of the latest.

        Returns:
            str: Path of the downloaded "<publisher>.<extension>-<version>.vsix" file.
        """
        return self.service.download_extension_vsix(
            publisher, extension, output_dir, version
        )


_default_client: Optional[VSCodeMarketplaceClient] = None


def get_default_client() -> VSCodeMarketplaceClient:
    """Return the shared client used by the module-level functions."""
    global _default_client
    if _default_client is None:
        _default_client = VSCodeMarketplaceClient()
    return _default_client


def get_extension_info(
    publisher: str, extension: str, flags: Iterable[int]
) -> ExtensionInfo:
    return get_default_client().get_extension_info(publisher, extension, flags)


def get_extension_version(
    publisher: str, extension: str, version: Optional[str] = None
) -> ExtensionVersion:
    return get_default_client().get_extension_version(publisher, extension, version)


def get_latest_version(publisher: str, extension: str) -> str:
    return get_default_client().get_latest_version(publisher, extension)


def get_vsix_download_url(
    publisher: str, extension: str, version: Optional[str] = None
) -> str:
    return get_default_client().get_vsix_download_url(publisher, extension, version)


def download_extension_vsix(
    publisher: str,
    extension: str,
    output_dir: str = DEFAULT_OUTPUT_DIR,
    version: Optional[str] = None,
) -> str:
    return get_default_client().download_extension_vsix(
        publisher, extension, output_dir, version
    )
