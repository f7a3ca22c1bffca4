"""
vscode_marketplace - query the Visual Studio Marketplace and download VSIX packages.
"""

from .client import (
    VSCodeMarketplaceClient,
    download_extension_vsix,
    get_extension_info,
    get_extension_version,
    get_latest_version,
    get_vsix_download_url,
)
from .exceptions import (
    ErrorKind,
    ExtensionNotFoundError,
    VersionNotFoundError,
    VSCodeExtensionError,
    VsixFileNotFoundError,
)
from .flags import QueryFlag, encode_flags
from .models import (
    ExtensionFile,
    ExtensionInfo,
    ExtensionVersion,
    PublisherInfo,
    SearchResults,
)
from .service import VSCodeMarketplaceService

__all__ = [
    # Facade
    "VSCodeMarketplaceClient",
    "VSCodeMarketplaceService",
    "download_extension_vsix",
    "get_extension_info",
    "get_extension_version",
    "get_latest_version",
    "get_vsix_download_url",
    # Flags
    "QueryFlag",
    "encode_flags",
    # Models
    "ExtensionFile",
    "ExtensionInfo",
    "ExtensionVersion",
    "PublisherInfo",
    "SearchResults",
    # Errors
    "ErrorKind",
    "ExtensionNotFoundError",
    "VSCodeExtensionError",
    "VersionNotFoundError",
    "VsixFileNotFoundError",
]
