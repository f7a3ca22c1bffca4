"""
Visual Studio Marketplace service.

This module provides the class that queries the extension gallery, resolves
extension and version details from the results and downloads VSIX packages.
The resolution steps are also available as plain functions so they can be
applied to already-fetched data.
"""

import os
from typing import Any, Dict, Iterable, List, Optional, Sequence

import requests

from vscode_marketplace import utils
from vscode_marketplace.constants import (
    DEFAULT_OUTPUT_DIR,
    EXTENSION_ID_FILTER_TYPE,
    LATEST_VERSION_LABEL,
    VSIX_EXTENSION,
    VSIX_PACKAGE_ASSET_TYPE,
)
from vscode_marketplace.exceptions import (
    ExtensionNotFoundError,
    VersionNotFoundError,
    VsixFileNotFoundError,
)
from vscode_marketplace.flags import VERSION_QUERY_FLAGS, encode_flags
from vscode_marketplace.log_utils import logger
from vscode_marketplace.models import (
    ExtensionFile,
    ExtensionInfo,
    ExtensionVersion,
    SearchResults,
)


def make_extension_id(publisher: str, extension: str) -> str:
    """Return the "<publisher>.<extension>" identifier used by the gallery."""
    return f"{publisher}.{extension}"


def build_extension_query(
    publisher: str, extension: str, flags: Iterable[int]
) -> Dict[str, Any]:
    """
    Build the gallery query body selecting one extension by its identifier.

    Parameters:
        publisher (str): The publisher's name.
        extension (str): The extension's name.
        flags (Iterable[int]): Query flags controlling the response detail.

    Returns:
        Dict[str, Any]: The JSON-serializable request body.
    """
    return {
        "filters": [
            {
                "criteria": [
                    {
                        "filterType": EXTENSION_ID_FILTER_TYPE,
                        "value": make_extension_id(publisher, extension),
                    }
                ]
            }
        ],
        "flags": encode_flags(flags),
    }


def build_vsix_filename(publisher: str, extension: str, version: str) -> str:
    """Return the "<publisher>.<extension>-<version>.vsix" download file name."""
    return f"{make_extension_id(publisher, extension)}-{version}{VSIX_EXTENSION}"


def resolve_extension(
    results: Sequence[SearchResults], extension_id: str
) -> ExtensionInfo:
    """
    Pick the extension from the first result group of a query.

    Raises:
        ExtensionNotFoundError: If the first group holds no extensions.
    """
    if not results or not results[0].extensions:
        logger.debug(f"Gallery returned no extension for {extension_id}")
        raise ExtensionNotFoundError(extension_id)
    return results[0].extensions[0]


def resolve_version(
    extension_info: ExtensionInfo,
    version: Optional[str] = None,
    extension_id: Optional[str] = None,
) -> ExtensionVersion:
    """
    Pick a version of an extension.

    Without `version` the first entry is returned; the gallery lists versions
    newest first. Otherwise the entry whose version string is exactly equal to
    `version` is returned.

    Raises:
        VersionNotFoundError: If no entry matches, or the extension lists no versions.
    """
    extension_id = extension_id or extension_info.extension_identifier
    if not version:
        if not extension_info.versions:
            raise VersionNotFoundError(
                extension_id, LATEST_VERSION_LABEL, details="no versions listed"
            )
        return extension_info.versions[0]

    for candidate in extension_info.versions:
        if candidate.version == version:
            return candidate

    logger.debug(f"Version {version} not listed for {extension_id}")
    raise VersionNotFoundError(extension_id, version)


def find_vsix_file(
    extension_version: ExtensionVersion, extension_id: str
) -> ExtensionFile:
    """
    Find the installable VSIX package among a version's files.

    Raises:
        VsixFileNotFoundError: If no file carries the VSIX package asset type.
    """
    for extension_file in extension_version.files:
        if extension_file.asset_type == VSIX_PACKAGE_ASSET_TYPE:
            return extension_file

    logger.debug(
        f"No {VSIX_PACKAGE_ASSET_TYPE} asset in version {extension_version.version} of {extension_id}"
    )
    raise VsixFileNotFoundError(extension_id)


class VSCodeMarketplaceService:
    """
    Service for interacting with the Visual Studio Marketplace gallery API.

    Every public method performs its own gallery round trip. Lookups that
    find nothing raise the matching ``VSCodeExtensionError`` subclass; network
    and file errors propagate unchanged.

    Usage:
        service = VSCodeMarketplaceService()
        info = service.get_extension_info("ms-python", "python", [QueryFlag.INCLUDE_VERSIONS])
        path = service.download_extension_vsix("ms-python", "python", "./downloads")
    """

    def __init__(self, session: Optional[requests.Session] = None):
        """
        Initialize the service.

        Parameters:
            session (Optional[requests.Session]): Session used for every request, for callers that need proxies, authentication or timeouts. Module-level `requests` calls are used when omitted.
        """
        self.session = session

    def fetch_extension_data(
        self, publisher: str, extension: str, flags: Iterable[int]
    ) -> List[SearchResults]:
        """
        Query the gallery for one extension.

        Returns:
            List[SearchResults]: The parsed result groups of the response.
        """
        payload = build_extension_query(publisher, extension, flags)
        logger.debug(
            f"Querying gallery for {make_extension_id(publisher, extension)} with flags {payload['flags']}"
        )
        data = utils.make_gallery_request(payload, session=self.session)
        return [SearchResults.from_dict(item) for item in data.get("results") or ()]

    def get_extension_info(
        self, publisher: str, extension: str, flags: Iterable[int]
    ) -> ExtensionInfo:
        """
        Retrieve extension information for a given publisher and extension name.

        Raises:
            ExtensionNotFoundError: If no extension is found.
        """
        results = self.fetch_extension_data(publisher, extension, flags)
        return resolve_extension(results, make_extension_id(publisher, extension))

    def get_extension_version(
        self, publisher: str, extension: str, version: Optional[str] = None
    ) -> ExtensionVersion:
        """
        Retrieve a specific version, or the latest version, of an extension.

        Raises:
            ExtensionNotFoundError: If no extension is found.
            VersionNotFoundError: If the requested version is not listed.
        """
        extension_info = self.get_extension_info(
            publisher, extension, VERSION_QUERY_FLAGS
        )
        return resolve_version(
            extension_info, version, make_extension_id(publisher, extension)
        )

    def get_latest_version(self, publisher: str, extension: str) -> str:
        """Return the latest version string of an extension."""
        return self.get_extension_version(publisher, extension).version

    def get_vsix_download_url(
        self, publisher: str, extension: str, version: Optional[str] = None
    ) -> str:
        """
        Return the VSIX download URL of the latest (or the given) version.

        Raises:
            ExtensionNotFoundError: If no extension is found.
            VersionNotFoundError: If the requested version is not listed.
            VsixFileNotFoundError: If the version has no VSIX package.
        """
        extension_version = self.get_extension_version(publisher, extension, version)
        vsix_file = find_vsix_file(
            extension_version, make_extension_id(publisher, extension)
        )
        return vsix_file.source

    def download_file(self, url: str, destination: str) -> str:
        """Download `url` to `destination` and return `destination`."""
        return utils.download_file(url, destination, session=self.session)

    def download_extension_vsix(
        self,
        publisher: str,
        extension: str,
        output_dir: str = DEFAULT_OUTPUT_DIR,
        version: Optional[str] = None,
    ) -> str:
        """
        Download the VSIX of the latest (or the given) version into `output_dir`.

        The file is named "<publisher>.<extension>-<version>.vsix". The version
        is resolved once and its own file list supplies the download URL.
        A missing `output_dir` is created before the file is written.

        Returns:
            str: The path of the written file.
        """
        extension_version = self.get_extension_version(publisher, extension, version)
        vsix_file = find_vsix_file(
            extension_version, make_extension_id(publisher, extension)
        )
        file_path = os.path.join(
            output_dir,
            build_vsix_filename(publisher, extension, extension_version.version),
        )
        logger.debug(f"Downloading {vsix_file.source} to {file_path}")
        return self.download_file(vsix_file.source, file_path)
