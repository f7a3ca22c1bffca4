import importlib.metadata
import os
import time
from typing import Any, Dict, Optional

import requests

from vscode_marketplace.constants import (
    CHUNK_LOG_INTERVAL,
    DEFAULT_CHUNK_SIZE,
    DISTRIBUTION_NAME,
    GALLERY_API_URL,
    GALLERY_API_VERSION_HEADER,
    GALLERY_CONTENT_TYPE,
)
from vscode_marketplace.log_utils import logger

# Cache for the User-Agent string to avoid repeated metadata lookups
_USER_AGENT_CACHE: Optional[str] = None


def get_user_agent() -> str:
    """
    Get the User-Agent string used for HTTP requests.

    Returns:
        The string `vscode-marketplace-client/{version}`, where `{version}` is the installed package version or `unknown` if the version cannot be determined.
    """
    global _USER_AGENT_CACHE

    if _USER_AGENT_CACHE is None:
        try:
            app_version = importlib.metadata.version(DISTRIBUTION_NAME)
        except importlib.metadata.PackageNotFoundError:
            app_version = "unknown"

        _USER_AGENT_CACHE = f"{DISTRIBUTION_NAME}/{app_version}"

    return _USER_AGENT_CACHE


def get_gallery_headers() -> Dict[str, str]:
    """Headers sent with every gallery query."""
    return {
        "Content-Type": GALLERY_CONTENT_TYPE,
        "Accept": GALLERY_API_VERSION_HEADER,
        "User-Agent": get_user_agent(),
    }


def make_gallery_request(
    payload: Dict[str, Any],
    session: Optional[requests.Session] = None,
) -> Dict[str, Any]:
    """
    POST a query to the gallery and return the decoded JSON body.

    No retries are attempted and no timeout is imposed; transport defaults
    (or those configured on `session`) apply.

    Parameters:
        payload (Dict[str, Any]): The query body.
        session (Optional[requests.Session]): Session to send the request with; the module-level `requests.post` is used when omitted.

    Returns:
        Dict[str, Any]: The decoded response body.

    Raises:
        requests.HTTPError: For non-2xx responses.
        requests.RequestException: For lower-level network or request errors.
        ValueError: If the body is not valid JSON.
    """
    post = session.post if session is not None else requests.post
    logger.debug(f"Making gallery query request: {GALLERY_API_URL}")
    response = post(GALLERY_API_URL, json=payload, headers=get_gallery_headers())
    try:
        logger.debug(
            f"Received HTTP response status code: {response.status_code} for URL: {GALLERY_API_URL}"
        )
        response.raise_for_status()
        return response.json()
    finally:
        response.close()


def download_file(
    url: str,
    destination: str,
    session: Optional[requests.Session] = None,
) -> str:
    """
    Stream a remote file straight into `destination`.

    The destination is created or truncated; its parent directory is created
    if missing. Errors from the request or from writing propagate unchanged
    and a partially written file is left in place. No checksum verification
    is performed.

    Parameters:
        url (str): The HTTP(S) URL of the remote file.
        destination (str): Local path to write to.
        session (Optional[requests.Session]): Session to send the request with; the module-level `requests.get` is used when omitted.

    Returns:
        str: `destination`, once every byte has been written and the file closed.

    Raises:
        requests.HTTPError: For non-2xx responses.
        requests.RequestException: For network errors while connecting or reading.
        OSError: If the file cannot be created or written.
    """
    get = session.get if session is not None else requests.get
    logger.debug(f"Attempting to download file from URL: {url} to path: {destination}")
    start_time = time.time()

    response = get(url, stream=True)
    try:
        logger.debug(
            f"Received HTTP response status code: {response.status_code} for URL: {url}"
        )
        response.raise_for_status()

        parent_dir = os.path.dirname(destination)
        if parent_dir and not os.path.exists(parent_dir):
            os.makedirs(parent_dir, exist_ok=True)

        downloaded_chunks = 0
        downloaded_bytes = 0
        with open(destination, "wb") as file:
            for chunk in response.iter_content(chunk_size=DEFAULT_CHUNK_SIZE):
                if chunk:
                    file.write(chunk)
                    downloaded_chunks += 1
                    downloaded_bytes += len(chunk)
                    if downloaded_chunks % CHUNK_LOG_INTERVAL == 0:
                        logger.debug(
                            f"Downloaded {downloaded_chunks} chunks ({downloaded_bytes} bytes) so far for {url}"
                        )
    finally:
        response.close()

    elapsed = time.time() - start_time
    logger.debug("Download elapsed time: %.2fs for %s", elapsed, url)

    file_size_mb = downloaded_bytes / (1024 * 1024)
    if file_size_mb >= 1.0:
        logger.info(
            f"Downloaded: {os.path.basename(destination)} ({file_size_mb:.1f} MB)"
        )
    else:
        logger.info(
            f"Downloaded: {os.path.basename(destination)} ({downloaded_bytes} bytes)"
        )
    return destination
