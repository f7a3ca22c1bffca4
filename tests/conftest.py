import copy
from typing import Any, Dict

import pytest
import requests

_NETWORK_BLOCK_MSG = (
    "Network access is blocked during tests. Mock requests.* or Session.request."
)

VSIX_URL = (
    "https://marketplace.visualstudio.com/_apis/public/gallery/publishers/"
    "ms-vscode/vsextensions/cpptools/1.2.30/vspackage"
)

_SAMPLE_EXTENSION: Dict[str, Any] = {
    "publisher": {
        "publisherId": "5f5636e7-69ed-4afe-b5d6-8d231fb3d3ee",
        "publisherName": "ms-vscode",
        "displayName": "Microsoft",
        "flags": "verified",
        "domain": "https://microsoft.com",
        "isDomainVerified": True,
    },
    "extensionId": "690b692e-e8a9-493f-b802-8089d50ac1b2",
    "extensionName": "cpptools",
    "displayName": "C/C++",
    "flags": "validated, public",
    "lastUpdated": "2024-05-01T10:00:00.000Z",
    "publishedDate": "2016-03-18T18:43:22.763Z",
    "releaseDate": "2016-03-18T18:43:22.763Z",
    "presentInConflictList": "false",
    "shortDescription": "C/C++ IntelliSense, debugging, and code browsing.",
    "versions": [
        {
            "version": "1.2.30",
            "flags": "validated",
            "lastUpdated": "2024-05-01T10:00:00.000Z",
            "files": [
                {
                    "assetType": "Microsoft.VisualStudio.Code.Manifest",
                    "source": "https://example.com/1.2.30/package.json",
                },
                {
                    "assetType": "Microsoft.VisualStudio.Services.VSIXPackage",
                    "source": VSIX_URL,
                },
            ],
            "assetUri": "https://example.com/1.2.30",
            "fallbackAssetUri": "https://fallback.example.com/1.2.30",
        },
        {
            "version": "1.2.3",
            "flags": "validated",
            "lastUpdated": "2023-01-01T10:00:00.000Z",
            "files": [
                {
                    "assetType": "Microsoft.VisualStudio.Services.VSIXPackage",
                    "source": "https://example.com/1.2.3/vspackage",
                }
            ],
            "assetUri": "https://example.com/1.2.3",
            "fallbackAssetUri": "https://fallback.example.com/1.2.3",
        },
        {
            "version": "1.0.0",
            "flags": "validated",
            "lastUpdated": "2022-01-01T10:00:00.000Z",
            "files": [
                {
                    "assetType": "Microsoft.VisualStudio.Code.Manifest",
                    "source": "https://example.com/1.0.0/package.json",
                }
            ],
            "assetUri": "https://example.com/1.0.0",
            "fallbackAssetUri": "https://fallback.example.com/1.0.0",
        },
    ],
    "categories": ["Programming Languages", "Debuggers"],
    "tags": ["c", "c++", "cpp"],
    "statistics": [
        {"statisticName": "install", "value": 60000000},
        {"statisticName": "averagerating", "value": 3.5},
    ],
    "deploymentType": 0,
}


def _block_network(*_args, **_kwargs):
    """
    Prevent network calls in tests by raising a RuntimeError.

    Raises:
        RuntimeError: with `_NETWORK_BLOCK_MSG` indicating that network access is blocked during tests.
    """
    raise RuntimeError(_NETWORK_BLOCK_MSG)


@pytest.fixture(autouse=True)
def _block_real_requests(monkeypatch):
    """Replace the requests entry points used by the package with a blocker."""
    for name in ("get", "post", "put", "delete", "head", "patch", "options"):
        monkeypatch.setattr(requests, name, _block_network)
    monkeypatch.setattr(requests.Session, "request", _block_network)


@pytest.fixture(autouse=True)
def _reset_default_client():
    """Drop the shared facade client so tests never see each other's mocks."""
    from vscode_marketplace import client

    client._default_client = None
    yield
    client._default_client = None


@pytest.fixture
def extension_data() -> Dict[str, Any]:
    """A raw gallery extension record with three versions, newest first."""
    return copy.deepcopy(_SAMPLE_EXTENSION)


@pytest.fixture
def gallery_response(extension_data) -> Dict[str, Any]:
    """A gallery query body holding one matching extension."""
    return {"results": [{"extensions": [extension_data]}]}


@pytest.fixture
def empty_gallery_response() -> Dict[str, Any]:
    """A gallery query body with no matching extension."""
    return {"results": [{"extensions": []}]}


@pytest.fixture
def mock_gallery(mocker, gallery_response):
    """Patch the gallery request helper to answer with `gallery_response`."""
    return mocker.patch(
        "vscode_marketplace.utils.make_gallery_request",
        return_value=gallery_response,
    )


@pytest.fixture
def mock_empty_gallery(mocker, empty_gallery_response):
    """Patch the gallery request helper to answer with no extensions."""
    return mocker.patch(
        "vscode_marketplace.utils.make_gallery_request",
        return_value=empty_gallery_response,
    )


@pytest.fixture
def vsix_url() -> str:
    """Source URL of the VSIX package of the latest sample version."""
    return VSIX_URL
