"""
Constants and configuration values for the VS Code Marketplace client.

This module contains the gallery endpoint, wire-format values, chunk sizes and
logging settings used throughout the package.
"""

# Gallery API
GALLERY_API_URL = (
    "https://marketplace.visualstudio.com/_apis/public/gallery/extensionquery"
)
GALLERY_CONTENT_TYPE = "application/json"
GALLERY_API_VERSION_HEADER = "application/json;api-version=6.0-preview.1"

# Filter type 7 selects an extension by its "<publisher>.<extension>" name
EXTENSION_ID_FILTER_TYPE = 7

# Asset type tag of the installable package in a version's file list
VSIX_PACKAGE_ASSET_TYPE = "Microsoft.VisualStudio.Services.VSIXPackage"

# File names
VSIX_EXTENSION = ".vsix"
DEFAULT_OUTPUT_DIR = "."

# Placeholder used in errors when no specific version was requested
LATEST_VERSION_LABEL = "latest"

# Download configuration defaults
DEFAULT_CHUNK_SIZE = 8192
CHUNK_LOG_INTERVAL = 100

# Logging configuration
LOGGER_NAME = "vscode_marketplace"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
INFO_LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"
DEBUG_LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s: %(message)s"
LOG_FILE_NAME = "vscode_marketplace.log"
LOG_FILE_MAX_BYTES = 10 * 1024 * 1024  # 10 MB
LOG_FILE_BACKUP_COUNT = 5
DEFAULT_LOG_LEVEL = "WARNING"

# Environment variable names
LOG_LEVEL_ENV_VAR = "VSCODE_MARKETPLACE_LOG_LEVEL"

# Distribution name used for the User-Agent version lookup
DISTRIBUTION_NAME = "vscode-marketplace-client"
