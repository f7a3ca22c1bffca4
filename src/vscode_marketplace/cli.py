# src/vscode_marketplace/cli.py

import argparse
import sys
from typing import List, Optional, Tuple

import requests

from vscode_marketplace import log_utils
from vscode_marketplace.client import VSCodeMarketplaceClient
from vscode_marketplace.constants import DEFAULT_OUTPUT_DIR
from vscode_marketplace.exceptions import VSCodeExtensionError
from vscode_marketplace.flags import QueryFlag


def parse_extension_args(identifier: str, extension: Optional[str]) -> Tuple[str, str]:
    """
    Split command arguments into a (publisher, extension) pair.

    Accepts either two positional values ("ms-python" "python") or a single
    "publisher.extension" identifier.

    Raises:
        ValueError: If a single identifier has no "." separator.
    """
    if extension:
        return identifier, extension
    publisher, sep, name = identifier.partition(".")
    if not sep or not publisher or not name:
        raise ValueError(
            f"Expected 'publisher.extension' or 'PUBLISHER EXTENSION', got '{identifier}'"
        )
    return publisher, name


def _add_extension_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "publisher", help="Publisher name, or a full 'publisher.extension' identifier"
    )
    parser.add_argument("extension", nargs="?", default=None, help="Extension name")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="vscode-marketplace",
        description="Query the Visual Studio Marketplace and download VSIX packages",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Log level (DEBUG, INFO, WARNING, ERROR)",
    )
    parser.add_argument(
        "--log-dir",
        default=None,
        help="Also write logs to a rotating file in this directory",
    )
    subparsers = parser.add_subparsers(dest="command")

    info_parser = subparsers.add_parser("info", help="Show extension details")
    _add_extension_arguments(info_parser)
    info_parser.add_argument(
        "--flag",
        dest="flags",
        action="append",
        type=int,
        default=None,
        help="Query flag value to include (repeatable)",
    )

    latest_parser = subparsers.add_parser(
        "latest", help="Print the latest version of an extension"
    )
    _add_extension_arguments(latest_parser)

    url_parser = subparsers.add_parser("url", help="Print the VSIX download URL")
    _add_extension_arguments(url_parser)
    url_parser.add_argument("--version", dest="version", default=None)

    download_parser = subparsers.add_parser(
        "download", help="Download the VSIX package"
    )
    _add_extension_arguments(download_parser)
    download_parser.add_argument(
        "-o",
        "--output-dir",
        default=DEFAULT_OUTPUT_DIR,
        help="Directory to save the VSIX file in (default: current directory)",
    )
    download_parser.add_argument("--version", dest="version", default=None)

    return parser


def _show_info(
    client: VSCodeMarketplaceClient, publisher: str, extension: str, flags: List[int]
) -> None:
    info = client.get_extension_info(publisher, extension, flags)
    print(f"{info.display_name} ({info.extension_identifier})")
    print(f"  ID:        {info.extension_id}")
    print(f"  Publisher: {info.publisher.display_name}")
    if info.versions:
        print(f"  Latest:    {info.versions[0].version}")
    if info.short_description:
        print(f"  {info.short_description}")


def main(argv: Optional[List[str]] = None) -> int:
    """
    Entry point for the vscode-marketplace command-line interface.

    Returns:
        int: 0 on success, 1 when the lookup or download failed, 2 on usage errors.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.log_level:
        log_utils.set_log_level(args.log_level)
    if args.log_dir:
        log_utils.add_file_logging(args.log_dir, args.log_level or "INFO")

    if not args.command:
        parser.print_help()
        return 2

    try:
        publisher, extension = parse_extension_args(args.publisher, args.extension)
    except ValueError as e:
        parser.error(str(e))

    client = VSCodeMarketplaceClient()
    try:
        if args.command == "info":
            flags = args.flags or [
                QueryFlag.INCLUDE_VERSIONS,
                QueryFlag.INCLUDE_FILES,
                QueryFlag.INCLUDE_STATISTICS,
            ]
            _show_info(client, publisher, extension, flags)
        elif args.command == "latest":
            print(client.get_latest_version(publisher, extension))
        elif args.command == "url":
            print(client.get_vsix_download_url(publisher, extension, args.version))
        elif args.command == "download":
            path = client.download_extension_vsix(
                publisher, extension, args.output_dir, args.version
            )
            print(path)
    except VSCodeExtensionError as e:
        log_utils.logger.error(str(e))
        return 1
    except requests.RequestException as e:
        log_utils.logger.error(f"Request to the marketplace failed: {e}")
        return 1
    except OSError as e:
        log_utils.logger.error(f"Could not write file: {e}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
