"""CLI parser construction."""

from __future__ import annotations

import argparse
from importlib.metadata import PackageNotFoundError, version

from ghpm.config.loader import CONFIG_FILE_NAME


def _package_version() -> str:
    try:
        return version("ghpm")
    except PackageNotFoundError:
        return "0.0.0"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="ghpm", description="GitHub Projects metadata sync")
    parser.add_argument("--version", action="version", version=f"%(prog)s {_package_version()}")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command", required=True)

    init_parser = subparsers.add_parser("init", help=f"Create a {CONFIG_FILE_NAME} config file")
    init_parser.add_argument("--project", help="Project name, number or URL")
    init_parser.add_argument("--org", help="Organization that owns the project")
    init_parser.add_argument("--user", help="User that owns the project (instead of an organization)")
    init_parser.add_argument(
        "--repo",
        action="append",
        default=[],
        metavar="OWNER/REPO",
        help="Repository to track (repeatable)",
    )
    init_parser.add_argument(
        "--list",
        "-l",
        action="store_true",
        help="List all organization projects instead of the repository's",
    )
    init_parser.add_argument("--defaults", action="store_true", help="Do not prompt")
    init_parser.add_argument("--output", "-o", default=CONFIG_FILE_NAME, help="Output file path")

    metadata_parser = subparsers.add_parser("metadata", help="Project metadata operations")
    metadata_subparsers = metadata_parser.add_subparsers(dest="metadata_command", required=True)

    sync_parser = metadata_subparsers.add_parser("sync", help="Refresh the metadata snapshot from GitHub")
    sync_parser.add_argument("--config", default=None, help=f"Path to {CONFIG_FILE_NAME} (default: search upwards)")

    show_parser = metadata_subparsers.add_parser("show", help="Show the persisted metadata snapshot")
    show_parser.add_argument("--config", default=None, help=f"Path to {CONFIG_FILE_NAME} (default: search upwards)")
    show_parser.add_argument("--field", default=None, help="Show the normalized option mapping of one field")

    return parser


__all__ = ["build_parser"]
