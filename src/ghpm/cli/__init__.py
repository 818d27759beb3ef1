"""Command-line interface for ghpm."""

from ghpm.cli.app import main
from ghpm.cli.parser import build_parser

__all__ = ["build_parser", "main"]
