"""Metadata command handlers."""

from __future__ import annotations

import argparse
from pathlib import Path

from rich.console import Console

from ghpm.cli.common import fields_table, mapping_table, open_resolver, owner_scope, sync_progress
from ghpm.config.loader import (
    find_config_path,
    get_field_metadata,
    load_config,
    load_metadata,
    project_url,
    save_config,
    validate_config,
)
from ghpm.contracts.exceptions import ConfigError
from ghpm.metadata.classifier import PRIORITY_FIELD, STATUS_FIELD
from ghpm.metadata.manager import MetadataManager


def _config_path(args: argparse.Namespace) -> Path:
    if args.config is not None:
        return Path(args.config)
    found = find_config_path()
    if found is None:
        raise ConfigError("configuration file not found; run `ghpm init` first")
    return found


def run_metadata_sync(args: argparse.Namespace) -> int:
    """Replace the persisted snapshot with a fresh capture of the configured project."""
    console = Console()
    path = _config_path(args)
    config = load_config(path)
    validate_config(config)

    scope = owner_scope(config)
    with open_resolver(config) as resolver, sync_progress() as progress:
        metadata = MetadataManager(resolver, progress=progress).synchronize(
            scope,
            name=config.project.name or None,
            number=config.project.number,
        )

    save_config(config.model_copy(update={"metadata": metadata}), path)
    console.print(f"[green]✓[/green] Captured {len(metadata.fields)} field(s) into {path}")
    return 0


def run_metadata_show(args: argparse.Namespace) -> int:
    """Print the persisted snapshot, or one field's normalized mapping."""
    console = Console()
    config = load_config(_config_path(args))

    if args.field:
        mapping = get_field_metadata(config, args.field)
        if mapping is None:
            console.print(f"No single-select field named {args.field!r} in the snapshot.")
            return 0
        console.print(mapping_table(args.field, mapping))
        return 0

    metadata = load_metadata(config)
    url = project_url(config)
    if url:
        console.print(f"Project: {url}")
    console.print(fields_table(metadata))
    for role in (STATUS_FIELD, PRIORITY_FIELD):
        mapping = get_field_metadata(config, role)
        if mapping is not None:
            console.print(mapping_table(role, mapping))
    return 0
