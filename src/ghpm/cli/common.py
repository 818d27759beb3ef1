"""Shared CLI helpers: remote session setup, scopes and rendering."""

from __future__ import annotations

import sys
from collections.abc import Iterator
from contextlib import AbstractContextManager, contextmanager, nullcontext

from rich.table import Table

from ghpm.auth.factory import resolve_token
from ghpm.cli.progress import RichSyncProgress
from ghpm.contracts.config import GhPmConfig
from ghpm.contracts.metadata import ConfigMetadata, FieldMapping
from ghpm.contracts.project import ProjectScope
from ghpm.providers.github.client import GitHubGraphQLClient
from ghpm.providers.github.mapper import parse_project_url
from ghpm.providers.github.resolver import ProjectResolver


@contextmanager
def open_resolver(config: GhPmConfig) -> Iterator[ProjectResolver]:
    """Resolve the token, open a GraphQL client and yield a resolver over it."""
    token = resolve_token(config)
    with GitHubGraphQLClient(token=token) as client:
        yield ProjectResolver(client)


def sync_progress() -> AbstractContextManager[RichSyncProgress | None]:
    if sys.stderr.isatty():
        return RichSyncProgress()
    return nullcontext()


def owner_scope(config: GhPmConfig) -> ProjectScope:
    """The scope that owns the configured project: its org, else its user owner."""
    if config.project.org:
        return ProjectScope.organization(config.project.org)
    return ProjectScope.user(config.project.owner)


def parse_project_arg(value: str) -> tuple[ProjectScope | None, str | None, int]:
    """Split a ``--project`` value into (scope from URL, name, number)."""
    candidate = value.strip()
    if candidate.startswith("https://"):
        scope, number = parse_project_url(candidate)
        return scope, None, number
    if candidate.isdigit():
        return None, None, int(candidate)
    return None, candidate, 0


def fields_table(metadata: ConfigMetadata) -> Table:
    table = Table(title=f"Fields of project {metadata.project.id}", title_justify="left")
    table.add_column("Name")
    table.add_column("Type")
    table.add_column("Options")
    for field in metadata.fields:
        table.add_row(field.name, field.data_type, ", ".join(option.name for option in field.options))
    return table


def mapping_table(name: str, mapping: FieldMapping) -> Table:
    table = Table(title=f"{name} ({mapping.id})", title_justify="left")
    table.add_column("Key")
    table.add_column("Option ID")
    for key, option_id in mapping.options.items():
        table.add_row(key, option_id)
    return table
