"""Init command handler."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from rich.console import Console

from ghpm.cli.common import fields_table, open_resolver, owner_scope, parse_project_arg, sync_progress
from ghpm.cli.prompt import TerminalPrompt
from ghpm.config.loader import save_config
from ghpm.config.scaffold import apply_project, default_config, detect_target
from ghpm.contracts.config import FieldConfig, GhPmConfig
from ghpm.contracts.exceptions import RemoteError
from ghpm.contracts.metadata import ConfigMetadata
from ghpm.contracts.project import Project, ProjectScope
from ghpm.metadata.classifier import PRIORITY_FIELD, STATUS_FIELD
from ghpm.metadata.manager import MetadataManager, find_field
from ghpm.providers.github.resolver import ProjectResolver

_LOG = logging.getLogger(__name__)


def _with_repositories(config: GhPmConfig, current: str | None, extra: list[str]) -> GhPmConfig:
    repositories = [current] if current else []
    repositories.extend(repo for repo in extra if repo not in repositories)
    return config.model_copy(update={"repositories": repositories})


def _lookup_scope(args: argparse.Namespace, config: GhPmConfig) -> ProjectScope:
    if args.user is not None:
        return ProjectScope.user(args.user)
    return owner_scope(config)


def _list_or_empty(resolver: ProjectResolver, scope: ProjectScope) -> list[Project]:
    try:
        return resolver.list_projects(scope)
    except RemoteError as exc:
        _LOG.debug("Listing projects for %s failed: %s", scope.label, exc)
        return []


def _choose_project(
    args: argparse.Namespace,
    config: GhPmConfig,
    resolver: ProjectResolver,
    prompt: TerminalPrompt,
    target: tuple[str, str] | None,
    console: Console,
) -> Project | None:
    if args.project:
        url_scope, name, number = parse_project_arg(args.project)
        scope = url_scope or _lookup_scope(args, config)
        console.print(f"Looking up project {args.project} in {scope.label}...")
        return resolver.resolve(scope, name=name, number=number)

    if args.defaults:
        return None

    scope = _lookup_scope(args, config)
    projects: list[Project] = []
    if target is not None and not args.list and args.user is None:
        repo_scope = ProjectScope.repository(*target)
        console.print(f"Detecting projects for {repo_scope.label}...")
        projects = _list_or_empty(resolver, repo_scope)
        if projects:
            scope = repo_scope
        else:
            console.print(f"No projects found in repository. Checking {scope.label}...")
    if not projects:
        projects = _list_or_empty(resolver, scope)
    if not projects:
        console.print("No projects found.")
        return None
    return prompt.select_project(projects, scope.label)


def _configure_mappings(config: GhPmConfig, metadata: ConfigMetadata, prompt: TerminalPrompt) -> GhPmConfig:
    fields = dict(config.fields)
    for role in (STATUS_FIELD, PRIORITY_FIELD):
        field = find_field(metadata, role)
        if field is None:
            continue
        values = prompt.configure_field_mapping(field)
        if values:
            fields[role.lower()] = FieldConfig(field=field.name, values=values)
    return config.model_copy(update={"fields": fields})


def run_init(args: argparse.Namespace, *, prompt: TerminalPrompt | None = None) -> int:
    """Create the config file, select a project and capture its metadata."""
    console = Console()
    prompt = prompt or TerminalPrompt(console)
    output = Path(args.output)

    if output.exists():
        if args.defaults:
            console.print(f"error: {output} already exists (use a different --output path)", style="red")
            return 2
        if not prompt.confirm_overwrite(output):
            console.print("Initialization cancelled.")
            return 0

    config = default_config()
    target = detect_target()
    org = args.org or (target[0] if target and args.user is None else "")
    config = config.model_copy(update={"project": config.project.model_copy(update={"org": org})})
    config = _with_repositories(config, f"{target[0]}/{target[1]}" if target else None, args.repo)

    with open_resolver(config) as resolver:
        project = _choose_project(args, config, resolver, prompt, target, console)
        if project is None:
            console.print("No project selected; saving config without metadata.")
        else:
            console.print(f"[green]✓[/green] Selected project: {project.title} (#{project.number})")
            config = apply_project(config, project)
            with sync_progress() as progress:
                metadata = MetadataManager(resolver, progress=progress).capture(project)
            if not args.defaults:
                config = _configure_mappings(config, metadata, prompt)
            config = config.model_copy(update={"metadata": metadata})
            console.print(fields_table(metadata))

    save_config(config, output)
    _LOG.debug("Wrote %s", output)
    console.print(f"\n[green]✓[/green] Configuration saved to {output}")
    console.print("\nNext steps:")
    console.print(f"  1. Review and edit {output} to customize settings")
    console.print("  2. Run 'ghpm metadata show' to inspect the captured field mappings")
    console.print("  3. Run 'ghpm metadata sync' after changing fields on the project board")
    return 0
