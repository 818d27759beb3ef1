"""Interactive terminal prompts for project and field-mapping selection."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

import questionary
from rich.console import Console
from rich.table import Table

from ghpm.contracts.project import Project
from ghpm.metadata.classifier import PRIORITY_FIELD, STATUS_FIELD, AnyField, is_eligible
from ghpm.metadata.normalize import PRIORITY_KEYS, STATUS_KEYS, normalize_option_key

_SKIP = "skip"


def valid_keys(field_name: str) -> tuple[str, ...]:
    """Semantic keys an option of *field_name* may be mapped to."""
    lowered = field_name.lower()
    if lowered == STATUS_FIELD.lower():
        return STATUS_KEYS
    if lowered == PRIORITY_FIELD.lower():
        return PRIORITY_KEYS
    return ()


def suggest_field_mapping(field: AnyField) -> dict[str, str]:
    """Auto-map semantic keys to option names for options that normalize onto them."""
    keys = valid_keys(field.name)
    mappings: dict[str, str] = {}
    for option in field.options:
        key = normalize_option_key(option.name)
        if key in keys:
            mappings[key] = option.name
    return mappings


def projects_table(projects: Sequence[Project], source: str) -> Table:
    table = Table(title=f"Available projects from {source}", title_justify="left")
    table.add_column("#", justify="right")
    table.add_column("Title")
    table.add_column("Number", justify="right")
    table.add_column("URL", overflow="fold")
    for index, project in enumerate(projects, start=1):
        table.add_row(str(index), project.title, f"#{project.number}", project.url)
    return table


class TerminalPrompt:
    """questionary-driven prompts; every method returns None/False when the user aborts."""

    def __init__(self, console: Console | None = None) -> None:
        self._console = console or Console()

    def confirm_overwrite(self, path: Path) -> bool:
        answer = questionary.confirm(f"{path} already exists. Overwrite?", default=False).ask()
        return bool(answer)

    def select_project(self, projects: Sequence[Project], source: str) -> Project | None:
        if not projects:
            return None

        if len(projects) == 1:
            only = projects[0]
            self._console.print(f"Found 1 project: {only.title} (#{only.number})")
            return only if questionary.confirm("Use this project?", default=True).ask() else None

        self._console.print(projects_table(projects, source))
        choices = [questionary.Choice(f"{p.title} (#{p.number})", value=p.number) for p in projects]
        choices.append(questionary.Choice("Skip project selection", value=0))
        number = questionary.select("Select a project:", choices=choices).ask()
        if not number:
            return None
        return next((p for p in projects if p.number == number), None)

    def configure_field_mapping(self, field: AnyField) -> dict[str, str] | None:
        """Ask the user to confirm or edit semantic-key → option-name mappings."""
        if not is_eligible(field):
            return None

        self._console.print(f"\nFound {field.name} field with options: " + ", ".join(o.name for o in field.options))
        if not questionary.confirm(f"Configure {field.name.lower()} field mappings?", default=False).ask():
            return None

        mappings = suggest_field_mapping(field)
        if mappings:
            for key, value in mappings.items():
                self._console.print(f"  {key} -> {value}")
            if not questionary.confirm("Customize these mappings?", default=False).ask():
                return mappings

        keys = valid_keys(field.name)
        mappings = {}
        for option in field.options:
            default = normalize_option_key(option.name)
            choice = questionary.select(
                f"Map '{option.name}' to:",
                choices=[*keys, _SKIP],
                default=default if default in keys else _SKIP,
            ).ask()
            if choice is None:
                return None
            if choice != _SKIP:
                mappings[choice] = option.name
        return mappings
