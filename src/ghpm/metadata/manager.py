"""Orchestrates project resolution and snapshot building, and reads snapshots back."""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from typing import TypeVar

from ghpm.contracts.metadata import ClassifiedFields, ConfigMetadata, FieldInfo, FieldMapping
from ghpm.contracts.progress import SyncProgress
from ghpm.contracts.project import Project, ProjectScope
from ghpm.metadata.builder import build_metadata
from ghpm.metadata.classifier import PRIORITY_FIELD, STATUS_FIELD, build_field_mapping, classify_fields, is_eligible
from ghpm.metadata.normalize import normalize_option_key
from ghpm.providers.github.resolver import ProjectResolver

_LOG = logging.getLogger(__name__)

_T = TypeVar("_T")

ProjectSelector = Callable[[Sequence[Project], str], Project | None]
"""Picks one project from a listing; receives the projects and a source label."""


def find_field(metadata: ConfigMetadata, name: str) -> FieldInfo | None:
    wanted = name.lower()
    for field in metadata.fields:
        if field.name.lower() == wanted:
            return field
    return None


def field_metadata(metadata: ConfigMetadata, name: str) -> FieldMapping | None:
    """Return the normalized option mapping for the field called *name*.

    Matching is case-insensitive. Fields that are missing, not single-select,
    or have no options yield None; a missing custom field is not an error.
    """
    field = find_field(metadata, name)
    if field is None or not is_eligible(field):
        return None
    return build_field_mapping(field)


class MetadataManager:
    """Builds metadata snapshots and answers lookups against persisted ones."""

    def __init__(self, resolver: ProjectResolver, *, progress: SyncProgress | None = None) -> None:
        self._resolver = resolver
        self._progress = progress

    def synchronize(
        self,
        scope: ProjectScope,
        *,
        name: str | None = None,
        number: int = 0,
        select: ProjectSelector | None = None,
    ) -> ConfigMetadata:
        """Capture a fresh snapshot of one project in *scope*.

        With a *name* or *number* the project is resolved directly; otherwise
        the scope is listed and *select* picks one. No selection leaves the
        project missing and the builder rejects it.

        Raises:
            ValidationError: If no project was identified.
            NotFoundError: If the name/number matched nothing.
            RemoteError: If any remote call failed.
        """
        project = self._run("Resolve", lambda: self._pick_project(scope, name=name, number=number, select=select))
        return self.capture(project)

    def capture(self, project: Project | None) -> ConfigMetadata:
        """Fetch *project*'s fields and build its snapshot.

        Raises:
            ValidationError: If *project* is None.
            RemoteError: If fetching the fields failed.
        """
        fields = self._run("Fields", lambda: self._resolver.fetch_fields(project.id) if project else [])
        metadata = self._run("Build", lambda: build_metadata(project, fields))
        _LOG.info("Captured %d field(s) for project %s", len(metadata.fields), metadata.project.id)
        return metadata

    def field_metadata(self, metadata: ConfigMetadata, name: str) -> FieldMapping | None:
        return field_metadata(metadata, name)

    def status_field(self, metadata: ConfigMetadata) -> FieldMapping | None:
        return field_metadata(metadata, STATUS_FIELD)

    def priority_field(self, metadata: ConfigMetadata) -> FieldMapping | None:
        return field_metadata(metadata, PRIORITY_FIELD)

    def classified(self, metadata: ConfigMetadata) -> ClassifiedFields:
        """Fixed-slot Status/Priority view derived from the general snapshot."""
        return classify_fields(metadata.fields)

    def resolve_option_id(self, metadata: ConfigMetadata, field_name: str, value: str) -> str | None:
        """Resolve a user-facing value (``"In Progress"``, ``"doing"``) to an option id."""
        mapping = field_metadata(metadata, field_name)
        if mapping is None:
            return None
        return mapping.options.get(normalize_option_key(value))

    def _pick_project(
        self,
        scope: ProjectScope,
        *,
        name: str | None,
        number: int,
        select: ProjectSelector | None,
    ) -> Project | None:
        if number > 0 or name:
            return self._resolver.resolve(scope, name=name, number=number)
        projects = self._resolver.list_projects(scope)
        _LOG.debug("Found %d project(s) in %s", len(projects), scope.label)
        if not projects or select is None:
            return None
        return select(projects, scope.label)

    def _run(self, phase: str, fn: Callable[[], _T]) -> _T:
        if self._progress is not None:
            self._progress.phase_start(phase)
        try:
            result = fn()
        except Exception as exc:
            if self._progress is not None:
                self._progress.phase_error(phase, exc)
            raise
        if self._progress is not None:
            self._progress.phase_done(phase)
        return result
