"""Assemble the persisted metadata snapshot from fetched project schema."""

from __future__ import annotations

from collections.abc import Iterable

from ghpm.contracts.exceptions import ValidationError
from ghpm.contracts.metadata import ConfigMetadata, FieldInfo, OptionInfo, ProjectMetadata
from ghpm.contracts.project import FieldDescriptor, Project


def build_field_info(field: FieldDescriptor) -> FieldInfo:
    options: list[OptionInfo] = []
    if field.is_single_select:
        options = [OptionInfo(id=option.id, name=option.name) for option in field.options]
    return FieldInfo(id=field.id, name=field.name, data_type=field.data_type, options=options)


def build_metadata(project: Project | None, fields: Iterable[FieldDescriptor]) -> ConfigMetadata:
    """Capture every field of *project* with raw option names.

    No classification happens here; role lookups and normalization are derived
    from the snapshot when it is read.

    Raises:
        ValidationError: If *project* is None.
    """
    if project is None:
        raise ValidationError("cannot build metadata: project is missing")
    return ConfigMetadata(
        project=ProjectMetadata(id=project.id),
        fields=[build_field_info(field) for field in fields],
    )
