"""Select the Status and Priority fields and map their options to ids."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from ghpm.contracts.metadata import ClassifiedFields, FieldInfo, FieldMapping
from ghpm.contracts.project import FieldDescriptor
from ghpm.metadata.normalize import normalize_option_key

_LOG = logging.getLogger(__name__)

STATUS_FIELD = "Status"
PRIORITY_FIELD = "Priority"

AnyField = FieldDescriptor | FieldInfo
"""Fetched descriptors and persisted snapshot entries classify the same way."""


def build_field_mapping(field: AnyField) -> FieldMapping:
    """Map ``normalize(option.name)`` to ``option.id`` for every option.

    When two options collapse to the same key the later one wins.
    """
    options: dict[str, str] = {}
    for option in field.options:
        key = normalize_option_key(option.name)
        previous = options.get(key)
        if previous is not None and previous != option.id:
            _LOG.debug("Field %r: option %r overrides %s for key %r", field.name, option.name, previous, key)
        options[key] = option.id
    return FieldMapping(id=field.id, options=options)


def is_eligible(field: AnyField) -> bool:
    return field.is_single_select and len(field.options) > 0


def classify_fields(fields: Iterable[AnyField]) -> ClassifiedFields:
    """Pick the Status and Priority fields by case-insensitive exact name.

    Ineligible fields (not single-select, or without options) are skipped.
    A role with no matching field stays ``None``.
    """
    status: FieldMapping | None = None
    priority: FieldMapping | None = None
    for field in fields:
        if not is_eligible(field):
            continue
        name = field.name.lower()
        if name == STATUS_FIELD.lower():
            status = build_field_mapping(field)
        elif name == PRIORITY_FIELD.lower():
            priority = build_field_mapping(field)
    return ClassifiedFields(status=status, priority=priority)
