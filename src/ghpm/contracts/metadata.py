"""Persisted metadata snapshot contracts.

The snapshot keeps every project field with its raw option names. Role lookups
(Status, Priority) and option-key normalization are derived on read; only the
general form is ever written.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, model_validator

from ghpm.contracts.project import SINGLE_SELECT


class OptionInfo(BaseModel):
    id: str
    name: str


class FieldInfo(BaseModel):
    """Raw field schema as captured during a sync pass."""

    id: str
    name: str
    data_type: str
    options: list[OptionInfo] = Field(default_factory=list)

    @property
    def is_single_select(self) -> bool:
        return self.data_type == SINGLE_SELECT


class ProjectMetadata(BaseModel):
    id: str
    """Project node ID (e.g. ``PVT_kwHOAAlRwM4A8arc``)."""


class ConfigMetadata(BaseModel):
    """One complete, atomically replaced capture of a project's schema."""

    project: ProjectMetadata
    fields: list[FieldInfo] = Field(default_factory=list)

    @model_validator(mode="before")
    @classmethod
    def migrate_fixed_slots(cls, data: Any) -> Any:
        """Accept the older ``{"Status": {id, options: {key: id}}}`` shape.

        Each slot becomes a single-select :class:`FieldInfo` whose option names
        are the stored keys; canonical keys normalize to themselves so read-time
        lookups return the same mapping the old shape held. Only JSON documents
        are read, so a ``.gh-pm.yml`` written by the older tool has to be
        converted to ``.gh-pm.json`` by hand before it reaches this migration.
        """
        if not isinstance(data, dict) or not isinstance(data.get("fields"), dict):
            return data
        migrated: list[dict[str, Any]] = []
        for name, slot in data["fields"].items():
            if not slot:
                continue
            if not isinstance(slot, dict) or not slot.get("id"):
                raise ValueError(f"legacy metadata field {name!r} must be an object with an id")
            options = slot.get("options") or {}
            if not isinstance(options, dict):
                raise ValueError(f"legacy metadata field {name!r} options must map keys to option ids")
            migrated.append(
                {
                    "id": slot["id"],
                    "name": name,
                    "data_type": SINGLE_SELECT,
                    "options": [{"id": option_id, "name": key} for key, option_id in options.items()],
                }
            )
        return {**data, "fields": migrated}


class FieldMapping(BaseModel):
    """Field id plus normalized option key → option id."""

    id: str
    options: dict[str, str] = Field(default_factory=dict)


class ClassifiedFields(BaseModel):
    """Fixed-slot view of the Status and Priority fields."""

    status: FieldMapping | None = None
    priority: FieldMapping | None = None
