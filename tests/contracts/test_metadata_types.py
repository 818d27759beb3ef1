from __future__ import annotations

import pytest
from pydantic import ValidationError as PydanticValidationError

from ghpm.contracts.metadata import ConfigMetadata, FieldInfo, OptionInfo, ProjectMetadata
from ghpm.metadata.manager import field_metadata


def test_general_shape_round_trips_through_json() -> None:
    metadata = ConfigMetadata(
        project=ProjectMetadata(id="PVT_1"),
        fields=[
            FieldInfo(
                id="F1",
                name="Status",
                data_type="SINGLE_SELECT",
                options=[OptionInfo(id="o1", name="In Progress")],
            ),
            FieldInfo(id="F2", name="Due", data_type="DATE"),
        ],
    )

    restored = ConfigMetadata.model_validate(metadata.model_dump(mode="json"))

    assert restored == metadata


def test_legacy_fixed_slot_shape_is_migrated() -> None:
    legacy = {
        "project": {"id": "PVT_1"},
        "fields": {
            "Status": {"id": "F_status", "options": {"todo": "o1", "in_progress": "o2", "done": "o3"}},
            "Priority": None,
        },
    }

    metadata = ConfigMetadata.model_validate(legacy)

    assert [field.name for field in metadata.fields] == ["Status"]
    status = metadata.fields[0]
    assert status.is_single_select
    assert [(option.id, option.name) for option in status.options] == [
        ("o1", "todo"),
        ("o2", "in_progress"),
        ("o3", "done"),
    ]


def test_migrated_snapshot_reads_back_the_same_mapping() -> None:
    legacy = {
        "project": {"id": "PVT_1"},
        "fields": {"Priority": {"id": "F_prio", "options": {"low": "p3", "critical": "p0"}}},
    }

    mapping = field_metadata(ConfigMetadata.model_validate(legacy), "priority")

    assert mapping is not None
    assert mapping.id == "F_prio"
    assert mapping.options == {"low": "p3", "critical": "p0"}


def test_missing_fields_default_to_empty() -> None:
    assert ConfigMetadata.model_validate({"project": {"id": "PVT_1"}}).fields == []


@pytest.mark.parametrize(
    "slot",
    [{"options": {"todo": "o1"}}, ["F_status"], {"id": "F_status", "options": "o1"}],
)
def test_malformed_legacy_slot_is_rejected(slot: object) -> None:
    with pytest.raises(PydanticValidationError, match="legacy metadata field 'Status'"):
        ConfigMetadata.model_validate({"project": {"id": "PVT_1"}, "fields": {"Status": slot}})
