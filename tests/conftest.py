"""Shared test fixtures for ghpm tests."""

from __future__ import annotations

import pytest

from ghpm.contracts.project import FieldDescriptor, FieldOption, Project, ProjectOwner


@pytest.fixture
def sample_project() -> Project:
    """An organization-owned project."""
    return Project(
        id="PVT_kwDOAAlRwM4A8arc",
        number=5,
        title="Roadmap",
        url="https://github.com/orgs/acme/projects/5",
        owner=ProjectOwner(login="acme", kind="organization"),
    )


@pytest.fixture
def status_field() -> FieldDescriptor:
    return FieldDescriptor(
        id="PVTSSF_status",
        name="Status",
        data_type="SINGLE_SELECT",
        options=[
            FieldOption(id="opt_todo", name="Todo"),
            FieldOption(id="opt_progress", name="In Progress"),
            FieldOption(id="opt_done", name="Done"),
        ],
    )


@pytest.fixture
def priority_field() -> FieldDescriptor:
    return FieldDescriptor(
        id="PVTSSF_priority",
        name="Priority",
        data_type="SINGLE_SELECT",
        options=[
            FieldOption(id="opt_p0", name="P0"),
            FieldOption(id="opt_p1", name="P1"),
            FieldOption(id="opt_p2", name="P2"),
        ],
    )


@pytest.fixture
def project_fields(status_field: FieldDescriptor, priority_field: FieldDescriptor) -> list[FieldDescriptor]:
    """Status, Priority plus a text and a date field."""
    return [
        FieldDescriptor(id="PVTF_title", name="Title", data_type="TITLE"),
        status_field,
        priority_field,
        FieldDescriptor(id="PVTF_due", name="Due", data_type="DATE"),
    ]
