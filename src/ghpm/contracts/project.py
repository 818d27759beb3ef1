"""Models for GitHub Projects v2 boards and their field schema."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

SINGLE_SELECT = "SINGLE_SELECT"

OwnerKind = Literal["organization", "user"]
ScopeKind = Literal["repository", "organization", "user"]


class ProjectOwner(BaseModel):
    login: str
    kind: OwnerKind

    model_config = {"frozen": True}


class Project(BaseModel):
    """A project board as returned by the remote; re-fetched on every sync."""

    id: str
    number: int = Field(ge=1)
    title: str
    url: str = ""
    owner: ProjectOwner

    model_config = {"frozen": True}


class FieldOption(BaseModel):
    """One selectable value of a single-select field."""

    id: str
    name: str

    model_config = {"frozen": True}


class FieldDescriptor(BaseModel):
    """A typed project column.

    ``options`` is only populated for ``SINGLE_SELECT`` fields.
    """

    id: str
    name: str
    data_type: str
    options: tuple[FieldOption, ...] = ()

    model_config = {"frozen": True}

    @property
    def is_single_select(self) -> bool:
        return self.data_type == SINGLE_SELECT


class ProjectScope(BaseModel):
    """Where projects are looked up: a repository, an organization or a user.

    A user scope with an empty ``owner`` means the authenticated user.
    """

    kind: ScopeKind
    owner: str = ""
    repo: str = ""

    model_config = {"frozen": True}

    @classmethod
    def repository(cls, owner: str, repo: str) -> ProjectScope:
        return cls(kind="repository", owner=owner, repo=repo)

    @classmethod
    def organization(cls, org: str) -> ProjectScope:
        return cls(kind="organization", owner=org)

    @classmethod
    def user(cls, login: str = "") -> ProjectScope:
        return cls(kind="user", owner=login)

    @property
    def label(self) -> str:
        if self.kind == "repository":
            return f"repository {self.owner}/{self.repo}"
        if self.kind == "organization":
            return f"organization {self.owner}"
        return f"user {self.owner}" if self.owner else "the authenticated user"
