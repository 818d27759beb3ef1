"""Configuration contracts."""

from __future__ import annotations

from pydantic import BaseModel, Field, model_validator

from ghpm.contracts.metadata import ConfigMetadata


class ProjectConfig(BaseModel):
    name: str = ""
    number: int = Field(default=0, ge=0)
    org: str = ""
    owner: str = ""
    """Project owner login, used for user-owned project URLs."""


class DefaultsConfig(BaseModel):
    priority: str = "medium"
    status: str = "todo"
    labels: list[str] = Field(default_factory=lambda: ["pm-tracked"])


class FieldConfig(BaseModel):
    """Maps semantic keys (``in_progress``) to option display names (``In Progress``)."""

    field: str
    values: dict[str, str] = Field(default_factory=dict)


class TriageApply(BaseModel):
    labels: list[str] = Field(default_factory=list)
    fields: dict[str, str] = Field(default_factory=dict)


class TriageInteractive(BaseModel):
    status: bool = False
    estimate: bool = False


class TriageConfig(BaseModel):
    """A saved issue query plus what to apply to every match."""

    query: str
    apply: TriageApply = Field(default_factory=TriageApply)
    interactive: TriageInteractive = Field(default_factory=TriageInteractive)


def _default_fields() -> dict[str, FieldConfig]:
    return {
        "priority": FieldConfig(
            field="Priority",
            values={"low": "Low", "medium": "Medium", "high": "High", "critical": "Critical"},
        ),
        "status": FieldConfig(
            field="Status",
            values={"todo": "Todo", "in_progress": "In Progress", "in_review": "In Review", "done": "Done"},
        ),
    }


def default_triage() -> dict[str, TriageConfig]:
    return {
        "tracked": TriageConfig(
            query="is:issue is:open -label:pm-tracked",
            apply=TriageApply(labels=["pm-tracked"], fields={"status": "backlog", "priority": "p1"}),
            interactive=TriageInteractive(status=True),
        ),
        "estimate": TriageConfig(
            query="is:issue is:open -has:estimate",
            interactive=TriageInteractive(estimate=True),
        ),
    }


class GhPmConfig(BaseModel):
    """The whole ``.gh-pm.json`` document.

    Sections this model does not declare are kept and written back unchanged.
    """

    model_config = {"extra": "allow"}

    project: ProjectConfig = Field(default_factory=ProjectConfig)
    repositories: list[str] = Field(default_factory=list)
    defaults: DefaultsConfig = Field(default_factory=DefaultsConfig)
    fields: dict[str, FieldConfig] = Field(default_factory=_default_fields)
    triage: dict[str, TriageConfig] | None = None
    auth: str = "gh-cli"
    token: str | None = None
    metadata: ConfigMetadata | None = None

    @model_validator(mode="after")
    def validate_auth_token(self) -> GhPmConfig:
        token = (self.token or "").strip()
        if self.auth == "token":
            if not token:
                raise ValueError("token auth requires a non-empty token")
            return self
        if token:
            raise ValueError("token must be unset when auth is not 'token'")
        if self.auth not in {"gh-cli", "env", "token"}:
            raise ValueError("auth must be one of: gh-cli, env, token")
        return self
