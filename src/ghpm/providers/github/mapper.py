"""Mapping functions between GitHub API responses and domain models."""

from __future__ import annotations

import re
from typing import Any

from ghpm.contracts.exceptions import ValidationError
from ghpm.contracts.project import SINGLE_SELECT, FieldDescriptor, FieldOption, Project, ProjectOwner, ProjectScope

_PROJECT_URL_RE = re.compile(r"^https://github\.com/(orgs|users)/([^/]+)/projects/(\d+)/?$")

_OWNER_KINDS = {"Organization": "organization", "User": "user"}


def parse_project_url(url: str) -> tuple[ProjectScope, int]:
    """Parse a GitHub project URL into its owner scope and project number.

    Raises:
        ValidationError: If the URL is not an ``orgs``/``users`` project URL.
    """
    match = _PROJECT_URL_RE.match(url.strip())
    if match is None:
        raise ValidationError(
            f"Invalid project URL: {url!r}. "
            "Expected https://github.com/orgs/<org>/projects/<number> "
            "or https://github.com/users/<user>/projects/<number>"
        )
    segment, owner, number = match.groups()
    scope = ProjectScope.organization(owner) if segment == "orgs" else ProjectScope.user(owner)
    return scope, int(number)


def build_project_url(*, number: int, org: str = "", owner: str = "") -> str:
    """Return the board URL for an org or user project, or "" when unknown."""
    if number <= 0:
        return ""
    if org:
        return f"https://github.com/orgs/{org}/projects/{number}"
    if owner:
        return f"https://github.com/users/{owner}/projects/{number}"
    return ""


def project_from_node(node: dict[str, Any]) -> Project | None:
    """Build a :class:`Project` from a ``projectsV2`` node, or None if incomplete."""
    owner = node.get("owner") or {}
    kind = _OWNER_KINDS.get(owner.get("__typename", ""))
    if not node.get("id") or not node.get("number") or kind is None:
        return None
    return Project(
        id=node["id"],
        number=node["number"],
        title=node.get("title") or "",
        url=node.get("url") or "",
        owner=ProjectOwner(login=owner.get("login") or "", kind=kind),
    )


def field_from_node(node: dict[str, Any]) -> FieldDescriptor | None:
    """Build a :class:`FieldDescriptor` from a ``fields`` node.

    Nodes of unrequested field types come back empty and map to None.
    """
    if not node.get("id") or not node.get("name"):
        return None
    data_type = node.get("dataType") or ""
    options: list[FieldOption] = []
    if data_type == SINGLE_SELECT:
        options = [FieldOption(id=o["id"], name=o.get("name") or "") for o in node.get("options") or [] if o.get("id")]
    return FieldDescriptor(id=node["id"], name=node["name"], data_type=data_type, options=options)


def dig(data: dict[str, Any] | None, path: tuple[str, ...]) -> Any:
    """Follow *path* through nested dicts, returning None at the first gap."""
    current: Any = data
    for key in path:
        if not isinstance(current, dict):
            return None
        current = current.get(key)
    return current
