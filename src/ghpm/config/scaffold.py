"""Default config generation and repository detection."""

from __future__ import annotations

import re
import subprocess

from ghpm.contracts.config import GhPmConfig, default_triage
from ghpm.contracts.project import Project

# Patterns for parsing git remote URLs.
_SSH_RE = re.compile(r"^git@[^:]+:(?P<owner>[^/]+)/(?P<repo>[^/]+?)(?:\.git)?$")
_HTTPS_RE = re.compile(r"^https?://[^/]+/(?P<owner>[^/]+)/(?P<repo>[^/]+?)(?:\.git)?/?$")


def default_config() -> GhPmConfig:
    """A config with the stock field mappings and triage queries, and no project."""
    return GhPmConfig(triage=default_triage())


def detect_target() -> tuple[str, str] | None:
    """Best-effort ``(owner, repo)`` from the ``origin`` git remote.

    Returns ``None`` outside a git repository, when ``git`` is missing, or
    when the remote URL cannot be parsed.
    """
    try:
        result = subprocess.run(
            ["git", "remote", "get-url", "origin"],
            capture_output=True,
            text=True,
            timeout=5,
        )
    except (OSError, subprocess.SubprocessError):
        return None
    if result.returncode != 0:
        return None
    return parse_remote_url(result.stdout.strip())


def parse_remote_url(url: str) -> tuple[str, str] | None:
    for pattern in (_SSH_RE, _HTTPS_RE):
        match = pattern.match(url)
        if match:
            return match.group("owner"), match.group("repo")
    return None


def apply_project(config: GhPmConfig, project: Project) -> GhPmConfig:
    """Record *project*'s identity in the ``project`` section of *config*."""
    project_config = config.project.model_copy(
        update={
            "name": project.title,
            "number": project.number,
            "org": project.owner.login if project.owner.kind == "organization" else "",
            "owner": project.owner.login if project.owner.kind == "user" else config.project.owner,
        }
    )
    return config.model_copy(update={"project": project_config})
