"""Config file discovery, loading, validation and persistence."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from ghpm.contracts.config import GhPmConfig
from ghpm.contracts.exceptions import ConfigError
from ghpm.contracts.metadata import ConfigMetadata, FieldMapping
from ghpm.metadata.manager import field_metadata
from ghpm.providers.github.mapper import build_project_url

_LOG = logging.getLogger(__name__)

CONFIG_FILE_NAME = ".gh-pm.json"


def find_config_path(start: str | Path | None = None) -> Path | None:
    """Search *start* (default: cwd) and its parents for the config file."""
    directory = Path(start or Path.cwd()).expanduser().resolve()
    for candidate_dir in (directory, *directory.parents):
        candidate = candidate_dir / CONFIG_FILE_NAME
        if candidate.is_file():
            return candidate
    return None


def load_config(path: str | Path | None = None) -> GhPmConfig:
    """Load and schema-check the config at *path*, or the nearest one found.

    Raises:
        ConfigError: If no file is found or it cannot be read or parsed.
    """
    if path is None:
        found = find_config_path()
        if found is None:
            raise ConfigError(f"configuration file {CONFIG_FILE_NAME} not found in current or parent directories")
        config_path = found
    else:
        config_path = Path(path).expanduser().resolve()

    try:
        raw_payload: Any = json.loads(config_path.read_text(encoding="utf-8"))
        config = GhPmConfig.model_validate(raw_payload)
    except OSError as exc:
        raise ConfigError(f"failed reading config file: {config_path}") from exc
    except json.JSONDecodeError as exc:
        raise ConfigError(f"invalid JSON in config file: {config_path}") from exc
    except ValidationError as exc:
        raise ConfigError(f"invalid config: {exc}") from exc

    _LOG.debug("Loaded config from %s", config_path)
    return config


def save_config(config: GhPmConfig, path: str | Path) -> Path:
    """Write the whole config document to *path*, replacing any previous file."""
    output = Path(path)
    payload = config.model_dump(mode="json", exclude_none=True)
    try:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(json.dumps(payload, indent=2) + "\n", encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"failed writing config file: {output}") from exc
    return output


def validate_config(config: GhPmConfig) -> None:
    """Check cross-field rules the schema alone cannot express.

    Raises:
        ConfigError: On the first rule violated.
    """
    if not config.project.name and config.project.number == 0:
        raise ConfigError("project name or number is required")
    if not config.repositories:
        raise ConfigError("at least one repository must be configured")
    for repo in config.repositories:
        if not is_valid_repository(repo):
            raise ConfigError(f"invalid repository format '{repo}': must be 'owner/repo'")

    for key, mapping in config.fields.items():
        if not mapping.field:
            raise ConfigError(f"field name is required for '{key}'")
        if not mapping.values:
            raise ConfigError(f"at least one value mapping is required for field '{key}'")

    for key, default in (("priority", config.defaults.priority), ("status", config.defaults.status)):
        mapping = config.fields.get(key)
        if default and mapping is not None and default not in mapping.values:
            raise ConfigError(f"default {key} '{default}' is not defined in field mappings")


def is_valid_repository(repo: str) -> bool:
    parts = repo.split("/")
    return len(parts) == 2 and all(parts)


def project_url(config: GhPmConfig) -> str:
    """Board URL of the configured project, or "" without a number and owner."""
    return build_project_url(number=config.project.number, org=config.project.org, owner=config.project.owner)


def load_metadata(config: GhPmConfig) -> ConfigMetadata:
    """Return the persisted snapshot.

    Raises:
        ConfigError: If the config holds no metadata yet.
    """
    if config.metadata is None:
        raise ConfigError("no metadata found in configuration; run `ghpm metadata sync`")
    return config.metadata


def get_field_metadata(config: GhPmConfig, name: str) -> FieldMapping | None:
    """Normalized option mapping for field *name*, or None when absent."""
    if config.metadata is None:
        return None
    return field_metadata(config.metadata, name)
