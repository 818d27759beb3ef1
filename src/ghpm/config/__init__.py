"""Config loading, persistence and scaffolding."""

from ghpm.config.loader import (
    CONFIG_FILE_NAME,
    find_config_path,
    get_field_metadata,
    load_config,
    load_metadata,
    project_url,
    save_config,
    validate_config,
)
from ghpm.config.scaffold import apply_project, default_config, detect_target, parse_remote_url

__all__ = [
    "CONFIG_FILE_NAME",
    "apply_project",
    "default_config",
    "detect_target",
    "find_config_path",
    "get_field_metadata",
    "load_config",
    "load_metadata",
    "parse_remote_url",
    "project_url",
    "save_config",
    "validate_config",
]
