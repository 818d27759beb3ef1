"""Public API surface for ghpm."""

__version__ = "0.3.0"

from ghpm.config import find_config_path, get_field_metadata, load_config, load_metadata, save_config
from ghpm.contracts import (
    AuthenticationError,
    ClassifiedFields,
    ConfigError,
    ConfigMetadata,
    FieldDescriptor,
    FieldInfo,
    FieldMapping,
    FieldOption,
    GhPmConfig,
    GhPmError,
    NotFoundError,
    Project,
    ProjectScope,
    RemoteError,
    TransportError,
    ValidationError,
)
from ghpm.metadata import MetadataManager, build_metadata, classify_fields, field_metadata, normalize_option_key
from ghpm.providers.github import GitHubGraphQLClient, ProjectResolver

__all__ = [
    "AuthenticationError",
    "ClassifiedFields",
    "ConfigError",
    "ConfigMetadata",
    "FieldDescriptor",
    "FieldInfo",
    "FieldMapping",
    "FieldOption",
    "GhPmConfig",
    "GhPmError",
    "GitHubGraphQLClient",
    "MetadataManager",
    "NotFoundError",
    "Project",
    "ProjectResolver",
    "ProjectScope",
    "RemoteError",
    "TransportError",
    "ValidationError",
    "build_metadata",
    "classify_fields",
    "field_metadata",
    "find_config_path",
    "get_field_metadata",
    "load_config",
    "load_metadata",
    "normalize_option_key",
    "save_config",
]
