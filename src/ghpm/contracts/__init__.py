"""Public contracts for ghpm."""

from ghpm.contracts.config import DefaultsConfig, FieldConfig, GhPmConfig, ProjectConfig, TriageConfig
from ghpm.contracts.exceptions import (
    AuthenticationError,
    ConfigError,
    GhPmError,
    NotFoundError,
    RemoteError,
    TransportError,
    ValidationError,
)
from ghpm.contracts.executor import QueryExecutor
from ghpm.contracts.metadata import (
    ClassifiedFields,
    ConfigMetadata,
    FieldInfo,
    FieldMapping,
    OptionInfo,
    ProjectMetadata,
)
from ghpm.contracts.progress import SyncProgress
from ghpm.contracts.project import (
    SINGLE_SELECT,
    FieldDescriptor,
    FieldOption,
    Project,
    ProjectOwner,
    ProjectScope,
)

__all__ = [
    "SINGLE_SELECT",
    "AuthenticationError",
    "ClassifiedFields",
    "ConfigError",
    "ConfigMetadata",
    "DefaultsConfig",
    "FieldConfig",
    "FieldDescriptor",
    "FieldInfo",
    "FieldMapping",
    "FieldOption",
    "GhPmConfig",
    "GhPmError",
    "NotFoundError",
    "OptionInfo",
    "Project",
    "ProjectConfig",
    "ProjectMetadata",
    "ProjectOwner",
    "ProjectScope",
    "QueryExecutor",
    "RemoteError",
    "SyncProgress",
    "TransportError",
    "TriageConfig",
    "ValidationError",
]
