"""Metadata normalization, classification, building and synchronization."""

from ghpm.metadata.builder import build_metadata
from ghpm.metadata.classifier import classify_fields
from ghpm.metadata.manager import MetadataManager, field_metadata
from ghpm.metadata.normalize import normalize_option_key

__all__ = ["MetadataManager", "build_metadata", "classify_fields", "field_metadata", "normalize_option_key"]
