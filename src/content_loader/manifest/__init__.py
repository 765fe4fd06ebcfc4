"""Manifest configuration: load content_scripts declarations and validate them."""

from content_loader.manifest.source import (
    ManifestSource,
    load_manifest,
    parse_declarations,
)
from content_loader.manifest.validator import (
    ValidationError,
    blocks_with_errors,
    validate,
    validate_or_raise,
)

__all__ = [
    "ManifestSource",
    "load_manifest",
    "parse_declarations",
    "ValidationError",
    "blocks_with_errors",
    "validate",
    "validate_or_raise",
]
