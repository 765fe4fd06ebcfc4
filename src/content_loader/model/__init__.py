"""Content loader model layer -- public type re-exports."""

from content_loader.model.declaration import (
    Declaration,
    DocumentRef,
    Resource,
    ResourceKind,
    RunAt,
    build_resources,
)
from content_loader.model.diagnostic import Diagnostic, Severity

__all__ = [
    # declaration
    "RunAt",
    "Declaration",
    "ResourceKind",
    "Resource",
    "DocumentRef",
    "build_resources",
    # diagnostic
    "Severity",
    "Diagnostic",
]
