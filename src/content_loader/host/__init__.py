"""Host collaborators: protocols the loader consumes and reference implementations."""

from content_loader.host.base import ConfigSource, DocumentHost, PrivilegedPredicate
from content_loader.host.memory import HostFailure, InMemoryHost
from content_loader.host.privileged import (
    DEFAULT_PRIVILEGED_SCHEMES,
    is_privileged_address,
    privileged_predicate,
)
from content_loader.host.recording import InsertionCall, RecordingHost

__all__ = [
    "ConfigSource",
    "DocumentHost",
    "PrivilegedPredicate",
    "HostFailure",
    "InMemoryHost",
    "InsertionCall",
    "RecordingHost",
    "DEFAULT_PRIVILEGED_SCHEMES",
    "is_privileged_address",
    "privileged_predicate",
]
