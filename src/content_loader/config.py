"""Loader settings chosen on the command line."""
from __future__ import annotations

from dataclasses import dataclass

from content_loader.host.privileged import DEFAULT_PRIVILEGED_SCHEMES


@dataclass(frozen=True)
class LoaderConfig:
    manifest_path: str = "manifest.json"
    privileged_schemes: tuple[str, ...] = DEFAULT_PRIVILEGED_SCHEMES
