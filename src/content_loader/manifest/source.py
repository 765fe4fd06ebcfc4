"""Manifest source: read content_scripts blocks into Declaration objects."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Mapping

from content_loader.errors import ManifestError
from content_loader.model.declaration import DEFAULT_RUN_AT, Declaration, RunAt

CONTENT_SCRIPTS_KEY = "content_scripts"


def load_manifest(path: str | Path) -> dict[str, Any]:
    """Read and decode a ``manifest.json`` file."""
    manifest_path = Path(path)
    try:
        data = json.loads(manifest_path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise ManifestError(f"Cannot read manifest {manifest_path}: {exc}", cause=exc) from exc
    except json.JSONDecodeError as exc:
        raise ManifestError(
            f"Manifest {manifest_path} is not valid JSON: {exc}", cause=exc
        ) from exc
    if not isinstance(data, dict):
        raise ManifestError(f"Manifest {manifest_path} must be a JSON object")
    return data


def _string_list(block: Mapping[str, Any], key: str, index: int) -> tuple[str, ...]:
    value = block.get(key, [])
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise ManifestError(f"content_scripts[{index}].{key} must be a list of strings")
    return tuple(value)


def _run_at(block: Mapping[str, Any], index: int) -> RunAt:
    raw = block.get("run_at")
    if raw is None:
        return DEFAULT_RUN_AT
    try:
        return RunAt(raw)
    except ValueError as exc:
        raise ManifestError(
            f"content_scripts[{index}].run_at has unknown value {raw!r}", cause=exc
        ) from exc


def parse_declarations(manifest: Mapping[str, Any]) -> tuple[Declaration, ...]:
    """Build the ordered declarations from a decoded manifest.

    A manifest without ``content_scripts`` declares nothing.
    """
    blocks = manifest.get(CONTENT_SCRIPTS_KEY, [])
    if not isinstance(blocks, list):
        raise ManifestError("content_scripts must be a list")

    declarations: list[Declaration] = []
    for index, block in enumerate(blocks):
        if not isinstance(block, dict):
            raise ManifestError(f"content_scripts[{index}] must be an object")
        declarations.append(
            Declaration(
                matches=_string_list(block, "matches", index),
                css=_string_list(block, "css", index),
                js=_string_list(block, "js", index),
                run_at=_run_at(block, index),
            )
        )
    return tuple(declarations)


class ManifestSource:
    """ConfigSource backed by a decoded manifest.

    Declarations are parsed once, when the source is built, so
    ``get_declarations`` has no side effects and cannot fail.
    """

    def __init__(self, manifest: Mapping[str, Any]) -> None:
        self._declarations = parse_declarations(manifest)

    @classmethod
    def from_file(cls, path: str | Path) -> ManifestSource:
        return cls(load_manifest(path))

    def get_declarations(self) -> tuple[Declaration, ...]:
        return self._declarations
