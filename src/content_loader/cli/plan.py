"""CLI command: content-loader plan -- dry-run injection against listed documents."""

from __future__ import annotations

import asyncio
import json
import sys
from pathlib import Path
from typing import Any

import click

from content_loader.config import LoaderConfig
from content_loader.engine.loader import ContentScriptsLoader
from content_loader.errors import LoaderError, ManifestError
from content_loader.host import (
    DEFAULT_PRIVILEGED_SCHEMES,
    InMemoryHost,
    RecordingHost,
    privileged_predicate,
)
from content_loader.manifest import ManifestSource, load_manifest, validate_or_raise
from content_loader.manifest.validator import ValidationError
from content_loader.model.declaration import DocumentRef


def load_documents(path: Path) -> list[DocumentRef]:
    """Read a JSON list of ``{"id": ..., "url": ...}`` objects."""
    try:
        raw: Any = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        raise click.BadParameter(f"cannot read documents file: {exc}") from exc
    if not isinstance(raw, list):
        raise click.BadParameter("documents file must hold a JSON list")
    documents = []
    for index, entry in enumerate(raw):
        if not isinstance(entry, dict) or "id" not in entry or "url" not in entry:
            raise click.BadParameter(f"document {index} needs 'id' and 'url' keys")
        documents.append(DocumentRef(id=entry["id"], address=str(entry["url"])))
    return documents


@click.command()
@click.argument("manifest", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--documents",
    "documents_file",
    required=True,
    type=click.Path(exists=True, dir_okay=False),
    help="JSON list of open documents: [{\"id\": 1, \"url\": \"https://...\"}]",
)
@click.option(
    "--privileged-scheme",
    "privileged_schemes",
    multiple=True,
    help="URL scheme the host forbids modifying (repeatable; default: chrome)",
)
def plan(
    manifest: str,
    documents_file: str,
    privileged_schemes: tuple[str, ...],
) -> None:
    """Show the insertions a run would perform, in order.

    Loads and validates the manifest, runs the loader against the listed
    documents held in memory, and prints every insertion call.
    """
    config = LoaderConfig(
        manifest_path=manifest,
        privileged_schemes=privileged_schemes or DEFAULT_PRIVILEGED_SCHEMES,
    )

    try:
        data = load_manifest(config.manifest_path)
        for warning in validate_or_raise(data):
            click.echo(f"  {warning}", err=True)
        source = ManifestSource(data)
    except ValidationError as exc:
        click.echo(f"Validation failed: {exc}", err=True)
        sys.exit(1)
    except ManifestError as exc:
        click.echo(f"Manifest error: {exc}", err=True)
        sys.exit(1)

    host = RecordingHost(InMemoryHost(load_documents(Path(documents_file))))
    loader = ContentScriptsLoader(
        source, host, is_privileged=privileged_predicate(config.privileged_schemes)
    )

    failure: LoaderError | None = None
    try:
        asyncio.run(loader.insert())
    except LoaderError as exc:
        failure = exc

    calls = host.transcript()
    click.echo(f"Insertion plan ({len(calls)} call(s)):")
    for call in calls:
        click.echo(f"  {call}")

    if failure is not None:
        click.echo(f"\nFailed: {failure}", err=True)
        sys.exit(1)
