"""CLI command: content-loader validate -- check a manifest's content_scripts."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from content_loader.errors import ManifestError
from content_loader.manifest import blocks_with_errors, load_manifest
from content_loader.manifest import validate as run_validate


@click.command()
@click.argument("manifest", type=click.Path(exists=True, dir_okay=False))
def validate(manifest: str) -> None:
    """Validate the content_scripts blocks of a manifest file.

    Prints each finding under the block it concerns and exits with code 1
    if any block has an error.
    """
    manifest_path = Path(manifest)

    try:
        data = load_manifest(manifest_path)
    except ManifestError as exc:
        click.echo(f"Manifest error: {exc}", err=True)
        sys.exit(1)

    diagnostics = run_validate(data)
    blocks = data.get("content_scripts")
    block_count = len(blocks) if isinstance(blocks, list) else 0

    if not diagnostics:
        click.echo(f"OK: {manifest_path.name} is valid ({block_count} block(s))")
        sys.exit(0)

    heading: str | None = None
    for diag in diagnostics:
        current = "manifest" if diag.block is None else f"content_scripts[{diag.block}]"
        if current != heading:
            click.echo(f"{current}:")
            heading = current
        line = f"  {diag.severity.value}: {diag.message}"
        if diag.fix:
            line += f" (fix: {diag.fix})"
        click.echo(line)

    failing = blocks_with_errors(diagnostics)
    manifest_errors = any(d.is_error and d.block is None for d in diagnostics)
    warnings = sum(1 for d in diagnostics if d.is_warning)

    click.echo()
    click.echo(
        f"Summary: {len(failing)} of {block_count} block(s) with errors, "
        f"{warnings} warning(s)"
    )

    if failing or manifest_errors:
        sys.exit(1)
    sys.exit(0)
