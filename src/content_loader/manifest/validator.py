"""Manifest validator: checks every content_scripts block and groups findings by block."""

from __future__ import annotations

from typing import Any, Mapping

from content_loader.errors import LoaderError
from content_loader.manifest.rules import ALL_RULES
from content_loader.model.diagnostic import Diagnostic


def _block_order(diagnostic: Diagnostic) -> int:
    # Manifest-level findings sort ahead of block 0.
    return -1 if diagnostic.block is None else diagnostic.block


def blocks_with_errors(diagnostics: list[Diagnostic]) -> list[int]:
    """Return the sorted indices of the blocks that carry an ERROR diagnostic."""
    return sorted({d.block for d in diagnostics if d.is_error and d.block is not None})


class ValidationError(LoaderError):
    """The manifest's content_scripts cannot be injected as written.

    ``blocks`` lists the failing block indices; an ERROR about the
    content_scripts key itself leaves it empty.
    """

    def __init__(self, diagnostics: list[Diagnostic]) -> None:
        self.diagnostics = [d for d in diagnostics if d.is_error]
        self.blocks = blocks_with_errors(self.diagnostics)
        where = (
            "content_scripts block(s) " + ", ".join(str(b) for b in self.blocks)
            if self.blocks
            else "content_scripts"
        )
        super().__init__(
            f"{len(self.diagnostics)} error(s) in {where}: "
            + "; ".join(str(d) for d in self.diagnostics)
        )


def validate(manifest: Mapping[str, Any]) -> list[Diagnostic]:
    """Run every rule against *manifest*.

    Diagnostics come back ordered by block, manifest-level findings first;
    within a block they keep rule order.
    """
    diagnostics = [d for rule in ALL_RULES for d in rule(manifest)]
    return sorted(diagnostics, key=_block_order)


def validate_or_raise(manifest: Mapping[str, Any]) -> list[Diagnostic]:
    """Validate *manifest*, returning its warnings or raising :class:`ValidationError`."""
    diagnostics = validate(manifest)
    if any(d.is_error for d in diagnostics):
        raise ValidationError(diagnostics)
    return diagnostics
