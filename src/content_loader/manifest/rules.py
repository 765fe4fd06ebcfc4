"""Validation rules for manifest content_scripts.

Each rule is a function taking the decoded manifest and returning a list of
Diagnostic objects describing any issues found.
"""

from __future__ import annotations

from typing import Any, Iterator, Mapping

from content_loader.model.declaration import RunAt
from content_loader.model.diagnostic import Diagnostic, Severity
from content_loader.patterns import MatchPatternError, parse_match_pattern

VALID_RUN_AT = frozenset(r.value for r in RunAt)

_RESOURCE_KEYS = ("css", "js")


def _blocks(manifest: Mapping[str, Any]) -> Iterator[tuple[int, dict[str, Any]]]:
    """Yield (index, block) for every well-formed content_scripts block."""
    blocks = manifest.get("content_scripts", [])
    if not isinstance(blocks, list):
        return
    for index, block in enumerate(blocks):
        if isinstance(block, dict):
            yield index, block


def _is_string_list(value: object) -> bool:
    return isinstance(value, list) and all(isinstance(v, str) for v in value)


# ---------------------------------------------------------------------------
# Structural rules (ERROR severity)
# ---------------------------------------------------------------------------


def check_content_scripts_shape(manifest: Mapping[str, Any]) -> list[Diagnostic]:
    """content_scripts, if present, is a list of objects."""
    if "content_scripts" not in manifest:
        return []
    blocks = manifest["content_scripts"]
    if not isinstance(blocks, list):
        return [
            Diagnostic(
                rule="check_content_scripts_shape",
                severity=Severity.ERROR,
                message=f"content_scripts must be a list, got {type(blocks).__name__}.",
            )
        ]
    return [
        Diagnostic(
            rule="check_content_scripts_shape",
            severity=Severity.ERROR,
            message=f"Block must be an object, got {type(block).__name__}.",
            block=index,
        )
        for index, block in enumerate(blocks)
        if not isinstance(block, dict)
    ]


def check_matches_present(manifest: Mapping[str, Any]) -> list[Diagnostic]:
    """Every block has a non-empty list of match patterns."""
    diagnostics: list[Diagnostic] = []
    for index, block in _blocks(manifest):
        matches = block.get("matches")
        if not _is_string_list(matches) or not matches:
            diagnostics.append(
                Diagnostic(
                    rule="check_matches_present",
                    severity=Severity.ERROR,
                    message="Block has no match patterns.",
                    block=index,
                    fix='Add "matches": ["<all_urls>"] or a narrower pattern list.',
                )
            )
    return diagnostics


def check_match_patterns(manifest: Mapping[str, Any]) -> list[Diagnostic]:
    """Every match pattern parses."""
    diagnostics: list[Diagnostic] = []
    for index, block in _blocks(manifest):
        matches = block.get("matches")
        if not _is_string_list(matches):
            continue
        for pattern in matches:
            try:
                parse_match_pattern(pattern)
            except MatchPatternError as exc:
                diagnostics.append(
                    Diagnostic(
                        rule="check_match_patterns",
                        severity=Severity.ERROR,
                        message=str(exc),
                        block=index,
                    )
                )
    return diagnostics


def check_run_at(manifest: Mapping[str, Any]) -> list[Diagnostic]:
    """run_at, if given, is a known timing marker."""
    diagnostics: list[Diagnostic] = []
    for index, block in _blocks(manifest):
        if "run_at" in block and block["run_at"] not in VALID_RUN_AT:
            diagnostics.append(
                Diagnostic(
                    rule="check_run_at",
                    severity=Severity.ERROR,
                    message=f"Unknown run_at value {block['run_at']!r}.",
                    block=index,
                    fix=f"Use one of: {', '.join(sorted(VALID_RUN_AT))}.",
                )
            )
    return diagnostics


def check_resource_lists(manifest: Mapping[str, Any]) -> list[Diagnostic]:
    """css and js, if given, are lists of strings."""
    diagnostics: list[Diagnostic] = []
    for index, block in _blocks(manifest):
        for key in _RESOURCE_KEYS:
            if key in block and not _is_string_list(block[key]):
                diagnostics.append(
                    Diagnostic(
                        rule="check_resource_lists",
                        severity=Severity.ERROR,
                        message=f"{key} must be a list of strings.",
                        block=index,
                    )
                )
    return diagnostics


# ---------------------------------------------------------------------------
# Advisory rules (WARNING severity)
# ---------------------------------------------------------------------------


def check_has_resources(manifest: Mapping[str, Any]) -> list[Diagnostic]:
    """A block with neither css nor js injects nothing."""
    diagnostics: list[Diagnostic] = []
    for index, block in _blocks(manifest):
        if not any(block.get(key) for key in _RESOURCE_KEYS):
            diagnostics.append(
                Diagnostic(
                    rule="check_has_resources",
                    severity=Severity.WARNING,
                    message="Block declares no css or js; it will inject nothing.",
                    block=index,
                )
            )
    return diagnostics


def check_duplicate_resources(manifest: Mapping[str, Any]) -> list[Diagnostic]:
    """The same identifier listed twice in a block is inserted twice."""
    diagnostics: list[Diagnostic] = []
    for index, block in _blocks(manifest):
        for key in _RESOURCE_KEYS:
            entries = block.get(key)
            if not _is_string_list(entries):
                continue
            seen: set[str] = set()
            for entry in entries:
                if entry in seen:
                    diagnostics.append(
                        Diagnostic(
                            rule="check_duplicate_resources",
                            severity=Severity.WARNING,
                            message=f"{key} lists {entry!r} more than once.",
                            block=index,
                        )
                    )
                seen.add(entry)
    return diagnostics


ALL_RULES = [
    check_content_scripts_shape,
    check_matches_present,
    check_match_patterns,
    check_run_at,
    check_resource_lists,
    check_has_resources,
    check_duplicate_resources,
]
