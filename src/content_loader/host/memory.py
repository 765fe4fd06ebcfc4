"""InMemoryHost: a document host simulated in memory.

Answers document queries with match-pattern semantics and keeps, per
document, the resources that have been applied to it. Every operation yields
to the event loop once before completing, so callers observe genuinely
asynchronous acknowledgements.
"""

from __future__ import annotations

import asyncio
from typing import Iterable, Sequence

from content_loader.model.declaration import DocumentRef, ResourceKind, RunAt
from content_loader.patterns import matches_any


class HostFailure(Exception):
    """Failure reported by the in-memory host for a configured operation."""


class InMemoryHost:
    """Document host backed by a plain list of open documents.

    Args:
        documents: Open documents, in the order queries return them.
        fail_insertions: ``(document_id, identifier)`` pairs whose insertion
            is rejected with :class:`HostFailure`.
        fail_queries: Pattern tuples whose enumeration is rejected.
    """

    def __init__(
        self,
        documents: Iterable[DocumentRef] = (),
        *,
        fail_insertions: Iterable[tuple[int | str, str]] = (),
        fail_queries: Iterable[Sequence[str]] = (),
    ) -> None:
        self.documents: list[DocumentRef] = list(documents)
        self._fail_insertions = set(fail_insertions)
        self._fail_queries = {tuple(p) for p in fail_queries}
        self.applied: dict[int | str, list[tuple[ResourceKind, str, RunAt]]] = {}
        self._in_flight = 0
        self.max_in_flight = 0

    async def query_documents(self, patterns: Sequence[str]) -> list[DocumentRef]:
        async with self._track():
            if tuple(patterns) in self._fail_queries:
                raise HostFailure(f"cannot query documents for {list(patterns)!r}")
            if not patterns:
                return []
            return [d for d in self.documents if matches_any(patterns, d.address)]

    async def insert_style(
        self, document_id: int | str, identifier: str, run_at: RunAt
    ) -> None:
        await self._apply(document_id, ResourceKind.STYLE, identifier, run_at)

    async def insert_script(
        self, document_id: int | str, identifier: str, run_at: RunAt
    ) -> None:
        await self._apply(document_id, ResourceKind.SCRIPT, identifier, run_at)

    async def _apply(
        self,
        document_id: int | str,
        kind: ResourceKind,
        identifier: str,
        run_at: RunAt,
    ) -> None:
        async with self._track():
            if not any(d.id == document_id for d in self.documents):
                raise HostFailure(f"no open document with id {document_id!r}")
            if (document_id, identifier) in self._fail_insertions:
                raise HostFailure(f"{identifier} rejected by document {document_id!r}")
            self.applied.setdefault(document_id, []).append((kind, identifier, run_at))

    def _track(self) -> _InFlight:
        return _InFlight(self)


class _InFlight:
    """Async context manager counting concurrently outstanding host operations."""

    def __init__(self, host: InMemoryHost) -> None:
        self._host = host

    async def __aenter__(self) -> None:
        self._host._in_flight += 1
        self._host.max_in_flight = max(self._host.max_in_flight, self._host._in_flight)
        await asyncio.sleep(0)

    async def __aexit__(self, *exc_info: object) -> None:
        self._host._in_flight -= 1
