"""RecordingHost: wraps another document host and records every call."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from content_loader.host.base import DocumentHost
from content_loader.model.declaration import DocumentRef, ResourceKind, RunAt


@dataclass(frozen=True)
class InsertionCall:
    """A recorded insertion submitted to the host."""

    kind: ResourceKind
    document_id: int | str
    identifier: str
    run_at: RunAt

    def __str__(self) -> str:
        op = "insert_style" if self.kind is ResourceKind.STYLE else "insert_script"
        return f"{op}({self.document_id!r}, {self.identifier!r}, {self.run_at.value})"


class RecordingHost:
    """DocumentHost decorator that records all queries and insertions.

    Every call is forwarded to the inner host. Insertions are recorded when
    submitted, before the inner host acknowledges them, so a failed
    insertion still appears in the transcript.
    """

    def __init__(self, inner: DocumentHost) -> None:
        self._inner = inner
        self._calls: list[InsertionCall] = []
        self._queries: list[tuple[str, ...]] = []

    async def query_documents(self, patterns: Sequence[str]) -> Sequence[DocumentRef]:
        self._queries.append(tuple(patterns))
        return await self._inner.query_documents(patterns)

    async def insert_style(
        self, document_id: int | str, identifier: str, run_at: RunAt
    ) -> None:
        self._calls.append(InsertionCall(ResourceKind.STYLE, document_id, identifier, run_at))
        await self._inner.insert_style(document_id, identifier, run_at)

    async def insert_script(
        self, document_id: int | str, identifier: str, run_at: RunAt
    ) -> None:
        self._calls.append(InsertionCall(ResourceKind.SCRIPT, document_id, identifier, run_at))
        await self._inner.insert_script(document_id, identifier, run_at)

    def transcript(self) -> list[InsertionCall]:
        """Return the insertion calls in submission order."""
        return list(self._calls)

    def queries(self) -> list[tuple[str, ...]]:
        """Return the pattern sets queried, in order."""
        return list(self._queries)

    def clear(self) -> None:
        self._calls.clear()
        self._queries.clear()
