"""Protocols for the host capabilities the loader is built on."""

from __future__ import annotations

from typing import Callable, Protocol, Sequence

from content_loader.model.declaration import Declaration, DocumentRef, RunAt

PrivilegedPredicate = Callable[[str], bool]


class ConfigSource(Protocol):
    """Supplies the ordered content-script declarations.

    Must be synchronous and free of side effects.
    """

    def get_declarations(self) -> Sequence[Declaration]: ...


class DocumentHost(Protocol):
    """Enumerates open documents and performs single insertions.

    Every method is a coroutine; returning normally is the host's
    acknowledgement that the operation completed, raising is its failure.
    """

    async def query_documents(self, patterns: Sequence[str]) -> Sequence[DocumentRef]:
        """Return the open documents matching any of *patterns*, in a stable order."""
        ...

    async def insert_style(
        self, document_id: int | str, identifier: str, run_at: RunAt
    ) -> None: ...

    async def insert_script(
        self, document_id: int | str, identifier: str, run_at: RunAt
    ) -> None: ...
