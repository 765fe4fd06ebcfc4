"""Error hierarchy for the content loader."""
from __future__ import annotations

from typing import Sequence

from content_loader.model.declaration import DocumentRef, Resource


class LoaderError(Exception):
    """Base error for all content_loader errors."""

    def __init__(self, message: str, *, cause: BaseException | None = None) -> None:
        super().__init__(message)
        self.cause = cause


class EnumerationError(LoaderError):
    """The host could not produce the open documents for a pattern set."""

    def __init__(
        self,
        patterns: Sequence[str],
        *,
        cause: BaseException | None = None,
    ) -> None:
        self.patterns = tuple(patterns)
        detail = f": {cause}" if cause is not None else ""
        super().__init__(
            f"Document query failed for patterns {list(self.patterns)!r}{detail}",
            cause=cause,
        )


class InsertionError(LoaderError):
    """The host rejected a single style or script insertion."""

    def __init__(
        self,
        document: DocumentRef,
        resource: Resource,
        *,
        cause: BaseException | None = None,
    ) -> None:
        self.document = document
        self.resource = resource
        detail = f": {cause}" if cause is not None else ""
        super().__init__(
            f"Inserting {resource} into document {document.id!r} "
            f"({document.address}) failed{detail}",
            cause=cause,
        )


class ManifestError(LoaderError):
    """The manifest could not be read or its content_scripts are malformed."""
