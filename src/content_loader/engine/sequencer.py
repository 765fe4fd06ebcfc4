"""Injection sequencer: nested serial insertion of resources into documents."""

from __future__ import annotations

import logging
from typing import Sequence

from content_loader.errors import InsertionError
from content_loader.host.base import DocumentHost, PrivilegedPredicate
from content_loader.model.declaration import DocumentRef, Resource, ResourceKind, RunAt

logger = logging.getLogger(__name__)


class InjectionSequencer:
    """Inserts an ordered resource sequence into each document, one at a time.

    Document B's first resource is never submitted before document A has
    acknowledged all of its own, and within a document resource N+1 is never
    submitted before resource N has been acknowledged.
    """

    def __init__(self, host: DocumentHost, is_privileged: PrivilegedPredicate) -> None:
        self.host = host
        self.is_privileged = is_privileged

    async def inject_into_all(
        self,
        documents: Sequence[DocumentRef],
        resources: Sequence[Resource],
        run_at: RunAt,
    ) -> None:
        """Inject *resources* into every document in host order."""
        for document in documents:
            # Each document consumes its own copy of the sequence.
            await self.inject_into_one(document, list(resources), run_at)

    async def inject_into_one(
        self,
        document: DocumentRef,
        resources: list[Resource],
        run_at: RunAt,
    ) -> None:
        """Inject *resources* into a single document, awaiting each insertion.

        Documents at a privileged address are skipped without inserting
        anything. The first rejected insertion raises :class:`InsertionError`
        and nothing further is submitted for this document.
        """
        if not resources:
            return
        if self.is_privileged(document.address):
            logger.debug("Skipping privileged document %r (%s)", document.id, document.address)
            return

        for resource in resources:
            logger.debug("Inserting %s into document %r", resource, document.id)
            try:
                if resource.kind is ResourceKind.STYLE:
                    await self.host.insert_style(document.id, resource.identifier, run_at)
                else:
                    await self.host.insert_script(document.id, resource.identifier, run_at)
            except Exception as exc:
                raise InsertionError(document, resource, cause=exc) from exc
