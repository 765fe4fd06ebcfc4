"""Match resolver: finds the documents a declaration applies to and hands off injection."""

from __future__ import annotations

import logging

from content_loader.engine.sequencer import InjectionSequencer
from content_loader.errors import EnumerationError
from content_loader.host.base import DocumentHost
from content_loader.model.declaration import Declaration, build_resources

logger = logging.getLogger(__name__)


class MatchResolver:
    """Resolves one declaration against the host's open documents."""

    def __init__(self, host: DocumentHost, sequencer: InjectionSequencer) -> None:
        self.host = host
        self.sequencer = sequencer

    async def resolve(self, declaration: Declaration) -> None:
        """Inject *declaration*'s resources into every document it matches.

        Completes once every matched document has received every resource or
        been skipped. Raises :class:`EnumerationError` if the host cannot
        enumerate documents, and lets :class:`InsertionError` propagate.
        """
        resources = build_resources(declaration)
        try:
            documents = list(await self.host.query_documents(declaration.matches))
        except Exception as exc:
            raise EnumerationError(declaration.matches, cause=exc) from exc

        logger.debug(
            "Patterns %s matched %d document(s); %d resource(s) each",
            list(declaration.matches),
            len(documents),
            len(resources),
        )
        if not documents:
            return
        await self.sequencer.inject_into_all(documents, resources, declaration.run_at)
