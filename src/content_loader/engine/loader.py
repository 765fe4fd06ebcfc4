"""ContentScriptsLoader: inject declared content scripts into all open documents.

This replicates, for documents that were already open, what a reload would
have produced once the declarations became active:

    loader = ContentScriptsLoader(ManifestSource(manifest), host)
    await loader.insert()
"""

from __future__ import annotations

import logging

from content_loader.engine.enumerator import DeclarationEnumerator
from content_loader.engine.resolver import MatchResolver
from content_loader.engine.sequencer import InjectionSequencer
from content_loader.host.base import ConfigSource, DocumentHost, PrivilegedPredicate
from content_loader.host.privileged import is_privileged_address

logger = logging.getLogger(__name__)


class ContentScriptsLoader:
    """Composes the enumerator, resolver and sequencer over injected host capabilities.

    Args:
        source: Supplies the ordered declarations.
        host: Enumerates documents and performs single insertions.
        is_privileged: Predicate for addresses the host forbids touching.
    """

    def __init__(
        self,
        source: ConfigSource,
        host: DocumentHost,
        *,
        is_privileged: PrivilegedPredicate = is_privileged_address,
    ) -> None:
        self.source = source
        self.sequencer = InjectionSequencer(host, is_privileged)
        self.resolver = MatchResolver(host, self.sequencer)
        self.enumerator = DeclarationEnumerator(self.resolver)

    async def insert(self) -> None:
        """Inject every declaration into every matching open document.

        Returns once all requested insertions have settled. Raises the first
        :class:`~content_loader.errors.EnumerationError` or
        :class:`~content_loader.errors.InsertionError` observed; nothing is
        attempted after it.
        """
        declarations = list(self.source.get_declarations())
        logger.info("Injecting %d content script declaration(s)", len(declarations))
        try:
            await self.enumerator.run_all(declarations)
        except Exception:
            logger.warning("Content script injection failed")
            raise
        logger.info("Content script injection settled")
