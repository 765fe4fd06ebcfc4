"""Declaration enumerator: walks declarations strictly in configuration order."""

from __future__ import annotations

import logging
from typing import Sequence

from content_loader.engine.resolver import MatchResolver
from content_loader.model.declaration import Declaration

logger = logging.getLogger(__name__)


class DeclarationEnumerator:
    """Runs the match resolver for each declaration, one after another."""

    def __init__(self, resolver: MatchResolver) -> None:
        self.resolver = resolver

    async def run_all(self, declarations: Sequence[Declaration]) -> None:
        """Resolve every declaration in order.

        A declaration is not started until the previous one has finished
        injecting into all of its matched documents. The first failure
        propagates and no later declaration is started.
        """
        for index, declaration in enumerate(declarations):
            logger.debug("Resolving content_scripts[%d]", index)
            await self.resolver.resolve(declaration)
