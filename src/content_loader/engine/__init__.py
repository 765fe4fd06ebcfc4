"""Injection engine: declaration enumeration, match resolution, and sequencing."""

from content_loader.engine.enumerator import DeclarationEnumerator
from content_loader.engine.loader import ContentScriptsLoader
from content_loader.engine.resolver import MatchResolver
from content_loader.engine.sequencer import InjectionSequencer

__all__ = [
    "ContentScriptsLoader",
    "DeclarationEnumerator",
    "MatchResolver",
    "InjectionSequencer",
]
