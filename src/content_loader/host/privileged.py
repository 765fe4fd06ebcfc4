"""Privileged-address predicate: addresses the host forbids modifying."""

from __future__ import annotations

import re
from functools import lru_cache
from typing import Iterable

from content_loader.host.base import PrivilegedPredicate

DEFAULT_PRIVILEGED_SCHEMES: tuple[str, ...] = ("chrome",)


@lru_cache(maxsize=32)
def _scheme_regex(schemes: tuple[str, ...]) -> re.Pattern[str]:
    alternatives = "|".join(re.escape(s) for s in schemes)
    return re.compile(rf"^(?:{alternatives}):/", re.IGNORECASE)


def _scheme_tuple(schemes: str | Iterable[str]) -> tuple[str, ...]:
    # A bare string names one scheme, not a sequence of one-letter schemes.
    if isinstance(schemes, str):
        return (schemes,)
    return tuple(schemes)


def is_privileged_address(
    address: str, schemes: str | Iterable[str] = DEFAULT_PRIVILEGED_SCHEMES
) -> bool:
    """Return True if *address* belongs to one of the host's internal schemes.

    ``chrome://extensions`` and ``CHROME:/settings`` are privileged with the
    default scheme set; ``https://chrome.google.com`` is not.
    """
    scheme_tuple = _scheme_tuple(schemes)
    if not scheme_tuple:
        return False
    return _scheme_regex(scheme_tuple).match(address) is not None


def privileged_predicate(schemes: str | Iterable[str]) -> PrivilegedPredicate:
    """Bind a scheme set into a single-argument predicate."""
    scheme_tuple = _scheme_tuple(schemes)

    def predicate(address: str) -> bool:
        return is_privileged_address(address, scheme_tuple)

    return predicate
