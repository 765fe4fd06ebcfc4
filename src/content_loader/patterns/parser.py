"""Hand-written parser for extension match patterns.

Syntax example:
    <all_urls>
    *://*.example.com/*
    https://example.com:8443/docs/*
    file:///home/*/notes.html
    http://[::1]:8080/*
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from functools import lru_cache
from typing import Iterable
from urllib.parse import urlsplit

from content_loader.patterns.errors import MatchPatternError

__all__ = ["ALL_URLS", "MatchPattern", "matches_any", "parse_match_pattern"]

ALL_URLS = "<all_urls>"

VALID_SCHEMES = frozenset({"http", "https", "ws", "wss", "ftp", "file"})

# Schemes a "*" scheme stands for.
_WILDCARD_SCHEMES = frozenset({"http", "https"})

_PATTERN_RE = re.compile(
    r"""
    ^(?P<scheme>\*|[a-z][a-z0-9+.-]*)   # scheme or wildcard
    ://
    (?P<host>[^/]*)                     # host, possibly with a port
    (?P<path>/.*)$                      # path, always starts with a slash
    """,
    re.VERBOSE | re.IGNORECASE,
)

_HOST_RE = re.compile(
    r"""
    ^(?P<name>\*                        # any host
    |\[[0-9a-f:.]+\]                     # bracketed IPv6 literal
    |(?:\*\.)?[^*:/\[\]]+)              # "*.domain" or an exact host
    (?::(?P<port>\*|\d+))?$             # optional port
    """,
    re.VERBOSE | re.IGNORECASE,
)


def _glob_to_regex(glob: str) -> re.Pattern[str]:
    """Translate a path glob where only ``*`` is special into a regex."""
    parts = (re.escape(chunk) for chunk in glob.split("*"))
    return re.compile("^" + ".*".join(parts) + "$", re.DOTALL)


@dataclass(frozen=True)
class MatchPattern:
    """A parsed match pattern.

    ``schemes`` is the set of URL schemes accepted. ``host`` is ``"*"`` for any
    host, ``""`` for file URLs, or a host name; ``subdomains`` means the host
    also matches any of its subdomains. ``port`` is ``None`` when any port is
    accepted.
    """

    source: str
    schemes: frozenset[str]
    host: str = "*"
    subdomains: bool = False
    port: int | None = None
    path: str = "/*"
    _path_re: re.Pattern[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "_path_re", _glob_to_regex(self.path))

    @property
    def is_all_urls(self) -> bool:
        return self.source == ALL_URLS

    def matches(self, url: str) -> bool:
        """Return True if *url* is selected by this pattern."""
        try:
            parts = urlsplit(url)
            port = parts.port
        except ValueError:
            return False
        scheme = parts.scheme.lower()
        if scheme not in self.schemes:
            return False
        if self.is_all_urls:
            return True
        if not self._match_host((parts.hostname or "").lower()):
            return False
        if self.port is not None and port != self.port:
            return False
        target = parts.path or "/"
        if parts.query:
            target = f"{target}?{parts.query}"
        return self._path_re.match(target) is not None

    def _match_host(self, hostname: str) -> bool:
        if self.host == "*":
            return True
        if hostname == self.host:
            return True
        return self.subdomains and hostname.endswith("." + self.host)


def _parse_host(raw: str, source: str) -> tuple[str, bool, int | None]:
    """Split a raw host component into (host, subdomains, port)."""
    match = _HOST_RE.match(raw)
    if not match:
        raise MatchPatternError(f"Invalid host in match pattern: {source!r}", source)
    name = match.group("name").lower()
    port_text = match.group("port")
    port = None if port_text in (None, "*") else int(port_text)
    if name.startswith("["):
        # urlsplit reports IPv6 hostnames without their brackets.
        return name[1:-1], False, port
    if name.startswith("*."):
        return name[2:], True, port
    return name, False, port


@lru_cache(maxsize=256)
def parse_match_pattern(source: str) -> MatchPattern:
    """Parse a match pattern string into a MatchPattern.

    Raises:
        MatchPatternError: if the pattern is malformed or uses an
            unsupported scheme.
    """
    text = source.strip()
    if text == ALL_URLS:
        return MatchPattern(source=ALL_URLS, schemes=VALID_SCHEMES)

    match = _PATTERN_RE.match(text)
    if not match:
        raise MatchPatternError(f"Malformed match pattern: {source!r}", source)

    scheme = match.group("scheme").lower()
    if scheme == "*":
        schemes = _WILDCARD_SCHEMES
    elif scheme in VALID_SCHEMES:
        schemes = frozenset({scheme})
    else:
        raise MatchPatternError(f"Unsupported scheme {scheme!r} in {source!r}", source)

    raw_host = match.group("host")
    if scheme == "file":
        if raw_host:
            raise MatchPatternError(f"file patterns take no host: {source!r}", source)
        return MatchPattern(
            source=text, schemes=schemes, host="", path=match.group("path")
        )
    if not raw_host:
        raise MatchPatternError(f"Missing host in match pattern: {source!r}", source)

    host, subdomains, port = _parse_host(raw_host, source)
    return MatchPattern(
        source=text,
        schemes=schemes,
        host=host,
        subdomains=subdomains,
        port=port,
        path=match.group("path"),
    )


def matches_any(patterns: Iterable[str], url: str) -> bool:
    """Return True if *url* matches at least one of *patterns*."""
    return any(parse_match_pattern(p).matches(url) for p in patterns)
