"""Match patterns: parse and evaluate extension-style URL match patterns."""

from content_loader.patterns.errors import MatchPatternError
from content_loader.patterns.parser import (
    ALL_URLS,
    MatchPattern,
    matches_any,
    parse_match_pattern,
)

__all__ = [
    "ALL_URLS",
    "MatchPattern",
    "MatchPatternError",
    "matches_any",
    "parse_match_pattern",
]
