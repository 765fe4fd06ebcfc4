"""Match pattern error types."""


class MatchPatternError(ValueError):
    """Raised when a match pattern string cannot be parsed."""

    def __init__(self, message: str, pattern: str = ""):
        self.pattern = pattern
        super().__init__(message)
