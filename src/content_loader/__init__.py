"""Content loader: inject manifest content scripts into already-open documents."""
from __future__ import annotations

__version__ = "0.1.0"

from content_loader.config import LoaderConfig  # noqa: E402
from content_loader.engine.loader import ContentScriptsLoader  # noqa: E402
from content_loader.errors import (  # noqa: E402
    EnumerationError,
    InsertionError,
    LoaderError,
)

__all__ = [
    "__version__",
    "ContentScriptsLoader",
    "EnumerationError",
    "InsertionError",
    "LoaderConfig",
    "LoaderError",
]
