"""Declaration model: content-script rules, the resources they expand to, and open documents."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class RunAt(Enum):
    """When, relative to a document's load lifecycle, a resource is applied.

    The loader never interprets this value; it is handed to the host as-is.
    """

    DOCUMENT_START = "document_start"
    DOCUMENT_END = "document_end"
    DOCUMENT_IDLE = "document_idle"


DEFAULT_RUN_AT = RunAt.DOCUMENT_IDLE


@dataclass(frozen=True)
class Declaration:
    """One ``content_scripts`` block from the manifest.

    Attributes:
        matches: Match patterns selecting the documents this block applies to.
        css: Style sheet identifiers, in declared order.
        js: Script identifiers, in declared order.
        run_at: Injection timing marker passed through to the host.
    """

    matches: tuple[str, ...] = ()
    css: tuple[str, ...] = ()
    js: tuple[str, ...] = ()
    run_at: RunAt = DEFAULT_RUN_AT

    @property
    def resource_count(self) -> int:
        return len(self.css) + len(self.js)


class ResourceKind(Enum):
    """Kind of a single injectable resource."""

    STYLE = "style"
    SCRIPT = "script"


@dataclass(frozen=True)
class Resource:
    """A single style sheet or script to insert into a document."""

    kind: ResourceKind
    identifier: str

    def __str__(self) -> str:
        return f"{self.kind.value}:{self.identifier}"


@dataclass(frozen=True)
class DocumentRef:
    """Opaque handle to one open document, as supplied by the host."""

    id: int | str
    address: str


def build_resources(declaration: Declaration) -> list[Resource]:
    """Expand a declaration into its ordered resource sequence.

    Styles come first in declared order, followed by scripts in declared
    order. A declaration with neither yields an empty list.
    """
    resources = [Resource(ResourceKind.STYLE, path) for path in declaration.css]
    resources.extend(Resource(ResourceKind.SCRIPT, path) for path in declaration.js)
    return resources
