"""Resolution result models."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union

from cmdoc_mcp.index.models import IndexNode


@dataclass(frozen=True)
class Resolved:
    """Tokens led to a document.

    ``node`` is the node whose variant markers pick the file extension: the
    ``index`` document for directory hits, the matched node otherwise.
    """

    path: str
    node: IndexNode
    is_index_file: bool = False


@dataclass(frozen=True)
class Suggestions:
    """Tokens stopped at a directory with several possible continuations."""

    candidates: tuple[str, ...]


@dataclass(frozen=True)
class NotFound:
    """A token matched nothing at its level."""


Resolution = Union[Resolved, Suggestions, NotFound]


@dataclass(frozen=True)
class ResolveOptions:
    detail: bool = False
    install: bool = False


@dataclass
class ResolveResult:
    """Outcome of ``resolve`` as returned to front ends.

    Attributes:
        path: Document path relative to the docs root (with extension) when
            resolved, slash-joined tokens when ambiguous, the user's input
            when not found
        exists: True only when a document was resolved
        suggestions: Next-level keys when ambiguous, else None
        is_index_file: True when the path points at a directory index.md
        variants: Variant markers available on the resolved node
    """

    path: str
    exists: bool
    suggestions: Optional[List[str]] = None
    is_index_file: bool = False
    variants: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "path": self.path,
            "exists": self.exists,
            "suggestions": self.suggestions,
            "is_index_file": self.is_index_file,
            "variants": self.variants,
        }
