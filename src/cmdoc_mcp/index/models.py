"""Typed document index tree.

The on-disk index is a nested JSON object where every key is a path segment,
except for two reserved forms:

- ``__<variant>`` keys (``__basic``, ``__detail``, ``__install``) mark that a
  document of that variant exists for the path, with its byte size as value.
- the literal ``index`` key holds the directory-level document.

``node_from_mapping`` turns that shape into ``IndexNode`` objects, which keep
variant markers and the index document in their own fields so that path
segments never need to be told apart from metadata by name.
"""

import logging
import math
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping

logger = logging.getLogger("cmdoc-mcp.index")

MARKER_PREFIX = "__"
INDEX_KEY = "index"


class Variant(str, Enum):
    """Document variants a node can carry."""

    BASIC = "basic"
    DETAIL = "detail"
    INSTALL = "install"


@dataclass(frozen=True)
class IndexNode:
    """One node of the document index.

    Attributes:
        children: Traversable path segments, in stored order
        markers: Variant name -> document byte size
        index: Directory-level document node, if any
    """

    children: Mapping[str, "IndexNode"] = field(default_factory=lambda: MappingProxyType({}))
    markers: Mapping[str, int] = field(default_factory=lambda: MappingProxyType({}))
    index: "IndexNode | None" = None

    @property
    def is_internal(self) -> bool:
        return bool(self.children)

    @property
    def is_leaf(self) -> bool:
        return bool(self.markers)

    def has_variant(self, variant: Variant) -> bool:
        return variant.value in self.markers

    def child(self, key: str | None) -> "IndexNode | None":
        if key is None:
            return None
        return self.children.get(key)

    def child_keys(self) -> list[str]:
        """Return path segments below this node, in stored order."""
        return list(self.children)

    def variants(self) -> list[str]:
        return list(self.markers)


def node_from_mapping(raw: Mapping[str, Any]) -> IndexNode:
    """Build an immutable ``IndexNode`` tree from the raw JSON shape.

    Args:
        raw: Nested mapping as stored in index.json

    Returns:
        Root node of the parsed tree

    Example:
        >>> root = node_from_mapping({"array": {"splice": {"__basic": 120}}})
        >>> root.child("array").child("splice").markers["basic"]
        120
    """
    children: dict[str, IndexNode] = {}
    markers: dict[str, int] = {}
    index: IndexNode | None = None

    for key, value in raw.items():
        key = str(key)
        if key.startswith(MARKER_PREFIX):
            size = _marker_size(value)
            if size is None:
                logger.debug("Skipping marker %r with non-numeric size %r", key, value)
                continue
            markers[key[len(MARKER_PREFIX):]] = size
        elif key == INDEX_KEY:
            index = node_from_mapping(value) if isinstance(value, Mapping) else IndexNode()
        elif isinstance(value, Mapping):
            children[key] = node_from_mapping(value)
        else:
            children[key] = IndexNode()

    return IndexNode(
        children=MappingProxyType(children),
        markers=MappingProxyType(markers),
        index=index,
    )


def _marker_size(value: Any) -> int | None:
    if isinstance(value, bool):
        return None
    try:
        size = float(value)
    except (TypeError, ValueError):
        return None
    # json.load accepts Infinity and NaN
    if not math.isfinite(size):
        return None
    return int(size)
