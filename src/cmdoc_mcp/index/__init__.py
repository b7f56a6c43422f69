"""Document index tree and snapshot store.

Components:
    - IndexNode: Immutable node with children, variant markers and index document
    - IndexStore: Generation-numbered snapshot holder with atomic replacement
"""

from cmdoc_mcp.index.models import (
    INDEX_KEY,
    MARKER_PREFIX,
    IndexNode,
    Variant,
    node_from_mapping,
)
from cmdoc_mcp.index.store import (
    IndexSnapshot,
    IndexStore,
    get_index_store,
    load_index_file,
)

__all__ = [
    "INDEX_KEY",
    "MARKER_PREFIX",
    "IndexNode",
    "Variant",
    "node_from_mapping",
    "IndexSnapshot",
    "IndexStore",
    "get_index_store",
    "load_index_file",
]
