"""Index snapshot store.

Holds the active document index as an immutable, generation-numbered
snapshot. Writers build a complete new tree and swap it in with ``replace``;
readers take ``current()`` once per request and keep that snapshot for the
whole resolution, so they never observe a partially updated tree.
"""

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from threading import Lock
from typing import Callable, Optional

from cmdoc_mcp.config import get_index_config
from cmdoc_mcp.index.models import IndexNode, node_from_mapping

logger = logging.getLogger("cmdoc-mcp.index")

IndexListener = Callable[["IndexSnapshot"], None]


@dataclass(frozen=True)
class IndexSnapshot:
    root: IndexNode
    generation: int
    source: str | None = None


def load_index_file(path: Path | str) -> IndexNode:
    """Read an index.json file and parse it into an ``IndexNode`` tree.

    Raises:
        FileNotFoundError: If the file doesn't exist
        json.JSONDecodeError: If the file is not valid JSON
        ValueError: If the top-level JSON value is not an object
    """
    index_path = Path(path)
    if not index_path.exists():
        raise FileNotFoundError(f"Document index file not found: {index_path}")

    with open(index_path, encoding="utf-8") as f:
        raw = json.load(f)

    if not isinstance(raw, dict):
        raise ValueError(f"Document index must be a JSON object: {index_path}")
    return node_from_mapping(raw)


class IndexStore:
    """Process-wide holder of the active index snapshot."""

    def __init__(self, root: IndexNode | None = None, source: str | None = None) -> None:
        self._lock = Lock()
        self._snapshot = IndexSnapshot(root=root or IndexNode(), generation=0, source=source)
        self._listeners: list[IndexListener] = []

    def current(self) -> IndexSnapshot:
        return self._snapshot

    def replace(self, root: IndexNode, source: str | None = None) -> IndexSnapshot:
        """Swap in a new tree and notify listeners with the new snapshot."""
        with self._lock:
            snapshot = IndexSnapshot(
                root=root,
                generation=self._snapshot.generation + 1,
                source=source,
            )
            self._snapshot = snapshot
            listeners = list(self._listeners)

        logger.info(
            "Index replaced (generation %d, %d top-level entries, source=%s)",
            snapshot.generation,
            len(root.children),
            source or "memory",
        )
        for listener in listeners:
            listener(snapshot)
        return snapshot

    def load_file(self, path: Path | str) -> IndexSnapshot:
        root = load_index_file(path)
        return self.replace(root, source=str(path))

    def subscribe(self, listener: IndexListener) -> Callable[[], None]:
        """Register a replacement listener; returns a function that removes it."""
        with self._lock:
            self._listeners.append(listener)

        def unsubscribe() -> None:
            with self._lock:
                if listener in self._listeners:
                    self._listeners.remove(listener)

        return unsubscribe


_store: Optional[IndexStore] = None
_store_lock = Lock()


def get_index_store() -> IndexStore:
    """Return the global index store, loading the configured index on first use."""
    global _store
    with _store_lock:
        if _store is None:
            store = IndexStore()
            config = get_index_config()
            try:
                store.load_file(config.index_path)
            except (OSError, ValueError) as exc:
                logger.warning("Starting with an empty index: %s", exc)
            _store = store
        return _store
