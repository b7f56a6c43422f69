"""Index Reload Tool - Swap in a new document index snapshot."""

import logging
from typing import Any

from fastmcp import FastMCP

from cmdoc_mcp.config import get_index_config
from cmdoc_mcp.contracts import (
    LoadFailureDetails,
    ReloadData,
    ReloadSummary,
    TopicEntry,
    build_error,
    build_ok,
)
from cmdoc_mcp.index import get_index_store
from cmdoc_mcp.utils import IndexPath

logger = logging.getLogger("cmdoc-mcp.index")


def register(mcp: FastMCP) -> None:
    """Register doc_reload_index tool with the MCP server."""

    @mcp.tool()
    def doc_reload_index(path: IndexPath = None) -> dict[str, Any]:
        """Reload the document index from disk.

        The new index replaces the current one in a single swap; requests
        already in flight finish against the previous snapshot.
        """
        index_path = path or str(get_index_config().index_path)
        store = get_index_store()
        try:
            snapshot = store.load_file(index_path)
        except (OSError, ValueError) as exc:
            logger.warning("Index reload from %s failed: %s", index_path, exc)
            return build_error(
                code="index_load_failed",
                message="Document index could not be loaded",
                details=LoadFailureDetails(
                    path=index_path,
                    reason=str(exc).splitlines()[0] if str(exc) else type(exc).__name__,
                    generation=store.current().generation,
                ),
            )

        keys = snapshot.root.child_keys()
        return build_ok(
            ReloadData(
                entries=[TopicEntry(name=name) for name in keys],
                summary=ReloadSummary(
                    generation=snapshot.generation,
                    source=snapshot.source,
                    top_level=len(keys),
                ),
            )
        )
