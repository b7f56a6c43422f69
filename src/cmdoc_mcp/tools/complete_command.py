"""Command Complete Tool - Tab completion over the document index."""

from typing import Any

from fastmcp import FastMCP

from cmdoc_mcp.contracts import CompletionData, build_ok
from cmdoc_mcp.index import get_index_store
from cmdoc_mcp.resolution import MATCH_STRATEGIES, complete
from cmdoc_mcp.utils import CommandText, MatchStrategy, TabIteration


def register(mcp: FastMCP) -> None:
    """Register doc_complete tool with the MCP server."""

    @mcp.tool()
    def doc_complete(
        command: CommandText = None,
        iteration: TabIteration = 1,
        strategy: MatchStrategy = "prefix",
    ) -> dict[str, Any]:
        """Complete a partially typed command (like pressing tab in a shell).

        First press (iteration=1) extends the last word when unambiguous.
        Repeat the same input with iteration=2 to list all candidates, or to
        step into the only available topic.

        Related tools:
        - doc_resolve: Open the document for a complete command
        """
        snapshot = get_index_store().current()
        outcome = complete(command or "", iteration, snapshot.root, MATCH_STRATEGIES[strategy])
        return build_ok(CompletionData.from_outcome(outcome, iteration=iteration, strategy=strategy))
