"""cmdoc MCP Server - command documentation lookup exposed over MCP."""

import argparse
import logging

from fastmcp import FastMCP

from cmdoc_mcp import __version__
from cmdoc_mcp.documents import clear_document_cache
from cmdoc_mcp.index import IndexSnapshot, get_index_store
from cmdoc_mcp.tools import complete_command, reload_index, resolve_doc

mcp = FastMCP(
    "cmdoc MCP Server",
    instructions=(
        "Command documentation MCP server. "
        "Resolves loosely typed, possibly misspelled command phrases "
        "(e.g. 'js array splcie') to documents in a hierarchical index, "
        "offers shell-style tab completion, and reloads the index on demand."
    ),
)

logger = logging.getLogger("cmdoc-mcp.server")

# Register documentation tools
resolve_doc.register(mcp)
complete_command.register(mcp)

# Register index tools
reload_index.register(mcp)


def _on_index_replaced(snapshot: IndexSnapshot) -> None:
    clear_document_cache()
    logger.debug("Document cache cleared for index generation %d", snapshot.generation)


get_index_store().subscribe(_on_index_replaced)


def main():
    """Entry point for the cmdoc MCP server."""
    parser = argparse.ArgumentParser(
        prog="cmdoc-mcp",
        description="cmdoc MCP Server - command documentation lookup exposed over MCP",
    )
    parser.add_argument("--version", "-v", action="version", version=f"cmdoc-mcp {__version__}")
    parser.add_argument(
        "--index",
        default=None,
        help="Path to index.json (default: CMDOC_MCP_INDEX_PATH or the bundled index)",
    )
    parser.add_argument(
        "--transport",
        choices=["stdio", "http", "sse"],
        default="stdio",
        help="Transport protocol (default: stdio)",
    )
    parser.add_argument(
        "--host",
        default="127.0.0.1",
        help="Host to bind when using http/sse transport (default: 127.0.0.1)",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=8000,
        help="Port to bind when using http/sse transport (default: 8000)",
    )
    args = parser.parse_args()

    if args.index:
        try:
            get_index_store().load_file(args.index)
        except (OSError, ValueError) as exc:
            parser.error(f"cannot load index {args.index}: {exc}")

    run_kwargs: dict = {"transport": args.transport, "show_banner": False}
    if args.transport in ("http", "sse"):
        run_kwargs["host"] = args.host
        run_kwargs["port"] = args.port

    # Suppress noisy uvicorn shutdown messages (e.g. "Cancel N running task(s)")
    logging.getLogger("uvicorn.error").setLevel(logging.CRITICAL)

    try:
        mcp.run(**run_kwargs)
    except KeyboardInterrupt:
        pass


if __name__ == "__main__":
    main()
