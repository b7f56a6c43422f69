"""Document Resolve Tool - Turn a loosely typed command into a document."""

from typing import Any

from fastmcp import FastMCP

from cmdoc_mcp.config import get_index_config
from cmdoc_mcp.contracts import (
    DocumentData,
    DocumentSummary,
    NotFoundDetails,
    ResolvedEntry,
    TopicEntry,
    TopicsData,
    TopicsSummary,
    build_error,
    build_ok,
)
from cmdoc_mcp.documents import read_document
from cmdoc_mcp.index import get_index_store
from cmdoc_mcp.resolution import ResolveOptions, resolve
from cmdoc_mcp.utils import CommandText, DetailFlag, InstallFlag


def register(mcp: FastMCP) -> None:
    """Register doc_resolve tool with the MCP server."""

    @mcp.tool()
    def doc_resolve(
        command: CommandText = None,
        detail: DetailFlag = False,
        install: InstallFlag = False,
    ) -> dict[str, Any]:
        """Resolve a command phrase to its document (like cd + cat).

        Casing and small typos are corrected against the index, dots work as
        separators ("js array.splice" == "js array splice").

        Outcomes:
        - Document found: path, available variants and (optionally) content
        - Directory without a document: list of next-level topics
        - Nothing matches: document_not_found error

        Related tools:
        - doc_complete: Complete a partially typed command
        - doc_reload_index: Load a new index snapshot
        """
        snapshot = get_index_store().current()
        result = resolve(command or "", snapshot.root, ResolveOptions(detail=detail, install=install))

        if result.exists:
            content = None
            if get_index_config().include_content:
                content = read_document(result.path)
            entry = ResolvedEntry(
                path=result.path,
                is_index_file=result.is_index_file,
                variants=result.variants,
                content=content,
            )
            return build_ok(
                DocumentData(
                    entries=[entry],
                    summary=DocumentSummary(generation=snapshot.generation),
                )
            )

        if result.suggestions is not None:
            limit = get_index_config().max_suggestions
            suggestions = result.suggestions[:limit]
            return build_ok(
                TopicsData(
                    entries=[TopicEntry(name=name) for name in suggestions],
                    summary=TopicsSummary(
                        count=len(suggestions),
                        total=len(result.suggestions),
                        path=result.path,
                        generation=snapshot.generation,
                    ),
                )
            )

        return build_error(
            code="document_not_found",
            message=f"No document matches '{result.path}'.",
            details=NotFoundDetails(
                input={"command": command or ""},
                path=result.path,
                top_level=snapshot.root.child_keys(),
            ),
        )
