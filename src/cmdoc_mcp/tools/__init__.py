"""cmdoc MCP tool implementations."""

from . import (
    complete_command,
    reload_index,
    resolve_doc,
)

__all__ = [
    "complete_command",
    "reload_index",
    "resolve_doc",
]
