"""Resolve a command to a document path.

``locate`` walks standardized tokens to one of three outcomes (document,
suggestions, not found); ``document_path`` then picks the file variant:

    <path>/index.md      directory hit on an ``index`` document
    <path>.detail.md     detail requested and available
    <path>.install.md    install requested and available
    <path>.md            everything else

Detail wins over install when both are requested; a variant that does not
exist falls back to the plain document.
"""

from typing import Optional, Sequence

from cmdoc_mcp.index.models import IndexNode, Variant
from cmdoc_mcp.resolution.results import (
    NotFound,
    Resolution,
    Resolved,
    ResolveOptions,
    ResolveResult,
    Suggestions,
)
from cmdoc_mcp.resolution.standardizer import standardize
from cmdoc_mcp.resolution.tokenizer import tokenize
from cmdoc_mcp.resolution.traversal import descend
from cmdoc_mcp.utils import normalize_input

EXTENSIONS = {
    Variant.BASIC: ".md",
    Variant.DETAIL: ".detail.md",
    Variant.INSTALL: ".install.md",
}
INDEX_FILE_SUFFIX = "/index.md"


def locate(tokens: Sequence[str], root: IndexNode) -> Resolution:
    descent = descend(tokens, root)
    if not descent.exhausted:
        return NotFound()

    path = "/".join(descent.path)
    node = descent.node
    if node.index is not None:
        return Resolved(path=path, node=node.index, is_index_file=True)
    if node.has_variant(Variant.BASIC):
        return Resolved(path=path, node=node)
    return Suggestions(candidates=tuple(node.child_keys()))


def document_path(resolved: Resolved, options: Optional[ResolveOptions] = None) -> str:
    options = options or ResolveOptions()
    if resolved.is_index_file:
        # A root-level index resolves to "index.md" with no leading slash
        return resolved.path + INDEX_FILE_SUFFIX if resolved.path else INDEX_FILE_SUFFIX[1:]
    if options.detail and resolved.node.has_variant(Variant.DETAIL):
        return resolved.path + EXTENSIONS[Variant.DETAIL]
    if options.install and resolved.node.has_variant(Variant.INSTALL):
        return resolved.path + EXTENSIONS[Variant.INSTALL]
    return resolved.path + EXTENSIONS[Variant.BASIC]


def resolve(
    command: str | Sequence[str],
    root: IndexNode,
    options: Optional[ResolveOptions] = None,
) -> ResolveResult:
    """Resolve raw user input to a document path.

    Args:
        command: Raw command string or list of words
        root: Index snapshot root to resolve against
        options: Variant preferences (detail / install)

    Returns:
        ResolveResult; never raises for malformed input

    Example:
        >>> root = node_from_mapping({"array": {"splice": {"__basic": 120}}})
        >>> resolve("array.splcie", root).path
        'array/splice.md'
    """
    tokens = standardize(tokenize(command), root)
    resolution = locate(tokens, root)

    if isinstance(resolution, Resolved):
        return ResolveResult(
            path=document_path(resolution, options),
            exists=True,
            is_index_file=resolution.is_index_file,
            variants=resolution.node.variants(),
        )
    if isinstance(resolution, Suggestions):
        return ResolveResult(
            path="/".join(tokens),
            exists=False,
            suggestions=list(resolution.candidates),
        )

    raw = command if isinstance(command, str) else " ".join(str(word) for word in command)
    return ResolveResult(path=normalize_input(raw), exists=False)
