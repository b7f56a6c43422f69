"""Command resolution and autocomplete engine.

Pipeline: tokenize -> standardize -> traverse / locate.

Public entry points:
    - resolve: Raw input -> document path, suggestions, or not found
    - complete: Raw input + tab-press count -> completed line or candidate list
"""

from cmdoc_mcp.resolution.autocomplete import complete
from cmdoc_mcp.resolution.matching import (
    MATCH_STRATEGIES,
    MatchFn,
    first_match,
    longest_common_prefix,
)
from cmdoc_mcp.resolution.path_resolver import document_path, locate, resolve
from cmdoc_mcp.resolution.results import (
    NotFound,
    Resolution,
    Resolved,
    ResolveOptions,
    ResolveResult,
    Suggestions,
)
from cmdoc_mcp.resolution.standardizer import KeyMatch, closest_key, standardize
from cmdoc_mcp.resolution.tokenizer import tokenize
from cmdoc_mcp.resolution.traversal import Descent, descend, traverse

__all__ = [
    # Entry points
    "resolve",
    "complete",
    # Pipeline stages
    "tokenize",
    "standardize",
    "closest_key",
    "descend",
    "traverse",
    "locate",
    "document_path",
    # Match strategies
    "MATCH_STRATEGIES",
    "MatchFn",
    "first_match",
    "longest_common_prefix",
    # Models
    "Descent",
    "KeyMatch",
    "NotFound",
    "Resolution",
    "Resolved",
    "ResolveOptions",
    "ResolveResult",
    "Suggestions",
]
