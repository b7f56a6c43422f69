"""Token standardization against the document index.

Each token is compared with the keys available at the current level using
Levenshtein distance. A token is replaced by its closest key only when the
match is unambiguous enough, so ``Array splcie`` becomes ``array splice``
while a near-tie between two keys leaves the token as typed.

Correction rules (distance is case-insensitive; gap is second-best distance
minus best distance):
    - distance 0: always adopt the key (casing fix)
    - distance 1: adopt when gap > 3
    - distance 2: adopt when gap > 5 and the key is longer than 5 characters
"""

import logging
from dataclasses import dataclass
from typing import Optional, Sequence

from rapidfuzz.distance import Levenshtein

from cmdoc_mcp.index.models import INDEX_KEY, IndexNode
from cmdoc_mcp.resolution.traversal import DescendObserver

logger = logging.getLogger("cmdoc-mcp.resolution")

# Distance reported when there is no candidate (or no runner-up)
NO_MATCH_DISTANCE = 1000

NEAR_DISTANCE = 1
NEAR_MIN_GAP = 3
FAR_DISTANCE = 2
FAR_MIN_GAP = 5
FAR_MIN_KEY_LENGTH = 5


@dataclass(frozen=True)
class KeyMatch:
    key: str | None
    distance: int
    gap: int


def closest_key(word: str, node: IndexNode) -> KeyMatch:
    """Find the closest child key to ``word`` and its lead over the runner-up."""
    needle = word.strip().lower()
    best_key: str | None = None
    best = NO_MATCH_DISTANCE
    second = NO_MATCH_DISTANCE

    for key in node.children:
        if key.strip().lower() == INDEX_KEY:
            continue
        distance = Levenshtein.distance(needle, key.strip().lower())
        if distance < best:
            second = best
            best = distance
            best_key = key
        elif distance < second:
            second = distance

    return KeyMatch(key=best_key, distance=best, gap=second - best)


def should_adopt(match: KeyMatch) -> bool:
    if match.key is None:
        return False
    if match.distance == 0:
        return True
    if match.distance == NEAR_DISTANCE and match.gap > NEAR_MIN_GAP:
        return True
    return (
        match.distance == FAR_DISTANCE
        and match.gap > FAR_MIN_GAP
        and len(match.key) > FAR_MIN_KEY_LENGTH
    )


def standardize(
    tokens: Sequence[str],
    node: IndexNode,
    on_descend: Optional[DescendObserver] = None,
) -> list[str]:
    """Correct tokens to index keys level by level.

    Walking stops at the first token that is not (or cannot be corrected to)
    a key at its level; that token is kept as typed when non-empty and any
    tokens after it are dropped.

    Args:
        tokens: Tokens from ``tokenize``
        node: Node to start from, usually the index root
        on_descend: Called with (remaining tokens, child) for every level entered

    Returns:
        Standardized tokens

    Example:
        >>> root = node_from_mapping({"array": {"splice": {"__basic": 120}}})
        >>> standardize(["Array", "splcie"], root)
        ['array', 'splice']
    """
    remaining = list(tokens)
    results: list[str] = []

    while True:
        word = remaining.pop(0) if remaining else ""

        if word.strip():
            match = closest_key(word, node)
            if should_adopt(match) and match.key is not None:
                if match.key != word:
                    logger.debug(
                        "Corrected %r -> %r (distance=%d, gap=%d)",
                        word,
                        match.key,
                        match.distance,
                        match.gap,
                    )
                word = match.key

        child = node.child(word)
        if child is None:
            if word:
                results.append(word)
            return results

        if on_descend is not None:
            on_descend(remaining, child)
        results.append(word)
        node = child
