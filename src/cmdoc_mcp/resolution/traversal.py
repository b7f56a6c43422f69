"""Index tree descent.

``descend`` is the one walk shared by suggestion lookup, path resolution and
autocomplete: follow exact child keys until a token fails to match or the
tokens run out. It performs no fuzzy correction; callers standardize first.
"""

from dataclasses import dataclass
from typing import Callable, Optional, Sequence

from cmdoc_mcp.index.models import IndexNode

# Called with (remaining tokens, child just entered) on every successful step
DescendObserver = Callable[[list[str], IndexNode], None]


@dataclass(frozen=True)
class Descent:
    """Where a walk stopped.

    Attributes:
        node: Deepest node reached
        path: Keys followed from the starting node
        stop_token: Token that matched no child, or None when tokens ran out
    """

    node: IndexNode
    path: tuple[str, ...]
    stop_token: str | None

    @property
    def depth(self) -> int:
        return len(self.path)

    @property
    def exhausted(self) -> bool:
        return not self.stop_token


def descend(
    tokens: Sequence[str],
    node: IndexNode,
    on_descend: Optional[DescendObserver] = None,
) -> Descent:
    remaining = list(tokens)
    path: list[str] = []
    while True:
        word = remaining.pop(0) if remaining else None
        child = node.child(word)
        if child is None:
            return Descent(node=node, path=tuple(path), stop_token=word)
        if on_descend is not None:
            on_descend(remaining, child)
        path.append(word)
        node = child


def traverse(
    tokens: Sequence[str],
    node: IndexNode,
    on_descend: Optional[DescendObserver] = None,
) -> list[str]:
    """Return the keys available where the walk stops.

    Keys are filtered to those the stopping token is a case-insensitive
    prefix of; when tokens are exhausted every eligible key is returned.

    Example:
        >>> root = node_from_mapping({"array": {"push": {}, "pop": {}, "map": {}}})
        >>> traverse(["array", "p"], root)
        ['push', 'pop']
    """
    descent = descend(tokens, node, on_descend)
    prefix = (descent.stop_token or "").lower()
    return [key for key in descent.node.child_keys() if key[: len(prefix)].lower() == prefix]
