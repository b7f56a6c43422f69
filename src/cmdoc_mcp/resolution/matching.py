"""Match-selection strategies for tab completion.

A strategy receives the word being completed and the candidate keys at the
current level, and returns the text to complete to, or None when it cannot
extend the word.
"""

import os
from typing import Callable, Optional, Sequence

MatchFn = Callable[[str, Sequence[str]], Optional[str]]


def _starting_with(word: str, candidates: Sequence[str]) -> list[str]:
    prefix = word.lower()
    return [c for c in candidates if c[: len(prefix)].lower() == prefix]


def longest_common_prefix(word: str, candidates: Sequence[str]) -> Optional[str]:
    """Complete to the longest prefix shared by all matching candidates.

    Example:
        >>> longest_common_prefix("sp", ["splice", "split", "push"])
        'spli'
        >>> longest_common_prefix("p", ["push", "pop"]) is None
        True
    """
    matches = _starting_with(word, candidates)
    if not matches:
        return None
    if len(matches) == 1:
        return matches[0]
    prefix = os.path.commonprefix(matches)
    return prefix if len(prefix) > len(word) else None


def first_match(word: str, candidates: Sequence[str]) -> Optional[str]:
    """Complete to the first candidate the word is a prefix of."""
    matches = _starting_with(word, candidates)
    return matches[0] if matches else None


MATCH_STRATEGIES: dict[str, MatchFn] = {
    "prefix": longest_common_prefix,
    "first": first_match,
}
