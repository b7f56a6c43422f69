"""Tab completion against the document index.

Behaviour across repeated tab presses on the same input:
    - first press extends the last word when the match strategy can do so
      unambiguously, otherwise leaves the line as is
    - second and later presses list all candidates when there are several,
      or step into the only child when there is exactly one
"""

import logging
from typing import Sequence

from cmdoc_mcp.index.models import IndexNode
from cmdoc_mcp.resolution.matching import MatchFn, longest_common_prefix
from cmdoc_mcp.resolution.standardizer import standardize
from cmdoc_mcp.resolution.tokenizer import tokenize
from cmdoc_mcp.resolution.traversal import traverse

logger = logging.getLogger("cmdoc-mcp.resolution")


def complete(
    command: str | Sequence[str],
    iteration: int,
    root: IndexNode,
    match_fn: MatchFn = longest_common_prefix,
) -> str | list[str]:
    """Complete a partially typed command.

    Args:
        command: Current input line
        iteration: Number of consecutive tab presses on this input (1-based)
        root: Index snapshot root
        match_fn: Strategy choosing the completion for the last word

    Returns:
        The new input line, or the list of candidates to display

    Example:
        >>> root = node_from_mapping({"array": {"push": {}, "pop": {}}})
        >>> complete("arr", 1, root)
        'array '
        >>> complete("array.p", 2, root)
        ['push', 'pop']
    """
    commands = standardize(tokenize(command), root)
    last_word = commands[-1].strip() if commands else ""
    other_words = commands[:-1]

    levels = 0

    def count_level(remaining: list[str], node: IndexNode) -> None:
        nonlocal levels
        levels += 1

    candidates = traverse(commands, root, on_descend=count_level)
    match = match_fn(last_word, candidates)
    exact_match = last_word in candidates
    logger.debug(
        "complete %r: levels=%d candidates=%d match=%r exact=%s iteration=%d",
        commands,
        levels,
        len(candidates),
        match,
        exact_match,
        iteration,
    )

    # A fully matched last word is already complete; only extend partial words
    if match and levels != len(other_words) + 1:
        space = " " if match.strip() in candidates else ""
        return f"{' '.join(other_words)} {match}".strip() + space

    space = " " if levels == len(other_words) + 1 else ""
    original = " ".join(commands) + space
    if iteration > 1 and len(candidates) > 1:
        return candidates
    if iteration > 1 and len(candidates) == 1 and levels != len(other_words):
        return original + candidates[0] + " "
    return original
