"""Command tokenization.

Turns what the user typed into the flat word list the resolver walks:
whitespace separates words and dots separate path segments, so
``js array.splice()`` and ``js array splice`` produce the same tokens.
"""

from typing import Sequence

# Call and statement punctuation users paste along with names
_STRAY_CHARS = str.maketrans("", "", "();")


def tokenize(command: str | Sequence[str]) -> list[str]:
    """Split a raw command into normalized tokens.

    Args:
        command: Raw command string, or a list of words taken verbatim

    Returns:
        Ordered tokens; never fewer than the number of input words

    Example:
        >>> tokenize("js Array.splice();")
        ['js', 'Array', 'splice']
        >>> tokenize("")
        ['']
    """
    if isinstance(command, str):
        words = command.split() or [""]
    else:
        words = [str(word) for word in command]

    tokens: list[str] = []
    for word in words:
        for part in word.split("."):
            tokens.append(part.translate(_STRAY_CHARS).strip())
    return tokens
