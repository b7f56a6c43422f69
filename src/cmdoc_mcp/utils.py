"""Validation models and utilities for cmdoc MCP tools."""

from typing import Annotated, Literal, Optional

from pydantic import Field
from pydantic.functional_validators import AfterValidator


# Tab-press counter constraints
MIN_ITERATION = 1
MAX_ITERATION = 100


def normalize_input(value: Optional[str]) -> str:
    """Collapse runs of whitespace; None becomes an empty string."""
    if value is None:
        return ""
    return " ".join(value.split())


def validate_index_path(value: Optional[str]) -> Optional[str]:
    """Validate an optional index file path."""
    if value is None:
        return None
    stripped = value.strip()
    if not stripped:
        return None
    if not stripped.lower().endswith(".json"):
        raise ValueError("index path must point to a .json file")
    return stripped


# Command text (resolution never fails on odd input, so only normalize)
CommandText = Annotated[
    Optional[str],
    AfterValidator(normalize_input),
    Field(
        default=None,
        description=(
            "Command words separated by spaces or dots, loose casing and small "
            "typos allowed. Examples:\n"
            "- None or '': List top-level topics\n"
            "- 'js array': List array topics\n"
            "- 'js array.splice': Array splice document\n"
            "- 'git comit': Corrected to 'git commit'"
        ),
    ),
]

TabIteration = Annotated[
    int,
    Field(
        default=MIN_ITERATION,
        ge=MIN_ITERATION,
        le=MAX_ITERATION,
        description="Consecutive tab presses on the same input (1 = first press)",
    ),
]

MatchStrategy = Annotated[
    Literal["prefix", "first"],
    Field(
        default="prefix",
        description=(
            "How the last word is completed: 'prefix' extends to the longest "
            "common prefix of matches, 'first' takes the first match"
        ),
    ),
]

DetailFlag = Annotated[
    bool,
    Field(default=False, description="Prefer the detailed document variant when available"),
]

InstallFlag = Annotated[
    bool,
    Field(default=False, description="Prefer the installation document variant when available"),
]

IndexPath = Annotated[
    Optional[str],
    AfterValidator(validate_index_path),
    Field(default=None, description="Path to an index.json file. Null reloads the configured index."),
]
