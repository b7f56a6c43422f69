"""Runtime configuration for the cmdoc MCP server."""

from dataclasses import dataclass
from pathlib import Path
import os

# Bundled sample index and documents (version-controlled)
_RESOURCES_DIR = Path(__file__).parent / "resources"
DEFAULT_INDEX_PATH = _RESOURCES_DIR / "index.json"
DEFAULT_DOCS_ROOT = _RESOURCES_DIR / "docs"

DEFAULT_MAX_SUGGESTIONS = 50


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _env_int(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        return default


def _env_path(name: str, default: Path) -> Path:
    value = os.getenv(name)
    if not value or not value.strip():
        return default
    return Path(value.strip()).expanduser()


@dataclass(frozen=True)
class IndexConfig:
    index_path: Path
    docs_root: Path
    include_content: bool
    max_suggestions: int


def get_index_config() -> IndexConfig:
    """Load index config from environment variables."""
    return IndexConfig(
        index_path=_env_path("CMDOC_MCP_INDEX_PATH", DEFAULT_INDEX_PATH),
        docs_root=_env_path("CMDOC_MCP_DOCS_ROOT", DEFAULT_DOCS_ROOT),
        include_content=_env_bool("CMDOC_MCP_INCLUDE_CONTENT", True),
        max_suggestions=max(1, _env_int("CMDOC_MCP_MAX_SUGGESTIONS", DEFAULT_MAX_SUGGESTIONS)),
    )
