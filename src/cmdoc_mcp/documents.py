"""Document content loading.

Reads resolved markdown documents from the configured docs root with
caching. The cache is tied to the index generation: the server clears it
whenever a new index snapshot is swapped in.
"""

import logging
from functools import lru_cache

from cmdoc_mcp.config import get_index_config

logger = logging.getLogger("cmdoc-mcp.server")


@lru_cache(maxsize=128)
def read_document(relative_path: str) -> str | None:
    """Return the text of a document under the docs root, or None.

    None covers a missing file, an unreadable one, and one that is not UTF-8.

    Args:
        relative_path: Path as produced by ``resolve`` (e.g. "js/array/splice.md")
    """
    docs_root = get_index_config().docs_root.resolve()
    doc_path = (docs_root / relative_path).resolve()
    if not doc_path.is_relative_to(docs_root) or not doc_path.is_file():
        return None

    try:
        with open(doc_path, encoding="utf-8") as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as exc:
        logger.warning("Cannot read document %s: %s", doc_path, exc)
        return None


def clear_document_cache() -> None:
    read_document.cache_clear()
