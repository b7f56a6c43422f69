"""cmdoc MCP - fuzzy command lookup and tab completion over a document index."""

__version__ = "0.1.0"
