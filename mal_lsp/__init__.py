"""mal Language Server package.

This package provides:
- A pygls-based Language Server for the mal dialect.
- A lightweight indexer that reads each line of a document without evaluating it.

Note: The LSP does not evaluate user buffers; it builds a static index from text.
"""

__all__ = [
    "server",
    "indexer",
]
