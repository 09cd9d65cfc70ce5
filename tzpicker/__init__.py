"""
.. include:: ../README.md
"""

__all__ = [
    "catalog",
    "display",
    "exceptions",
    "model",
    "picker",
    "query",
    "recent",
    "result",
    "settings",
    "suggestion",
    "util",
    "zonetab",
]
