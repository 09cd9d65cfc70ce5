"""Utility methods used by multiple components."""

from __future__ import annotations

import datetime

__all__ = [
    "now_factory",
]


def now_factory() -> datetime.datetime:
    """Factory method for the current instant to facilitate mocking."""
    return datetime.datetime.now(tz=datetime.UTC)
