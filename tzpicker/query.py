"""Library for parsing free-form time zone queries.

A query may be a GMT offset such as "+5", "-12" or "gmt+3", or the prefix
of a country or time zone name. Offsets accept these formats:

  - [+-]?[0-9][0-9]?
  - gmt[+-]?[0-9][0-9]?

A query that starts with a sign or with "gmt" can only be an offset.
"""

from __future__ import annotations

import re

__all__ = [
    "GMT_PREFIX",
    "normalize_query",
    "split_gmt_prefix",
    "parse_signed_offset",
]

GMT_PREFIX = "gmt"

_SIGNED_OFFSET_RE = re.compile(r"([+-]?)([0-9]{1,2})")


def normalize_query(raw: str | None) -> str:
    """Return the query with whitespace trimmed, in lower case."""
    if raw is None:
        return ""
    return raw.strip().lower()


def split_gmt_prefix(text: str) -> tuple[bool, int]:
    """Return whether the query is offset only, and where the offset starts.

    The text is expected to be normalized already.
    """
    if text.startswith(GMT_PREFIX):
        return True, len(GMT_PREFIX)
    return text.startswith(("+", "-")), 0


def parse_signed_offset(text: str, start_index: int = 0) -> int | None:
    """Parse a signed one or two digit number that runs to the end of text.

    Returns None when the text from start_index does not match the format
    exactly, e.g. a lone sign, a non-digit, a third digit or trailing text.
    """
    if start_index < 0:
        return None
    if not (match := _SIGNED_OFFSET_RE.fullmatch(text, start_index)):
        return None
    sign, digits = match.groups()
    value = int(digits)
    if sign == "-":
        return -value
    return value
