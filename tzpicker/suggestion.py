"""Library for building live suggestions while a time zone query is typed.

Each call to `SuggestionEngine.filter` returns the rows of the drop down
for the text typed so far. Rows are grouped in sections, each preceded by
a header row:

  - GMT offsets, when the query parses as an offset
  - Countries whose name starts with the query
  - Time zones whose display name starts with the query

The sections are always returned in that order and a section with no
matches does not get a header.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from .catalog import TimeZoneCatalog
from .model import FilterType, Suggestion
from .query import normalize_query, parse_signed_offset, split_gmt_prefix

__all__ = [
    "SuggestionEngine",
    "build_gmt_suggestions",
]

_LOGGER = logging.getLogger(__name__)

# Typing "1" is ambiguous until a second digit arrives, so it also offers
# every two digit offset that starts with 1.
_TEENS_HIGH = 19
_TEENS_LOW = 10


def _gmt_suggestion(hour: int) -> Suggestion:
    """Create a selectable suggestion for a whole hour GMT offset."""
    sign = "+" if hour >= 0 else "-"
    return Suggestion(
        FilterType.GMT_OFFSET,
        constraint=f"GMT{sign}{abs(hour)}",
        hour=hour,
    )


def build_gmt_suggestions(
    catalog: TimeZoneCatalog, num: int, positive_only: bool = False
) -> list[Suggestion]:
    """Return the GMT offset section for a parsed number.

    Only offsets with at least one zone in the catalog are suggested. The
    header is omitted when nothing else is.
    """
    results = [Suggestion.header(FilterType.GMT_OFFSET)]

    if num >= 0:
        if num == 1:
            for hour in range(_TEENS_HIGH, _TEENS_LOW - 1, -1):
                if catalog.has_offset_hour(hour):
                    results.append(_gmt_suggestion(hour))
        if catalog.has_offset_hour(num):
            results.append(_gmt_suggestion(num))
        num = -num

    if not positive_only and num != 0:
        if catalog.has_offset_hour(num):
            results.append(_gmt_suggestion(num))
        if num == -1:
            for hour in range(-_TEENS_LOW, -_TEENS_HIGH - 1, -1):
                if catalog.has_offset_hour(hour):
                    results.append(_gmt_suggestion(hour))

    if len(results) == 1:
        return []
    return results


def _prefix_suggestions(
    filter_type: FilterType, candidates: Iterable[str], prefix: str
) -> list[Suggestion]:
    """Return a section of leaves for every candidate starting with prefix."""
    results: list[Suggestion] = []
    for candidate in candidates:
        if not candidate.lower().startswith(prefix):
            continue
        if not results:
            results.append(Suggestion.header(filter_type))
        results.append(Suggestion(filter_type, constraint=candidate))
    return results


class SuggestionEngine:
    """Builds the suggestion rows for a query against a catalog."""

    def __init__(self, catalog: TimeZoneCatalog) -> None:
        """Initialize SuggestionEngine."""
        self._catalog = catalog

    def filter(self, raw_prefix: str | None) -> list[Suggestion]:
        """Return the suggestions for the text typed so far.

        An empty list for blank text means nothing was typed, which is
        distinct from a query that had no matches.
        """
        prefix = normalize_query(raw_prefix)
        if not prefix:
            return []
        _LOGGER.debug("Filtering suggestions for [%s]", prefix)

        gmt_only, start = split_gmt_prefix(prefix)
        results: list[Suggestion] = []
        if (num := parse_signed_offset(prefix, start)) is not None:
            positive_only = prefix[start : start + 1] == "+"
            results.extend(build_gmt_suggestions(self._catalog, num, positive_only))
            # TODO: Match the number against local clock hours when not
            # gmt_only, producing LOCAL_HOUR suggestions.
        _LOGGER.debug("Parsed [%s] as offset %s (gmt_only=%s)", prefix, num, gmt_only)

        results.extend(
            _prefix_suggestions(FilterType.COUNTRY, self._catalog.countries, prefix)
        )
        results.extend(
            _prefix_suggestions(FilterType.ZONE_NAME, self._catalog.names, prefix)
        )
        _LOGGER.debug("Found %d suggestions for [%s]", len(results), prefix)
        return results
