"""A time zone picker that connects typed queries to the result list.

The picker owns a `SuggestionEngine`, a `ResultComposer` and a
`RecencyStore` for one catalog and routes events between them:

  - Text changes produce suggestions. A query with no suggestions resets
    the result list (to the default list when blank, else to empty).
  - Choosing a suggestion filters the result list.
  - Choosing a result row reports the zone and records it as recent.

Suggestions may be computed off the event loop. Every query is assigned a
sequence number and results are only published for the latest query, so a
slow stale query can never overwrite a newer one.
"""

from __future__ import annotations

import datetime
import itertools
import logging
import threading
from collections.abc import Callable, Sequence
from typing import Optional

from .catalog import TimeZoneCatalog, TimeZoneEntry
from .model import FilterCriterion, FilterType, ResultRow, Suggestion
from .query import normalize_query
from .recent import RecencyStore
from .result import ResultComposer
from .suggestion import SuggestionEngine
from .util import now_factory

__all__ = [
    "TimezonePicker",
    "FilterChosenCallback",
    "ZoneChosenCallback",
]

_LOGGER = logging.getLogger(__name__)

FilterChosenCallback = Callable[[FilterType, Optional[str], int], None]
ZoneChosenCallback = Callable[[TimeZoneEntry], None]


class TimezonePicker:
    """Routes queries and selections for a time zone catalog."""

    def __init__(
        self,
        catalog: TimeZoneCatalog,
        recency: RecencyStore,
        *,
        on_filter_chosen: FilterChosenCallback | None = None,
        on_zone_chosen: ZoneChosenCallback | None = None,
        is_24_hour: bool | None = None,
        now_fn: Callable[[], datetime.datetime] = lambda: now_factory(),
    ) -> None:
        """Initialize TimezonePicker showing the default result list."""
        self._catalog = catalog
        self._recency = recency
        self._on_filter_chosen = on_filter_chosen
        self._on_zone_chosen = on_zone_chosen
        self._engine = SuggestionEngine(catalog)
        self._composer = ResultComposer(
            catalog, recency, is_24_hour=is_24_hour, now_fn=now_fn
        )
        self._sequence = itertools.count(1)
        self._latest = 0
        self._lock = threading.RLock()
        self._suggestions: list[Suggestion] = []
        self._composer.apply(FilterCriterion.none())

    @property
    def suggestions(self) -> Sequence[Suggestion]:
        """Return the suggestions of the latest published query."""
        return self._suggestions

    @property
    def rows(self) -> Sequence[ResultRow]:
        """Return the current result rows."""
        return self._composer.rows

    @property
    def filter_type(self) -> FilterType:
        """Return the type of the filter applied to the result rows."""
        return self._composer.filter_type

    def begin_query(self) -> int:
        """Issue the sequence number for a new query."""
        with self._lock:
            self._latest = next(self._sequence)
            return self._latest

    def filter(self, text: str | None) -> list[Suggestion]:
        """Compute the suggestions for text, safe to call from a worker."""
        return self._engine.filter(text)

    def publish(
        self, sequence: int, text: str | None, suggestions: list[Suggestion]
    ) -> bool:
        """Publish the suggestions computed for a query.

        Returns False, and changes nothing, when a newer query was issued
        after this one.
        """
        with self._lock:
            if sequence != self._latest:
                _LOGGER.debug(
                    "Discarding stale suggestions %d (latest %d)",
                    sequence,
                    self._latest,
                )
                return False
            self._suggestions = suggestions
            if not suggestions:
                if normalize_query(text):
                    criterion = FilterCriterion.empty()
                else:
                    criterion = FilterCriterion.none()
                self._set_filter(criterion)
        return True

    def on_text_changed(self, text: str | None) -> list[Suggestion]:
        """Compute and publish the suggestions for text synchronously."""
        sequence = self.begin_query()
        suggestions = self.filter(text)
        self.publish(sequence, text, suggestions)
        return suggestions

    def choose_suggestion(self, suggestion: Suggestion) -> None:
        """Filter the result list by a chosen suggestion.

        Section headers are not selectable and are ignored.
        """
        if suggestion.shows_section_label:
            return
        self._set_filter(suggestion.criterion())

    def choose_row(self, position: int) -> TimeZoneEntry | None:
        """Choose the result row at position and record it as recent.

        Returns the chosen entry, or None when the row is a label.
        """
        if (index := self._composer.entry_at(position)) is None:
            return None
        entry = self._catalog[index]
        _LOGGER.debug("Time zone chosen: %s", entry.id)
        if self._on_zone_chosen is not None:
            self._on_zone_chosen(entry)
        self._recency.record(entry.id)
        return entry

    def _set_filter(self, criterion: FilterCriterion) -> None:
        with self._lock:
            if self._on_filter_chosen is not None:
                self._on_filter_chosen(criterion.type, criterion.text, criterion.hour)
            self._composer.apply(criterion)
