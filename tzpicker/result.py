"""Library for composing the list of time zones shown for a filter.

The `ResultComposer` turns a `FilterCriterion` into the ordered rows of the
result list. Rows are catalog indexes, with section labels in between where
the list is grouped. With no filter the list shows the current time zone
followed by the recently chosen time zones, most recent first:

    CURRENT, <default>, RECENT, <newest>, ..., <oldest>

Every call recomputes the rows from the catalog and the recent time zones.
"""

from __future__ import annotations

import datetime
import logging
from collections.abc import Callable, Sequence

from .catalog import TimeZoneCatalog
from .display import local_hour
from .exceptions import FilterTypeError
from .model import FilterCriterion, FilterType, ResultRow, RowLabel
from .recent import RecencyStore
from .settings import is_24_hour_format
from .util import now_factory

__all__ = [
    "ResultComposer",
]

_LOGGER = logging.getLogger(__name__)

_NOON = 12


def _matches_hour(hour: int, local_hr: int, is_24_hour: bool) -> bool:
    """Return True if a typed hour matches the local hour of a zone.

    A 12-hour clock reads 2 for both 2:00 and 14:00, and 12 for midnight.
    """
    if local_hr == hour:
        return True
    if is_24_hour:
        return False
    return hour + _NOON == local_hr or (hour == _NOON and local_hr == 0)


class ResultComposer:
    """Composes the result rows for a filter criterion."""

    def __init__(
        self,
        catalog: TimeZoneCatalog,
        recency: RecencyStore,
        *,
        is_24_hour: bool | None = None,
        now_fn: Callable[[], datetime.datetime] = lambda: now_factory(),
    ) -> None:
        """Initialize ResultComposer.

        The clock format defaults to the `tzpicker.settings` value at the
        time rows are composed.
        """
        self._catalog = catalog
        self._recency = recency
        self._is_24_hour = is_24_hour
        self._now_fn = now_fn
        self._filter_type = FilterType.NONE
        self._rows: list[ResultRow] = []

    @property
    def filter_type(self) -> FilterType:
        """Return the type of the last applied filter."""
        return self._filter_type

    @property
    def rows(self) -> Sequence[ResultRow]:
        """Return the rows of the last applied filter."""
        return self._rows

    @property
    def max_rows(self) -> int:
        """Return the largest number of rows any filter can produce."""
        return len(self._catalog) + 3 + self._recency.max_recent

    def __len__(self) -> int:
        return len(self._rows)

    def __getitem__(self, position: int) -> ResultRow:
        return self._rows[position]

    def entry_at(self, position: int) -> int | None:
        """Return the catalog index at a position, or None for labels."""
        if position < 0 or position >= len(self._rows):
            return None
        return self._rows[position].index

    def recent_count_after(self, position: int) -> int:
        """Return the number of rows following a position."""
        return max(len(self._rows) - position - 1, 0)

    def apply(self, criterion: FilterCriterion) -> list[ResultRow]:
        """Compose and return the rows for the criterion."""
        _LOGGER.debug(
            "Applying filter: %s [%s] %s",
            criterion.type,
            criterion.text,
            criterion.hour,
        )
        rows: list[ResultRow]
        if criterion.type in (FilterType.EMPTY, FilterType.STATE):
            # Filtering by state is not supported
            rows = []
        elif criterion.type == FilterType.NONE:
            rows = self._current_and_recents()
        elif criterion.type == FilterType.GMT_OFFSET:
            rows = self._entries(self._catalog.by_offset_hour(criterion.hour))
        elif criterion.type == FilterType.LOCAL_HOUR:
            rows = self._local_hour(criterion.hour)
        elif criterion.type == FilterType.ZONE_NAME:
            rows = self._zone_name(criterion.text)
        elif criterion.type == FilterType.COUNTRY:
            rows = self._entries(self._catalog.by_country(criterion.text))
        else:
            raise FilterTypeError(f"Unknown filter type: {criterion.type!r}")
        self._filter_type = criterion.type
        self._rows = rows
        return list(rows)

    @staticmethod
    def _entries(indices: Sequence[int]) -> list[ResultRow]:
        return [ResultRow.entry(index) for index in indices]

    def _current_and_recents(self) -> list[ResultRow]:
        """Return the current time zone followed by the recent time zones."""
        rows: list[ResultRow] = []
        default_index = self._catalog.default_index
        if default_index is not None:
            rows.append(ResultRow.label(RowLabel.CURRENT))
            rows.append(ResultRow.entry(default_index))

        default_id = self._catalog.default_zone_id
        recent_rows: list[ResultRow] = []
        for zone_id in self._recency.newest_first():
            if zone_id == default_id:
                continue
            if (index := self._catalog.index_of(zone_id)) is None:
                _LOGGER.debug("Skipping unknown recent time zone: %s", zone_id)
                continue
            recent_rows.append(ResultRow.entry(index))
        if recent_rows:
            rows.append(ResultRow.label(RowLabel.RECENT))
            rows.extend(recent_rows)
        return rows

    def _local_hour(self, hour: int) -> list[ResultRow]:
        """Return zones whose local clock currently shows the hour."""
        is_24_hour = self._is_24_hour
        if is_24_hour is None:
            is_24_hour = is_24_hour_format()
        now = self._now_fn()
        return [
            ResultRow.entry(index)
            for index, entry in enumerate(self._catalog)
            if _matches_hour(hour, local_hour(entry, now), is_24_hour)
        ]

    def _zone_name(self, text: str | None) -> list[ResultRow]:
        """Return zones with the display name, ignoring case."""
        if text is None:
            return []
        name = text.lower()
        return [
            ResultRow.entry(index)
            for index, entry in enumerate(self._catalog)
            if entry.display_name.lower() == name
        ]
