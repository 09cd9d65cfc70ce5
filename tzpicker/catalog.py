"""Library for an indexed catalog of time zones available for selection.

The catalog is an ordered sequence of `TimeZoneEntry` objects. The position
of an entry in the catalog is its identity everywhere else in the library,
for example a `ResultRow` refers to an entry by index. The catalog also
builds a few indexes once at construction time that are used to answer
queries by country, by whole hour offset from GMT and by display name.

A catalog is never modified after it is created, so it may be shared by
any number of readers.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Sequence
from typing import Optional

from pydantic import BaseModel, ConfigDict, field_validator

from .exceptions import CatalogError

__all__ = [
    "TimeZoneEntry",
    "TimeZoneCatalog",
    "offset_hour",
    "MIN_OFFSET_HOUR",
    "MAX_OFFSET_HOUR",
]

_LOGGER = logging.getLogger(__name__)

MIN_OFFSET_HOUR = -19
MAX_OFFSET_HOUR = 19


class TimeZoneEntry(BaseModel):
    """A single time zone that may be chosen by the user."""

    model_config = ConfigDict(frozen=True)

    id: str
    """The IANA time zone id e.g. America/Los_Angeles."""

    display_name: str
    """The name shown to the user and matched by zone name queries."""

    country: Optional[str] = None
    """The name of the country the zone belongs to, if any."""

    raw_offset_minutes: int = 0
    """The standard (non-DST) offset from GMT in minutes."""

    observes_dst: bool = False
    """True if the zone has daylight saving time transitions."""

    @field_validator("id")
    @classmethod
    def _validate_id(cls, value: str) -> str:
        """Verify the zone id is not blank."""
        if not value or not value.strip():
            raise ValueError("Time zone id must not be empty")
        return value

    @property
    def offset_hour(self) -> int:
        """Return the whole hour offset bucket for this entry."""
        return offset_hour(self.raw_offset_minutes)


def offset_hour(raw_offset_minutes: int) -> int:
    """Return the whole hour of an offset in minutes, truncated toward zero.

    A zone at GMT-3:30 is in the -3 bucket and a zone at GMT+5:45 is in the
    +5 bucket.
    """
    return int(raw_offset_minutes / 60)


class TimeZoneCatalog:
    """An immutable ordered set of time zone entries with lookup indexes."""

    def __init__(
        self,
        entries: Iterable[TimeZoneEntry],
        default_zone_id: str | None = None,
    ) -> None:
        """Initialize TimeZoneCatalog and build the indexes."""
        self._entries: tuple[TimeZoneEntry, ...] = tuple(entries)
        self._by_id: dict[str, int] = {}
        self._by_country: dict[str, list[int]] = {}
        self._by_offset_hour: dict[int, list[int]] = {}
        self._by_name_lower: dict[str, int] = {}
        self._names: list[str] = []

        for index, entry in enumerate(self._entries):
            if entry.id in self._by_id:
                raise CatalogError(f"Duplicate time zone id in catalog: {entry.id}")
            self._by_id[entry.id] = index
            if entry.country is not None:
                self._by_country.setdefault(entry.country, []).append(index)
            hour = entry.offset_hour
            if not MIN_OFFSET_HOUR <= hour <= MAX_OFFSET_HOUR:
                raise CatalogError(
                    f"Offset out of range for {entry.id}: {entry.raw_offset_minutes}"
                )
            self._by_offset_hour.setdefault(hour, []).append(index)
            name_lower = entry.display_name.lower()
            if name_lower not in self._by_name_lower:
                self._by_name_lower[name_lower] = index
                self._names.append(entry.display_name)

        self._countries = sorted(self._by_country)

        self._default_index: int | None = None
        if default_zone_id is not None:
            if (index := self._by_id.get(default_zone_id)) is None:
                raise CatalogError(
                    f"Default time zone is not in the catalog: {default_zone_id}"
                )
            self._default_index = index
        _LOGGER.debug(
            "Built catalog with %d entries, %d countries, default=%s",
            len(self._entries),
            len(self._by_country),
            default_zone_id,
        )

    def __len__(self) -> int:
        return len(self._entries)

    def __getitem__(self, index: int) -> TimeZoneEntry:
        return self._entries[index]

    def __iter__(self) -> Iterator[TimeZoneEntry]:
        return iter(self._entries)

    @property
    def entries(self) -> Sequence[TimeZoneEntry]:
        """Return all entries in catalog order."""
        return self._entries

    @property
    def default_index(self) -> int | None:
        """Return the index of the current/default time zone, if any."""
        return self._default_index

    @property
    def default_zone_id(self) -> str | None:
        """Return the id of the current/default time zone, if any."""
        if self._default_index is None:
            return None
        return self._entries[self._default_index].id

    @property
    def countries(self) -> Sequence[str]:
        """Return the country names in sorted order."""
        return self._countries

    @property
    def names(self) -> Sequence[str]:
        """Return distinct display names in catalog order."""
        return self._names

    def index_of(self, zone_id: str) -> int | None:
        """Return the catalog index for a time zone id."""
        return self._by_id.get(zone_id)

    def index_of_name(self, display_name: str) -> int | None:
        """Return the index of the first entry with a display name, ignoring case."""
        return self._by_name_lower.get(display_name.lower())

    def by_country(self, country: str | None) -> Sequence[int]:
        """Return the indexes of entries in the country, in catalog order."""
        if country is None:
            return []
        return self._by_country.get(country, [])

    def by_offset_hour(self, hour: int) -> Sequence[int]:
        """Return the indexes of entries in the whole hour offset bucket."""
        return self._by_offset_hour.get(hour, [])

    def has_offset_hour(self, hour: int) -> bool:
        """Return True if any entry is in the whole hour offset bucket."""
        return hour in self._by_offset_hour
