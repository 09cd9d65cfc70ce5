"""Library for describing a time zone entry at a specific instant.

These helpers compute the values a host needs to show or match an entry,
such as "(GMT+5:30) Kolkata" or the hour currently shown on a clock in the
zone. Times are computed with `zoneinfo`.
"""

from __future__ import annotations

import datetime
import logging
import zoneinfo
from functools import cache

from .catalog import TimeZoneEntry

__all__ = [
    "DST_SYMBOL",
    "format_gmt_offset",
    "gmt_display_name",
    "local_hour",
    "utc_offset",
]

_LOGGER = logging.getLogger(__name__)

DST_SYMBOL = "☀"

_ZERO = datetime.timedelta(0)


@cache
def _zone(zone_id: str) -> datetime.tzinfo | None:
    """Load and cache the tzinfo for a zone id."""
    try:
        return zoneinfo.ZoneInfo(zone_id)
    except (zoneinfo.ZoneInfoNotFoundError, ValueError):
        _LOGGER.debug("No zoneinfo available for %s", zone_id)
        return None


def _fixed_zone(entry: TimeZoneEntry) -> datetime.tzinfo:
    """Return a fixed offset zone for entries unknown to zoneinfo."""
    return datetime.timezone(datetime.timedelta(minutes=entry.raw_offset_minutes))


def _local_time(entry: TimeZoneEntry, instant: datetime.datetime) -> datetime.datetime:
    """Return the instant as seen on a wall clock in the entry's zone."""
    if instant.tzinfo is None:
        instant = instant.replace(tzinfo=datetime.UTC)
    tzinfo = _zone(entry.id) or _fixed_zone(entry)
    return instant.astimezone(tzinfo)


def utc_offset(entry: TimeZoneEntry, instant: datetime.datetime) -> datetime.timedelta:
    """Return the offset from UTC in effect for the entry at the instant."""
    return _local_time(entry, instant).utcoffset() or _ZERO


def local_hour(entry: TimeZoneEntry, instant: datetime.datetime) -> int:
    """Return the hour (0-23) shown on a clock in the entry's zone at the instant."""
    return _local_time(entry, instant).hour


def format_gmt_offset(offset: datetime.timedelta) -> str:
    """Format an offset as e.g. "(GMT+5:30)" or "(GMT-7)".

    Minutes are only included when not zero.
    """
    parts = ["(GMT"]
    if offset < _ZERO:
        parts.append("-")
        offset = -offset
    else:
        parts.append("+")
    minutes = int(offset.total_seconds()) // 60
    hours, minutes = divmod(minutes, 60)
    parts.append(str(hours))
    if minutes:
        parts.append(f":{minutes:02}")
    parts.append(")")
    return "".join(parts)


def gmt_display_name(entry: TimeZoneEntry, instant: datetime.datetime) -> str:
    """Return the offset and name of an entry e.g. "(GMT-7) Los Angeles ☀".

    The sun symbol marks zones that observe daylight saving time.
    """
    name = f"{format_gmt_offset(utc_offset(entry, instant))} {entry.display_name}"
    if entry.observes_dst:
        return f"{name} {DST_SYMBOL}"
    return name
