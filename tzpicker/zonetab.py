"""Library for building a time zone catalog from the tz database.

The tz database ships tables that map time zones to countries:

  - iso3166.tab: two letter country codes and country names
  - zone.tab: one line per country and zone, so every country has a zone
  - zone1970.tab: one line per zone with the codes of the countries using it

zone.tab is preferred since zone1970.tab merges zones that have agreed
since 1970, leaving countries such as Norway without a zone of their own.
zone1970.tab is only used when zone.tab is missing.

This package follows the same approach as zoneinfo for loading the tables.
It first checks the tzdata python package, then falls back to the system
TZPATH.
"""

from __future__ import annotations

import datetime
import logging
import os
import zoneinfo
from collections.abc import Iterable
from functools import cache
from importlib import resources

from .catalog import TimeZoneCatalog, TimeZoneEntry
from .exceptions import CatalogError
from .util import now_factory

__all__ = [
    "load_catalog",
    "make_entry",
    "parse_iso3166",
    "parse_zone_tab",
    "display_name_for",
]

_LOGGER = logging.getLogger(__name__)

ISO3166_TAB = "iso3166.tab"
ZONE_TABS = ("zone.tab", "zone1970.tab")

_ZERO = datetime.timedelta(0)


def _data_lines(text: str) -> Iterable[list[str]]:
    """Yield the tab separated fields of every non-comment line."""
    for line in text.splitlines():
        if not line.strip() or line.startswith("#"):
            continue
        yield line.rstrip("\n").split("\t")


def parse_iso3166(text: str) -> dict[str, str]:
    """Parse iso3166.tab contents into a map of country code to name."""
    countries: dict[str, str] = {}
    for fields in _data_lines(text):
        if len(fields) < 2:
            _LOGGER.debug("Skipping malformed iso3166 line: %s", fields)
            continue
        countries[fields[0].strip()] = fields[1].strip()
    return countries


def parse_zone_tab(text: str) -> list[tuple[str, str]]:
    """Parse zone.tab or zone1970.tab contents into (country code, zone id) pairs.

    When several countries share a zone, the first country code is used.
    """
    zones: list[tuple[str, str]] = []
    for fields in _data_lines(text):
        if len(fields) < 3:
            _LOGGER.debug("Skipping malformed zone line: %s", fields)
            continue
        country_code = fields[0].split(",")[0].strip()
        zones.append((country_code, fields[2].strip()))
    return zones


def display_name_for(zone_id: str) -> str:
    """Return a name for a zone id e.g. "Buenos Aires" for America/Argentina/Buenos_Aires."""
    return zone_id.rsplit("/", 1)[-1].replace("_", " ")


@cache
def _read_tab(name: str) -> str | None:
    """Read a tz database table from the tzdata package or the system TZPATH."""
    try:
        return (
            resources.files("tzdata")
            .joinpath("zoneinfo", name)
            .read_text(encoding="utf-8")
        )
    except (ModuleNotFoundError, FileNotFoundError):
        _LOGGER.debug("Table %s not found in tzdata package", name)

    for search_path in zoneinfo.TZPATH:
        filepath = os.path.join(search_path, name)
        if os.path.isfile(filepath):
            with open(filepath, encoding="utf-8") as tab_file:
                return tab_file.read()
    return None


def _read_zone_tab() -> str:
    for name in ZONE_TABS:
        if (text := _read_tab(name)) is not None:
            return text
    raise CatalogError(f"Unable to find time zone tables: {', '.join(ZONE_TABS)}")


def make_entry(
    zone_id: str, country: str | None, now: datetime.datetime
) -> TimeZoneEntry | None:
    """Create a catalog entry for a zone, or None if zoneinfo can't load it.

    The standard offset and whether the zone observes daylight saving time
    are determined by sampling each month of the year of `now`.
    """
    try:
        tzinfo = zoneinfo.ZoneInfo(zone_id)
    except (zoneinfo.ZoneInfoNotFoundError, ValueError):
        _LOGGER.debug("Unable to load time zone: %s", zone_id)
        return None

    std_offsets: list[datetime.timedelta] = []
    observes_dst = False
    for month in range(1, 13):
        sample = datetime.datetime(now.year, month, 1, 12, tzinfo=tzinfo)
        offset = sample.utcoffset() or _ZERO
        dst = sample.dst() or _ZERO
        if dst:
            observes_dst = True
        # Zones with negative DST, like Europe/Dublin, observe it in winter
        std_offsets.append(offset - max(dst, _ZERO))
    raw_offset = min(std_offsets)
    return TimeZoneEntry(
        id=zone_id,
        display_name=display_name_for(zone_id),
        country=country,
        raw_offset_minutes=int(raw_offset.total_seconds()) // 60,
        observes_dst=observes_dst,
    )


def load_catalog(
    default_zone_id: str | None = None,
    *,
    now: datetime.datetime | None = None,
) -> TimeZoneCatalog:
    """Build a catalog of all zones listed in the tz database tables.

    Entries are ordered by standard offset, then display name. A default
    zone that is not in the tables is added when zoneinfo can load it, and
    otherwise the catalog has no default.
    """
    if now is None:
        now = now_factory()
    iso_text = _read_tab(ISO3166_TAB)
    if iso_text is None:
        raise CatalogError(f"Unable to find time zone table: {ISO3166_TAB}")
    countries = parse_iso3166(iso_text)

    entries: dict[str, TimeZoneEntry] = {}
    for country_code, zone_id in parse_zone_tab(_read_zone_tab()):
        if zone_id in entries:
            continue
        country = countries.get(country_code, country_code)
        if (entry := make_entry(zone_id, country, now)) is not None:
            entries[zone_id] = entry

    if default_zone_id is not None and default_zone_id not in entries:
        if (entry := make_entry(default_zone_id, None, now)) is not None:
            entries[default_zone_id] = entry
        else:
            _LOGGER.warning("Ignoring unknown default time zone: %s", default_zone_id)
            default_zone_id = None

    ordered = sorted(
        entries.values(), key=lambda e: (e.raw_offset_minutes, e.display_name)
    )
    _LOGGER.debug("Loaded %d time zones from tz database", len(ordered))
    return TimeZoneCatalog(ordered, default_zone_id)
