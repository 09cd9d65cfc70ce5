"""Test fixtures."""

import pytest

from tzpicker.catalog import TimeZoneCatalog, TimeZoneEntry
from tzpicker.recent import MemoryPreferences, RecencyStore

ENTRIES = [
    TimeZoneEntry(
        id="Pacific/Honolulu",
        display_name="Honolulu",
        country="United States",
        raw_offset_minutes=-600,
    ),
    TimeZoneEntry(
        id="America/Los_Angeles",
        display_name="Los Angeles",
        country="United States",
        raw_offset_minutes=-480,
        observes_dst=True,
    ),
    TimeZoneEntry(
        id="America/New_York",
        display_name="New York",
        country="United States",
        raw_offset_minutes=-300,
        observes_dst=True,
    ),
    TimeZoneEntry(
        id="America/Toronto",
        display_name="Toronto",
        country="Canada",
        raw_offset_minutes=-300,
        observes_dst=True,
    ),
    TimeZoneEntry(
        id="America/St_Johns",
        display_name="St Johns",
        country="Canada",
        raw_offset_minutes=-210,
        observes_dst=True,
    ),
    TimeZoneEntry(id="UTC", display_name="UTC"),
    TimeZoneEntry(
        id="Europe/London",
        display_name="London",
        country="United Kingdom",
        observes_dst=True,
    ),
    TimeZoneEntry(
        id="Europe/Paris",
        display_name="Paris",
        country="France",
        raw_offset_minutes=60,
        observes_dst=True,
    ),
    TimeZoneEntry(
        id="Asia/Kolkata",
        display_name="Kolkata",
        country="India",
        raw_offset_minutes=330,
    ),
    TimeZoneEntry(
        id="Asia/Tokyo",
        display_name="Tokyo",
        country="Japan",
        raw_offset_minutes=540,
    ),
    TimeZoneEntry(
        id="Australia/Sydney",
        display_name="Sydney",
        country="Australia",
        raw_offset_minutes=600,
        observes_dst=True,
    ),
    TimeZoneEntry(
        id="Pacific/Auckland",
        display_name="Auckland",
        country="New Zealand",
        raw_offset_minutes=720,
        observes_dst=True,
    ),
    TimeZoneEntry(
        id="Pacific/Kiritimati",
        display_name="Kiritimati",
        country="Kiribati",
        raw_offset_minutes=840,
    ),
]

DEFAULT_ZONE_ID = "America/Los_Angeles"


@pytest.fixture(name="entries")
def mock_entries() -> list[TimeZoneEntry]:
    """Fixture for the entries in the test catalog."""
    return list(ENTRIES)


@pytest.fixture(name="catalog")
def mock_catalog(entries: list[TimeZoneEntry]) -> TimeZoneCatalog:
    """Fixture to create a catalog with a default time zone."""
    return TimeZoneCatalog(entries, DEFAULT_ZONE_ID)


@pytest.fixture(name="preferences")
def mock_preferences() -> MemoryPreferences:
    """Fixture for an in memory preferences store."""
    return MemoryPreferences()


@pytest.fixture(name="recency")
def mock_recency(preferences: MemoryPreferences) -> RecencyStore:
    """Fixture to create a recent time zone store."""
    return RecencyStore(preferences)
