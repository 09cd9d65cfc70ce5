"""Library for remembering the time zones most recently chosen by the user.

The recent time zones are kept in a simple string key/value store owned by
the host application, such as a preferences file. The value is a comma
separated list of time zone ids, oldest first, e.g.:

    America/New_York,Europe/Paris,Asia/Tokyo

Choosing a zone that is already in the list moves it to the end instead of
adding a duplicate, and the oldest zone is dropped once the list is full.
"""

from __future__ import annotations

import contextlib
import json
import logging
import os
import pathlib
import tempfile
import threading
from typing import Protocol

from .exceptions import PreferencesError

__all__ = [
    "KeyValueStore",
    "MemoryPreferences",
    "JsonFilePreferences",
    "RecencyStore",
    "MAX_RECENT_TIMEZONES",
    "RECENT_TIMEZONES_KEY",
]

_LOGGER = logging.getLogger(__name__)

PREFERENCES_NAME = "tzpicker_preferences"
RECENT_TIMEZONES_NAME = "preferences_recent_timezones"
RECENT_TIMEZONES_KEY = f"{PREFERENCES_NAME}/{RECENT_TIMEZONES_NAME}"
RECENT_TIMEZONES_DELIMITER = ","
MAX_RECENT_TIMEZONES = 3


class KeyValueStore(Protocol):
    """A string key/value store used to persist preferences."""

    def get(self, key: str) -> str | None:
        """Return the value for the key, or None if not set."""

    def put(self, key: str, value: str) -> None:
        """Set the value for the key."""


class MemoryPreferences:
    """A key/value store that only lives in memory."""

    def __init__(self, values: dict[str, str] | None = None) -> None:
        self._values = dict(values or {})

    def get(self, key: str) -> str | None:
        return self._values.get(key)

    def put(self, key: str, value: str) -> None:
        self._values[key] = value


class JsonFilePreferences:
    """A key/value store persisted as a JSON object in a file.

    The file is replaced atomically on every write so a reader never sees a
    partially written file.
    """

    def __init__(self, path: str | os.PathLike[str]) -> None:
        """Initialize JsonFilePreferences."""
        self._path = pathlib.Path(path)

    def _read(self) -> dict[str, str]:
        if not self._path.exists():
            return {}
        try:
            values = json.loads(self._path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as err:
            raise PreferencesError(f"Unable to read preferences: {self._path}") from err
        if not isinstance(values, dict):
            raise PreferencesError(f"Preferences file is not an object: {self._path}")
        return values

    def get(self, key: str) -> str | None:
        value = self._read().get(key)
        if value is None:
            return None
        return str(value)

    def put(self, key: str, value: str) -> None:
        values = self._read()
        values[key] = value
        tmp_name: str | None = None
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            with tempfile.NamedTemporaryFile(
                "w", encoding="utf-8", dir=self._path.parent, delete=False
            ) as tmp_file:
                tmp_name = tmp_file.name
                json.dump(values, tmp_file, indent=2, sort_keys=True)
            os.replace(tmp_name, self._path)
        except OSError as err:
            if tmp_name is not None:
                with contextlib.suppress(OSError):
                    os.unlink(tmp_name)
            raise PreferencesError(
                f"Unable to write preferences: {self._path}"
            ) from err


def _split(value: str | None) -> list[str]:
    """Return the non-empty ids in a serialized recent list."""
    if not value:
        return []
    return [item for item in value.split(RECENT_TIMEZONES_DELIMITER) if item]


class RecencyStore:
    """A bounded list of recently chosen time zone ids without duplicates."""

    def __init__(
        self,
        preferences: KeyValueStore,
        *,
        key: str = RECENT_TIMEZONES_KEY,
        max_recent: int = MAX_RECENT_TIMEZONES,
    ) -> None:
        """Initialize RecencyStore."""
        if max_recent < 1:
            raise ValueError(f"max_recent must be positive: {max_recent}")
        self._preferences = preferences
        self._key = key
        self._max_recent = max_recent
        self._lock = threading.Lock()

    @property
    def max_recent(self) -> int:
        """Return the maximum number of ids kept."""
        return self._max_recent

    def recents(self) -> list[str]:
        """Return the recent ids, oldest first.

        A failure reading the preferences is treated as having no recent
        time zones. A persisted value written elsewhere may hold repeated
        ids or more than `max_recent` of them; only the newest occurrence
        of each of the newest ids is returned.
        """
        try:
            value = self._preferences.get(self._key)
        except (OSError, ValueError, PreferencesError) as err:
            _LOGGER.warning("Unable to read recent time zones: %s", err)
            return []
        recents: list[str] = []
        for item in reversed(_split(value)):
            if item in recents:
                continue
            recents.append(item)
            if len(recents) == self._max_recent:
                break
        recents.reverse()
        return recents

    def newest_first(self) -> list[str]:
        """Return the recent ids, most recently chosen first."""
        return list(reversed(self.recents()))

    def record(self, zone_id: str) -> None:
        """Record a time zone as the most recently chosen."""
        if not zone_id or RECENT_TIMEZONES_DELIMITER in zone_id:
            raise ValueError(f"Invalid time zone id: {zone_id!r}")
        with self._lock:
            recents = [item for item in self.recents() if item != zone_id]
            while len(recents) >= self._max_recent:
                recents.pop(0)
            recents.append(zone_id)
            value = RECENT_TIMEZONES_DELIMITER.join(recents)
            _LOGGER.debug("Saving recent time zones: %s", value)
            try:
                self._preferences.put(self._key, value)
            except (OSError, ValueError, PreferencesError) as err:
                _LOGGER.warning("Unable to save recent time zones: %s", err)
                if isinstance(err, PreferencesError):
                    raise
                raise PreferencesError(
                    f"Unable to save recent time zones: {value}"
                ) from err
