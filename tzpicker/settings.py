"""Settings that change how time zones are matched.

The picker follows the host clock format when matching a typed hour
against the local time of each zone. In a 12-hour clock a typed "2" also
means 14:00 and a typed "12" also means midnight.
"""

from collections.abc import Generator
import contextlib
import contextvars


_24_hour_format = contextvars.ContextVar("24_hour_format", default=True)


@contextlib.contextmanager
def enable_24_hour_format() -> Generator[None]:
    """Context manager to match local hours using a 24-hour clock."""
    token = _24_hour_format.set(True)
    try:
        yield
    finally:
        _24_hour_format.reset(token)


@contextlib.contextmanager
def enable_12_hour_format() -> Generator[None]:
    """Context manager to match local hours using a 12-hour clock."""
    token = _24_hour_format.set(False)
    try:
        yield
    finally:
        _24_hour_format.reset(token)


def is_24_hour_format() -> bool:
    """Check if the 24-hour clock format is enabled."""
    return _24_hour_format.get()
