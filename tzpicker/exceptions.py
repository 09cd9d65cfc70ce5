"""Exceptions for tzpicker library."""


class TimezonePickerError(Exception):
    """Base exception for all tzpicker errors."""


class CatalogError(TimezonePickerError):
    """Exception raised when the time zone catalog can't be built.

    This is raised when the tz database files are missing, or when the
    entries handed to a catalog are inconsistent, such as a default zone
    that is not one of the entries.
    """


class FilterTypeError(TimezonePickerError, ValueError):
    """Exception raised when a result is requested for an unknown filter type.

    Every criterion produced by the suggestion engine has a known type, so
    this always means the caller built a criterion by hand incorrectly. It
    is a programming error and not something to show to a user.
    """


class PreferencesError(TimezonePickerError):
    """Exception thrown by a preferences store when reading or writing fails."""
