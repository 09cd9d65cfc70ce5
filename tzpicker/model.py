"""Value types passed between the suggestion engine and the result composer.

A `Suggestion` is a row of the live drop down shown while typing. Picking a
suggestion produces a `FilterCriterion`, which the `ResultComposer` turns
into a list of `ResultRow` values for the result list.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Optional

__all__ = [
    "FilterType",
    "FilterCriterion",
    "Suggestion",
    "RowLabel",
    "ResultRow",
]


class FilterType(str, enum.Enum):
    """What the result list is filtered by."""

    EMPTY = "EMPTY"
    """The query matched nothing, so the result list is empty."""

    NONE = "NONE"
    """No query, show the current zone and recent zones."""

    LOCAL_HOUR = "LOCAL_HOUR"
    """Zones whose local clock currently shows the hour."""

    ZONE_NAME = "ZONE_NAME"
    """Zones with a display name."""

    COUNTRY = "COUNTRY"
    """Zones in a country."""

    STATE = "STATE"
    """Zones in a state or province, not implemented."""

    GMT_OFFSET = "GMT_OFFSET"
    """Zones in a whole hour offset bucket."""


@dataclass(frozen=True)
class FilterCriterion:
    """The typed representation of what the user wants to filter by."""

    type: FilterType
    text: Optional[str] = None
    hour: int = 0

    @classmethod
    def none(cls) -> FilterCriterion:
        """Return the criterion used when nothing has been typed."""
        return cls(FilterType.NONE)

    @classmethod
    def empty(cls) -> FilterCriterion:
        """Return the criterion used when a query has no matches."""
        return cls(FilterType.EMPTY)


@dataclass(frozen=True)
class Suggestion:
    """A single row in the live filter drop down.

    A row is either a section header, which is not selectable and has no
    constraint, or a selectable leaf.
    """

    filter_type: FilterType
    shows_section_label: bool = False
    constraint: Optional[str] = None
    hour: int = 0

    @classmethod
    def header(cls, filter_type: FilterType) -> Suggestion:
        """Create a section header for the filter type."""
        return cls(filter_type, shows_section_label=True)

    def criterion(self) -> FilterCriterion:
        """Return the criterion produced when this suggestion is picked."""
        return FilterCriterion(self.filter_type, self.constraint, self.hour)

    def __str__(self) -> str:
        return self.constraint or ""


class RowLabel(enum.Enum):
    """Section labels that may appear in the result list."""

    CURRENT = "CURRENT"
    """Precedes the current (default) time zone."""

    RECENT = "RECENT"
    """Precedes the recently chosen time zones."""


@dataclass(frozen=True)
class ResultRow:
    """A row of the result list, either a section label or a catalog index."""

    label_kind: Optional[RowLabel] = None
    index: Optional[int] = None

    @classmethod
    def label(cls, kind: RowLabel) -> ResultRow:
        """Create a non-selectable section label row."""
        return cls(label_kind=kind)

    @classmethod
    def entry(cls, index: int) -> ResultRow:
        """Create a selectable row for the catalog entry at index."""
        return cls(index=index)

    @property
    def is_selectable(self) -> bool:
        """Return True if the row refers to a catalog entry."""
        return self.index is not None

    def __repr__(self) -> str:
        if self.label_kind is not None:
            return f"ResultRow.label({self.label_kind.name})"
        return f"ResultRow.entry({self.index})"
