"""Tests for building suggestions while a query is typed."""

import pytest

from tzpicker.catalog import TimeZoneCatalog, TimeZoneEntry
from tzpicker.model import FilterCriterion, FilterType, Suggestion
from tzpicker.suggestion import SuggestionEngine, build_gmt_suggestions

GMT_HEADER = Suggestion.header(FilterType.GMT_OFFSET)
COUNTRY_HEADER = Suggestion.header(FilterType.COUNTRY)
ZONE_NAME_HEADER = Suggestion.header(FilterType.ZONE_NAME)


def gmt(hour: int) -> Suggestion:
    sign = "+" if hour >= 0 else "-"
    return Suggestion(
        FilterType.GMT_OFFSET, constraint=f"GMT{sign}{abs(hour)}", hour=hour
    )


def country(name: str) -> Suggestion:
    return Suggestion(FilterType.COUNTRY, constraint=name)


def zone_name(name: str) -> Suggestion:
    return Suggestion(FilterType.ZONE_NAME, constraint=name)


@pytest.fixture(name="engine")
def mock_engine(catalog: TimeZoneCatalog) -> SuggestionEngine:
    """Fixture to create a suggestion engine for the test catalog."""
    return SuggestionEngine(catalog)


def make_catalog(hours: list[int]) -> TimeZoneCatalog:
    """Create a catalog with one zone in each whole hour offset."""
    return TimeZoneCatalog(
        [
            TimeZoneEntry(
                id=f"Test/Zone{i}",
                display_name=f"Zone {i}",
                raw_offset_minutes=hour * 60,
            )
            for i, hour in enumerate(hours)
        ]
    )


def test_build_gmt_suggestions_teens() -> None:
    """Test typing a 1 offers the whole 10 to 19 range in both directions."""
    catalog = make_catalog([10, 14, 19, -19])
    assert build_gmt_suggestions(catalog, 1) == [
        GMT_HEADER,
        gmt(19),
        gmt(14),
        gmt(10),
        gmt(-19),
    ]


def test_build_gmt_suggestions_positive_only() -> None:
    """Test an explicit plus sign omits negative offsets."""
    catalog = make_catalog([1, 10, 14, 19, -1, -19])
    assert build_gmt_suggestions(catalog, 1, positive_only=True) == [
        GMT_HEADER,
        gmt(19),
        gmt(14),
        gmt(10),
        gmt(1),
    ]
    assert build_gmt_suggestions(catalog, 1) == [
        GMT_HEADER,
        gmt(19),
        gmt(14),
        gmt(10),
        gmt(1),
        gmt(-1),
        gmt(-19),
    ]


def test_build_gmt_suggestions_negative() -> None:
    """Test a negative number only offers negative offsets."""
    catalog = make_catalog([1, 10, -1, -10, -12])
    assert build_gmt_suggestions(catalog, -1) == [
        GMT_HEADER,
        gmt(-1),
        gmt(-10),
        gmt(-12),
    ]
    assert build_gmt_suggestions(catalog, -12) == [GMT_HEADER, gmt(-12)]


def test_build_gmt_suggestions_zero() -> None:
    """Test zero is only suggested once."""
    catalog = make_catalog([0])
    assert build_gmt_suggestions(catalog, 0) == [GMT_HEADER, gmt(0)]


def test_build_gmt_suggestions_empty() -> None:
    """Test the header is dropped when no offsets are populated."""
    catalog = make_catalog([3, -3])
    assert build_gmt_suggestions(catalog, 7) == []
    assert build_gmt_suggestions(catalog, 1) == []
    assert build_gmt_suggestions(catalog, -3, positive_only=True) == []


@pytest.mark.parametrize("text", ["", "   ", None])
def test_blank_query(engine: SuggestionEngine, text: str | None) -> None:
    """Test blank queries have no suggestions."""
    assert engine.filter(text) == []


@pytest.mark.parametrize(
    "text,expected",
    [
        ("1", [GMT_HEADER, gmt(14), gmt(12), gmt(10), gmt(1), gmt(-10)]),
        ("+1", [GMT_HEADER, gmt(14), gmt(12), gmt(10), gmt(1)]),
        ("-1", [GMT_HEADER, gmt(-10)]),
        ("gmt+1", [GMT_HEADER, gmt(14), gmt(12), gmt(10), gmt(1)]),
        ("GMT-5", [GMT_HEADER, gmt(-5)]),
        ("gmt5", [GMT_HEADER, gmt(5), gmt(-5)]),
        ("  5 ", [GMT_HEADER, gmt(5), gmt(-5)]),
        ("0", [GMT_HEADER, gmt(0)]),
        ("-0", [GMT_HEADER, gmt(0)]),
        ("12", [GMT_HEADER, gmt(12)]),
        ("+12", [GMT_HEADER, gmt(12)]),
        ("-12", []),
        ("7", []),
        ("5a", []),
        ("123", []),
        ("gmt", []),
        ("+", []),
    ],
)
def test_gmt_queries(
    engine: SuggestionEngine, text: str, expected: list[Suggestion]
) -> None:
    """Test queries that parse as GMT offsets."""
    assert engine.filter(text) == expected


@pytest.mark.parametrize(
    "text,expected",
    [
        (
            "u",
            [
                COUNTRY_HEADER,
                country("United Kingdom"),
                country("United States"),
                ZONE_NAME_HEADER,
                zone_name("UTC"),
            ],
        ),
        (
            "  NEW ",
            [
                COUNTRY_HEADER,
                country("New Zealand"),
                ZONE_NAME_HEADER,
                zone_name("New York"),
            ],
        ),
        ("ca", [COUNTRY_HEADER, country("Canada")]),
        ("to", [ZONE_NAME_HEADER, zone_name("Toronto"), zone_name("Tokyo")]),
        (
            "k",
            [
                COUNTRY_HEADER,
                country("Kiribati"),
                ZONE_NAME_HEADER,
                zone_name("Kolkata"),
                zone_name("Kiritimati"),
            ],
        ),
        ("atlantis", []),
    ],
)
def test_name_queries(
    engine: SuggestionEngine, text: str, expected: list[Suggestion]
) -> None:
    """Test queries that match country and time zone names."""
    assert engine.filter(text) == expected


def test_sections_are_ordered() -> None:
    """Test offset suggestions come before country and zone name suggestions."""
    catalog = TimeZoneCatalog(
        [
            TimeZoneEntry(
                id="Test/Zone",
                display_name="1st Zone",
                country="1st Country",
                raw_offset_minutes=60,
            ),
        ]
    )
    engine = SuggestionEngine(catalog)
    assert engine.filter("1") == [
        GMT_HEADER,
        gmt(1),
        COUNTRY_HEADER,
        country("1st Country"),
        ZONE_NAME_HEADER,
        zone_name("1st Zone"),
    ]


def test_duplicate_display_names_suggested_once() -> None:
    """Test a display name shared by several zones is suggested once."""
    catalog = TimeZoneCatalog(
        [
            TimeZoneEntry(id="America/Springfield", display_name="Springfield"),
            TimeZoneEntry(id="Europe/Springfield", display_name="Springfield"),
        ]
    )
    engine = SuggestionEngine(catalog)
    assert engine.filter("spring") == [ZONE_NAME_HEADER, zone_name("Springfield")]


def test_filter_keeps_no_state(engine: SuggestionEngine) -> None:
    """Test results only depend on the query passed in."""
    first = engine.filter("new")
    assert engine.filter("1")
    assert engine.filter("") == []
    assert engine.filter("new") == first


def test_suggestion_criterion() -> None:
    """Test picking a suggestion produces a criterion."""
    assert gmt(-5).criterion() == FilterCriterion(FilterType.GMT_OFFSET, "GMT-5", -5)
    assert country("Canada").criterion() == FilterCriterion(
        FilterType.COUNTRY, "Canada"
    )
    assert str(country("Canada")) == "Canada"
    assert str(COUNTRY_HEADER) == ""
