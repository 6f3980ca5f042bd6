
import pytest

from sales_dashboard.services.filters import (
    MONTHS,
    AllOf,
    AnyOf,
    InvalidInputError,
    InvalidMonthError,
    MonthEquals,
    PriceEquals,
    TextContains,
    build_transaction_filter,
    parse_price,
    resolve_month_index,
)


@pytest.mark.parametrize("index,name", list(enumerate(MONTHS)))
def test_every_month_resolves_to_calendar_index(index: int, name: str) -> None:
    assert resolve_month_index(name) == index
    assert resolve_month_index(name.upper()) == index
    assert resolve_month_index(f"  {name.capitalize()}\t") == index


@pytest.mark.parametrize("value", ["Foobar", "", "   ", "janu", "13", None])
def test_unknown_month_is_rejected(value) -> None:
    with pytest.raises(InvalidMonthError):
        resolve_month_index(value)


def test_invalid_month_error_is_an_input_error() -> None:
    assert issubclass(InvalidMonthError, InvalidInputError)
    assert issubclass(InvalidMonthError, ValueError)


@pytest.mark.parametrize(
    "text,expected",
    [("50", 50.0), (" 12.5 ", 12.5), ("1e2", 100.0), ("-3", -3.0)],
)
def test_parse_price_accepts_finite_numbers(text: str, expected: float) -> None:
    assert parse_price(text) == expected


@pytest.mark.parametrize("text", ["", "  ", "jacket", "12abc", "nan", "inf", "-Infinity"])
def test_parse_price_rejects_non_numbers(text: str) -> None:
    assert parse_price(text) is None


def test_empty_search_filters_by_month_only() -> None:
    node = build_transaction_filter(2, "   ")
    assert node == AllOf((MonthEquals(2),))


def test_text_search_builds_title_or_description_alternatives() -> None:
    node = build_transaction_filter(2, " jacket ")
    assert node == AllOf((
        MonthEquals(2),
        AnyOf((TextContains("title", "jacket"), TextContains("description", "jacket"))),
    ))


def test_numeric_search_adds_price_alternative() -> None:
    node = build_transaction_filter(0, "329.85")
    alternatives = node.children[1]
    assert isinstance(alternatives, AnyOf)
    assert PriceEquals(329.85) in alternatives.children
