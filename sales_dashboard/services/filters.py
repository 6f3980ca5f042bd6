"""
Month lookup and the filter expression tree used to select transactions.

A filter is a small tree of nodes (``AllOf``, ``AnyOf`` and leaf predicates).
The tree compiles to a single SQLAlchemy clause so filtering happens in the store.
"""
import math
from dataclasses import dataclass
from typing import Dict, Optional, Tuple

from sqlalchemy import and_, extract, or_, true
from sqlalchemy.sql.elements import ColumnElement

MONTHS: Tuple[str, ...] = (
    "january",
    "february",
    "march",
    "april",
    "may",
    "june",
    "july",
    "august",
    "september",
    "october",
    "november",
    "december",
)

MONTH_INDEX: Dict[str, int] = {name: index for index, name in enumerate(MONTHS)}


class InvalidInputError(ValueError):
    """Raised when request parameters are unusable"""
    pass


class InvalidMonthError(InvalidInputError):
    """Raised when a month name cannot be resolved"""
    pass


def resolve_month_index(month: Optional[str]) -> int:
    """Zero-based month index for a case-insensitive month name (January=0)."""
    if month is None:
        raise InvalidMonthError("Invalid month provided: month is required")
    index = MONTH_INDEX.get(month.strip().lower())
    if index is None:
        raise InvalidMonthError(f"Invalid month provided: {month!r}")
    return index


def parse_price(search: str) -> Optional[float]:
    """Return the search text as a finite number, or None when it is not one."""
    text = search.strip()
    if not text:
        return None
    try:
        value = float(text)
    except ValueError:
        return None
    if not math.isfinite(value):
        return None
    return value


class FilterNode:
    def to_clause(self, model) -> ColumnElement:
        raise NotImplementedError


@dataclass(frozen=True)
class MonthEquals(FilterNode):
    month_index: int

    def to_clause(self, model) -> ColumnElement:
        return extract("month", model.date_of_sale) == self.month_index + 1


@dataclass(frozen=True)
class TextContains(FilterNode):
    field: str
    text: str

    def to_clause(self, model) -> ColumnElement:
        return getattr(model, self.field).icontains(self.text, autoescape=True)


@dataclass(frozen=True)
class PriceEquals(FilterNode):
    price: float

    def to_clause(self, model) -> ColumnElement:
        return model.price == self.price


@dataclass(frozen=True)
class AllOf(FilterNode):
    children: Tuple[FilterNode, ...]

    def to_clause(self, model) -> ColumnElement:
        if not self.children:
            return true()
        return and_(*(child.to_clause(model) for child in self.children))


@dataclass(frozen=True)
class AnyOf(FilterNode):
    children: Tuple[FilterNode, ...]

    def to_clause(self, model) -> ColumnElement:
        return or_(*(child.to_clause(model) for child in self.children))


def build_transaction_filter(month_index: int, search: str = "") -> AllOf:
    """
    Month match AND (title contains OR description contains OR price equals).

    The price alternative is only added when the search text is numeric; an
    empty search applies the month match alone.
    """
    clauses = [MonthEquals(month_index)]

    text = (search or "").strip()
    if text:
        alternatives = [
            TextContains("title", text),
            TextContains("description", text),
        ]
        price = parse_price(text)
        if price is not None:
            alternatives.append(PriceEquals(price))
        clauses.append(AnyOf(tuple(alternatives)))

    return AllOf(tuple(clauses))
