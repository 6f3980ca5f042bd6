import math
from typing import Dict, Iterable, List, NamedTuple, Optional

import pandas as pd

from sales_dashboard.repositories import RepositoryFactory
from sales_dashboard.schemas.reports import CategoryCount, Statistics
from sales_dashboard.services.filters import resolve_month_index


class PriceBucket(NamedTuple):
    label: str
    lower: int
    upper: Optional[int]

    def contains(self, price: float) -> bool:
        if not math.isfinite(price) or price < 0:
            return False
        # 100.5 belongs to 101-200, 100.0 to 0-100
        rounded = math.ceil(price)
        return rounded >= self.lower and (self.upper is None or rounded <= self.upper)


PRICE_BUCKETS: List[PriceBucket] = [
    PriceBucket("0-100", 0, 100),
    PriceBucket("101-200", 101, 200),
    PriceBucket("201-300", 201, 300),
    PriceBucket("301-400", 301, 400),
    PriceBucket("401-500", 401, 500),
    PriceBucket("501-600", 501, 600),
    PriceBucket("601-700", 601, 700),
    PriceBucket("701-800", 701, 800),
    PriceBucket("801-900", 801, 900),
    PriceBucket("901-above", 901, None),
]

CATCH_ALL_BUCKET = PRICE_BUCKETS[-1]


def bucket_label(price: float) -> str:
    """Label of the first bucket holding the price; anything unmatched is catch-all."""
    for bucket in PRICE_BUCKETS:
        if bucket.contains(price):
            return bucket.label
    return CATCH_ALL_BUCKET.label


def _to_frame(rows: Iterable) -> pd.DataFrame:
    return pd.DataFrame(
        [
            {"price": float(r.price), "sold": bool(r.sold), "category": r.category}
            for r in rows
        ],
        columns=["price", "sold", "category"],
    )


def compute_statistics(rows: Iterable) -> Statistics:
    df = _to_frame(rows)
    if df.empty:
        return Statistics(total_sale_amount=0.0, total_sold_items=0, total_not_sold_items=0)

    sold = df["sold"].astype(bool)
    return Statistics(
        total_sale_amount=round(float(df["price"].sum()), 2),
        total_sold_items=int(sold.sum()),
        total_not_sold_items=int((~sold).sum()),
    )


def compute_price_histogram(rows: Iterable) -> Dict[str, int]:
    labels = [bucket.label for bucket in PRICE_BUCKETS]
    df = _to_frame(rows)
    if df.empty:
        return {label: 0 for label in labels}

    counts = df["price"].map(bucket_label).value_counts().reindex(labels, fill_value=0)
    return {label: int(counts[label]) for label in labels}


def compute_category_breakdown(rows: Iterable) -> List[CategoryCount]:
    df = _to_frame(rows)
    if df.empty:
        return []

    counts = df.groupby("category", sort=False).size()
    return [
        CategoryCount(category=category, count=int(count))
        for category, count in counts.items()
    ]


def _month_rows(factory: RepositoryFactory, month: Optional[str]):
    month_index = resolve_month_index(month)
    return factory.get_transaction_repository().get_by_month(month_index)


def get_statistics(factory: RepositoryFactory, month: Optional[str]) -> Statistics:
    return compute_statistics(_month_rows(factory, month))


def get_bar_chart(factory: RepositoryFactory, month: Optional[str]) -> Dict[str, int]:
    return compute_price_histogram(_month_rows(factory, month))


def get_pie_chart(factory: RepositoryFactory, month: Optional[str]) -> List[CategoryCount]:
    return compute_category_breakdown(_month_rows(factory, month))
