from typing import Dict, List

from sales_dashboard.schemas.transactions import CamelModel, TransactionPage


class Statistics(CamelModel):
    total_sale_amount: float
    total_sold_items: int
    total_not_sold_items: int


class CategoryCount(CamelModel):
    category: str
    count: int


class CombinedOut(CamelModel):
    transactions: TransactionPage
    statistics: Statistics
    bar_chart: Dict[str, int]
    pie_chart: List[CategoryCount]
