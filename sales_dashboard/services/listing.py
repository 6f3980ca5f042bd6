from typing import Optional

from sales_dashboard.repositories import RepositoryFactory
from sales_dashboard.schemas.transactions import TransactionOut, TransactionPage
from sales_dashboard.services.filters import (
    InvalidInputError,
    build_transaction_filter,
    resolve_month_index,
)


def list_transactions(
        factory: RepositoryFactory,
        month: Optional[str],
        page: int = 1,
        rows_per_page: int = 10,
        search: str = "",
) -> TransactionPage:
    """
    One page of the month's transactions whose title, description or price
    matches the search text, together with the total number of matches.
    """
    month_index = resolve_month_index(month)
    if page < 1 or rows_per_page < 1:
        raise InvalidInputError(
            f"page and rowsPerPage must be positive, got page={page} rowsPerPage={rows_per_page}"
        )

    filter_node = build_transaction_filter(month_index, search)
    total, rows = factory.get_transaction_repository().search(
        filter_node,
        offset=(page - 1) * rows_per_page,
        limit=rows_per_page,
    )

    return TransactionPage(
        total=total,
        page=page,
        rows_per_page=rows_per_page,
        transactions=[TransactionOut.model_validate(r) for r in rows],
    )
