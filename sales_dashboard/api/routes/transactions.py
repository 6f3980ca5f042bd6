from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from sales_dashboard.api.dependencies import get_factory
from sales_dashboard.core.logger import logger
from sales_dashboard.repositories import RepositoryError, RepositoryFactory
from sales_dashboard.schemas.transactions import TransactionPage
from sales_dashboard.services.filters import InvalidInputError
from sales_dashboard.services.listing import list_transactions

router = APIRouter()

SEARCH_DESCRIPTION = (
    "Case-insensitive substring of title or description. A numeric value also "
    "matches that exact price; the alternatives are OR-ed, so '150' returns items "
    "priced 150 as well as items mentioning 150."
)


@router.get("/transactions", response_model=TransactionPage)
def get_transactions(
        month: Optional[str] = Query(default=None, description="Month name, e.g. March"),
        page: int = Query(default=1, ge=1),
        rows_per_page: int = Query(default=10, ge=1, alias="rowsPerPage"),
        search: str = Query(default="", description=SEARCH_DESCRIPTION),
        factory: RepositoryFactory = Depends(get_factory),
):
    """List one page of the month's transactions matching the search text."""
    try:
        return list_transactions(
            factory,
            month=month,
            page=page,
            rows_per_page=rows_per_page,
            search=search,
        )
    except InvalidInputError as e:
        raise HTTPException(400, detail=str(e))
    except RepositoryError as e:
        logger.error(f"list_transactions failed: {e}", exc_info=True)
        raise HTTPException(500, detail=str(e))
