from typing import Dict, List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.responses import JSONResponse

from sales_dashboard.api.dependencies import get_factory
from sales_dashboard.api.routes.transactions import SEARCH_DESCRIPTION
from sales_dashboard.core.logger import logger
from sales_dashboard.repositories import RepositoryError, RepositoryFactory
from sales_dashboard.schemas.reports import CategoryCount, CombinedOut, Statistics
from sales_dashboard.services.aggregates import get_bar_chart, get_pie_chart, get_statistics
from sales_dashboard.services.filters import InvalidInputError
from sales_dashboard.services.listing import list_transactions

router = APIRouter()


@router.get("/statistics", response_model=Statistics)
def statistics(
        month: Optional[str] = Query(default=None, description="Month name, e.g. March"),
        factory: RepositoryFactory = Depends(get_factory),
):
    """Total sale amount and sold / not sold item counts for the month."""
    try:
        return get_statistics(factory, month)
    except InvalidInputError as e:
        raise HTTPException(400, detail=str(e))
    except RepositoryError as e:
        logger.error(f"get_statistics failed: {e}", exc_info=True)
        raise HTTPException(500, detail=str(e))


@router.get("/barchart", response_model=Dict[str, int])
def bar_chart(
        month: Optional[str] = Query(default=None, description="Month name, e.g. March"),
        factory: RepositoryFactory = Depends(get_factory),
):
    """Number of the month's transactions in each of the ten price ranges."""
    try:
        return get_bar_chart(factory, month)
    except InvalidInputError as e:
        raise HTTPException(400, detail=str(e))
    except RepositoryError as e:
        logger.error(f"get_bar_chart failed: {e}", exc_info=True)
        raise HTTPException(500, detail=str(e))


@router.get("/piechart", response_model=List[CategoryCount])
def pie_chart(
        month: Optional[str] = Query(default=None, description="Month name, e.g. March"),
        factory: RepositoryFactory = Depends(get_factory),
):
    """Number of the month's transactions per category."""
    try:
        return get_pie_chart(factory, month)
    except InvalidInputError as e:
        raise HTTPException(400, detail=str(e))
    except RepositoryError as e:
        logger.error(f"get_pie_chart failed: {e}", exc_info=True)
        raise HTTPException(500, detail=str(e))


@router.get("/combined", response_model=CombinedOut)
def combined(
        month: Optional[str] = Query(default=None, description="Month name, e.g. March"),
        page: int = Query(default=1, ge=1),
        rows_per_page: int = Query(default=10, ge=1, alias="rowsPerPage"),
        search: str = Query(default="", description=SEARCH_DESCRIPTION),
        factory: RepositoryFactory = Depends(get_factory),
):
    """
    Listing, statistics, bar chart and pie chart for one request.
    Any failure fails the whole response.
    """
    try:
        transactions = list_transactions(
            factory,
            month=month,
            page=page,
            rows_per_page=rows_per_page,
            search=search,
        )
        return CombinedOut(
            transactions=transactions,
            statistics=get_statistics(factory, month),
            bar_chart=get_bar_chart(factory, month),
            pie_chart=get_pie_chart(factory, month),
        )
    except Exception as e:
        logger.error(f"get_combined_data failed: {e}", exc_info=True)
        return JSONResponse(status_code=500, content={"error": str(e)})
