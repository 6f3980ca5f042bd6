from fastapi import APIRouter

from .routes.transactions import router as transactions_router
from .routes.reports import router as reports_router

api_router = APIRouter()
api_router.include_router(transactions_router, tags=["Transactions"])
api_router.include_router(reports_router, tags=["Reports"])
