from sales_dashboard.repositories.base import BaseRepository, RepositoryError
from sales_dashboard.repositories.transactions import TransactionRepository
from sales_dashboard.repositories.factory import RepositoryFactory

__all__ = [
    "BaseRepository",
    "RepositoryError",
    "TransactionRepository",
    "RepositoryFactory",
]
