from typing import Type, Dict
from sqlalchemy.orm import Session
from sales_dashboard.repositories.base import BaseRepository
from sales_dashboard.repositories.transactions import TransactionRepository


class RepositoryFactory:
    """
    Factory class for creating repository instances bound to one session.
    """

    _repository_mapping: Dict[str, Type[BaseRepository]] = {
        'transactions': TransactionRepository,
    }

    def __init__(self, db: Session):
        self.db = db
        self._instances: Dict[str, BaseRepository] = {}

    def get_repository(self, repository_name: str) -> BaseRepository:
        """
        Get a repository instance by name. Creates a singleton instance per factory.

        Raises:
            ValueError: If repository name is not recognized
        """
        if repository_name not in self._repository_mapping:
            available = ', '.join(self._repository_mapping.keys())
            raise ValueError(f"Unknown repository '{repository_name}'. Available: {available}")

        if repository_name not in self._instances:
            repository_class = self._repository_mapping[repository_name]
            self._instances[repository_name] = repository_class(self.db)

        return self._instances[repository_name]

    def get_transaction_repository(self) -> TransactionRepository:
        """Get TransactionRepository instance"""
        return self.get_repository('transactions')
