from typing import List, Dict, Any, Tuple

from sqlalchemy import delete
from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError

from sales_dashboard.core.logger import logger
from sales_dashboard.models import ProductTransaction
from sales_dashboard.repositories.base import BaseRepository, RepositoryError
from sales_dashboard.services.filters import FilterNode, MonthEquals


class TransactionRepository(BaseRepository[ProductTransaction]):
    def __init__(self, db: Session):
        super().__init__(db, ProductTransaction)

    def search(
            self,
            filter_node: FilterNode,
            offset: int = 0,
            limit: int = 10,
    ) -> Tuple[int, List[ProductTransaction]]:
        """
        Count all transactions matching the filter and fetch one page of them.
        Pages are ordered by id so consecutive pages never overlap.
        """
        try:
            clause = filter_node.to_clause(ProductTransaction)
            query = self.db.query(ProductTransaction).filter(clause)

            total = query.count()
            rows = (
                query.order_by(ProductTransaction.id)
                .offset(offset)
                .limit(limit)
                .all()
            )
            return total, rows

        except SQLAlchemyError as e:
            logger.error(f"Error searching transactions: {e}")
            raise RepositoryError(f"Failed to retrieve transactions: {e}") from e

    def get_by_month(self, month_index: int) -> List[ProductTransaction]:
        """
        Get every transaction sold in the given month (January=0), any year.
        """
        try:
            clause = MonthEquals(month_index).to_clause(ProductTransaction)
            return (
                self.db.query(ProductTransaction)
                .filter(clause)
                .order_by(ProductTransaction.id)
                .all()
            )

        except SQLAlchemyError as e:
            logger.error(f"Error getting transactions for month {month_index}: {e}")
            raise RepositoryError(f"Failed to retrieve transactions: {e}") from e

    def replace_all(self, rows: List[Dict[str, Any]]) -> int:
        """
        Replace the whole collection with the given rows in one transaction.
        On failure the previous rows are kept.
        """
        try:
            deleted = self.db.execute(delete(ProductTransaction)).rowcount
            inserted = self.insert_bulk(rows, commit=False)
            self.db.commit()
            logger.debug(f"Replaced {deleted} transactions with {inserted}")
            return inserted

        except (SQLAlchemyError, RepositoryError) as e:
            # insert_bulk reports its own failures as RepositoryError
            self.db.rollback()
            logger.error(f"Error replacing transactions: {e}")
            raise RepositoryError(f"Failed to replace transactions: {e}") from e
