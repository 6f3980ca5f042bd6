from typing import Generic, TypeVar, Type, List, Dict, Any

from sqlalchemy import insert
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from sales_dashboard.core.db import Base
from sales_dashboard.core.logger import logger

T = TypeVar("T", bound=Base)

class RepositoryError(Exception):
    """Custom exception for repository operations"""
    pass


class BaseRepository(Generic[T]):
    def __init__(self, db: Session, model: Type[T]):
        self.db = db
        self.model = model

    def count(self) -> int:
        """Count total records"""
        try:
            return self.db.query(self.model).count()
        except SQLAlchemyError as e:
            logger.error(f"Error counting {self.model.__name__}: {e}")
            raise RepositoryError(f"Failed to count {self.model.__name__}") from e

    def _validate_data(self, rows: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
        """Drop keys that are not columns of the repository model."""
        model_columns = set(column.name for column in self.model.__table__.columns)

        validated_rows = []
        for i, row in enumerate(rows):
            valid_row = {key: value for key, value in row.items() if key in model_columns}
            ignored = set(row) - set(valid_row)
            if ignored:
                logger.debug(f"Row {i}: ignoring fields {sorted(ignored)} not in model {self.model.__name__}")
            if valid_row:
                validated_rows.append(valid_row)
            else:
                logger.warning(f"Row {i} has no valid fields for model {self.model.__name__}")

        return validated_rows

    def insert_bulk(self, rows: List[Dict[str, Any]], commit: bool = True) -> int:
        """Bulk insert plain mappings. Raises on any constraint violation."""
        if not rows:
            return 0

        try:
            data = self._validate_data(rows)
            if not data:
                return 0

            self.db.execute(insert(self.model), data)
            if commit:
                self.db.commit()
            return len(data)
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Error inserting {self.model.__name__}: {e}")
            raise RepositoryError(f"Failed to insert {self.model.__name__}") from e
