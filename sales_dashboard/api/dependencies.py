from fastapi import Depends
from sqlalchemy.orm import Session

from sales_dashboard.core.db import get_db
from sales_dashboard.repositories.factory import RepositoryFactory


def get_factory(db: Session = Depends(get_db)) -> RepositoryFactory:
    return RepositoryFactory(db)
