"""
Pytest configuration for the sales dashboard.

Provides fixtures for:
- An isolated in-memory SQLite store per test
- Repository factory bound to that store
- A TestClient whose database dependency points at the same store
"""

from __future__ import annotations

import os
import tempfile
from datetime import datetime
from typing import Any, Dict, Generator, List

# Must be set before the package reads its settings.
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("SEED_ON_STARTUP", "false")
os.environ.setdefault("LOG_DIR", tempfile.mkdtemp(prefix="sales_dashboard_logs_"))

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

import sales_dashboard.models  # noqa: F401
from sales_dashboard.core.db import Base, get_db
from sales_dashboard.main import app
from sales_dashboard.repositories import RepositoryFactory


def make_row(
    id_: int,
    price: float,
    *,
    month: int = 3,
    year: int = 2021,
    day: int = 15,
    sold: bool = True,
    category: str = "electronics",
    title: str | None = None,
    description: str | None = None,
) -> Dict[str, Any]:
    return {
        "id": id_,
        "title": title or f"Product {id_}",
        "description": description or f"Description of product {id_}",
        "price": price,
        "category": category,
        "date_of_sale": datetime(year, month, day, 10, 30),
        "sold": sold,
        "image": f"https://example.com/images/{id_}.jpg",
    }


SAMPLE_ROWS: List[Dict[str, Any]] = [
    make_row(1, 50, sold=True, category="men's clothing",
             title="Mens Cotton Jacket", description="Great outerwear jackets for Spring"),
    make_row(2, 150, sold=False, category="jewelery",
             title="Solid Gold Petite Micropave", description="Satisfaction Guaranteed"),
    make_row(3, 999, sold=True, category="electronics",
             title="Samsung 49-Inch Monitor", description="49 INCH SUPER ULTRAWIDE 32:9 CURVED"),
    make_row(4, 350, month=4, sold=True, category="jewelery",
             title="Silver Dragon Station", description="Chain bracelet"),
    make_row(5, 64, month=11, year=2022, sold=False, category="electronics",
             title="WD 2TB Elements", description="USB 3.0 compatible drive"),
]


@pytest.fixture()
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture()
def db_session(engine) -> Generator[Session, None, None]:
    session = sessionmaker(autocommit=False, autoflush=False, bind=engine)()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture()
def factory(db_session: Session) -> RepositoryFactory:
    return RepositoryFactory(db_session)


@pytest.fixture()
def seeded_factory(factory: RepositoryFactory) -> RepositoryFactory:
    factory.get_transaction_repository().replace_all([dict(row) for row in SAMPLE_ROWS])
    return factory


@pytest.fixture()
def client(db_session: Session) -> Generator[TestClient, None, None]:
    def _override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = _override_get_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture()
def seeded_client(seeded_factory: RepositoryFactory, client: TestClient) -> TestClient:
    return client
