from typing import List, Optional

import requests
from pydantic import TypeAdapter, ValidationError

from sales_dashboard.core.config import settings
from sales_dashboard.core.logger import logger
from sales_dashboard.repositories import RepositoryFactory
from sales_dashboard.schemas.transactions import SeedTransaction

_seed_adapter = TypeAdapter(List[SeedTransaction])


class SeedFetchError(Exception):
    """Raised when the seed dataset cannot be fetched or parsed"""
    pass


def fetch_seed_records(url: Optional[str] = None, timeout: Optional[float] = None) -> List[SeedTransaction]:
    """Download the seed dataset and validate every element of it."""
    url = url or settings.SEED_URL
    timeout = settings.SEED_TIMEOUT if timeout is None else timeout

    try:
        response = requests.get(url, timeout=timeout, headers={"Accept": "application/json"})
        response.raise_for_status()
        payload = response.json()
    except requests.RequestException as e:
        raise SeedFetchError(f"Failed to fetch seed data from {url}: {e}") from e
    except ValueError as e:
        raise SeedFetchError(f"Seed data from {url} is not valid JSON") from e

    if not isinstance(payload, list):
        raise SeedFetchError(f"Seed data from {url} is not a JSON array")

    try:
        records = _seed_adapter.validate_python(payload)
    except ValidationError as e:
        raise SeedFetchError(f"Seed data from {url} has invalid records: {e}") from e

    logger.info(f"Fetched {len(records)} seed transactions from {url}")
    return records


def seed_database(
        factory: RepositoryFactory,
        url: Optional[str] = None,
        timeout: Optional[float] = None,
) -> int:
    """
    Replace the stored transactions with a freshly fetched dataset.
    Nothing is deleted unless the whole dataset was fetched and validated.
    """
    records = fetch_seed_records(url, timeout)
    rows = [record.model_dump() for record in records]

    inserted = factory.get_transaction_repository().replace_all(rows)
    logger.info(f"Database initialized with {inserted} seed transactions")
    return inserted


if __name__ == "__main__":
    from sales_dashboard.core.db import SessionLocal, init_db

    init_db()
    with SessionLocal() as db:
        seed_database(RepositoryFactory(db))
