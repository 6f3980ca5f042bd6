from datetime import datetime, timezone
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base for payloads exchanged as camelCase JSON (dateOfSale, rowsPerPage, ...)."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class SeedTransaction(CamelModel):
    """One element of the remote seed dataset, projected onto the stored shape."""

    id: int
    title: str
    description: str
    price: float = Field(allow_inf_nan=False)
    category: str
    date_of_sale: datetime
    sold: bool
    image: str

    @field_validator("date_of_sale")
    @classmethod
    def to_naive_utc(cls, value: datetime) -> datetime:
        if value.tzinfo is not None:
            value = value.astimezone(timezone.utc).replace(tzinfo=None)
        return value


class TransactionOut(CamelModel):
    id: int
    title: str
    description: str
    price: float
    category: str
    date_of_sale: datetime
    sold: bool
    image: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class TransactionPage(CamelModel):
    total: int
    page: int
    rows_per_page: int
    transactions: List[TransactionOut]
