from sqlalchemy import Column, Integer, String, Float, Boolean, DateTime, func
from sales_dashboard.core.db import Base


class ProductTransaction(Base):
    __tablename__ = "product_transactions"

    id = Column(Integer, primary_key=True, autoincrement=False)
    title = Column(String, nullable=False)
    description = Column(String, nullable=False)
    price = Column(Float, nullable=False)
    category = Column(String, nullable=False, index=True)
    date_of_sale = Column(DateTime, nullable=False, index=True)
    sold = Column(Boolean, nullable=False)
    image = Column(String, nullable=False)

    created_at = Column(DateTime, nullable=False, server_default=func.now())
    updated_at = Column(
        DateTime, nullable=False, server_default=func.now(), onupdate=func.now()
    )
