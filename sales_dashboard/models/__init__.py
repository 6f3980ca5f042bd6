from sales_dashboard.models.transaction import ProductTransaction

__all__ = ["ProductTransaction"]
