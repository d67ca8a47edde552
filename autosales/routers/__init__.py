"""
API routers, one per entity.
"""
from autosales.routers import cars, customers, sales_orders

__all__ = ["cars", "customers", "sales_orders"]
