"""
Data-access functions. Each takes the request's AsyncSession first and
returns an Outcome instead of raising.
"""
from autosales.repositories import car, customer, sales_order

__all__ = ["car", "customer", "sales_order"]
