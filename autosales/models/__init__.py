"""
SQLAlchemy database models.
"""
from autosales.models.customer import Customer
from autosales.models.car import Car
from autosales.models.sales_order import SalesOrder

__all__ = ["Customer", "Car", "SalesOrder"]
