"""
Pydantic schemas for request/response validation.
"""
from autosales.schemas.customer import CustomerBase, CustomerCreate, CustomerUpdate, Customer
from autosales.schemas.car import CarBase, CarCreate, CarUpdate, Car
from autosales.schemas.sales_order import SalesOrderBase, SalesOrderCreate, SalesOrderUpdate, SalesOrder
from autosales.schemas.message import Message

__all__ = [
    "CustomerBase", "CustomerCreate", "CustomerUpdate", "Customer",
    "CarBase", "CarCreate", "CarUpdate", "Car",
    "SalesOrderBase", "SalesOrderCreate", "SalesOrderUpdate", "SalesOrder",
    "Message",
]
