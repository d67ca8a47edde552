"""
Pydantic schemas for SalesOrder.
"""
from pydantic import BaseModel, ConfigDict
from datetime import date


class SalesOrderBase(BaseModel):
    """Base sales order schema with common fields."""
    car_id: int
    customer_id: int
    order_date: date
    order_value: float


class SalesOrderCreate(SalesOrderBase):
    """Schema for creating a sales order."""
    pass


class SalesOrderUpdate(SalesOrderBase):
    """Schema for updating a sales order. Every field is replaced."""
    pass


class SalesOrder(SalesOrderBase):
    """Schema for sales order responses."""
    id: int

    model_config = ConfigDict(from_attributes=True)
