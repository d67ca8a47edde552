"""
Pydantic schemas for Customer.
"""
from pydantic import BaseModel, ConfigDict


class CustomerBase(BaseModel):
    """Base customer schema with common fields."""
    name: str
    document: str
    phone: str


class CustomerCreate(CustomerBase):
    """Schema for creating a customer."""
    pass


class CustomerUpdate(CustomerBase):
    """Schema for updating a customer. Every field is replaced."""
    pass


class Customer(CustomerBase):
    """Schema for customer responses."""
    id: int

    model_config = ConfigDict(from_attributes=True)
