"""
Pydantic schemas for Car.
"""
from pydantic import BaseModel, ConfigDict


class CarBase(BaseModel):
    """Base car schema with common fields."""
    brand: str
    model: str
    year: int
    color: str


class CarCreate(CarBase):
    """Schema for creating a car."""
    pass


class CarUpdate(CarBase):
    """Schema for updating a car. Every field is replaced."""
    pass


class Car(CarBase):
    """Schema for car responses."""
    id: int

    model_config = ConfigDict(from_attributes=True)
