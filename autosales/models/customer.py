"""
Customer model for database.
"""
from sqlalchemy import Column, Integer, String
from autosales.database import Base


class Customer(Base):
    """Customer database model."""

    __tablename__ = "customer"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(150), nullable=False)
    document = Column(String(20), nullable=False)
    phone = Column(String(20), nullable=False)
