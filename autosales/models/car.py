"""
Car model for database.
"""
from sqlalchemy import Column, Integer, String
from autosales.database import Base


class Car(Base):
    """Car database model."""

    __tablename__ = "car"

    id = Column(Integer, primary_key=True, index=True)
    brand = Column(String(50), nullable=False)
    model = Column(String(50), nullable=False)
    year = Column(Integer, nullable=False)
    color = Column(String(30), nullable=False)
