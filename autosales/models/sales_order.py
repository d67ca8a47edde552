"""
Sales order model for database.
"""
from sqlalchemy import Column, Date, ForeignKey, Integer, Numeric
from autosales.database import Base


class SalesOrder(Base):
    """Sales order database model."""

    __tablename__ = "sales_order"

    id = Column(Integer, primary_key=True, index=True)
    # Existence of the referenced rows is left to the database
    car_id = Column(Integer, ForeignKey("car.id"), nullable=False)
    customer_id = Column(Integer, ForeignKey("customer.id"), nullable=False)
    order_date = Column(Date, nullable=False)
    order_value = Column(Numeric(12, 2, asdecimal=False), nullable=False)
