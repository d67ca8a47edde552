"""
Data access for customers.
"""
import logging

from sqlalchemy import delete, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from autosales.models.customer import Customer
from autosales.outcome import DATABASE_ERRORS, Outcome
from autosales.repositories.base import failure
from autosales.schemas.customer import Customer as CustomerSchema, CustomerCreate, CustomerUpdate

logger = logging.getLogger(__name__)


async def list_customers(db: AsyncSession) -> Outcome:
    """
    Fetch every customer, ordered by id.

    The Outcome carries a list of Customer schemas.
    """
    try:
        result = await db.execute(select(Customer).order_by(Customer.id))
        customers = [CustomerSchema.model_validate(row) for row in result.scalars().all()]
    except DATABASE_ERRORS as exc:
        return await failure(db, exc, "Error listing customers")
    return Outcome.ok(customers)


async def get_customer(db: AsyncSession, customer_id: int) -> Outcome:
    """Fetch one customer by id."""
    try:
        result = await db.execute(select(Customer).where(Customer.id == customer_id))
        row = result.scalar_one_or_none()
    except DATABASE_ERRORS as exc:
        return await failure(db, exc, f"Error fetching customer {customer_id}")

    if row is None:
        return Outcome.not_found(f"Customer {customer_id} not found")
    return Outcome.ok(CustomerSchema.model_validate(row))


async def create_customer(db: AsyncSession, customer: CustomerCreate) -> Outcome:
    """
    Insert a customer. The database assigns the id.

    The Outcome carries the stored customer, id included.
    """
    values = customer.model_dump()
    try:
        result = await db.execute(insert(Customer).values(**values).returning(Customer.id))
        customer_id = result.scalar_one()
        await db.commit()
    except DATABASE_ERRORS as exc:
        return await failure(db, exc, "Error creating customer")

    logger.info("Customer %s created", customer_id)
    return Outcome.ok(CustomerSchema(id=customer_id, **values))


async def update_customer(db: AsyncSession, customer_id: int, customer: CustomerUpdate) -> Outcome:
    """Replace every field of an existing customer."""
    values = customer.model_dump()
    try:
        result = await db.execute(
            update(Customer).where(Customer.id == customer_id).values(**values)
        )
        await db.commit()
    except DATABASE_ERRORS as exc:
        return await failure(db, exc, f"Error updating customer {customer_id}")

    if result.rowcount == 0:
        return Outcome.not_found(f"Customer {customer_id} not found")
    logger.info("Customer %s updated", customer_id)
    return Outcome.ok(CustomerSchema(id=customer_id, **values))


async def remove_customer(db: AsyncSession, customer_id: int) -> Outcome:
    """Delete a customer by id."""
    try:
        result = await db.execute(delete(Customer).where(Customer.id == customer_id))
        await db.commit()
    except DATABASE_ERRORS as exc:
        return await failure(db, exc, f"Error removing customer {customer_id}")

    if result.rowcount == 0:
        return Outcome.not_found(f"Customer {customer_id} not found")
    logger.info("Customer %s removed", customer_id)
    return Outcome.ok()
