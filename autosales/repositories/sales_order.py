"""
Data access for sales orders.

Orders reference a car and a customer by id. Nothing here checks that those
rows exist; a database enforcing the foreign keys rejects the statement and
the call comes back INVALID.
"""
import logging

from sqlalchemy import delete, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from autosales.models.sales_order import SalesOrder
from autosales.outcome import DATABASE_ERRORS, Outcome
from autosales.repositories.base import failure
from autosales.schemas.sales_order import (
    SalesOrder as SalesOrderSchema,
    SalesOrderCreate,
    SalesOrderUpdate,
)

logger = logging.getLogger(__name__)


async def list_sales_orders(db: AsyncSession) -> Outcome:
    """Fetch every sales order, ordered by id."""
    try:
        result = await db.execute(select(SalesOrder).order_by(SalesOrder.id))
        orders = [SalesOrderSchema.model_validate(row) for row in result.scalars().all()]
    except DATABASE_ERRORS as exc:
        return await failure(db, exc, "Error listing sales orders")
    return Outcome.ok(orders)


async def get_sales_order(db: AsyncSession, order_id: int) -> Outcome:
    """Fetch one sales order by id."""
    try:
        result = await db.execute(select(SalesOrder).where(SalesOrder.id == order_id))
        row = result.scalar_one_or_none()
    except DATABASE_ERRORS as exc:
        return await failure(db, exc, f"Error fetching sales order {order_id}")

    if row is None:
        return Outcome.not_found(f"Sales order {order_id} not found")
    return Outcome.ok(SalesOrderSchema.model_validate(row))


async def create_sales_order(db: AsyncSession, order: SalesOrderCreate) -> Outcome:
    """Insert a sales order. The database assigns the id."""
    values = order.model_dump()
    try:
        result = await db.execute(
            insert(SalesOrder).values(**values).returning(SalesOrder.id)
        )
        order_id = result.scalar_one()
        await db.commit()
    except DATABASE_ERRORS as exc:
        return await failure(db, exc, "Error creating sales order")

    logger.info(
        "Sales order %s created (car %s, customer %s)",
        order_id, order.car_id, order.customer_id,
    )
    return Outcome.ok(SalesOrderSchema(id=order_id, **values))


async def update_sales_order(db: AsyncSession, order_id: int, order: SalesOrderUpdate) -> Outcome:
    """Replace every field of an existing sales order."""
    values = order.model_dump()
    try:
        result = await db.execute(
            update(SalesOrder).where(SalesOrder.id == order_id).values(**values)
        )
        await db.commit()
    except DATABASE_ERRORS as exc:
        return await failure(db, exc, f"Error updating sales order {order_id}")

    if result.rowcount == 0:
        return Outcome.not_found(f"Sales order {order_id} not found")
    logger.info("Sales order %s updated", order_id)
    return Outcome.ok(SalesOrderSchema(id=order_id, **values))


async def remove_sales_order(db: AsyncSession, order_id: int) -> Outcome:
    """Delete a sales order by id."""
    try:
        result = await db.execute(delete(SalesOrder).where(SalesOrder.id == order_id))
        await db.commit()
    except DATABASE_ERRORS as exc:
        return await failure(db, exc, f"Error removing sales order {order_id}")

    if result.rowcount == 0:
        return Outcome.not_found(f"Sales order {order_id} not found")
    logger.info("Sales order %s removed", order_id)
    return Outcome.ok()
