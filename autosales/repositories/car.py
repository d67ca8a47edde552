"""
Data access for cars.
"""
import logging

from sqlalchemy import delete, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from autosales.models.car import Car
from autosales.outcome import DATABASE_ERRORS, Outcome
from autosales.repositories.base import failure
from autosales.schemas.car import Car as CarSchema, CarCreate, CarUpdate

logger = logging.getLogger(__name__)


async def list_cars(db: AsyncSession) -> Outcome:
    """Fetch every car, ordered by id."""
    try:
        result = await db.execute(select(Car).order_by(Car.id))
        cars = [CarSchema.model_validate(row) for row in result.scalars().all()]
    except DATABASE_ERRORS as exc:
        return await failure(db, exc, "Error listing cars")
    return Outcome.ok(cars)


async def get_car(db: AsyncSession, car_id: int) -> Outcome:
    try:
        result = await db.execute(select(Car).where(Car.id == car_id))
        row = result.scalar_one_or_none()
    except DATABASE_ERRORS as exc:
        return await failure(db, exc, f"Error fetching car {car_id}")

    if row is None:
        return Outcome.not_found(f"Car {car_id} not found")
    return Outcome.ok(CarSchema.model_validate(row))


async def create_car(db: AsyncSession, car: CarCreate) -> Outcome:
    values = car.model_dump()
    try:
        result = await db.execute(insert(Car).values(**values).returning(Car.id))
        car_id = result.scalar_one()
        await db.commit()
    except DATABASE_ERRORS as exc:
        return await failure(db, exc, "Error creating car")

    logger.info("Car %s created", car_id)
    return Outcome.ok(CarSchema(id=car_id, **values))


async def update_car(db: AsyncSession, car_id: int, car: CarUpdate) -> Outcome:
    values = car.model_dump()
    try:
        result = await db.execute(update(Car).where(Car.id == car_id).values(**values))
        await db.commit()
    except DATABASE_ERRORS as exc:
        return await failure(db, exc, f"Error updating car {car_id}")

    if result.rowcount == 0:
        return Outcome.not_found(f"Car {car_id} not found")
    logger.info("Car %s updated", car_id)
    return Outcome.ok(CarSchema(id=car_id, **values))


async def remove_car(db: AsyncSession, car_id: int) -> Outcome:
    try:
        result = await db.execute(delete(Car).where(Car.id == car_id))
        await db.commit()
    except DATABASE_ERRORS as exc:
        return await failure(db, exc, f"Error removing car {car_id}")

    if result.rowcount == 0:
        return Outcome.not_found(f"Car {car_id} not found")
    logger.info("Car %s removed", car_id)
    return Outcome.ok()
