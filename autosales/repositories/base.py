"""
Failure handling shared by the repositories.
"""
import logging
from typing import Union

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from autosales.outcome import DATABASE_ERRORS, Outcome

logger = logging.getLogger(__name__)


async def failure(db: AsyncSession, exc: Union[SQLAlchemyError, OSError], message: str) -> Outcome:
    """
    Log a database error, roll back the session and turn the error into a
    failed Outcome.
    """
    logger.exception(message)
    try:
        await db.rollback()
    except DATABASE_ERRORS:
        logger.warning("Rollback failed after: %s", message)
    return Outcome.from_error(exc)
