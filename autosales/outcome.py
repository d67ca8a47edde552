"""
Result type returned by every repository function.
"""
import enum
from dataclasses import dataclass
from typing import Any, Optional, Union

from sqlalchemy.exc import IntegrityError, SQLAlchemyError

# Drivers such as asyncpg raise a bare OSError when the server refuses the connection
DATABASE_ERRORS = (SQLAlchemyError, OSError)


class OutcomeStatus(str, enum.Enum):
    """Outcome status enumeration."""
    OK = "ok"
    NOT_FOUND = "not_found"
    INVALID = "invalid"
    UNAVAILABLE = "unavailable"


@dataclass(frozen=True)
class Outcome:
    """
    Success or failure of a data-access call.

    Truthy only when the call succeeded, so ``if outcome:`` reads the same
    as checking a boolean result. ``data`` carries the entity or the list of
    entities on success; ``detail`` carries the cause on failure.
    """
    status: OutcomeStatus
    data: Any = None
    detail: Optional[str] = None

    def __bool__(self) -> bool:
        return self.status is OutcomeStatus.OK

    @classmethod
    def ok(cls, data: Any = None) -> "Outcome":
        return cls(OutcomeStatus.OK, data)

    @classmethod
    def not_found(cls, detail: Optional[str] = None) -> "Outcome":
        return cls(OutcomeStatus.NOT_FOUND, detail=detail)

    @classmethod
    def invalid(cls, detail: Optional[str] = None) -> "Outcome":
        return cls(OutcomeStatus.INVALID, detail=detail)

    @classmethod
    def unavailable(cls, detail: Optional[str] = None) -> "Outcome":
        return cls(OutcomeStatus.UNAVAILABLE, detail=detail)

    @classmethod
    def from_error(cls, exc: Union[SQLAlchemyError, OSError]) -> "Outcome":
        """Constraint violations are the caller's fault; anything else is infrastructure."""
        if isinstance(exc, IntegrityError):
            return cls.invalid(str(exc.orig))
        return cls.unavailable(str(exc))
