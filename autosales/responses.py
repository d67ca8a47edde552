"""
Translation of repository outcomes into HTTP responses.
"""
from fastapi import status
from fastapi.responses import JSONResponse

from autosales.config import get_settings
from autosales.outcome import Outcome, OutcomeStatus

# Used only when distinct_error_status is enabled
STATUS_BY_OUTCOME = {
    OutcomeStatus.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    # Literal: Starlette renamed the 422 constant and deprecated the old name
    OutcomeStatus.INVALID: 422,
    OutcomeStatus.UNAVAILABLE: status.HTTP_503_SERVICE_UNAVAILABLE,
}

INVALID_REQUEST_MESSAGE = "Dados inválidos na requisição."


def error_status(outcome_status: OutcomeStatus) -> int:
    """Every failure is a 400 unless the deployment asks for distinct codes."""
    if get_settings().distinct_error_status:
        return STATUS_BY_OUTCOME.get(outcome_status, status.HTTP_400_BAD_REQUEST)
    return status.HTTP_400_BAD_REQUEST


def failure_response(outcome: Outcome, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=error_status(outcome.status),
        content={"message": message},
    )


def message(text: str) -> dict:
    return {"message": text}
