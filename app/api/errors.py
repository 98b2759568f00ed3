"""Translation of engine errors into HTTP errors."""

from fastapi import HTTPException, status

from app.core.exceptions import (
    EmptyInputError,
    IntakeEngineError,
    InvalidSymptomError,
    UnknownSessionError,
)


def to_http_exception(exc: IntakeEngineError) -> HTTPException:
    """Map an engine error to the matching HTTP status."""
    if isinstance(exc, EmptyInputError):
        return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))
    if isinstance(exc, InvalidSymptomError):
        return HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(exc)
        )
    if isinstance(exc, UnknownSessionError):
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc))
    return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(exc))
