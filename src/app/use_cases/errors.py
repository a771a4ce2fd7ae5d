"""Translation of domain errors into Result errors"""

from typing import Optional
from libs.result import Error
from src.domain.errors import BookkeepingError


def domain_error(exc: BookkeepingError) -> Error:
    return Error(
        code=exc.code,
        message=exc.message,
        reason=type(exc).__name__,
        field=exc.field,
    )


def validation_error(message: str, field: Optional[str] = None) -> Error:
    return Error(
        code="VALIDATION_ERROR",
        message=message,
        reason="Invalid input",
        field=field,
    )
