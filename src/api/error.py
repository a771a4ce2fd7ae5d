"""HTTP error translation

Use case errors travel to clients as `{"error": {"code", "message", "field"}}`.
"""

from fastapi import Request, status
from fastapi.responses import JSONResponse
from libs.result import Error
from src.app.use_cases.errors import domain_error
from src.domain.errors import StoreUnavailable

STATUS_BY_CODE = {
    "DOCUMENT_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "EXPENSE_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "DUPLICATE_DOCUMENT_NUMBER": status.HTTP_409_CONFLICT,
    "STORE_UNAVAILABLE": status.HTTP_503_SERVICE_UNAVAILABLE,
    "UNAUTHENTICATED": status.HTTP_401_UNAUTHORIZED,
}


class ClientError(Exception):
    def __init__(self, error: Error, status_code: int = status.HTTP_400_BAD_REQUEST):
        super().__init__(error.message)
        self.error = error
        self.status_code = status_code


def error_status(error: Error) -> int:
    """HTTP status for a use case error code, 400 when the code is not mapped"""
    return STATUS_BY_CODE.get(error.code, status.HTTP_400_BAD_REQUEST)


def raise_for_error(error: Error):
    raise ClientError(error, status_code=error_status(error))


def error_body(error: Error) -> dict:
    body = {"code": error.code, "message": error.message}
    if error.field:
        body["field"] = error.field
    return {"error": body}


async def client_error_handler(request: Request, exc: ClientError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content=error_body(exc.error))


async def store_unavailable_handler(request: Request, exc: StoreUnavailable) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content=error_body(domain_error(exc)),
    )
