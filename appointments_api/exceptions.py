import logging
from typing import Any, Sequence

from fastapi import HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .config import settings

logger = logging.getLogger(__name__)

MISSING_DATA_MESSAGE = "data is missing"


class APIException(HTTPException):
    def __init__(self, status_code: int, detail: str):
        super().__init__(status_code=status_code, detail=detail)


class MissingDataError(APIException):
    """The request body carried no ``data`` object at all."""

    def __init__(self, detail: str = MISSING_DATA_MESSAGE):
        super().__init__(status_code=400, detail=detail)


class ValidationError(APIException):
    """One or more fields violated a business rule.

    ``fields`` keeps the offending field names in the order they were
    checked; ``detail`` is the rendered message shown to clients.
    """

    def __init__(self, fields: Sequence[str], detail: str):
        super().__init__(status_code=400, detail=detail)
        self.fields = tuple(fields)


class NotFoundError(APIException):
    def __init__(self, appointment_id: Any):
        super().__init__(status_code=404, detail=f"Appointment {appointment_id} cannot be found.")
        self.appointment_id = appointment_id


class RouteNotFoundError(APIException):
    def __init__(self, path: str):
        super().__init__(status_code=404, detail=f"Path not found: {path}")
        self.path = path


class MethodNotAllowedError(APIException):
    def __init__(self, method: str, path: str):
        super().__init__(status_code=405, detail=f"{method} not allowed for {path}")


class StorageError(APIException):
    """Persistence failed during an otherwise valid operation."""

    def __init__(self, message: str = "Internal server error"):
        super().__init__(status_code=500, detail="Internal server error")
        self.message = message


def create_error_response(error_message: str) -> dict:
    """Create a standardized error response"""
    return {"error": error_message}


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Render every HTTP error as ``{"error": message}``."""
    if isinstance(exc, StorageError):
        logger.error(f"Storage failure on {request.method} {request.url.path}: {exc.message}")
        message = f"Internal server error: {exc.message}" if settings.DEBUG else exc.detail
        return JSONResponse(status_code=exc.status_code, content=create_error_response(message))

    headers = getattr(exc, "headers", None)
    if not isinstance(exc, APIException):
        # Framework-raised errors for unknown paths and methods
        if exc.status_code == 404:
            exc = RouteNotFoundError(request.url.path)
        elif exc.status_code == 405:
            exc = MethodNotAllowedError(request.method, request.url.path)

    return JSONResponse(
        status_code=exc.status_code,
        content=create_error_response(str(exc.detail)),
        headers=headers,
    )


async def request_validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Malformed JSON bodies and path/query parameters become 400s."""
    messages = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
        msg = error.get("msg", "Invalid value")
        messages.append(f"{location}: {msg}" if location else msg)
    detail = "; ".join(messages) or "Invalid request"
    return JSONResponse(status_code=400, content=create_error_response(detail))
