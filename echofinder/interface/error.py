"""Interface layer errors.

Maps domain errors and framework errors to a stable error envelope:

    {"error": {"code": "NOT_FOUND", "message": "...", "details": {}}}
"""

from enum import Enum
from typing import Any

import logfire
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field
from starlette.exceptions import HTTPException as StarletteHTTPException

from echofinder.domain.error import (
    BusinessRuleViolationError,
    ConflictError,
    DomainError,
    NotFoundError,
    ValidationError,
)

CORRELATION_ID_HEADER = "X-Correlation-Id"


class ErrorCode(str, Enum):
    """Client-facing error codes."""

    VALIDATION_ERROR = "VALIDATION_ERROR"
    NOT_FOUND = "NOT_FOUND"
    CONFLICT = "CONFLICT"
    UNAUTHORIZED = "UNAUTHORIZED"
    FORBIDDEN = "FORBIDDEN"
    RATE_LIMITED = "RATE_LIMITED"
    INTERNAL = "INTERNAL"


class ErrorDetail(BaseModel):
    """Body of the error envelope."""

    code: ErrorCode
    message: str
    details: dict[str, Any] = Field(default_factory=dict)


class ErrorEnvelope(BaseModel):
    """Error response returned by every endpoint."""

    error: ErrorDetail


_STATUS_CODES: dict[int, ErrorCode] = {
    status.HTTP_401_UNAUTHORIZED: ErrorCode.UNAUTHORIZED,
    status.HTTP_403_FORBIDDEN: ErrorCode.FORBIDDEN,
    status.HTTP_404_NOT_FOUND: ErrorCode.NOT_FOUND,
    status.HTTP_409_CONFLICT: ErrorCode.CONFLICT,
    status.HTTP_429_TOO_MANY_REQUESTS: ErrorCode.RATE_LIMITED,
}


def classify(exc: Exception) -> tuple[ErrorCode, int]:
    """Map a domain error to its error code and HTTP status."""
    if isinstance(exc, ValidationError):
        return ErrorCode.VALIDATION_ERROR, status.HTTP_400_BAD_REQUEST
    if isinstance(exc, NotFoundError):
        return ErrorCode.NOT_FOUND, status.HTTP_404_NOT_FOUND
    if isinstance(exc, (ConflictError, BusinessRuleViolationError)):
        return ErrorCode.CONFLICT, status.HTTP_409_CONFLICT
    return ErrorCode.INTERNAL, status.HTTP_500_INTERNAL_SERVER_ERROR


def code_for_status(status_code: int) -> ErrorCode:
    """Map an HTTP status raised by the framework to an error code."""
    if status_code in _STATUS_CODES:
        return _STATUS_CODES[status_code]
    if 400 <= status_code < 500:
        return ErrorCode.VALIDATION_ERROR
    return ErrorCode.INTERNAL


def error_response(
    request: Request,
    code: ErrorCode,
    message: str,
    status_code: int,
    details: dict[str, Any] | None = None,
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    """Build an error envelope response."""
    envelope = ErrorEnvelope(
        error=ErrorDetail(code=code, message=message, details=details or {})
    )
    response_headers = dict(headers or {})
    correlation_id = getattr(request.state, "correlation_id", None)
    if correlation_id:
        response_headers[CORRELATION_ID_HEADER] = correlation_id
    return JSONResponse(
        status_code=status_code,
        content=envelope.model_dump(mode="json"),
        headers=response_headers,
    )


async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    """Handle errors raised by the domain and application layers."""
    code, status_code = classify(exc)

    if code == ErrorCode.INTERNAL:
        return await unhandled_error_handler(request, exc)

    details = exc.details if isinstance(exc, ValidationError) else {}
    logfire.warn(
        "Request failed",
        code=code.value,
        error_type=type(exc).__name__,
        error=str(exc),
        path=request.url.path,
    )
    return error_response(request, code, str(exc), status_code, details)


async def request_validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Handle malformed requests rejected by FastAPI."""
    details: dict[str, str] = {}
    for error in exc.errors():
        # Drop the leading "body"/"query"/"path" location
        loc = [str(part) for part in error.get("loc", ())[1:]] or ["request"]
        details.setdefault(".".join(loc), error.get("msg", "Invalid value"))

    logfire.warn("Request validation failed", path=request.url.path, fields=list(details))
    return error_response(
        request,
        ErrorCode.VALIDATION_ERROR,
        "Request validation failed",
        status.HTTP_400_BAD_REQUEST,
        details,
    )


async def http_error_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Handle HTTP errors raised by routing or by route handlers."""
    code = code_for_status(exc.status_code)
    message = exc.detail if isinstance(exc.detail, str) else code.value
    logfire.warn(
        "HTTP error",
        code=code.value,
        status_code=exc.status_code,
        path=request.url.path,
    )
    return error_response(
        request,
        code,
        message,
        exc.status_code,
        headers=getattr(exc, "headers", None),
    )


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle anything else. Internals are logged, never returned."""
    logfire.error(
        "Unhandled error",
        error_type=type(exc).__name__,
        error=str(exc),
        path=request.url.path,
        _exc_info=exc,
    )
    return error_response(
        request,
        ErrorCode.INTERNAL,
        "An unexpected error occurred",
        status.HTTP_500_INTERNAL_SERVER_ERROR,
    )


def register_error_handlers(app: FastAPI) -> None:
    """Install the error envelope handlers on the app."""
    app.add_exception_handler(DomainError, domain_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
