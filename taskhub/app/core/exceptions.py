"""
Custom HTTP exceptions, the gateway error table and the global exception
handlers for TaskHub.

Every failure that reaches a client is rendered here: domain exceptions,
Err results returned by services, and gateway errors escaping a route.
"""
from __future__ import annotations

import logging
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel
from sqlalchemy.exc import SQLAlchemyError

from app.core.result import Err, Failure, GatewayFailure, NotFound, Ok, Result
from app.db.errors import GatewayError, translate_db_error

logger = logging.getLogger(__name__)


# ── Custom exception classes ──────────────────────────────────────────────────

class TaskHubException(Exception):
    """Base exception for all TaskHub domain errors."""

    def __init__(
        self,
        status_code: int,
        detail: str,
        error_code: str | None = None,
    ) -> None:
        self.status_code = status_code
        self.detail = detail
        self.error_code = error_code or "TASKHUB_ERROR"
        super().__init__(detail)


class UnauthorizedException(TaskHubException):
    def __init__(self, detail: str = "Authentication required") -> None:
        super().__init__(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=detail,
            error_code="UNAUTHORIZED",
        )


class InvalidTokenException(TaskHubException):
    def __init__(self, detail: str = "Invalid or expired token") -> None:
        super().__init__(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=detail,
            error_code="INVALID_TOKEN",
        )


class ConflictException(TaskHubException):
    def __init__(self, detail: str) -> None:
        super().__init__(
            status_code=status.HTTP_409_CONFLICT,
            detail=detail,
            error_code="CONFLICT",
        )


# ── Gateway error table ───────────────────────────────────────────────────────

def _field(meta: dict[str, Any]) -> str:
    return str(meta.get("field_name") or "")


def normalize_gateway_error(
    code: str | None,
    meta: dict[str, Any],
    message: str,
) -> tuple[int, str]:
    """
    Map a gateway error code to (HTTP status, client message).
    The "2011"/"2012" keys are matched literally, without the P prefix.
    """
    if code == "P2002":
        return status.HTTP_400_BAD_REQUEST, "Duplicate entry"
    if code == "P2003":
        return status.HTTP_400_BAD_REQUEST, f"Foreign key constraint violation {_field(meta)}".rstrip()
    if code == "P2025":
        return status.HTTP_404_NOT_FOUND, str(meta.get("cause") or message)
    if code in ("P2005", "P2006", "P2007"):
        return status.HTTP_400_BAD_REQUEST, f"Invalid field value {_field(meta)}".rstrip()
    if code == "2011":
        return status.HTTP_400_BAD_REQUEST, f"Null constraint violation {_field(meta)}".rstrip()
    if code == "2012":
        return status.HTTP_400_BAD_REQUEST, f"Missing required field {_field(meta)}".rstrip()
    if code == "P2015":
        return status.HTTP_404_NOT_FOUND, "Record not found"
    return status.HTTP_500_INTERNAL_SERVER_ERROR, message


# ── Response builders ─────────────────────────────────────────────────────────

def _error_response(status_code: int, content: dict[str, Any]) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=content)


def gateway_error_response(
    code: str | None,
    meta: dict[str, Any],
    message: str,
    operation: str | None = None,
) -> JSONResponse:
    if code is None:
        if operation:
            return _error_response(
                status.HTTP_500_INTERNAL_SERVER_ERROR,
                {"message": operation, "error": message},
            )
        return _error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, {"message": message})

    status_code, client_message = normalize_gateway_error(code, meta, message)
    if status_code >= 500:
        logger.error("Unmapped gateway error %s: %s", code, message)
    return _error_response(status_code, {"message": client_message, "code": code})


def failure_response(failure: Failure) -> JSONResponse:
    if isinstance(failure, NotFound):
        return _error_response(status.HTTP_404_NOT_FOUND, {"message": failure.message})
    if isinstance(failure, GatewayFailure):
        return gateway_error_response(
            failure.code, failure.meta, failure.message, failure.operation
        )
    raise TypeError(f"Unsupported failure type: {type(failure).__name__}")


def respond(result: Result[Any], schema: type[BaseModel] | None = None) -> Any:
    """
    Turn a service result into a route return value.
    Ok values are validated into `schema` (lists element-wise); Err values
    become the JSON error response for their failure.
    """
    if isinstance(result, Err):
        return failure_response(result.failure)
    if not isinstance(result, Ok):
        raise TypeError(f"Expected a Result, got {type(result).__name__}")

    value = result.value
    if schema is None:
        return value
    if isinstance(value, list):
        return [schema.model_validate(item) for item in value]
    return schema.model_validate(value)


# ── Exception handlers ────────────────────────────────────────────────────────

async def taskhub_exception_handler(
    request: Request, exc: TaskHubException
) -> JSONResponse:
    return _error_response(exc.status_code, {"message": exc.detail, "code": exc.error_code})


async def gateway_exception_handler(request: Request, exc: GatewayError) -> JSONResponse:
    return gateway_error_response(exc.code, exc.meta, exc.message)


async def database_exception_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    error = translate_db_error(exc)
    return gateway_error_response(error.code, error.meta, error.message)


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    errors = []
    for error in exc.errors():
        field = " -> ".join(str(loc) for loc in error["loc"])
        errors.append({"field": field, "message": error["msg"]})
    return _error_response(
        422,
        {"message": "Request validation failed", "errors": errors},
    )


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return _error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, {"message": str(exc)})


def register_exception_handlers(app: FastAPI) -> None:
    """Register all custom exception handlers on the FastAPI application."""
    app.add_exception_handler(TaskHubException, taskhub_exception_handler)  # type: ignore[arg-type]
    app.add_exception_handler(GatewayError, gateway_exception_handler)  # type: ignore[arg-type]
    app.add_exception_handler(SQLAlchemyError, database_exception_handler)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, validation_exception_handler)  # type: ignore[arg-type]
    app.add_exception_handler(Exception, generic_exception_handler)
