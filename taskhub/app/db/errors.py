"""
Gateway error codes for the persistence layer.

Database driver exceptions never leave the CRUD layer raw: they are classified
into a GatewayError carrying a short code (P2002 unique, P2003 foreign key,
P2011 not null, P2007 invalid data, P2025 missing record). Anything that can
not be classified keeps code=None and is treated as a non-gateway failure.
"""
from __future__ import annotations

import logging
import re
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any

from sqlalchemy.exc import DataError, IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

logger = logging.getLogger(__name__)

UNIQUE_VIOLATION = "P2002"
FOREIGN_KEY_VIOLATION = "P2003"
INVALID_VALUE = "P2007"
NULL_VIOLATION = "P2011"
RECORD_NOT_FOUND = "P2025"

# PostgreSQL SQLSTATE codes
_PG_UNIQUE = "23505"
_PG_FOREIGN_KEY = "23503"
_PG_NOT_NULL = "23502"

_SQLITE_CONSTRAINT = re.compile(
    r"(?P<kind>UNIQUE|NOT NULL) constraint failed: (?P<columns>[\w., ]+)"
)
_PG_KEY_DETAIL = re.compile(r"Key \((?P<columns>[^)]+)\)")


class GatewayError(Exception):
    """A failure reported by the persistence gateway."""

    def __init__(
        self,
        code: str | None,
        message: str,
        meta: dict[str, Any] | None = None,
    ) -> None:
        self.code = code
        self.message = message
        self.meta = meta or {}
        super().__init__(message)

    @property
    def is_known(self) -> bool:
        return self.code is not None

    def __repr__(self) -> str:
        return f"<GatewayError code={self.code} message={self.message!r}>"


def record_not_found(cause: str) -> GatewayError:
    return GatewayError(RECORD_NOT_FOUND, cause, meta={"cause": cause})


def _sqlstate(exc: SQLAlchemyError) -> str | None:
    orig = getattr(exc, "orig", None)
    return getattr(orig, "sqlstate", None) or getattr(orig, "pgcode", None)


def _driver_message(exc: SQLAlchemyError) -> str:
    orig = getattr(exc, "orig", None)
    return str(orig) if orig is not None else str(exc)


def _columns(exc: SQLAlchemyError) -> list[str]:
    """Best-effort extraction of the offending column names."""
    orig = getattr(exc, "orig", None)
    driver_exc = getattr(orig, "__cause__", None)

    column = getattr(driver_exc, "column_name", None)
    if column:
        return [column]

    detail = getattr(driver_exc, "detail", None) or ""
    match = _PG_KEY_DETAIL.search(detail)
    if match:
        return [c.strip() for c in match.group("columns").split(",")]

    match = _SQLITE_CONSTRAINT.search(_driver_message(exc))
    if match:
        return [c.strip().split(".")[-1] for c in match.group("columns").split(",")]
    return []


def _integrity_kind(exc: IntegrityError) -> str | None:
    state = _sqlstate(exc)
    if state == _PG_UNIQUE:
        return UNIQUE_VIOLATION
    if state == _PG_FOREIGN_KEY:
        return FOREIGN_KEY_VIOLATION
    if state == _PG_NOT_NULL:
        return NULL_VIOLATION

    text = _driver_message(exc)
    if "UNIQUE constraint failed" in text:
        return UNIQUE_VIOLATION
    if "FOREIGN KEY constraint failed" in text:
        return FOREIGN_KEY_VIOLATION
    if "NOT NULL constraint failed" in text:
        return NULL_VIOLATION
    return None


def translate_db_error(exc: SQLAlchemyError) -> GatewayError:
    """Classify a SQLAlchemy exception into a GatewayError."""
    if isinstance(exc, IntegrityError):
        code = _integrity_kind(exc)
        columns = _columns(exc)
        if code == UNIQUE_VIOLATION:
            fields = ", ".join(f"`{c}`" for c in columns)
            return GatewayError(
                code,
                f"Unique constraint failed on the fields: ({fields})",
                meta={"target": columns},
            )
        if code == FOREIGN_KEY_VIOLATION:
            field_name = columns[0] if columns else None
            return GatewayError(
                code,
                f"Foreign key constraint failed on the field: `{field_name}`",
                meta={"field_name": field_name},
            )
        if code == NULL_VIOLATION:
            field_name = columns[0] if columns else None
            return GatewayError(
                code,
                f"Null constraint violation on the fields: (`{field_name}`)",
                meta={"field_name": field_name},
            )

    if isinstance(exc, DataError):
        columns = _columns(exc)
        return GatewayError(
            INVALID_VALUE,
            f"Data validation error: {_driver_message(exc)}",
            meta={"field_name": columns[0] if columns else None},
        )

    logger.error("Unclassified database error: %s", exc)
    return GatewayError(None, _driver_message(exc))


@asynccontextmanager
async def atomic(db: AsyncSession) -> AsyncIterator[None]:
    """
    Run a unit of writes inside a SAVEPOINT.
    On failure only the savepoint is rolled back, so the request session
    stays usable, and driver errors are re-raised as GatewayError.
    """
    try:
        async with db.begin_nested():
            yield
    except SQLAlchemyError as exc:
        raise translate_db_error(exc) from exc
