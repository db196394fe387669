"""
Explicit result values returned by the service layer.

Services never raise for expected failures (missing rows, constraint
violations); they return Err(...) and the route hands the result to
app.core.exceptions.respond(), the one place failures become HTTP responses.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar, Union

from app.db.errors import GatewayError

T = TypeVar("T")


@dataclass(frozen=True)
class NotFound:
    entity: str

    @property
    def message(self) -> str:
        return f"{self.entity} not found"


@dataclass(frozen=True)
class GatewayFailure:
    code: str | None
    message: str
    meta: dict[str, Any] = field(default_factory=dict)
    operation: str | None = None

    @classmethod
    def from_error(cls, exc: GatewayError, operation: str | None = None) -> "GatewayFailure":
        return cls(code=exc.code, message=exc.message, meta=dict(exc.meta), operation=operation)


Failure = Union[NotFound, GatewayFailure]


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T


@dataclass(frozen=True)
class Err:
    failure: Failure


Result = Union[Ok[T], Err]
