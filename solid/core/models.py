from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional, Union


OK = "OK"
ERROR = "ERROR"


@dataclass(frozen=True)
class DeliveryError:
    reason: str

    @property
    def kind(self) -> str:
        return "delivery_error"


@dataclass(frozen=True)
class UnknownImplementation:
    name: str

    @property
    def kind(self) -> str:
        return "unknown_implementation"


@dataclass(frozen=True)
class QueryError:
    reason: str

    @property
    def kind(self) -> str:
        return "query_error"


ErrorKind = Union[DeliveryError, UnknownImplementation, QueryError]


@dataclass(frozen=True)
class Result:
    """Tagged success-or-error value returned by every contract operation."""

    status: str  # OK / ERROR
    value: Any = None
    error: Optional[ErrorKind] = None

    @property
    def ok(self) -> bool:
        return self.status == OK

    @staticmethod
    def success(value: Any = None) -> "Result":
        return Result(status=OK, value=value)

    @staticmethod
    def failure(error: ErrorKind) -> "Result":
        return Result(status=ERROR, error=error)
