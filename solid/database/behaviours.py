"""Database: the Interface Segregation example.

Instead of one contract with connect/disconnect/query, each capability is
its own contract, so a read-only client depends on `Queryable` alone.
"""

from __future__ import annotations

import itertools
from abc import ABC, abstractmethod
from typing import Any, Mapping

from solid.contracts.conformance import check_conformance, declares
from solid.core.models import ERROR, OK, QueryError, Result


class Connectable(ABC):
    @abstractmethod
    @declares(OK, ERROR)
    def connect(self) -> Result:
        """Open a connection; the result value is the connection handle."""


class Disconnectable(ABC):
    @abstractmethod
    @declares(OK, ERROR)
    def disconnect(self, conn: int) -> Result:
        ...


class Queryable(ABC):
    @abstractmethod
    @declares(OK, ERROR)
    def query(self, conn: int, sql: str) -> Result:
        ...


def _select_table(sql: str) -> str | None:
    # Only `SELECT * FROM <table>` is understood.
    parts = sql.strip().rstrip(";").split()
    if len(parts) != 4 or [p.upper() for p in parts[:3]] != ["SELECT", "*", "FROM"]:
        return None
    return parts[3]


def _run_select(tables: Mapping[str, list[dict[str, Any]]], sql: str) -> Result:
    table = _select_table(sql)
    if table is None:
        return Result.failure(QueryError(reason="unsupported query"))
    if table not in tables:
        return Result.failure(QueryError(reason=f"unknown table {table}"))
    return Result.success([dict(row) for row in tables[table]])


class InMemoryDatabase(Connectable, Disconnectable, Queryable):
    def __init__(self, tables: Mapping[str, list[dict[str, Any]]] | None = None) -> None:
        self._tables: dict[str, list[dict[str, Any]]] = {k: list(v) for k, v in (tables or {}).items()}
        self._open: set[int] = set()
        self._handles = itertools.count(1)

    def connect(self) -> Result:
        conn = next(self._handles)
        self._open.add(conn)
        return Result.success(conn)

    def disconnect(self, conn: int) -> Result:
        if conn not in self._open:
            return Result.failure(QueryError(reason="not connected"))
        self._open.discard(conn)
        return Result.success()

    def query(self, conn: int, sql: str) -> Result:
        if conn not in self._open:
            return Result.failure(QueryError(reason="not connected"))
        return _run_select(self._tables, sql)

    def snapshot(self) -> dict[str, list[dict[str, Any]]]:
        return {k: [dict(r) for r in v] for k, v in self._tables.items()}


class ReadOnlyReplica(Queryable):
    """Serves queries from a fixed snapshot; any handle is accepted."""

    def __init__(self, tables: Mapping[str, list[dict[str, Any]]]) -> None:
        self._tables = {k: [dict(r) for r in v] for k, v in tables.items()}

    def query(self, conn: int, sql: str) -> Result:
        return _run_select(self._tables, sql)


def fetch_all(db: Queryable, conn: int, table: str) -> Result:
    check_conformance(Queryable, db)
    return db.query(conn, f"SELECT * FROM {table}")
