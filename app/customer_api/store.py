"""
Prepared-statement binding over a SQLAlchemy engine.

    db.prepare('SELECT * FROM "Customers" WHERE "CustomerId" = ?').bind(7).all()
    db.prepare('DELETE FROM "Customers" WHERE "CustomerId" = ?').bind(7).run()

Statements use `?` positional placeholders. They are rewritten to named bind
parameters before execution so the same text runs on SQLite and Postgres.
Every database failure surfaces as StoreError, including driver-side
OverflowError for integers the backend cannot store.
"""

from __future__ import annotations

import dataclasses
import logging
import time
from dataclasses import dataclass, field
from typing import Any, Sequence

from sqlalchemy import text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

logger = logging.getLogger(__name__)


class StoreError(RuntimeError):
    pass


@dataclass(frozen=True)
class RunMeta:
    changes: int = 0
    last_row_id: int | None = None
    duration: float = 0.0  # milliseconds


@dataclass(frozen=True)
class RunResult:
    success: bool
    meta: RunMeta = field(default_factory=RunMeta)


@dataclass(frozen=True)
class QueryResult:
    results: list[dict[str, Any]]
    success: bool = True
    meta: RunMeta = field(default_factory=RunMeta)


def to_named_params(sql: str, params: Sequence[Any]) -> tuple[str, dict[str, Any]]:
    """
    Rewrite `?` placeholders to `:p0, :p1, ...` and pair them with `params`.
    Question marks inside quoted literals are kept as-is.
    """
    out: list[str] = []
    quote: str | None = None
    n = 0
    for ch in sql:
        if quote:
            if ch == quote:
                quote = None
            out.append(ch)
        elif ch in ("'", '"'):
            quote = ch
            out.append(ch)
        elif ch == "?":
            out.append(f":p{n}")
            n += 1
        else:
            out.append(ch)
    if n != len(params):
        raise StoreError(f"Statement expects {n} bind values, got {len(params)}")
    return "".join(out), {f"p{i}": v for i, v in enumerate(params)}


@dataclass(frozen=True)
class PreparedStatement:
    db: "Database"
    sql: str
    params: tuple[Any, ...] = ()

    def bind(self, *params: Any) -> "PreparedStatement":
        return dataclasses.replace(self, params=tuple(params))

    def all(self) -> QueryResult:
        return self.db.execute_query(self.sql, self.params)

    def run(self) -> RunResult:
        return self.db.execute_write(self.sql, self.params)


class Database:
    def __init__(self, engine: Engine) -> None:
        self.engine = engine

    def prepare(self, sql: str) -> PreparedStatement:
        return PreparedStatement(self, sql)

    def execute_query(self, sql: str, params: Sequence[Any]) -> QueryResult:
        stmt, binds = to_named_params(sql, params)
        started = time.perf_counter()
        try:
            with self.engine.connect() as conn:
                rows = [dict(m) for m in conn.execute(text(stmt), binds).mappings().all()]
        except (SQLAlchemyError, OverflowError) as e:
            raise StoreError(str(e)) from e
        elapsed = (time.perf_counter() - started) * 1000.0
        logger.debug("query ok rows=%s ms=%.2f sql=%s", len(rows), elapsed, sql)
        return QueryResult(results=rows, meta=RunMeta(duration=elapsed))

    def execute_write(self, sql: str, params: Sequence[Any]) -> RunResult:
        stmt, binds = to_named_params(sql, params)
        started = time.perf_counter()
        try:
            with self.engine.begin() as conn:
                result = conn.execute(text(stmt), binds)
                changes = result.rowcount if result.rowcount is not None and result.rowcount >= 0 else 0
                last_row_id = result.lastrowid or None
        except (SQLAlchemyError, OverflowError) as e:
            raise StoreError(str(e)) from e
        elapsed = (time.perf_counter() - started) * 1000.0
        logger.debug("write ok changes=%s last_row_id=%s ms=%.2f sql=%s", changes, last_row_id, elapsed, sql)
        return RunResult(success=True, meta=RunMeta(changes=changes, last_row_id=last_row_id, duration=elapsed))
