from __future__ import annotations

import json
import logging
import sqlite3
from dataclasses import dataclass
from sqlite3 import Connection
from typing import Any, Callable, Mapping, Optional

from ..db import get_conn
from ..domain.query_builder import (
    FilterField,
    build_count_query,
    build_export_query,
    build_list_query,
)

logger = logging.getLogger(__name__)


@dataclass
class DbResult:
    status: bool
    data: Any = None
    message: Optional[str] = None
    not_found: bool = False


@dataclass(frozen=True)
class TableSpec:
    name: str
    label: str
    filters: tuple[FilterField, ...]
    insert_columns: tuple[str, ...]
    update_columns: tuple[str, ...]
    id_column: str = "id"
    json_columns: tuple[str, ...] = ()
    select_columns: Optional[tuple[str, ...]] = None
    order_by: str = "created_at DESC, rowid DESC"
    status_column: Optional[str] = "status"


class EntityRepository:
    def __init__(self, spec: TableSpec):
        self.spec = spec

    # -- helpers -------------------------------------------------------------
    def _row_to_dict(self, row: sqlite3.Row) -> dict:
        out = dict(row)
        for col in self.spec.json_columns:
            raw = out.get(col)
            if isinstance(raw, str) and raw:
                try:
                    out[col] = json.loads(raw)
                except ValueError:
                    pass
        return out

    def _encode(self, col: str, value: Any) -> Any:
        if col in self.spec.json_columns and value is not None and not isinstance(value, str):
            return json.dumps(value, ensure_ascii=False)
        return value

    def _select(self) -> str:
        return ", ".join(self.spec.select_columns) if self.spec.select_columns else "*"

    def run(self, op: str, fn: Callable[[Connection], DbResult]) -> DbResult:
        try:
            with get_conn() as conn:
                return fn(conn)
        except sqlite3.Error as e:
            logger.error("%s.%s failed: %s", self.spec.name, op, e)
            return DbResult(False, message=f"Failed to {op} {self.spec.label}")

    def _fetch_one(self, conn: Connection, column: str, value: Any) -> DbResult:
        row = conn.execute(
            f"SELECT {self._select()} FROM {self.spec.name} WHERE {column} = ?", (value,)
        ).fetchone()
        if row is None:
            return DbResult(False, message=f"{self.spec.label.capitalize()} not found", not_found=True)
        return DbResult(True, self._row_to_dict(row))

    # -- reads ---------------------------------------------------------------
    def fetch_page(self, filters: Mapping[str, Any] | None, page: int, limit: int) -> DbResult:
        sql, params = build_list_query(
            self.spec.name, self.spec.filters, filters, page, limit,
            columns=self.spec.select_columns, order_by=self.spec.order_by,
        )
        return self.run("fetch", lambda conn: DbResult(
            True, [self._row_to_dict(r) for r in conn.execute(sql, params).fetchall()]
        ))

    def count(self, filters: Mapping[str, Any] | None) -> DbResult:
        sql, params = build_count_query(self.spec.name, self.spec.filters, filters)
        return self.run("count", lambda conn: DbResult(True, int(conn.execute(sql, params).fetchone()["count"])))

    def fetch_all(self, filters: Mapping[str, Any] | None) -> DbResult:
        sql, params = build_export_query(
            self.spec.name, self.spec.filters, filters,
            columns=self.spec.select_columns, order_by=self.spec.order_by,
        )
        return self.run("export", lambda conn: DbResult(
            True, [self._row_to_dict(r) for r in conn.execute(sql, params).fetchall()]
        ))

    def get_by_id(self, item_id: Any) -> DbResult:
        return self.run("fetch", lambda conn: self._fetch_one(conn, self.spec.id_column, item_id))

    def get_by(self, column: str, value: Any) -> DbResult:
        return self.run("fetch", lambda conn: self._fetch_one(conn, column, value))

    def count_by_status(self) -> DbResult:
        col = self.spec.status_column
        sql = f"SELECT {col} AS status, COUNT(*) AS count FROM {self.spec.name} GROUP BY {col} ORDER BY {col}"
        return self.run("summarize", lambda conn: DbResult(
            True, {str(r["status"]): int(r["count"]) for r in conn.execute(sql).fetchall()}
        ))

    # -- writes --------------------------------------------------------------
    def insert(self, data: Mapping[str, Any]) -> DbResult:
        cols = [c for c in self.spec.insert_columns if c in data]

        def _do(conn: Connection) -> DbResult:
            cur = conn.execute(
                f"INSERT INTO {self.spec.name} ({', '.join(cols)}) VALUES ({','.join(['?'] * len(cols))})",
                [self._encode(c, data[c]) for c in cols],
            )
            key = data[self.spec.id_column] if self.spec.id_column in data else cur.lastrowid
            return self._fetch_one(conn, self.spec.id_column, key)

        return self.run("create", _do)

    def update(self, item_id: Any, data: Mapping[str, Any]) -> DbResult:
        cols = [c for c in self.spec.update_columns if c in data]
        if not cols:
            return DbResult(False, message="No fields to update")

        def _do(conn: Connection) -> DbResult:
            sets = ", ".join(f"{c} = ?" for c in cols)
            conn.execute(
                f"UPDATE {self.spec.name} SET {sets}, updated_at = CURRENT_TIMESTAMP WHERE {self.spec.id_column} = ?",
                [self._encode(c, data[c]) for c in cols] + [item_id],
            )
            return self._fetch_one(conn, self.spec.id_column, item_id)

        return self.run("update", _do)

    def delete(self, item_id: Any) -> DbResult:
        def _do(conn: Connection) -> DbResult:
            cur = conn.execute(f"DELETE FROM {self.spec.name} WHERE {self.spec.id_column} = ?", (item_id,))
            return DbResult(True, cur.rowcount)

        return self.run("delete", _do)
