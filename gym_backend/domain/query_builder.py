"""
Filtered list-query construction shared by every entity.

An entity declares its filters once as a tuple of FilterField; build_where()
turns a filter mapping into a ``WHERE 1=1 AND ...`` fragment plus positional
parameters, and the count/list/export builders all reuse that one result, so
a page and its total are always computed under the same predicate.

Column names come only from the static FilterField declarations, never from
request input.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterable, Mapping, Sequence


class PredicateKind(str, Enum):
    EXACT = "exact"
    SUBSTRING = "substring"
    SEARCH = "search"
    DATE_FROM = "date_from"
    DATE_TO = "date_to"
    MIN = "min"
    MAX = "max"
    TAGS = "tags"


_TEXT_KINDS = {PredicateKind.SUBSTRING, PredicateKind.SEARCH, PredicateKind.DATE_FROM, PredicateKind.DATE_TO}


@dataclass(frozen=True)
class FilterField:
    name: str
    kind: PredicateKind
    columns: tuple[str, ...] = ()

    @property
    def column(self) -> str:
        return self.columns[0] if self.columns else self.name


def exact(name: str, column: str | None = None) -> FilterField:
    return FilterField(name, PredicateKind.EXACT, (column or name,))


def substring(name: str, column: str | None = None) -> FilterField:
    return FilterField(name, PredicateKind.SUBSTRING, (column or name,))


def search(*columns: str, name: str = "search") -> FilterField:
    return FilterField(name, PredicateKind.SEARCH, tuple(columns))


def date_range(from_name: str, to_name: str, column: str = "created_at") -> tuple[FilterField, FilterField]:
    return (
        FilterField(from_name, PredicateKind.DATE_FROM, (column,)),
        FilterField(to_name, PredicateKind.DATE_TO, (column,)),
    )


def numeric_range(min_name: str, max_name: str, column: str) -> tuple[FilterField, FilterField]:
    return (
        FilterField(min_name, PredicateKind.MIN, (column,)),
        FilterField(max_name, PredicateKind.MAX, (column,)),
    )


def tags(name: str = "tags", column: str | None = None) -> FilterField:
    return FilterField(name, PredicateKind.TAGS, (column or name,))


def _as_tag_list(value: Any) -> list[str]:
    # "a,b" and ["a,b"] (repeated query params) both mean two tags
    if not isinstance(value, (list, tuple, set)):
        value = [value]
    out: list[str] = []
    for t in value:
        if t is None:
            continue
        out.extend(p.strip() for p in str(t).split(",") if p.strip())
    return out


def normalize_filters(fields: Sequence[FilterField], filters: Mapping[str, Any] | None) -> dict[str, Any]:
    """
    Keep only declared filters that carry a value. Absent means None (or a
    blank string for text kinds, or an empty tag list); 0 and False are real
    values and are kept.
    """
    out: dict[str, Any] = {}
    if not filters:
        return out
    for f in fields:
        if f.name not in filters:
            continue
        v = filters[f.name]
        if v is None:
            continue
        if f.kind is PredicateKind.TAGS:
            v = _as_tag_list(v)
            if not v:
                continue
        elif f.kind in _TEXT_KINDS or isinstance(v, str):
            if isinstance(v, str) and not v.strip():
                continue
        out[f.name] = v
    return out


def build_where(fields: Sequence[FilterField], filters: Mapping[str, Any] | None) -> tuple[str, list[Any]]:
    clean = normalize_filters(fields, filters)
    where = "WHERE 1=1"
    params: list[Any] = []
    for f in fields:
        if f.name not in clean:
            continue
        v = clean[f.name]
        if f.kind is PredicateKind.EXACT:
            where += f" AND {f.column} = ?"
            params.append(v)
        elif f.kind is PredicateKind.SUBSTRING:
            where += f" AND {f.column} LIKE ?"
            params.append(f"%{v}%")
        elif f.kind is PredicateKind.SEARCH:
            where += " AND (" + " OR ".join(f"{c} LIKE ?" for c in f.columns) + ")"
            params.extend([f"%{v}%"] * len(f.columns))
        elif f.kind is PredicateKind.DATE_FROM:
            where += f" AND DATE({f.column}) >= ?"
            params.append(v)
        elif f.kind is PredicateKind.DATE_TO:
            where += f" AND DATE({f.column}) <= ?"
            params.append(v)
        elif f.kind is PredicateKind.MIN:
            where += f" AND {f.column} >= ?"
            params.append(v)
        elif f.kind is PredicateKind.MAX:
            where += f" AND {f.column} <= ?"
            params.append(v)
        elif f.kind is PredicateKind.TAGS:
            # tags column holds a JSON array; every requested tag must be present
            for t in v:
                where += f" AND EXISTS (SELECT 1 FROM json_each({f.column}) WHERE json_each.value = ?)"
                params.append(t)
    return where, params


def build_count_query(table: str, fields: Sequence[FilterField], filters: Mapping[str, Any] | None) -> tuple[str, list[Any]]:
    where, params = build_where(fields, filters)
    return f"SELECT COUNT(*) AS count FROM {table} {where}", params


def build_list_query(
    table: str,
    fields: Sequence[FilterField],
    filters: Mapping[str, Any] | None,
    page: int,
    limit: int,
    columns: Iterable[str] | None = None,
    order_by: str = "created_at DESC, rowid DESC",
) -> tuple[str, list[Any]]:
    sql, params = build_export_query(table, fields, filters, columns, order_by)
    return f"{sql} LIMIT ? OFFSET ?", params + [limit, (page - 1) * limit]


def build_export_query(
    table: str,
    fields: Sequence[FilterField],
    filters: Mapping[str, Any] | None,
    columns: Iterable[str] | None = None,
    order_by: str = "created_at DESC, rowid DESC",
) -> tuple[str, list[Any]]:
    where, params = build_where(fields, filters)
    cols = ", ".join(columns) if columns else "*"
    return f"SELECT {cols} FROM {table} {where} ORDER BY {order_by}", params
