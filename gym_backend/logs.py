import json, time, uuid, datetime as dt
import logging
import sqlite3
from typing import Optional, Tuple, List, Dict, Any

from .db import get_conn
from .domain.query_builder import build_count_query, build_list_query, date_range, exact, search

logger = logging.getLogger(__name__)

LOG_FILTERS = (
    search("payload_json", "before_json", "after_json", name="query"),
    exact("action"),
    exact("entity_type"),
    *date_range("ts_from", "ts_to", column="ts"),
)


class LogContext:
    """Collects one operation (payload, before/after, entity) and writes it to operation_log."""

    def __init__(self, action: str, user: str = "admin"):
        self.action = action
        self.user = user
        self.request_id = str(uuid.uuid4())
        self.start = time.perf_counter()
        self.before = None
        self.after = None
        self.payload = None
        self.entity_type = None
        self.entity_id = None

    def set_entity(self, etype: str, eid):
        self.entity_type = etype
        self.entity_id = None if eid is None else str(eid)

    def set_before(self, obj): self.before = obj
    def set_after(self, obj): self.after = obj
    def set_payload(self, obj): self.payload = obj

    def write(self, result: str = "OK", err: Optional[str] = None):
        elapsed_ms = int((time.perf_counter() - self.start) * 1000)
        rec = {
            "ts": dt.datetime.now(dt.timezone.utc).isoformat(timespec="seconds"),
            "user": self.user,
            "action": self.action,
            "entity_type": self.entity_type,
            "entity_id": self.entity_id,
            "request_id": self.request_id,
            "before_json": json.dumps(self.before, ensure_ascii=False, default=str) if self.before is not None else None,
            "after_json": json.dumps(self.after, ensure_ascii=False, default=str) if self.after is not None else None,
            "payload_json": json.dumps(self.payload, ensure_ascii=False, default=str) if self.payload is not None else None,
            "result": result,
            "err_msg": err,
            "latency_ms": elapsed_ms,
        }
        try:
            with get_conn() as conn:
                conn.execute(
                    """INSERT INTO operation_log
                    (ts,user,action,entity_type,entity_id,request_id,before_json,after_json,payload_json,result,err_msg,latency_ms)
                    VALUES(:ts,:user,:action,:entity_type,:entity_id,:request_id,:before_json,:after_json,:payload_json,:result,:err_msg,:latency_ms)""",
                    rec
                )
        except sqlite3.Error as e:
            logger.warning("operation_log write failed for %s: %s", self.action, e)


def search_logs(q: str | None, action: str | None, ts_from: str | None, ts_to: str | None,
                page: int, size: int, entity_type: str | None = None) -> Tuple[int, List[Dict[str, Any]]]:
    filters = {"query": q, "action": action, "entity_type": entity_type, "ts_from": ts_from, "ts_to": ts_to}
    count_sql, count_params = build_count_query("operation_log", LOG_FILTERS, filters)
    sql, params = build_list_query("operation_log", LOG_FILTERS, filters, page, size, order_by="ts DESC, id DESC")
    with get_conn() as conn:
        total = conn.execute(count_sql, count_params).fetchone()["count"]
        rows = conn.execute(sql, params).fetchall()
        return total, [dict(r) for r in rows]
