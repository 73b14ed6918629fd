from __future__ import annotations

from fastapi import APIRouter, Depends

from ..domain.pagination import clamp_pagination, pagination_block
from ..logs import search_logs
from .common import require_admin

router = APIRouter(dependencies=[Depends(require_admin)])


@router.get("/api/admin/logs/search")
def api_logs_search(
    page: int = 1,
    size: int = 20,
    action: str | None = None,
    entity_type: str | None = None,
    query: str | None = None,
    ts_from: str | None = None,
    ts_to: str | None = None,
):
    page, size = clamp_pagination(page, size)
    total, items = search_logs(query, action, ts_from, ts_to, page, size, entity_type=entity_type)
    return {"total": total, "items": items, "pagination": pagination_block(total, page, size)}
