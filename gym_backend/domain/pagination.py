from __future__ import annotations

import math

from ..constants import PAGINATION


def clamp_pagination(page: int | None, limit: int | None) -> tuple[int, int]:
    """Out-of-range values clamp silently: page<1 -> 1, limit<1 -> default, limit>max -> max."""
    page = PAGINATION["DEFAULT_PAGE"] if page is None or page < 1 else int(page)
    if limit is None or limit < 1:
        limit = PAGINATION["DEFAULT_LIMIT"]
    elif limit > PAGINATION["MAX_LIMIT"]:
        limit = PAGINATION["MAX_LIMIT"]
    return page, int(limit)


def total_pages(total: int, limit: int) -> int:
    return math.ceil(total / limit) if limit else 0


def pagination_block(total: int, page: int, limit: int) -> dict:
    return {"total": total, "page": page, "limit": limit, "totalPages": total_pages(total, limit)}
