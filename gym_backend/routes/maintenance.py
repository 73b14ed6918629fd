from __future__ import annotations

from fastapi import APIRouter, Depends

from ..cache import cache_service
from ..constants import SUCCESS_MESSAGES
from ..domain.response import ServiceResponse
from ..logs import LogContext
from .common import finish, require_admin, respond

router = APIRouter(dependencies=[Depends(require_admin)])


@router.get("/api/admin/cache/stats")
def api_cache_stats():
    stats = cache_service.store.stats().to_dict()
    return respond(ServiceResponse.ok(SUCCESS_MESSAGES["FETCHED"], stats=stats, keys=cache_service.store.keys()))


@router.post("/api/admin/cache/clear")
def api_cache_clear():
    log = LogContext("CACHE_CLEAR")
    cleared = cache_service.clear_all_cache()
    log.set_after({"cleared": cleared})
    return finish(log, ServiceResponse.ok(SUCCESS_MESSAGES["CACHE_CLEARED"], cleared=cleared))
