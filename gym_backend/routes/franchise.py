from typing import Optional

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from ..logs import LogContext
from ..services.franchise_svc import franchise_service
from .common import export_response, finish, require_admin, respond

router = APIRouter(dependencies=[Depends(require_admin)])


class FranchiseStatusBody(BaseModel):
    status: Optional[int] = None
    notes: Optional[str] = None
    assigned_to: Optional[int] = None


class FranchiseQuery:
    def __init__(
        self,
        status: Optional[int] = None,
        assigned_to: Optional[int] = None,
        city: Optional[str] = None,
        state: Optional[str] = None,
        search: Optional[str] = None,
        date_from: Optional[str] = None,
        date_to: Optional[str] = None,
        investment_capacity_min: Optional[float] = None,
        investment_capacity_max: Optional[float] = None,
    ):
        params = dict(locals())
        params.pop("self")
        self.filters = params


@router.get("/api/admin/franchise")
def api_franchise_list(page: int = 1, limit: int = 10, q: FranchiseQuery = Depends()):
    return respond(franchise_service.list(page, limit, q.filters))


@router.get("/api/admin/franchise/export")
def api_franchise_export(format: Optional[str] = None, q: FranchiseQuery = Depends()):
    res = franchise_service.export(q.filters)
    return export_response(res, franchise_service.list_key, "franchise_inquiries", format)


@router.get("/api/admin/franchise/summary")
def api_franchise_summary():
    return respond(franchise_service.summary())


@router.put("/api/admin/franchise/{inquiry_id}")
def api_franchise_update(inquiry_id: int, body: FranchiseStatusBody):
    data = body.model_dump(exclude_unset=True)
    log = LogContext("UPDATE_FRANCHISE_STATUS")
    log.set_payload(data)
    return finish(log, franchise_service.update(inquiry_id, data, log))
