from typing import Optional

from fastapi import APIRouter, Depends

from ..services.contact_svc import contact_service
from .common import export_response, require_admin, respond

router = APIRouter(dependencies=[Depends(require_admin)])


class ContactQuery:
    def __init__(
        self,
        first_name: Optional[str] = None,
        last_name: Optional[str] = None,
        email: Optional[str] = None,
        phone: Optional[str] = None,
        search: Optional[str] = None,
        start_date: Optional[str] = None,
        end_date: Optional[str] = None,
    ):
        params = dict(locals())
        params.pop("self")
        self.filters = params


@router.get("/api/admin/contact-us")
def api_contact_list(page: int = 1, limit: int = 10, q: ContactQuery = Depends()):
    return respond(contact_service.list(page, limit, q.filters))


@router.get("/api/admin/contact-us/export")
def api_contact_export(format: Optional[str] = None, q: ContactQuery = Depends()):
    return export_response(contact_service.export(q.filters), contact_service.list_key, "contact_us", format)
