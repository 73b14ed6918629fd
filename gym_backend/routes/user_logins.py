from typing import Optional

from fastapi import APIRouter, Depends

from ..services.user_login_svc import user_login_service
from .common import export_response, require_admin, respond

router = APIRouter(dependencies=[Depends(require_admin)])


class UserLoginQuery:
    def __init__(
        self,
        email: Optional[str] = None,
        device_type: Optional[str] = None,
        platform: Optional[str] = None,
        search: Optional[str] = None,
        start_date: Optional[str] = None,
        end_date: Optional[str] = None,
    ):
        params = dict(locals())
        params.pop("self")
        self.filters = params


@router.get("/api/admin/user-logins")
def api_user_logins_list(page: int = 1, limit: int = 10, q: UserLoginQuery = Depends()):
    return respond(user_login_service.list(page, limit, q.filters))


@router.get("/api/admin/user-logins/export")
def api_user_logins_export(format: Optional[str] = None, q: UserLoginQuery = Depends()):
    res = user_login_service.export(q.filters)
    return export_response(res, user_login_service.list_key, "user_logins", format)
