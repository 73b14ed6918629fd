from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from ..logs import LogContext
from ..services.admin_auth_svc import admin_auth_service
from .common import admin_id, finish, require_admin, respond

router = APIRouter()


class AdminLoginBody(BaseModel):
    email: Optional[str] = None
    password: Optional[str] = None


class ChangePasswordBody(BaseModel):
    current_password: Optional[str] = None
    new_password: Optional[str] = None


@router.post("/api/admin/auth/login")
def api_admin_login(body: AdminLoginBody):
    return respond(admin_auth_service.sign_in(body.email, body.password))


@router.post("/api/admin/auth/change-password", dependencies=[Depends(require_admin)])
def api_admin_change_password(body: ChangePasswordBody, aid: Optional[int] = Depends(admin_id)):
    log = LogContext("CHANGE_ADMIN_PASSWORD", user=f"admin:{aid}" if aid is not None else "admin")
    return finish(log, admin_auth_service.change_password(aid, body.current_password, body.new_password, log))
