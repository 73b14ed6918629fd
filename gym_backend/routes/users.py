from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, Request
from pydantic import BaseModel

from ..logs import LogContext
from ..services.user_svc import subscription_service, user_service
from .common import finish, require_admin, respond, user_id

router = APIRouter()


class RegisterBody(BaseModel):
    email: Optional[str] = None
    password: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    phone: Optional[str] = None
    date_of_birth: Optional[str] = None
    gender: Optional[str] = None


class LoginBody(BaseModel):
    email: Optional[str] = None
    password: Optional[str] = None
    device_type: Optional[str] = None
    device_id: Optional[str] = None
    platform: Optional[str] = None
    app_version: Optional[str] = None
    location: Optional[str] = None


class ProfileBody(BaseModel):
    email: Optional[str] = None
    phone: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    date_of_birth: Optional[str] = None
    gender: Optional[str] = None


class SubscriptionBody(BaseModel):
    subscription_id: Optional[str] = None
    user_id: Optional[str] = None
    cms_user_id: Optional[int] = None
    plan_id: Optional[str] = None
    base_amount: Optional[float] = None
    discount_amount: Optional[float] = None
    coupon_code: Optional[str] = None
    discount_type: Optional[str] = None
    razorpay_order_id: Optional[str] = None


@router.post("/api/users/register", status_code=201)
def api_user_register(body: RegisterBody):
    data = body.model_dump()
    log = LogContext("REGISTER_USER", user="public")
    log.set_payload({k: v for k, v in data.items() if k != "password"})
    return finish(log, user_service.register(data, log))


@router.post("/api/users/login")
def api_user_login(body: LoginBody, request: Request):
    device = body.model_dump(exclude={"email", "password"}, exclude_none=True)
    if request.client is not None:
        device["ip_address"] = request.client.host
    return respond(user_service.login(body.email, body.password, device))


@router.get("/api/users/profile")
def api_user_profile(uid: Optional[int] = Depends(user_id)):
    return respond(user_service.get_profile(uid))


@router.put("/api/users/profile")
def api_user_profile_update(body: ProfileBody, uid: Optional[int] = Depends(user_id)):
    data = body.model_dump(exclude_unset=True)
    log = LogContext("UPDATE_PROFILE", user=f"user:{uid}" if uid is not None else "public")
    log.set_payload(data)
    return finish(log, user_service.update_profile(uid, data, log))


@router.post("/api/users/subscription", status_code=201)
def api_subscription_create(body: SubscriptionBody):
    data = body.model_dump()
    log = LogContext("CREATE_SUBSCRIPTION", user="public")
    log.set_payload(data)
    return finish(log, subscription_service.create_subscription(data, log))


@router.get("/api/users/admin/users", dependencies=[Depends(require_admin)])
def api_users_list(
    page: int = 1,
    limit: int = 10,
    email: Optional[str] = None,
    phone: Optional[str] = None,
    status: Optional[int] = None,
    email_verified: Optional[int] = None,
    search: Optional[str] = None,
    start_date: Optional[str] = None,
    end_date: Optional[str] = None,
):
    filters = {
        "email": email,
        "phone": phone,
        "status": status,
        "email_verified": email_verified,
        "search": search,
        "start_date": start_date,
        "end_date": end_date,
    }
    return respond(user_service.list(page, limit, filters))


@router.get("/api/users/admin/subscriptions", dependencies=[Depends(require_admin)])
def api_subscriptions_list(
    page: int = 1,
    limit: int = 10,
    user_id: Optional[str] = None,
    cms_user_id: Optional[int] = None,
    plan_id: Optional[str] = None,
    status: Optional[str] = None,
    payment_status: Optional[str] = None,
    search: Optional[str] = None,
    start_date: Optional[str] = None,
    end_date: Optional[str] = None,
):
    filters = {
        "user_id": user_id,
        "cms_user_id": cms_user_id,
        "plan_id": plan_id,
        "status": status,
        "payment_status": payment_status,
        "search": search,
        "start_date": start_date,
        "end_date": end_date,
    }
    return respond(subscription_service.list(page, limit, filters))
