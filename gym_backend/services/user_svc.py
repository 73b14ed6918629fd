from __future__ import annotations

import datetime as dt
import logging
from typing import Any, Dict, Mapping, Optional

from ..constants import (
    DISCOUNT_TYPES,
    ERROR_MESSAGES,
    GENDERS,
    SIGN_IN_STATUS_MESSAGE,
    STATUS,
    SUCCESS_MESSAGES,
)
from ..domain.response import ServiceResponse
from ..errors import AuthError, ForbiddenError, NotFoundError, ValidationError
from ..logs import LogContext
from ..repository import user_repo
from .entity_svc import EntityService, _unwrap, enveloped
from .user_login_svc import UserLoginService, user_login_service
from .utils import (
    check_amount,
    check_choice,
    check_email,
    hash_password,
    is_blank,
    require_fields,
    to_float_safe,
    verify_password,
)

logger = logging.getLogger(__name__)

MIN_PASSWORD_LENGTH = 8

# fields a member may change on their own profile
PROFILE_FIELDS = ("email", "phone", "first_name", "last_name", "date_of_birth", "gender")


class UserService(EntityService):
    required_fields = ("email", "password", "first_name", "last_name")

    def __init__(self, logins: Optional[UserLoginService] = None):
        super().__init__(user_repo.repo, "USERS_LIST", "users", "user")
        self.logins = logins or user_login_service

    def prepare_create(self, data: Dict[str, Any]) -> Dict[str, Any]:
        require_fields(data, self.required_fields)
        data["email"] = data["email"].strip().lower()
        check_email(data["email"])
        check_choice(data, "gender", GENDERS)
        if len(data["password"]) < MIN_PASSWORD_LENGTH:
            raise ValidationError(f"Validation error: password must be at least {MIN_PASSWORD_LENGTH} characters")
        existing = user_repo.get_by_email(data["email"])
        if existing.status:
            raise ValidationError(ERROR_MESSAGES["EMAIL_ALREADY_EXISTS"])
        data["password"] = hash_password(data["password"])
        data["status"] = STATUS["USER"]["ACTIVE"]
        return data

    def register(self, data: Mapping[str, Any], log: Optional[LogContext] = None) -> ServiceResponse:
        res = self.create({k: v for k, v in data.items() if v is not None}, log)
        if res.status:
            res.message = SUCCESS_MESSAGES["USER_REGISTERED"]
        return res

    @enveloped
    def login(self, email: str, password: str, device: Optional[Mapping[str, Any]] = None) -> ServiceResponse:
        require_fields({"email": email, "password": password}, ("email", "password"))
        email = email.strip().lower()
        track = {**(device or {}), "email": email}

        found = user_repo.get_by_email(email)
        if not found.status:
            if not found.not_found:
                _unwrap(found)
            self.logins.track({**track, "login_status": STATUS["LOGIN"]["FAILED"], "failure_reason": "Email not found"})
            raise AuthError(ERROR_MESSAGES["INVALID_CREDENTIALS"])
        user = found.data
        track["user_id"] = user["id"]

        if user["status"] != STATUS["USER"]["ACTIVE"]:
            self.logins.track({**track, "login_status": STATUS["LOGIN"]["BLOCKED"], "failure_reason": "Account inactive"})
            raise ForbiddenError(SIGN_IN_STATUS_MESSAGE["INACTIVE_BY_ADMIN"])

        stored = _unwrap(user_repo.get_password_hash(user["id"]))
        if not verify_password(password, stored):
            self.logins.track({**track, "login_status": STATUS["LOGIN"]["FAILED"], "failure_reason": "Incorrect password"})
            raise AuthError(ERROR_MESSAGES["INVALID_CREDENTIALS"])

        now = dt.datetime.now(dt.timezone.utc).strftime("%Y-%m-%d %H:%M:%S")
        user = _unwrap(self.repo.update(user["id"], {"last_login_at": now}))
        self.invalidate(user["id"])
        self.logins.track({**track, "login_status": STATUS["LOGIN"]["SUCCESS"]})
        logger.info("user %s logged in", user["id"])
        return ServiceResponse.ok(SUCCESS_MESSAGES["LOGIN_SUCCESSFUL"], user=user)

    @enveloped
    def get_profile(self, user_id: Optional[int]) -> ServiceResponse:
        if user_id is None:
            raise AuthError(ERROR_MESSAGES["USER_ID_REQUIRED"])
        res = self.repo.get_by_id(user_id)
        if res.not_found:
            raise NotFoundError(ERROR_MESSAGES["USER_NOT_FOUND"])
        return ServiceResponse.ok(SUCCESS_MESSAGES["FETCHED"], user=_unwrap(res))

    @enveloped
    def update_profile(self, user_id: Optional[int], data: Mapping[str, Any],
                       log: Optional[LogContext] = None) -> ServiceResponse:
        """Members may only touch their own contact details; status and verification flags stay admin-owned."""
        if user_id is None:
            raise AuthError(ERROR_MESSAGES["USER_ID_REQUIRED"])
        changes = {k: data[k] for k in PROFILE_FIELDS if data.get(k) is not None}
        if not changes:
            raise ValidationError(ERROR_MESSAGES["NO_FIELDS_TO_UPDATE"])
        current = self.repo.get_by_id(user_id)
        if current.not_found:
            raise NotFoundError(ERROR_MESSAGES["USER_NOT_FOUND"])
        current = _unwrap(current)

        for name in ("first_name", "last_name"):
            if name in changes and is_blank(changes[name]):
                raise ValidationError(f"Validation error: {name} cannot be empty")
        check_choice(changes, "gender", GENDERS)
        if "email" in changes:
            changes["email"] = changes["email"].strip().lower()
            check_email(changes["email"])
            other = user_repo.get_by_email(changes["email"])
            if other.status and other.data["id"] != current["id"]:
                raise ValidationError(ERROR_MESSAGES["EMAIL_ALREADY_EXISTS"])

        user = _unwrap(self.repo.update(user_id, changes))
        self.invalidate(user_id)
        if log:
            log.set_entity(self.item_key, user_id)
            log.set_before(current)
            log.set_after(user)
        return ServiceResponse.ok(SUCCESS_MESSAGES["PROFILE_UPDATED"], user=user)


class SubscriptionService(EntityService):
    required_fields = ("subscription_id", "user_id", "plan_id", "base_amount")

    def __init__(self):
        super().__init__(user_repo.subscription_repo, "SUBSCRIPTIONS_LIST", "subscriptions", "subscription")

    def prepare_create(self, data: Dict[str, Any]) -> Dict[str, Any]:
        require_fields(data, self.required_fields)
        base = check_amount(data, "base_amount", allow_zero=True)
        discount = to_float_safe(data.get("discount_amount"), 0.0)
        if discount is None or discount < 0 or discount > base:
            raise ValidationError("Validation error: discount_amount must be between 0 and base_amount")
        check_choice(data, "discount_type", DISCOUNT_TYPES)
        data["base_amount"] = base
        data["discount_amount"] = discount
        data["total_amount"] = round(base - discount, 2)
        data["payment_status"] = STATUS["PAYMENT_STATUS"]["PENDING"]
        data["status"] = STATUS["SUBSCRIPTION"]["ACTIVE"]
        existing = self.repo.get_by_id(data["subscription_id"])
        if existing.status:
            raise ValidationError("Validation error: subscription_id already exists")
        return data

    def create_subscription(self, data: Mapping[str, Any], log: Optional[LogContext] = None) -> ServiceResponse:
        res = self.create({k: v for k, v in data.items() if v is not None}, log)
        if res.status:
            res.message = SUCCESS_MESSAGES["SUBSCRIPTION_CREATED"]
        return res


user_service = UserService()
subscription_service = SubscriptionService()
