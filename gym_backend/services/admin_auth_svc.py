"""Admin accounts: sign-in against the admins table and password changes."""
from __future__ import annotations

import datetime as dt
import logging
from typing import Any, Dict, Mapping, Optional

from ..constants import ERROR_MESSAGES, STATUS, SUCCESS_MESSAGES, SIGN_IN_STATUS_MESSAGE
from ..domain.response import ServiceResponse
from ..errors import AuthError, ForbiddenError, NotFoundError, ValidationError
from ..logs import LogContext
from ..repository import admin_repo
from .entity_svc import EntityService, _unwrap, enveloped
from .user_svc import MIN_PASSWORD_LENGTH
from .utils import check_email, hash_password, require_fields, verify_password

logger = logging.getLogger(__name__)


def _check_new_password(password: str) -> None:
    if len(password) < MIN_PASSWORD_LENGTH:
        raise ValidationError(f"Validation error: password must be at least {MIN_PASSWORD_LENGTH} characters")


class AdminAuthService(EntityService):
    required_fields = ("email", "password", "name")

    def __init__(self):
        super().__init__(admin_repo.repo, "ADMINS_LIST", "admins", "admin")

    def prepare_create(self, data: Dict[str, Any]) -> Dict[str, Any]:
        require_fields(data, self.required_fields)
        data["email"] = data["email"].strip().lower()
        check_email(data["email"])
        _check_new_password(data["password"])
        if admin_repo.get_by_email(data["email"]).status:
            raise ValidationError(ERROR_MESSAGES["EMAIL_ALREADY_EXISTS"])
        data["password"] = hash_password(data["password"])
        data.setdefault("status", STATUS["ADMIN"]["ACTIVE"])
        return data

    def create_admin(self, data: Mapping[str, Any], log: Optional[LogContext] = None) -> ServiceResponse:
        return self.create({k: v for k, v in data.items() if v is not None}, log)

    @enveloped
    def sign_in(self, email: Optional[str], password: Optional[str]) -> ServiceResponse:
        require_fields({"email": email, "password": password}, ("email", "password"))
        found = admin_repo.get_by_email(email.strip().lower())
        if not found.status:
            if not found.not_found:
                _unwrap(found)
            logger.warning("admin sign-in for unknown email")
            raise AuthError(ERROR_MESSAGES["INVALID_CREDENTIALS"])
        admin = found.data

        if not verify_password(password, _unwrap(admin_repo.get_password_hash(admin["id"]))):
            logger.warning("admin %s sign-in with wrong password", admin["id"])
            raise AuthError(ERROR_MESSAGES["INVALID_CREDENTIALS"])
        if admin["status"] != STATUS["ADMIN"]["ACTIVE"]:
            raise ForbiddenError(SIGN_IN_STATUS_MESSAGE["INACTIVE_BY_ADMIN"])

        now = dt.datetime.now(dt.timezone.utc).strftime("%Y-%m-%d %H:%M:%S")
        admin = _unwrap(self.repo.update(admin["id"], {"last_login_at": now}))
        self.invalidate(admin["id"])
        logger.info("admin %s signed in", admin["id"])
        return ServiceResponse.ok(SIGN_IN_STATUS_MESSAGE["SUCCESS"], admin=admin)

    @enveloped
    def change_password(self, admin_id: Optional[int], current_password: Optional[str],
                        new_password: Optional[str], log: Optional[LogContext] = None) -> ServiceResponse:
        if admin_id is None:
            raise AuthError(ERROR_MESSAGES["ADMIN_ID_REQUIRED"])
        require_fields(
            {"current_password": current_password, "new_password": new_password},
            ("current_password", "new_password"),
        )
        _check_new_password(new_password)

        res = admin_repo.get_password_hash(admin_id)
        if res.not_found:
            raise NotFoundError(ERROR_MESSAGES["ADMIN_NOT_FOUND"])
        if not verify_password(current_password, _unwrap(res)):
            raise AuthError(SIGN_IN_STATUS_MESSAGE["INCORRECT_PASSWORD"])

        _unwrap(admin_repo.set_password_hash(admin_id, hash_password(new_password)))
        if log:
            log.set_entity(self.item_key, admin_id)
        logger.info("admin %s changed password", admin_id)
        return ServiceResponse.ok(SUCCESS_MESSAGES["PASSWORD_CHANGED"])


admin_auth_service = AdminAuthService()
