from __future__ import annotations

from .constants import ERROR_MESSAGES


class ServiceError(Exception):
    status_code = 500
    default_message = ERROR_MESSAGES["SERVER_ERROR"]

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(ServiceError, ValueError):
    status_code = 400
    default_message = ERROR_MESSAGES["VALIDATION_ERROR"]


class AuthError(ServiceError):
    status_code = 401
    default_message = ERROR_MESSAGES["INVALID_CREDENTIALS"]


class ForbiddenError(ServiceError):
    status_code = 403
    default_message = ERROR_MESSAGES["ACCESS_DENIED"]


class NotFoundError(ServiceError):
    status_code = 404
    default_message = ERROR_MESSAGES["RESOURCE_NOT_FOUND"]


class PersistenceError(ServiceError):
    status_code = 500
