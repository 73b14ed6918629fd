from __future__ import annotations

# gym_backend/services/utils.py
import hashlib
import hmac
import re
import secrets
from typing import Any, Iterable, Mapping

from ..errors import ValidationError

_EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")
_PBKDF2_ITERATIONS = 260_000


def to_float_safe(x, default=None):
    try:
        return float(x)
    except (TypeError, ValueError):
        return default


def is_blank(v: Any) -> bool:
    return v is None or (isinstance(v, str) and not v.strip())


def require_fields(data: Mapping[str, Any], fields: Iterable[str]) -> None:
    missing = [f for f in fields if is_blank(data.get(f))]
    if missing:
        raise ValidationError(f"Validation error: {', '.join(missing)} {'is' if len(missing) == 1 else 'are'} required")


def check_choice(data: Mapping[str, Any], field: str, choices: Iterable[Any]) -> None:
    choices = tuple(choices)
    if data.get(field) is not None and data[field] not in choices:
        raise ValidationError(f"Validation error: {field} must be one of {', '.join(map(str, choices))}")


def check_email(email: str) -> None:
    if not _EMAIL_RE.match(email or ""):
        raise ValidationError("Validation error: email is invalid")


def check_amount(data: Mapping[str, Any], field: str, allow_zero: bool = False) -> float:
    v = to_float_safe(data.get(field))
    if v is None or v < 0 or (v == 0 and not allow_zero):
        raise ValidationError(f"Validation error: {field} must be a {'non-negative' if allow_zero else 'positive'} number")
    return v


def slugify(title: str) -> str:
    s = title.lower()
    s = re.sub(r"[^a-z0-9\s-]", "", s)
    s = re.sub(r"\s+", "-", s.strip())
    return re.sub(r"-+", "-", s)


def hash_password(password: str, iterations: int = _PBKDF2_ITERATIONS) -> str:
    salt = secrets.token_hex(16)
    digest = hashlib.pbkdf2_hmac("sha256", password.encode("utf-8"), salt.encode("ascii"), iterations).hex()
    return f"pbkdf2_sha256${iterations}${salt}${digest}"


def verify_password(password: str, stored: str) -> bool:
    try:
        algo, iterations, salt, digest = stored.split("$")
    except (AttributeError, ValueError):
        return False
    if algo != "pbkdf2_sha256":
        return False
    check = hashlib.pbkdf2_hmac("sha256", password.encode("utf-8"), salt.encode("ascii"), int(iterations)).hex()
    return hmac.compare_digest(check, digest)
