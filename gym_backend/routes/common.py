from __future__ import annotations

import datetime as dt
import hmac
from typing import Optional

import pandas as pd
from fastapi import Header
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse, Response

from ..constants import ERROR_MESSAGES
from ..db import get_setting
from ..domain.response import ServiceResponse
from ..errors import AuthError, ForbiddenError
from ..logs import LogContext


def respond(res: ServiceResponse) -> JSONResponse:
    return JSONResponse(status_code=res.status_code, content=jsonable_encoder(res.to_dict()))


def finish(log: LogContext, res: ServiceResponse) -> JSONResponse:
    """Write the audit row for a service call and answer with its envelope."""
    if res.status:
        log.write("OK")
    else:
        log.write("ERROR", res.message)
    return respond(res)


def require_admin(x_admin_token: Optional[str] = Header(None)) -> None:
    token = get_setting("admin_token")
    if not token:
        return
    if not x_admin_token:
        raise AuthError(ERROR_MESSAGES["AUTH_REQUIRED"])
    if not hmac.compare_digest(x_admin_token.encode("utf-8"), str(token).encode("utf-8")):
        raise ForbiddenError(ERROR_MESSAGES["ACCESS_DENIED"])


def admin_id(x_admin_id: Optional[int] = Header(None)) -> Optional[int]:
    return x_admin_id


# stands in for session auth: the caller names the member it acts as
def user_id(x_user_id: Optional[int] = Header(None)) -> Optional[int]:
    return x_user_id


def export_response(res: ServiceResponse, list_key: str, name: str, fmt: Optional[str]):
    if not res.status or (fmt or "json").lower() != "csv":
        return respond(res)
    df = pd.DataFrame(res.get(list_key) or [])
    filename = f"{name}_{dt.datetime.now().strftime('%Y%m%d_%H%M%S')}.csv"
    return Response(
        content=df.to_csv(index=False),
        media_type="text/csv",
        headers={"Content-Disposition": f"attachment; filename={filename}"},
    )
