from __future__ import annotations

from ..constants import TABLES
from ..domain.query_builder import date_range, exact, search, substring
from .base import EntityRepository, TableSpec

USER_LOGINS = TableSpec(
    name=TABLES["USER_LOGINS"],
    label="user login",
    filters=(
        substring("email"),
        exact("device_type"),
        substring("platform"),
        search("email", "device_type", "platform"),
        *date_range("start_date", "end_date", column="login_time"),
    ),
    insert_columns=(
        "user_id", "email", "device_type", "device_id", "platform", "app_version",
        "ip_address", "location", "login_status", "failure_reason",
    ),
    update_columns=("logout_time", "session_duration"),
    order_by="login_time DESC, rowid DESC",
    status_column="login_status",
)

repo = EntityRepository(USER_LOGINS)
