from __future__ import annotations

from ..constants import TABLES
from ..domain.query_builder import date_range, exact, search, substring
from .base import DbResult, EntityRepository, TableSpec

# password is never selected by the generic reads
USER_PUBLIC_COLUMNS = (
    "id", "email", "phone", "first_name", "last_name", "date_of_birth", "gender", "status",
    "email_verified", "phone_verified", "last_login_at", "created_at", "updated_at",
)

USERS = TableSpec(
    name=TABLES["USERS"],
    label="user",
    filters=(
        substring("email"),
        substring("phone"),
        exact("status"),
        exact("email_verified"),
        search("first_name", "last_name", "email"),
        *date_range("start_date", "end_date"),
    ),
    insert_columns=(
        "email", "phone", "password", "first_name", "last_name", "date_of_birth", "gender", "status",
    ),
    update_columns=(
        "email", "phone", "first_name", "last_name", "date_of_birth", "gender", "status",
        "email_verified", "phone_verified", "last_login_at",
    ),
    select_columns=USER_PUBLIC_COLUMNS,
)

SUBSCRIPTIONS = TableSpec(
    name=TABLES["SUBSCRIPTION"],
    label="subscription",
    filters=(
        exact("user_id"),
        exact("cms_user_id"),
        exact("plan_id"),
        exact("status"),
        exact("payment_status"),
        search("user_id", "plan_id", "subscription_id"),
        *date_range("start_date", "end_date"),
    ),
    insert_columns=(
        "subscription_id", "user_id", "cms_user_id", "plan_id", "base_amount", "discount_amount",
        "total_amount", "coupon_code", "discount_type", "razorpay_order_id", "payment_status", "status",
    ),
    update_columns=("payment_status", "status", "start_date", "end_date"),
    id_column="subscription_id",
    json_columns=("metadata",),
)

repo = EntityRepository(USERS)
subscription_repo = EntityRepository(SUBSCRIPTIONS)


def get_by_email(email: str) -> DbResult:
    return repo.get_by("email", email)


def get_password_hash(user_id: int) -> DbResult:
    def _do(conn) -> DbResult:
        row = conn.execute(f"SELECT password FROM {USERS.name} WHERE id = ?", (user_id,)).fetchone()
        if row is None:
            return DbResult(False, message="User not found", not_found=True)
        return DbResult(True, row["password"])

    return repo.run("fetch", _do)
