from __future__ import annotations

from ..constants import TABLES
from ..domain.query_builder import exact, search, substring
from .base import DbResult, EntityRepository, TableSpec

ADMIN_PUBLIC_COLUMNS = ("id", "email", "phone", "name", "status", "last_login_at", "created_at", "updated_at")

ADMINS = TableSpec(
    name=TABLES["ADMINS"],
    label="admin",
    filters=(
        substring("email"),
        exact("status"),
        search("name", "email"),
    ),
    insert_columns=("email", "phone", "name", "password", "status"),
    update_columns=("phone", "name", "status", "last_login_at"),
    select_columns=ADMIN_PUBLIC_COLUMNS,
)

repo = EntityRepository(ADMINS)


def get_by_email(email: str) -> DbResult:
    return repo.get_by("email", email)


def get_password_hash(admin_id: int) -> DbResult:
    def _do(conn) -> DbResult:
        row = conn.execute(f"SELECT password FROM {ADMINS.name} WHERE id = ?", (admin_id,)).fetchone()
        if row is None:
            return DbResult(False, message="Admin not found", not_found=True)
        return DbResult(True, row["password"])

    return repo.run("fetch", _do)


def set_password_hash(admin_id: int, stored: str) -> DbResult:
    def _do(conn) -> DbResult:
        cur = conn.execute(
            f"UPDATE {ADMINS.name} SET password = ?, updated_at = CURRENT_TIMESTAMP WHERE id = ?",
            (stored, admin_id),
        )
        if cur.rowcount == 0:
            return DbResult(False, message="Admin not found", not_found=True)
        return DbResult(True, cur.rowcount)

    return repo.run("update", _do)
