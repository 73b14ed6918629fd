from __future__ import annotations

from ..constants import TABLES
from ..domain.query_builder import date_range, search, substring
from .base import EntityRepository, TableSpec

CONTACT_US = TableSpec(
    name=TABLES["CONTACT_US"],
    label="contact entry",
    filters=(
        substring("first_name"),
        substring("last_name"),
        substring("email"),
        substring("phone"),
        search("first_name", "last_name", "email", "phone", "message"),
        *date_range("start_date", "end_date"),
    ),
    insert_columns=("first_name", "last_name", "email", "phone", "message"),
    update_columns=("first_name", "last_name", "email", "phone", "message"),
    status_column=None,
)

repo = EntityRepository(CONTACT_US)
