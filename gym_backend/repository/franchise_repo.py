from __future__ import annotations

from ..constants import TABLES
from ..domain.query_builder import date_range, exact, numeric_range, search, substring
from .base import EntityRepository, TableSpec

FRANCHISE_INQUIRIES = TableSpec(
    name=TABLES["FRANCHISE_INQUIRIES"],
    label="franchise inquiry",
    filters=(
        substring("city"),
        substring("state"),
        exact("status"),
        exact("assigned_to"),
        search("business_name", "contact_person", "email", "phone"),
        *date_range("date_from", "date_to"),
        *numeric_range("investment_capacity_min", "investment_capacity_max", "investment_capacity"),
    ),
    insert_columns=(
        "business_name", "contact_person", "email", "phone", "location", "city", "state",
        "investment_capacity", "experience_years", "business_background", "why_franchise", "status",
    ),
    update_columns=("status", "notes", "assigned_to"),
)

repo = EntityRepository(FRANCHISE_INQUIRIES)
