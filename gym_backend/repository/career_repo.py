from __future__ import annotations

from ..constants import TABLES
from ..domain.query_builder import exact, search, substring
from .base import EntityRepository, TableSpec

CAREERS = TableSpec(
    name=TABLES["CAREERS"],
    label="career",
    filters=(
        exact("status"),
        substring("location"),
        exact("job_type"),
        exact("experience_level"),
        exact("posted_by"),
        search("title", "description"),
    ),
    insert_columns=(
        "title", "description", "location", "job_type", "experience_level", "salary_range",
        "requirements", "responsibilities", "benefits", "status", "posted_by",
    ),
    update_columns=(
        "title", "description", "location", "job_type", "experience_level", "salary_range",
        "requirements", "responsibilities", "benefits", "status",
    ),
)

repo = EntityRepository(CAREERS)
