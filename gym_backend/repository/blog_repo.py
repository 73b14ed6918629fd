from __future__ import annotations

from ..constants import TABLES
from ..domain.query_builder import exact, search, substring, tags
from .base import DbResult, EntityRepository, TableSpec

BLOGS = TableSpec(
    name=TABLES["BLOGS"],
    label="blog",
    filters=(
        exact("status"),
        substring("category"),
        exact("author_id"),
        search("title", "content"),
        tags("tags"),
    ),
    insert_columns=(
        "title", "slug", "content", "excerpt", "featured_image", "author_id", "category", "tags",
        "meta_title", "meta_description", "status", "published_at",
    ),
    update_columns=(
        "title", "slug", "content", "excerpt", "featured_image", "category", "tags",
        "meta_title", "meta_description", "status", "published_at",
    ),
    json_columns=("tags",),
)

repo = EntityRepository(BLOGS)


def get_by_slug(slug: str) -> DbResult:
    return repo.get_by("slug", slug)
