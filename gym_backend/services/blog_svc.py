from __future__ import annotations

from typing import Any, Dict, Mapping, Optional

from ..constants import CACHE_TTL, STATUS, SUCCESS_MESSAGES
from ..domain.response import ServiceResponse
from ..errors import NotFoundError, ValidationError
from ..logs import LogContext
from ..repository import blog_repo
from .entity_svc import EntityService, _unwrap, enveloped
from .utils import check_choice, require_fields, slugify

BLOG_STATUSES = tuple(STATUS["BLOG"].values())
PUBLISHED = STATUS["BLOG"]["PUBLISHED"]


def _clean_tags(value: Any) -> list[str] | None:
    if value is None:
        return None
    if isinstance(value, str):
        value = value.split(",")
    if not isinstance(value, (list, tuple)):
        raise ValidationError("Validation error: tags must be a list of strings")
    return [str(t).strip() for t in value if str(t).strip()]


def _slug_for(title: str) -> str:
    slug = slugify(title)
    if not slug:
        raise ValidationError("Validation error: title must contain letters or digits")
    return slug


class BlogService(EntityService):
    required_fields = ("title", "content")

    def __init__(self):
        super().__init__(blog_repo.repo, "BLOGS_LIST", "blogs", "blog")

    def prepare_create(self, data: Dict[str, Any]) -> Dict[str, Any]:
        require_fields(data, self.required_fields)
        check_choice(data, "status", BLOG_STATUSES)
        data["slug"] = _slug_for(data["title"])
        if data.get("status") is None:
            data["status"] = STATUS["BLOG"]["DRAFT"]
        if "tags" in data:
            data["tags"] = _clean_tags(data["tags"])
        return data

    def prepare_update(self, data: Dict[str, Any], current: Dict[str, Any]) -> Dict[str, Any]:
        check_choice(data, "status", BLOG_STATUSES)
        if "title" in data:
            require_fields(data, ("title",))
            data["slug"] = _slug_for(data["title"])
        if "content" in data:
            require_fields(data, ("content",))
        if "tags" in data:
            data["tags"] = _clean_tags(data["tags"])
        return data

    def create_blog(self, data: Mapping[str, Any], author_id: Optional[int] = None,
                    log: Optional[LogContext] = None) -> ServiceResponse:
        payload = {k: v for k, v in data.items() if v is not None}
        payload["author_id"] = author_id
        return self.create(payload, log)

    @enveloped
    def get_by_slug(self, slug: str, only_status: Any = None) -> ServiceResponse:
        cache_id = f"slug_{slug}"
        row = self.cache.get_item_cache(self.module_key, cache_id)
        if row is None:
            row = _unwrap(blog_repo.get_by_slug(slug))
            self.cache.set_item_cache(self.module_key, cache_id, row, CACHE_TTL["MEDIUM"])
        if only_status is not None and row.get("status") != only_status:
            raise NotFoundError("Blog not found")
        return ServiceResponse.ok(SUCCESS_MESSAGES["FETCHED"], blog=row)

    def list_public(self, page: Optional[int], limit: Optional[int], filters: Mapping[str, Any]) -> ServiceResponse:
        return self.list(page, limit, {**filters, "status": PUBLISHED})


blog_service = BlogService()
