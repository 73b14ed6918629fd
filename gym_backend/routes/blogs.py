from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from pydantic import BaseModel

from ..logs import LogContext
from ..services.blog_svc import blog_service
from .common import admin_id, finish, require_admin, respond

router = APIRouter(dependencies=[Depends(require_admin)])


class BlogBody(BaseModel):
    title: Optional[str] = None
    content: Optional[str] = None
    excerpt: Optional[str] = None
    featured_image: Optional[str] = None
    category: Optional[str] = None
    tags: Optional[List[str]] = None
    meta_title: Optional[str] = None
    meta_description: Optional[str] = None
    status: Optional[int] = None
    published_at: Optional[str] = None


@router.get("/api/admin/blogs")
def api_blogs_list(
    page: int = 1,
    limit: int = 10,
    status: Optional[int] = None,
    category: Optional[str] = None,
    author_id: Optional[int] = None,
    search: Optional[str] = None,
    tags: Optional[List[str]] = Query(None),
):
    filters = {"status": status, "category": category, "author_id": author_id, "search": search, "tags": tags}
    return respond(blog_service.list(page, limit, filters))


@router.get("/api/admin/blogs/summary")
def api_blogs_summary():
    return respond(blog_service.summary())


@router.get("/api/admin/blogs/{blog_id}")
def api_blog_get(blog_id: int):
    return respond(blog_service.get_by_id(blog_id))


@router.post("/api/admin/blogs", status_code=201)
def api_blog_create(body: BlogBody, author_id: Optional[int] = Depends(admin_id)):
    log = LogContext("CREATE_BLOG")
    log.set_payload(body.model_dump())
    return finish(log, blog_service.create_blog(body.model_dump(), author_id, log))


@router.put("/api/admin/blogs/{blog_id}")
def api_blog_update(blog_id: int, body: BlogBody):
    data = body.model_dump(exclude_unset=True)
    log = LogContext("UPDATE_BLOG")
    log.set_payload(data)
    return finish(log, blog_service.update(blog_id, data, log))


@router.delete("/api/admin/blogs/{blog_id}")
def api_blog_delete(blog_id: int):
    log = LogContext("DELETE_BLOG")
    log.set_payload({"id": blog_id})
    return finish(log, blog_service.delete(blog_id, log))
