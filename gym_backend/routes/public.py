from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, Query
from pydantic import BaseModel

from ..constants import STATUS
from ..logs import LogContext
from ..services.blog_svc import PUBLISHED, blog_service
from ..services.career_svc import career_service
from ..services.contact_svc import contact_service
from ..services.franchise_svc import franchise_service
from .common import finish, respond

router = APIRouter()


class ContactBody(BaseModel):
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    message: Optional[str] = None


class FranchiseBody(BaseModel):
    business_name: Optional[str] = None
    contact_person: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    location: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    investment_capacity: Optional[float] = None
    experience_years: Optional[int] = None
    business_background: Optional[str] = None
    message: Optional[str] = None


@router.get("/api/public/blogs")
def api_public_blogs(
    page: int = 1,
    limit: int = 10,
    category: Optional[str] = None,
    search: Optional[str] = None,
    tags: Optional[List[str]] = Query(None),
):
    return respond(blog_service.list_public(page, limit, {"category": category, "search": search, "tags": tags}))


@router.get("/api/public/blogs/slug/{slug}")
def api_public_blog_by_slug(slug: str):
    return respond(blog_service.get_by_slug(slug, only_status=PUBLISHED))


@router.get("/api/public/blogs/{blog_id}")
def api_public_blog(blog_id: int):
    return respond(blog_service.get_by_id(blog_id, only_status=PUBLISHED))


@router.get("/api/public/careers")
def api_public_careers(
    page: int = 1,
    limit: int = 10,
    location: Optional[str] = None,
    job_type: Optional[str] = None,
    experience_level: Optional[str] = None,
    search: Optional[str] = None,
):
    filters = {"location": location, "job_type": job_type, "experience_level": experience_level, "search": search}
    return respond(career_service.list_public(page, limit, filters))


@router.get("/api/public/careers/{career_id}")
def api_public_career(career_id: int):
    return respond(career_service.get_by_id(career_id, only_status=STATUS["CAREER"]["ACTIVE"]))


@router.post("/api/public/contact", status_code=201)
def api_public_contact(body: ContactBody):
    data = body.model_dump(exclude_none=True)
    log = LogContext("CREATE_CONTACT", user="public")
    log.set_payload(data)
    return finish(log, contact_service.create(data, log))


@router.post("/api/public/franchise", status_code=201)
def api_public_franchise(body: FranchiseBody):
    data = body.model_dump(exclude_none=True)
    log = LogContext("CREATE_FRANCHISE_INQUIRY", user="public")
    log.set_payload(data)
    return finish(log, franchise_service.create(data, log))
