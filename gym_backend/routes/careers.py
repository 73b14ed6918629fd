from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from ..logs import LogContext
from ..services.career_svc import career_service
from .common import admin_id, finish, require_admin, respond

router = APIRouter(dependencies=[Depends(require_admin)])


class CareerBody(BaseModel):
    title: Optional[str] = None
    description: Optional[str] = None
    location: Optional[str] = None
    job_type: Optional[str] = None
    experience_level: Optional[str] = None
    salary_range: Optional[str] = None
    requirements: Optional[str] = None
    responsibilities: Optional[str] = None
    benefits: Optional[str] = None
    status: Optional[int] = None


@router.get("/api/admin/careers")
def api_careers_list(
    page: int = 1,
    limit: int = 10,
    status: Optional[int] = None,
    location: Optional[str] = None,
    job_type: Optional[str] = None,
    experience_level: Optional[str] = None,
    posted_by: Optional[int] = None,
    search: Optional[str] = None,
):
    filters = {
        "status": status,
        "location": location,
        "job_type": job_type,
        "experience_level": experience_level,
        "posted_by": posted_by,
        "search": search,
    }
    return respond(career_service.list(page, limit, filters))


@router.get("/api/admin/careers/summary")
def api_careers_summary():
    return respond(career_service.summary())


@router.get("/api/admin/careers/{career_id}")
def api_career_get(career_id: int):
    return respond(career_service.get_by_id(career_id))


@router.post("/api/admin/careers", status_code=201)
def api_career_create(body: CareerBody, posted_by: Optional[int] = Depends(admin_id)):
    log = LogContext("CREATE_CAREER")
    log.set_payload(body.model_dump())
    return finish(log, career_service.create_career(body.model_dump(), posted_by, log))


@router.put("/api/admin/careers/{career_id}")
def api_career_update(career_id: int, body: CareerBody):
    data = body.model_dump(exclude_unset=True)
    log = LogContext("UPDATE_CAREER")
    log.set_payload(data)
    return finish(log, career_service.update(career_id, data, log))


@router.delete("/api/admin/careers/{career_id}")
def api_career_delete(career_id: int):
    log = LogContext("DELETE_CAREER")
    log.set_payload({"id": career_id})
    return finish(log, career_service.delete(career_id, log))
