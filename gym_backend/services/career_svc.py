from __future__ import annotations

from typing import Any, Dict, Mapping, Optional

from ..constants import EXPERIENCE_LEVELS, JOB_TYPES, STATUS
from ..domain.response import ServiceResponse
from ..logs import LogContext
from ..repository import career_repo
from .entity_svc import EntityService
from .utils import check_choice, is_blank, require_fields

CAREER_STATUSES = tuple(STATUS["CAREER"].values())


class CareerService(EntityService):
    required_fields = ("title", "description", "location", "requirements", "responsibilities")

    def __init__(self):
        super().__init__(career_repo.repo, "CAREERS_LIST", "careers", "career")

    def _check(self, data: Dict[str, Any]) -> None:
        check_choice(data, "job_type", JOB_TYPES)
        check_choice(data, "experience_level", EXPERIENCE_LEVELS)
        check_choice(data, "status", CAREER_STATUSES)

    def prepare_create(self, data: Dict[str, Any]) -> Dict[str, Any]:
        require_fields(data, self.required_fields)
        if data.get("status") is None:
            data["status"] = STATUS["CAREER"]["ACTIVE"]
        data.setdefault("job_type", JOB_TYPES[0])
        data.setdefault("experience_level", EXPERIENCE_LEVELS[0])
        self._check(data)
        return data

    def prepare_update(self, data: Dict[str, Any], current: Dict[str, Any]) -> Dict[str, Any]:
        self._check(data)
        blank = [k for k in self.required_fields if k in data and is_blank(data[k])]
        if blank:
            require_fields(data, blank)
        return data

    def create_career(self, data: Mapping[str, Any], admin_id: Optional[int] = None,
                      log: Optional[LogContext] = None) -> ServiceResponse:
        payload = {k: v for k, v in data.items() if v is not None}
        payload["posted_by"] = admin_id
        return self.create(payload, log)

    def list_public(self, page: Optional[int], limit: Optional[int], filters: Mapping[str, Any]) -> ServiceResponse:
        return self.list(page, limit, {**filters, "status": STATUS["CAREER"]["ACTIVE"]})


career_service = CareerService()
