from __future__ import annotations

from typing import Any, Dict

from ..constants import STATUS
from ..errors import ValidationError
from ..repository import franchise_repo
from .entity_svc import EntityService
from .utils import check_choice, check_email, require_fields, to_float_safe

FRANCHISE_STATUSES = tuple(STATUS["FRANCHISE"].values())


class FranchiseService(EntityService):
    required_fields = ("contact_person", "email", "phone", "city", "message")

    def __init__(self):
        super().__init__(franchise_repo.repo, "FRANCHISE_LIST", "franchiseInquiries", "franchise")

    def prepare_create(self, data: Dict[str, Any]) -> Dict[str, Any]:
        require_fields(data, self.required_fields)
        check_email(data["email"].strip())
        data["email"] = data["email"].strip()
        data["why_franchise"] = data.pop("message")
        data["status"] = STATUS["FRANCHISE"]["NEW"]
        if data.get("investment_capacity") is not None:
            capacity = to_float_safe(data["investment_capacity"])
            if capacity is None or capacity < 0:
                raise ValidationError("Validation error: investment_capacity must be a non-negative number")
            data["investment_capacity"] = capacity
        return data

    def prepare_update(self, data: Dict[str, Any], current: Dict[str, Any]) -> Dict[str, Any]:
        if "status" in data:
            require_fields(data, ("status",))
            check_choice(data, "status", FRANCHISE_STATUSES)
        return data


franchise_service = FranchiseService()
