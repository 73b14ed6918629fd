from __future__ import annotations

from typing import Any, Dict

from ..repository import contact_repo
from .entity_svc import EntityService
from .utils import check_email, require_fields


class ContactUsService(EntityService):
    required_fields = ("first_name", "last_name", "email", "message")

    def __init__(self):
        super().__init__(contact_repo.repo, "CONTACT_LIST", "contactUs", "contactUs")

    def prepare_create(self, data: Dict[str, Any]) -> Dict[str, Any]:
        require_fields(data, self.required_fields)
        data["email"] = data["email"].strip()
        check_email(data["email"])
        return data


contact_service = ContactUsService()
