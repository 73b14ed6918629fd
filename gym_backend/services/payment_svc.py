from __future__ import annotations

from typing import Any, Dict

from ..constants import PAYMENT_GATEWAYS, PAYMENT_METHODS, STATUS
from ..errors import ValidationError
from ..repository import payment_repo
from .entity_svc import EntityService
from .utils import check_amount, check_choice, require_fields

PAYMENT_STATUSES = tuple(STATUS["PAYMENT"].values())


class PaymentService(EntityService):
    required_fields = ("transaction_id", "amount", "payment_method", "payment_gateway")

    def __init__(self):
        super().__init__(payment_repo.repo, "PAYMENTS_LIST", "payments", "payment")

    def prepare_create(self, data: Dict[str, Any]) -> Dict[str, Any]:
        require_fields(data, self.required_fields)
        data["amount"] = check_amount(data, "amount")
        check_choice(data, "payment_method", PAYMENT_METHODS)
        check_choice(data, "payment_gateway", PAYMENT_GATEWAYS)
        data.setdefault("currency", "INR")
        data.setdefault("status", STATUS["PAYMENT"]["PENDING"])
        check_choice(data, "status", PAYMENT_STATUSES)
        existing = self.repo.get_by("transaction_id", data["transaction_id"])
        if existing.status:
            raise ValidationError("Validation error: transaction_id already exists")
        return data


payment_service = PaymentService()
