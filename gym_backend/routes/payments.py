from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from ..logs import LogContext
from ..services.payment_svc import payment_service
from .common import export_response, finish, require_admin, respond

router = APIRouter(dependencies=[Depends(require_admin)])


class PaymentBody(BaseModel):
    transaction_id: Optional[str] = None
    user_id: Optional[int] = None
    user_email: Optional[str] = None
    user_name: Optional[str] = None
    amount: Optional[float] = None
    currency: Optional[str] = None
    payment_method: Optional[str] = None
    payment_gateway: Optional[str] = None
    gateway_transaction_id: Optional[str] = None
    status: Optional[str] = None
    description: Optional[str] = None
    metadata: Optional[Dict[str, Any]] = None
    subscription_id: Optional[str] = None


class PaymentQuery:
    def __init__(
        self,
        user_id: Optional[int] = None,
        user_email: Optional[str] = None,
        transaction_id: Optional[str] = None,
        status: Optional[str] = None,
        payment_method: Optional[str] = None,
        payment_gateway: Optional[str] = None,
        subscription_id: Optional[str] = None,
        min_amount: Optional[float] = None,
        max_amount: Optional[float] = None,
        search: Optional[str] = None,
        start_date: Optional[str] = None,
        end_date: Optional[str] = None,
    ):
        params = dict(locals())
        params.pop("self")
        self.filters = params


@router.get("/api/admin/payments")
def api_payments_list(page: int = 1, limit: int = 10, q: PaymentQuery = Depends()):
    return respond(payment_service.list(page, limit, q.filters))


@router.get("/api/admin/payments/export")
def api_payments_export(format: Optional[str] = None, q: PaymentQuery = Depends()):
    return export_response(payment_service.export(q.filters), payment_service.list_key, "payments", format)


@router.post("/api/admin/payments", status_code=201)
def api_payment_create(body: PaymentBody):
    data = body.model_dump(exclude_none=True)
    log = LogContext("CREATE_PAYMENT")
    log.set_payload(data)
    return finish(log, payment_service.create(data, log))
