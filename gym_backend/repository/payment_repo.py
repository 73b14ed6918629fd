from __future__ import annotations

from ..constants import TABLES
from ..domain.query_builder import date_range, exact, numeric_range, search, substring
from .base import EntityRepository, TableSpec

PAYMENTS = TableSpec(
    name=TABLES["PAYMENTS"],
    label="payment",
    filters=(
        exact("user_id"),
        substring("user_email"),
        substring("transaction_id"),
        exact("status"),
        exact("payment_method"),
        exact("payment_gateway"),
        exact("subscription_id"),
        *numeric_range("min_amount", "max_amount", "amount"),
        search("user_email", "transaction_id", "payment_method"),
        *date_range("start_date", "end_date"),
    ),
    insert_columns=(
        "transaction_id", "user_id", "user_email", "user_name", "amount", "currency",
        "payment_method", "payment_gateway", "gateway_transaction_id", "status",
        "description", "metadata", "subscription_id",
    ),
    update_columns=("status", "gateway_transaction_id", "refund_amount", "refund_reason", "refunded_at"),
    json_columns=("metadata",),
)

repo = EntityRepository(PAYMENTS)
