"""Stripe-backed payments (``/api/payments``)."""

from __future__ import annotations

from typing import Any

from ..models import Payload, as_body
from ._base import Resource


class PaymentsResource(Resource):
    def create_payment_intent(self, data: Payload) -> Any:
        return self._api.post("/api/payments/create-payment-intent", as_body(data))

    def create_checkout_session(self, data: Payload) -> Any:
        return self._api.post("/api/payments/create-checkout-session", as_body(data))

    def history(self) -> Any:
        return self._api.get("/api/payments/history")

    def invoice(self, invoice_id: Any) -> Any:
        return self._api.get(f"/api/payments/invoices/{invoice_id}")
