"""
Cash-out and verification of payments.
"""

from __future__ import annotations

from typing import Any

from camoo_payment.domain.models.payment import Payment
from camoo_payment.infrastructure.http.client import Client
from camoo_payment.infrastructure.http.endpoints import Endpoint
from camoo_payment.services.base import unwrap
from camoo_payment.utils.logger import get_logger

logger = get_logger()

CASH_OUT_KEY = "cashOut"
VERIFY_KEY = "verify"


class PaymentApi:
    def __init__(self, client: Client) -> None:
        self._client = client

    def cashout(self, payload: dict[str, Any]) -> Payment:
        """
        Initiate a cash-out. `payload` is sent as the JSON body unchanged.

        Raises:
            ApiError: Non-200 response.
            InvalidResponseError: Body has no `cashOut` object.
            InvalidArgumentError: The `cashOut` object is not a valid payment.
        """
        response = self._client.post(Endpoint.CASH_OUT, payload)
        data = self._client.handle_response(response)
        payment = Payment.from_dict(unwrap(data, CASH_OUT_KEY))
        logger.info("Cash-out %s created with status %s", payment.id, payment.status)
        return payment

    def verify(self, payment_id: str) -> Payment:
        """Fetch the current state of a previously initiated payment."""
        response = self._client.get(Endpoint.VERIFY, {"id": payment_id})
        data = self._client.handle_response(response)
        payment = Payment.from_dict(unwrap(data, VERIFY_KEY))
        logger.info("Payment %s is %s", payment.id, payment.status)
        return payment
