from __future__ import annotations

from camoo_payment.domain.models.account import WRAPPER_KEY, Account
from camoo_payment.infrastructure.http.client import Client
from camoo_payment.infrastructure.http.endpoints import Endpoint
from camoo_payment.services.base import unwrap


class AccountApi:
    def __init__(self, client: Client) -> None:
        self._client = client

    def get(self) -> Account:
        """Fetch the current account balance."""
        response = self._client.get(Endpoint.ACCOUNT)
        data = self._client.handle_response(response)
        unwrap(data, WRAPPER_KEY)
        return Account.from_dict(data)
