"""Client library for the Camoo payment API."""

from camoo_payment.domain.enums import Currency, Status
from camoo_payment.domain.models import Account, Payment
from camoo_payment.domain.value_objects import Money
from camoo_payment.exceptions import (
    ApiError,
    CamooPaymentError,
    InvalidArgumentError,
    InvalidResponseError,
    TransportError,
)
from camoo_payment.infrastructure.http import Client, Endpoint, RequestsTransport, Transport
from camoo_payment.services import AccountApi, PaymentApi

__version__ = "1.0.0"

__all__ = [
    "Account",
    "AccountApi",
    "ApiError",
    "CamooPaymentError",
    "Client",
    "Currency",
    "Endpoint",
    "InvalidArgumentError",
    "InvalidResponseError",
    "Money",
    "Payment",
    "PaymentApi",
    "RequestsTransport",
    "Status",
    "Transport",
    "TransportError",
]
