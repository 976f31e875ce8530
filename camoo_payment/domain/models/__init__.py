"""API models: Account and Payment."""

from camoo_payment.domain.models.account import Account
from camoo_payment.domain.models.base import Model
from camoo_payment.domain.models.payment import Payment

__all__ = ["Account", "Model", "Payment"]
