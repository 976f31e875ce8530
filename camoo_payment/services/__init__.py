"""Operation facades: one method per remote business operation.

Each facade call sends exactly one request through the Client, checks the
wrapper key of the decoded body and hands the nested mapping to a domain model.
"""

from camoo_payment.services.account_api import AccountApi
from camoo_payment.services.payment_api import PaymentApi

__all__ = ["AccountApi", "PaymentApi"]
