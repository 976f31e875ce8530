from camoo_payment.infrastructure.http.client import Client
from camoo_payment.infrastructure.http.endpoints import Endpoint
from camoo_payment.infrastructure.http.transport import RequestsTransport, Transport

__all__ = ["Client", "Endpoint", "RequestsTransport", "Transport"]
