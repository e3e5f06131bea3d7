"""
Account API client: create, fetch and delete account resources over HTTP/JSON.
"""

from accountapi.core import RequestContext, new_config
from accountapi.schemas import AccountAttributes, AccountRecord, ErrorPayload
from accountapi.services import (
    AccountAPIError,
    AccountClient,
    AccountService,
    ConflictError,
    NotFoundError,
    SerializationError,
    TransportError,
    UnexpectedStatusError,
    ValidationError,
)

__version__ = "0.1.0"

__all__ = [
    "RequestContext",
    "new_config",
    "AccountAttributes",
    "AccountRecord",
    "ErrorPayload",
    "AccountAPIError",
    "AccountClient",
    "AccountService",
    "ConflictError",
    "NotFoundError",
    "SerializationError",
    "TransportError",
    "UnexpectedStatusError",
    "ValidationError",
]
