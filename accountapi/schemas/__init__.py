# Pydantic wire schemas (Account API contract).

from accountapi.schemas.account import (
    ACCOUNT_TYPE,
    AccountAttributes,
    AccountEnvelope,
    AccountRecord,
)
from accountapi.schemas.common import ErrorPayload

__all__ = [
    "ACCOUNT_TYPE",
    "AccountAttributes",
    "AccountEnvelope",
    "AccountRecord",
    "ErrorPayload",
]
