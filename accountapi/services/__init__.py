# Services: Account API client

from typing import Protocol, runtime_checkable

from accountapi.core.context import RequestContext
from accountapi.schemas.account import AccountRecord
from accountapi.services.account_service import AccountService, get_account_service
from accountapi.services.errors import (
    AccountAPIError,
    ConflictError,
    NotFoundError,
    RequestCancelledError,
    RequestTimeoutError,
    SerializationError,
    TransportError,
    UnexpectedStatusError,
    ValidationError,
)


@runtime_checkable
class AccountClient(Protocol):
    """Create/fetch/delete contract implemented by AccountService (and by test doubles)."""

    def create(self, ctx: RequestContext | None, account: AccountRecord) -> AccountRecord: ...

    def fetch(self, ctx: RequestContext | None, account_id: str) -> AccountRecord | None: ...

    def delete(self, ctx: RequestContext | None, account_id: str, version: int) -> None: ...


__all__ = [
    "AccountClient",
    "AccountService",
    "get_account_service",
    "AccountAPIError",
    "ConflictError",
    "NotFoundError",
    "RequestCancelledError",
    "RequestTimeoutError",
    "SerializationError",
    "TransportError",
    "UnexpectedStatusError",
    "ValidationError",
]
