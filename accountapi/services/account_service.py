"""
Account API v1 client: create, fetch and delete account resources.
Uses requests (one shared Session per client), per-call deadlines, and a status-code
decision table per operation. No retries: every failure is raised to the caller.
"""

import logging
import time
from email.utils import formatdate
from typing import Any, Callable
from urllib.parse import quote, urlsplit

import requests

from accountapi.core.config import Config, get_settings
from accountapi.core.context import CANCELLED, RequestContext, effective_timeout
from accountapi.core.logging import resolve_logger
from accountapi.schemas.account import AccountEnvelope, AccountRecord
from accountapi.schemas.common import ErrorPayload
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

API_VERSION = "v1"
ACCOUNTS_PATH = f"/{API_VERSION}/organisation/accounts"
ACCOUNT_BY_ID_PATH = ACCOUNTS_PATH + "/{id}"
MEDIA_TYPE = "application/vnd.api+json"

# Outcome handler: takes the response, returns the operation's result or raises.
Outcome = Callable[[requests.Response], Any]


# -----------------------------------------------------------------------------
# Outcomes
# -----------------------------------------------------------------------------

def _decode_account(response: requests.Response) -> AccountRecord:
    try:
        return AccountEnvelope.model_validate_json(response.content).data
    except ValueError as e:
        raise SerializationError(
            f"error parsing account data: {e!s}",
            status_code=response.status_code,
        ) from e


def _absent(response: requests.Response) -> None:
    return None


def _no_content(response: requests.Response) -> None:
    return None


def _raise_validation(response: requests.Response) -> None:
    try:
        payload = ErrorPayload.model_validate_json(response.content)
    except ValueError as e:
        raise SerializationError(
            f"payload parsing error: {e!s}",
            status_code=response.status_code,
        ) from e
    raise ValidationError(payload.error_code, payload.error_message, detail=payload)


def _raise_not_found(response: requests.Response) -> None:
    raise NotFoundError()


def _raise_conflict(response: requests.Response) -> None:
    raise ConflictError()


CREATE_OUTCOMES: dict[int, Outcome] = {
    201: _decode_account,
    400: _raise_validation,
}

FETCH_OUTCOMES: dict[int, Outcome] = {
    200: _decode_account,
    404: _absent,
    400: _raise_validation,
}

DELETE_OUTCOMES: dict[int, Outcome] = {
    204: _no_content,
    404: _raise_not_found,
    409: _raise_conflict,
    400: _raise_validation,
}


class AccountService:
    """
    Account API client. Holds only the immutable Config, the shared requests.Session
    and a logger, so one instance may be used from several threads at once.
    """

    def __init__(
        self,
        config: Config,
        session: requests.Session | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self._config = config
        self._owns_session = session is None
        if session is None:
            session = requests.Session()
            session.verify = not config.skip_verify
        self._session = session
        self._logger = resolve_logger(logger)

    @property
    def config(self) -> Config:
        return self._config

    def close(self) -> None:
        """Close the session if this client created it."""
        if self._owns_session:
            self._session.close()

    def __enter__(self) -> "AccountService":
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()

    def _url(self, path: str) -> str:
        return f"{self._config.address.rstrip('/')}{path}"

    def _account_path(self, account_id: str) -> str:
        return ACCOUNT_BY_ID_PATH.format(id=quote(account_id, safe=""))

    def _host(self) -> str:
        """host[:port] of the configured address; userinfo is never included."""
        parts = urlsplit(self._config.address)
        if not parts.hostname:
            return self._config.address
        host = f"[{parts.hostname}]" if ":" in parts.hostname else parts.hostname
        try:
            port = parts.port
        except ValueError:
            # invalid port: requests rejects the URL itself and that surfaces as a TransportError
            port = None
        return f"{host}:{port}" if port is not None else host

    def _headers(self, with_body: bool = False) -> dict[str, str]:
        """Host, Accept and Date on every request; Content-Type when a body is sent."""
        headers = {
            "Host": self._host(),
            "Accept": MEDIA_TYPE,
            "Date": formatdate(usegmt=True),
        }
        if with_body:
            headers["Content-Type"] = MEDIA_TYPE
        return headers

    def _send(
        self,
        ctx: RequestContext | None,
        operation: str,
        method: str,
        path: str,
        *,
        params: dict[str, str] | None = None,
        body: str | None = None,
    ) -> requests.Response:
        """
        Execute one HTTP call under the effective deadline (configured timeout vs caller's).
        Anything that prevents a usable response is raised as TransportError.
        """
        ctx = ctx or RequestContext.background()
        self._check_context(ctx, operation)
        timeout = effective_timeout(ctx, self._config.timeout)
        if timeout <= 0:
            raise RequestTimeoutError(f"{operation}: context deadline exceeded")
        deadline = time.monotonic() + timeout

        self._logger.debug("%s: %s %s (timeout %.3fs)", operation, method, path, timeout)
        try:
            response = self._session.request(
                method,
                self._url(path),
                headers=self._headers(with_body=body is not None),
                params=params,
                data=body.encode("utf-8") if body is not None else None,
                timeout=timeout,
            )
        except requests.Timeout as e:
            self._logger.error("%s: request timed out: %s", operation, e)
            raise RequestTimeoutError(f"{operation}: request timed out: {e!s}") from e
        except requests.RequestException as e:
            self._logger.error("%s: failed to send request: %s", operation, e)
            raise TransportError(f"{operation}: failed to send request: {e!s}") from e

        # requests' timeout bounds each socket operation, not the whole call
        try:
            self._check_context(ctx, operation)
            if time.monotonic() > deadline:
                raise RequestTimeoutError(f"{operation}: request exceeded {timeout:.3f}s deadline")
        except TransportError:
            response.close()
            raise
        return response

    def _check_context(self, ctx: RequestContext, operation: str) -> None:
        reason = ctx.err()
        if reason is None:
            return
        if reason == CANCELLED:
            raise RequestCancelledError(f"{operation}: {reason}")
        raise RequestTimeoutError(f"{operation}: {reason}")

    def _classify(
        self,
        operation: str,
        response: requests.Response,
        outcomes: dict[int, Outcome],
    ) -> Any:
        """Map the status code through the operation's decision table; unknown codes are unexpected."""
        outcome = outcomes.get(response.status_code)
        try:
            if outcome is None:
                raise UnexpectedStatusError(operation, response.status_code, detail=response.text or None)
            return outcome(response)
        except ConflictError as e:
            self._logger.warning("%s: %s", operation, e.message)
            raise
        except AccountAPIError as e:
            self._logger.error("%s: %s", operation, e.message)
            raise

    # -------------------------------------------------------------------------
    # Operations
    # -------------------------------------------------------------------------

    def create(self, ctx: RequestContext | None, account: AccountRecord) -> AccountRecord:
        """Create an account (POST). Returns the stored record, now carrying its version."""
        self._logger.debug("creating an account with data: %s", account)
        try:
            body = AccountEnvelope(data=account).model_dump_json(exclude_none=True)
        except (ValueError, TypeError) as e:
            raise SerializationError(f"error encoding account data: {e!s}") from e

        response = self._send(ctx, "create", "POST", ACCOUNTS_PATH, body=body)
        return self._classify("create", response, CREATE_OUTCOMES)

    def fetch(self, ctx: RequestContext | None, account_id: str) -> AccountRecord | None:
        """Fetch an account by ID (GET). Returns None when the account does not exist."""
        response = self._send(ctx, "fetch", "GET", self._account_path(account_id))
        return self._classify("fetch", response, FETCH_OUTCOMES)

    def delete(self, ctx: RequestContext | None, account_id: str, version: int) -> None:
        """Delete an account at the given version (DELETE). 404 and 409 are errors here."""
        if version < 0:
            raise ValueError(f"version must be non-negative, got {version}")
        response = self._send(
            ctx,
            "delete",
            "DELETE",
            self._account_path(account_id),
            params={"version": str(version)},
        )
        self._classify("delete", response, DELETE_OUTCOMES)


def get_account_service(logger: logging.Logger | None = None) -> AccountService:
    """Return an AccountService configured from environment settings."""
    return AccountService(get_settings().to_config(), logger=logger)
