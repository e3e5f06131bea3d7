"""Pytest configuration and fixtures."""

import json
from typing import Any
from unittest.mock import MagicMock

import pytest
import requests

from accountapi.core.config import Config, get_settings, new_config
from accountapi.schemas.account import AccountAttributes, AccountRecord
from accountapi.services.account_service import AccountService

ACCOUNT_ID = "ad27e265-9605-4b4b-a0e5-3003ea9cc4dc"
ORGANISATION_ID = "eb0bd6f5-c3f5-44b2-b677-acd23cdde73c"


def make_response(status_code: int, body: Any = None) -> requests.Response:
    """Build a real requests.Response with a JSON (dict/list), raw bytes or empty body."""
    response = requests.Response()
    response.status_code = status_code
    if isinstance(body, (dict, list)):
        response._content = json.dumps(body).encode("utf-8")
    elif isinstance(body, str):
        response._content = body.encode("utf-8")
    else:
        response._content = body or b""
    # Non-streamed responses arrive fully read; close() then never touches .raw
    response._content_consumed = True
    response.encoding = "utf-8"
    return response


@pytest.fixture(autouse=True)
def clear_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def config() -> Config:
    return new_config("http://localhost:8080", 5.0, False)


@pytest.fixture
def session() -> MagicMock:
    return MagicMock(spec=requests.Session)


@pytest.fixture
def service(config: Config, session: MagicMock) -> AccountService:
    return AccountService(config, session=session)


@pytest.fixture
def account() -> AccountRecord:
    return AccountRecord(
        id=ACCOUNT_ID,
        organisation_id=ORGANISATION_ID,
        attributes=AccountAttributes(name=["Johnny Bravo"], country="GB"),
    )


@pytest.fixture
def account_body() -> dict[str, Any]:
    """Server response envelope for the account fixture after create."""
    return {
        "data": {
            "id": ACCOUNT_ID,
            "organisation_id": ORGANISATION_ID,
            "type": "accounts",
            "version": 0,
            "attributes": {"name": ["Johnny Bravo"], "country": "GB"},
        },
        "links": {"self": f"/v1/organisation/accounts/{ACCOUNT_ID}"},
    }
