"""
Walk through create, fetch and delete against a running Account API.

How to run:
-----------
1. Start the Account API (default address http://localhost:8080), or point the client
   elsewhere with ACCOUNT_API_ADDRESS.
2. From the project root:
   python examples/basic.py
"""

import uuid

from accountapi.core.config import get_settings
from accountapi.core.context import RequestContext
from accountapi.core.logging import setup_logging
from accountapi.schemas.account import AccountAttributes, AccountRecord
from accountapi.services import AccountAPIError, AccountService


def main() -> None:
    settings = get_settings()
    logger = setup_logging(settings.log_level, json_format=True)
    ctx = RequestContext.background()

    account_id = str(uuid.uuid4())
    account = AccountRecord(
        id=account_id,
        organisation_id=account_id,
        attributes=AccountAttributes(name=["Johnny Bravo"], country="GB"),
    )

    with AccountService(settings.to_config(), logger=logger) as client:
        print("\n--- Create ---")
        try:
            created = client.create(ctx, account)
            print(f"   OK: {created.model_dump(exclude_none=True)}")
        except AccountAPIError as e:
            print(f"   FAIL: {e.message}")
            return

        print("\n--- Fetch ---")
        try:
            fetched = client.fetch(ctx, account_id)
            print(f"   OK: {fetched.model_dump(exclude_none=True) if fetched else '(not found)'}")
        except AccountAPIError as e:
            print(f"   FAIL: {e.message}")

        print("\n--- Delete ---")
        try:
            client.delete(ctx, account_id, created.version or 0)
            print(f"   OK: deleted {account_id}")
        except AccountAPIError as e:
            print(f"   FAIL: {e.message}")
    print("\nDone.")


if __name__ == "__main__":
    main()
