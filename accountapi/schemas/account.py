"""
Account resource schema (wire contract of /v1/organisation/accounts).
Request and success-response bodies are wrapped as {"data": {...}}.
"""

from pydantic import BaseModel, ConfigDict, Field

ACCOUNT_TYPE = "accounts"


class AccountAttributes(BaseModel):
    """Descriptive fields of an account. Only name/country are used by this client; the rest pass through."""
    model_config = ConfigDict(extra="allow")

    name: list[str] | None = Field(None, description="Account holder name(s), in order")
    country: str | None = Field(None, description="ISO 3166-1 country code")
    alternative_names: list[str] | None = None
    account_classification: str | None = None
    account_matching_opt_out: bool | None = None
    account_number: str | None = None
    bank_id: str | None = None
    bank_id_code: str | None = None
    base_currency: str | None = None
    bic: str | None = None
    iban: str | None = None
    joint_account: bool | None = None
    secondary_identification: str | None = None
    status: str | None = None
    switched: bool | None = None


class AccountRecord(BaseModel):
    """
    Account resource. version is None until the server assigns it (0 on create)
    and is the optimistic-concurrency token for delete.
    """
    id: str
    organisation_id: str
    type: str = ACCOUNT_TYPE
    version: int | None = None
    attributes: AccountAttributes | None = None


class AccountEnvelope(BaseModel):
    data: AccountRecord
