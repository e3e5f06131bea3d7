"""
Client configuration: an immutable holder for address, request timeout and TLS verification,
plus env-backed Settings using pydantic-settings.
"""

from functools import lru_cache
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_ADDRESS = "http://localhost:8080"
DEFAULT_REQUEST_TIMEOUT = 5.0  # seconds

_PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
_ENV_FILE = _PROJECT_ROOT / ".env"


class Config(BaseModel):
    """
    Account API client configuration. Immutable once built; use new_config() to get defaults.
    """
    model_config = ConfigDict(frozen=True)

    address: str = DEFAULT_ADDRESS
    timeout: float = DEFAULT_REQUEST_TIMEOUT
    # Do not verify the server's certificate. Never enable this in production.
    skip_verify: bool = False


def new_config(
    address: str | None = None,
    timeout: float = 0,
    skip_verify: bool = False,
) -> Config:
    """
    Build a Config, substituting DEFAULT_ADDRESS for an absent/empty address and
    DEFAULT_REQUEST_TIMEOUT for a zero timeout. No other validation: a malformed
    address surfaces as a transport error on first use.
    """
    if not address:
        address = DEFAULT_ADDRESS
    if not timeout:
        timeout = DEFAULT_REQUEST_TIMEOUT
    return Config(address=address, timeout=timeout, skip_verify=skip_verify)


class Settings(BaseSettings):
    """
    Client settings loaded from environment and .env.
    All fields optional; blank values fall back to the client defaults.
    """

    model_config = SettingsConfigDict(
        env_file=_ENV_FILE if _ENV_FILE.exists() else ".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    address: str = Field(
        default="",
        description="Account API base URL, e.g. http://localhost:8080",
        validation_alias="ACCOUNT_API_ADDRESS",
    )
    timeout: float = Field(
        default=0,
        description="Per-request timeout in seconds (0 means default)",
        validation_alias="ACCOUNT_API_TIMEOUT",
    )
    skip_verify: bool = Field(
        default=False,
        description="Disable TLS certificate verification (unsafe)",
        validation_alias="ACCOUNT_API_SKIP_VERIFY",
    )
    log_level: str = Field(
        default="INFO",
        validation_alias="ACCOUNT_API_LOG_LEVEL",
    )

    @field_validator("address", mode="before")
    @classmethod
    def strip_address(cls, v: object) -> str:
        if v is None:
            return ""
        return str(v).strip()

    @field_validator("timeout", "skip_verify", mode="before")
    @classmethod
    def blank_as_unset(cls, v: object) -> object:
        """Treat an empty ACCOUNT_API_TIMEOUT / ACCOUNT_API_SKIP_VERIFY as unset."""
        if v is None or (isinstance(v, str) and not v.strip()):
            return 0
        return v

    def to_config(self) -> Config:
        return new_config(self.address, self.timeout, self.skip_verify)


@lru_cache()
def get_settings() -> Settings:
    return Settings()
