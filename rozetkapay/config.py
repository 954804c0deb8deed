"""Configuration management using Pydantic Settings"""

import base64
from typing import Any, Optional

import httpx
from pydantic import ValidationError, field_validator
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource, SettingsConfigDict

from rozetkapay.domain.exceptions import ConfigurationError

PRODUCTION_BASE_URL = "https://api.rozetkapay.com"
DEVELOPMENT_BASE_URL = "https://api-epdev.rozetkapay.com"


class RozetkaPayConfiguration(BaseSettings):
    """
    Gateway endpoint and credentials shared by every service.

    Values come from keyword arguments first, then ROZETKAPAY_* environment
    variables, then a local .env file; from_values() skips the last two.
    Invalid or missing values raise ConfigurationError at construction time.
    """

    model_config = SettingsConfigDict(
        env_prefix="ROZETKAPAY_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    # Gateway
    base_url: str = PRODUCTION_BASE_URL

    # Basic auth credentials
    login: str
    password: str

    # Partnership mode: one core account operating on behalf of a child
    on_behalf_of: Optional[str] = None
    # RID personal token granting access to a customer's wallet
    customer_auth: Optional[str] = None

    # HTTP Client
    timeout_seconds: float = 30.0
    user_agent: str = "rozetkapay-python"

    def __init__(self, **values: Any) -> None:
        try:
            super().__init__(**values)
        except ValidationError as e:
            problems = "; ".join(
                f"{'.'.join(str(part) for part in error['loc']) or 'configuration'}: {error['msg']}"
                for error in e.errors()
            )
            raise ConfigurationError(f"Invalid RozetkaPay configuration: {problems}") from e

    @field_validator("base_url")
    @classmethod
    def _validate_base_url(cls, value: str) -> str:
        value = (value or "").strip().rstrip("/")
        if not value:
            raise ValueError("must not be empty")
        try:
            url = httpx.URL(value)
        except httpx.InvalidURL as e:
            raise ValueError(f"not a valid URL ({e})") from e
        if url.scheme not in ("http", "https") or not url.host:
            raise ValueError("must be an absolute http(s) URL")
        return value

    @field_validator("login", "password")
    @classmethod
    def _require_credential(cls, value: str) -> str:
        if not value or not value.strip():
            raise ValueError("must not be empty")
        return value

    @field_validator("timeout_seconds")
    @classmethod
    def _validate_timeout(cls, value: float) -> float:
        if value <= 0:
            raise ValueError("must be greater than zero")
        return value

    def basic_auth_header(self) -> str:
        """Authorization header value expected by the gateway"""
        credentials = base64.b64encode(f"{self.login}:{self.password}".encode("utf-8")).decode("ascii")
        return f"Basic {credentials}"

    def request_headers(self) -> dict[str, str]:
        """Headers attached to every outbound request"""
        headers = {
            "Authorization": self.basic_auth_header(),
            "Accept": "application/json",
        }
        if self.user_agent and self.user_agent.strip():
            headers["User-Agent"] = self.user_agent
        if self.on_behalf_of and self.on_behalf_of.strip():
            headers["X-ON-BEHALF-OF"] = self.on_behalf_of
        if self.customer_auth and self.customer_auth.strip():
            headers["X-CUSTOMER-AUTH"] = self.customer_auth
        return headers

    @classmethod
    def from_values(cls, **values: Any) -> "RozetkaPayConfiguration":
        """Configuration from the given values and field defaults only; the environment and .env are not read"""
        return _ExplicitConfiguration(**values)


class _ExplicitConfiguration(RozetkaPayConfiguration):
    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return (init_settings,)
