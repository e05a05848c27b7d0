from __future__ import annotations

from typing import Optional

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppConfig(BaseSettings):
    """Client configuration with automatic environment variable loading.

    All settings can be overridden via environment variables with the LW_ prefix.
    For example:
        - LW_ACCOUNT=acme
        - LW_API_KEY=ACME_ABCDEF0123456789
        - LW_API_SECRET=_0123456789abcdef
        - LW_MAX_SEARCH_WINDOW_DAYS=7

    Alternatively, settings can be provided programmatically when creating the client:
        client = LwApiClient(account="acme", api_key="...", api_secret="...")
    """

    model_config = SettingsConfigDict(
        env_prefix="LW_",
        case_sensitive=False,
        extra="forbid",
    )

    account: Optional[str] = Field(
        default=None,
        description="Account name (acme) or full domain (acme.lacework.net)",
    )

    subaccount: Optional[str] = Field(
        default=None,
        description="Sub-account to scope requests to (sent as the Account-Name header)",
    )

    api_key: Optional[str] = Field(
        default=None,
        description="API key id used to negotiate access tokens",
    )

    api_secret: Optional[str] = Field(
        default=None,
        description="API secret used to negotiate access tokens",
    )

    api_token: Optional[str] = Field(
        default=None,
        description="Pre-issued access token. When set, no token negotiation happens",
    )

    base_url: Optional[str] = Field(
        default=None,
        description="Server URL override. If None, derived from the account",
    )

    org_access: bool = Field(
        default=False,
        description="Access organization level data sets (sends Org-Access: true)",
    )

    timeout_seconds: float = Field(
        default=60.0,
        gt=0,
        description="HTTP timeout per request in seconds",
    )

    token_expiry_seconds: int = Field(
        default=3600,
        ge=1,
        description="Lifetime requested for negotiated access tokens",
    )

    max_search_window_days: int = Field(
        default=7,
        ge=1,
        description="Maximum time range accepted by one search request, in days",
    )

    max_search_history_days: int = Field(
        default=92,
        ge=1,
        description="Days of history retained by the server for searches",
    )

    @model_validator(mode="after")
    def _window_within_history(self) -> "AppConfig":
        if self.max_search_window_days > self.max_search_history_days:
            raise ValueError("window size cannot be greater than max history")
        return self
