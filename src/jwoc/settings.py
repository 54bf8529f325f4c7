from __future__ import annotations

from pydantic import AliasChoices, Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class RuntimeSettings(BaseSettings):
    """Environment-driven runtime overrides for client/profile resolution."""

    model_config = SettingsConfigDict(
        env_prefix="JWOC_",
        extra="ignore",
        populate_by_name=True,
        case_sensitive=False,
    )

    profile: str | None = Field(default=None, validation_alias=AliasChoices("JWOC_PROFILE"))

    base_url: str | None = Field(
        default=None,
        validation_alias=AliasChoices("JWOC_BASE_URL", "JWOC_API_URL"),
    )
    session_cookie: SecretStr | None = Field(
        default=None,
        validation_alias=AliasChoices("JWOC_SESSION_COOKIE", "JWOC_COOKIE"),
    )
    cookie_name: str | None = Field(default=None, validation_alias=AliasChoices("JWOC_COOKIE_NAME"))

    request_timeout_seconds: float | None = Field(
        default=None,
        validation_alias=AliasChoices("JWOC_REQUEST_TIMEOUT_SECONDS", "JWOC_TIMEOUT"),
    )
    verify_ssl: bool | None = Field(default=None, validation_alias=AliasChoices("JWOC_VERIFY_SSL"))
    redirect_delay_seconds: float | None = Field(
        default=None,
        validation_alias=AliasChoices("JWOC_REDIRECT_DELAY_SECONDS"),
    )
