from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, SecretStr, field_serializer

from jwoc.constants import (
    DEFAULT_BASE_URL,
    DEFAULT_COOKIE_NAME,
    DEFAULT_HOME_PATH,
    DEFAULT_REDIRECT_DELAY_SECONDS,
)


class ProfileConfig(BaseModel):
    """Resolved profile configuration used for backend requests."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    base_url: str = Field(
        default=DEFAULT_BASE_URL,
        validation_alias=AliasChoices("base_url", "baseUrl", "api_url", "apiUrl"),
    )
    request_timeout_seconds: float = Field(
        default=30.0,
        validation_alias=AliasChoices("request_timeout_seconds", "requestTimeoutSeconds", "timeout"),
    )
    verify_ssl: bool = Field(default=True, validation_alias=AliasChoices("verify_ssl", "verifySsl"))

    session_cookie: SecretStr | None = Field(
        default=None,
        validation_alias=AliasChoices("session_cookie", "sessionCookie", "cookie"),
    )
    cookie_name: str = Field(
        default=DEFAULT_COOKIE_NAME,
        validation_alias=AliasChoices("cookie_name", "cookieName"),
    )

    redirect_delay_seconds: float = Field(
        default=DEFAULT_REDIRECT_DELAY_SECONDS,
        ge=0.0,
        validation_alias=AliasChoices("redirect_delay_seconds", "redirectDelaySeconds"),
    )
    home_path: str = Field(default=DEFAULT_HOME_PATH, validation_alias=AliasChoices("home_path", "homePath"))

    @field_serializer("session_cookie", when_used="json-unless-none")
    def _dump_session_cookie(self, value: SecretStr) -> str:
        # Saved config files must keep the real cookie; display paths redact by key.
        return value.get_secret_value()


class ClientConfig(BaseModel):
    """Root configuration model holding named profiles."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    version: str = "1"
    default_profile: str | None = Field(
        default=None,
        validation_alias=AliasChoices("default_profile", "defaultProfile"),
    )
    profiles: dict[str, ProfileConfig] = Field(default_factory=dict)


class ResolvedConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    source: str
    path: Path | None = None
    data: ClientConfig


ConfigInput = ClientConfig | dict[str, Any]
