from __future__ import annotations

from collections.abc import Mapping
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Any

import httpx

from jwoc.config import ClientConfig, ConfigInput, ProfileConfig, load_config
from jwoc.errors import AuthError, ConfigError
from jwoc.http import JsonResponse, RegistrationTransport
from jwoc.models.identity import Identity
from jwoc.services import AuthService, MenteesService
from jwoc.settings import RuntimeSettings


def _secret_to_str(value: object) -> str | None:
    if value is None:
        return None
    getter = getattr(value, "get_secret_value", None)
    if callable(getter):
        secret = getter()
        return str(secret) if secret else None
    raw = str(value)
    return raw if raw else None


def _first_set(*values: Any) -> Any:
    for value in values:
        if value is not None:
            return value
    return None


class AsyncJWoCClient:
    """Async client for the JWoC registration backend."""

    def __init__(
        self,
        config: ConfigInput | None = None,
        *,
        config_path: str | Path | None = None,
        profile: str | None = None,
        base_url: str | None = None,
        session_cookie: str | None = None,
        cookie_name: str | None = None,
        request_timeout_seconds: float | None = None,
        verify_ssl: bool | None = None,
        redirect_delay_seconds: float | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self._runtime = RuntimeSettings()
        resolved = load_config(config, config_path=config_path)
        self._resolved_config = resolved
        self.config: ClientConfig = resolved.data

        self._profile_name, resolved_profile = self._resolve_profile(profile=profile)

        self.base_url: str = base_url or self._runtime.base_url or resolved_profile.base_url
        self.cookie_name: str = cookie_name or self._runtime.cookie_name or resolved_profile.cookie_name
        session = (
            session_cookie
            or _secret_to_str(self._runtime.session_cookie)
            or _secret_to_str(resolved_profile.session_cookie)
        )
        self.request_timeout_seconds: float = _first_set(
            request_timeout_seconds,
            self._runtime.request_timeout_seconds,
            resolved_profile.request_timeout_seconds,
        )
        self.verify_ssl: bool = _first_set(verify_ssl, self._runtime.verify_ssl, resolved_profile.verify_ssl)
        self.redirect_delay_seconds: float = _first_set(
            redirect_delay_seconds,
            self._runtime.redirect_delay_seconds,
            resolved_profile.redirect_delay_seconds,
        )
        self.home_path = resolved_profile.home_path

        self._transport = RegistrationTransport(
            base_url=self.base_url,
            timeout=self.request_timeout_seconds,
            verify_tls=self.verify_ssl,
            session_cookie=session,
            cookie_name=self.cookie_name,
            http_client=http_client,
        )

        self._auth: AuthService | None = None
        self._mentees: MenteesService | None = None

    def _resolve_profile(self, *, profile: str | None) -> tuple[str, ProfileConfig]:
        selected = profile or self._runtime.profile or self.config.default_profile or "default"

        profile_config = self.config.profiles.get(selected)
        if profile_config is None:
            if selected != "default" and (profile is not None or self._runtime.profile is not None):
                raise ConfigError(f"profile '{selected}' not found")
            profile_config = ProfileConfig()

        return selected, profile_config

    @property
    def profile_name(self) -> str:
        return self._profile_name

    @property
    def has_session_cookie(self) -> bool:
        return self.cookie_name in self._transport.cookies

    @property
    def auth(self) -> AuthService:
        if self._auth is None:
            self._auth = AuthService(self)
        return self._auth

    @property
    def mentees(self) -> MenteesService:
        if self._mentees is None:
            self._mentees = MenteesService(self)
        return self._mentees

    async def __aenter__(self) -> AsyncJWoCClient:
        return self

    async def __aexit__(self, exc_type: object, exc: object, tb: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._transport.aclose()

    def url_for(self, path: str) -> str:
        return self._transport.url_for(path)

    async def require_identity(self) -> Identity:
        """Return the authenticated visitor's profile or raise :class:`AuthError`."""

        response = await self.auth.current_user()
        if not response.authenticated or response.user is None:
            raise AuthError("not authenticated; log in with Google or GitHub first")
        return response.user

    async def _request_json(
        self,
        method: str,
        path: str,
        *,
        json_data: Mapping[str, Any] | None = None,
    ) -> JsonResponse:
        return await self._transport.request_json(method, path, json_data=json_data)


@asynccontextmanager
async def connect(*args: Any, **kwargs: Any):
    client = AsyncJWoCClient(*args, **kwargs)
    try:
        yield client
    finally:
        await client.aclose()
