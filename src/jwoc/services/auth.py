from __future__ import annotations

from pydantic import ValidationError

from jwoc.constants import GITHUB_LOGIN_PATH, GOOGLE_LOGIN_PATH, IDENTITY_PATH
from jwoc.errors import RequestError
from jwoc.models.identity import IdentityResponse, OAuthProvider
from jwoc.services.base import ServiceBase

_LOGIN_PATHS: dict[OAuthProvider, str] = {
    OAuthProvider.GOOGLE: GOOGLE_LOGIN_PATH,
    OAuthProvider.GITHUB: GITHUB_LOGIN_PATH,
}


class AuthService(ServiceBase):
    """Session identity and OAuth entry points."""

    async def current_user(self) -> IdentityResponse:
        data = await self._client._request_json("GET", IDENTITY_PATH)
        try:
            return IdentityResponse.model_validate(data.payload)
        except ValidationError as exc:
            raise RequestError("unexpected identity response") from exc

    def login_url(self, provider: OAuthProvider | str) -> str:
        return self._client.url_for(_LOGIN_PATHS[OAuthProvider(provider)])
