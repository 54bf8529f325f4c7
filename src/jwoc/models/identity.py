from __future__ import annotations

from enum import StrEnum

from pydantic import Field

from jwoc.models.common import JWoCModel


class OAuthProvider(StrEnum):
    GOOGLE = "google"
    GITHUB = "github"


class Identity(JWoCModel):
    """Opaque user-profile record returned by the identity endpoint."""

    id: str | None = Field(default=None, alias="_id")
    name: str | None = None
    email: str | None = None
    avatar: str | None = None

    @property
    def display_name(self) -> str:
        return self.name or self.email or self.id or "unknown"


class IdentityResponse(JWoCModel):
    success: bool = False
    user: Identity | None = None

    @property
    def authenticated(self) -> bool:
        return self.success and self.user is not None
