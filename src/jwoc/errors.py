from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field


class JWoCError(Exception):
    """Base error type for the jwoc client."""


class ConfigError(JWoCError):
    """Raised when configuration cannot be loaded or validated."""


class AuthError(JWoCError):
    """Raised when an operation needs an authenticated visitor and there is none."""


class RequestError(JWoCError):
    """Raised when an HTTP request fails before a usable response is decoded."""


@dataclass(slots=True)
class APIError(RequestError):
    """Represents a non-success response from the registration backend."""

    status_code: int
    message: str
    body: str | None = None
    server_message: str | None = None

    def __str__(self) -> str:
        if self.body:
            return f"HTTP {self.status_code}: {self.message} ({self.body})"
        return f"HTTP {self.status_code}: {self.message}"


@dataclass(slots=True)
class FormValidationError(JWoCError):
    """Raised when a registration form fails local validation."""

    errors: Mapping[str, str] = field(default_factory=dict)

    def __str__(self) -> str:
        fields = ", ".join(f"{name}: {message}" for name, message in self.errors.items())
        return f"invalid registration form ({fields})"
