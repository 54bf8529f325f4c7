"""Presentation-side collaborator of the registration flow."""

from __future__ import annotations

from collections.abc import Mapping
from enum import StrEnum
from typing import Protocol


class NoticeLevel(StrEnum):
    INFO = "info"
    SUCCESS = "success"
    ERROR = "error"


class FlowPresenter(Protocol):
    """Receives everything the registration flow wants the visitor to see."""

    def notify(self, level: NoticeLevel, message: str) -> None:
        """Show a transient notice (toast)."""

    def show_field_errors(self, errors: Mapping[str, str]) -> None:
        """Show per-field validation messages keyed by form field name."""

    def navigate(self, target: str) -> None:
        """Leave the registration page for an in-app route."""

    def redirect(self, url: str) -> None:
        """Send the visitor's browser to an external URL."""
