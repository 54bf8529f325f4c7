from __future__ import annotations

import asyncio
from collections.abc import Mapping
from typing import Any

import pytest

from jwoc.workflows import NoticeLevel

BASE_URL = "https://jwoc.test"


class RecordingPresenter:
    def __init__(self) -> None:
        self.notices: list[tuple[NoticeLevel, str]] = []
        self.field_errors: list[dict[str, str]] = []
        self.navigations: list[tuple[str, float]] = []
        self.redirects: list[str] = []
        self.navigated = asyncio.Event()

    def notify(self, level: NoticeLevel, message: str) -> None:
        self.notices.append((level, message))

    def show_field_errors(self, errors: Mapping[str, str]) -> None:
        self.field_errors.append(dict(errors))

    def navigate(self, target: str) -> None:
        self.navigations.append((target, asyncio.get_running_loop().time()))
        self.navigated.set()

    def redirect(self, url: str) -> None:
        self.redirects.append(url)

    def errors(self) -> list[str]:
        return [message for level, message in self.notices if level is NoticeLevel.ERROR]


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Any) -> None:
    for name in (
        "JWOC_CONFIG",
        "JWOC_CONFIG_FILE",
        "JWOC_PROFILE",
        "JWOC_BASE_URL",
        "JWOC_API_URL",
        "JWOC_SESSION_COOKIE",
        "JWOC_COOKIE",
        "JWOC_COOKIE_NAME",
        "JWOC_REQUEST_TIMEOUT_SECONDS",
        "JWOC_TIMEOUT",
        "JWOC_VERIFY_SSL",
        "JWOC_REDIRECT_DELAY_SECONDS",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("HOME", str(tmp_path / "home"))


@pytest.fixture
def presenter() -> RecordingPresenter:
    return RecordingPresenter()


@pytest.fixture
def form_data() -> dict[str, str]:
    return {
        "name": "Ada Lovelace",
        "gender": "Female",
        "email": "ada@example.com",
        "phone": "9876543210",
        "whatsapp": "9876543210",
        "college": "JGEC",
        "year": "2",
        "github": "https://github.com/ada",
        "linkedIn": "",
        "answer1": "I want to learn how open source projects are run.",
    }


@pytest.fixture
def client_config() -> dict[str, object]:
    return {
        "default_profile": "default",
        "profiles": {"default": {"base_url": BASE_URL, "session_cookie": "s%3Aabc", "redirect_delay_seconds": 0.05}},
    }
