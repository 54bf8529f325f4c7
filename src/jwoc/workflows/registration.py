"""Registration flow controller: auth gate, validation, submission and redirect."""

from __future__ import annotations

import asyncio
from collections.abc import Mapping
from dataclasses import dataclass
from enum import StrEnum
from typing import Any

import structlog

from jwoc.constants import (
    DEFAULT_HOME_PATH,
    DEFAULT_REDIRECT_DELAY_SECONDS,
    MSG_AUTHENTICATE_FIRST,
    MSG_IDENTITY_FETCH_FAILED,
    MSG_REGISTRATION_FALLBACK_ERROR,
    MSG_REGISTRATION_SUCCEEDED,
)
from jwoc.errors import APIError, AuthError, FormValidationError, RequestError
from jwoc.models.identity import Identity, OAuthProvider
from jwoc.models.registration import FormInput
from jwoc.validation import ValidationResult, validate
from jwoc.workflows.presenter import FlowPresenter, NoticeLevel

logger = structlog.get_logger(__name__)


class RegistrationStatus(StrEnum):
    IDLE = "idle"
    SUBMITTING = "submitting"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


@dataclass(slots=True)
class Session:
    identity: Identity | None = None

    @property
    def authenticated(self) -> bool:
        return self.identity is not None


@dataclass(frozen=True, slots=True)
class RegistrationSubmission:
    status: RegistrationStatus = RegistrationStatus.IDLE
    error_message: str | None = None
    message: str | None = None


class RegistrationFlowController:
    """Drives one visitor's registration against the backend.

    Use as an async context manager: entering fetches the identity once,
    leaving cancels the pending post-success navigation.
    """

    def __init__(
        self,
        client: Any,
        presenter: FlowPresenter,
        *,
        redirect_delay: float = DEFAULT_REDIRECT_DELAY_SECONDS,
        home_path: str = DEFAULT_HOME_PATH,
    ) -> None:
        self._client = client
        self._presenter = presenter
        self.redirect_delay = redirect_delay
        self.home_path = home_path

        self._session = Session()
        self._submission = RegistrationSubmission()
        self._initialized = False
        self._closed = False
        self._navigation: asyncio.TimerHandle | None = None

    @property
    def session(self) -> Session:
        return self._session

    @property
    def submission(self) -> RegistrationSubmission:
        return self._submission

    @property
    def navigation_pending(self) -> bool:
        return self._navigation is not None

    @property
    def closed(self) -> bool:
        return self._closed

    async def __aenter__(self) -> RegistrationFlowController:
        await self.initialize()
        return self

    async def __aexit__(self, exc_type: object, exc: object, tb: object) -> None:
        self.close()

    async def initialize(self) -> Session:
        """Fetch the current identity; only the first call reaches the network."""

        if self._initialized:
            return self._session
        self._initialized = True

        try:
            identity = await self._client.require_identity()
        except AuthError:
            logger.info("identity_missing")
            self._presenter.notify(NoticeLevel.ERROR, MSG_AUTHENTICATE_FIRST)
            return self._session
        except RequestError as exc:
            logger.warning("identity_fetch_failed", error=str(exc))
            self._presenter.notify(NoticeLevel.ERROR, MSG_IDENTITY_FETCH_FAILED)
            return self._session

        self._session = Session(identity=identity)
        logger.info("identity_loaded", user_id=identity.id)
        return self._session

    def validate(self, form: FormInput | Mapping[str, Any]) -> ValidationResult:
        return validate(form)

    async def submit(self, form: FormInput | Mapping[str, Any]) -> RegistrationSubmission:
        if self._closed:
            raise RuntimeError("registration flow is closed")

        if self._submission.status is RegistrationStatus.SUBMITTING:
            logger.info("duplicate_submit_ignored")
            return self._submission

        # Auth is checked before validation so an anonymous visitor sees the login prompt first.
        if not self._session.authenticated:
            self._presenter.notify(NoticeLevel.ERROR, MSG_AUTHENTICATE_FIRST)
            return self._submission

        result = validate(form)
        if not result.ok:
            logger.info("form_invalid", fields=sorted(result.errors))
            self._presenter.show_field_errors(result.errors)
            return self._submission

        self._cancel_navigation()
        self._transition(RegistrationSubmission(status=RegistrationStatus.SUBMITTING), "submit")

        try:
            receipt = await self._client.mentees.register(form)
        except APIError as exc:
            return self._fail(exc.server_message, error=str(exc))
        except (RequestError, FormValidationError) as exc:
            return self._fail(None, error=str(exc))
        except asyncio.CancelledError:
            self._transition(RegistrationSubmission(), "cancelled")
            raise

        if not receipt.created:
            return self._fail(None, error=f"unexpected status {receipt.status_code}")

        self._transition(
            RegistrationSubmission(status=RegistrationStatus.SUCCEEDED, message=MSG_REGISTRATION_SUCCEEDED),
            "registered",
        )
        self._presenter.notify(NoticeLevel.SUCCESS, MSG_REGISTRATION_SUCCEEDED)
        if not self._closed:
            loop = asyncio.get_running_loop()
            self._navigation = loop.call_later(self.redirect_delay, self._navigate)
        return self._submission

    def begin_external_login(self, provider: OAuthProvider | str) -> None:
        url = self._client.auth.login_url(provider)
        logger.info("external_login", provider=str(OAuthProvider(provider)))
        self._presenter.redirect(url)

    def close(self) -> None:
        """Tear down; a pending navigation never fires afterwards."""

        self._cancel_navigation()
        self._closed = True

    def _fail(self, server_message: str | None, *, error: str) -> RegistrationSubmission:
        message = server_message or MSG_REGISTRATION_FALLBACK_ERROR
        logger.warning("registration_failed", error=error)
        self._transition(
            RegistrationSubmission(status=RegistrationStatus.FAILED, error_message=message),
            "rejected",
        )
        self._presenter.notify(NoticeLevel.ERROR, message)
        return self._submission

    def _transition(self, target: RegistrationSubmission, event: str) -> None:
        logger.info(
            "state_transition",
            transition_event=event,
            from_state=str(self._submission.status),
            to_state=str(target.status),
        )
        self._submission = target

    def _cancel_navigation(self) -> None:
        if self._navigation is not None:
            self._navigation.cancel()
            self._navigation = None

    def _navigate(self) -> None:
        self._navigation = None
        if self._closed:
            return
        logger.info("navigate", target=self.home_path)
        self._presenter.navigate(self.home_path)
