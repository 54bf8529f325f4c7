"""Workflow helpers."""

from jwoc.workflows.presenter import FlowPresenter, NoticeLevel
from jwoc.workflows.registration import (
    RegistrationFlowController,
    RegistrationStatus,
    RegistrationSubmission,
    Session,
)

__all__ = [
    "FlowPresenter",
    "NoticeLevel",
    "RegistrationFlowController",
    "RegistrationStatus",
    "RegistrationSubmission",
    "Session",
]
