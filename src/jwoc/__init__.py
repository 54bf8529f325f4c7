__version__ = "0.1.0"

from jwoc.client import AsyncJWoCClient, connect  # noqa: E402
from jwoc.config.models import ClientConfig, ProfileConfig  # noqa: E402
from jwoc.errors import (  # noqa: E402
    APIError,
    AuthError,
    ConfigError,
    FormValidationError,
    JWoCError,
    RequestError,
)
from jwoc.models import FormInput, Gender, Identity, IdentityResponse, OAuthProvider  # noqa: E402
from jwoc.validation import ValidationResult, is_valid_email, validate  # noqa: E402
from jwoc.workflows import (  # noqa: E402
    FlowPresenter,
    NoticeLevel,
    RegistrationFlowController,
    RegistrationStatus,
    RegistrationSubmission,
    Session,
)

__all__ = [
    "__version__",
    "APIError",
    "AsyncJWoCClient",
    "AuthError",
    "ClientConfig",
    "ConfigError",
    "FlowPresenter",
    "FormInput",
    "FormValidationError",
    "Gender",
    "Identity",
    "IdentityResponse",
    "JWoCError",
    "NoticeLevel",
    "OAuthProvider",
    "ProfileConfig",
    "RegistrationFlowController",
    "RegistrationStatus",
    "RegistrationSubmission",
    "RequestError",
    "Session",
    "ValidationResult",
    "connect",
    "is_valid_email",
    "validate",
]
