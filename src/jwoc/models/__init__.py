from jwoc.models.common import JWoCModel
from jwoc.models.identity import Identity, IdentityResponse, OAuthProvider
from jwoc.models.registration import FormInput, Gender, RegistrationReceipt

__all__ = [
    "FormInput",
    "Gender",
    "Identity",
    "IdentityResponse",
    "JWoCModel",
    "OAuthProvider",
    "RegistrationReceipt",
]
