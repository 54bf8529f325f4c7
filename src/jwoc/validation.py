"""Pure, network-free validation of the mentee registration form."""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from pydantic import ValidationError

from jwoc.models.registration import FormInput

EMAIL_PATTERN = re.compile(r"[^@ ]+@[^@ ]+\.[^@ .]{2,}")
EMAIL_INVALID_MESSAGE = "Enter a valid email address"

# Keyed by wire name, in form order.
REQUIRED_FIELDS: dict[str, str] = {
    "name": "Name is required",
    "email": "Email is required",
    "phone": "Phone is required",
    "whatsapp": "WhatsApp is required",
    "college": "College is required",
    "year": "Year is required",
    "answer1": "This field is required",
}


@dataclass(frozen=True, slots=True)
class ValidationResult:
    errors: dict[str, str] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return not self.errors


def is_valid_email(value: str) -> bool:
    """Return True for ``local@domain.tld`` shaped addresses.

    Example:
        >>> is_valid_email("a@b.co"), is_valid_email("a@b")
        (True, False)
    """

    return EMAIL_PATTERN.fullmatch(value) is not None


def coerce_form(form: FormInput | Mapping[str, Any]) -> FormInput:
    if isinstance(form, FormInput):
        return form
    return FormInput.model_validate(dict(form))


def validate(form: FormInput | Mapping[str, Any]) -> ValidationResult:
    """Check required fields and email shape, reporting every failing field."""

    try:
        payload = coerce_form(form).to_payload()
    except ValidationError as exc:
        errors = {".".join(str(part) for part in err["loc"]): err["msg"] for err in exc.errors()}
        return ValidationResult(errors=errors)

    errors: dict[str, str] = {}
    for name, message in REQUIRED_FIELDS.items():
        if payload.get(name, "") == "":
            errors[name] = message

    email = payload.get("email", "")
    if "email" not in errors and not is_valid_email(email):
        errors["email"] = EMAIL_INVALID_MESSAGE

    return ValidationResult(errors=errors)
