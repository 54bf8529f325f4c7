from __future__ import annotations

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from jwoc.models.common import JWoCModel


class Gender(StrEnum):
    MALE = "Male"
    FEMALE = "Female"
    PREFER_NOT_TO_SAY = "Prefer not to say"


class FormInput(BaseModel):
    """Mentee profile fields as entered on the registration form.

    Field aliases are the JSON keys the backend expects, so
    ``model_dump(by_alias=True)`` yields the request body directly.
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True, frozen=True)

    name: str = ""
    gender: str = Gender.PREFER_NOT_TO_SAY.value
    email: str = ""
    phone: str = ""
    whatsapp: str = ""
    college: str = ""
    year: str = ""
    github: str = ""
    linkedin: str = Field(default="", alias="linkedIn")
    answer: str = Field(default="", alias="answer1")

    @field_validator("*", mode="before")
    @classmethod
    def _coerce_text(cls, value: Any) -> Any:
        if value is None:
            return ""
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return value

    @field_validator("gender")
    @classmethod
    def _default_gender(cls, value: str) -> str:
        return value or Gender.PREFER_NOT_TO_SAY.value

    def to_payload(self) -> dict[str, str]:
        return self.model_dump(by_alias=True)


class RegistrationReceipt(JWoCModel):
    """Decoded response of the registration endpoint."""

    status_code: int = Field(default=0, exclude=True)
    message: str | None = None

    @property
    def created(self) -> bool:
        return self.status_code == 201
