from __future__ import annotations

import pytest

from jwoc.models import FormInput
from jwoc.validation import REQUIRED_FIELDS, is_valid_email, validate


@pytest.mark.parametrize("value", ["a@b.co", "ada.lovelace@example.com", "x@mail.college.in", "a+b@c-d.org"])
def test_email_accepts_local_at_domain_tld(value: str) -> None:
    assert is_valid_email(value)


@pytest.mark.parametrize(
    "value",
    ["a@b", "a b@c.co", "a@@b.co", "@b.co", "a@.co", "a@b.c", "a@b.co ", ""],
)
def test_email_rejects_malformed(value: str) -> None:
    assert not is_valid_email(value)


def test_valid_form_passes(form_data: dict[str, str]) -> None:
    result = validate(form_data)
    assert result.ok
    assert result.errors == {}


def test_empty_form_reports_every_required_field() -> None:
    result = validate({})
    assert not result.ok
    assert result.errors == REQUIRED_FIELDS


def test_missing_fields_are_all_reported(form_data: dict[str, str]) -> None:
    form_data["phone"] = ""
    form_data["answer1"] = ""
    form_data.pop("college")

    result = validate(form_data)

    assert result.errors == {
        "phone": "Phone is required",
        "college": "College is required",
        "answer1": "This field is required",
    }


def test_bad_email_reported_after_required_check(form_data: dict[str, str]) -> None:
    form_data["email"] = "ada@localhost"
    assert validate(form_data).errors == {"email": "Enter a valid email address"}

    form_data["email"] = ""
    assert validate(form_data).errors == {"email": "Email is required"}


def test_optional_fields_have_no_format_check(form_data: dict[str, str]) -> None:
    form_data.update(github="not a url", linkedIn="???", gender="")
    assert validate(form_data).ok


def test_gender_defaults_when_unset(form_data: dict[str, str]) -> None:
    form_data.pop("gender")
    assert FormInput.model_validate(form_data).gender == "Prefer not to say"
    form_data["gender"] = ""
    assert FormInput.model_validate(form_data).gender == "Prefer not to say"


def test_payload_uses_backend_keys(form_data: dict[str, str]) -> None:
    form = FormInput(name="Ada", linkedin="https://linkedin.com/in/ada", answer="because", year=3)
    payload = form.to_payload()
    assert payload["linkedIn"] == "https://linkedin.com/in/ada"
    assert payload["answer1"] == "because"
    assert payload["year"] == "3"
    assert "linkedin" not in payload
    assert FormInput.model_validate(form_data).to_payload() == form_data


def test_validate_accepts_model_instances(form_data: dict[str, str]) -> None:
    form = FormInput.model_validate(form_data)
    assert validate(form).ok
