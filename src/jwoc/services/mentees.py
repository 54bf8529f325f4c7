from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from jwoc.constants import REGISTER_PATH
from jwoc.errors import FormValidationError, RequestError
from jwoc.models.registration import FormInput, RegistrationReceipt
from jwoc.services.base import ServiceBase
from jwoc.validation import coerce_form, validate


class MenteesService(ServiceBase):
    """Mentee registration API operations."""

    async def register(self, form: FormInput | Mapping[str, Any]) -> RegistrationReceipt:
        """Submit one registration; any 2xx is returned, the caller decides on 201."""

        result = validate(form)
        if not result.ok:
            raise FormValidationError(errors=result.errors)

        data = await self._client._request_json("POST", REGISTER_PATH, json_data=coerce_form(form).to_payload())
        if not data.has_body:
            raise RequestError("registration response had no body")
        try:
            receipt = RegistrationReceipt.model_validate(data.payload)
        except ValidationError as exc:
            raise RequestError("unexpected registration response") from exc
        receipt.status_code = data.status_code
        return receipt
