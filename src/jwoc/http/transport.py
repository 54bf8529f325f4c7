"""HTTP transport for registration backend calls."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

import httpx
import structlog

from jwoc.errors import APIError, RequestError

logger = structlog.get_logger(__name__)


@dataclass(frozen=True, slots=True)
class JsonResponse:
    status_code: int
    payload: dict[str, Any]
    has_body: bool = True


def server_message(payload: Mapping[str, Any]) -> str | None:
    message = payload.get("message")
    if isinstance(message, str) and message.strip():
        return message
    return None


def _decode_object(response: httpx.Response) -> dict[str, Any]:
    if response.status_code == 204 or not response.text.strip():
        return {}
    try:
        decoded = response.json()
    except ValueError as exc:
        raise RequestError("response was not valid JSON") from exc
    if not isinstance(decoded, dict):
        raise RequestError("response payload must be a JSON object")
    return decoded


class RegistrationTransport:
    """Async transport carrying the session cookie to the registration backend.

    Requests are sent exactly once. Connection failures surface as
    :class:`RequestError` and non-2xx responses as :class:`APIError`.
    """

    def __init__(
        self,
        *,
        base_url: str,
        timeout: float,
        verify_tls: bool,
        session_cookie: str | None = None,
        cookie_name: str = "connect.sid",
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self._owns_http_client = http_client is None
        self._client = http_client or httpx.AsyncClient(
            base_url=self.base_url,
            timeout=httpx.Timeout(timeout),
            verify=verify_tls,
            follow_redirects=True,
        )
        if session_cookie:
            self._client.cookies.set(cookie_name, session_cookie)

    @property
    def cookies(self) -> httpx.Cookies:
        return self._client.cookies

    def url_for(self, path: str) -> str:
        return f"{self.base_url}/{path.lstrip('/')}"

    async def aclose(self) -> None:
        if self._owns_http_client:
            await self._client.aclose()

    async def request_json(
        self,
        method: str,
        path: str,
        *,
        json_data: Mapping[str, Any] | None = None,
        extra_headers: Mapping[str, str] | None = None,
    ) -> JsonResponse:
        method_upper = method.upper()
        headers: dict[str, str] = {"Accept": "application/json"}
        if extra_headers:
            headers.update(extra_headers)

        try:
            response = await self._client.request(
                method_upper,
                self.url_for(path),
                json=dict(json_data) if json_data is not None else None,
                headers=headers,
            )
        except httpx.HTTPError as exc:
            logger.warning("request_failed", method=method_upper, path=path, error=str(exc))
            raise RequestError(f"request failed: {exc}") from exc

        logger.debug("response_received", method=method_upper, path=path, status_code=response.status_code)

        if response.status_code >= 400:
            try:
                payload = _decode_object(response)
            except RequestError:
                payload = {}
            detail = server_message(payload)
            raise APIError(
                status_code=response.status_code,
                message=detail or "request failed",
                body=response.text.strip() or None,
                server_message=detail,
            )

        return JsonResponse(
            status_code=response.status_code,
            payload=_decode_object(response),
            has_body=bool(response.text.strip()),
        )
