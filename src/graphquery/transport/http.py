"""httpx-backed transport for the Graph API."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from types import TracebackType

import httpx

from ..core.config import ConnectionConfig
from ..exceptions import TransportError
from .base import HttpMethod

logger = logging.getLogger(__name__)


class HttpTransport:
    """Sends compiled paths to the Graph API over HTTP.

    GET and DELETE carry ``params`` in the query string, merged with any
    query the compiled path already has. POST sends them as a form body.
    """

    def __init__(
        self,
        config: ConnectionConfig | None = None,
        client: httpx.Client | None = None,
    ) -> None:
        self.config = config or ConnectionConfig()
        self.client = client or httpx.Client(
            base_url=self.config.api_url,
            timeout=httpx.Timeout(self.config.timeout),
            verify=self.config.verify_ssl,
        )

    def __enter__(self) -> HttpTransport:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def close(self) -> None:
        self.client.close()

    def send(self, method: HttpMethod, path: str, params: Mapping[str, object]) -> str:
        logger.debug("Sending %s %s", method, path)
        try:
            if method == HttpMethod.POST:
                response = self.client.request(method.value, path, data=_encode_params(params))
            else:
                response = self.client.request(method.value, path, params=_encode_params(params))
        except httpx.RequestError as exc:
            raise TransportError(f"Request error: {exc}", -1) from exc

        if response.status_code >= 400:
            raise _error_from_response(response)
        return response.text


def _encode_params(params: Mapping[str, object]) -> dict[str, str]:
    return {key: _encode_value(value) for key, value in params.items()}


def _encode_value(value: object) -> str:
    if isinstance(value, (dict, list)):
        return json.dumps(value)
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _error_from_response(response: httpx.Response) -> TransportError:
    """Build a TransportError from a Graph error body, falling back to HTTP status."""
    try:
        body = response.json()
    except ValueError:
        body = None

    error = body.get("error") if isinstance(body, dict) else None
    if not isinstance(error, dict):
        return TransportError(
            response.text or f"HTTP {response.status_code}",
            response.status_code,
            response=body if isinstance(body, dict) else None,
        )

    code = error.get("code")
    return TransportError(
        str(error.get("message") or response.text),
        code if isinstance(code, int) else response.status_code,
        response=body,
        error_type=error.get("type"),
    )
