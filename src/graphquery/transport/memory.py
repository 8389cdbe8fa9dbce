"""In-memory transport."""

from __future__ import annotations

from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict, Field

from ..exceptions import TransportError
from .base import HttpMethod


class SentRequest(BaseModel):
    """A request recorded by ``MemoryTransport``."""

    model_config = ConfigDict(strict=True, extra="ignore")

    method: HttpMethod
    path: str
    params: dict[str, object] = Field(default_factory=dict)


class MemoryTransport:
    """Replies from a table of canned bodies. Good for tests and short-lived scripts.

    A reply is either a raw body string or a ``TransportError`` to raise.
    """

    def __init__(self) -> None:
        self._replies: dict[tuple[HttpMethod, str], str | TransportError] = {}
        self.requests: list[SentRequest] = []

    def add_reply(self, method: HttpMethod, path: str, reply: str | TransportError) -> None:
        self._replies[(method, path)] = reply

    def send(self, method: HttpMethod, path: str, params: Mapping[str, object]) -> str:
        self.requests.append(SentRequest(method=method, path=path, params=dict(params)))
        reply = self._replies.get((method, path))
        if reply is None:
            raise TransportError(
                f"Unknown path components: {path}", 2500, error_type="OAuthException"
            )
        if isinstance(reply, TransportError):
            raise reply
        return reply
