"""Transport abstractions."""

from __future__ import annotations

from collections.abc import Mapping
from enum import StrEnum
from typing import Protocol


class HttpMethod(StrEnum):
    GET = "GET"
    POST = "POST"
    DELETE = "DELETE"


class Transport(Protocol):
    """Protocol for performing the network call behind a compiled query.

    ``send`` returns the raw response body or raises ``TransportError``.
    """

    def send(self, method: HttpMethod, path: str, params: Mapping[str, object]) -> str: ...
