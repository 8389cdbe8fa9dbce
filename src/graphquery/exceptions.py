"""Public exception types for graphquery."""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .models.response import Collection

_PERMISSION_PATTERN = re.compile(r"\(#[0-9]+\) Requires extended permission: (.+)")

_SUMMARY_BY_CODE: dict[int, str] = {
    # login required
    0: "Login required.",
    102: "Login required.",
    458: "Login required.",
    460: "Login required.",
    463: "Login required.",
    467: "Login required.",
    # downtime on the Graph side
    1: "Downtime. Try again later.",
    2: "Downtime. Try again later.",
    4: "Downtime. Try again later.",
    17: "Downtime. Try again later.",
    341: "Downtime. Try again later.",
    506: "Duplicate post. Change and try again.",
    459: "User issue on Facebook.",
    464: "User issue on Facebook.",
}


class GraphQueryError(Exception):
    """Base class for all graphquery exceptions."""


class ResponseParseError(GraphQueryError):
    """Raised when a response body cannot be parsed as JSON."""


class TransportError(GraphQueryError):
    """Raised by a transport when a request fails.

    ``response`` is the parsed error body when one was available and
    ``error_type`` the category the API reported (e.g. ``OAuthException``).
    """

    def __init__(
        self,
        message: str,
        code: int = 0,
        *,
        response: Mapping[str, object] | None = None,
        error_type: str | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.response = response
        self.error_type = error_type


class GraphQueryBuilderError(GraphQueryError):
    """A failed Graph request, classified into something a caller can act on.

    Catch this to show ``error_summary()`` to a user instead of inspecting
    raw API codes. ``detect_required_permissions()`` pulls the missing
    permission out of "Requires extended permission" messages.
    """

    def __init__(
        self,
        message: str,
        code: int = 0,
        *,
        response: Collection | None = None,
        error_type: str | None = None,
    ) -> None:
        super().__init__(message)
        self._message = message
        self._code = code
        self._response = response
        self._error_type = error_type

    @property
    def message(self) -> str:
        return self._message

    @property
    def code(self) -> int:
        return self._code

    @property
    def response(self) -> Collection | None:
        """The raw error body, when the API sent one."""
        return self._response

    @property
    def error_type(self) -> str | None:
        """Error category reported by the API, e.g. ``OAuthException``."""
        return self._error_type

    @classmethod
    def from_transport_error(cls, exc: TransportError) -> GraphQueryBuilderError:
        from .models.response import Collection

        response = Collection(exc.response) if exc.response is not None else None
        return cls(
            f"Error communicating with Facebook: {exc.message}",
            exc.code,
            response=response,
            error_type=exc.error_type,
        )

    def error_summary(self) -> str:
        """Translate the error code into a short readable category."""
        code = self.code
        summary = _SUMMARY_BY_CODE.get(code)
        if summary is not None:
            return summary
        if code == 10 or 200 <= code <= 299:
            return "Extended permission required."
        if self.error_type == "OAuthException":
            return "Login required."
        return "Unknown Error"

    def detect_required_permissions(self) -> list[str]:
        match = _PERMISSION_PATTERN.search(self.message)
        if match is None:
            return []
        return [match.group(1)]
