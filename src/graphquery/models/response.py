"""Read-only accessors over parsed Graph API responses."""

from __future__ import annotations

import json
from collections.abc import Iterator, Mapping

from ..exceptions import ResponseParseError


class Collection(Mapping[str, object]):
    """Dictionary-like view of a JSON object.

    Nested objects are returned as ``Collection`` and lists of objects as
    lists of ``Collection``. There is no mutation API.
    """

    def __init__(self, data: Mapping[str, object] | None = None) -> None:
        self._data: dict[str, object] = dict(data or {})

    def __getitem__(self, key: str) -> object:
        return _wrap(self._data[key])

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"Collection({self._data!r})"

    def to_dict(self) -> dict[str, object]:
        return dict(self._data)


def _wrap(value: object) -> object:
    if isinstance(value, Mapping):
        return Collection(value)
    if isinstance(value, list):
        return [Collection(item) if isinstance(item, Mapping) else item for item in value]
    return value


def parse_response(raw: str | bytes) -> Collection:
    """Parse a raw response body into a ``Collection``.

    Raises ``ResponseParseError`` when the body is not valid JSON.
    """
    if not raw or not raw.strip():
        return Collection()
    try:
        payload = json.loads(raw)
    except ValueError as exc:
        raise ResponseParseError(f"Failed to parse response JSON: {exc}") from exc
    if isinstance(payload, dict):
        return Collection(payload)
    if isinstance(payload, bool):
        return Collection({"success": payload})
    return Collection({"data": payload})
