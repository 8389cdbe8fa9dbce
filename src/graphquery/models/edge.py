"""Edge models and the request-path compiler."""

from __future__ import annotations

from collections.abc import Sequence
from typing import ClassVar, Self, Union

from pydantic import BaseModel, ConfigDict, Field

FieldArg = Union[str, "Edge", Sequence[Union[str, "Edge"]]]


def normalize_fields(fields: tuple[FieldArg, ...]) -> list[str | Edge]:
    """Flatten ``("a", "b")`` and ``(["a", "b"],)`` into the same list.

    A lone string is a single field, not a sequence of characters.
    """
    if len(fields) == 1 and isinstance(fields[0], (list, tuple)):
        values: Sequence[object] = fields[0]
    else:
        values = fields
    normalized: list[str | Edge] = []
    for value in values:
        if not isinstance(value, (str, Edge)):
            raise TypeError(f"Fields must be strings or Edge instances, got {type(value).__name__}")
        normalized.append(value)
    return normalized


class Edge(BaseModel):
    """One segment of the requested resource tree.

    Nested edges live in ``fields`` next to plain field names and are
    compiled into a field-expansion selector such as ``photos{id,source}``.
    Field accumulation keeps duplicates.
    """

    model_config = ConfigDict(strict=True, extra="ignore", validate_assignment=True)

    is_root: ClassVar[bool] = False

    name: str = Field(min_length=1)
    fields: list[str | Edge] = Field(default_factory=list)

    def add_fields(self, *fields: FieldArg) -> Self:
        self.fields.extend(normalize_fields(fields))
        return self

    def compile_fields(self) -> list[str]:
        return [
            field.compile_selector() if isinstance(field, Edge) else field for field in self.fields
        ]

    def compile_selector(self) -> str:
        if not self.fields:
            return self.name
        return f"{self.name}{{{','.join(self.compile_fields())}}}"


class RootEdge(Edge):
    """Outermost edge of a request. Owns the pagination limit and the full path."""

    is_root: ClassVar[bool] = True

    limit: int = Field(default=0, ge=0)

    def set_limit(self, limit: int) -> Self:
        """Set the pagination bound. Negative numbers, floats and bools are rejected."""
        self.limit = limit
        return self

    def compile_edge(self) -> str:
        """Compile to ``/<name>?limit=<n>&fields=<f1>,<f2>``.

        The limit segment always precedes the fields segment and either is
        omitted when empty. Names and fields are not percent-encoded.
        """
        compiled_values: list[str] = []
        if self.limit > 0:
            compiled_values.append(f"limit={self.limit}")
        if self.fields:
            compiled_values.append("fields=" + ",".join(self.compile_fields()))

        append = ""
        if compiled_values:
            append = "?" + "&".join(compiled_values)
        return f"/{self.name}{append}"

    def __str__(self) -> str:
        return self.compile_edge()
