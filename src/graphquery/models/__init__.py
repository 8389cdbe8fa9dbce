"""Data models for query descriptions and responses."""

from .edge import Edge, FieldArg, RootEdge, normalize_fields
from .response import Collection, parse_response

__all__ = [
    "Collection",
    "Edge",
    "FieldArg",
    "RootEdge",
    "normalize_fields",
    "parse_response",
]
