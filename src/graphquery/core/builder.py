"""FQB — fluent builder for a single Graph API request."""

from __future__ import annotations

from collections.abc import Mapping

from ..exceptions import GraphQueryError
from ..models import Collection, Edge, FieldArg, RootEdge
from .connection import Connection
from .context import get_current_connection


class FQB:
    """Describes one request: a root edge plus optional POST data.

    Mutators return the builder so calls chain::

        FQB("me").fields("id", "name").limit(5).get()

    The connection passed at construction is used for dispatch; without one
    the current context's connection is used.
    """

    def __init__(
        self,
        edge_name: str | None = None,
        fields: FieldArg = (),
        *,
        connection: Connection | None = None,
    ) -> None:
        self.root_edge: RootEdge | None = None
        self.post_data: dict[str, object] = {}
        self._connection = connection
        if edge_name is not None:
            self.root_edge = RootEdge(name=edge_name).add_fields(fields)

    @property
    def connection(self) -> Connection:
        if self._connection is not None:
            return self._connection
        return get_current_connection()

    def object(self, edge_name: str, fields: FieldArg = ()) -> FQB:
        return type(self)(edge_name, fields, connection=self._connection)

    def edge(self, edge_name: str, fields: FieldArg = ()) -> Edge:
        return Edge(name=edge_name).add_fields(fields)

    def fields(self, *fields: FieldArg) -> FQB:
        self.require_root_edge().add_fields(*fields)
        return self

    def limit(self, limit: int) -> FQB:
        self.require_root_edge().set_limit(limit)
        return self

    def with_data(self, data: Mapping[str, object]) -> FQB:
        """Replace the POST body. Earlier data is discarded, not merged."""
        self.post_data = dict(data)
        return self

    def get(self, *fields: FieldArg) -> Collection:
        root_edge = self.require_root_edge()
        root_edge.add_fields(*fields)
        return self.connection.get(root_edge)

    def post(self) -> Collection:
        return self.connection.post(self.require_root_edge(), self.post_data)

    def delete(self) -> Collection:
        return self.connection.delete(self.require_root_edge())

    def get_query_url(self) -> str:
        return self.require_root_edge().compile_edge()

    def require_root_edge(self) -> RootEdge:
        if self.root_edge is None:
            raise GraphQueryError("No root edge set. Use object() to choose one first.")
        return self.root_edge

    def __str__(self) -> str:
        return self.get_query_url()
