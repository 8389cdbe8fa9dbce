"""graphquery — fluent query builder for the Facebook Graph API.

Convenience API (delegates to the current context's Connection):
    graphquery.set_access_token(...)  -> credentials for every request
    graphquery.fqb("me", ["id"])      -> start a request builder
    graphquery.edge("photos", [...])  -> nested edge for field expansion

DI API (construct your own Connection):
    from graphquery.core import FQB, Connection, ConnectionConfig
    connection = Connection(config=ConnectionConfig(access_token="..."))
    FQB("me", connection=connection).fields("id", "name").get()
"""

from __future__ import annotations

from .core import FQB, Connection, ConnectionConfig, use_connection
from .core.context import clear_context, get_current_connection, set_default_connection
from .exceptions import GraphQueryBuilderError, GraphQueryError, TransportError
from .models import Collection, Edge, FieldArg, RootEdge


def set_app_credentials(app_id: str, app_secret: str) -> None:
    get_current_connection().set_app_credentials(app_id, app_secret)


def set_access_token(access_token: str) -> None:
    get_current_connection().set_access_token(access_token)


def get_connection() -> Connection:
    return get_current_connection()


def set_connection(connection: Connection) -> None:
    """Replace the shared default connection."""
    set_default_connection(connection)


def fqb(edge_name: str, fields: FieldArg = ()) -> FQB:
    """Start a request builder that dispatches through the current connection."""
    return FQB(edge_name, fields)


def edge(edge_name: str, fields: FieldArg = ()) -> Edge:
    return Edge(name=edge_name).add_fields(fields)


def _reset_default_connection() -> None:
    """Reset the default and scoped connections. Used by test fixtures."""
    clear_context()


__all__ = [
    "FQB",
    "Collection",
    "Connection",
    "ConnectionConfig",
    "Edge",
    "GraphQueryBuilderError",
    "GraphQueryError",
    "RootEdge",
    "TransportError",
    "edge",
    "fqb",
    "get_connection",
    "set_access_token",
    "set_app_credentials",
    "set_connection",
    "use_connection",
]
