"""Context propagation for the active Connection.

Builders without an injected connection use the connection pushed onto the
current context, falling back to a module-level default that is created
lazily on first use and shared by every thread.
"""

from __future__ import annotations

import contextvars
from collections.abc import Iterator
from contextlib import contextmanager

from .config import ConnectionConfig
from .connection import Connection

_default_connection: Connection | None = None

_current_connection: contextvars.ContextVar[Connection | None] = contextvars.ContextVar(
    "graphquery_current_connection",
    default=None,
)


def get_default_connection() -> Connection:
    global _default_connection
    if _default_connection is None:
        _default_connection = Connection(config=ConnectionConfig.from_env())
    return _default_connection


def set_default_connection(connection: Connection | None) -> None:
    global _default_connection
    _default_connection = connection


def get_current_connection() -> Connection:
    connection = _current_connection.get()
    if connection is None:
        return get_default_connection()
    return connection


def push_current_connection(connection: Connection) -> contextvars.Token[Connection | None]:
    return _current_connection.set(connection)


def reset_current_connection(token: contextvars.Token[Connection | None]) -> None:
    _current_connection.reset(token)


def clear_context() -> None:
    """Drop the scoped connection and close and drop the module-level default."""
    global _default_connection
    _current_connection.set(None)
    if _default_connection is not None:
        _default_connection.close()
    _default_connection = None


@contextmanager
def use_connection(connection: Connection) -> Iterator[Connection]:
    """Make ``connection`` the current one for the duration of the block."""
    token = push_current_connection(connection)
    try:
        yield connection
    finally:
        reset_current_connection(token)
