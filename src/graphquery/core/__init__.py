"""Core request-building runtime."""

from .builder import FQB
from .config import ConnectionConfig
from .connection import Connection, appsecret_proof
from .context import (
    clear_context,
    get_current_connection,
    get_default_connection,
    push_current_connection,
    reset_current_connection,
    set_default_connection,
    use_connection,
)

__all__ = [
    "FQB",
    "Connection",
    "ConnectionConfig",
    "appsecret_proof",
    "clear_context",
    "get_current_connection",
    "get_default_connection",
    "push_current_connection",
    "reset_current_connection",
    "set_default_connection",
    "use_connection",
]
