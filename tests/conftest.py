from __future__ import annotations

import pytest

import graphquery
from graphquery.core import Connection
from graphquery.transport import MemoryTransport


def reset_graphquery_connection() -> None:
    """Reset the context connection between tests."""
    graphquery._reset_default_connection()


@pytest.fixture(autouse=True)
def _reset_connection() -> None:
    reset_graphquery_connection()


@pytest.fixture
def memory_transport() -> MemoryTransport:
    return MemoryTransport()


@pytest.fixture
def connection(memory_transport: MemoryTransport) -> Connection:
    return Connection(transport=memory_transport)
