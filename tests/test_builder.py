from __future__ import annotations

import pytest

from graphquery.core import FQB, Connection, use_connection
from graphquery.exceptions import GraphQueryBuilderError, GraphQueryError, TransportError
from graphquery.models import Edge, RootEdge
from graphquery.transport import HttpMethod, MemoryTransport


def test_constructor_wraps_root_edge() -> None:
    builder = FQB("me", ["id", "name"])
    assert isinstance(builder.root_edge, RootEdge)
    assert builder.get_query_url() == "/me?fields=id,name"
    assert str(builder) == "/me?fields=id,name"


def test_constructor_without_name_has_no_root_edge() -> None:
    builder = FQB()
    assert builder.root_edge is None
    with pytest.raises(GraphQueryError, match="No root edge set"):
        builder.get_query_url()


def test_fields_and_limit_chain() -> None:
    builder = FQB("me")
    assert builder.fields("id", "name").limit(5) is builder
    assert builder.get_query_url() == "/me?limit=5&fields=id,name"


def test_fields_accepts_sequence_or_varargs() -> None:
    assert FQB("me").fields(["a", "b"]).root_edge == FQB("me").fields("a", "b").root_edge


def test_object_returns_new_builder_with_same_connection(connection: Connection) -> None:
    builder = FQB(connection=connection)
    me = builder.object("me", ["id"])
    assert me is not builder
    assert me.connection is connection
    assert me.get_query_url() == "/me?fields=id"


def test_edge_factory_builds_nested_edge() -> None:
    builder = FQB("me")
    photos = builder.edge("photos", ["id", "source"])
    assert isinstance(photos, Edge)
    assert not isinstance(photos, RootEdge)
    builder.fields("name", photos)
    assert builder.get_query_url() == "/me?fields=name,photos{id,source}"


def test_with_data_replaces_post_body() -> None:
    builder = FQB("me/feed").with_data({"message": "hi", "link": "https://example.com"})
    builder.with_data({"message": "bye"})
    assert builder.post_data == {"message": "bye"}


def test_get_merges_fields_and_dispatches(
    connection: Connection, memory_transport: MemoryTransport
) -> None:
    memory_transport.add_reply(HttpMethod.GET, "/me?fields=id,name", '{"id": "1", "name": "Ada"}')

    response = FQB("me", ["id"], connection=connection).get("name")

    assert response["name"] == "Ada"
    assert memory_transport.requests[0].method == HttpMethod.GET
    assert memory_transport.requests[0].path == "/me?fields=id,name"


def test_post_sends_post_data(connection: Connection, memory_transport: MemoryTransport) -> None:
    memory_transport.add_reply(HttpMethod.POST, "/me/feed", '{"id": "1_2"}')

    response = FQB("me/feed", connection=connection).with_data({"message": "hello"}).post()

    assert response["id"] == "1_2"
    assert memory_transport.requests[0].params == {"message": "hello"}


def test_delete_dispatches_delete(
    connection: Connection, memory_transport: MemoryTransport
) -> None:
    memory_transport.add_reply(HttpMethod.DELETE, "/1_2", "true")

    response = FQB("1_2", connection=connection).delete()

    assert response["success"] is True
    assert memory_transport.requests[0].method == HttpMethod.DELETE


def test_failed_dispatch_raises_classified_error(
    connection: Connection, memory_transport: MemoryTransport
) -> None:
    memory_transport.add_reply(
        HttpMethod.POST,
        "/me/feed",
        TransportError("Duplicate status message", 506, error_type="OAuthException"),
    )

    with pytest.raises(GraphQueryBuilderError) as excinfo:
        FQB("me/feed", connection=connection).with_data({"message": "again"}).post()

    assert excinfo.value.error_summary() == "Duplicate post. Change and try again."
    assert isinstance(excinfo.value.__cause__, TransportError)


def test_builder_without_connection_uses_context(memory_transport: MemoryTransport) -> None:
    memory_transport.add_reply(HttpMethod.GET, "/me", '{"id": "1"}')
    scoped = Connection(transport=memory_transport)

    with use_connection(scoped):
        builder = FQB("me")
        assert builder.connection is scoped
        assert builder.get()["id"] == "1"
