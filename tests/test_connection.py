from __future__ import annotations

import hashlib
import hmac
import logging

import httpx
import pytest

from graphquery.core import (
    Connection,
    ConnectionConfig,
    appsecret_proof,
    clear_context,
    get_default_connection,
)
from graphquery.exceptions import GraphQueryBuilderError, ResponseParseError, TransportError
from graphquery.models import RootEdge
from graphquery.transport import HttpMethod, HttpTransport, MemoryTransport


def test_default_transport_is_http() -> None:
    connection = Connection(config=ConnectionConfig(graph_version="v18.0"))
    assert isinstance(connection.transport, HttpTransport)
    assert str(connection.transport.client.base_url) == "https://graph.facebook.com/v18.0/"


def test_no_credentials_send_no_auth_params(
    connection: Connection, memory_transport: MemoryTransport
) -> None:
    memory_transport.add_reply(HttpMethod.GET, "/me", "{}")
    connection.get(RootEdge(name="me"))
    assert memory_transport.requests[0].params == {}


def test_access_token_is_sent(connection: Connection, memory_transport: MemoryTransport) -> None:
    memory_transport.add_reply(HttpMethod.GET, "/me", "{}")
    connection.set_access_token("user-token")

    connection.get(RootEdge(name="me"))

    assert memory_transport.requests[0].params == {"access_token": "user-token"}


def test_app_credentials_build_app_token_and_proof(
    connection: Connection, memory_transport: MemoryTransport
) -> None:
    memory_transport.add_reply(HttpMethod.GET, "/app", "{}")
    connection.set_app_credentials("123", "secret")

    connection.get(RootEdge(name="app"))

    params = memory_transport.requests[0].params
    assert params["access_token"] == "123|secret"
    assert params["appsecret_proof"] == appsecret_proof("123|secret", "secret")


def test_access_token_wins_over_app_token(
    connection: Connection, memory_transport: MemoryTransport
) -> None:
    memory_transport.add_reply(HttpMethod.GET, "/me", "{}")
    connection.set_app_credentials("123", "secret")
    connection.set_access_token("user-token")

    connection.get(RootEdge(name="me"))

    assert memory_transport.requests[0].params["access_token"] == "user-token"


def test_credentials_come_from_config(memory_transport: MemoryTransport) -> None:
    config = ConnectionConfig(access_token="configured")
    connection = Connection(transport=memory_transport, config=config)
    assert connection.access_token == "configured"


def test_appsecret_proof_is_hmac_sha256() -> None:
    expected = hmac.new(b"secret", b"token", hashlib.sha256).hexdigest()
    assert appsecret_proof("token", "secret") == expected


def test_post_merges_data_with_auth(
    connection: Connection, memory_transport: MemoryTransport
) -> None:
    memory_transport.add_reply(HttpMethod.POST, "/me/feed", '{"id": "1"}')
    connection.set_access_token("t")

    connection.post(RootEdge(name="me/feed"), {"message": "hi"})

    assert memory_transport.requests[0].params == {"message": "hi", "access_token": "t"}


def test_transport_failure_is_reclassified_and_logged(
    connection: Connection,
    memory_transport: MemoryTransport,
    caplog: pytest.LogCaptureFixture,
) -> None:
    failure = TransportError(
        "(#200) Requires extended permission: publish_actions",
        200,
        response={"error": {"code": 200}},
        error_type="OAuthException",
    )
    memory_transport.add_reply(HttpMethod.POST, "/me/feed", failure)

    with caplog.at_level(logging.WARNING, logger="graphquery.core.connection"):
        with pytest.raises(GraphQueryBuilderError) as excinfo:
            connection.post(RootEdge(name="me/feed"), {"message": "hi"})

    error = excinfo.value
    assert error.__cause__ is failure
    assert error.code == 200
    assert error.error_type == "OAuthException"
    assert error.response is not None
    assert error.response["error"]["code"] == 200
    assert error.detect_required_permissions() == ["publish_actions"]
    assert "failed with code 200" in caplog.text


def test_unknown_path_in_memory_transport_is_oauth_error(connection: Connection) -> None:
    with pytest.raises(GraphQueryBuilderError) as excinfo:
        connection.get(RootEdge(name="nowhere"))
    assert excinfo.value.code == 2500
    assert excinfo.value.error_summary() == "Login required."


def test_invalid_success_body_raises_parse_error(
    connection: Connection, memory_transport: MemoryTransport
) -> None:
    memory_transport.add_reply(HttpMethod.GET, "/me", "<html>")
    with pytest.raises(ResponseParseError, match="Failed to parse response JSON"):
        connection.get(RootEdge(name="me"))


def test_context_manager_closes_http_transport() -> None:
    client = httpx.Client(transport=httpx.MockTransport(lambda request: httpx.Response(200)))
    transport = HttpTransport(client=client)

    with Connection(transport=transport) as connection:
        assert connection.transport is transport
        assert not client.is_closed

    assert client.is_closed


def test_close_without_closeable_transport_is_a_no_op(connection: Connection) -> None:
    connection.close()
    connection.close()


def test_clear_context_closes_default_connection() -> None:
    default = get_default_connection()
    assert isinstance(default.transport, HttpTransport)

    clear_context()

    assert default.transport.client.is_closed
