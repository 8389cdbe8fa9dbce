"""Connection — adapts compiled edges into transport calls."""

from __future__ import annotations

import hashlib
import hmac
import logging
from collections.abc import Mapping
from types import TracebackType

from ..exceptions import GraphQueryBuilderError, TransportError
from ..models import Collection, RootEdge, parse_response
from ..transport import HttpMethod, HttpTransport, Transport
from .config import ConnectionConfig

logger = logging.getLogger(__name__)


class Connection:
    """Owns the credentials and the transport used to reach the Graph API.

    Error-handling contract
    ----------------------
    - Transport failures are always re-raised as ``GraphQueryBuilderError``
      with the original ``TransportError`` chained. Nothing is retried.
    - A success body that is not JSON raises ``ResponseParseError``.
    """

    def __init__(
        self,
        transport: Transport | None = None,
        config: ConnectionConfig | None = None,
    ) -> None:
        self.config = config or ConnectionConfig()
        self.transport: Transport = transport or HttpTransport(self.config)
        self.app_id = self.config.app_id
        self.app_secret = self.config.app_secret
        self.access_token = self.config.access_token

    def __enter__(self) -> Connection:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def close(self) -> None:
        """Close the transport if it holds resources, e.g. an httpx connection pool."""
        close = getattr(self.transport, "close", None)
        if close is not None:
            close()

    def set_app_credentials(self, app_id: str, app_secret: str) -> None:
        self.app_id = app_id
        self.app_secret = app_secret

    def set_access_token(self, access_token: str) -> None:
        self.access_token = access_token

    def get(self, edge: RootEdge) -> Collection:
        return self._dispatch(HttpMethod.GET, edge)

    def post(self, edge: RootEdge, data: Mapping[str, object] | None = None) -> Collection:
        return self._dispatch(HttpMethod.POST, edge, data)

    def delete(self, edge: RootEdge) -> Collection:
        return self._dispatch(HttpMethod.DELETE, edge)

    def _dispatch(
        self,
        method: HttpMethod,
        edge: RootEdge,
        data: Mapping[str, object] | None = None,
    ) -> Collection:
        path = edge.compile_edge()
        params: dict[str, object] = dict(data or {})
        params.update(self._auth_params())
        logger.debug("Dispatching %s %s", method, path)
        try:
            raw = self.transport.send(method, path, params)
        except TransportError as exc:
            logger.warning("%s %s failed with code %s: %s", method, path, exc.code, exc.message)
            raise GraphQueryBuilderError.from_transport_error(exc) from exc
        return parse_response(raw)

    def _resolve_token(self) -> str | None:
        if self.access_token:
            return self.access_token
        if self.app_id and self.app_secret:
            return f"{self.app_id}|{self.app_secret}"
        return None

    def _auth_params(self) -> dict[str, str]:
        token = self._resolve_token()
        if token is None:
            return {}
        params = {"access_token": token}
        if self.app_secret:
            params["appsecret_proof"] = appsecret_proof(token, self.app_secret)
        return params


def appsecret_proof(access_token: str, app_secret: str) -> str:
    """HMAC-SHA256 of the access token keyed by the app secret, hex encoded."""
    return hmac.new(
        app_secret.encode("utf-8"),
        access_token.encode("utf-8"),
        hashlib.sha256,
    ).hexdigest()
