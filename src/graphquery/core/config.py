"""Configuration for a Connection instance."""

from __future__ import annotations

import os

from pydantic import BaseModel, Field

DEFAULT_BASE_URL = "https://graph.facebook.com"
DEFAULT_GRAPH_VERSION = "v19.0"


class ConnectionConfig(BaseModel):
    """Validated configuration for a Connection. Passed via DI at construction."""

    base_url: str = DEFAULT_BASE_URL
    graph_version: str | None = DEFAULT_GRAPH_VERSION
    timeout: float = Field(default=30.0, gt=0)
    verify_ssl: bool = True
    app_id: str | None = None
    app_secret: str | None = None
    access_token: str | None = None

    @property
    def api_url(self) -> str:
        base = self.base_url.rstrip("/")
        if not self.graph_version:
            return base
        return f"{base}/{self.graph_version}"

    @classmethod
    def from_env(cls, prefix: str = "GRAPHQUERY_") -> ConnectionConfig:
        """Build a config from ``<prefix><FIELD>`` environment variables.

        Unset variables keep their defaults. Values are validated as usual,
        so ``GRAPHQUERY_TIMEOUT=abc`` raises ``ValidationError``.
        """
        overrides: dict[str, str] = {}
        for name in cls.model_fields:
            value = os.environ.get(prefix + name.upper())
            if value is not None:
                overrides[name] = value
        return cls.model_validate(overrides)
