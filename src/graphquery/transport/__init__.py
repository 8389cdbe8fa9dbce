"""Transports that carry compiled queries to the Graph API."""

from .base import HttpMethod, Transport
from .http import HttpTransport
from .memory import MemoryTransport, SentRequest

__all__ = ["HttpMethod", "HttpTransport", "MemoryTransport", "SentRequest", "Transport"]
