"""
remote_fetch.transport

Transport boundary used by the orchestrator.

Responsibilities:
- Describe the request/response shapes exchanged with a transport.
- Provide the default httpx-backed transport.
"""

from remote_fetch.transport.base import RawResponse, Transport, TransportRequest
from remote_fetch.transport.httpx_transport import HttpxTransport

__all__ = ["HttpxTransport", "RawResponse", "Transport", "TransportRequest"]


# --- Module Notes -----------------------------------------------------------
# The orchestrator depends on the `Transport` protocol, not on httpx directly.
