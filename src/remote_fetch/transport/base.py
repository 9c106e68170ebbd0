"""
remote_fetch.transport.base

Transport capability contract.

Responsibilities:
- Define the immutable request description handed to a transport.
- Define the raw response a transport returns on success.
- Define the `Transport` protocol (any async callable with this signature qualifies).
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Protocol

from remote_fetch.errors import TransportError
from remote_fetch.outcome import Outcome

Header = tuple[str, str]


@dataclass(frozen=True, slots=True)
class TransportRequest:
    method: str
    url: str
    headers: tuple[Header, ...] = ()
    # Already JSON-serialized; None for body-less requests.
    body: str | None = None


@dataclass(frozen=True, slots=True)
class RawResponse:
    status: int
    body: str
    headers: Mapping[str, str] = field(default_factory=dict)


class Transport(Protocol):
    """
    Performs one request. Implementations should return `Err(TransportError)` for
    network failures, timeouts and non-2xx statuses; the orchestrator still guards
    against implementations that raise instead.
    """

    async def __call__(self, request: TransportRequest) -> Outcome[RawResponse, TransportError]: ...
