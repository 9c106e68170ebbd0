"""
tests.conftest

Shared fixtures for orchestrator tests.

Responsibilities:
- Build a `RequestOrchestrator` over an `httpx.MockTransport` handler.
- Record every request the handler sees.
"""

from __future__ import annotations

from collections.abc import Callable

import httpx
import pytest

from remote_fetch.orchestrator.requests import RequestOrchestrator
from remote_fetch.transport.httpx_transport import HttpxTransport

Handler = Callable[[httpx.Request], httpx.Response]


@pytest.fixture
def seen() -> list[httpx.Request]:
    return []


@pytest.fixture
def make_orchestrator(seen: list[httpx.Request]):
    def build(handler: Handler, **kwargs) -> RequestOrchestrator:
        def recording(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return handler(request)

        http = httpx.AsyncClient(
            transport=httpx.MockTransport(recording), base_url="http://api.test"
        )
        return RequestOrchestrator(transport=HttpxTransport(http=http), **kwargs)

    return build
