"""
tests.test_settings

Configuration and logging wiring.
"""

from __future__ import annotations

import httpx
import pytest
import structlog
from pydantic import ValidationError

from remote_fetch.observability.logging import configure_from_settings, configure_logging
from remote_fetch.orchestrator.requests import RequestOrchestrator
from remote_fetch.settings import Settings
from remote_fetch.transport.httpx_transport import HttpxTransport


def test_defaults() -> None:
    s = Settings()
    assert s.timeout_seconds is None
    assert s.default_headers == {}


def test_env_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("REMOTE_FETCH_TIMEOUT_SECONDS", "2.5")
    monkeypatch.setenv("REMOTE_FETCH_BASE_URL", "https://api.example.com")
    s = Settings()
    assert s.timeout_seconds == 2.5
    assert s.base_url == "https://api.example.com"


@pytest.mark.parametrize("name", ["cache-control", "Content-Type"])
def test_policy_default_headers_are_rejected(name: str) -> None:
    with pytest.raises(ValidationError):
        Settings(default_headers={name: "x"})


@pytest.mark.asyncio
async def test_transport_from_settings() -> None:
    transport = HttpxTransport.from_settings(
        Settings(base_url="https://api.example.com", timeout_seconds=3, user_agent="ua/1")
    )
    try:
        http: httpx.AsyncClient = transport._http
        assert str(http.base_url) == "https://api.example.com/"
        assert http.timeout.read == 3
        assert http.headers["User-Agent"] == "ua/1"
    finally:
        await transport.aclose()


@pytest.mark.asyncio
async def test_transport_keeps_httpx_default_timeout() -> None:
    transport = HttpxTransport.from_settings(Settings())
    try:
        assert transport._http.timeout == httpx.Timeout(5.0)
    finally:
        await transport.aclose()


@pytest.mark.asyncio
async def test_orchestrator_from_settings_closes_its_client() -> None:
    async with RequestOrchestrator.from_settings(
        Settings(default_headers={"X-App": "a"})
    ) as orchestrator:
        transport = orchestrator._transport
        assert isinstance(transport, HttpxTransport)
        assert orchestrator._default_headers == {"X-App": "a"}
        assert not transport._http.is_closed

    assert transport._http.is_closed


def test_configure_logging_installs_json_pipeline() -> None:
    try:
        configure_logging(service_name="svc", level="debug")
        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.processors.JSONRenderer)
        # The service processor stamps every event without overriding explicit values.
        stamp = processors[4]
        assert stamp(None, "info", {"event": "x"})["service"] == "svc"
        assert stamp(None, "info", {"service": "other"})["service"] == "other"
    finally:
        structlog.reset_defaults()


def test_console_format_from_settings() -> None:
    try:
        configure_from_settings(Settings(log_format="console", service_name="ui"))
        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.dev.ConsoleRenderer)
    finally:
        structlog.reset_defaults()
