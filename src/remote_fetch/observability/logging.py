"""
remote_fetch.observability.logging

Structured logging for the request layer.

Responsibilities:
- Configure `structlog` once for a host process (JSON or console output).
- Provide `get_logger` so library modules never touch configuration themselves.
"""

from __future__ import annotations

import logging
import sys
from typing import Any, Literal

import structlog

from remote_fetch.settings import Settings

LogFormat = Literal["json", "console"]


def configure_logging(*, service_name: str, level: str, fmt: LogFormat = "json") -> None:
    """
    Opt-in: the library only emits events; hosts call this once at startup.

    `fmt="console"` swaps the JSON renderer for structlog's human-readable one,
    which is handy for local runs of a UI client.
    """

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, level.upper(), logging.INFO),
    )

    renderer: Any = (
        structlog.processors.JSONRenderer()
        if fmt == "json"
        else structlog.dev.ConsoleRenderer(colors=False)
    )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            _stamp_service(service_name),
            structlog.processors.dict_tracebacks,
            renderer,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def configure_from_settings(settings: Settings) -> None:
    configure_logging(
        service_name=settings.service_name,
        level=settings.log_level,
        fmt=settings.log_format,
    )


def _stamp_service(service_name: str):
    # Explicit `service=` values on an event win over the configured name.
    def processor(_: Any, __: str, event_dict: dict[str, Any]) -> dict[str, Any]:
        event_dict.setdefault("service", service_name)
        return event_dict

    return processor


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(name)


# --- Module Notes -----------------------------------------------------------
# Per-request metadata (request_id/method/url) is bound via contextvars in
# `orchestrator.requests`, so every event emitted while a request runs carries it.
