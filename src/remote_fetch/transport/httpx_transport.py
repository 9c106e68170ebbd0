"""
remote_fetch.transport.httpx_transport

httpx-backed transport.

Responsibilities:
- Issue a `TransportRequest` through a shared `httpx.AsyncClient`.
- Classify failures into `TransportError` kinds (timeout, network, bad_status).
"""

from __future__ import annotations

import httpx

from remote_fetch.errors import TransportError, TransportErrorKind
from remote_fetch.outcome import Err, Ok, Outcome
from remote_fetch.settings import Settings
from remote_fetch.transport.base import RawResponse, TransportRequest


class HttpxTransport:
    """
    The client is injected so hosts control pooling/lifecycle; tests pass an
    `httpx.AsyncClient(transport=httpx.MockTransport(...))`.
    """

    def __init__(self, *, http: httpx.AsyncClient) -> None:
        self._http = http

    @classmethod
    def from_settings(cls, settings: Settings) -> HttpxTransport:
        kwargs: dict[str, object] = {
            "base_url": settings.base_url,
            "headers": {"User-Agent": settings.user_agent},
        }
        if settings.timeout_seconds is not None:
            kwargs["timeout"] = settings.timeout_seconds
        return cls(http=httpx.AsyncClient(**kwargs))

    async def aclose(self) -> None:
        await self._http.aclose()

    async def __call__(self, request: TransportRequest) -> Outcome[RawResponse, TransportError]:
        try:
            r = await self._http.request(
                request.method,
                request.url,
                headers=list(request.headers),
                content=request.body,
            )
        except httpx.TimeoutException as e:
            return Err(self._error(request, "timeout", e))
        except httpx.HTTPError as e:
            return Err(self._error(request, "network", e))

        if not r.is_success:
            return Err(
                TransportError(
                    kind="bad_status",
                    reason=r.reason_phrase or "unexpected status",
                    status=r.status_code,
                    body=r.text,
                    method=request.method,
                    url=request.url,
                )
            )
        return Ok(RawResponse(status=r.status_code, body=r.text, headers=dict(r.headers)))

    @staticmethod
    def _error(request: TransportRequest, kind: TransportErrorKind, e: Exception) -> TransportError:
        return TransportError(
            kind=kind,
            reason=str(e) or type(e).__name__,
            method=request.method,
            url=request.url,
        )


# --- Module Notes -----------------------------------------------------------
# Redirect handling and TLS follow the client's configuration; this module only
# classifies the result.
