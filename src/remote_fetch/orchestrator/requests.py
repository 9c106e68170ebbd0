"""
remote_fetch.orchestrator.requests

JSON request orchestration (task form).

Responsibilities:
- Build one request per call (method, headers, JSON body) and hand it to a transport.
- Decode successful bodies with a caller-supplied decoder.
- Fold every outcome (network, status, encode, decode) into a settled `RemoteState`.

Each public coroutine resolves exactly once to `Failed` or `Succeeded`; failures are
returned as data and never raised to the awaiting caller.
"""

from __future__ import annotations

import dataclasses
import uuid
from collections.abc import Mapping
from typing import Any, Final, Literal, TypeVar

import structlog
from pydantic import TypeAdapter

from remote_fetch.decoders import Decoder
from remote_fetch.errors import DecodeError, FetchError, TransportError, describe
from remote_fetch.observability.logging import get_logger
from remote_fetch.orchestrator.headers import CachePolicy, build_headers
from remote_fetch.outcome import Err, Ok, Outcome
from remote_fetch.settings import Settings, get_settings
from remote_fetch.state.remote import Failed, RemoteState, Succeeded, from_outcome
from remote_fetch.transport.base import RawResponse, Transport, TransportRequest
from remote_fetch.transport.httpx_transport import HttpxTransport

T = TypeVar("T")

Method = Literal["GET", "POST", "PUT", "PATCH", "DELETE"]
METHODS: Final[frozenset[str]] = frozenset({"GET", "POST", "PUT", "PATCH", "DELETE"})

log = get_logger(__name__)

_json: TypeAdapter[Any] = TypeAdapter(Any)


class _NoBody:
    def __repr__(self) -> str:
        return "NO_BODY"


# Distinguishes "no body" from a JSON `null` body.
NO_BODY: Final = _NoBody()


def check_method(method: str) -> None:
    if method not in METHODS:
        raise ValueError(f"unsupported HTTP method: {method!r}")


class RequestOrchestrator:
    """
    Stateless apart from its collaborators: concurrent calls share nothing, and no
    ordering, deduplication or cancellation is applied between them.
    """

    def __init__(
        self,
        *,
        transport: Transport,
        default_headers: Mapping[str, str] | None = None,
        owns_transport: bool = False,
    ) -> None:
        self._transport = transport
        self._default_headers = dict(default_headers or {})
        # Only transports built here (from_settings) are closed by `aclose`.
        self._owns_transport = owns_transport

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> RequestOrchestrator:
        settings = settings or get_settings()
        return cls(
            transport=HttpxTransport.from_settings(settings),
            default_headers=settings.default_headers,
            owns_transport=True,
        )

    async def aclose(self) -> None:
        if not self._owns_transport:
            return
        close = getattr(self._transport, "aclose", None)
        if close is not None:
            await close()

    async def __aenter__(self) -> RequestOrchestrator:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    # --- verbs ---------------------------------------------------------------

    async def get(self, url: str, decoder: Decoder[T]) -> RemoteState[T, FetchError]:
        # The default GET is the no-cache one.
        return await self.request("GET", url, decoder, cache=CachePolicy.NO_CACHE)

    async def get_with_cache(self, url: str, decoder: Decoder[T]) -> RemoteState[T, FetchError]:
        """
        GET without the no-cache header. Cached API reads can surface stale data,
        so prefer `get` unless the resource is known to be cache-safe.
        """

        return await self.request("GET", url, decoder, cache=CachePolicy.ALLOW_CACHE)

    async def post(self, url: str, body: Any, decoder: Decoder[T]) -> RemoteState[T, FetchError]:
        return await self.request("POST", url, decoder, body=body)

    async def put(self, url: str, body: Any, decoder: Decoder[T]) -> RemoteState[T, FetchError]:
        return await self.request("PUT", url, decoder, body=body)

    async def patch(self, url: str, body: Any, decoder: Decoder[T]) -> RemoteState[T, FetchError]:
        return await self.request("PATCH", url, decoder, body=body)

    async def delete(self, url: str, body: Any, decoder: Decoder[T]) -> RemoteState[T, FetchError]:
        return await self.request("DELETE", url, decoder, body=body)

    # --- shared task ---------------------------------------------------------

    async def request(
        self,
        method: Method,
        url: str,
        decoder: Decoder[T],
        *,
        body: Any = NO_BODY,
        cache: CachePolicy = CachePolicy.ALLOW_CACHE,
    ) -> RemoteState[T, FetchError]:
        check_method(method)

        request_id = uuid.uuid4().hex
        with structlog.contextvars.bound_contextvars(
            request_id=request_id, method=method, url=url
        ):
            outcome = await self._fetch(method, url, decoder, body=body, cache=cache)
            state = from_outcome(outcome)
            self._log_settled(state)
            return state

    async def _fetch(
        self,
        method: str,
        url: str,
        decoder: Decoder[T],
        *,
        body: Any,
        cache: CachePolicy,
    ) -> Outcome[T, FetchError]:
        with_body = body is not NO_BODY
        payload: str | None = None
        if with_body:
            try:
                payload = _json.dump_json(body).decode()
            except ValueError as e:
                # Covers pydantic's serialization error for unknown types.
                return Err(
                    TransportError(kind="encode", reason=str(e), method=method, url=url)
                )

        req = TransportRequest(
            method=method,
            url=url,
            headers=build_headers(cache, with_body=with_body, defaults=self._default_headers),
            body=payload,
        )

        try:
            sent = await self._transport(req)
        except Exception as e:
            log.exception("request.transport_crashed")
            return Err(
                TransportError(
                    kind="network",
                    reason=str(e) or type(e).__name__,
                    method=method,
                    url=url,
                )
            )

        match sent:
            case Err(error=error):
                return Err(error)
            case Ok(value=raw):
                return self._decode(decoder, raw)
            case _:
                log.error("request.transport_bad_result", result=repr(sent))
                return Err(
                    TransportError(
                        kind="network",
                        reason=f"transport returned {type(sent).__name__}",
                        method=method,
                        url=url,
                    )
                )

    @staticmethod
    def _decode(decoder: Decoder[T], raw: RawResponse) -> Outcome[T, FetchError]:
        try:
            decoded = decoder(raw.body)
        except Exception as e:
            log.exception("request.decoder_crashed")
            return Err(
                DecodeError(reason=str(e) or type(e).__name__, body=raw.body, status=raw.status)
            )

        match decoded:
            case Ok():
                return decoded
            case Err(error=DecodeError(status=None) as error):
                return Err(dataclasses.replace(error, status=raw.status))
            case Err():
                return decoded
            case _:
                return Err(
                    DecodeError(
                        reason=f"decoder returned {type(decoded).__name__}",
                        body=raw.body,
                        status=raw.status,
                    )
                )

    @staticmethod
    def _log_settled(state: RemoteState[Any, FetchError]) -> None:
        match state:
            case Succeeded():
                log.info("request.settled", outcome="succeeded")
            case Failed(error=TransportError(kind=kind, status=status) as error):
                log.warning(
                    "request.failed",
                    error_type="transport",
                    kind=kind,
                    status=status,
                    detail=describe(error),
                )
            case Failed(error=DecodeError() as error):
                log.warning("request.failed", error_type="decode", detail=describe(error))
            case _:
                log.warning("request.failed", error=repr(state))


# --- Module Notes -----------------------------------------------------------
# asyncio.CancelledError is not caught: it propagates to hosts that wrap
# these coroutines in their own timeouts or task groups.
