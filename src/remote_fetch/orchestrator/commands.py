"""
remote_fetch.orchestrator.commands

Fire-and-forget request commands (callback form).

Responsibilities:
- Schedule a `RequestOrchestrator` task on the running event loop.
- On settlement, map the state to an application message (tagger) and hand it to
  the host's dispatch function exactly once.
"""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable
from typing import Any, Generic, TypeVar

from remote_fetch.decoders import Decoder
from remote_fetch.errors import FetchError
from remote_fetch.observability.logging import get_logger
from remote_fetch.orchestrator.headers import CachePolicy
from remote_fetch.orchestrator.requests import NO_BODY, Method, RequestOrchestrator, check_method
from remote_fetch.state.remote import RemoteState

T = TypeVar("T")
Msg = TypeVar("Msg")

Tagger = Callable[[RemoteState[T, FetchError]], Msg]
Dispatch = Callable[[Msg], None]

log = get_logger(__name__)


class CommandRunner(Generic[Msg]):
    """
    Command form of the orchestrator.

    `send_*` methods return nothing; their only effect is one `dispatch(tagger(state))`
    call once the request settles (failures included). They must be called while an
    asyncio loop is running.
    """

    def __init__(self, *, orchestrator: RequestOrchestrator, dispatch: Dispatch[Msg]) -> None:
        self._orchestrator = orchestrator
        self._dispatch = dispatch
        # Strong references so scheduled tasks are not garbage-collected mid-flight.
        self._pending: set[asyncio.Task[None]] = set()

    def send_get(self, url: str, decoder: Decoder[T], tagger: Tagger[T, Msg]) -> None:
        self._spawn(lambda: self._orchestrator.get(url, decoder), tagger)

    def send_get_with_cache(self, url: str, decoder: Decoder[T], tagger: Tagger[T, Msg]) -> None:
        self._spawn(lambda: self._orchestrator.get_with_cache(url, decoder), tagger)

    def send_post(self, url: str, body: Any, decoder: Decoder[T], tagger: Tagger[T, Msg]) -> None:
        self._spawn(lambda: self._orchestrator.post(url, body, decoder), tagger)

    def send_put(self, url: str, body: Any, decoder: Decoder[T], tagger: Tagger[T, Msg]) -> None:
        self._spawn(lambda: self._orchestrator.put(url, body, decoder), tagger)

    def send_patch(self, url: str, body: Any, decoder: Decoder[T], tagger: Tagger[T, Msg]) -> None:
        self._spawn(lambda: self._orchestrator.patch(url, body, decoder), tagger)

    def send_delete(self, url: str, body: Any, decoder: Decoder[T], tagger: Tagger[T, Msg]) -> None:
        self._spawn(lambda: self._orchestrator.delete(url, body, decoder), tagger)

    def send(
        self,
        method: Method,
        url: str,
        decoder: Decoder[T],
        tagger: Tagger[T, Msg],
        *,
        body: Any = NO_BODY,
        cache: CachePolicy = CachePolicy.ALLOW_CACHE,
    ) -> None:
        # Raised here, at the call site, rather than inside the scheduled task.
        check_method(method)
        self._spawn(
            lambda: self._orchestrator.request(method, url, decoder, body=body, cache=cache),
            tagger,
        )

    @property
    def pending(self) -> int:
        return len(self._pending)

    async def drain(self) -> None:
        """
        Wait for every command scheduled so far (including ones scheduled while waiting).
        """

        while self._pending:
            await asyncio.gather(*list(self._pending))

    def _spawn(
        self, start: Callable[[], Awaitable[RemoteState[T, FetchError]]], tagger: Tagger[T, Msg]
    ) -> None:
        # Resolve the loop first so no coroutine is created when none is running.
        loop = asyncio.get_running_loop()
        scheduled = loop.create_task(self._deliver(start(), tagger))
        self._pending.add(scheduled)
        scheduled.add_done_callback(self._pending.discard)

    async def _deliver(
        self, task: Awaitable[RemoteState[T, FetchError]], tagger: Tagger[T, Msg]
    ) -> None:
        state = await task
        try:
            message = tagger(state)
        except Exception:
            log.exception("command.tagger_failed")
            return
        try:
            self._dispatch(message)
        except Exception:
            log.exception("command.dispatch_failed")


# --- Module Notes -----------------------------------------------------------
# Request construction lives only in `RequestOrchestrator`; this module just attaches
# the tagger/dispatch continuation to its coroutines.
