"""
remote_fetch.errors

Error taxonomy carried by `Failed` states.

Responsibilities:
- Distinguish transport-level failures from decode failures.
- Keep both under one `FetchError` umbrella so a single `Failed` branch covers them.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Union, assert_never

TransportErrorKind = Literal["network", "timeout", "bad_status", "encode"]


@dataclass(frozen=True, slots=True)
class TransportError:
    """
    No usable response was obtained.

    - network: connection failure, DNS, protocol error, unexpected transport crash
    - timeout: the transport gave up waiting
    - bad_status: a response arrived with a non-2xx status (status/body attached)
    - encode: the request body could not be serialized, nothing was sent
    """

    kind: TransportErrorKind
    reason: str
    status: int | None = None
    body: str | None = None
    method: str | None = None
    url: str | None = None


@dataclass(frozen=True, slots=True)
class DecodeError:
    """
    The response arrived with a 2xx status but its body did not decode.
    """

    reason: str
    body: str | None = None
    status: int | None = None


FetchError = Union[TransportError, DecodeError]


def describe(error: FetchError) -> str:
    # Short human-readable summary; suitable for UI banners and log fields.
    match error:
        case TransportError(kind="bad_status", status=status, reason=reason):
            return f"HTTP {status}: {reason}"
        case TransportError(kind=kind, reason=reason):
            return f"{kind} error: {reason}"
        case DecodeError(reason=reason):
            return f"decode error: {reason}"
        case _:
            assert_never(error)


# --- Module Notes -----------------------------------------------------------
# These are plain values, not exceptions: the orchestrator never raises them.
