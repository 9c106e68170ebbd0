"""
remote_fetch.state.remote

The four-variant lifecycle of a single remote fetch.

Responsibilities:
- Define the closed `RemoteState` union (NotRequested, InFlight, Failed, Succeeded).
- Convert a transport/decoder `Outcome` into a settled state (`from_outcome`).
- Provide small pure helpers for rendering and composing states.

Every `match` over `RemoteState` in this package ends in `assert_never` so a new
variant cannot be silently swallowed by a catch-all branch.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar, Union, assert_never

from remote_fetch.outcome import Err, Ok, Outcome

T = TypeVar("T")
E = TypeVar("E")
U = TypeVar("U")
F = TypeVar("F")
R = TypeVar("R")


@dataclass(frozen=True, slots=True)
class NotRequested:
    # Caller-side initial value; the orchestrator never produces it.
    pass


@dataclass(frozen=True, slots=True)
class InFlight:
    # Set by the caller right before issuing a request.
    pass


@dataclass(frozen=True, slots=True)
class Failed(Generic[E]):
    error: E


@dataclass(frozen=True, slots=True)
class Succeeded(Generic[T]):
    value: T


RemoteState = Union[NotRequested, InFlight, Succeeded[T], Failed[E]]


def not_requested() -> RemoteState[T, E]:
    return NotRequested()


def in_flight() -> RemoteState[T, E]:
    return InFlight()


def from_outcome(outcome: Outcome[T, E]) -> RemoteState[T, E]:
    """
    Fold a settled outcome into `Failed` or `Succeeded`.

    Total and pure: never raises, never returns `NotRequested`/`InFlight`.
    """

    match outcome:
        case Err(error=error):
            return Failed(error)
        case Ok(value=value):
            return Succeeded(value)
        case _:
            assert_never(outcome)


def to_optional(state: RemoteState[T, E]) -> T | None:
    match state:
        case Succeeded(value=value):
            return value
        case NotRequested() | InFlight() | Failed():
            return None
        case _:
            assert_never(state)


def with_default(state: RemoteState[T, E], default: T) -> T:
    match state:
        case Succeeded(value=value):
            return value
        case NotRequested() | InFlight() | Failed():
            return default
        case _:
            assert_never(state)


def is_settled(state: RemoteState[T, E]) -> bool:
    match state:
        case Failed() | Succeeded():
            return True
        case NotRequested() | InFlight():
            return False
        case _:
            assert_never(state)


def map_success(state: RemoteState[T, E], fn: Callable[[T], U]) -> RemoteState[U, E]:
    match state:
        case Succeeded(value=value):
            return Succeeded(fn(value))
        case NotRequested() | InFlight() | Failed():
            return state
        case _:
            assert_never(state)


def map_failure(state: RemoteState[T, E], fn: Callable[[E], F]) -> RemoteState[T, F]:
    match state:
        case Failed(error=error):
            return Failed(fn(error))
        case NotRequested() | InFlight() | Succeeded():
            return state
        case _:
            assert_never(state)


def fold(
    state: RemoteState[T, E],
    *,
    not_requested: Callable[[], R],
    in_flight: Callable[[], R],
    failed: Callable[[E], R],
    succeeded: Callable[[T], R],
) -> R:
    """
    Exhaustive case analysis: one callable per variant, all required.

    Typical use is view code, e.g. `fold(state, not_requested=..., in_flight=spinner, ...)`.
    """

    match state:
        case NotRequested():
            return not_requested()
        case InFlight():
            return in_flight()
        case Failed(error=error):
            return failed(error)
        case Succeeded(value=value):
            return succeeded(value)
        case _:
            assert_never(state)


def combine(*states: RemoteState[Any, E]) -> RemoteState[tuple[Any, ...], E]:
    """
    Compose independent states into one view-ready state.

    Precedence: the first `Failed`, then any `InFlight`, then any `NotRequested`;
    only when every input succeeded is the result `Succeeded(tuple_of_values)`.
    """

    values: list[Any] = []
    pending: RemoteState[tuple[Any, ...], E] | None = None
    for state in states:
        match state:
            case Failed():
                return state
            case InFlight():
                pending = state
            case NotRequested():
                if pending is None:
                    pending = state
            case Succeeded(value=value):
                values.append(value)
            case _:
                assert_never(state)
    if pending is not None:
        return pending
    return Succeeded(tuple(values))


# --- Module Notes -----------------------------------------------------------
# Application code usually keeps one mutable cell per resource:
#   cell = InFlight(); cell = await orchestrator.get(url, decoder)
# The values themselves stay immutable.
