"""
remote_fetch.outcome

Result values produced by transports and decoders.

Responsibilities:
- Represent "either an error or a success value" without raising.
- Serve as the input of `remote_fetch.state.from_outcome`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

T = TypeVar("T")
E = TypeVar("E")


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    value: T


@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    error: E


Outcome = Union[Ok[T], Err[E]]


# --- Module Notes -----------------------------------------------------------
# Outcome is the single seam between capabilities (transport, decoder) and state
# conversion; capabilities return it instead of raising.
