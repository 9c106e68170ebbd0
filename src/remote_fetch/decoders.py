"""
remote_fetch.decoders

Pluggable response-body decoders.

Responsibilities:
- Define the `Decoder` capability: raw body text -> Outcome[value, DecodeError].
- Provide pydantic-backed decoders for arbitrary types and models.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar

from pydantic import BaseModel, TypeAdapter, ValidationError

from remote_fetch.errors import DecodeError
from remote_fetch.outcome import Err, Ok, Outcome

T = TypeVar("T")
M = TypeVar("M", bound=BaseModel)

Decoder = Callable[[str], Outcome[T, DecodeError]]


def json_decoder(type_: type[T] | Any) -> Decoder[T]:
    """
    Parse JSON and validate it against `type_` (anything pydantic's TypeAdapter accepts).

    Malformed JSON and schema mismatches both become `Err(DecodeError)`.
    """

    adapter: TypeAdapter[T] = TypeAdapter(type_)

    def decode(raw: str) -> Outcome[T, DecodeError]:
        try:
            return Ok(adapter.validate_json(raw))
        except ValidationError as e:
            return Err(DecodeError(reason=_summarize(e), body=raw))

    return decode


def model_decoder(model: type[M]) -> Decoder[M]:
    return json_decoder(model)


def raw_json() -> Decoder[Any]:
    # Any well-formed JSON document.
    return json_decoder(Any)


def _summarize(error: ValidationError) -> str:
    first = error.errors()[0] if error.error_count() else {}
    loc = ".".join(str(p) for p in first.get("loc", ())) or "<root>"
    return f"{loc}: {first.get('msg', str(error))} ({error.error_count()} error(s))"


# --- Module Notes -----------------------------------------------------------
# Decoders run synchronously after the transport settles; they are assumed cheap
# relative to network latency.
