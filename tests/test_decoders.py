"""
tests.test_decoders

Pydantic-backed decoders: successes become Ok, parse and schema failures become Err.
"""

from __future__ import annotations

from pydantic import BaseModel

from remote_fetch.decoders import json_decoder, model_decoder, raw_json
from remote_fetch.errors import DecodeError
from remote_fetch.outcome import Err, Ok


class Pet(BaseModel):
    id: int
    name: str


def test_model_decoder_success() -> None:
    assert model_decoder(Pet)('{"id": 1, "name": "Rex"}') == Ok(Pet(id=1, name="Rex"))


def test_schema_mismatch_is_err() -> None:
    result = model_decoder(Pet)('{"id": "one"}')
    assert isinstance(result, Err)
    assert isinstance(result.error, DecodeError)
    assert result.error.body == '{"id": "one"}'
    assert "error(s)" in result.error.reason


def test_json_string_against_object_is_err() -> None:
    assert isinstance(model_decoder(Pet)('"not json"'), Err)


def test_generic_types() -> None:
    assert json_decoder(list[int])("[1, 2, 3]") == Ok([1, 2, 3])
    assert raw_json()('{"a": null}') == Ok({"a": None})
    assert isinstance(raw_json()("not json"), Err)


# --- Module Notes -----------------------------------------------------------
# Decoder failures surfacing as Failed states are covered in test_orchestrator.py.
