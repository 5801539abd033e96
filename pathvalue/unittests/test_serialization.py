"""Unit tests for text and JSON serialization."""

from __future__ import annotations

import json

import pytest

from pathvalue import PathValue
from pathvalue.platform import POSIX_RULES
from pathvalue.serialization import (
    PathValueJSONEncoder,
    decode,
    dump_paths,
    encode,
    load_paths,
)

SAMPLES: list[str] = [
    ".",
    "..",
    "/",
    "../../",
    "/foo/bar/baz.yz",
    "c:\\\\hello",
    "path/with\\ whitespace",
    "\\  whitespace",
]


@pytest.mark.parametrize("raw", SAMPLES)
def test_decode_encode_round_trip(raw: str) -> None:
    """Decoding the encoded form reproduces the value."""
    value = PathValue(raw, rules=POSIX_RULES)
    text = encode(value)
    assert text == str(value)
    assert decode(text, rules=POSIX_RULES) == value
    assert decode(text.encode("utf-8"), rules=POSIX_RULES) == value


def test_decode_normalizes_input() -> None:
    """Decoding is construction from raw text."""
    assert decode(" ./a//b/\n", rules=POSIX_RULES).canonical == "a/b"


def test_dump_and_load_paths_preserve_external_form() -> None:
    """Lists survive JSON bit for bit."""
    values = [PathValue(raw, rules=POSIX_RULES) for raw in SAMPLES]
    document = dump_paths(values)
    assert json.loads(document) == [str(value) for value in values]

    loaded = load_paths(document, rules=POSIX_RULES)
    assert loaded == values
    assert dump_paths(loaded) == document


def test_load_paths_normalizes_raw_entries() -> None:
    """Entries written by hand are normalized on load."""
    loaded = load_paths('["./x/", "y/../z"]', rules=POSIX_RULES)
    assert [value.canonical for value in loaded] == ["x", "z"]


@pytest.mark.parametrize(
    ("document", "message"),
    [
        ('{"path": "a"}', "Expected a JSON array of paths, got dict"),
        ('["a", 3]', "Path entry 1 must be a string, got int"),
    ],
)
def test_load_paths_rejects_wrong_shapes(document: str, message: str) -> None:
    """Only arrays of strings are accepted."""
    with pytest.raises(TypeError, match=message):
        load_paths(document)


def test_load_paths_rejects_invalid_json() -> None:
    """Malformed documents surface json's own error."""
    with pytest.raises(json.JSONDecodeError):
        load_paths("[")


def test_json_encoder_handles_nested_values() -> None:
    """Values nested in other structures serialize as strings."""
    payload = {"roots": [PathValue("/srv/my data", rules=POSIX_RULES)]}
    assert json.loads(json.dumps(payload, cls=PathValueJSONEncoder)) == {
        "roots": ["/srv/my\\ data"]
    }


def test_json_encoder_rejects_unknown_objects() -> None:
    """Non-path objects still fail the usual way."""
    with pytest.raises(TypeError):
        json.dumps({"x": object()}, cls=PathValueJSONEncoder)
