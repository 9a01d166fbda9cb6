"""Tests for the JSON codec."""

import pytest

from jsonl2json import JsonCodec, RecordParseError, RecordSerializationError


@pytest.fixture
def codec():
    return JsonCodec()


def test_loads_object(codec):
    assert codec.loads('{"a": [1, 2.5, null]}') == {"a": [1, 2.5, None]}


def test_loads_empty_string_fails(codec):
    with pytest.raises(RecordParseError) as exc_info:
        codec.loads("", line_number=7)
    assert exc_info.value.line_number == 7
    assert str(exc_info.value).startswith("line 7:")


def test_loads_trailing_garbage_fails(codec):
    with pytest.raises(RecordParseError):
        codec.loads('{"a": 1} x')


def test_loads_rejects_nan(codec):
    with pytest.raises(RecordParseError, match="NaN"):
        codec.loads("[NaN]")


def test_dumps_compact(codec):
    assert codec.dumps({"a": [1, {"b": None}]}) == '{"a":[1,{"b":null}]}'


def test_dumps_pretty(codec):
    assert codec.dumps({"a": [1], "b": "x"}, pretty=True) == (
        '{\n  "a": [\n    1\n  ],\n  "b": "x"\n}'
    )


def test_dumps_pretty_scalar(codec):
    assert codec.dumps("text", pretty=True) == '"text"'


def test_dumps_keeps_non_ascii(codec):
    assert codec.dumps(["ñ"]) == '["ñ"]'


def test_dumps_rejects_nan(codec):
    with pytest.raises(RecordSerializationError):
        codec.dumps(float("nan"), line_number=3)


def test_dumps_rejects_unknown_types(codec):
    with pytest.raises(RecordSerializationError) as exc_info:
        codec.dumps({"when": object()}, line_number=4)
    assert exc_info.value.line_number == 4


def test_dumps_rejects_lone_surrogate(codec):
    value = codec.loads('{"a": "\\ud800"}')
    with pytest.raises(RecordSerializationError) as exc_info:
        codec.dumps(value, line_number=5)
    assert exc_info.value.line_number == 5
    assert "surrogates not allowed" in str(exc_info.value)


def test_dumps_accepts_surrogate_pair(codec):
    value = codec.loads('"\\ud83d\\ude00"')
    assert codec.dumps(value) == '"\U0001f600"'
