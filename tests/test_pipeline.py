"""Tests for the minify -> parse -> render -> color pipeline."""

import json

import pytest

from conftest import GREEN, RESET
from mjson.adapters.colorizer import ESCAPE, STRING_LITERAL
from mjson.adapters.minifier import minify
from mjson.core.domain.errors import JsonSyntaxError
from mjson.core.services.pipeline import PipelineHooks, process


def test_indent_fidelity():
    assert process('{"a":[1,2]}', "  ", False) == '{\n  "a": [\n    1,\n    2\n  ]\n}'


def test_comment_stripping_equivalence():
    commented = process('{"a": 1 /* c */, "b": 2 // c\n}', "", False)
    assert commented == process('{"a":1,"b":2}', "", False) == '{"a":1,"b":2}'


def test_formatting_is_idempotent(jsonc_text):
    compact = minify(jsonc_text)
    first = process(compact, "  ", False)
    assert process(compact, "  ", False) == first
    assert process(first, "  ", False) == first


@pytest.mark.parametrize(
    "value",
    [
        {"a": [1, 2, {"b": None}], "c": "d // e", "f": True},
        [],
        "plain",
        [1.5, -2, {"nested": {"deep": ["x"]}}],
        {"unicode": "ñ ☃", "quote": 'say "hi"'},
    ],
)
def test_round_trip(value):
    pretty = process(json.dumps(value), "    ", False)
    assert json.loads(minify(pretty)) == value


def test_invalid_input_raises_with_location():
    with pytest.raises(JsonSyntaxError) as info:
        process('{"a":}', "    ", False)
    assert info.value.line == 1
    assert info.value.position >= 5


def test_comment_only_object():
    assert process("{/* nothing */}", "    ", False) == "{}"


def test_trailing_comma_left_by_comment_is_invalid():
    with pytest.raises(JsonSyntaxError):
        process("[1 /*x*/ ,]", "    ", False)


def test_colorize_wraps_every_literal():
    plain = process('{"k": ["v", 1]}', "  ", False)
    colored = process('{"k": ["v", 1]}', "  ", True)
    assert colored.count(GREEN) == len(STRING_LITERAL.findall(plain)) == 2
    assert colored.replace(GREEN, "").replace(RESET, "") == plain


def test_no_color_has_no_escape():
    assert ESCAPE not in process('{"k": "v"}', "  ", False)


def test_style_is_configurable():
    assert process('"a"', "", True, style="red") == '\x1b[31m"a"\x1b[0m'


def test_hooks_receive_color_trace():
    traces = []
    hooks = PipelineHooks(debug=traces.append)
    process("[]", "", True, hooks=hooks)
    process("[]", "", False, hooks=hooks)
    assert traces == ["color on", "color off"]


def test_minifier_and_codec_are_injectable():
    calls = []

    class FakeCodec:
        def parse(self, text):
            calls.append(text)
            return ["parsed"]

        def render(self, value, indent):
            return f"{indent}{value[0]}"

    out = process("raw", ">", False, minifier=str.upper, codec=FakeCodec())
    assert calls == ["RAW"]
    assert out == ">parsed"


def test_output_is_always_strict_json():
    out = process("[1e400]", "", False)
    assert out == "[null]"
    assert json.loads(out, parse_constant=lambda name: pytest.fail(name)) == [None]


def test_huge_integer_passes_through():
    digits = "9" * 5000
    assert process(f"[{digits}]", "", False) == f"[{digits}]"
