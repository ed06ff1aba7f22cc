"""Tests for parse/render and syntax diagnostics."""

import pytest

from mjson.adapters.json_parser import StdlibJsonCodec, build_excerpt, parse, render
from mjson.core.domain.errors import JsonSyntaxError
from mjson.core.interfaces import JsonCodec


class TestRender:
    def test_indent_fidelity(self):
        assert render({"a": [1, 2]}, "  ") == '{\n  "a": [\n    1,\n    2\n  ]\n}'

    def test_default_four_spaces(self):
        assert render({"a": 1}, "    ") == '{\n    "a": 1\n}'

    def test_empty_indent_is_compact(self):
        assert render({"a": [1, 2], "b": None}, "") == '{"a":[1,2],"b":null}'

    def test_custom_indent_string(self):
        assert render([1], "\t") == "[\n\t1\n]"

    def test_indent_truncated_to_ten_chars(self):
        assert render([1], "x" * 12) == "[\n" + "x" * 10 + "1\n]"

    def test_empty_containers(self):
        assert render({"a": [], "b": {}}, "  ") == '{\n  "a": [],\n  "b": {}\n}'

    def test_non_ascii_kept(self):
        assert render({"k": "ñandú"}, "") == '{"k":"ñandú"}'


class TestParse:
    def test_valid(self):
        assert parse('{"a":[1,2.5,true,null]}') == {"a": [1, 2.5, True, None]}

    def test_invalid_has_location(self):
        with pytest.raises(JsonSyntaxError) as info:
            parse('{"a":}')
        err = info.value
        assert err.line == 1
        assert err.column == 6
        assert err.position == 5
        assert str(err).startswith("Parse error on line 1, column 6: Expecting value")

    def test_excerpt_points_at_token(self):
        with pytest.raises(JsonSyntaxError) as info:
            parse('{"a":}')
        snippet, caret = info.value.excerpt.split("\n")
        assert snippet == '{"a":}'
        assert snippet[caret.index("^")] == "}"

    def test_empty_input(self):
        with pytest.raises(JsonSyntaxError) as info:
            parse("")
        assert info.value.line == 1
        assert info.value.column == 1

    @pytest.mark.parametrize("text", ["NaN", "[Infinity]", '{"a": -Infinity}'])
    def test_rejects_non_standard_constants(self, text):
        with pytest.raises(JsonSyntaxError, match="Unexpected token"):
            parse(text)

    def test_is_value_error(self):
        with pytest.raises(ValueError):
            parse("[1,]")


def test_excerpt_window_on_long_line():
    text = "[" + "1," * 40 + "x]"
    with pytest.raises(JsonSyntaxError) as info:
        parse(text)
    snippet, caret = info.value.excerpt.split("\n")
    assert snippet.startswith("...")
    assert snippet[caret.index("^")] == "x"


def test_excerpt_out_of_range_line():
    assert build_excerpt("[1]", 5, 1) == ""


def test_codec_satisfies_protocol():
    codec = StdlibJsonCodec()
    assert isinstance(codec, JsonCodec)
    assert codec.render(codec.parse("[1]"), "") == "[1]"


class TestEdgeNumbers:
    def test_overflowing_float_renders_as_null(self):
        assert render(parse("[1e400, -1e400, 1.5]"), "") == "[null,null,1.5]"

    def test_render_never_emits_infinity(self):
        with pytest.raises(ValueError):
            render([float("inf")], "")

    def test_huge_integer_round_trips(self):
        digits = "1" * 5000
        assert render(parse(f"[{digits}]"), "") == f"[{digits}]"


def test_deep_nesting_is_syntax_error():
    text = "[" * 5000 + "]" * 5000
    with pytest.raises(JsonSyntaxError, match="nesting depth") as info:
        parse(text)
    assert info.value.line == 1
    assert info.value.position is not None


@pytest.mark.parametrize(
    "text, position",
    [("[NaN]", 1), ('{"NaN": Infinity}', 8), ('["-Infinity", -Infinity]', 14)],
)
def test_constant_error_has_location(text, position):
    with pytest.raises(JsonSyntaxError) as info:
        parse(text)
    err = info.value
    assert err.position == position
    assert err.line == 1
    assert err.column == position + 1
    snippet, caret = err.excerpt.split("\n")
    assert snippet[caret.index("^")] in "NI-"
