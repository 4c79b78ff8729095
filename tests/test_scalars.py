"""Tests for comment stripping, scalar coercion and inline collections."""

import pytest

from yamlet.scalars import (
    coerce_scalar,
    parse_inline_dict,
    parse_inline_list,
    parse_inline_value,
    scalar_from_raw,
    strip_comment,
)
from yamlet.values import Null, VBool, VDict, VList, VNumber, VText


# ---------------------------------------------------------------------------
# strip_comment
# ---------------------------------------------------------------------------

class TestStripComment:
    def test_trailing_comment(self):
        assert strip_comment("value # note") == "value "

    def test_whole_line_comment(self):
        assert strip_comment("# note") == ""

    def test_hash_without_space_is_data(self):
        assert strip_comment("a#b") == "a#b"

    def test_hash_in_double_quotes(self):
        assert strip_comment('"a # not a comment"') == '"a # not a comment"'

    def test_hash_in_single_quotes(self):
        assert strip_comment("'a # b' # c") == "'a # b' "

    def test_single_quote_inside_double(self):
        assert strip_comment("\"it's # here\" # gone") == "\"it's # here\" "

    def test_tab_before_hash(self):
        assert strip_comment("x\t# c") == "x\t"

    def test_no_comment(self):
        assert strip_comment("plain") == "plain"


# ---------------------------------------------------------------------------
# coerce_scalar
# ---------------------------------------------------------------------------

@pytest.mark.parametrize("text", ["", "~", "null", "Null", "NULL"])
def test_coerce_null(text):
    assert coerce_scalar(text) is Null

@pytest.mark.parametrize("text", ["true", "True", "YES", "on", "On"])
def test_coerce_true(text):
    assert coerce_scalar(text) == VBool(True)

@pytest.mark.parametrize("text", ["false", "FALSE", "no", "Off"])
def test_coerce_false(text):
    assert coerce_scalar(text) == VBool(False)

def test_coerce_integer():
    assert coerce_scalar("42") == VNumber(42.0)

def test_coerce_negative_decimal():
    assert coerce_scalar("-2.5") == VNumber(-2.5)

def test_coerce_leading_dot():
    assert coerce_scalar(".5") == VNumber(0.5)

def test_coerce_exponent():
    assert coerce_scalar("1e3") == VNumber(1000.0)

def test_coerce_not_a_number():
    assert coerce_scalar("12abc") == VText("12abc")

def test_coerce_comma_decimal_is_text():
    assert coerce_scalar("1,5") == VText("1,5")

def test_coerce_nan_is_text():
    assert coerce_scalar("nan") == VText("nan")

def test_coerce_double_quoted():
    assert coerce_scalar('"hello world"') == VText("hello world")

def test_coerce_single_quoted():
    assert coerce_scalar("'42'") == VText("42")

def test_coerce_quoted_no_escapes():
    assert coerce_scalar(r'"a\nb"') == VText(r"a\nb")

def test_coerce_mismatched_quotes():
    assert coerce_scalar("'abc\"") == VText("'abc\"")

def test_coerce_lone_quote():
    assert coerce_scalar('"') == VText('"')

def test_coerce_plain_text():
    assert coerce_scalar("Base.Axe") == VText("Base.Axe")

def test_scalar_from_raw_strips_comment():
    assert scalar_from_raw("  7  # seven") == VNumber(7.0)


# ---------------------------------------------------------------------------
# Inline collections
# ---------------------------------------------------------------------------

class TestInlineList:
    def test_basic(self):
        assert parse_inline_list("[1, 2, three]") == VList(
            [VNumber(1), VNumber(2), VText("three")]
        )

    def test_empty(self):
        assert parse_inline_list("[]") == VList([])

    def test_drops_empty_and_null_pieces(self):
        assert parse_inline_list("[a, , null, b,]") == VList([VText("a"), VText("b")])

    def test_quoted_items(self):
        assert parse_inline_list("['x', \"y\"]") == VList([VText("x"), VText("y")])

    def test_naive_comma_split(self):
        # Nested brackets are not understood.
        assert parse_inline_list("[[1, 2]]") == VList([VText("[1"), VText("2]")])

    def test_not_a_list(self):
        assert parse_inline_list("abc") is None
        assert parse_inline_list("[abc") is None


class TestInlineDict:
    def test_basic(self):
        assert parse_inline_dict("{a: 1, b: yes}") == VDict(
            {"a": VNumber(1), "b": VBool(True)}
        )

    def test_splits_on_first_colon(self):
        assert parse_inline_dict("{url: http://x}") == VDict({"url": VText("http://x")})

    def test_drops_pieces_without_colon(self):
        assert parse_inline_dict("{a: 1, junk, b: 2}") == VDict(
            {"a": VNumber(1), "b": VNumber(2)}
        )

    def test_empty_value_is_null(self):
        assert parse_inline_dict("{a:}") == VDict({"a": Null})

    def test_empty(self):
        assert parse_inline_dict("{}") == VDict({})

    def test_not_a_dict(self):
        assert parse_inline_dict("a: 1") is None


def test_inline_value_priority():
    assert parse_inline_value("[1]") == VList([VNumber(1)])
    assert parse_inline_value("{a: 1}") == VDict({"a": VNumber(1)})
    assert parse_inline_value("on") == VBool(True)
