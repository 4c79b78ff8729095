"""Tests for value types and to_python."""

from yamlet.values import Null, VBool, VDict, VList, VNumber, VText, to_python


# ---------------------------------------------------------------------------
# __str__
# ---------------------------------------------------------------------------

def test_str_number_int():
    assert str(VNumber(42.0)) == "42"

def test_str_number_float():
    assert str(VNumber(3.5)) == "3.5"

def test_str_number_inf():
    assert str(VNumber(float("inf"))) == "inf"

def test_str_bool():
    assert str(VBool(True)) == "true"
    assert str(VBool(False)) == "false"

def test_str_null():
    assert str(Null) == "null"
    assert repr(Null) == "Null"

def test_str_list():
    assert str(VList([VNumber(1), VText("x")])) == "[1, x]"

def test_str_dict():
    assert str(VDict({"a": VNumber(1)})) == "{a: 1}"


# ---------------------------------------------------------------------------
# Null singleton
# ---------------------------------------------------------------------------

def test_null_is_singleton():
    from yamlet.values import _Null
    assert _Null() is Null

def test_null_is_falsy():
    assert not Null


# ---------------------------------------------------------------------------
# to_python
# ---------------------------------------------------------------------------

def test_to_python_scalars():
    assert to_python(Null) is None
    assert to_python(VBool(True)) is True
    assert to_python(VNumber(2.0)) == 2.0
    assert to_python(VText("hi")) == "hi"

def test_to_python_nested():
    tree = VDict({
        "a": VList([VNumber(1), VDict({"b": VText("c")})]),
        "d": Null,
    })
    assert to_python(tree) == {"a": [1.0, {"b": "c"}], "d": None}

def test_to_python_keeps_key_order():
    tree = VDict({"z": Null, "a": Null, "m": Null})
    assert list(to_python(tree)) == ["z", "a", "m"]
