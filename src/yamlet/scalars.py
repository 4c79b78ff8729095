"""Scalar handling: comment stripping, scalar coercion and one-line collections."""

from __future__ import annotations

import re

from .values import Null, Value, VBool, VDict, VList, VNumber, VText, _Null

_NUMBER_RE = re.compile(r"^[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?$")

_NULL_WORDS = frozenset({"~", "null"})
_TRUE_WORDS = frozenset({"true", "yes", "on"})
_FALSE_WORDS = frozenset({"false", "no", "off"})


# ---------------------------------------------------------------------------
# Comments
# ---------------------------------------------------------------------------

def strip_comment(text: str) -> str:
    """Drop a trailing ``# comment`` from *text*.

    A ``#`` starts a comment only outside quotes and only at the start of
    the text or right after whitespace; ``a#b`` and ``"a # b"`` are data.
    """
    in_single = False
    in_double = False
    for i, c in enumerate(text):
        if c == "'" and not in_double:
            in_single = not in_single
        elif c == '"' and not in_single:
            in_double = not in_double
        elif c == "#" and not in_single and not in_double:
            if i == 0 or text[i - 1].isspace():
                return text[:i]
    return text


# ---------------------------------------------------------------------------
# Scalars
# ---------------------------------------------------------------------------

def coerce_scalar(text: str) -> Value:
    """Classify comment-free, trimmed *text* as Null, VBool, VNumber or VText.

    Rules are tried in order: null words, boolean words, numeric
    literal, quoted string (quotes removed, no escapes), plain string.
    """
    lowered = text.lower()
    if not text or lowered in _NULL_WORDS:
        return Null
    if lowered in _TRUE_WORDS:
        return VBool(True)
    if lowered in _FALSE_WORDS:
        return VBool(False)
    if _NUMBER_RE.match(text):
        return VNumber(float(text))
    if len(text) >= 2 and text[0] == text[-1] and text[0] in ("'", '"'):
        return VText(text[1:-1])
    return VText(text)


def scalar_from_raw(raw: str) -> Value:
    """Strip comments and whitespace from *raw*, then coerce it."""
    return coerce_scalar(strip_comment(raw).strip())


# ---------------------------------------------------------------------------
# Inline collections
# ---------------------------------------------------------------------------

def parse_inline_list(text: str) -> VList | None:
    """Parse ``[a, b, c]``; return None when *text* is not bracketed.

    Splitting is on every comma, so nested collections and quoted commas
    are not supported. Pieces that come out as null are dropped.
    """
    if not (text.startswith("[") and text.endswith("]")):
        return None
    items: list[Value] = []
    for piece in text[1:-1].split(","):
        value = scalar_from_raw(piece)
        if not isinstance(value, _Null):
            items.append(value)
    return VList(items)


def parse_inline_dict(text: str) -> VDict | None:
    """Parse ``{k: v, k2: v2}``; return None when *text* is not braced.

    Pieces without a ``:`` or with an empty key are skipped.
    """
    if not (text.startswith("{") and text.endswith("}")):
        return None
    entries: dict[str, Value] = {}
    for piece in text[1:-1].split(","):
        key, sep, raw = piece.partition(":")
        key = key.strip()
        if not sep or not key:
            continue
        entries[key] = scalar_from_raw(raw)
    return VDict(entries)


def parse_inline_value(text: str) -> Value:
    """Inline list, then inline dict, then plain scalar."""
    value = parse_inline_list(text)
    if value is not None:
        return value
    value = parse_inline_dict(text)
    if value is not None:
        return value
    return coerce_scalar(text)
