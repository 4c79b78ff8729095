"""yamlet — a small YAML-subset parser with group reference expansion."""

from .values import (
    Null,
    Value,
    VBool,
    VDict,
    VList,
    VNumber,
    VText,
    _Null,
    to_python,
)
from .scalars import coerce_scalar, strip_comment
from .reader import parse, parse_lines
from .expander import expand_groups
from .options import ExpandOptions
from .source import load_file, read_lines
from .errors import YamletError, SourceError

__all__ = [
    "parse",
    "parse_lines",
    "expand_groups",
    "load_file",
    "read_lines",
    "ExpandOptions",
    "coerce_scalar",
    "strip_comment",
    "to_python",
    "Null",
    "Value",
    "VBool",
    "VDict",
    "VList",
    "VNumber",
    "VText",
    "YamletError",
    "SourceError",
]
