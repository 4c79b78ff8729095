"""Value types for yamlet."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, Union


class _Null:
    """Singleton for null / empty scalars."""

    _instance: "_Null | None" = None

    def __new__(cls) -> "_Null":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "Null"

    def __bool__(self) -> bool:
        return False

    def __str__(self) -> str:
        return "null"


Null = _Null()


@dataclass
class VBool:
    value: bool

    def __str__(self) -> str:
        return str(self.value).lower()


@dataclass
class VNumber:
    value: float

    def __str__(self) -> str:
        v = self.value
        if math.isfinite(v) and v == int(v):
            return str(int(v))
        return str(v)


@dataclass
class VText:
    value: str

    def __str__(self) -> str:
        return self.value


@dataclass
class VList:
    items: list["Value"] = field(default_factory=list)

    def __str__(self) -> str:
        return "[" + ", ".join(str(v) for v in self.items) + "]"


@dataclass
class VDict:
    entries: dict[str, "Value"] = field(default_factory=dict)

    def __str__(self) -> str:
        return "{" + ", ".join(f"{k}: {v}" for k, v in self.entries.items()) + "}"


Value = Union[_Null, VBool, VNumber, VText, VList, VDict]


def to_python(value: Value) -> Any:
    """Convert a value tree into plain Python data.

    Null → None, VBool → bool, VNumber → float, VText → str,
    VList → list, VDict → dict (key order kept).
    """
    if isinstance(value, VList):
        return [to_python(v) for v in value.items]
    if isinstance(value, VDict):
        return {k: to_python(v) for k, v in value.entries.items()}
    if isinstance(value, (VBool, VNumber, VText)):
        return value.value
    return None
