"""Options for group expansion."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

DEFAULT_GROUPS_KEY = "itemGroups"
DEFAULT_REF_PREFIXES: tuple[str, ...] = ("$", "*")


@dataclass(frozen=True)
class ExpandOptions:
    """How (and whether) group references are expanded after parsing.

    ``expand_groups`` is only consulted by the loading entry points
    (``parse`` and ``load_file``); ``expand_groups()`` itself always runs.
    """

    expand_groups: bool = False
    groups_key: str = DEFAULT_GROUPS_KEY
    ref_prefixes: tuple[str, ...] = DEFAULT_REF_PREFIXES

    def prefix_set(self) -> frozenset[str]:
        """Single-character reference prefixes, defaulting to ``$`` and ``*``."""
        prefixes = frozenset(
            p for p in self.ref_prefixes if isinstance(p, str) and len(p) == 1 and not p.isspace()
        )
        return prefixes or frozenset(DEFAULT_REF_PREFIXES)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any] | None) -> "ExpandOptions":
        """Build options from a host config dict (camelCase or snake_case keys)."""
        if not data:
            return cls()
        enabled = data.get("expandGroups", data.get("expand_groups", False))
        groups_key = data.get("groupsKey", data.get("groups_key")) or DEFAULT_GROUPS_KEY
        prefixes = data.get("refPrefixes", data.get("ref_prefixes")) or DEFAULT_REF_PREFIXES
        return cls(
            expand_groups=bool(enabled),
            groups_key=str(groups_key),
            ref_prefixes=tuple(prefixes),
        )
