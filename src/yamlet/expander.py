"""Group expansion: splices named lists into sequences that reference them.

Given a document such as::

    itemGroups:
      books:
        - Base.BookA
        - Base.BookB
    recipe:
      inputs:
        - $books+Base.Glue

``recipe.inputs`` becomes ``[Base.BookA, Base.BookB, Base.Glue]``.

A reference token is a string whose first character is one of the
configured prefixes (``$`` or ``*`` by default), followed by a group name
and optional ``+extra`` literals. Groups may reference other groups;
unknown groups and cycles expand to nothing.
"""

from __future__ import annotations

import copy
import logging

from .options import DEFAULT_GROUPS_KEY, ExpandOptions
from .values import Value, VDict, VList, VText

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Tokens
# ---------------------------------------------------------------------------

def is_reference(value: Value, prefixes: frozenset[str]) -> bool:
    """Return True if *value* is a string starting with a reference prefix."""
    return isinstance(value, VText) and value.value[:1] in prefixes


def split_reference(token: str) -> tuple[str | None, list[str]]:
    """Split ``$name+a+b`` into ``("name", ["a", "b"])``.

    Empty ``+`` segments are ignored; a token with no name gives None.
    """
    parts = [p for p in token[1:].split("+") if p]
    if not parts:
        return None, []
    return parts[0], parts[1:]


# ---------------------------------------------------------------------------
# Resolution
# ---------------------------------------------------------------------------

def resolve_group(
    name: str | None,
    groups: VDict,
    guard: set[str],
    prefixes: frozenset[str],
    groups_key: str = DEFAULT_GROUPS_KEY,
) -> list[Value]:
    """Flatten group *name* into a list, following nested references.

    *guard* holds the groups being resolved on the current path; meeting
    one of them again is a cycle and that occurrence resolves to ``[]``.
    Containers in the group are copied and expanded while *name* is still
    guarded, so the returned items need no further expansion.
    """
    if name is None:
        return []
    group = groups.entries.get(name)
    if not isinstance(group, VList):
        return []
    if name in guard:
        logger.warning("Group cycle detected for '%s'", name)
        return []

    guard.add(name)
    try:
        out: list[Value] = []
        for item in group.items:
            if is_reference(item, prefixes):
                out.extend(_splice(item.value, groups, guard, prefixes, groups_key))
            elif isinstance(item, (VList, VDict)):
                # Expand a copy; the group itself stays as written.
                spliced = copy.deepcopy(item)
                _expand(spliced, groups, guard, prefixes, groups_key)
                out.append(spliced)
            else:
                out.append(item)
        return out
    finally:
        guard.discard(name)


def _splice(
    token: str,
    groups: VDict,
    guard: set[str],
    prefixes: frozenset[str],
    groups_key: str,
) -> list[Value]:
    name, extras = split_reference(token)
    out = resolve_group(name, groups, guard, prefixes, groups_key)
    out.extend(VText(extra) for extra in extras)
    return out


# ---------------------------------------------------------------------------
# Tree walk
# ---------------------------------------------------------------------------

def _expand(
    value: Value,
    groups: VDict,
    guard: set[str],
    prefixes: frozenset[str],
    groups_key: str,
) -> None:
    if isinstance(value, VList):
        items: list[Value] = []
        for item in value.items:
            if is_reference(item, prefixes):
                # Spliced items come back already expanded.
                items.extend(_splice(item.value, groups, guard, prefixes, groups_key))
            else:
                _expand(item, groups, guard, prefixes, groups_key)
                items.append(item)
        value.items = items
        return

    if isinstance(value, VDict):
        for key, child in value.entries.items():
            if key == groups_key:
                continue
            _expand(child, groups, guard, prefixes, groups_key)


def expand_groups(root: Value, options: ExpandOptions | None = None) -> Value:
    """Expand group references throughout *root*, in place.

    Does nothing unless *root* is a ``VDict`` whose ``options.groups_key``
    entry is a ``VDict`` of groups. Mappings stored under the groups key are
    never walked. Returns *root*.
    """
    if options is None:
        options = ExpandOptions()
    if not isinstance(root, VDict):
        return root
    groups = root.entries.get(options.groups_key)
    if not isinstance(groups, VDict):
        return root

    guard: set[str] = set()
    try:
        _expand(root, groups, guard, options.prefix_set(), options.groups_key)
    except RecursionError:
        logger.error("Group expansion stopped: document nested too deeply")
    return root
