"""Reader layer: turns indentation-structured text into a value tree."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Iterable, Union

from .expander import expand_groups
from .options import ExpandOptions
from .scalars import parse_inline_value, strip_comment
from .values import Value, VDict, VList

logger = logging.getLogger(__name__)

_LINE_BREAK_RE = re.compile(r"\r\n|\r|\n")

Source = Union[str, Iterable[str], None]
Container = Union[VDict, VList]


@dataclass(slots=True)
class _Frame:
    container: Container
    indent: int


# ---------------------------------------------------------------------------
# Line helpers
# ---------------------------------------------------------------------------

def split_lines(text: str) -> list[str]:
    """Split *text* on ``\\n``, ``\\r\\n`` or ``\\r``."""
    return _LINE_BREAK_RE.split(text)


def _indent_of(line: str) -> int:
    return len(line) - len(line.lstrip(" "))


def _is_blank_or_comment(line: str) -> bool:
    content = line.strip()
    return not content or content.startswith("#")


def _next_content(lines: list[str], start: int) -> str | None:
    """Trimmed content of the first substantive line at or after *start*."""
    for j in range(start, len(lines)):
        if not _is_blank_or_comment(lines[j]):
            return lines[j].strip()
    return None


# ---------------------------------------------------------------------------
# Container writes
# ---------------------------------------------------------------------------

def _append(stack: list[_Frame], container: Container, value: Value) -> None:
    if isinstance(container, VList):
        container.items.append(value)
        return
    if container is stack[0].container and not container.entries:
        # An untouched root becomes a sequence on its first item.
        stack[0].container = VList([value])
        return
    logger.debug("Dropping list item written into a mapping: %r", value)


def _assign(container: Container, key: str, value: Value) -> None:
    if isinstance(container, VDict):
        container.entries[key] = value
        return
    logger.debug("Dropping key %r written into a sequence", key)


# ---------------------------------------------------------------------------
# Block parser
# ---------------------------------------------------------------------------

def parse_lines(lines: Iterable[str] | None) -> Value:
    """Parse physical *lines* into a value tree.

    Keeps a stack of ``(container, indent)`` frames rooted at an empty
    mapping with indent -1. Each line pops the frames indented at or past
    it and writes into the container left on top:

    - ``- key: value`` appends a one-key mapping and opens it for deeper keys
    - ``- value`` appends an inline collection or scalar (``- {a: b}`` has a
      colon, so it is read as a one-key mapping with key ``{a``)
    - ``key:`` opens a nested list or mapping, chosen by the next line
    - ``key: value`` assigns an inline collection or scalar

    Lines of any other shape are skipped, so this never raises.
    """
    if lines is None:
        return VDict()
    lines = [line for line in lines if isinstance(line, str)]
    logger.debug("Parsing %d lines", len(lines))

    stack: list[_Frame] = [_Frame(VDict(), -1)]

    for i, line in enumerate(lines):
        if _is_blank_or_comment(line):
            continue

        indent = _indent_of(line)
        while len(stack) > 1 and stack[-1].indent >= indent:
            stack.pop()
        parent = stack[-1].container
        content = line.strip()

        if content.startswith("- "):
            payload = strip_comment(content[2:]).strip()
            key, sep, rest = payload.partition(":")
            if sep and key.strip():
                item = VDict({key.strip(): parse_inline_value(rest.strip())})
                _append(stack, parent, item)
                stack.append(_Frame(item, indent))
            else:
                _append(stack, parent, parse_inline_value(payload))
            continue

        if ":" not in content:
            logger.debug("Skipping unrecognised line %d: %r", i + 1, content)
            continue

        key, _, rest = content.partition(":")
        key = key.strip()
        if not key:
            logger.debug("Skipping line %d with empty key", i + 1)
            continue
        value = strip_comment(rest).strip()

        if value:
            _assign(parent, key, parse_inline_value(value))
            continue

        following = _next_content(lines, i + 1)
        if following is None:
            _assign(parent, key, VDict())
            continue
        child: Container = VList() if following.startswith("-") else VDict()
        _assign(parent, key, child)
        stack.append(_Frame(child, indent))

    return stack[0].container


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------

def parse(source: Source, options: ExpandOptions | None = None) -> Value:
    """Parse *source* (text, an iterable of lines, or None) into a value tree.

    Group references are expanded when ``options.expand_groups`` is set.
    Empty input gives an empty ``VDict``.
    """
    if isinstance(source, str):
        lines: Iterable[str] | None = split_lines(source)
    else:
        lines = source
    root = parse_lines(lines)

    if options is not None and options.expand_groups:
        root = expand_groups(root, options)
    return root
