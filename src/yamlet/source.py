"""Text source: reads lines from disk and feeds them to the parser."""

from __future__ import annotations

import logging
import os

from .errors import SourceError
from .options import ExpandOptions
from .reader import parse, split_lines
from .values import Value

logger = logging.getLogger(__name__)


def _locate(path: str | os.PathLike, base_dir: str | os.PathLike | None) -> str:
    """Join *path* onto *base_dir*, refusing paths that climb out of it."""
    if base_dir is None:
        return os.fspath(path)
    base = os.path.realpath(base_dir)
    target = os.path.realpath(os.path.join(base, path))
    if os.path.commonpath([base, target]) != base:
        raise SourceError(os.fspath(path), "path leaves the base directory")
    return target


def read_lines(
    path: str | os.PathLike,
    base_dir: str | os.PathLike | None = None,
) -> list[str]:
    """Read a UTF-8 text file and return its lines.

    *path* is taken relative to *base_dir* when one is given. Any failure
    is raised as ``SourceError``.
    """
    target = _locate(path, base_dir)
    try:
        with open(target, encoding="utf-8") as fh:
            text = fh.read()
    except (OSError, UnicodeDecodeError) as exc:
        raise SourceError(os.fspath(path), str(exc)) from exc
    return split_lines(text)


def load_file(
    path: str | os.PathLike,
    base_dir: str | os.PathLike | None = None,
    options: ExpandOptions | None = None,
) -> Value:
    """Read and parse a file; an unreadable file parses as empty input."""
    try:
        lines = read_lines(path, base_dir)
    except SourceError as exc:
        logger.warning("%s", exc)
        lines = None
    else:
        logger.debug("Read %d lines from '%s'", len(lines), os.fspath(path))
    return parse(lines, options)
