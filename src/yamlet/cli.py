"""``yamlet`` command line entry point."""

from __future__ import annotations

import json
import logging

import click

from .errors import SourceError
from .options import DEFAULT_GROUPS_KEY, DEFAULT_REF_PREFIXES, ExpandOptions
from .reader import parse
from .source import read_lines
from .values import to_python


@click.command()
@click.argument("path", type=click.Path(dir_okay=False))
@click.option("--expand", is_flag=True, help="Expand group references.")
@click.option("--groups-key", default=DEFAULT_GROUPS_KEY, show_default=True,
              help="Root key holding the group lists.")
@click.option("--prefix", "prefixes", multiple=True,
              help="Reference prefix character (repeatable). Default: $ and *.")
@click.option("--indent", default=2, type=int, show_default=True, help="JSON indent.")
@click.option("--debug", is_flag=True, help="Log parser details to stderr.")
def main(path: str, expand: bool, groups_key: str, prefixes: tuple[str, ...],
         indent: int, debug: bool) -> None:
    """Parse PATH and print the resulting tree as JSON."""
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="[%(name)s] %(levelname)s: %(message)s",
    )

    try:
        lines = read_lines(path)
    except SourceError as exc:
        raise click.ClickException(str(exc)) from exc

    options = ExpandOptions(
        expand_groups=expand,
        groups_key=groups_key,
        ref_prefixes=prefixes or DEFAULT_REF_PREFIXES,
    )
    root = parse(lines, options)
    click.echo(json.dumps(to_python(root), indent=indent, ensure_ascii=False))


if __name__ == "__main__":
    main()
