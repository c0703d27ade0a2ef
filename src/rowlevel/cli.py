"""CLI for rowlevel."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import click

from rowlevel import __version__
from rowlevel.errors import LevelingError
from rowlevel.layout import level
from rowlevel.layout.constants import DEFAULT_ROW_FORMAT, ROW_FORMATS
from rowlevel.parser import LeveledGraph, load_graph

root_option = click.option("--root", "-r", required=True,
                           help="Name of the node placed on row 1")


@click.group()
@click.version_option(version=__version__)
@click.option("-v", "--verbose", is_flag=True, help="Log each leveling step")
def cli(verbose: bool) -> None:
    """rowlevel: Assign rows to the nodes of a rooted directed graph."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _level_file(input_file: Path, root: str, **kwargs) -> LeveledGraph:
    try:
        graph = load_graph(input_file)
        return level(graph, root, **kwargs)
    except LevelingError as e:
        click.echo(f"Error: {e}", err=True)
        raise SystemExit(1)


@cli.command(name="level")
@click.argument("input_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@root_option
@click.option("-o", "--output", type=click.Path(path_type=Path), default=None,
              help="Output JSON file path. Defaults to stdout")
@click.option("--row-format", type=click.Choice(ROW_FORMATS), default=DEFAULT_ROW_FORMAT,
              help="Emit rows as integers or as 'row<N>' labels (default: int)")
@click.option("--strict", is_flag=True,
              help="Fail if any node is unreachable from the root")
@click.option("--omit-unreachable", is_flag=True,
              help="Leave nodes without a row out of the node list")
@click.option("--max-corrections", type=click.IntRange(min=1), default=None,
              help="Repair pass correction budget (default: nodes x edges)")
def level_cmd(
    input_file: Path,
    root: str,
    output: Path | None,
    row_format: str,
    strict: bool,
    omit_unreachable: bool,
    max_corrections: int | None,
) -> None:
    """Level a graph file (JSON or Mermaid) and write the result as JSON."""
    leveled = _level_file(input_file, root, require_all=strict,
                          max_corrections=max_corrections)
    data = leveled.to_dict(row_format=row_format,
                           include_unreachable=not omit_unreachable)
    text = json.dumps(data, indent=2) + "\n"

    if output is None:
        click.echo(text, nl=False)
        return

    output.write_text(text)
    click.echo(f"Leveled {len(leveled.rows())} nodes into "
               f"{len(leveled.by_row())} rows -> {output}", err=True)


@cli.command()
@click.argument("input_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@root_option
def validate(input_file: Path, root: str) -> None:
    """Check that a graph can be leveled from the given root."""
    leveled = _level_file(input_file, root)

    if leveled.unreachable:
        click.echo(f"Unreachable: {', '.join(leveled.unreachable)}", err=True)

    click.echo(f"Valid: {len(leveled.nodes)} nodes, "
               f"{len(leveled.edges)} edges, "
               f"{len(leveled.by_row())} rows, "
               f"{len(leveled.unreachable)} unreachable")


@cli.command()
@click.argument("input_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@root_option
def info(input_file: Path, root: str) -> None:
    """Show the rows of a leveled graph."""
    leveled = _level_file(input_file, root)

    click.echo(f"Root: {leveled.root}")
    click.echo(f"Nodes: {len(leveled.nodes)}")
    click.echo(f"Edges: {len(leveled.edges)}")
    rows = leveled.by_row()
    click.echo(f"Rows: {len(rows)}")
    for row, names in rows.items():
        click.echo(f"  [{row}] {', '.join(names)}")
    if leveled.unreachable:
        click.echo(f"Unreachable: {', '.join(leveled.unreachable)}")
