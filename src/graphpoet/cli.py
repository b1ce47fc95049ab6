from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from graphpoet.core.config import Config
from graphpoet.core.exceptions import ConfigurationError, ResourceError
from graphpoet.core.poet import AffinityPoetEngine


app = typer.Typer(help="Generate bridge-word poems from a corpus affinity graph.", no_args_is_help=True)
console = Console()


def setup_logging(config: Config, debug: bool = False, verbose: bool = False) -> None:
    """Setup logging; --debug and --verbose override the configured level"""

    if debug:
        log_level = logging.DEBUG
    elif verbose:
        log_level = logging.INFO
    else:
        log_level = getattr(logging, str(config.get('logging.level', 'WARNING')).upper(), logging.WARNING)

    logging.basicConfig(
        level=log_level,
        format=config.get('logging.format', '%(asctime)s - %(name)s - %(levelname)s - %(message)s'),
        datefmt='%H:%M:%S'
    )
    logging.getLogger('graphpoet').setLevel(log_level)


def _load_engine(config: Config, corpus: Optional[Path]) -> AffinityPoetEngine:
    path = corpus or config.get('corpus.path')
    if not path:
        typer.echo("Error: no corpus given; pass --corpus or set GRAPHPOET_CORPUS", err=True)
        raise typer.Exit(code=2)
    try:
        return AffinityPoetEngine.from_file(path, encoding=config.get('corpus.encoding', 'utf-8'))
    except ResourceError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1)


@app.callback()
def main(
    ctx: typer.Context,
    config: Optional[Path] = typer.Option(None, "--config", help="Path to a YAML config file"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log at INFO level"),
    debug: bool = typer.Option(False, "--debug", help="Log at DEBUG level"),
) -> None:
    """Word affinity poetry."""
    try:
        settings = Config(str(config) if config else None)
    except ConfigurationError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=2)
    setup_logging(settings, debug=debug, verbose=verbose)
    ctx.obj = settings


@app.command()
def poem(
    ctx: typer.Context,
    text: Optional[List[str]] = typer.Argument(None, help="Input words; reads stdin lines when omitted"),
    corpus: Optional[Path] = typer.Option(None, "--corpus", "-c", help="Corpus text file"),
) -> None:
    """Insert bridge words into the input text."""

    engine = _load_engine(ctx.obj, corpus)
    if text:
        typer.echo(engine.poem(" ".join(text)))
        return
    for line in sys.stdin:
        typer.echo(engine.poem(line))


@app.command()
def graph(
    ctx: typer.Context,
    corpus: Optional[Path] = typer.Option(None, "--corpus", "-c", help="Corpus text file"),
    limit: Optional[int] = typer.Option(None, "--limit", min=1, help="Show only the heaviest N edges"),
    plain: bool = typer.Option(False, "--plain", help="Print one line per vertex instead of a table"),
) -> None:
    """Show the affinity graph derived from the corpus."""

    engine = _load_engine(ctx.obj, corpus)
    if plain:
        typer.echo(engine.describe())
        return

    edges = [
        (source, target, weight)
        for source in engine.vertices()
        for target, weight in engine.targets(source).items()
    ]
    edges.sort(key=lambda edge: (-edge[2], edge[0], edge[1]))
    if limit is not None:
        edges = edges[:limit]

    table = Table(title=f"Affinity graph ({len(engine.vertices())} vertices)", show_lines=False)
    table.add_column("Source")
    table.add_column("Target")
    table.add_column("Weight", justify="right")
    for source, target, weight in edges:
        table.add_row(escape(source), escape(target), str(weight))
    console.print(table)


if __name__ == "__main__":
    app()
