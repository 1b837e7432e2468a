"""CLI entry point for tix.

Invoked as::

    tix [OPTIONS] COMMAND [ARGS]...

or, during development::

    python -m tix.cli.main

Commands
--------
show        Render a .tix file with header, context, and Done styling
parse       Dump the parsed document structure to JSON or YAML
fold        List the foldable project ranges
contexts    List the contexts used in a file
done        Move an item into the Done section
sort        Sort every project's items by context
archive     Move Done items into the archive sidecar
version     Show version information

Line numbers on the command line are 1-based.
"""
from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.syntax import Syntax
from rich.table import Table
from rich.text import Text

if TYPE_CHECKING:
    from tix.config import TixConfig

console = Console()
err_console = Console(stderr=True)


def _read_source(path: str) -> str:
    """Read a .tix file without newline translation, exiting on error."""
    try:
        with open(path, encoding="utf-8", newline="") as fh:
            return fh.read()
    except FileNotFoundError:
        err_console.print(f"[red]Error:[/red] File not found: {path}")
        sys.exit(1)
    except OSError as exc:
        err_console.print(f"[red]Error:[/red] Cannot read {path}: {exc}")
        sys.exit(1)


def _write_source(path: str | Path, text: str, mode: str = "w") -> None:
    with open(path, mode, encoding="utf-8", newline="") as fh:
        fh.write(text)


def _restore_archive(path: Path, size: int | None) -> None:
    """Undo an append: truncate ``path`` to ``size``, or remove it if it was new."""
    if size is None:
        path.unlink(missing_ok=True)
        return
    with open(path, "r+b") as fh:
        fh.truncate(size)


def _config(ctx: click.Context) -> "TixConfig":
    from tix.config import TixConfig

    return ctx.obj if isinstance(ctx.obj, TixConfig) else TixConfig()


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


@click.group()
@click.version_option(package_name="tix")
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=False, dir_okay=False),
    default=None,
    help="YAML configuration file",
)
@click.option("--verbose", "-v", is_flag=True, default=False, help="Log debug output to stderr")
@click.pass_context
def cli(ctx: click.Context, config_path: str | None, verbose: bool) -> None:
    """Plain-text todo toolkit: view, fold, sort, complete, and archive .tix files."""
    from tix.config import TixConfig, load_config
    from tix.errors import ConfigError

    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(name)s: %(message)s",
            handlers=[RichHandler(console=err_console, show_time=False)],
        )

    if config_path is None:
        ctx.obj = TixConfig()
        return
    try:
        ctx.obj = load_config(config_path)
    except ConfigError as exc:
        err_console.print(f"[red]Config error:[/red] {exc}")
        sys.exit(1)


# ---------------------------------------------------------------------------
# version command
# ---------------------------------------------------------------------------


@cli.command(name="version")
def version_command() -> None:
    """Show detailed version information."""
    from tix import __version__

    table = Table(show_header=False, box=None)
    table.add_row("[bold]tix[/bold]", f"v{__version__}")
    table.add_row("Python", f"{sys.version_info.major}.{sys.version_info.minor}.{sys.version_info.micro}")
    table.add_row("Platform", sys.platform)
    console.print(table)


# ---------------------------------------------------------------------------
# show command
# ---------------------------------------------------------------------------


@cli.command(name="show")
@click.argument("file", type=click.Path(exists=False))
@click.pass_context
def show_command(ctx: click.Context, file: str) -> None:
    """Render a .tix file with its decorations.

    FILE is the path to the .tix file to display.
    """
    from tix.annotate import annotate
    from tix.colors import PROJECT_HEADER_COLOR, ContextColorMap
    from tix.document import parse

    config = _config(ctx)
    document = parse(_read_source(file))
    color_map = ContextColorMap(config.palette)
    annotations = annotate(document, color_map)

    rendered = [Text(raw) for raw in document.raw_lines()]
    for span in annotations.project_headers:
        rendered[span.line].stylize(f"bold {PROJECT_HEADER_COLOR}", span.start, span.end)
    for span in annotations.done_items:
        rendered[span.line].stylize("strike dim", span.start, span.end)
    for context, spans in annotations.contexts.items():
        color = color_map.palette[annotations.context_colors[context]]
        for span in spans:
            rendered[span.line].stylize(color, span.start, span.end)

    for line in rendered:
        console.print(line, soft_wrap=True)


# ---------------------------------------------------------------------------
# parse command
# ---------------------------------------------------------------------------


@cli.command(name="parse")
@click.argument("file", type=click.Path(exists=False))
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["json", "yaml"], case_sensitive=False),
    default="json",
    help="Structure output format",
)
@click.option("--output", "-o", default=None, help="Output file path (defaults to stdout)")
def parse_command(file: str, output_format: str, output: str | None) -> None:
    """Parse a .tix file and dump its structure.

    FILE is the path to the .tix file to parse.
    """
    from tix.document import parse
    from tix.document.serializer import DocumentSerializer

    document = parse(_read_source(file))
    serializer = DocumentSerializer()

    if output_format.lower() == "json":
        text = serializer.to_json(document, indent=2)
        lang = "json"
    else:
        text = serializer.to_yaml(document)
        lang = "yaml"

    if output:
        Path(output).write_text(text, encoding="utf-8")
        console.print(f"[green]Structure written to[/green] {output}")
    else:
        syntax = Syntax(text, lang, line_numbers=True)
        console.print(syntax)


# ---------------------------------------------------------------------------
# fold command
# ---------------------------------------------------------------------------


@cli.command(name="fold")
@click.argument("file", type=click.Path(exists=False))
def fold_command(file: str) -> None:
    """List foldable project ranges (1-based, inclusive).

    FILE is the path to the .tix file to inspect.
    """
    from tix.document import parse
    from tix.folding import folding_ranges

    document = parse(_read_source(file))
    ranges = folding_ranges(document)
    if not ranges:
        console.print(f"[dim]No foldable projects in {file}[/dim]")
        return

    table = Table(title=f"Folding: {file}")
    table.add_column("Project", style="bold")
    table.add_column("Start", justify="right")
    table.add_column("End", justify="right")
    for fold in ranges:
        title = document.line_at(fold.start).stripped
        table.add_row(Text(title), str(fold.start + 1), str(fold.end + 1))
    console.print(table)


# ---------------------------------------------------------------------------
# contexts command
# ---------------------------------------------------------------------------


@cli.command(name="contexts")
@click.argument("file", type=click.Path(exists=False))
@click.pass_context
def contexts_command(ctx: click.Context, file: str) -> None:
    """List the contexts used in a file with their colors and counts.

    FILE is the path to the .tix file to inspect.
    """
    from tix.annotate import annotate
    from tix.colors import ContextColorMap
    from tix.document import parse

    config = _config(ctx)
    color_map = ContextColorMap(config.palette)
    annotations = annotate(parse(_read_source(file)), color_map)
    if not annotations.contexts:
        console.print(f"[dim]No contexts in {file}[/dim]")
        return

    table = Table(title=f"Contexts: {file}")
    table.add_column("Context")
    table.add_column("Items", justify="right")
    table.add_column("Color")
    for context, spans in annotations.contexts.items():
        color = color_map.palette[annotations.context_colors[context]]
        table.add_row(Text(context, style=color), str(len(spans)), color)
    console.print(table)


# ---------------------------------------------------------------------------
# done command
# ---------------------------------------------------------------------------


@cli.command(name="done")
@click.argument("file", type=click.Path(exists=False))
@click.argument("line", type=click.IntRange(min=1))
@click.option("--in-place", is_flag=True, default=False, help="Rewrite the file in place")
def done_command(file: str, line: int, in_place: bool) -> None:
    """Move the item on LINE into the Done section.

    FILE is the path to the .tix file; LINE is 1-based.

    Without --in-place, prints the new document to stdout.
    """
    from tix.transforms import mark_done

    source = _read_source(file)
    result = mark_done(source, line - 1)

    if not in_place:
        click.echo(result, nl=False)
        return
    if result == source:
        err_console.print(f"[yellow]Nothing to do:[/yellow] line {line} is not an item")
        return
    _write_source(file, result)
    console.print(f"[green]Marked done[/green] {file}:{line}")


# ---------------------------------------------------------------------------
# sort command
# ---------------------------------------------------------------------------


@cli.command(name="sort")
@click.argument("file", type=click.Path(exists=False))
@click.option("--check", is_flag=True, default=False, help="Check if file is already sorted")
@click.option("--in-place", is_flag=True, default=False, help="Rewrite the file in place")
def sort_command(file: str, check: bool, in_place: bool) -> None:
    """Sort the items of every project by context.

    FILE is the path to the .tix file to sort.

    Without --check or --in-place, prints the sorted document to stdout.
    """
    from tix.transforms import sort_by_context

    source = _read_source(file)
    result = sort_by_context(source)

    if check:
        if result == source:
            console.print(f"[green]OK[/green] {file} — already sorted")
            sys.exit(0)
        console.print(f"[yellow]NEEDS SORTING[/yellow] {file}")
        sys.exit(1)
    elif in_place:
        _write_source(file, result)
        console.print(f"[green]Sorted[/green] {file}")
    else:
        click.echo(result, nl=False)


# ---------------------------------------------------------------------------
# archive command
# ---------------------------------------------------------------------------


@cli.command(name="archive")
@click.argument("file", type=click.Path(exists=False))
@click.option("--dry-run", is_flag=True, default=False, help="Print the archive block without writing")
@click.pass_context
def archive_command(ctx: click.Context, file: str, dry_run: bool) -> None:
    """Move the Done section's items into the archive sidecar.

    FILE is the path to the .tix file. The block is appended to
    FILE plus the configured suffix (".archive" by default).
    """
    from tix.errors import ArchiveNotice
    from tix.transforms import extract_archive

    config = _config(ctx)
    source = _read_source(file)
    try:
        result = extract_archive(source)
    except ArchiveNotice as notice:
        console.print(f"[blue]{notice}[/blue]")
        return

    archive_path = config.archive_path(file)
    if dry_run:
        click.echo(result.block, nl=False)
        return

    previous_size = archive_path.stat().st_size if archive_path.exists() else None
    try:
        _write_source(archive_path, result.block, mode="a")
    except OSError as exc:
        err_console.print(f"[red]Error:[/red] Cannot append to {archive_path}: {exc}")
        sys.exit(1)
    try:
        _write_source(file, result.remaining_text)
    except OSError as exc:
        # FILE still holds the items; drop the appended block.
        _restore_archive(archive_path, previous_size)
        err_console.print(f"[red]Error:[/red] Cannot rewrite {file}: {exc}")
        sys.exit(1)
    console.print(f"Archived {result.count} items to {archive_path.name}")


if __name__ == "__main__":
    cli()
