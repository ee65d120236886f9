"""CLI entry point for monkey-syntax.

Invoked as::

    monkey-syntax [OPTIONS] COMMAND [ARGS]...

or, during development::

    python -m monkey.cli.main

Commands
--------
parse       Parse a Monkey file and print the canonical form or the AST
tokens      Show the token stream of a Monkey file
grammar     Print the reference grammar
version     Show version information
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

if TYPE_CHECKING:
    from monkey.ast.nodes import Program

console = Console()
err_console = Console(stderr=True)


def _configure_logging(verbose: bool) -> None:
    """Route library log records through Rich on stderr."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


def _read_source(path: str) -> str:
    """Read a Monkey source file (``-`` for stdin), exiting on error."""
    if path == "-":
        return sys.stdin.read()
    try:
        return Path(path).read_text(encoding="utf-8")
    except FileNotFoundError:
        err_console.print(f"[red]Error:[/red] File not found: {path}")
        sys.exit(1)
    except OSError as exc:
        err_console.print(f"[red]Error:[/red] Cannot read {path}: {exc}")
        sys.exit(1)


def _parse_or_exit(source: str, path: str, strict_integers: bool) -> "Program":
    """Parse Monkey source, printing every diagnostic and exiting on failure."""
    from monkey.parser import parse_with_errors

    program, errors = parse_with_errors(source, report_invalid_integers=strict_integers)
    if errors:
        err_console.print(f"[red]Parse errors[/red] in {path}:")
        for error in errors:
            err_console.print(f"  {error}", markup=False)
        sys.exit(1)
    return program


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


@click.group()
@click.version_option(package_name="monkey-syntax")
@click.option("--verbose", "-v", is_flag=True, default=False, help="Enable debug logging")
def cli(verbose: bool) -> None:
    """Monkey language front end: lexer, parser, and AST tools."""
    _configure_logging(verbose)


# ---------------------------------------------------------------------------
# version command
# ---------------------------------------------------------------------------


@cli.command(name="version")
def version_command() -> None:
    """Show detailed version information."""
    from monkey import __version__

    table = Table(show_header=False, box=None)
    table.add_row("[bold]monkey-syntax[/bold]", f"v{__version__}")
    table.add_row("Python", f"{sys.version_info.major}.{sys.version_info.minor}.{sys.version_info.micro}")
    table.add_row("Platform", sys.platform)
    console.print(table)


# ---------------------------------------------------------------------------
# grammar command
# ---------------------------------------------------------------------------


@cli.command(name="grammar")
def grammar_command() -> None:
    """Print the reference grammar in EBNF notation."""
    from monkey.grammar import FULL_GRAMMAR

    console.print(FULL_GRAMMAR, markup=False, highlight=False)


# ---------------------------------------------------------------------------
# tokens command
# ---------------------------------------------------------------------------


@cli.command(name="tokens")
@click.argument("file", type=click.Path(exists=False, allow_dash=True))
def tokens_command(file: str) -> None:
    """Show the token stream of a Monkey file.

    FILE is the path to the source file, or - for stdin.
    """
    from monkey.lexer import tokenize

    source = _read_source(file)

    table = Table(title=f"Tokens: {file}")
    table.add_column("Location", min_width=8)
    table.add_column("Type", style="bold")
    table.add_column("Literal")
    for token in tokenize(source):
        style = "red" if token.type.name == "ILLEGAL" else ""
        table.add_row(f"{token.line}:{token.col}", token.type.name, repr(token.literal), style=style)
    console.print(table)


# ---------------------------------------------------------------------------
# parse command
# ---------------------------------------------------------------------------


@cli.command(name="parse")
@click.argument("file", type=click.Path(exists=False, allow_dash=True))
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["text", "json", "yaml"], case_sensitive=False),
    default="text",
    help="Output format: canonical text, or the AST as json/yaml",
)
@click.option("--output", "-o", default=None, help="Output file path (defaults to stdout)")
@click.option(
    "--strict-integers",
    is_flag=True,
    default=False,
    help="Report out-of-range integer literals as errors",
)
def parse_command(file: str, output_format: str, output: str | None, strict_integers: bool) -> None:
    """Parse a Monkey file.

    FILE is the path to the source file, or - for stdin.  Exits with
    status 1 if any parse errors were recorded.
    """
    from monkey.ast import AstSerializer
    from monkey.formatter import format_program

    source = _read_source(file)
    program = _parse_or_exit(source, file, strict_integers)

    output_format = output_format.lower()
    if output_format == "text":
        text = format_program(program)
    elif output_format == "json":
        text = AstSerializer().to_json(program, indent=2)
    else:
        text = AstSerializer().to_yaml(program)

    if output:
        Path(output).write_text(text + ("" if text.endswith("\n") else "\n"), encoding="utf-8")
        console.print(f"[green]Output written to[/green] {output}")
    elif output_format == "text":
        click.echo(text)
    else:
        console.print(Syntax(text, output_format, line_numbers=False))


if __name__ == "__main__":
    cli()
