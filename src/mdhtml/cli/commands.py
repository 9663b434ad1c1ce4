"""CLI command implementations"""

import logging
from pathlib import Path
from typing import Annotated, Optional

import typer

from mdhtml.config import Settings, load_config
from mdhtml.core.pipeline import convert, run_convert, tokenize
from mdhtml.util.fs import read_lines


Verbose = Annotated[bool, typer.Option("--verbose", help="Enable debug logging")]


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(overrides: dict = None) -> Settings:
    """Load config with standard CLI error handling."""
    try:
        return load_config(overrides=overrides)
    except ValueError as e:
        _fail("Invalid configuration", e)


def _setup_logging(settings: Settings, verbose: bool) -> None:
    """Attach a timestamped stderr handler and set the mdhtml logger level."""
    logging.basicConfig(
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    logging.getLogger("mdhtml").setLevel(logging.DEBUG if verbose else settings.log_level)


def _read(src: Path, encoding: str) -> list[str]:
    try:
        return read_lines(src, encoding)
    except (OSError, LookupError, UnicodeDecodeError) as e:
        _fail(f"Could not read {src}", e)


def convert_cmd(
    src: Annotated[Optional[str], typer.Argument(help="Markdown file to convert")] = None,
    out: Annotated[Optional[str], typer.Option("--out", "-o", help="Output HTML file")] = None,
    encoding: Annotated[Optional[str], typer.Option("--encoding", help="Input/output text encoding")] = None,
    verbose: Verbose = False,
    ):
    """Convert a markdown file to HTML, one output line per token."""
    settings = _settings(overrides={"input_path": src, "output_path": out, "encoding": encoding})
    _setup_logging(settings, verbose)
    src_path, dest_path = Path(settings.input_path), Path(settings.output_path)

    try:
        written = run_convert(src_path, dest_path, settings.encoding)
    except RuntimeError as e:
        _fail(str(e))
    typer.echo(f"  {src_path} -> {dest_path}")
    typer.echo(f"Converted {src_path} ({written} bytes written)")


def tokens_cmd(
    src: Annotated[Optional[str], typer.Argument(help="Markdown file to tokenize")] = None,
    encoding: Annotated[Optional[str], typer.Option("--encoding", help="Input text encoding")] = None,
    verbose: Verbose = False,
    ):
    """Print the grouped token stream of a markdown file, one token per line."""
    settings = _settings(overrides={"input_path": src, "encoding": encoding})
    _setup_logging(settings, verbose)
    for token in tokenize(_read(Path(settings.input_path), settings.encoding)):
        typer.echo(repr(token))


def render_cmd(
    lines: Annotated[list[str], typer.Argument(help="Markdown lines to convert")],
    verbose: Verbose = False,
    ):
    """Convert markdown lines given as arguments and print the HTML."""
    _setup_logging(_settings(), verbose)
    for html in convert(lines):
        typer.echo(html)
