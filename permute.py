"""permute CLI: build a Keyword-In-Context (permuted) index from a text file.

Uses typer for argument parsing and rich for tables, errors and logging.
"""

from __future__ import annotations

import logging

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from kwic.config import load_config, validate_config
from kwic.engine import build_records
from kwic.errors import KwicError
from kwic.loader import load_lines, load_stop_words
from kwic.output import RENDERERS, render_table, write_output

app = typer.Typer(help="permute: Keyword-In-Context index builder.")
console = Console()
err_console = Console(stderr=True)

logger = logging.getLogger("permute")


def setup_logging(verbose: bool = False) -> None:
    """Send log records to stderr through rich; stdout carries only results."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


def _fail(errors: list[str], title: str) -> None:
    err_console.print(f"[bold red]✗ {title}[/bold red]")
    for err in errors:
        err_console.print(f"  [red]✗[/red] {escape(err)}", highlight=False)
    raise typer.Exit(code=1)


@app.command()
def index(
    input_file: str = typer.Argument(..., help="Text file to index, one record per line"),
    stop_words: str | None = typer.Option(
        None, "--stop-words", "-s", help="Stop-word file, one word per line"
    ),
    case_sensitive: bool | None = typer.Option(
        None,
        "--case-sensitive/--case-insensitive",
        "-c/-i",
        help="Treat 'The' and 'the' as different keywords",
    ),
    output: str | None = typer.Option(
        None, "--output", "-o", help="Write results to this file instead of stdout"
    ),
    emit: str | None = typer.Option(
        None, "--emit", help="'normalized' (lower-case output) or 'original' casing"
    ),
    fmt: str | None = typer.Option(None, "--format", "-f", help="text, json or table"),
    config_path: str | None = typer.Option(None, "--config", help="Path to run config JSON"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log progress to stderr"),
):
    """Index every non-stop-word of INPUT_FILE with its rotated line as context."""
    setup_logging(verbose)

    config, errors = load_config(config_path)
    if errors:
        _fail(errors, "Invalid config")

    overrides = {
        "stop_words": stop_words,
        "case_sensitive": case_sensitive,
        "output": output,
        "emit": emit,
        "format": fmt,
    }
    config.update({k: v for k, v in overrides.items() if v is not None})

    errors = validate_config(config)
    if errors:
        _fail(errors, "Invalid options")

    try:
        lines = load_lines(input_file)
        stop_set = load_stop_words(config["stop_words"])
        records = build_records(
            lines,
            stop_set,
            case_sensitive=config["case_sensitive"],
            emit=config["emit"],
        )

        if config["format"] == "table":
            console.print(render_table(records, title=escape(input_file)))
            return

        rendered = RENDERERS[config["format"]](records)
        if config["output"]:
            write_output(rendered, config["output"])
            logger.info("Wrote %d records to %s", len(records), config["output"])
        else:
            typer.echo(rendered, nl=False)
    except KwicError as e:
        _fail([str(e)], "Indexing failed")


if __name__ == "__main__":
    app()
