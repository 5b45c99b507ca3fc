"""Command-line entry point (Typer).

The CLI only wires things together: it reads `AppSettings`, opens the
streams, builds adapters and delegates to `core.services.copy_pipeline`.
Error formatting for humans lives here and nowhere else.
"""

from __future__ import annotations

import logging
import sys
from contextlib import ExitStack
from pathlib import Path
from typing import Optional

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.logging import RichHandler

from adapters.text_streams import TextStreamDestination, TextStreamSource
from cli import doctor
from cli.ui_components import build_result_table
from core.config import AppSettings
from core.domain.errors import InvalidArgumentError, SourceExhaustedError
from core.domain.modes import CopyMode
from core.services.copy_pipeline import CopyRequest, run_copy

app = typer.Typer(
    no_args_is_help=True,
    help="Copy characters from an input to an output, stopping at the end of the line.",
)
app.add_typer(doctor.app, name="doctor")

_err_console = Console(stderr=True)


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        handlers=[RichHandler(console=_err_console, show_path=False)],
        force=True,
    )


@app.command("copy")
def copy_line(
    input_path: Optional[Path] = typer.Option(
        None,
        "--input",
        "-i",
        exists=True,
        dir_okay=False,
        help="Read from this file instead of stdin.",
    ),
    output_path: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        dir_okay=False,
        help="Write to this file instead of stdout.",
    ),
    mode: Optional[CopyMode] = typer.Option(
        None,
        "--mode",
        "-m",
        case_sensitive=False,
        help="single (one character per read) or multiple (chunked reads).",
    ),
    max_chars: Optional[int] = typer.Option(
        None,
        "--max-chars",
        "-n",
        help="Maximum characters per read; implies --mode multiple (not allowed with --mode single).",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging and a summary on stderr."),
) -> None:
    """Copy the first line of the input (without its newline) to the output."""

    try:
        settings = AppSettings()
    except ValidationError as exc:
        _err_console.print(f"[red]Invalid configuration:[/red] {escape(str(exc))}")
        raise typer.Exit(code=2) from exc
    _configure_logging("DEBUG" if verbose else settings.log_level)

    # Validate before opening the output: "w" truncates an existing file.
    try:
        request = CopyRequest.from_settings(settings, mode=mode, max_char_count=max_chars)
        request.validate()
    except InvalidArgumentError as exc:
        raise typer.BadParameter(str(exc), param_hint="--max-chars") from exc

    with ExitStack() as stack:
        if input_path is not None:
            in_stream = stack.enter_context(input_path.open("r", encoding=settings.encoding))
        else:
            in_stream = sys.stdin
        if output_path is not None:
            out_stream = stack.enter_context(output_path.open("w", encoding=settings.encoding))
        else:
            out_stream = sys.stdout

        source = TextStreamSource(in_stream)
        destination = TextStreamDestination(
            out_stream,
            flush=settings.flush_writes and output_path is None,
        )

        try:
            result = run_copy(request, source, destination)
        except SourceExhaustedError as exc:
            _err_console.print(f"[red]Input ended:[/red] {exc}")
            raise typer.Exit(code=1) from exc

    if verbose:
        _err_console.print(build_result_table(result))


def run() -> None:
    app()


if __name__ == "__main__":
    run()
