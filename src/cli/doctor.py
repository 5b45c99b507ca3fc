"""Doctor command for environment diagnostics."""

from __future__ import annotations

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape

from cli.ui_components import build_settings_table
from core.config import ENV_PREFIX, AppSettings, get_user_env_file, write_user_env_vars
from core.domain.modes import CopyMode

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


def _load_settings() -> AppSettings:
    try:
        return AppSettings()
    except ValidationError as exc:
        Console(stderr=True).print(f"[red]Invalid configuration:[/red] {escape(str(exc))}")
        raise typer.Exit(code=2) from exc


@app.command()
def run() -> None:
    """Show the effective settings and where the user config lives."""

    settings = _load_settings()
    env_path = get_user_env_file()
    _console.print(build_settings_table(settings, env_path))

    if not env_path.exists():
        _console.print(
            "\n[yellow]Note:[/yellow] No user config yet. Run `doctor configure` to store defaults."
        )


@app.command()
def configure() -> None:
    """Interactive setup (stores defaults in the user config .env)."""

    settings = _load_settings()

    mode = typer.prompt(
        "Default mode",
        default=settings.mode.value,
        show_default=True,
    ).strip().lower()
    try:
        mode = CopyMode(mode).value
    except ValueError:
        raise typer.BadParameter(f"unknown mode {mode!r} (expected single or multiple)") from None

    max_char_count = typer.prompt("Max characters per read", default=settings.max_char_count, type=int)
    if max_char_count < 1:
        raise typer.BadParameter("max characters per read must be at least 1")

    encoding = typer.prompt("Encoding", default=settings.encoding, show_default=True).strip()

    env_path = write_user_env_vars(
        {
            f"{ENV_PREFIX}MODE": mode,
            f"{ENV_PREFIX}MAX_CHAR_COUNT": str(max_char_count),
            f"{ENV_PREFIX}ENCODING": encoding or None,
        }
    )

    _console.print(f"[green]Saved config to:[/green] {env_path}")
