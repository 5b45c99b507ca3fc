"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- Permite reutilizar tablas en múltiples comandos (copy, doctor).
"""

from __future__ import annotations

from pathlib import Path

from rich.table import Table

from core.config import AppSettings
from core.services.copy_pipeline import CopyResult


def build_settings_table(settings: AppSettings, env_path: Path) -> Table:
    """Tabla con la configuración efectiva."""

    table = Table(title="line-copier doctor")
    table.add_column("Setting", style="bright_green", no_wrap=True)
    table.add_column("Value", style="white")

    table.add_row("mode", settings.mode.value)
    table.add_row("max_char_count", str(settings.max_char_count))
    table.add_row("encoding", settings.encoding)
    table.add_row("flush_writes", str(settings.flush_writes))
    table.add_row("log_level", settings.log_level)
    table.add_row("user config", f"{env_path} ({'found' if env_path.exists() else 'missing'})")
    return table


def build_result_table(result: CopyResult) -> Table:
    """Resumen de una copia."""

    table = Table(title="Copy summary")
    table.add_column("Mode", style="cyan", no_wrap=True)
    table.add_column("Reads", style="white", justify="right")
    table.add_column("Writes", style="white", justify="right")
    table.add_column("Characters", style="green", justify="right")
    table.add_row(
        result.mode.label(),
        str(result.reads),
        str(result.writes),
        str(result.characters_written),
    )
    return table
