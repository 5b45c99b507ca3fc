"""Errores del dominio.

Por qué clases propias:
- La CLI distingue errores del llamador (argumentos) de fin de entrada.
- Heredan de built-ins (`ValueError`, `EOFError`) para que el código que no
  conoce este paquete los siga capturando de forma natural.
"""

from __future__ import annotations

MAX_CHAR_COUNT_MESSAGE = "maximum character count must not be less than 1"
MISSING_MAX_CHAR_COUNT_MESSAGE = "maximum character count is required in multiple mode"
SINGLE_MODE_MAX_CHAR_COUNT_MESSAGE = "maximum character count only applies to multiple mode"


class InvalidArgumentError(ValueError):
    """Argumento inválido del llamador (p.ej. tamaño de bloque < 1)."""


class SourceExhaustedError(EOFError):
    """La fuente no puede producir más caracteres."""
