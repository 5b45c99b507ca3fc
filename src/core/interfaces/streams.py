"""Contratos de fuente y destino de caracteres.

Por qué Protocol:
- Define un contrato estructural (duck typing) sin herencia rígida.
- Permite que adaptadores (consola, archivos, buffers, sockets) sean
  intercambiables y testeables sin acoplar el Core a implementaciones concretas.
"""

from __future__ import annotations

from typing import Protocol, Sequence, runtime_checkable


@runtime_checkable
class CharacterSource(Protocol):
    """Produce caracteres bajo demanda.

    Reglas de diseño:
    - Las lecturas son bloqueantes y síncronas.
    - Los errores de lectura se propagan al llamador tal cual.
    """

    def read_char(self) -> str:
        """Devuelve exactamente un carácter o lanza si no hay ninguno disponible."""

        ...

    def read_chars(self, max_count: int) -> Sequence[str]:
        """Devuelve hasta `max_count` caracteres; una secuencia vacía indica fin."""

        ...


@runtime_checkable
class CharacterDestination(Protocol):
    """Acepta caracteres; cada escritura es un efecto observable en orden."""

    def write_char(self, character: str) -> None:
        ...

    def write_chars(self, characters: Sequence[str]) -> None:
        ...
