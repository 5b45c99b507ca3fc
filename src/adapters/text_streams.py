"""Adaptadores sobre streams de texto (consola, archivos, `io.StringIO`).

Por qué un único adaptador genérico:
- `sys.stdin`, un archivo abierto en modo texto y un `StringIO` comparten la
  misma API (`read(n)` / `write(s)`), así que una clase cubre todos los casos.
- Implementan `core.interfaces.streams` sin que el Core conozca `TextIO`.

Nota: los streams son prestados; estos adaptadores nunca los cierran.
"""

from __future__ import annotations

from typing import Sequence, TextIO

from core.domain.errors import SourceExhaustedError
from core.interfaces.streams import CharacterDestination, CharacterSource


class TextStreamSource(CharacterSource):
    """Lee caracteres de un stream de texto."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream

    def read_char(self) -> str:
        character = self._stream.read(1)
        if not character:
            raise SourceExhaustedError("end of input reached before a newline")
        return character

    def read_chars(self, max_count: int) -> Sequence[str]:
        return list(self._stream.read(max_count))


class TextStreamDestination(CharacterDestination):
    """Escribe caracteres en un stream de texto, una llamada `write` por operación."""

    def __init__(self, stream: TextIO, *, flush: bool = False) -> None:
        self._stream = stream
        self._flush = flush

    def write_char(self, character: str) -> None:
        self._write(character)

    def write_chars(self, characters: Sequence[str]) -> None:
        self._write("".join(characters))

    def _write(self, text: str) -> None:
        self._stream.write(text)
        if self._flush:
            self._stream.flush()
