"""Copia de caracteres hasta el final de línea.

Por qué un servicio aparte:
- Es la única pieza con comportamiento no trivial (detección de salto de
  línea, truncado de bloques y condiciones de parada).
- Solo depende de los contratos `CharacterSource`/`CharacterDestination`,
  nunca de una implementación concreta.

Nota:
- Ambos modos son bucles explícitos: una línea larga no consume pila.
"""

from __future__ import annotations

import logging
from typing import Sequence

from core.domain.errors import MAX_CHAR_COUNT_MESSAGE, InvalidArgumentError
from core.interfaces.streams import CharacterDestination, CharacterSource

logger = logging.getLogger(__name__)

NEWLINE = "\n"


def _writable_characters(characters: Sequence[str]) -> Sequence[str]:
    """Recorta el bloque justo antes del primer salto de línea (si lo hay)."""

    if NEWLINE not in characters:
        return characters
    return characters[: characters.index(NEWLINE)]


class Copier:
    """Copia caracteres de una fuente a un destino, parando en el salto de línea.

    Invariantes:
    - Nunca escribe `"\\n"` en el destino.
    - Nunca escribe más allá del primer salto de línea de un bloque.
    """

    def __init__(self, source: CharacterSource, destination: CharacterDestination) -> None:
        self._source = source
        self._destination = destination

    def copy(self) -> None:
        """Copia carácter a carácter hasta leer un salto de línea (que no se escribe)."""

        written = 0
        while True:
            character = self._source.read_char()
            if character == NEWLINE:
                break
            self._destination.write_char(character)
            written += 1
        logger.debug("copy: newline reached after %d characters", written)

    def copy_multiple(self, max_char_count: int) -> None:
        """Copia por bloques de hasta `max_char_count` caracteres.

        Paradas:
        - bloque vacío (fin de la fuente) o que empieza por salto de línea: sin escritura;
        - bloque con salto de línea: se escribe lo anterior y se termina;
        - bloque corto: se escribe y se termina.
        Solo un bloque completo sin salto de línea provoca otra lectura.
        """

        if max_char_count < 1:
            raise InvalidArgumentError(MAX_CHAR_COUNT_MESSAGE)

        while True:
            characters = self._source.read_chars(max_char_count)
            if not characters:
                logger.debug("copy_multiple: empty read, stopping")
                return
            if characters[0] == NEWLINE:
                logger.debug("copy_multiple: chunk starts with newline, stopping")
                return

            characters = _writable_characters(characters)
            self._destination.write_chars(characters)

            if len(characters) != max_char_count:
                logger.debug(
                    "copy_multiple: wrote %d of %d characters, stopping",
                    len(characters),
                    max_char_count,
                )
                return
