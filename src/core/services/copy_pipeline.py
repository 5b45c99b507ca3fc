"""Copy orchestration utilities.

This module keeps mode selection and bookkeeping out of the CLI layer. The
CLI builds a `CopyRequest`, hands over its adapters and receives a
`CopyResult`, which makes the flow reusable for other entry-points (batch
jobs, tests) and keeps presentation out of the core logic.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Sequence

from core.config import AppSettings
from core.domain.errors import (
    MAX_CHAR_COUNT_MESSAGE,
    MISSING_MAX_CHAR_COUNT_MESSAGE,
    SINGLE_MODE_MAX_CHAR_COUNT_MESSAGE,
    InvalidArgumentError,
)
from core.domain.modes import CopyMode
from core.interfaces.streams import CharacterDestination, CharacterSource
from core.services.copier import Copier

logger = logging.getLogger(__name__)


@dataclass
class CopyRequest:
    """Parameters that control a copy run."""

    mode: CopyMode = field(default_factory=CopyMode.default)
    max_char_count: int | None = None

    @classmethod
    def from_settings(
        cls,
        settings: AppSettings,
        *,
        mode: CopyMode | None = None,
        max_char_count: int | None = None,
    ) -> "CopyRequest":
        """Build a request from settings; explicit arguments win.

        An explicit `max_char_count` without an explicit mode selects
        `CopyMode.MULTIPLE`; together with an explicit `CopyMode.SINGLE` it
        is rejected instead of being ignored.
        """

        if max_char_count is not None:
            if mode is CopyMode.SINGLE:
                raise InvalidArgumentError(SINGLE_MODE_MAX_CHAR_COUNT_MESSAGE)
            mode = CopyMode.MULTIPLE
        if mode is None:
            mode = settings.mode
        if max_char_count is None:
            max_char_count = settings.max_char_count
        return cls(mode=mode, max_char_count=max_char_count)

    def validate(self) -> None:
        """Reject a request `run_copy` would refuse, without touching any stream."""

        if self.mode is not CopyMode.MULTIPLE:
            return
        if self.max_char_count is None:
            raise InvalidArgumentError(MISSING_MAX_CHAR_COUNT_MESSAGE)
        if self.max_char_count < 1:
            raise InvalidArgumentError(MAX_CHAR_COUNT_MESSAGE)


@dataclass
class CopyResult:
    """Output of a pipeline invocation."""

    mode: CopyMode
    reads: int = 0
    writes: int = 0
    characters_written: int = 0


class _CountingSource:
    def __init__(self, inner: CharacterSource, result: CopyResult) -> None:
        self._inner = inner
        self._result = result

    def read_char(self) -> str:
        character = self._inner.read_char()
        self._result.reads += 1
        return character

    def read_chars(self, max_count: int) -> Sequence[str]:
        characters = self._inner.read_chars(max_count)
        self._result.reads += 1
        return characters


class _CountingDestination:
    def __init__(self, inner: CharacterDestination, result: CopyResult) -> None:
        self._inner = inner
        self._result = result

    def write_char(self, character: str) -> None:
        self._inner.write_char(character)
        self._result.writes += 1
        self._result.characters_written += 1

    def write_chars(self, characters: Sequence[str]) -> None:
        self._inner.write_chars(characters)
        self._result.writes += 1
        self._result.characters_written += len(characters)


def run_copy(
    request: CopyRequest,
    source: CharacterSource,
    destination: CharacterDestination,
) -> CopyResult:
    """Run one copy according to `request` and report what happened.

    Errors raised by the source or destination propagate unchanged; the
    counters only reflect calls that completed.
    """

    request.validate()

    result = CopyResult(mode=request.mode)
    copier = Copier(_CountingSource(source, result), _CountingDestination(destination, result))

    if request.mode is CopyMode.MULTIPLE:
        copier.copy_multiple(request.max_char_count)
    else:
        copier.copy()

    logger.debug(
        "%s copy finished: %d reads, %d writes, %d characters",
        request.mode.label(),
        result.reads,
        result.writes,
        result.characters_written,
    )
    return result
