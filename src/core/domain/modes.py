"""Copy modes supported by line-copier.

This module centralizes the mode options so that settings, the pipeline and
the CLI share a single source of truth.
"""

from __future__ import annotations

from enum import Enum


class CopyMode(str, Enum):
    """How characters are pulled from the source."""

    SINGLE = "single"
    MULTIPLE = "multiple"

    @classmethod
    def default(cls) -> "CopyMode":
        """Return the default mode used across the application."""

        return cls.SINGLE

    def label(self) -> str:
        """Human readable label for tables and logging."""

        return "chunked" if self is CopyMode.MULTIPLE else "single-character"
