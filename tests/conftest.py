import pytest
from unittest.mock import MagicMock

from core.interfaces.streams import CharacterDestination, CharacterSource


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    """Keep settings away from the developer's env vars and project .env."""
    for name in ("MODE", "MAX_CHAR_COUNT", "ENCODING", "FLUSH_WRITES", "LOG_LEVEL"):
        monkeypatch.delenv(f"LINE_COPIER_{name}", raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def source() -> MagicMock:
    """A mocked character source; tests configure read_char/read_chars side effects."""
    return MagicMock(spec=CharacterSource)


@pytest.fixture
def destination() -> MagicMock:
    """A mocked character destination recording every write."""
    return MagicMock(spec=CharacterDestination)
