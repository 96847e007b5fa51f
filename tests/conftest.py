"""Shared pytest fixtures for raise-hand tests."""

import logging
from collections.abc import Callable, Iterator
from pathlib import Path

import pytest
import structlog


@pytest.fixture(autouse=True)
def reset_logging() -> Iterator[None]:
    """Undo logging configuration done by CLI invocations."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    for handler in list(root.handlers):
        if handler not in handlers:
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)
    structlog.reset_defaults()


@pytest.fixture
def notes_dir(tmp_path: Path) -> Path:
    """Provides an empty notes vault directory."""
    vault = tmp_path / "vault"
    vault.mkdir()
    return vault


@pytest.fixture
def output_dir(tmp_path: Path) -> Path:
    """Provides a (not yet created) output directory path."""
    return tmp_path / "site" / "data"


@pytest.fixture
def write_note(notes_dir: Path) -> Callable[[str, str], Path]:
    """Returns a helper writing a note (relative path, content) into the vault."""

    def _write(relative_path: str, content: str) -> Path:
        path = notes_dir / relative_path
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8", newline="")
        return path

    return _write
