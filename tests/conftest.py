"""
Pytest configuration for envelope tests.

Every test gets a pristine copy of ``os.environ`` back when it finishes,
so loads into the real process environment never leak between tests.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Callable, Dict, Generator, List, Optional

import pytest

# Fixture files shared across the loader tests.
ENV_FILES: Dict[str, List[str]] = {
    ".env": ["HELLO=WORLD", "FOO=BAR", "BOBBY=JOEY"],
    ".legendEnv": ["BOXER=ALI", "MMA=LEE"],
    ".otherEnv": ["FOO=BAZ"],
    ".blankEnv": ["USER="],
    ".invalidEnv": ["SPECIAL_TACTICS"],
}


@pytest.fixture(autouse=True)
def restore_environ() -> Generator[None, None, None]:
    """Snapshot the process environment and restore it after each test."""
    snapshot = dict(os.environ)
    yield
    os.environ.clear()
    os.environ.update(snapshot)


@pytest.fixture
def write_env(tmp_path: Path) -> Callable[..., Path]:
    """Return a factory that writes lines to ``tmp_path/<name>``."""

    def _write(name: str, lines: Optional[List[str]] = None, *, content: Optional[str] = None) -> Path:
        path = tmp_path / name
        if content is None:
            if lines is None:
                lines = ENV_FILES[name]
            content = "".join(f"{line}\n" for line in lines)
        path.write_bytes(content.encode("utf-8"))
        return path

    return _write
