"""
Exceptions raised while loading environment definition files.

Only two conditions are reported by the library itself; every other I/O
problem surfaces as the builtin ``OSError`` raised by ``open()``.
"""

from __future__ import annotations

import os
from typing import Union

PathLike = Union[str, "os.PathLike[str]"]


class EnvelopeError(Exception):
    """Base exception for all envelope errors."""

    pass


class EnvFileNotFoundError(EnvelopeError, FileNotFoundError):
    """Raised when an environment definition file does not exist."""

    def __init__(self, path: PathLike):
        self.path = os.fspath(path)
        super().__init__(f"No {self.path} file exists.")


class MalformedLineError(EnvelopeError, ValueError):
    """Raised when a line does not match the ``KEY=VALUE`` grammar."""

    def __init__(self, path: PathLike, line_number: int, line: str):
        self.path = os.fspath(path)
        self.line_number = line_number
        self.line = line
        super().__init__(f"{self.path}:{line_number}: Found invalid data: {line}.")


__all__ = [
    "EnvelopeError",
    "EnvFileNotFoundError",
    "MalformedLineError",
]
