"""
Targets the loader writes parsed pairs into.

The loader never touches ``os.environ`` directly; it goes through an
``Environment`` so callers (and tests) can point it at an isolated mapping.
"""

from __future__ import annotations

import os
from typing import (
    Dict,
    Iterator,
    Mapping,
    MutableMapping,
    Optional,
    Protocol,
    Union,
    runtime_checkable,
)


@runtime_checkable
class Environment(Protocol):
    """Interface every load target must satisfy."""

    def get(self, key: str, default: Optional[str] = None) -> Optional[str]:
        """Return the current value for ``key`` or ``default``."""
        ...

    def set(self, key: str, value: str) -> None:
        """Insert or overwrite ``key``."""
        ...


class ProcessEnvironment:
    """The real process environment, inherited by child processes."""

    def get(self, key: str, default: Optional[str] = None) -> Optional[str]:
        return os.environ.get(key, default)

    def set(self, key: str, value: str) -> None:
        os.environ[key] = value

    def __repr__(self) -> str:
        return "ProcessEnvironment()"


class MemoryEnvironment:
    """
    Mapping-backed environment for tests and dry runs.

    Example:
        >>> env = MemoryEnvironment({"HOME": "/root"})
        >>> load("settings.env", environ=env)
        >>> env.as_dict()
        {'HOME': '/root', 'DEBUG': 'true'}

    When given a mutable mapping the instance writes straight into it, so a
    caller-owned ``dict`` sees every update.
    """

    def __init__(self, initial: Optional[Mapping[str, str]] = None):
        if isinstance(initial, MutableMapping):
            self._data: MutableMapping[str, str] = initial
        else:
            self._data = dict(initial or {})

    def get(self, key: str, default: Optional[str] = None) -> Optional[str]:
        return self._data.get(key, default)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def as_dict(self) -> Dict[str, str]:
        """Return a snapshot copy of the current contents."""
        return dict(self._data)

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __getitem__(self, key: str) -> str:
        return self._data[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"MemoryEnvironment({len(self._data)} keys)"


EnvironmentLike = Union[Environment, MutableMapping[str, str], None]


def resolve_environment(target: EnvironmentLike) -> Environment:
    """
    Normalize a load target.

    Args:
        target: ``None`` for the process environment, an ``Environment``,
            or any mutable mapping such as a plain ``dict``.

    Returns:
        An object implementing ``Environment``.

    Raises:
        TypeError: If ``target`` is none of the above.
    """
    if target is None:
        return ProcessEnvironment()
    if isinstance(target, MutableMapping):
        return MemoryEnvironment(target)
    if isinstance(target, Environment):
        return target
    raise TypeError(f"Cannot load environment into {type(target).__name__!r}")


__all__ = [
    "Environment",
    "EnvironmentLike",
    "MemoryEnvironment",
    "ProcessEnvironment",
    "resolve_environment",
]
