"""
Load ``KEY=VALUE`` definition files into the process environment.

Files are read in the order given and every well-formed line is applied as
soon as it is parsed, so later files (and later lines) win for duplicate
keys. Loading stops at the first missing file or malformed line; pairs
applied before that point are left in place.
"""

from __future__ import annotations

import logging
import os
from typing import Iterator, Optional

from .config import LoaderConfig
from .environ import EnvironmentLike, resolve_environment
from .exceptions import EnvFileNotFoundError, MalformedLineError, PathLike
from .parser import ParsedLine, parse_line

logger = logging.getLogger(__name__)


def _validate_env_file(env_path: PathLike) -> None:
    """Raise ``EnvFileNotFoundError`` if ``env_path`` does not exist."""
    try:
        os.stat(env_path)
    except FileNotFoundError:
        raise EnvFileNotFoundError(env_path) from None


def _strip_terminator(raw_line: str) -> str:
    """Drop a trailing newline and one carriage return before it."""
    if raw_line.endswith("\n"):
        raw_line = raw_line[:-1]
    if raw_line.endswith("\r"):
        raw_line = raw_line[:-1]
    return raw_line


def iter_pairs(
    env_path: PathLike, config: Optional[LoaderConfig] = None
) -> Iterator[ParsedLine]:
    """
    Yield the parsed pairs of one file in line order.

    Nothing is read until iteration starts. The file stays open only while
    the generator is running and is closed as soon as it finishes, raises,
    or is closed by the caller.

    Args:
        env_path: Path of the definition file.
        config: Loader options (encoding). Defaults to ``LoaderConfig()``.

    Yields:
        One ``ParsedLine`` per line.

    Raises:
        EnvFileNotFoundError: If the file does not exist.
        MalformedLineError: When a line fails the grammar.
        OSError: If the file exists but cannot be opened or read.
    """
    config = config or LoaderConfig()
    _validate_env_file(env_path)

    # Split on "\n" only; undecodable bytes survive as surrogates and fail the grammar.
    with open(
        env_path, encoding=config.encoding, errors="surrogateescape", newline="\n"
    ) as env_file:
        for line_number, raw_line in enumerate(env_file, start=1):
            line = _strip_terminator(raw_line)
            pair = parse_line(line)
            if pair is None:
                raise MalformedLineError(env_path, line_number, line)
            yield pair


def load_file(
    env_path: PathLike,
    environ: EnvironmentLike = None,
    config: Optional[LoaderConfig] = None,
) -> int:
    """
    Apply every pair from a single file to ``environ``.

    Args:
        env_path: Path of the definition file.
        environ: Target environment. ``None`` means ``os.environ``.
        config: Loader options.

    Returns:
        Number of pairs applied.

    Raises:
        EnvFileNotFoundError: If the file does not exist.
        MalformedLineError: When a line fails the grammar. Earlier lines stay applied.
        OSError: If the file exists but cannot be opened or read.
    """
    target = resolve_environment(environ)
    logger.debug(f"Loading environment file {os.fspath(env_path)}")

    applied = 0
    for pair in iter_pairs(env_path, config):
        target.set(pair.key, pair.value)
        applied += 1

    logger.debug(f"Applied {applied} variable(s) from {os.fspath(env_path)}")
    return applied


def load(
    *env_paths: PathLike,
    environ: EnvironmentLike = None,
    config: Optional[LoaderConfig] = None,
) -> None:
    """
    Load one or more definition files, in order, into the environment.

    Example:
        >>> from envelope import load
        >>> load()                          # ./.env
        >>> load("base.env", "prod.env")    # prod.env wins on conflicts

    Args:
        *env_paths: Files to load. With none given, ``config.default_path`` is used.
        environ: Target environment. ``None`` means ``os.environ``; a plain
            ``dict`` or any ``Environment`` works too.
        config: Loader options. Defaults to ``LoaderConfig()``.

    Raises:
        EnvFileNotFoundError: If a file does not exist.
        MalformedLineError: On the first line that fails the grammar.
        OSError: If a file exists but cannot be opened or read.
    """
    config = config or LoaderConfig()
    if not env_paths:
        env_paths = (config.default_path,)

    target = resolve_environment(environ)
    for env_path in env_paths:
        load_file(env_path, target, config)


__all__ = ["iter_pairs", "load", "load_file"]
