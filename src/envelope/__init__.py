"""Public exports for the envelope package."""

from .config import DEFAULT_ENV_PATH, LoaderConfig
from .env import iter_pairs, load, load_file
from .environ import Environment, MemoryEnvironment, ProcessEnvironment
from .exceptions import EnvelopeError, EnvFileNotFoundError, MalformedLineError
from .parser import ParsedLine, parse_line

__version__ = "0.1.0"

__all__ = [
    "load",
    "load_file",
    "iter_pairs",
    "parse_line",
    "ParsedLine",
    "LoaderConfig",
    "DEFAULT_ENV_PATH",
    # Targets
    "Environment",
    "ProcessEnvironment",
    "MemoryEnvironment",
    # Exceptions
    "EnvelopeError",
    "EnvFileNotFoundError",
    "MalformedLineError",
]
