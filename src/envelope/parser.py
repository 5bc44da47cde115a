"""
Line grammar for environment definition files.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional

# KEY, optional spaces, '=', optional spaces, optional VALUE. ASCII word chars only.
LINE_PATTERN = re.compile(r"(?P<key>\w+)\s*=\s*(?P<value>\w*)", re.ASCII)


@dataclass(frozen=True)
class ParsedLine:
    """A key/value pair extracted from one definition line."""

    key: str
    value: str = ""


def parse_line(text: str) -> Optional[ParsedLine]:
    """
    Match a single line against the definition grammar.

    The whole line must match: blank lines, bare keys without ``=`` and
    anything containing non-word characters are rejected.

    Args:
        text: Raw line with its terminator already removed.

    Returns:
        The parsed pair, or ``None`` if the line is malformed.
    """
    match = LINE_PATTERN.fullmatch(text)
    if match is None:
        return None
    return ParsedLine(key=match.group("key"), value=match.group("value") or "")


__all__ = ["LINE_PATTERN", "ParsedLine", "parse_line"]
