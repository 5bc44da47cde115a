"""Tests for the definition line grammar (parser.py)."""

from __future__ import annotations

import pytest

from envelope.parser import ParsedLine, parse_line


class TestParseLineAccepts:
    @pytest.mark.parametrize(
        "line, key, value",
        [
            ("HELLO=WORLD", "HELLO", "WORLD"),
            ("USER=", "USER", ""),
            ("KEY = VALUE", "KEY", "VALUE"),
            ("KEY  =\tVALUE", "KEY", "VALUE"),
            ("KEY =", "KEY", ""),
            ("_=_", "_", "_"),
            ("9=9", "9", "9"),
            ("lower_case=Mixed_09", "lower_case", "Mixed_09"),
        ],
    )
    def test_valid_lines(self, line: str, key: str, value: str) -> None:
        assert parse_line(line) == ParsedLine(key=key, value=value)

    def test_empty_value_is_empty_string(self) -> None:
        parsed = parse_line("USER=")

        assert parsed is not None
        assert parsed.value == ""


class TestParseLineRejects:
    @pytest.mark.parametrize(
        "line",
        [
            "",
            "   ",
            "SPECIAL_TACTICS",
            "=VALUE",
            " KEY=VALUE",
            "KEY=VALUE ",
            "KEY=two words",
            "KEY=a=b",
            "MY-KEY=value",
            "KEY=path/to",
            'KEY="quoted"',
            "# comment",
            "export KEY=VALUE",
            "KÉY=VALUE",
            "KEY=välue",
        ],
    )
    def test_malformed_lines(self, line: str) -> None:
        assert parse_line(line) is None


class TestParsedLine:
    def test_default_value(self) -> None:
        assert ParsedLine(key="A").value == ""

    def test_is_frozen(self) -> None:
        parsed = ParsedLine(key="A", value="1")

        with pytest.raises(AttributeError):
            parsed.key = "B"  # type: ignore[misc]
