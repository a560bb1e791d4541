"""Tests for the argument parser (core/parser.py).

Every test is a pure function call.  Coverage:

* ``scan_int`` numeric-scan rule, including the zero fallback
* Strict command-code mapping
* Arity, sub_value length and command-code failures
* Check ordering (first failing token wins)
"""

from __future__ import annotations

import pytest

from argrecord.core.models import Command, ParsedArgs
from argrecord.core.parser import parse_args, parse_command_code, scan_int
from argrecord.exceptions import (
    BadCommandCodeError,
    BadSubValueLengthError,
    WrongArityError,
)


# ---------------------------------------------------------------------------
# scan_int
# ---------------------------------------------------------------------------

class TestScanInt:
    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("5", 5),
            ("-12", -12),
            ("+7", 7),
            ("  42", 42),
            ("\t-3", -3),
            ("0", 0),
            ("007", 7),
            ("99999999999999999999", 99999999999999999999),
        ],
    )
    def test_reads_integers(self, text: str, expected: int) -> None:
        assert scan_int(text) == expected

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("12abc", 12),
            ("3.9", 3),
            ("-4 5", -4),
        ],
    )
    def test_ignores_trailing_text(self, text: str, expected: int) -> None:
        assert scan_int(text) == expected

    @pytest.mark.parametrize("text", ["", "abc", "-", "+", "  ", "x1", "- 1"])
    def test_no_digits_reads_as_zero(self, text: str) -> None:
        assert scan_int(text) == 0

    def test_non_ascii_digits_are_not_digits(self) -> None:
        assert scan_int("٣") == 0


# ---------------------------------------------------------------------------
# parse_command_code
# ---------------------------------------------------------------------------

class TestParseCommandCode:
    @pytest.mark.parametrize(
        ("token", "expected"),
        [
            ("0", Command.FIRST),
            ("1", Command.SECOND),
            ("2", Command.THIRD),
            ("3", Command.FOURTH),
        ],
    )
    def test_known_codes(self, token: str, expected: Command) -> None:
        assert parse_command_code(token) is expected

    @pytest.mark.parametrize("token", ["4", "9", "-1", "abc", "", " 1", "01", "1.0"])
    def test_other_text_rejected(self, token: str) -> None:
        with pytest.raises(BadCommandCodeError, match="Invalid cmd"):
            parse_command_code(token)


# ---------------------------------------------------------------------------
# parse_args
# ---------------------------------------------------------------------------

class TestParseArgs:
    def test_three_tokens(self) -> None:
        assert parse_args(["5", "a", "0"]) == ParsedArgs(
            value=5, sub_value="a", command=Command.FIRST,
        )

    def test_two_tokens_default_value_to_zero(self) -> None:
        assert parse_args(["a", "1"]) == ParsedArgs(
            value=0, sub_value="a", command=Command.SECOND,
        )

    def test_negative_value(self) -> None:
        assert parse_args(["-8", "z", "3"]).value == -8

    def test_unparseable_value_reads_as_zero(self) -> None:
        assert parse_args(["abc", "a", "2"]).value == 0

    def test_accepts_tuple(self) -> None:
        assert parse_args(("q", "2")).command is Command.THIRD

    def test_non_printable_sub_value(self) -> None:
        assert parse_args(["\x01", "0"]).sub_value == "\x01"

    @pytest.mark.parametrize(
        "tokens",
        [[], ["a"], ["1", "2", "a", "3"], ["1", "a", "0", "x", "y"]],
    )
    def test_wrong_arity(self, tokens: list[str]) -> None:
        with pytest.raises(WrongArityError, match="Need 2 or 3 args"):
            parse_args(tokens)

    @pytest.mark.parametrize("sub_value", ["", "bb", "abc"])
    def test_bad_sub_value_length(self, sub_value: str) -> None:
        with pytest.raises(BadSubValueLengthError, match="size 1"):
            parse_args([sub_value, "2"])

    def test_bad_sub_value_length_with_value(self) -> None:
        with pytest.raises(BadSubValueLengthError):
            parse_args(["5", "bb", "0"])

    def test_invalid_command(self) -> None:
        with pytest.raises(BadCommandCodeError):
            parse_args(["a", "9"])

    def test_sub_value_checked_before_command(self) -> None:
        with pytest.raises(BadSubValueLengthError):
            parse_args(["bb", "9"])

    def test_arity_checked_first(self) -> None:
        with pytest.raises(WrongArityError):
            parse_args(["bb", "bb", "bb", "9"])
