"""Unit tests for the resolver and the parse_input entry point."""

from __future__ import annotations

import pytest

from encode_calc.core.errors import (
    AllValuesProvidedError,
    AmbiguousParameterCountError,
    InvalidDurationFormat,
    UnknownTokenError,
)
from encode_calc.core.resolver import help_text, intro_text, parse_input, resolve
from encode_calc.core.tokenizer import classify
from encode_calc.core.types import CalculationResult

AMBIGUOUS = "Error: Provide only two parameters to calculate the missing value."


class TestParseInputResults:
    """Tests for successful calculations."""

    @pytest.mark.parametrize(
        ("line", "expected"),
        [
            ("700MB 2h", "Bit rate: 778 kbps"),
            ("700MiB 2h", "Bit rate: 816 kbps"),
            ("2h 700MB", "Bit rate: 778 kbps"),
            ("700MB 777.77777kbps", "Duration (hh:mm:ss): 2:00:00"),
            ("777.77777kbps 2h", "File size: 700 MB"),
            ("5Mbps 1h30m", "File size: 3.38 GB"),
            ("4.7GB 6Mbps", "Duration (hh:mm:ss): 1:44:26"),
            ("2GB 1h 1920x1080 25fps", "Bit rate: 4.44 Mbps (0.0857 bits/pixel)"),
            ("0k 2h", "File size: 0 bytes"),
            ("7997bps 1s", "File size: 1.00 kB"),
        ],
    )
    def test_calculation(self, line: str, expected: str) -> None:
        """Test the missing value is calculated and labelled."""
        assert parse_input(line).output == expected

    def test_result_keeps_input(self) -> None:
        """Test the raw line is returned unchanged."""
        result = parse_input("  700MB   2h ")

        assert isinstance(result, CalculationResult)
        assert result.input == "  700MB   2h "
        assert not result.is_error

    def test_precision(self) -> None:
        """Test the precision argument reaches the formatter."""
        assert parse_input("700MB 2h", precision=5).output == "Bit rate: 777.78 kbps"

    def test_command_tokens_are_ignored(self) -> None:
        """Test a "/" token does not break a calculation."""
        assert parse_input("700MB 2h /history").output == "Bit rate: 778 kbps"


class TestParseInputErrors:
    """Tests for error output."""

    def test_unknown_tokens(self) -> None:
        """Test unknown tokens are listed in input order."""
        result = parse_input("10X 20Y")

        assert result.output == "Error: Unknown tokens: 10X, 20Y"
        assert result.is_error

    def test_unknown_tokens_take_priority(self) -> None:
        """Test unknown tokens stop resolution even with enough parameters."""
        assert parse_input("700MB 2h junk").output == "Error: Unknown tokens: junk"

    def test_non_ascii_digits_are_unknown(self) -> None:
        """Test a size written with Arabic-Indic digits is not calculated."""
        assert parse_input("٥MB 2h").output == "Error: Unknown tokens: ٥MB"

    def test_all_values_provided(self) -> None:
        """Test nothing is calculated when all three values are given."""
        result = parse_input("500kbps 00:02:00 10MB")

        assert result.output == "Error: All values were provided. Nothing to calculate."

    @pytest.mark.parametrize("line", ["700MB", "2h", "", "1920x1080 25fps"])
    def test_too_few_parameters(self, line: str) -> None:
        """Test fewer than two required parameters."""
        assert parse_input(line).output == AMBIGUOUS

    @pytest.mark.parametrize("line", ["700MB 0s", "700MB 0:0", "700MB 00:00:00"])
    def test_zero_duration(self, line: str) -> None:
        """Test a zero duration is reported as invalid."""
        token = line.split()[1]

        assert parse_input(line).output == f"Error: Invalid duration format {token}"

    def test_zero_bit_rate(self) -> None:
        """Test a zero bit rate cannot produce a duration."""
        assert parse_input("700MB 0k").output == "Error: Bit rate must be greater than zero."

    def test_unexpected_error_text(self, mocker) -> None:
        """Test unexpected exceptions are rendered with their text."""
        mocker.patch("encode_calc.core.resolver.classify", side_effect=RuntimeError("boom"))

        result = parse_input("700MB 2h")

        assert result.output == "Error: boom"
        assert result.input == "700MB 2h"

    def test_unexpected_error_without_text(self, mocker) -> None:
        """Test a fallback message for exceptions without text."""
        mocker.patch("encode_calc.core.resolver.classify", side_effect=RuntimeError())

        assert parse_input("700MB 2h").output == "Error: An unknown error occurred."


class TestResolve:
    """Tests for resolve raising typed errors."""

    def test_unknown_token_error(self) -> None:
        """Test UnknownTokenError carries the tokens."""
        with pytest.raises(UnknownTokenError) as exc_info:
            resolve(classify("700MB x y"))

        assert exc_info.value.tokens == ["x", "y"]

    def test_all_values_provided_error(self) -> None:
        """Test AllValuesProvidedError."""
        with pytest.raises(AllValuesProvidedError):
            resolve(classify("700MB 2h 5Mbps"))

    def test_ambiguous_parameter_count_error(self) -> None:
        """Test AmbiguousParameterCountError."""
        with pytest.raises(AmbiguousParameterCountError):
            resolve(classify("700MB"))

    def test_invalid_duration_error(self) -> None:
        """Test InvalidDurationFormat carries the token."""
        with pytest.raises(InvalidDurationFormat) as exc_info:
            resolve(classify("700MB 0s"))

        assert exc_info.value.token == "0s"


class TestStaticText:
    """Tests for help and intro text."""

    def test_help_lists_parameters(self) -> None:
        """Test help text names every parameter kind."""
        text = help_text()

        for label in ("File size", "Duration", "Bit rate", "Resolution", "Frame rate"):
            assert label in text

    def test_intro(self) -> None:
        """Test the intro explains the two-parameter rule."""
        assert "Supply two parameters" in intro_text()
