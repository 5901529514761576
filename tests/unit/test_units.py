"""Unit tests for unit parsers."""

from __future__ import annotations

import pytest

from encode_calc.core.errors import (
    InvalidBitRateFormat,
    InvalidFileSizeFormat,
    InvalidParameterValue,
    UnsupportedBitRateUnit,
)
from encode_calc.utils.units import (
    parse_bit_rate,
    parse_duration,
    parse_file_size,
    parse_frame_rate,
    parse_resolution,
    pixels_per_second,
)


class TestParseFileSize:
    """Tests for parse_file_size."""

    @pytest.mark.parametrize(
        ("token", "expected"),
        [
            ("10B", 10),
            ("2kB", 2_000),
            ("2KB", 2_000),
            ("500MB", 500_000_000),
            ("1.5GB", 1_500_000_000),
            ("2TB", 2_000_000_000_000),
        ],
    )
    def test_decimal_units(self, token: str, expected: float) -> None:
        """Test decimal units are 1000-based."""
        assert parse_file_size(token) == expected

    @pytest.mark.parametrize(
        ("token", "expected"),
        [
            ("1KiB", 1024),
            ("700MiB", 734_003_200),
            ("1.5GiB", 1.5 * 1024**3),
            ("1TiB", 1024**4),
        ],
    )
    def test_binary_units(self, token: str, expected: float) -> None:
        """Test binary units are 1024-based."""
        assert parse_file_size(token) == expected

    def test_binary_differs_from_decimal(self) -> None:
        """Test MiB and MB give different byte counts."""
        assert parse_file_size("700MiB") > parse_file_size("700MB")

    @pytest.mark.parametrize("token", ["500", "MB", "500mb", "5XB", "1.MB", "٥MB"])
    def test_invalid_raises(self, token: str) -> None:
        """Test malformed tokens raise InvalidFileSizeFormat."""
        with pytest.raises(InvalidFileSizeFormat, match="Invalid file size format"):
            parse_file_size(token)


class TestParseBitRate:
    """Tests for parse_bit_rate."""

    @pytest.mark.parametrize(
        ("token", "expected"),
        [
            ("100bps", 100),
            ("800k", 800_000),
            ("500kbps", 500_000),
            ("1M", 1_000_000),
            ("1.5Mbps", 1_500_000),
            ("2G", 2_000_000_000),
            ("1Gbps", 1_000_000_000),
        ],
    )
    def test_units(self, token: str, expected: float) -> None:
        """Test every supported unit."""
        assert parse_bit_rate(token) == expected

    @pytest.mark.parametrize(
        ("token", "expected"),
        [("5Kbps", 5_000), ("5mbps", 5_000_000), ("5gbps", 5_000_000_000), ("5K", 5_000)],
    )
    def test_prefix_is_case_insensitive(self, token: str, expected: float) -> None:
        """Test the prefix letter is accepted in either case."""
        assert parse_bit_rate(token) == expected

    def test_unsupported_unit(self) -> None:
        """Test an unknown unit raises UnsupportedBitRateUnit."""
        with pytest.raises(UnsupportedBitRateUnit) as exc_info:
            parse_bit_rate("5Tbps")

        assert exc_info.value.unit == "Tbps"

    @pytest.mark.parametrize("token", ["5", "fast", "Mbps", "-5Mbps"])
    def test_invalid_format(self, token: str) -> None:
        """Test malformed tokens raise InvalidBitRateFormat."""
        with pytest.raises(InvalidBitRateFormat):
            parse_bit_rate(token)


class TestParseDuration:
    """Tests for parse_duration."""

    @pytest.mark.parametrize(
        ("token", "expected"),
        [
            ("01:01:01", 3661),
            ("1:30:00", 5400),
            ("02:30", 150),
            ("00:02:00", 120),
        ],
    )
    def test_colon_formats(self, token: str, expected: float) -> None:
        """Test hh:mm:ss and mm:ss formats."""
        assert parse_duration(token) == expected

    @pytest.mark.parametrize(
        ("token", "expected"),
        [
            ("90s", 90),
            ("90m", 5400),
            ("2h", 7200),
            ("30.5m", 1830),
            ("1.5h", 5400),
        ],
    )
    def test_single_unit(self, token: str, expected: float) -> None:
        """Test single-unit durations, including decimals."""
        assert parse_duration(token) == expected

    @pytest.mark.parametrize(
        ("token", "expected"),
        [
            ("1h30m", 5400),
            ("1h30m20s", 5420),
            ("5m10s", 310),
            ("2h10s", 7210),
        ],
    )
    def test_compound(self, token: str, expected: float) -> None:
        """Test compound h-m-s durations."""
        assert parse_duration(token) == expected

    @pytest.mark.parametrize(
        "token",
        [
            "invalid",
            "",
            "30",
            "1h30",
            "1:2:3:4",
            "a:b",
            "30s1h",
            "1h30mx",
            "٥:٣٠",
            "1e3:00",
            " 1:30",
        ],
    )
    def test_invalid_returns_none(self, token: str) -> None:
        """Test tokens that are not durations return None."""
        assert parse_duration(token) is None


class TestResolutionAndFrameRate:
    """Tests for resolution and frame rate parsing."""

    def test_parse_resolution(self) -> None:
        """Test WIDTHxHEIGHT is split into integers."""
        assert parse_resolution("1920x1080") == (1920, 1080)

    def test_parse_resolution_invalid(self) -> None:
        """Test a malformed resolution raises InvalidParameterValue."""
        with pytest.raises(InvalidParameterValue):
            parse_resolution("1920")

    def test_parse_frame_rate_decimal(self) -> None:
        """Test fractional frame rates are kept."""
        assert parse_frame_rate("29.97fps") == pytest.approx(29.97)

    def test_parse_frame_rate_invalid(self) -> None:
        """Test a malformed frame rate raises InvalidParameterValue."""
        with pytest.raises(InvalidParameterValue):
            parse_frame_rate("25")

    def test_pixels_per_second(self) -> None:
        """Test pixel throughput of 1080p at 25 fps."""
        assert pixels_per_second("1920x1080", "25fps") == 51_840_000
