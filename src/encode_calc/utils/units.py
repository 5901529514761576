"""Unit parsers for media encoding quantities.

This module decodes parameter tokens into plain numbers: bytes for file
sizes, bits per second for bit rates and seconds for durations. It also owns
the token grammars the classifier matches against, so that a token accepted
by the classifier is always decodable here.

Example:
    >>> parse_file_size("700MiB")
    734003200.0
    >>> parse_bit_rate("1.5Mbps")
    1500000.0
    >>> parse_duration("1h30m20s")
    5420.0
"""

from __future__ import annotations

import re

from encode_calc.core.errors import (
    InvalidBitRateFormat,
    InvalidFileSizeFormat,
    InvalidParameterValue,
    UnsupportedBitRateUnit,
)
from encode_calc.utils.constants import (
    BIT_RATE_MULTIPLIERS,
    DURATION_UNIT_SECONDS,
    FILE_SIZE_MULTIPLIERS,
    SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE,
)

# ASCII digits only
_NUMBER = r"[0-9]+(?:\.[0-9]+)?"

# Token grammars, matched against the whole token
FILE_SIZE_PATTERNS = (re.compile(rf"({_NUMBER})(B|kB|KB|KiB|MB|MiB|GB|GiB|TB|TiB)"),)
DURATION_PATTERNS = (
    re.compile(rf"{_NUMBER}[hms]"),
    re.compile(r"[0-9]+:[0-9]+:[0-9]+"),
    re.compile(r"[0-9]+:[0-9]+"),
    re.compile(r"[0-9]+h(?:[0-9]+m)?(?:[0-9]+s)?"),
    re.compile(r"[0-9]+m(?:[0-9]+s)?"),
)
RESOLUTION_PATTERNS = (re.compile(r"([0-9]+)x([0-9]+)"),)
FRAME_RATE_PATTERNS = (re.compile(rf"({_NUMBER})fps"),)
# A bare lowercase "m" is left to the duration grammar
BIT_RATE_PATTERNS = (re.compile(rf"({_NUMBER})([kKmMgG]?bps|[kKMGg])"),)

_BIT_RATE_VALUE = re.compile(rf"({_NUMBER})([A-Za-z/]+)")
_SINGLE_UNIT_DURATION = re.compile(rf"({_NUMBER})([hms])")
_COMPOUND_DURATION = re.compile(r"(?:([0-9]+)h)?(?:([0-9]+)m)?(?:([0-9]+)s)?")
_CLOCK_PART = re.compile(_NUMBER)


def parse_file_size(token: str) -> float:
    """Parse a file size token into bytes.

    Decimal suffixes (kB, KB, MB, GB, TB) are 1000-based; binary suffixes
    (KiB, MiB, GiB, TiB) are 1024-based.

    Args:
        token: File size token such as "500MB" or "1.5GiB".

    Returns:
        Size in bytes.

    Raises:
        InvalidFileSizeFormat: If the token is not ``<number><unit>``.
    """
    match = FILE_SIZE_PATTERNS[0].fullmatch(token)
    if not match:
        raise InvalidFileSizeFormat(token)

    value, unit = match.groups()
    return float(value) * FILE_SIZE_MULTIPLIERS[unit]


def parse_bit_rate(token: str) -> float:
    """Parse a bit rate token into bits per second.

    Units are bps, k/kbps, M/Mbps and G/Gbps. The prefix letter is
    case-insensitive.

    Args:
        token: Bit rate token such as "5Mbps" or "800k".

    Returns:
        Bit rate in bits per second.

    Raises:
        InvalidBitRateFormat: If the token is not ``<number><unit>``.
        UnsupportedBitRateUnit: If the unit is not a known bit rate unit.
    """
    match = _BIT_RATE_VALUE.fullmatch(token)
    if not match:
        raise InvalidBitRateFormat(token)

    value, unit = match.groups()
    multiplier = BIT_RATE_MULTIPLIERS.get(unit.lower())
    if multiplier is None:
        raise UnsupportedBitRateUnit(unit)
    return float(value) * multiplier


def parse_duration(token: str) -> float | None:
    """Parse a duration token into seconds.

    Accepted forms:
        - "mm:ss" and "hh:mm:ss"
        - a single unit, optionally decimal: "90s", "30.5m", "1.5h"
        - compound whole units in h-m-s order: "1h30m", "1h30m20s", "5m10s"

    Args:
        token: Duration token.

    Returns:
        Duration in seconds, or None if the token is not a duration.
    """
    if ":" in token:
        fields = token.split(":")
        if not all(_CLOCK_PART.fullmatch(field) for field in fields):
            return None
        parts = [float(field) for field in fields]
        if len(parts) == 2:
            return parts[0] * SECONDS_PER_MINUTE + parts[1]
        if len(parts) == 3:
            return parts[0] * SECONDS_PER_HOUR + parts[1] * SECONDS_PER_MINUTE + parts[2]
        return None

    if match := _SINGLE_UNIT_DURATION.fullmatch(token):
        value, unit = match.groups()
        return float(value) * DURATION_UNIT_SECONDS[unit]

    match = _COMPOUND_DURATION.fullmatch(token)
    if not match or not any(match.groups()):
        return None

    hours, minutes, seconds = (int(group or 0) for group in match.groups())
    return float(hours * SECONDS_PER_HOUR + minutes * SECONDS_PER_MINUTE + seconds)


def parse_resolution(token: str) -> tuple[int, int]:
    """Parse a "WIDTHxHEIGHT" token.

    Raises:
        InvalidParameterValue: If the token is not a resolution.
    """
    match = RESOLUTION_PATTERNS[0].fullmatch(token)
    if not match:
        raise InvalidParameterValue(f"Invalid resolution format {token}")
    return int(match.group(1)), int(match.group(2))


def parse_frame_rate(token: str) -> float:
    """Parse a "<number>fps" token.

    Raises:
        InvalidParameterValue: If the token is not a frame rate.
    """
    match = FRAME_RATE_PATTERNS[0].fullmatch(token)
    if not match:
        raise InvalidParameterValue(f"Invalid frame rate format {token}")
    return float(match.group(1))


def pixels_per_second(resolution: str, frame_rate: str) -> float:
    """Get the pixel throughput for a resolution and frame rate token pair."""
    width, height = parse_resolution(resolution)
    return width * height * parse_frame_rate(frame_rate)


__all__ = [
    "BIT_RATE_PATTERNS",
    "DURATION_PATTERNS",
    "FILE_SIZE_PATTERNS",
    "FRAME_RATE_PATTERNS",
    "RESOLUTION_PATTERNS",
    "parse_bit_rate",
    "parse_duration",
    "parse_file_size",
    "parse_frame_rate",
    "parse_resolution",
    "pixels_per_second",
]
