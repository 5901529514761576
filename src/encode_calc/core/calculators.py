"""Calculators for the missing encoding parameter.

Each calculator derives one of bit rate, file size or duration from the
other two and returns it formatted for display. Resolution and frame rate
tokens are optional refiners: when both are given, the bit rate calculator
also reports bits per pixel.

Example:
    >>> calculate_bit_rate("700MB", 7200)
    '778 kbps'
    >>> calculate_file_size("777.77777kbps", 7200)
    '700 MB'
    >>> calculate_duration("700MB", "777.77777kbps")
    '(hh:mm:ss): 2:00:00'
"""

from __future__ import annotations

from encode_calc.core.errors import InvalidParameterValue
from encode_calc.utils.constants import BITS_PER_BYTE, DEFAULT_PRECISION
from encode_calc.utils.formatting import (
    format_bit_rate,
    format_duration,
    format_file_size,
    to_precision,
)
from encode_calc.utils.units import parse_bit_rate, parse_file_size, pixels_per_second


def _require_positive(value: float, name: str) -> float:
    if value <= 0:
        raise InvalidParameterValue(f"{name} must be greater than zero.")
    return value


def calculate_bit_rate(
    file_size: str,
    duration_seconds: float,
    resolution: str | None = None,
    frame_rate: str | None = None,
    precision: int = DEFAULT_PRECISION,
) -> str:
    """Calculate the average bit rate of a file.

    Args:
        file_size: File size token (e.g. "700MB").
        duration_seconds: Duration in seconds.
        resolution: Optional resolution token (e.g. "1920x1080").
        frame_rate: Optional frame rate token (e.g. "25fps").
        precision: Significant digits in the output.

    Returns:
        Scaled bit rate, followed by " (<n> bits/pixel)" when both
        resolution and frame rate are given.

    Raises:
        InvalidFileSizeFormat: If the file size token is malformed.
        InvalidParameterValue: If the duration is not positive.
    """
    _require_positive(duration_seconds, "Duration")
    bit_rate = parse_file_size(file_size) * BITS_PER_BYTE / duration_seconds

    result = format_bit_rate(bit_rate, precision)

    if resolution and frame_rate:
        pixel_rate = pixels_per_second(resolution, frame_rate)
        bits_per_pixel = bit_rate / pixel_rate if pixel_rate > 0 else 0.0
        if bits_per_pixel > 0:
            result += f" ({to_precision(bits_per_pixel, precision)} bits/pixel)"

    return result


def calculate_file_size(
    bit_rate: str,
    duration_seconds: float,
    resolution: str | None = None,
    frame_rate: str | None = None,
    precision: int = DEFAULT_PRECISION,
) -> str:
    """Calculate the size of a file encoded at a constant bit rate.

    Args:
        bit_rate: Bit rate token (e.g. "5Mbps").
        duration_seconds: Duration in seconds.
        resolution: Optional resolution token.
        frame_rate: Optional frame rate token.
        precision: Significant digits in the output.

    Returns:
        Scaled file size ("523 bytes", "1.50 GB", ...).

    Raises:
        InvalidBitRateFormat: If the bit rate token is malformed.
        UnsupportedBitRateUnit: If the bit rate unit is unknown.
    """
    rate = parse_bit_rate(bit_rate)
    bits = rate * duration_seconds

    if resolution and frame_rate:
        # Same figure expressed through the per-pixel budget
        pixel_rate = pixels_per_second(resolution, frame_rate)
        if pixel_rate > 0:
            bits = (rate / pixel_rate) * pixel_rate * duration_seconds

    return format_file_size(bits / BITS_PER_BYTE, precision)


def calculate_duration(
    file_size: str,
    bit_rate: str,
    resolution: str | None = None,
    frame_rate: str | None = None,
) -> str:
    """Calculate how long a file lasts at a given bit rate.

    Resolution and frame rate are accepted for a uniform signature but do
    not change the result.

    Args:
        file_size: File size token.
        bit_rate: Bit rate token.
        resolution: Unused.
        frame_rate: Unused.

    Returns:
        Duration with a layout prefix, e.g. "(hh:mm:ss): 2:00:00".

    Raises:
        InvalidParameterValue: If the bit rate is zero.
    """
    _ = resolution, frame_rate

    rate = _require_positive(parse_bit_rate(bit_rate), "Bit rate")
    seconds = parse_file_size(file_size) * BITS_PER_BYTE / rate

    return format_duration(seconds)


__all__ = ["calculate_bit_rate", "calculate_duration", "calculate_file_size"]
