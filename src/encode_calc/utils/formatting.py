"""Human-readable rendering of computed quantities.

Example:
    >>> to_precision(777.7777, 3)
    '778'
    >>> format_bit_rate(777777.78)
    '778 kbps'
    >>> format_duration(7200.0)
    '(hh:mm:ss): 2:00:00'
"""

from __future__ import annotations

import math

from encode_calc.utils.constants import (
    BITS_PER_KBIT,
    BITS_PER_MBIT,
    DEFAULT_PRECISION,
    FILE_SIZE_SCALES,
    FILE_SIZE_TOP_SCALE,
    MIN_FIXED_EXPONENT,
    SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE,
)


def to_precision(value: float, digits: int = DEFAULT_PRECISION) -> str:
    """Render a number with a fixed count of significant digits.

    Trailing zeros are kept ("5.60"), a trailing decimal point is not
    ("700"). Large magnitudes and very small ones switch to exponent
    notation without zero padding ("1.00e+3", "1.23e-7").

    Args:
        value: Number to render.
        digits: Significant digits (>= 1).

    Returns:
        Formatted number.
    """
    value = float(value)
    if value == 0 or not math.isfinite(value):
        return f"{value:#.{digits}g}".rstrip(".")

    text = f"{value:#.{digits - 1}e}"
    exponent = int(text.partition("e")[2])

    if MIN_FIXED_EXPONENT <= exponent < digits:
        return f"{value:.{max(digits - 1 - exponent, 0)}f}"

    mantissa = text.partition("e")[0].rstrip(".")
    return f"{mantissa}e{exponent:+d}"


def format_number(value: float) -> str:
    """Render a number in its shortest form, without a trailing ".0"."""
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))


def format_bit_rate(bits_per_second: float, digits: int = DEFAULT_PRECISION) -> str:
    """Render a bit rate scaled to Mbps, kbps or bps."""
    if bits_per_second >= BITS_PER_MBIT:
        return f"{to_precision(bits_per_second / BITS_PER_MBIT, digits)} Mbps"
    if bits_per_second >= BITS_PER_KBIT:
        return f"{to_precision(bits_per_second / BITS_PER_KBIT, digits)} kbps"
    return f"{to_precision(bits_per_second, digits)} bps"


def format_file_size(size_bytes: float, digits: int = DEFAULT_PRECISION) -> str:
    """Render a byte count scaled to bytes, kB, MB, GB or TB.

    Counts below one kilobyte are shown as whole bytes.
    """
    if round(size_bytes) < 1e3:
        return f"{round(size_bytes)} bytes"

    for upper_bound, divisor, label in FILE_SIZE_SCALES:
        if size_bytes < upper_bound:
            return f"{to_precision(size_bytes / divisor, digits)} {label}"

    divisor, label = FILE_SIZE_TOP_SCALE
    return f"{to_precision(size_bytes / divisor, digits)} {label}"


def format_duration(seconds: float) -> str:
    """Render a duration with a prefix naming its layout.

    Returns:
        "(hh:mm:ss): H:MM:SS" from one hour, "(mm:ss): M:SS" from one minute,
        otherwise "(s): <seconds>" with the unrounded value.
    """
    if seconds >= SECONDS_PER_HOUR:
        hours = math.floor(seconds / SECONDS_PER_HOUR)
        minutes = math.floor((seconds % SECONDS_PER_HOUR) / SECONDS_PER_MINUTE)
        secs = math.floor(seconds % SECONDS_PER_MINUTE)
        return f"(hh:mm:ss): {hours}:{minutes:02d}:{secs:02d}"
    if seconds >= SECONDS_PER_MINUTE:
        minutes = math.floor(seconds / SECONDS_PER_MINUTE)
        secs = math.floor(seconds % SECONDS_PER_MINUTE)
        return f"(mm:ss): {minutes}:{secs:02d}"
    return f"(s): {format_number(seconds)}"


__all__ = [
    "format_bit_rate",
    "format_duration",
    "format_file_size",
    "format_number",
    "to_precision",
]
