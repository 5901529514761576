"""Centralized constants for encode_calc.

This module contains the unit tables, multipliers and default values used
throughout the application. Import from here to ensure consistency.

Example:
    >>> from encode_calc.utils.constants import FILE_SIZE_MULTIPLIERS
    >>> 700 * FILE_SIZE_MULTIPLIERS["MiB"]
    734003200
"""

from __future__ import annotations

# =============================================================================
# Size Units (bytes)
# =============================================================================
BYTES_PER_KB = 1000
BYTES_PER_MB = 1000**2
BYTES_PER_GB = 1000**3
BYTES_PER_TB = 1000**4

BYTES_PER_KIB = 1024
BYTES_PER_MIB = 1024**2
BYTES_PER_GIB = 1024**3
BYTES_PER_TIB = 1024**4

BITS_PER_BYTE = 8

# Keyed by the exact suffix accepted on input
FILE_SIZE_MULTIPLIERS: dict[str, int] = {
    "B": 1,
    "kB": BYTES_PER_KB,
    "KB": BYTES_PER_KB,
    "MB": BYTES_PER_MB,
    "GB": BYTES_PER_GB,
    "TB": BYTES_PER_TB,
    "KiB": BYTES_PER_KIB,
    "MiB": BYTES_PER_MIB,
    "GiB": BYTES_PER_GIB,
    "TiB": BYTES_PER_TIB,
}

# Output scale for computed file sizes: (upper bound, divisor, label)
FILE_SIZE_SCALES: tuple[tuple[float, float, str], ...] = (
    (1e6, 1e3, "kB"),
    (1e9, 1e6, "MB"),
    (1e12, 1e9, "GB"),
)
FILE_SIZE_TOP_SCALE: tuple[float, str] = (1e12, "TB")

# =============================================================================
# Bit Rate Units (bits per second)
# =============================================================================
BITS_PER_KBIT = 1e3
BITS_PER_MBIT = 1e6
BITS_PER_GBIT = 1e9

# Keyed by the lowercased suffix
BIT_RATE_MULTIPLIERS: dict[str, float] = {
    "bps": 1.0,
    "k": BITS_PER_KBIT,
    "kbps": BITS_PER_KBIT,
    "m": BITS_PER_MBIT,
    "mbps": BITS_PER_MBIT,
    "g": BITS_PER_GBIT,
    "gbps": BITS_PER_GBIT,
}

# =============================================================================
# Time Units (seconds)
# =============================================================================
SECONDS_PER_MINUTE = 60
SECONDS_PER_HOUR = 3600

DURATION_UNIT_SECONDS: dict[str, int] = {
    "h": SECONDS_PER_HOUR,
    "m": SECONDS_PER_MINUTE,
    "s": 1,
}

# =============================================================================
# Formatting
# =============================================================================
DEFAULT_PRECISION = 3
MIN_PRECISION = 1
MAX_PRECISION = 10

# toPrecision-style output switches to exponent notation below this exponent
MIN_FIXED_EXPONENT = -6

# =============================================================================
# Messages
# =============================================================================
ERROR_PREFIX = "Error: "
UNKNOWN_ERROR_MESSAGE = "An unknown error occurred."

# =============================================================================
# Shell
# =============================================================================
COMMAND_PREFIX = "/"
DEFAULT_PROMPT = "> "
DEFAULT_HISTORY_SIZE = 100
