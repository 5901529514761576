"""Utility modules for encode_calc.

This package contains unit parsing, number formatting and the shared
constants used by the calculator core.
"""

from encode_calc.utils.formatting import (
    format_bit_rate,
    format_duration,
    format_file_size,
    format_number,
    to_precision,
)
from encode_calc.utils.units import (
    parse_bit_rate,
    parse_duration,
    parse_file_size,
    parse_frame_rate,
    parse_resolution,
    pixels_per_second,
)

__all__ = [
    "format_bit_rate",
    "format_duration",
    "format_file_size",
    "format_number",
    "parse_bit_rate",
    "parse_duration",
    "parse_file_size",
    "parse_frame_rate",
    "parse_resolution",
    "pixels_per_second",
    "to_precision",
]
