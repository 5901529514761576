"""Resolution of a classified input line into a calculation result.

``parse_input`` is the single entry point used by the shell and the CLI. It
never raises: every failure is returned as ``"Error: <message>"`` output
paired with the submitted line.

Example:
    >>> parse_input("700MB 2h").output
    'Bit rate: 778 kbps'
    >>> parse_input("10X 20Y").output
    'Error: Unknown tokens: 10X, 20Y'
"""

from __future__ import annotations

from encode_calc.core.calculators import (
    calculate_bit_rate,
    calculate_duration,
    calculate_file_size,
)
from encode_calc.core.errors import (
    AllValuesProvidedError,
    AmbiguousParameterCountError,
    CalculatorError,
    InvalidDurationFormat,
    UnknownTokenError,
)
from encode_calc.core.logger import get_logger
from encode_calc.core.tokenizer import classify
from encode_calc.core.types import CalculationResult, ClassifiedInput, ParameterKind
from encode_calc.utils.constants import DEFAULT_PRECISION, ERROR_PREFIX, UNKNOWN_ERROR_MESSAGE
from encode_calc.utils.units import parse_duration

logger = get_logger(__name__)

HELP_TEXT = """\
Enter exactly two of file size, duration and bit rate; the third is calculated.
Add a resolution and a frame rate to also get bits per pixel.

  File size   B, kB, KB, MB, GB, TB (1000-based)
              KiB, MiB, GiB, TiB (1024-based)          e.g. 500MB, 4.7GiB
  Duration    h, m, s, hh:mm:ss, mm:ss, 1h30m20s       e.g. 90m, 1h30m, 01:30:00
  Bit rate    bps, kbps, Mbps, Gbps, k, M, G           e.g. 5Mbps, 800k
  Resolution  WIDTHxHEIGHT                             e.g. 1920x1080
  Frame rate  fps                                      e.g. 25fps, 29.97fps

Examples:
  700MB 2h                  -> Bit rate: 778 kbps
  5Mbps 1h30m               -> File size: 3.38 GB
  4.7GB 6Mbps               -> Duration (hh:mm:ss): 1:44:26
  2GB 1h 1920x1080 25fps    -> Bit rate: 4.44 Mbps (0.0857 bits/pixel)

Commands: /help, /history, /clear, /quit"""

INTRO_TEXT = """\
Supply two parameters to calculate the missing value.
Supported parameters:
  - File size: B, KB, MB, GB, TB, KiB, MiB, GiB, TiB. e.g. "500MB"
  - Duration: h, m, s, or in formats: hh:mm:ss, mm:ss. e.g. "1h30m", "90m", "5400s"
  - Bit rate: bps, kbps, Mbps, Gbps, k, M, G. e.g. "1Mbps"
Type /help for more."""


def help_text() -> str:
    """Get the usage text shown for the /help command."""
    return HELP_TEXT


def intro_text() -> str:
    """Get the greeting shown when an interactive session starts."""
    return INTRO_TEXT


def _duration_seconds(token: str) -> float:
    seconds = parse_duration(token)
    if not seconds:
        raise InvalidDurationFormat(token)
    return seconds


def resolve(classified: ClassifiedInput, precision: int = DEFAULT_PRECISION) -> str:
    """Calculate the missing parameter of a classified input line.

    Args:
        classified: Output of ``classify``.
        precision: Significant digits for scaled values.

    Returns:
        Result text, e.g. "Bit rate: 778 kbps".

    Raises:
        UnknownTokenError: If any token was not recognized.
        AllValuesProvidedError: If bit rate, duration and file size are all given.
        AmbiguousParameterCountError: If fewer than two of them are given.
        InvalidDurationFormat: If the duration cannot be converted to seconds.
        CalculatorError: For malformed or unusable values.
    """
    if classified.unknown:
        raise UnknownTokenError(classified.unknown)

    missing = classified.missing
    if not missing:
        raise AllValuesProvidedError()
    if len(missing) != 1:
        raise AmbiguousParameterCountError()

    bit_rate = classified.get(ParameterKind.BIT_RATE)
    file_size = classified.get(ParameterKind.FILE_SIZE)
    duration = classified.get(ParameterKind.DURATION)
    resolution = classified.get(ParameterKind.RESOLUTION)
    frame_rate = classified.get(ParameterKind.FRAME_RATE)

    seconds = _duration_seconds(duration) if duration is not None else None

    target = missing[0]
    logger.debug("Resolving %s from %s", target.value, classified.parsed)

    if target is ParameterKind.DURATION:
        assert file_size is not None and bit_rate is not None
        value = calculate_duration(file_size, bit_rate, resolution, frame_rate)
        # No colon: the value carries its own "(hh:mm:ss): " prefix
        return f"{ParameterKind.DURATION.label} {value}"

    assert seconds is not None
    if target is ParameterKind.BIT_RATE:
        assert file_size is not None
        value = calculate_bit_rate(file_size, seconds, resolution, frame_rate, precision)
        return f"{ParameterKind.BIT_RATE.label}: {value}"

    assert bit_rate is not None
    value = calculate_file_size(bit_rate, seconds, resolution, frame_rate, precision)
    return f"{ParameterKind.FILE_SIZE.label}: {value}"


def parse_input(raw_line: str, precision: int = DEFAULT_PRECISION) -> CalculationResult:
    """Calculate the missing parameter for one line of user input.

    Args:
        raw_line: Line as typed by the user.
        precision: Significant digits for scaled values.

    Returns:
        CalculationResult pairing the line with its result or error text.
    """
    try:
        output = resolve(classify(raw_line), precision)
    except CalculatorError as e:
        logger.debug("Rejected %r: %s", raw_line, e)
        output = f"{ERROR_PREFIX}{e}"
    except Exception as e:
        logger.error("Unexpected failure for %r", raw_line, exc_info=True)
        output = f"{ERROR_PREFIX}{str(e) or UNKNOWN_ERROR_MESSAGE}"

    return CalculationResult(input=raw_line, output=output)


__all__ = ["help_text", "intro_text", "parse_input", "resolve"]
