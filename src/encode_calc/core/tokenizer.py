"""Input tokenizer and parameter classifier.

A raw input line is split on whitespace and every token is tried against
the grammar of each parameter kind, in a fixed order. The first kind whose
grammar matches claims the token; tokens no kind claims are kept as unknown.

Example:
    >>> classify("700MB 2h 1920x1080 oops")
    ClassifiedInput(parsed={'fileSize': '700MB', 'duration': '2h', 'resolution': '1920x1080'}, unknown=['oops'])
"""

from __future__ import annotations

import re

from encode_calc.core.logger import get_logger
from encode_calc.core.types import ClassifiedInput, ParameterKind
from encode_calc.utils.constants import COMMAND_PREFIX
from encode_calc.utils.units import (
    BIT_RATE_PATTERNS,
    DURATION_PATTERNS,
    FILE_SIZE_PATTERNS,
    FRAME_RATE_PATTERNS,
    RESOLUTION_PATTERNS,
)

logger = get_logger(__name__)

# Trial order matters: "30m" is a duration, "30M" a bit rate
GRAMMARS: tuple[tuple[ParameterKind, tuple[re.Pattern[str], ...]], ...] = (
    (ParameterKind.FILE_SIZE, FILE_SIZE_PATTERNS),
    (ParameterKind.DURATION, DURATION_PATTERNS),
    (ParameterKind.RESOLUTION, RESOLUTION_PATTERNS),
    (ParameterKind.FRAME_RATE, FRAME_RATE_PATTERNS),
    (ParameterKind.BIT_RATE, BIT_RATE_PATTERNS),
)


def tokenize(raw_line: str) -> list[str]:
    """Split a line into parameter tokens.

    Empty fragments and shell commands (tokens starting with "/") are dropped.
    """
    return [
        token
        for token in (fragment.strip() for fragment in raw_line.split())
        if token and not token.startswith(COMMAND_PREFIX)
    ]


def match_kind(token: str) -> ParameterKind | None:
    """Get the first parameter kind whose grammar matches the whole token."""
    for kind, patterns in GRAMMARS:
        if any(pattern.fullmatch(token) for pattern in patterns):
            return kind
    return None


def classify(raw_line: str) -> ClassifiedInput:
    """Classify every token of a raw input line.

    Args:
        raw_line: Line as typed by the user.

    Returns:
        ClassifiedInput with the matched token per kind name and the
        unmatched tokens in input order.
    """
    parsed: dict[str, str] = {}
    unknown: list[str] = []

    for token in tokenize(raw_line):
        kind = match_kind(token)
        if kind is None:
            unknown.append(token)
        else:
            parsed[kind.value] = token

    logger.debug("Classified %r as %s (unknown: %s)", raw_line, parsed, unknown)
    return ClassifiedInput(parsed=parsed, unknown=unknown)


__all__ = ["GRAMMARS", "classify", "match_kind", "tokenize"]
