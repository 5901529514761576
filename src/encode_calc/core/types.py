"""Core type definitions for the calculation workflow.

This module defines the data classes passed between the tokenizer, the
resolver and the callers of ``parse_input``.

Example:
    >>> from encode_calc.core.types import CalculationResult
    >>> result = CalculationResult(input="700MB 2h", output="Bit rate: 778 kbps")
    >>> result.is_error
    False
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from encode_calc.utils.constants import ERROR_PREFIX


class ParameterKind(Enum):
    """Kinds of parameter a token can be classified as.

    The declaration order is the trial order used by the classifier.

    Attributes:
        FILE_SIZE: Byte count with a decimal or binary unit ("500MB", "1GiB").
        DURATION: Time span ("2h", "1h30m", "01:30:00").
        RESOLUTION: Frame dimensions ("1920x1080").
        FRAME_RATE: Frames per second ("25fps").
        BIT_RATE: Bits per second ("5Mbps", "800k").
    """

    FILE_SIZE = "fileSize"
    DURATION = "duration"
    RESOLUTION = "resolution"
    FRAME_RATE = "frameRate"
    BIT_RATE = "bitRate"

    @property
    def label(self) -> str:
        """Get a human readable label for the kind."""
        return _LABELS[self]


_LABELS = {
    ParameterKind.FILE_SIZE: "File size",
    ParameterKind.DURATION: "Duration",
    ParameterKind.RESOLUTION: "Resolution",
    ParameterKind.FRAME_RATE: "Frame rate",
    ParameterKind.BIT_RATE: "Bit rate",
}

# Exactly one of these must be missing for a calculation
REQUIRED_KINDS: tuple[ParameterKind, ...] = (
    ParameterKind.BIT_RATE,
    ParameterKind.DURATION,
    ParameterKind.FILE_SIZE,
)


@dataclass(frozen=True)
class ClassifiedInput:
    """Tokens of one input line sorted into parameter kinds.

    Attributes:
        parsed: Matched token per kind name (e.g. ``{"fileSize": "500MB"}``).
            When a kind repeats, the last token wins.
        unknown: Tokens that matched no grammar, in input order.
    """

    parsed: dict[str, str] = field(default_factory=dict)
    unknown: list[str] = field(default_factory=list)

    def get(self, kind: ParameterKind) -> str | None:
        """Get the token classified as ``kind``, if any."""
        return self.parsed.get(kind.value)

    def has(self, kind: ParameterKind) -> bool:
        """Check whether a token of ``kind`` was supplied."""
        return kind.value in self.parsed

    @property
    def missing(self) -> list[ParameterKind]:
        """Required kinds absent from the input, in bit rate/duration/size order."""
        return [kind for kind in REQUIRED_KINDS if not self.has(kind)]


@dataclass(frozen=True)
class CalculationResult:
    """Outcome of one submitted input line.

    Attributes:
        input: The raw line as submitted.
        output: Formatted result or ``"Error: ..."`` text.
    """

    input: str
    output: str

    @property
    def is_error(self) -> bool:
        """Check whether the output reports an error."""
        return self.output.startswith(ERROR_PREFIX)

    def to_dict(self) -> dict[str, str]:
        """Convert to a JSON-serializable dictionary."""
        return {"input": self.input, "output": self.output}


__all__ = [
    "CalculationResult",
    "ClassifiedInput",
    "ParameterKind",
    "REQUIRED_KINDS",
]
