"""Exception taxonomy for calculation requests.

Every failure the calculator can explain to a user derives from
``CalculatorError``. The resolver catches these at the ``parse_input``
boundary and turns them into ``"Error: <message>"`` output, so the message of
each exception is the exact text shown to the user.
"""

from __future__ import annotations


class CalculatorError(Exception):
    """Base exception for calculation errors."""

    pass


class UnknownTokenError(CalculatorError):
    """Raised when one or more tokens match no parameter grammar."""

    def __init__(self, tokens: list[str]) -> None:
        self.tokens = list(tokens)
        super().__init__(f"Unknown tokens: {', '.join(self.tokens)}")


class AmbiguousParameterCountError(CalculatorError):
    """Raised when zero or several of the required parameters are missing."""

    def __init__(self) -> None:
        super().__init__("Provide only two parameters to calculate the missing value.")


class AllValuesProvidedError(CalculatorError):
    """Raised when bit rate, duration and file size are all supplied."""

    def __init__(self) -> None:
        super().__init__("All values were provided. Nothing to calculate.")


class InvalidDurationFormat(CalculatorError):
    """Raised when a duration token cannot be converted to seconds."""

    def __init__(self, token: str) -> None:
        self.token = token
        super().__init__(f"Invalid duration format {token}")


class InvalidFileSizeFormat(CalculatorError):
    """Raised when a file size token does not match ``<number><unit>``."""

    def __init__(self, token: str) -> None:
        self.token = token
        super().__init__(f"Invalid file size format {token}")


class InvalidBitRateFormat(CalculatorError):
    """Raised when a bit rate token does not match ``<number><unit>``."""

    def __init__(self, token: str) -> None:
        self.token = token
        super().__init__(f"Invalid bit rate format {token}")


class UnsupportedBitRateUnit(CalculatorError):
    """Raised when a bit rate token carries a unit outside the known set."""

    def __init__(self, unit: str) -> None:
        self.unit = unit
        super().__init__(f"Unsupported bit rate unit {unit}")


class InvalidParameterValue(CalculatorError):
    """Raised when a parsed value makes the calculation impossible."""

    pass


__all__ = [
    "AllValuesProvidedError",
    "AmbiguousParameterCountError",
    "CalculatorError",
    "InvalidBitRateFormat",
    "InvalidDurationFormat",
    "InvalidFileSizeFormat",
    "InvalidParameterValue",
    "UnknownTokenError",
    "UnsupportedBitRateUnit",
]
