"""Core module for the encoding calculator.

This module provides the type definitions, error taxonomy, configuration
and logging shared by the calculator.

Note:
    To avoid circular imports, the tokenizer, calculators and resolver are
    imported separately:
    >>> from encode_calc.core.resolver import parse_input
"""

from encode_calc.core.config import (
    Config,
    FormattingConfig,
    LoggingConfig,
    ShellConfig,
)
from encode_calc.core.errors import (
    AllValuesProvidedError,
    AmbiguousParameterCountError,
    CalculatorError,
    InvalidBitRateFormat,
    InvalidDurationFormat,
    InvalidFileSizeFormat,
    InvalidParameterValue,
    UnknownTokenError,
    UnsupportedBitRateUnit,
)
from encode_calc.core.logger import (
    LogLevel,
    configure_logging,
    get_log_dir,
    get_log_file_path,
    get_logger,
    set_log_level,
)
from encode_calc.core.types import (
    REQUIRED_KINDS,
    CalculationResult,
    ClassifiedInput,
    ParameterKind,
)

__all__ = [
    # Config
    "Config",
    "FormattingConfig",
    "LoggingConfig",
    "ShellConfig",
    # Errors
    "AllValuesProvidedError",
    "AmbiguousParameterCountError",
    "CalculatorError",
    "InvalidBitRateFormat",
    "InvalidDurationFormat",
    "InvalidFileSizeFormat",
    "InvalidParameterValue",
    "UnknownTokenError",
    "UnsupportedBitRateUnit",
    # Logger
    "LogLevel",
    "configure_logging",
    "get_log_dir",
    "get_log_file_path",
    "get_logger",
    "set_log_level",
    # Types
    "REQUIRED_KINDS",
    "CalculationResult",
    "ClassifiedInput",
    "ParameterKind",
]
