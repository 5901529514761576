"""Configuration management system for encode_calc.

This module provides a centralized configuration system that loads, validates,
and saves user preferences in JSON format. It supports both default and
user-customized settings with environment variable overrides.

Example:
    >>> from encode_calc.core.config import Config
    >>> config = Config.load()
    >>> print(config.formatting.precision)  # 3
    >>> config.shell.prompt = ">> "
    >>> config.save()

    >>> # Environment variable override
    >>> # ENCODE_CALC_FORMATTING__PRECISION=4
    >>> config = Config.load(force_reload=True)
    >>> print(config.formatting.precision)  # 4
"""

from __future__ import annotations

import json
import threading
from pathlib import Path
from typing import Any, Literal

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)
from pydantic_settings.sources import JsonConfigSettingsSource

from encode_calc import __version__
from encode_calc.utils.constants import (
    DEFAULT_HISTORY_SIZE,
    DEFAULT_PRECISION,
    DEFAULT_PROMPT,
    MAX_PRECISION,
    MIN_PRECISION,
)

# Default paths
DEFAULT_CONFIG_DIR = Path.home() / ".config" / "encode_calc"
DEFAULT_CONFIG_FILE = DEFAULT_CONFIG_DIR / "config.json"

# Singleton state (module-level to avoid Pydantic serialization issues)
_config_lock: threading.Lock = threading.Lock()
_config_instance: Config | None = None
_config_path_cache: Path | None = None


class FormattingConfig(BaseModel):
    """Output formatting settings.

    Attributes:
        precision: Significant digits for scaled bit rates, file sizes and
            bits-per-pixel figures.
    """

    precision: int = Field(default=DEFAULT_PRECISION, ge=MIN_PRECISION, le=MAX_PRECISION)


class ShellConfig(BaseModel):
    """Interactive shell settings.

    Attributes:
        prompt: Prompt shown before each input line.
        show_intro: Whether to print the supported-parameter intro on start.
        history_size: Number of results kept in the in-memory session log.
    """

    prompt: str = DEFAULT_PROMPT
    show_intro: bool = True
    history_size: int = Field(default=DEFAULT_HISTORY_SIZE, ge=1)


class LoggingConfig(BaseModel):
    """Logging settings.

    Attributes:
        level: Log level name.
        file_output: Whether to also write a rotating log file.
    """

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"
    file_output: bool = False

    @field_validator("level", mode="before")
    @classmethod
    def upper_level(cls, v: Any) -> Any:
        """Accept log level names in any case.

        Args:
            v: Raw level value.

        Returns:
            Upper-cased level name when given a string.
        """
        if isinstance(v, str):
            return v.upper()
        return v


class Config(BaseSettings):
    """Main configuration class for encode_calc.

    Attributes:
        version: Configuration schema version.
        formatting: Output formatting settings.
        shell: Interactive shell settings.
        logging: Logging settings.

    Example:
        >>> config = Config.load()
        >>> print(config.formatting.precision)
        3

        >>> # Environment override (ENCODE_CALC_SHELL__PROMPT="calc> ")
        >>> config = Config.load(force_reload=True)
        >>> print(config.shell.prompt)
        'calc> '
    """

    model_config = SettingsConfigDict(
        env_prefix="ENCODE_CALC_",
        env_nested_delimiter="__",
        extra="ignore",
    )

    version: str = Field(default_factory=lambda: __version__)
    formatting: FormattingConfig = Field(default_factory=FormattingConfig)
    shell: ShellConfig = Field(default_factory=ShellConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Customize settings sources priority.

        Priority (highest to lowest):
        1. init_settings (direct arguments)
        2. env_settings (environment variables)
        3. JSON file settings
        4. Default values
        """
        _ = dotenv_settings
        _ = file_secret_settings

        json_source = JsonConfigSettingsSource(settings_cls, json_file=cls._find_config_file())

        return (
            init_settings,
            env_settings,
            json_source,
        )

    @classmethod
    def load(cls, *, force_reload: bool = False) -> Config:
        """Load configuration.

        Loads configuration from the default location. Environment variables
        override loaded values.

        Args:
            force_reload: Force reload even if already loaded.

        Returns:
            Config: Loaded configuration instance.

        Raises:
            pydantic.ValidationError: If the file or environment holds invalid values.
        """
        global _config_instance, _config_path_cache

        with _config_lock:
            if _config_instance is not None and not force_reload:
                return _config_instance

            instance = cls()
            _config_path_cache = cls._find_config_file() or DEFAULT_CONFIG_FILE

            _config_instance = instance
            return instance

    @classmethod
    def _find_config_file(cls) -> Path | None:
        """Find the configuration file to load.

        Returns:
            Path to config file, or None if no file exists.
        """
        if DEFAULT_CONFIG_FILE.exists():
            return DEFAULT_CONFIG_FILE
        return None

    def save(self, config_path: Path | None = None) -> None:
        """Save configuration to file.

        Args:
            config_path: Optional path to save to. Defaults to loaded path.

        Raises:
            OSError: If file cannot be written.
        """
        save_path = config_path or _config_path_cache or DEFAULT_CONFIG_FILE

        save_path.parent.mkdir(parents=True, exist_ok=True)

        with save_path.open("w", encoding="utf-8") as f:
            json.dump(self.model_dump(mode="json"), f, indent=2, ensure_ascii=False)
            f.write("\n")

    @classmethod
    def reset(cls) -> None:
        """Reset the singleton instance.

        This is primarily useful for testing to ensure a clean state.
        """
        global _config_instance, _config_path_cache

        with _config_lock:
            _config_instance = None
            _config_path_cache = None

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to dictionary.

        Returns:
            Dictionary representation of configuration.
        """
        result: dict[str, Any] = self.model_dump()
        return result


__all__ = [
    "Config",
    "FormattingConfig",
    "LoggingConfig",
    "ShellConfig",
    "DEFAULT_CONFIG_DIR",
    "DEFAULT_CONFIG_FILE",
]
