"""Settings management using Pydantic for type validation and configuration."""

import logging
import os
from datetime import MAXYEAR, MINYEAR, date
from pathlib import Path
from typing import Any, Optional

import yaml
from dotenv import dotenv_values
from pydantic import BaseModel, ConfigDict, Field, PrivateAttr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..utils.exceptions import ConfigurationError
from ..utils.logging import get_log_level

logger = logging.getLogger(__name__)

ENV_PREFIX = "TEXTCAL_"


class LayoutSettings(BaseModel):
    """Immutable layout of the month grid.

    ``cell_width`` counts the separating space, so the default of 3 gives
    two-digit days one blank column between them.
    """

    model_config = ConfigDict(frozen=True)

    columns: int = Field(default=3, ge=1, description="Months per row")
    cell_width: int = Field(
        default=3, ge=2, description="Characters per day cell, including its separator"
    )
    row_gap: int = Field(default=1, ge=0, description="Blank lines between calendar rows")
    column_gap: int = Field(default=1, ge=0, description="Spaces between adjacent month blocks")

    @property
    def block_width(self) -> int:
        """Width of every line of a month block."""
        return 7 * self.cell_width


class LoggingSettings(BaseModel):
    """Logging configuration settings."""

    model_config = ConfigDict(validate_assignment=True)

    # Console Logging
    console_enabled: bool = Field(default=True, description="Enable console logging")
    console_level: str = Field(
        default="WARNING",
        description="Console log level: DEBUG, VERBOSE, INFO, WARNING, ERROR, CRITICAL",
    )
    console_colors: bool = Field(
        default=True, description="Enable colored console output (auto-detected)"
    )

    # File Logging
    file_enabled: bool = Field(default=False, description="Enable file logging")
    file_level: str = Field(
        default="DEBUG",
        description="File log level: DEBUG, VERBOSE, INFO, WARNING, ERROR, CRITICAL",
    )
    file_directory: Optional[str] = Field(
        default=None, description="Custom log directory (defaults to data_dir/logs)"
    )
    file_prefix: str = Field(default="textcal", description="Log file prefix")
    max_log_files: int = Field(default=5, ge=1, description="Maximum number of log files to keep")
    include_function_names: bool = Field(
        default=True, description="Include function names and line numbers in file logs"
    )

    @field_validator("console_level", "file_level")
    @classmethod
    def _check_level(cls, value: str) -> str:
        try:
            get_log_level(value)
        except AttributeError:
            raise ValueError(f"Unknown log level: {value}") from None
        return value.upper()


class TextCalSettings(BaseSettings):
    """Application settings with environment variable and YAML support."""

    # Private attributes
    _explicit_args: set = PrivateAttr(default_factory=set)
    _env_vars_set: set = PrivateAttr(default_factory=set)

    # Calendar range and naming
    year_start: int = Field(
        default_factory=lambda: date.today().year,
        ge=MINYEAR,
        le=MAXYEAR,
        description="First year to render (inclusive)",
    )
    year_end: Optional[int] = Field(
        default=None,
        ge=MINYEAR + 1,
        le=MAXYEAR + 1,
        description="Year to stop before (exclusive); defaults to year_start + 1",
    )
    locale: Optional[str] = Field(
        default=None, description="POSIX locale for weekday and month names"
    )

    # Output
    layout: LayoutSettings = Field(default_factory=LayoutSettings, description="Grid layout")
    trim_trailing_whitespace: bool = Field(
        default=True, description="Strip trailing spaces from printed lines"
    )

    # Logging Configuration
    logging: LoggingSettings = Field(
        default_factory=LoggingSettings, description="Logging settings"
    )

    # File Paths
    config_dir: Path = Field(default_factory=lambda: Path.home() / ".config" / "textcal")
    data_dir: Path = Field(default_factory=lambda: Path.home() / ".local" / "share" / "textcal")
    config_path: Optional[Path] = Field(
        default=None, description="Explicit YAML configuration file"
    )

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        env_nested_delimiter="__",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        validate_assignment=True,
        extra="ignore",
    )

    def __init__(self, **kwargs: Any) -> None:
        # Track which environment and .env variables are set before calling parent
        env_keys = set(os.environ)
        env_file = Path(str(self.model_config.get("env_file") or ".env"))
        if env_file.is_file():
            env_keys.update(dotenv_values(env_file))
        env_vars_set = {
            key[len(ENV_PREFIX) :].lower()
            for key in env_keys
            if key.upper().startswith(ENV_PREFIX)
        }

        super().__init__(**kwargs)

        self._explicit_args = set(kwargs.keys())
        self._env_vars_set = env_vars_set

        self._load_yaml_config()
        self.check_year_range()

    @property
    def effective_year_end(self) -> int:
        """The exclusive end year, defaulting to one year after ``year_start``."""
        if self.year_end is None:
            return self.year_start + 1
        return self.year_end

    def check_year_range(self) -> None:
        """Fail fast when the configured span is empty.

        Raises:
            ConfigurationError: If the end year is not after the start year
        """
        if self.effective_year_end <= self.year_start:
            raise ConfigurationError(
                f"year_end must be greater than year_start ({self.year_start})",
                field_name="year_end",
                field_value=self.effective_year_end,
            )

    def _is_overridden(self, name: str) -> bool:
        """True when a setting came from kwargs or the environment and YAML must not win."""
        if name in self._explicit_args or name in self._env_vars_set:
            return True
        section = name.split("__", 1)[0]
        return section != name and (
            section in self._explicit_args or section in self._env_vars_set
        )

    def _find_config_file(self) -> Optional[Path]:
        """Find the YAML configuration file.

        Search order: explicit ``config_path``, ``./config/config.yaml``,
        then ``config_dir/config.yaml``.

        Raises:
            ConfigurationError: If an explicit ``config_path`` does not exist
        """
        if self.config_path is not None:
            if not self.config_path.is_file():
                raise ConfigurationError(
                    "Configuration file not found",
                    field_name="config_path",
                    field_value=self.config_path,
                )
            return self.config_path

        project_config = Path.cwd() / "config" / "config.yaml"
        if project_config.is_file():
            return project_config

        user_config = self.config_dir / "config.yaml"
        if user_config.is_file():
            return user_config

        return None

    def _load_basic_settings(self, config_data: dict) -> None:
        """Load top-level calendar settings from YAML data."""
        basic_settings = ["year_start", "year_end", "locale", "trim_trailing_whitespace"]

        for setting in basic_settings:
            if setting in config_data and not self._is_overridden(setting):
                setattr(self, setting, config_data[setting])

    def _load_layout_config(self, config_data: dict) -> None:
        """Load the ``layout`` section, rebuilding the frozen layout model."""
        layout_config = config_data.get("layout")
        if not isinstance(layout_config, dict):
            return

        updates = {
            key: value
            for key, value in layout_config.items()
            if key in LayoutSettings.model_fields and not self._is_overridden(f"layout__{key}")
        }
        if updates:
            self.layout = LayoutSettings(**{**self.layout.model_dump(), **updates})

    def _load_logging_config(self, config_data: dict) -> None:
        """Load the ``logging`` section from YAML data."""
        logging_config = config_data.get("logging")
        if not isinstance(logging_config, dict):
            return

        for setting, value in logging_config.items():
            if setting in LoggingSettings.model_fields and not self._is_overridden(
                f"logging__{setting}"
            ):
                setattr(self.logging, setting, value)

    def _load_yaml_config(self) -> None:
        """Load configuration from YAML file if it exists.

        Unreadable or malformed files are logged and skipped so that
        environment variables and defaults still apply; values that parse but
        fail validation are raised.
        """
        config_file = self._find_config_file()
        if not config_file:
            return

        try:
            with config_file.open(encoding="utf-8") as f:
                config_data = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            logger.warning(f"Could not load YAML config from {config_file}: {e}")
            return

        if not config_data:
            return
        if not isinstance(config_data, dict):
            logger.warning(f"Ignoring YAML config {config_file}: top level is not a mapping")
            return

        self._load_basic_settings(config_data)
        self._load_layout_config(config_data)
        self._load_logging_config(config_data)
        logger.debug(f"Loaded configuration from {config_file}")


# Global settings management
_settings_instance: Optional[TextCalSettings] = None


def get_settings() -> TextCalSettings:
    """Get the global settings instance, creating it lazily if needed.

    Raises:
        ConfigurationError: If the configured year range is empty
    """
    if globals()["_settings_instance"] is None:
        globals()["_settings_instance"] = TextCalSettings()
    return globals()["_settings_instance"]


def reset_settings() -> None:
    """Reset the global settings instance (primarily for testing)."""
    globals()["_settings_instance"] = None
