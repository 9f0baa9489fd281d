"""Application settings and configuration management."""

from pathlib import Path

import yaml
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .constants import CSVConstants, TrainingLoadWindows
from .exceptions import ConfigurationError
from .metrics.base import resolve_measurement
from .models import Measurement


class Settings(BaseSettings):
    """
    Settings for the run-metrics command line and summarizer.

    Settings are loaded in the following order of precedence (highest to lowest):
    1. Values passed explicitly (e.g. from a YAML file via load_settings)
    2. Environment variables (e.g., RUN_METRICS_FTP_PACE)
    3. .env file (if found)
    4. Default values

    The formula functions in run_metrics.metrics never read settings.
    """

    model_config = SettingsConfigDict(
        env_prefix="RUN_METRICS_", env_file=".env", extra="ignore"
    )

    # --- Units ---
    measurement: Measurement = Measurement.KILOMETERS

    # --- Athlete Thresholds ---
    ftp_pace: str | None = None  # Functional threshold pace, "M:SS" per unit

    # --- Training Load Windows ---
    atl_days: int = TrainingLoadWindows.ATL_DAYS
    ctl_days: int = TrainingLoadWindows.CTL_DAYS

    # --- Data Files ---
    activities_file: Path | None = None
    csv_separator: str = CSVConstants.DEFAULT_SEPARATOR

    @field_validator("measurement", mode="before")
    @classmethod
    def normalize_measurement(cls, value):
        """Accept 'miles'/'kilometers' in any case as well as enum values."""
        return resolve_measurement(value)

    @field_validator("atl_days", "ctl_days")
    @classmethod
    def validate_window(cls, value: int) -> int:
        """Training load windows must cover at least one day."""
        if value < 1:
            raise ValueError("Training load window must be at least 1 day")
        return value


def load_settings(config_file: Path | None = None) -> Settings:
    """Load settings from a YAML file, environment variables, and defaults."""
    if config_file:
        try:
            with open(config_file, encoding="utf-8") as f:
                yaml_settings = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            raise ConfigurationError(
                f"Failed to read config file {config_file}: {e}"
            ) from e

        if not isinstance(yaml_settings, dict):
            raise ConfigurationError(
                f"Config file {config_file} must contain a mapping"
            )

        # Join a relative activities file with the config file's directory
        if (
            "activities_file" in yaml_settings
            and not Path(yaml_settings["activities_file"]).is_absolute()
        ):
            yaml_settings["activities_file"] = str(
                config_file.parent / yaml_settings["activities_file"]
            )

        return Settings(**yaml_settings)

    return Settings()
