"""Unit tests for Settings module."""

from pathlib import Path

import pytest
import yaml
from pydantic import ValidationError

from run_metrics.exceptions import ConfigurationError
from run_metrics.models import Measurement
from run_metrics.settings import Settings, load_settings


class TestSettingsBasicLoading:
    """Test basic settings loading from different sources."""

    def test_default_values(self, monkeypatch):
        """Test that default values are set when nothing is configured."""
        for var in ("MEASUREMENT", "FTP_PACE", "ATL_DAYS", "CTL_DAYS"):
            monkeypatch.delenv(f"RUN_METRICS_{var}", raising=False)

        settings = Settings(_env_file=None)

        assert settings.measurement is Measurement.KILOMETERS
        assert settings.ftp_pace is None
        assert settings.atl_days == 7
        assert settings.ctl_days == 42
        assert settings.csv_separator == ";"
        assert settings.activities_file is None

    def test_load_from_env_vars(self, monkeypatch):
        """Test that settings are correctly loaded from environment variables."""
        monkeypatch.setenv("RUN_METRICS_MEASUREMENT", "miles")
        monkeypatch.setenv("RUN_METRICS_FTP_PACE", "6:18")
        monkeypatch.setenv("RUN_METRICS_CTL_DAYS", "28")

        settings = load_settings()

        assert settings.measurement is Measurement.MILES
        assert settings.ftp_pace == "6:18"
        assert settings.ctl_days == 28

    def test_load_from_yaml(self, sample_config_file: Path):
        """Test that settings are correctly loaded from a YAML file."""
        settings = load_settings(config_file=sample_config_file)

        assert settings.measurement is Measurement.MILES
        assert settings.ftp_pace == "6:18"

    def test_yaml_overrides_env_vars(self, monkeypatch, temp_config_file: Path):
        """Test that YAML settings override environment variables."""
        monkeypatch.setenv("RUN_METRICS_FTP_PACE", "7:00")
        with open(temp_config_file, "w") as f:
            yaml.dump({"ftp_pace": "6:18"}, f)

        settings = load_settings(config_file=temp_config_file)

        assert settings.ftp_pace == "6:18"

    def test_relative_activities_file(self, sample_config_file: Path):
        """Relative data paths resolve against the config file's directory."""
        settings = load_settings(config_file=sample_config_file)

        assert settings.activities_file == sample_config_file.parent / "activities.csv"

    def test_absolute_activities_file(self, temp_config_file: Path, tmp_path: Path):
        target = tmp_path / "elsewhere" / "runs.csv"
        with open(temp_config_file, "w") as f:
            yaml.dump({"activities_file": str(target)}, f)

        assert load_settings(config_file=temp_config_file).activities_file == target


class TestSettingsValidation:
    """Test rejection of invalid configuration."""

    def test_unsupported_measurement(self):
        with pytest.raises(ValidationError):
            Settings(measurement="furlongs")

    @pytest.mark.parametrize("field", ["atl_days", "ctl_days"])
    def test_window_must_be_positive(self, field: str):
        with pytest.raises(ValidationError):
            Settings(**{field: 0})

    def test_empty_yaml_gives_defaults(self, temp_config_file: Path):
        temp_config_file.write_text("")

        settings = load_settings(config_file=temp_config_file)

        assert isinstance(settings, Settings)

    def test_non_mapping_yaml(self, temp_config_file: Path):
        """A YAML list is not a valid configuration."""
        temp_config_file.write_text("- ftp_pace\n- measurement\n")

        with pytest.raises(ConfigurationError):
            load_settings(config_file=temp_config_file)

    def test_missing_config_file(self, tmp_path: Path):
        with pytest.raises(ConfigurationError):
            load_settings(config_file=tmp_path / "missing.yaml")
