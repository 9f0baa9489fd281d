"""
Shared pytest fixtures for run-metrics tests.

This module provides reusable fixtures for:
- Threshold paces
- Settings configurations
- Recorded activity tables (Strava runs from March-April 2020)
- Temporary CSV and YAML files
"""

from pathlib import Path

import pandas as pd
import pytest
import yaml

from run_metrics.metrics import reverse_average_pace
from run_metrics.models import Measurement
from run_metrics.settings import Settings

# ============================================================================
# Threshold Fixtures
# ============================================================================


@pytest.fixture
def ftp_speed() -> float:
    """Functional threshold pace of 6:18 per mile, in metres per second."""
    return reverse_average_pace("6:18", Measurement.MILES)


@pytest.fixture
def ngp_speed() -> float:
    """Normalized graded pace of 6:28 per mile, in metres per second."""
    return reverse_average_pace("6:28", Measurement.MILES)


# ============================================================================
# Configuration Fixtures
# ============================================================================


@pytest.fixture
def settings_miles() -> Settings:
    """Provide settings in miles with a 6:18 threshold pace."""
    return Settings(measurement=Measurement.MILES, ftp_pace="6:18")


@pytest.fixture
def temp_config_file(tmp_path: Path) -> Path:
    """Create a temporary YAML config file path for testing."""
    return tmp_path / "config.yaml"


@pytest.fixture
def sample_config_file(tmp_path: Path) -> Path:
    """Create a temporary config file with sample data."""
    config_path = tmp_path / "config.yaml"
    with open(config_path, "w") as f:
        yaml.dump(
            {
                "measurement": "Miles",
                "ftp_pace": "6:18",
                "activities_file": "activities.csv",
            },
            f,
        )
    return config_path


# ============================================================================
# Data Fixtures - Activities
# ============================================================================

# (start_date, elapsed_time [s], average_speed [m/s], distance [m]),
# most recent first
MONTH_RUNS = [
    ("2020-04-22T16:46:27Z", 2648, 3.516, 9071.8),
    ("2020-04-21T16:33:44Z", 1979, 3.496, 6730.2),
    ("2020-04-18T16:42:26Z", 2914, 3.402, 9705.1),
    ("2020-04-16T16:41:36Z", 3737, 3.47, 12879.3),
    ("2020-04-14T16:40:14Z", 3015, 3.635, 10712.6),
    ("2020-04-12T14:04:03Z", 3768, 3.496, 13012.3),
    ("2020-04-11T11:26:46Z", 4834, 3.507, 16715.6),
    ("2020-04-10T14:14:49Z", 2780, 3.518, 9716.2),
    ("2020-04-08T16:36:16Z", 2777, 3.607, 9681.3),
    ("2020-04-07T16:55:26Z", 2092, 3.696, 7695.7),
    ("2020-04-05T15:48:36Z", 2162, 3.563, 7704.1),
    ("2020-04-04T15:05:29Z", 135, 3.126, 422.0),
    ("2020-04-04T15:00:07Z", 233, 4.488, 798.9),
    ("2020-04-04T14:11:05Z", 2824, 3.588, 10121.1),
    ("2020-04-02T16:39:50Z", 2382, 3.539, 8415.8),
    ("2020-03-31T16:47:03Z", 1498, 3.994, 5915.4),
    ("2020-03-28T14:41:04Z", 1631, 3.623, 5909.4),
    ("2020-03-27T12:25:52Z", 1599, 3.645, 5818.0),
    ("2020-03-25T12:03:31Z", 2132, 3.472, 7054.9),
    ("2020-03-22T09:40:00Z", 6372, 3.424, 21818.2),
    ("2020-03-21T09:51:08Z", 613, 3.271, 1992.1),
    ("2020-03-21T08:55:12Z", 2138, 3.89, 7013.4),
    ("2020-03-19T17:42:49Z", 4719, 3.415, 16103.1),
]


def _runs_frame(runs: list[tuple]) -> pd.DataFrame:
    df = pd.DataFrame(
        runs, columns=["start_date", "elapsed_time", "average_speed", "distance"]
    )
    df["start_date"] = pd.to_datetime(df["start_date"])
    return df


@pytest.fixture
def month_runs() -> pd.DataFrame:
    """Runs from the 42 days before 27th April 2020."""
    return _runs_frame(MONTH_RUNS)


@pytest.fixture
def week_runs() -> pd.DataFrame:
    """Runs from the 7 days before 27th April 2020."""
    return _runs_frame(MONTH_RUNS[:2])


@pytest.fixture
def activities_csv(tmp_path: Path, month_runs: pd.DataFrame) -> Path:
    """Write the month of runs to a semicolon-separated CSV file."""
    csv_path = tmp_path / "activities.csv"
    # Oldest first on disk to exercise sorting
    month_runs.iloc[::-1].to_csv(csv_path, sep=";", index=False)
    return csv_path
