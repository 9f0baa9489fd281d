"""
Data loading functionality.

This module provides a clean interface for loading activity tables that the
training load metrics are derived from.
"""

import logging
from pathlib import Path
from typing import Protocol

import pandas as pd

from ..constants import ActivityColumns
from ..exceptions import DataLoadError
from ..settings import Settings

logger = logging.getLogger(__name__)


class DataLoaderProtocol(Protocol):
    """Protocol for data loaders."""

    def load_activities(self, path: Path | None = None) -> pd.DataFrame:
        """Load activities DataFrame."""
        ...


class ActivityDataLoader:
    """
    Handles loading of activity data from CSV files.

    Expected columns are start_date, elapsed_time (seconds) and
    average_speed (metres per second); other columns are kept as-is.
    """

    def __init__(self, settings: Settings):
        """
        Initialize the data loader.

        Args:
            settings: Settings providing the default file and CSV separator
        """
        self.settings = settings
        self.logger = logging.getLogger(__name__)

    def load_activities(self, path: Path | None = None) -> pd.DataFrame:
        """
        Load activities from a CSV file.

        Args:
            path: File to read, defaults to settings.activities_file

        Returns:
            DataFrame containing activity metadata

        Raises:
            DataLoadError: If no file is configured, it is missing, or parsing fails
        """
        activities_file = path or self.settings.activities_file
        if activities_file is None:
            raise DataLoadError("No activities file configured")

        activities_file = Path(activities_file)
        if not activities_file.exists():
            raise DataLoadError(f"Activities file not found: {activities_file}")

        try:
            self.logger.info(f"Loading activities from {activities_file}")
            df = pd.read_csv(activities_file, sep=self.settings.csv_separator)
            if ActivityColumns.START_DATE in df.columns:
                df[ActivityColumns.START_DATE] = pd.to_datetime(
                    df[ActivityColumns.START_DATE]
                )
        except Exception as e:
            raise DataLoadError(f"Failed to load activities: {e}") from e

        self.logger.info(f"Loaded {len(df)} activities")
        return df
