"""
Training load summary.

This module turns an activities table into fitness, fatigue and form figures.
"""

import logging
from typing import Protocol

import pandas as pd

from ..constants import TrainingStatusThresholds
from ..exceptions import ConfigurationError
from ..metrics.conversion import reverse_average_pace
from ..metrics.training_load import (
    calculate_acute_training_load,
    calculate_chronic_training_load,
    calculate_training_stress_balance,
    tss_series_from_activities,
)
from ..models import TrainingLoadSummary
from ..settings import Settings

logger = logging.getLogger(__name__)


class SummarizerProtocol(Protocol):
    """Protocol for summarizers."""

    def summarize(
        self, activities_df: pd.DataFrame, ftp: float | None = None
    ) -> TrainingLoadSummary:
        """Create summary from activities."""
        ...


def classify_training_status(tsb: float) -> str:
    """Label form from a Training Stress Balance value."""
    if tsb > TrainingStatusThresholds.TSB_FRESH:
        return "fresh"
    if tsb < TrainingStatusThresholds.TSB_HIGH_FATIGUE:
        return "high fatigue"
    if (
        TrainingStatusThresholds.TSB_PRODUCTIVE_MIN
        <= tsb
        <= TrainingStatusThresholds.TSB_PRODUCTIVE_MAX
    ):
        return "productive"
    return "neutral"


class TrainingLoadSummarizer:
    """
    Service for summarizing training load from a set of activities.

    CTL and ATL are averaged over the most recent activities using the windows
    configured in settings, and TSB is their difference.
    """

    def __init__(self, settings: Settings):
        """
        Initialize the summarizer service.

        Args:
            settings: Settings providing threshold pace, units and windows
        """
        self.settings = settings
        self.logger = logging.getLogger(__name__)

    def _resolve_ftp(self, ftp: float | None) -> float:
        """Use an explicit FTP speed or derive one from the configured pace."""
        if ftp is not None:
            return ftp
        if not self.settings.ftp_pace:
            raise ConfigurationError(
                "No functional threshold pace given and ftp_pace is not configured"
            )
        return reverse_average_pace(self.settings.ftp_pace, self.settings.measurement)

    def summarize(
        self, activities_df: pd.DataFrame, ftp: float | None = None
    ) -> TrainingLoadSummary:
        """
        Calculate CTL, ATL and TSB for an activities table.

        Args:
            activities_df: Activities with average_speed, elapsed_time and
                optionally start_date
            ftp: Functional threshold pace in metres per second; defaults to
                settings.ftp_pace

        Returns:
            TrainingLoadSummary for the most recent activities
        """
        ftp_speed = self._resolve_ftp(ftp)
        tss = tss_series_from_activities(activities_df, ftp_speed)

        if tss.empty:
            self.logger.warning("No activities to summarize")
            return TrainingLoadSummary(
                chronic_training_load=0.0,
                acute_training_load=0.0,
                training_stress_balance=0.0,
            )

        ctl = calculate_chronic_training_load(tss, days=self.settings.ctl_days)
        atl = calculate_acute_training_load(tss, days=self.settings.atl_days)
        tsb = calculate_training_stress_balance(ctl, atl)

        self.logger.info(f"Training load: CTL={ctl}, ATL={atl}, TSB={tsb}")
        return TrainingLoadSummary(
            chronic_training_load=ctl,
            acute_training_load=atl,
            training_stress_balance=tsb,
            activity_count=min(len(tss), self.settings.ctl_days),
            status=classify_training_status(tsb),
        )
