"""
Analysis layer.

This package contains summaries built on top of the metric formulas.
"""

from .summarizer import TrainingLoadSummarizer, classify_training_status

__all__ = [
    "TrainingLoadSummarizer",
    "classify_training_status",
]
