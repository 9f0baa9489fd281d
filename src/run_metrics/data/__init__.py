"""
Data access layer.

This package contains modules for loading activity tables.
"""

from .loader import ActivityDataLoader

__all__ = [
    "ActivityDataLoader",
]
