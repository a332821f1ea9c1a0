"""Custom exception hierarchy for domecost.

The estimation engine itself never raises; these cover configuration
loading and the HTTP surface.
"""

from __future__ import annotations


class DomeCostError(Exception):
    """Base exception for all domecost errors."""


class ConfigurationError(DomeCostError):
    """Raised when an estimator configuration cannot be loaded."""
