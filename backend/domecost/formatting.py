"""Formatting helpers for estimate output.

Estimates are communicated in whole dollars (e.g. '$297,681 - $565,104');
the engine itself never rounds.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from domecost.models.estimate import CostRange


def format_currency(amount: float) -> str:
    """Format an amount as whole dollars with comma separators.

    Non-finite amounts render as '$0'.
    """
    if not math.isfinite(amount):
        amount = 0.0
    return f"${amount:,.0f}"


def format_cost_range(cr: CostRange) -> str:
    """Format a CostRange as '$low – $high'."""
    return f"{format_currency(cr.low)} – {format_currency(cr.high)}"


def format_sf_range(low: float, high: float) -> str:
    """Format a per-SF range as '$/SF: $low – $high'."""
    return f"$/SF: {format_currency(low)} – {format_currency(high)}"
