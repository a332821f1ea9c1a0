"""Totals aggregation: subtotal, contingency, range adjustment, per-SF metrics."""

from __future__ import annotations

from typing import TYPE_CHECKING

from domecost.models.estimate import (
    CostRange,
    EstimateMetadata,
    EstimateResult,
    SiteworkSummary,
)

if TYPE_CHECKING:
    from collections.abc import Sequence

    from domecost.data.repository import CostTable
    from domecost.factors import ResolvedFactors
    from domecost.models.estimate import LineItem, ShellBreakdown
    from domecost.models.project import ProjectInput
    from domecost.options import OptionalSystemsTotal


def subtotal(items: Sequence[LineItem]) -> CostRange:
    """Sum the low and high bounds of every line item."""
    return CostRange(
        low=sum(item.cost.low for item in items),
        high=sum(item.cost.high for item in items),
    )


def aggregate(
    project: ProjectInput,
    items: Sequence[LineItem],
    options: OptionalSystemsTotal,
    shell: ShellBreakdown,
    sitework: SiteworkSummary,
    factors: ResolvedFactors,
    table: CostTable,
    metadata: EstimateMetadata,
) -> EstimateResult:
    """Roll line items and optional systems up into an ``EstimateResult``.

    ``total = (subtotal + contingency + options) * (1 + adjustment)`` where
    the adjustment is the configured low/high range spread. Per-SF figures
    divide by ``max(floor_area, 1)``.
    """
    pre = subtotal(items)
    contingency = pre.scale(project.contingency_fraction)
    options_cost = options.cost

    low_adj, high_adj = table.range_adjustments
    with_contingency = CostRange(
        low=pre.low + contingency.low + options_cost,
        high=pre.high + contingency.high + options_cost,
    )
    spread = CostRange(
        low=with_contingency.low * low_adj,
        high=with_contingency.high * high_adj,
    )
    total = CostRange(
        low=with_contingency.low * (1 + low_adj),
        high=with_contingency.high * (1 + high_adj),
    )

    divisor = max(project.floor_area_sf, 1.0)
    return EstimateResult(
        project=project,
        items=tuple(items),
        subtotal=pre,
        contingency=contingency,
        optional_systems_cost=options_cost,
        optional_systems_labels=options.labels,
        range_spread=spread,
        total=total,
        total_per_area_low=total.low / divisor,
        total_per_area_high=total.high / divisor,
        shell_cost_per_area=shell.midpoint / divisor,
        shell=shell,
        sitework=sitework,
        factors=factors.to_applied(),
        metadata=metadata,
    )


def empty_result(project: ProjectInput, metadata: EstimateMetadata) -> EstimateResult:
    """The degenerate result for a project with no floor area."""
    return EstimateResult(
        project=project,
        items=(),
        subtotal=CostRange.zero(),
        contingency=CostRange.zero(),
        optional_systems_cost=0.0,
        optional_systems_labels=(),
        range_spread=CostRange.zero(),
        total=CostRange.zero(),
        total_per_area_low=0.0,
        total_per_area_high=0.0,
        shell_cost_per_area=0.0,
        shell=None,
        sitework=SiteworkSummary(cost=CostRange.zero(), included=project.include_sitework),
        factors=None,
        metadata=metadata,
    )
