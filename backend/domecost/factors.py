"""Derived-factor resolution: multipliers composed from input and config."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING

from domecost.models.estimate import AppliedFactors

if TYPE_CHECKING:
    from domecost.data.config import OccupantScaling, ScalingBand
    from domecost.data.repository import CostTable
    from domecost.models.enums import ShellHeight, SiteComplexity
    from domecost.models.project import ProjectInput


@dataclass(frozen=True)
class OccupantFactors:
    """Bathroom-count nudges relative to the area-implied bathroom count."""

    expected_bathrooms: int
    delta: int
    plumbing_electrical: float
    utilities: float
    special_systems: float


@dataclass(frozen=True)
class ResolvedFactors:
    """Every multiplier the line item builder needs for one estimate."""

    region: float
    composite_shell: float
    site: float
    site_option: float
    mechanical: float
    finish: float
    occupant: OccupantFactors

    def to_applied(self) -> AppliedFactors:
        return AppliedFactors(
            region=self.region,
            composite_shell=self.composite_shell,
            site=self.site,
            site_option=self.site_option,
            mechanical=self.mechanical,
            finish=self.finish,
            plumbing_electrical=self.occupant.plumbing_electrical,
            utilities=self.occupant.utilities,
            special_systems=self.occupant.special_systems,
            expected_bathrooms=self.occupant.expected_bathrooms,
        )


def round_half_up(value: float) -> int:
    """Round to the nearest integer with ties rounded up (1.5 -> 2)."""
    return math.floor(value + 0.5)


def clamp(value: float, low: float, high: float) -> float:
    return min(high, max(low, value))


def _band_factor(band: ScalingBand, delta: int) -> float:
    return clamp(1 + band.slope * delta, band.floor, band.ceiling)


def occupant_factors(
    floor_area_sf: float, bathroom_count: int, scaling: OccupantScaling
) -> OccupantFactors:
    """Compute the three occupant-scaling factors.

    ``expected = max(1, round(area / sf_per_expected_bathroom))`` with ties
    rounded up; each factor is ``1 + slope * (bathrooms - expected)``
    clamped to its band.
    """
    expected = max(1, round_half_up(floor_area_sf / scaling.sf_per_expected_bathroom))
    delta = bathroom_count - expected
    return OccupantFactors(
        expected_bathrooms=expected,
        delta=delta,
        plumbing_electrical=_band_factor(scaling.plumbing_electrical, delta),
        utilities=_band_factor(scaling.utilities, delta),
        special_systems=_band_factor(scaling.special_systems, delta),
    )


def composite_shell_multiplier(
    table: CostTable,
    region: float,
    dome_count: int,
    height: ShellHeight,
    site: SiteComplexity,
) -> float:
    """region x dome-count x shell-height x site-staging."""
    return (
        region
        * table.dome_count_multiplier(dome_count)
        * table.shell_height_multiplier(height)
        * table.site_staging_multiplier(site)
    )


def resolve_factors(project: ProjectInput, table: CostTable) -> ResolvedFactors:
    """Resolve region, shell, category and occupant factors for a project."""
    return ResolvedFactors(
        region=project.region_factor,
        composite_shell=composite_shell_multiplier(
            table,
            project.region_factor,
            project.dome_count,
            project.shell_height,
            project.site_complexity,
        ),
        site=table.site_item_multiplier(project.site_complexity),
        site_option=table.site_option_multiplier(project.site_complexity),
        mechanical=table.mechanical_multiplier(project.mechanical_tier),
        finish=table.finish_multiplier(project.finish_level),
        occupant=occupant_factors(
            project.floor_area_sf, project.bathroom_count, table.occupant_scaling
        ),
    )
