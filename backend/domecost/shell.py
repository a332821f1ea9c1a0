"""Structural shell cost calculation.

The shell is priced as four components:

1. **Membrane** (airform) and **foam** per SF of shell surface.
2. **Shotcrete** per SF of shell surface, scaled by shell thickness and
   mix type.
3. **Reinforcement** per SF of *floor* area (it follows the interior
   footprint rather than the envelope), also scaled by thickness and mix.

Every per-SF range is calibrated and multiplied by the composite shell
multiplier. The component lows and highs are summed separately.

Reporting policy: the structural shell line item carries the midpoint of
that summed range as a point value (``low == high``), and the same
midpoint drives the shell cost-per-SF metric. Report consumers rely on
this single figure, so the range is kept only in :class:`ShellBreakdown`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from domecost.models.estimate import CostRange, ShellBreakdown

if TYPE_CHECKING:
    from domecost.data.repository import CostTable
    from domecost.models.enums import MixType


def shell_surface_area(table: CostTable, floor_area_sf: float) -> float:
    return floor_area_sf * table.envelope_to_interior_ratio


def compute_shell_cost(
    table: CostTable,
    floor_area_sf: float,
    composite_multiplier: float,
    shell_thickness_in: int,
    mix_type: MixType,
) -> ShellBreakdown:
    """Price the shell for a given floor area and composite multiplier."""
    units = table.shell_unit_costs
    surface_sf = shell_surface_area(table, floor_area_sf)
    structural = table.shell_thickness_multiplier(
        shell_thickness_in
    ) * table.mix_type_multiplier(mix_type)

    def per_sf(unit: CostRange, extra: float = 1.0) -> CostRange:
        return CostRange(
            low=table.calibrate(unit.low * composite_multiplier) * extra,
            high=table.calibrate(unit.high * composite_multiplier) * extra,
        )

    membrane = per_sf(units.membrane_per_shell_sf).scale(surface_sf)
    foam = per_sf(units.foam_per_shell_sf).scale(surface_sf)
    shotcrete = per_sf(units.shotcrete_per_shell_sf, structural).scale(surface_sf)
    reinforcement = per_sf(units.reinforcement_per_floor_sf, structural).scale(floor_area_sf)

    total = CostRange(
        low=membrane.low + foam.low + shotcrete.low + reinforcement.low,
        high=membrane.high + foam.high + shotcrete.high + reinforcement.high,
    )
    return ShellBreakdown(
        shell_surface_sf=surface_sf,
        membrane=membrane,
        foam=foam,
        shotcrete=shotcrete,
        reinforcement=reinforcement,
        total=total,
        midpoint=total.midpoint,
    )


def shell_line_item_cost(shell: ShellBreakdown) -> CostRange:
    """The reported shell line item: the range midpoint as a point value."""
    return CostRange.point(shell.midpoint)
