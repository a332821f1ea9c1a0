"""Line item builder: the categorized cost lines of an estimate.

Per-SF items compose every multiplier into the unit cost first and then
multiply by the governing area (floor area, shell surface or
non-conditioned area). Lump sums are region-scaled and optionally scaled
by one category multiplier. Low and high bounds travel through the same
chain independently, and since every multiplier is non-negative the
ordering ``low <= high`` is preserved.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from domecost.factors import composite_shell_multiplier
from domecost.models.enums import (
    BasementType,
    ConnectorType,
    InflationPower,
    LineItemCategory,
    ShellHeight,
)
from domecost.models.estimate import CostRange, LineItem, SiteworkSummary
from domecost.shell import compute_shell_cost, shell_line_item_cost

if TYPE_CHECKING:
    from domecost.data.repository import CostTable
    from domecost.factors import ResolvedFactors
    from domecost.models.estimate import ShellBreakdown
    from domecost.models.project import ProjectInput

logger = logging.getLogger(__name__)

_BASEMENT_DESCRIPTIONS: dict[BasementType, str] = {
    BasementType.NONE: "None (slab only)",
    BasementType.PARTIAL: "Partial (~50% footprint)",
    BasementType.FULL: "Full (~100% footprint)",
}


@dataclass(frozen=True)
class BuiltItems:
    """Output of the builder: ordered items plus the sitework summary."""

    items: tuple[LineItem, ...]
    sitework: SiteworkSummary


class LineItemBuilder:
    """Produces line items in category order for one project.

    Args:
        table: Configuration lookups supplying unit costs and multipliers.
    """

    def __init__(self, table: CostTable) -> None:
        self._table = table

    def build(
        self,
        project: ProjectInput,
        factors: ResolvedFactors,
        shell: ShellBreakdown,
    ) -> BuiltItems:
        sitework = self._sitework(project, factors)
        items: list[LineItem] = []
        items += self._pre_construction(project, factors)
        items += self._site_and_foundation(project, factors, sitework)
        items += self._core_structure(project, factors, shell)
        items += self._exterior(project, factors, shell)
        items += self._interiors(project, factors)
        items += self._systems(project, factors)
        items += self._allowances(project, factors)
        items += self._non_conditioned(project, factors)
        items += self._closeout(project, factors)
        logger.debug("Built %d line items", len(items))
        return BuiltItems(items=tuple(items), sitework=sitework)

    # ------------------------------------------------------------------
    # Unit cost helpers
    # ------------------------------------------------------------------

    def _per_sf(self, unit: CostRange, region: float, *multipliers: float) -> CostRange:
        """Calibrated, region-scaled $/SF with extra multipliers applied."""
        factor = 1.0
        for m in multipliers:
            factor *= m
        return CostRange(
            low=self._table.calibrate(unit.low * region) * factor,
            high=self._table.calibrate(unit.high * region) * factor,
        )

    def _lump(self, unit: CostRange, region: float, multiplier: float = 1.0) -> CostRange:
        return CostRange(
            low=self._table.calibrate(unit.low * region * multiplier),
            high=self._table.calibrate(unit.high * region * multiplier),
        )

    @staticmethod
    def _item(
        category: LineItemCategory, name: str, description: str, cost: CostRange
    ) -> LineItem:
        return LineItem(category=category, name=name, description=description, cost=cost)

    # ------------------------------------------------------------------
    # Categories
    # ------------------------------------------------------------------

    def _pre_construction(
        self, project: ProjectInput, factors: ResolvedFactors
    ) -> list[LineItem]:
        u = self._table.unit_costs
        area = project.floor_area_sf
        cat = LineItemCategory.PRE_CONSTRUCTION
        return [
            self._item(
                cat,
                "Design & Construction Documents",
                "Full architecture/engineering and coordinated construction drawings",
                self._per_sf(u.design_docs_psf, factors.region).scale(area),
            ),
            self._item(
                cat,
                "Permits & Agency Fees",
                "Plan review, building permit, utility/tap fees where applicable",
                self._per_sf(u.permits_fees_psf, factors.region).scale(area),
            ),
            self._item(
                cat,
                "Survey & Geotechnical",
                "Boundary/topographic survey and geotechnical (soils) report",
                self._lump(u.survey_geotech_lump, factors.region, factors.site),
            ),
            self._item(
                cat,
                "Mobilization",
                "Staging, temporary power/water, delivery logistics setup",
                self._lump(u.mobilization_lump, factors.region, factors.site),
            ),
        ]

    def _sitework(
        self, project: ProjectInput, factors: ResolvedFactors
    ) -> SiteworkSummary:
        if not project.include_sitework:
            return SiteworkSummary(cost=CostRange.zero(), included=False)
        unit = self._per_sf(self._table.unit_costs.sitework_psf, factors.region, factors.site)
        return SiteworkSummary(cost=unit.scale(project.floor_area_sf), included=True)

    def _site_and_foundation(
        self,
        project: ProjectInput,
        factors: ResolvedFactors,
        sitework: SiteworkSummary,
    ) -> list[LineItem]:
        u = self._table.unit_costs
        area = project.floor_area_sf
        cat = LineItemCategory.SITE_FOUNDATION

        basement_unit = self._table.basement_adder(project.basement_type)
        coverage = self._table.basement_coverage(project.basement_type)

        items = [
            self._item(
                cat,
                "Sitework & Rough Grading",
                (
                    "Clearing, rough grading, temporary access, erosion control"
                    if sitework.included
                    else "Excluded (by owner/others)"
                ),
                sitework.cost,
            ),
            self._item(
                cat,
                "Utilities Stub-ins",
                "Trenching and laterals for water/septic/electric to the shell",
                self._per_sf(
                    u.utilities_stub_psf,
                    factors.region,
                    factors.site,
                    factors.occupant.utilities,
                ).scale(area),
            ),
            self._item(
                cat,
                "Foundation / Slab / Footings",
                "Footings, slab, anchors; basement costs shown separately",
                self._per_sf(u.foundation_psf, factors.region, factors.site).scale(area),
            ),
            self._item(
                cat,
                "Remote Logistics / Access",
                f"Access/logistics cost for remote sites ({project.remote_access})",
                self._lump(
                    self._table.remote_access_lump(project.remote_access),
                    factors.region,
                    factors.site,
                ),
            ),
            self._item(
                cat,
                "Basement",
                _BASEMENT_DESCRIPTIONS.get(project.basement_type, "None (slab only)"),
                self._per_sf(basement_unit, factors.region).scale(area * coverage),
            ),
        ]
        if project.inflation_power == InflationPower.GENERATOR:
            items.append(self._item(
                cat,
                "Inflation Power (Generator rental)",
                "Generator rental for airform inflation",
                self._lump(u.generator_rental_lump, factors.region),
            ))
        return items

    def _core_structure(
        self,
        project: ProjectInput,
        factors: ResolvedFactors,
        shell: ShellBreakdown,
    ) -> list[LineItem]:
        u = self._table.unit_costs
        cat = LineItemCategory.CORE_STRUCTURE
        items = [
            self._item(
                cat,
                "Base Dome Shell (Airform, Foam, Rebar, Shotcrete)",
                (
                    "Airform membrane, spray foam insulation, rebar, shotcrete "
                    "structural shell (multipliers: region, domes, height, site staging)"
                ),
                shell_line_item_cost(shell),
            ),
        ]
        if project.oculus_count > 0:
            count = project.oculus_count
            items.append(self._item(
                cat,
                "Oculus/Skylights Curbs",
                f"{count} unit{'' if count == 1 else 's'}",
                self._lump(u.oculus_curb_lump_each, factors.region).scale(count),
            ))
        if project.connector_type != ConnectorType.NONE:
            items.append(self._item(
                cat,
                "Connector / Tunnel (Shell)",
                f"{project.connector_type.value.capitalize()} connector",
                self._lump(
                    self._table.connector_lump(project.connector_type), factors.region
                ),
            ))
        return items

    def _exterior(
        self,
        project: ProjectInput,
        factors: ResolvedFactors,
        shell: ShellBreakdown,
    ) -> list[LineItem]:
        u = self._table.unit_costs
        cat = LineItemCategory.EXTERIOR
        glazing_unit = self._table.glazing_unit_cost(project.glazing)
        glazed_sf = shell.shell_surface_sf * project.glazing.fraction
        glazing_cost = self._table.calibrate(glazed_sf * glazing_unit * factors.region)
        return [
            self._item(
                cat,
                "Exterior Finishes / Coatings",
                "Membrane topcoat/paint and trims at shell openings",
                self._per_sf(
                    u.exterior_finish_psf, factors.region, factors.finish
                ).scale(project.floor_area_sf),
            ),
            self._item(
                cat,
                "Transition Waterproofing at Openings",
                "Waterproofing transitions around openings",
                self._lump(u.transition_waterproofing_lump, factors.region),
            ),
            self._item(
                cat,
                "Windows & Glazed Openings",
                f"{project.glazing.fraction * 100:.0f}% of shell surface @ ${glazing_unit:g}/SF",
                CostRange.point(glazing_cost),
            ),
        ]

    def _interiors(
        self, project: ProjectInput, factors: ResolvedFactors
    ) -> list[LineItem]:
        u = self._table.unit_costs
        cat = LineItemCategory.INTERIORS
        rows = [
            (
                "Interior Framing & Partitions",
                "Non-structural partitions and basic framing details",
                u.interior_framing_psf,
            ),
            (
                "Insulation & Drywall",
                "Thermal/sound insulation plus drywall hang, tape and texture",
                u.insulation_drywall_psf,
            ),
            (
                "Flooring & Interior Finishes",
                "LVT/tile/carpet, interior paint and finish carpentry",
                u.flooring_finishes_psf,
            ),
            (
                "Millwork, Interior Doors & Trim",
                "Interior doors, casing/base, basic built-ins/shelving",
                u.millwork_doors_psf,
            ),
        ]
        return [
            self._item(
                cat,
                name,
                description,
                self._per_sf(unit, factors.region, factors.finish).scale(
                    project.floor_area_sf
                ),
            )
            for name, description, unit in rows
        ]

    def _systems(self, project: ProjectInput, factors: ResolvedFactors) -> list[LineItem]:
        u = self._table.unit_costs
        area = project.floor_area_sf
        cat = LineItemCategory.SYSTEMS
        occupant = factors.occupant
        return [
            self._item(
                cat,
                "Plumbing (rough-in + fixtures)",
                "Supply/drain/vent, water heater and standard plumbing fixtures",
                self._per_sf(
                    u.plumbing_psf,
                    factors.region,
                    factors.mechanical,
                    occupant.plumbing_electrical,
                ).scale(area),
            ),
            self._item(
                cat,
                "Electrical (rough-in + devices)",
                "Service/panels, branch circuits, devices and lighting",
                self._per_sf(
                    u.electrical_psf,
                    factors.region,
                    factors.mechanical,
                    occupant.plumbing_electrical,
                ).scale(area),
            ),
            self._item(
                cat,
                "HVAC / Mechanical",
                "Heat pump/furnace/air handler and distribution (ducted/ductless)",
                self._per_sf(u.hvac_psf, factors.region, factors.mechanical).scale(area),
            ),
            self._item(
                cat,
                "Special Systems",
                "ERV/HRV, simple controls and minor low-voltage allowances",
                self._per_sf(
                    u.special_systems_psf,
                    factors.region,
                    factors.mechanical,
                    occupant.special_systems,
                ).scale(area),
            ),
        ]

    def _allowances(
        self, project: ProjectInput, factors: ResolvedFactors
    ) -> list[LineItem]:
        u = self._table.unit_costs
        cat = LineItemCategory.ALLOWANCES
        return [
            self._item(
                cat,
                "Kitchens & Baths Package",
                "Cabinetry, counters, tile and shower glass finishes",
                self._per_sf(u.kitchen_bath_psf, factors.region, factors.finish).scale(
                    project.floor_area_sf
                ),
            ),
            self._item(
                cat,
                "Appliances",
                "Typical kitchen + laundry appliance package",
                self._lump(u.appliances_lump, factors.region, factors.finish),
            ),
        ]

    def _non_conditioned(
        self, project: ProjectInput, factors: ResolvedFactors
    ) -> list[LineItem]:
        """Unheated domes (garages, storage): shell plus slab, per structure."""
        if not project.has_non_conditioned_structures:
            return []

        count = project.non_conditioned_dome_count
        area_each = project.non_conditioned_area_sf_each
        cat = LineItemCategory.NON_CONDITIONED

        # Each structure is a single standard-height dome
        multiplier = composite_shell_multiplier(
            self._table,
            factors.region,
            1,
            ShellHeight.STANDARD,
            project.site_complexity,
        )
        shell = compute_shell_cost(
            self._table,
            area_each,
            multiplier,
            project.shell_thickness_in,
            project.mix_type,
        )
        slab = self._per_sf(
            self._table.unit_costs.foundation_psf, factors.region, factors.site
        ).scale(area_each * count)

        label = f"{count} × {area_each:,.0f} SF"
        return [
            self._item(
                cat,
                "Non-Conditioned Dome Shells",
                f"Shell only, no interior finishes or systems ({label})",
                shell.total.scale(count),
            ),
            self._item(
                cat,
                "Non-Conditioned Slab / Foundation",
                f"Slab and footings for non-conditioned domes ({label})",
                slab,
            ),
        ]

    def _closeout(self, project: ProjectInput, factors: ResolvedFactors) -> list[LineItem]:
        if not project.lightning_protection:
            return []
        return [
            self._item(
                LineItemCategory.CLOSEOUT,
                "Lightning Protection / Grounding",
                "Provision for lightning protection",
                self._lump(self._table.unit_costs.lightning_protection_lump, factors.region),
            ),
        ]
