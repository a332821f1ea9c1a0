"""Optional-systems adder: single-figure costs for discretionary add-ons.

Each selected system contributes one region-scaled amount to both the low
and high totals. The total sits outside the line-item subtotal, so
contingency never applies to it.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from domecost.data.repository import CostTable
    from domecost.factors import ResolvedFactors
    from domecost.models.project import ProjectInput

OPTION_LABELS: dict[str, str] = {
    "solar": "Solar PV",
    "battery_storage": "Battery Storage",
    "geothermal": "Geothermal",
    "rainwater_collection": "Rainwater collection / cistern",
    "hydronic_floors": "Hydronic Radiant Floors",
    "septic": "Septic",
}

# Systems whose cost also follows site difficulty
_SITE_SCALED = frozenset({"septic"})


@dataclass(frozen=True)
class OptionCost:
    name: str
    label: str
    cost: float


@dataclass(frozen=True)
class OptionalSystemsTotal:
    """Priced add-ons in evaluation order."""

    selections: tuple[OptionCost, ...]

    @property
    def cost(self) -> float:
        return sum(s.cost for s in self.selections)

    @property
    def labels(self) -> tuple[str, ...]:
        return tuple(s.label for s in self.selections)


def driveway_cost(
    project: ProjectInput, factors: ResolvedFactors, table: CostTable
) -> tuple[float, float]:
    """Return ``(length_ft, cost)`` for the driveway, clamped to the max length."""
    options = table.option_costs
    length = min(project.driveway_length_ft, options.driveway_max_ft)
    cost = table.calibrate(
        length * options.driveway_per_ft * factors.region * factors.site_option
    )
    return length, cost


def add_optional_systems(
    project: ProjectInput, factors: ResolvedFactors, table: CostTable
) -> OptionalSystemsTotal:
    """Price every selected optional system.

    Evaluation order is solar, battery storage, geothermal, rainwater
    collection, hydronic floors, septic, driveway, regardless of the order
    in which the caller listed them. The driveway is only added when
    selected with a positive clamped length.
    """
    selected = project.optional_systems
    options = table.option_costs
    selections: list[OptionCost] = []

    for name, label in OPTION_LABELS.items():
        if not getattr(selected, name):
            continue
        amount = getattr(options, name) * factors.region
        if name in _SITE_SCALED:
            amount *= factors.site_option
        selections.append(OptionCost(name=name, label=label, cost=table.calibrate(amount)))

    if selected.driveway:
        length, cost = driveway_cost(project, factors, table)
        if length > 0:
            selections.append(OptionCost(
                name="driveway", label=f"Driveway (~{length:g} ft)", cost=cost,
            ))

    return OptionalSystemsTotal(selections=tuple(selections))
