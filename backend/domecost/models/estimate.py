"""Cost estimate output models for the domecost estimation engine."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, model_validator

from domecost.models.enums import (
    BasementType,
    ConnectorType,
    InflationPower,
    LineItemCategory,
    MixType,
    ShellHeight,
)
from domecost.models.project import ProjectInput


class CostRange(BaseModel):
    """A cost range with low and high values.

    A point value (``low == high``) is a valid range; the structural shell
    and glazing line items are reported that way.
    """

    model_config = ConfigDict(frozen=True)

    low: float
    high: float

    @model_validator(mode="after")
    def low_le_high(self) -> CostRange:
        if not self.low <= self.high:
            msg = f"Must satisfy low <= high, got {self.low} <= {self.high}"
            raise ValueError(msg)
        return self

    @classmethod
    def zero(cls) -> CostRange:
        return cls(low=0.0, high=0.0)

    @classmethod
    def point(cls, value: float) -> CostRange:
        return cls(low=value, high=value)

    @property
    def midpoint(self) -> float:
        return (self.low + self.high) / 2

    @property
    def is_point(self) -> bool:
        return self.low == self.high

    def scale(self, factor: float) -> CostRange:
        """Multiply both bounds by a non-negative factor."""
        return CostRange(low=self.low * factor, high=self.high * factor)

    def __add__(self, other: CostRange) -> CostRange:
        return CostRange(low=self.low + other.low, high=self.high + other.high)

    def __format__(self, format_spec: str) -> str:
        if format_spec:
            return f"{format(self.low, format_spec)} – {format(self.high, format_spec)}"
        return f"{self.low:,.0f} – {self.high:,.0f}"


class LineItem(BaseModel):
    """A single categorized cost line."""

    model_config = ConfigDict(frozen=True)

    category: LineItemCategory
    name: str
    description: str
    cost: CostRange


class ShellBreakdown(BaseModel):
    """Component-level detail behind the structural shell line item."""

    model_config = ConfigDict(frozen=True)

    shell_surface_sf: float
    membrane: CostRange
    foam: CostRange
    shotcrete: CostRange
    reinforcement: CostRange
    total: CostRange
    midpoint: float


class SiteworkSummary(BaseModel):
    model_config = ConfigDict(frozen=True)

    cost: CostRange
    included: bool


class AppliedFactors(BaseModel):
    """Multipliers resolved for this estimate, kept for transparency."""

    model_config = ConfigDict(frozen=True)

    region: float
    composite_shell: float
    site: float
    site_option: float
    mechanical: float
    finish: float
    plumbing_electrical: float
    utilities: float
    special_systems: float
    expected_bathrooms: int


class EstimateMetadata(BaseModel):
    model_config = ConfigDict(frozen=True)

    engine_version: str
    config_version: str
    range_low_adjustment: float
    range_high_adjustment: float
    estimation_method: str = "planning_level_line_item"

    @property
    def range_spread_label(self) -> str:
        return (
            f"{self.range_low_adjustment * 100:+.0f}% / "
            f"{self.range_high_adjustment * 100:+.0f}%"
        )


class EstimateResult(BaseModel):
    """Complete output of the estimation engine.

    ``total`` includes contingency, the optional-systems total and the
    global low/high range adjustment. Optional systems are a single
    additive figure that is not part of ``subtotal`` or ``contingency``.
    """

    model_config = ConfigDict(frozen=True)

    project: ProjectInput
    items: tuple[LineItem, ...]
    subtotal: CostRange
    contingency: CostRange
    optional_systems_cost: float
    optional_systems_labels: tuple[str, ...]
    range_spread: CostRange
    total: CostRange
    total_per_area_low: float
    total_per_area_high: float
    shell_cost_per_area: float
    shell: ShellBreakdown | None = None
    sitework: SiteworkSummary
    factors: AppliedFactors | None = None
    metadata: EstimateMetadata

    @property
    def is_empty(self) -> bool:
        return self.project.floor_area_sf <= 0

    @property
    def shell_cost(self) -> float:
        return self.shell.midpoint if self.shell is not None else 0.0

    def items_by_category(self) -> dict[LineItemCategory, list[LineItem]]:
        """Group items by category, preserving report order."""
        grouped: dict[LineItemCategory, list[LineItem]] = {}
        for item in self.items:
            grouped.setdefault(item.category, []).append(item)
        return grouped

    def assumptions_summary(self) -> str:
        """One-line summary of the inputs behind this estimate."""
        if self.is_empty or self.factors is None:
            return "Region 1.00 • Standard finish • Typical glazing • Single dome"

        p = self.project
        parts = [
            f"Region {self.factors.region:.2f}",
            f"Finish {self.factors.finish:.2f}",
            f"{p.glazing.fraction * 100:.0f}% glazing",
            f"{p.dome_count} dome{'' if p.dome_count == 1 else 's'}",
            "tall shell" if p.shell_height == ShellHeight.TALL else "std shell",
            _BASEMENT_SUMMARY[p.basement_type],
            f"{p.site_complexity} site",
            "Sitework included" if self.sitework.included else "Sitework excluded",
            f"{p.mechanical_tier} MEP",
            f"{p.bathroom_count} bath{'s' if p.bathroom_count > 1 else ''}",
        ]
        if self.optional_systems_labels:
            parts.append("Options: " + ", ".join(self.optional_systems_labels))
        parts.append(f"Shell {p.shell_thickness_in}″")
        parts.append(f"Mix: {_MIX_SUMMARY[p.mix_type]}")
        if p.connector_type != ConnectorType.NONE:
            parts.append(f"Connector: {p.connector_type}")
        if p.oculus_count > 0:
            parts.append(f"Oculus: {p.oculus_count}")
        parts.append(f"Access: {p.remote_access}")
        parts.append(f"Contingency: {p.contingency_fraction * 100:.1f}%")
        power = "Generator" if p.inflation_power == InflationPower.GENERATOR else "On-site"
        parts.append(f"Inflation power: {power}")
        return " • ".join(parts)

    def to_summary_dict(self) -> dict[str, Any]:
        """Produce a flat summary dict for on-screen display."""
        from domecost.formatting import format_cost_range, format_currency, format_sf_range

        return {
            "floor_area_formatted": f"{self.project.floor_area_sf:,.0f} SF",
            "total_range_formatted": format_cost_range(self.total),
            "total_per_sf_formatted": format_sf_range(
                self.total_per_area_low, self.total_per_area_high
            ),
            "shell_cost_formatted": format_currency(self.shell_cost),
            "shell_per_sf_formatted": f"{format_currency(self.shell_cost_per_area)} / SF",
            "sitework_formatted": (
                format_cost_range(self.sitework.cost)
                if self.sitework.included
                else "Excluded"
            ),
            "optional_systems": list(self.optional_systems_labels),
            "num_items": len(self.items),
            "assumptions": self.assumptions_summary(),
        }

    def to_export_dict(self) -> dict[str, Any]:
        """Produce the row layout used by the paginated report.

        Rows are category dividers, line items, then the subtotal,
        contingency, optional systems (when any), range spread and total.
        """
        rows: list[dict[str, Any]] = []
        current: LineItemCategory | None = None
        for item in self.items:
            if item.category != current:
                current = item.category
                rows.append({"kind": "category", "label": current.value})
            rows.append({
                "kind": "item",
                "label": item.name,
                "description": item.description,
                "low": item.cost.low,
                "high": item.cost.high,
            })

        rows.append(_summary_row(
            "Subtotal (pre contingency)", "All line items above", self.subtotal,
        ))
        rows.append(_summary_row(
            "Contingency",
            f"{self.project.contingency_fraction * 100:.1f}%",
            self.contingency,
        ))
        if self.optional_systems_cost:
            rows.append(_summary_row(
                "Optional systems",
                " + ".join(self.optional_systems_labels),
                CostRange.point(self.optional_systems_cost),
            ))
        rows.append(_summary_row(
            "Range spread", self.metadata.range_spread_label, self.range_spread,
        ))
        rows.append(_summary_row("Total (rounded)", "Low / High", self.total))

        return {
            "project": self.project.model_dump(mode="json"),
            "rows": rows,
            "total": self.total.model_dump(),
            "total_per_sf": {
                "low": self.total_per_area_low,
                "high": self.total_per_area_high,
            },
            "shell_cost": self.shell_cost,
            "shell_cost_per_sf": self.shell_cost_per_area,
            "assumptions": self.assumptions_summary(),
            "metadata": self.metadata.model_dump(),
        }


_BASEMENT_SUMMARY: dict[BasementType, str] = {
    BasementType.NONE: "No basement (slab)",
    BasementType.PARTIAL: "Partial basement (~50%)",
    BasementType.FULL: "Full basement (~100%)",
}

_MIX_SUMMARY: dict[MixType, str] = {
    MixType.STANDARD: "Standard",
    MixType.POZZOLAN: "Pozzolan",
    MixType.HEMP: "Hempcrete",
}


def _summary_row(label: str, description: str, cost: CostRange) -> dict[str, Any]:
    return {
        "kind": "summary",
        "label": label,
        "description": description,
        "low": cost.low,
        "high": cost.high,
    }

