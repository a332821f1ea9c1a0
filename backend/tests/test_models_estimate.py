"""Tests for estimate output models."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from domecost.factory import create_default_engine
from domecost.models.enums import LineItemCategory
from domecost.models.estimate import CostRange, EstimateMetadata, EstimateResult

# ---------------------------------------------------------------------------
# CostRange
# ---------------------------------------------------------------------------


class TestCostRange:
    def test_valid_range(self) -> None:
        cr = CostRange(low=100.0, high=200.0)
        assert cr.midpoint == 150.0
        assert not cr.is_point

    def test_point_value(self) -> None:
        cr = CostRange.point(42.0)
        assert cr.low == cr.high == 42.0
        assert cr.is_point

    def test_low_above_high_rejected(self) -> None:
        with pytest.raises(ValidationError, match="low <= high"):
            CostRange(low=300.0, high=200.0)

    def test_zero(self) -> None:
        assert CostRange.zero() == CostRange(low=0.0, high=0.0)

    def test_scale(self) -> None:
        assert CostRange(low=10.0, high=20.0).scale(1.5) == CostRange(low=15.0, high=30.0)

    def test_add(self) -> None:
        total = CostRange(low=1.0, high=2.0) + CostRange(low=10.0, high=20.0)
        assert total == CostRange(low=11.0, high=22.0)

    def test_format(self) -> None:
        cr = CostRange(low=1234.4, high=5678.9)
        assert f"{cr}" == "1,234 – 5,679"
        assert f"{cr:.1f}" == "1234.4 – 5678.9"

    def test_frozen(self) -> None:
        cr = CostRange(low=1.0, high=2.0)
        with pytest.raises(ValidationError):
            cr.low = 0.0  # type: ignore[misc]


class TestEstimateMetadata:
    def test_range_spread_label(self) -> None:
        metadata = EstimateMetadata(
            engine_version="0.1.0",
            config_version="test",
            range_low_adjustment=-0.05,
            range_high_adjustment=0.07,
        )
        assert metadata.range_spread_label == "-5% / +7%"
        assert metadata.estimation_method == "planning_level_line_item"


# ---------------------------------------------------------------------------
# EstimateResult helpers
# ---------------------------------------------------------------------------


def _scenario_result() -> EstimateResult:
    return create_default_engine().estimate({
        "floor_area_sf": 2000,
        "bathroom_count": 2,
        "finish_level": 1.0,
        "glazing": 0.2,
    })


class TestEstimateResult:
    def test_items_by_category(self) -> None:
        grouped = _scenario_result().items_by_category()
        assert list(grouped) == [
            LineItemCategory.PRE_CONSTRUCTION,
            LineItemCategory.SITE_FOUNDATION,
            LineItemCategory.CORE_STRUCTURE,
            LineItemCategory.EXTERIOR,
            LineItemCategory.INTERIORS,
            LineItemCategory.SYSTEMS,
            LineItemCategory.ALLOWANCES,
        ]
        assert len(grouped[LineItemCategory.INTERIORS]) == 4

    def test_shell_cost(self) -> None:
        assert _scenario_result().shell_cost == pytest.approx(37_927.5)

    def test_factors_recorded(self) -> None:
        factors = _scenario_result().factors
        assert factors is not None
        assert factors.region == 1.0
        assert factors.expected_bathrooms == 2

    def test_json_dump(self) -> None:
        data = _scenario_result().model_dump(mode="json")
        assert data["items"][0]["category"] == "Pre-Construction"
        assert data["project"]["glazing"] == "0.20"
        assert data["total"]["low"] == pytest.approx(297_681.31, abs=0.01)


class TestAssumptionsSummary:
    def test_scenario(self) -> None:
        assert _scenario_result().assumptions_summary() == (
            "Region 1.00 • Finish 1.00 • 20% glazing • 1 dome • std shell • "
            "No basement (slab) • flat site • Sitework included • standard MEP • "
            "2 baths • Shell 4″ • Mix: Standard • Access: easy • "
            "Contingency: 10.0% • Inflation power: On-site"
        )

    def test_empty(self) -> None:
        result = create_default_engine().estimate({})
        assert result.assumptions_summary() == (
            "Region 1.00 • Standard finish • Typical glazing • Single dome"
        )

    def test_optional_parts(self) -> None:
        summary = create_default_engine().estimate({
            "floor_area_sf": 1500,
            "dome_count": 2,
            "shell_height": "tall",
            "bathroom_count": 1,
            "optional_systems": ["solar", "septic"],
            "connector_type": "short",
            "oculus_count": 2,
            "inflation_power": "generator",
            "mix_type": "hemp",
        }).assumptions_summary()
        assert "2 domes" in summary
        assert "tall shell" in summary
        assert "1 bath •" in summary
        assert "Options: Solar PV, Septic" in summary
        assert "Connector: short" in summary
        assert "Oculus: 2" in summary
        assert "Mix: Hempcrete" in summary
        assert summary.endswith("Inflation power: Generator")


class TestSummaryDict:
    def test_keys_and_values(self) -> None:
        summary = _scenario_result().to_summary_dict()
        assert summary["floor_area_formatted"] == "2,000 SF"
        assert summary["total_range_formatted"] == "$297,681 – $565,104"
        assert summary["total_per_sf_formatted"] == "$/SF: $149 – $283"
        assert summary["shell_cost_formatted"] == "$37,928"
        assert summary["shell_per_sf_formatted"] == "$19 / SF"
        assert summary["sitework_formatted"] == "$15,600 – $28,600"
        assert summary["optional_systems"] == []
        assert summary["num_items"] == 23

    def test_sitework_excluded(self) -> None:
        result = create_default_engine().estimate(
            {"floor_area_sf": 2000, "include_sitework": False}
        )
        assert result.to_summary_dict()["sitework_formatted"] == "Excluded"


class TestExportDict:
    def test_rows(self) -> None:
        export = _scenario_result().to_export_dict()
        rows = export["rows"]

        categories = [r["label"] for r in rows if r["kind"] == "category"]
        assert categories[0] == "Pre-Construction"
        assert len([r for r in rows if r["kind"] == "item"]) == 23

        summaries = [r["label"] for r in rows if r["kind"] == "summary"]
        assert summaries == [
            "Subtotal (pre contingency)",
            "Contingency",
            "Range spread",
            "Total (rounded)",
        ]

    def test_optional_systems_row(self) -> None:
        export = create_default_engine().estimate({
            "floor_area_sf": 2000,
            "optional_systems": ["solar", "geothermal"],
        }).to_export_dict()
        row = next(r for r in export["rows"] if r["label"] == "Optional systems")
        assert row["description"] == "Solar PV + Geothermal"
        assert row["low"] == row["high"] == pytest.approx(42_250)

    def test_top_level_keys(self) -> None:
        export = _scenario_result().to_export_dict()
        assert set(export) == {
            "project",
            "rows",
            "total",
            "total_per_sf",
            "shell_cost",
            "shell_cost_per_sf",
            "assumptions",
            "metadata",
        }
        assert export["metadata"]["config_version"] == "2025.1"
