"""Tests for raw input normalization."""

from __future__ import annotations

import pytest

from domecost.models.enums import (
    BasementType,
    ConnectorType,
    FinishLevel,
    GlazingLevel,
    InflationPower,
    MixType,
    ShellHeight,
    SiteComplexity,
)
from domecost.models.project import OptionalSystems, ProjectInput
from domecost.normalizer import (
    MAX_AREA_SF,
    MAX_CONTINGENCY_FRACTION,
    MAX_COUNT,
    MAX_REGION_FACTOR,
    normalize_input,
)


class TestDefaults:
    def test_none_gives_defaults(self) -> None:
        project = normalize_input(None)
        assert project == ProjectInput()

    def test_empty_mapping_gives_defaults(self) -> None:
        project = normalize_input({})
        assert project.floor_area_sf == 0
        assert project.region_factor == 1.0
        assert project.finish_level == FinishLevel.STANDARD
        assert project.dome_count == 1
        assert project.glazing == GlazingLevel.TWENTY
        assert project.bathroom_count == 2
        assert project.include_sitework is True
        assert project.contingency_fraction == pytest.approx(0.10)
        assert project.shell_thickness_in == 4
        assert project.inflation_power == InflationPower.ONSITE
        assert project.optional_systems == OptionalSystems()

    def test_non_mapping_gives_defaults(self) -> None:
        assert normalize_input(42) == ProjectInput()  # type: ignore[arg-type]

    def test_project_input_passes_through(self) -> None:
        project = ProjectInput(floor_area_sf=1500, dome_count=2)
        assert normalize_input(project) == project


class TestNumbers:
    def test_numeric_strings_are_parsed(self) -> None:
        project = normalize_input({"floor_area_sf": "1800", "region_factor": "1.15"})
        assert project.floor_area_sf == 1800
        assert project.region_factor == pytest.approx(1.15)

    def test_negative_area_clamped(self) -> None:
        assert normalize_input({"floor_area_sf": -10}).floor_area_sf == 0

    @pytest.mark.parametrize("value", ["abc", None, float("nan"), float("inf"), True])
    def test_unparsable_area_defaults_to_zero(self, value: object) -> None:
        assert normalize_input({"floor_area_sf": value}).floor_area_sf == 0

    @pytest.mark.parametrize("value", [0, -1.2, "bad"])
    def test_non_positive_region_falls_back(self, value: object) -> None:
        assert normalize_input({"region_factor": value}).region_factor == 1.0

    def test_bathrooms_floored_at_one(self) -> None:
        assert normalize_input({"bathroom_count": 0}).bathroom_count == 1
        assert normalize_input({"bathroom_count": -3}).bathroom_count == 1

    def test_bathrooms_truncated(self) -> None:
        assert normalize_input({"bathroom_count": 2.7}).bathroom_count == 2

    def test_oculus_count_clamped(self) -> None:
        assert normalize_input({"oculus_count": -2}).oculus_count == 0
        assert normalize_input({"oculus_count": "3"}).oculus_count == 3

    @pytest.mark.parametrize(("value", "expected"), [(2, 2), ("3", 3), (4, 1), (1.5, 1), (0, 1)])
    def test_dome_count_choices(self, value: object, expected: int) -> None:
        assert normalize_input({"dome_count": value}).dome_count == expected

    @pytest.mark.parametrize(("value", "expected"), [(5, 5), ("6", 6), (8, 4)])
    def test_shell_thickness_choices(self, value: object, expected: int) -> None:
        assert normalize_input({"shell_thickness_in": value}).shell_thickness_in == expected


class TestContingency:
    def test_percent(self) -> None:
        assert normalize_input({"contingency_pct": 15}).contingency_fraction == (
            pytest.approx(0.15)
        )

    def test_fraction_when_no_percent(self) -> None:
        project = normalize_input({"contingency_fraction": 0.2})
        assert project.contingency_fraction == pytest.approx(0.2)

    def test_percent_wins_over_fraction(self) -> None:
        project = normalize_input({"contingency_pct": 5, "contingency_fraction": 0.3})
        assert project.contingency_fraction == pytest.approx(0.05)

    def test_negative_floored(self) -> None:
        assert normalize_input({"contingency_pct": -8}).contingency_fraction == 0.0

    def test_unparsable_defaults_to_ten_percent(self) -> None:
        project = normalize_input({"contingency_pct": "lots"})
        assert project.contingency_fraction == pytest.approx(0.10)


class TestDriveway:
    def test_clamped_to_maximum(self) -> None:
        assert normalize_input({"driveway_length_ft": 400}).driveway_length_ft == 150

    def test_custom_maximum(self) -> None:
        project = normalize_input({"driveway_length_ft": 400}, driveway_max_ft=300)
        assert project.driveway_length_ft == 300

    def test_negative_clamped(self) -> None:
        assert normalize_input({"driveway_length_ft": -5}).driveway_length_ft == 0


class TestEnums:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (0.95, FinishLevel.ECONOMY),
            (1.0, FinishLevel.STANDARD),
            ("1.20", FinishLevel.UPGRADED),
            (1.35, FinishLevel.PREMIUM),
            ("Premium", FinishLevel.PREMIUM),
            (1.1, FinishLevel.STANDARD),
            ("gold", FinishLevel.STANDARD),
        ],
    )
    def test_finish_level(self, value: object, expected: FinishLevel) -> None:
        assert normalize_input({"finish_level": value}).finish_level == expected

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (0.1, GlazingLevel.TEN),
            ("0.30", GlazingLevel.THIRTY),
            (0.4, GlazingLevel.FORTY),
            (0.25, GlazingLevel.TWENTY),
            ("lots", GlazingLevel.TWENTY),
        ],
    )
    def test_glazing(self, value: object, expected: GlazingLevel) -> None:
        assert normalize_input({"glazing": value}).glazing == expected

    def test_string_enums_case_insensitive(self) -> None:
        project = normalize_input({
            "shell_height": "TALL",
            "basement_type": " Full ",
            "site_complexity": "Complex",
        })
        assert project.shell_height == ShellHeight.TALL
        assert project.basement_type == BasementType.FULL
        assert project.site_complexity == SiteComplexity.COMPLEX

    def test_aliases(self) -> None:
        project = normalize_input({
            "shell_height": "std",
            "mix_type": "pozz",
            "connector_type": "med",
            "inflation_power": "on-site",
        })
        assert project.shell_height == ShellHeight.STANDARD
        assert project.mix_type == MixType.POZZOLAN
        assert project.connector_type == ConnectorType.MEDIUM
        assert project.inflation_power == InflationPower.ONSITE

    def test_unknown_values_fall_back(self) -> None:
        project = normalize_input({
            "site_complexity": "swamp",
            "basement_type": 3,
            "mix_type": "adobe",
        })
        assert project.site_complexity == SiteComplexity.FLAT
        assert project.basement_type == BasementType.NONE
        assert project.mix_type == MixType.STANDARD


class TestBooleans:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [(False, False), ("no", False), (0, False), ("yes", True), ("maybe", True)],
    )
    def test_include_sitework(self, value: object, expected: bool) -> None:
        assert normalize_input({"include_sitework": value}).include_sitework is expected

    def test_lightning_protection_defaults_off(self) -> None:
        assert normalize_input({"lightning_protection": "??"}).lightning_protection is False
        assert normalize_input({"lightning_protection": "true"}).lightning_protection is True


class TestOptionalSystems:
    def test_list_of_names(self) -> None:
        project = normalize_input({"optional_systems": ["solar", "septic"]})
        assert project.optional_systems.selected == ["solar", "septic"]

    def test_mapping_of_flags(self) -> None:
        project = normalize_input(
            {"optional_systems": {"geothermal": True, "solar": False, "driveway": "yes"}}
        )
        assert project.optional_systems.selected == ["geothermal", "driveway"]

    def test_camel_case_and_short_names(self) -> None:
        project = normalize_input(
            {"optional_systems": ["batteryStorage", "rain", "hydronic", "geo"]}
        )
        assert project.optional_systems.selected == [
            "battery_storage",
            "geothermal",
            "rainwater_collection",
            "hydronic_floors",
        ]

    def test_unknown_names_ignored(self) -> None:
        project = normalize_input({"optional_systems": ["hot_tub", "solar"]})
        assert project.optional_systems.selected == ["solar"]

    @pytest.mark.parametrize("value", ["solar", 7, None])
    def test_invalid_shapes_select_nothing(self, value: object) -> None:
        assert normalize_input({"optional_systems": value}).optional_systems.selected == []


class TestCamelCaseKeys:
    def test_camel_case_record(self) -> None:
        project = normalize_input({
            "floorAreaSf": 2400,
            "bathroomCount": 3,
            "includeSitework": False,
            "nonConditionedDomeCount": 2,
            "nonConditionedAreaSfEach": 500,
            "optionalSystems": ["solar"],
        })
        assert project.floor_area_sf == 2400
        assert project.bathroom_count == 3
        assert project.include_sitework is False
        assert project.has_non_conditioned_structures
        assert project.optional_systems.solar

    def test_snake_case_wins(self) -> None:
        project = normalize_input({"floor_area_sf": 1000, "floorAreaSf": 3000})
        assert project.floor_area_sf == 1000


class TestPersistedFieldNames:
    """Saved records use descriptive names for several fields."""

    def test_full_persisted_record_matches_field_names(self) -> None:
        persisted = normalize_input({
            "floorAreaSqFt": 2000,
            "regionFactor": 1.1,
            "finishMultiplier": 1.35,
            "domeCount": 2,
            "shellHeight": "tall",
            "glazingFraction": 0.40,
            "basementType": "partial",
            "siteComplexity": "moderate",
            "mechanicalTier": "advanced",
            "bathroomCount": 3,
            "includeSitework": False,
            "optionalSystems": ["solar", "batteryStorage", "driveway"],
            "drivewayLengthFt": 120,
            "contingencyFraction": 0.15,
            "shellThicknessInches": 6,
            "mixType": "hemp",
            "oculusCount": 2,
            "connectorType": "short",
            "remoteAccessTier": "remote",
            "inflationPowerSource": "generator",
            "nonConditionedDomeCount": 1,
            "nonConditionedAreaSqFtEach": 500,
        })
        expected = normalize_input({
            "floor_area_sf": 2000,
            "region_factor": 1.1,
            "finish_level": "premium",
            "dome_count": 2,
            "shell_height": "tall",
            "glazing": 0.40,
            "basement_type": "partial",
            "site_complexity": "moderate",
            "mechanical_tier": "advanced",
            "bathroom_count": 3,
            "include_sitework": False,
            "optional_systems": ["solar", "battery_storage", "driveway"],
            "driveway_length_ft": 120,
            "contingency_fraction": 0.15,
            "shell_thickness_in": 6,
            "mix_type": "hemp",
            "oculus_count": 2,
            "connector_type": "short",
            "remote_access": "remote",
            "inflation_power": "generator",
            "non_conditioned_dome_count": 1,
            "non_conditioned_area_sf_each": 500,
        })

        assert persisted == expected
        assert persisted.floor_area_sf == 2000
        assert persisted.finish_level == FinishLevel.PREMIUM
        assert persisted.glazing == GlazingLevel.FORTY
        assert persisted.shell_thickness_in == 6
        assert persisted.inflation_power == InflationPower.GENERATOR
        assert persisted.non_conditioned_area_sf_each == 500

    def test_snake_case_persisted_names(self) -> None:
        project = normalize_input(
            {"floor_area_sq_ft": 1500, "remote_access_tier": "moderate"}
        )
        assert project.floor_area_sf == 1500
        assert project.remote_access == "moderate"

    def test_field_name_wins_over_persisted_name(self) -> None:
        project = normalize_input({"floor_area_sf": 1000, "floorAreaSqFt": 3000})
        assert project.floor_area_sf == 1000


class TestUpperBounds:
    def test_floor_area_capped(self) -> None:
        assert normalize_input({"floor_area_sf": 1e306}).floor_area_sf == MAX_AREA_SF

    def test_non_conditioned_area_capped(self) -> None:
        project = normalize_input({"non_conditioned_area_sf_each": 1e300})
        assert project.non_conditioned_area_sf_each == MAX_AREA_SF

    def test_region_capped(self) -> None:
        assert normalize_input({"region_factor": 1e200}).region_factor == MAX_REGION_FACTOR

    def test_contingency_capped(self) -> None:
        project = normalize_input({"contingency_pct": 1e308})
        assert project.contingency_fraction == MAX_CONTINGENCY_FRACTION

    @pytest.mark.parametrize(
        "name", ["bathroom_count", "oculus_count", "non_conditioned_dome_count"]
    )
    def test_counts_capped(self, name: str) -> None:
        assert getattr(normalize_input({name: 1e250}), name) == MAX_COUNT
