"""Built-in configuration table for the domecost estimation engine.

Costs are uncalibrated planning-level baselines for monolithic
airform/foam/shotcrete dome homes. ``price_calibration`` scales every
figure to the current market.
"""

from domecost.data.config import (
    EstimatorConfig,
    OccupantScaling,
    OptionCosts,
    ScalingBand,
    ShellUnitCosts,
    UnitCosts,
)
from domecost.models.enums import (
    BasementType,
    ConnectorType,
    FinishLevel,
    GlazingLevel,
    MechanicalTier,
    MixType,
    RemoteAccess,
    ShellHeight,
    SiteComplexity,
)
from domecost.models.estimate import CostRange

CONFIG_VERSION = "2025.1"


def _r(low: float, high: float) -> CostRange:
    return CostRange(low=low, high=high)


DEFAULT_CONFIG = EstimatorConfig(
    version=CONFIG_VERSION,
    price_calibration=0.65,
    envelope_to_interior_ratio=0.35,
    shell_unit_costs=ShellUnitCosts(
        membrane_per_shell_sf=_r(12, 18),
        foam_per_shell_sf=_r(9, 14),
        shotcrete_per_shell_sf=_r(20, 28),
        reinforcement_per_floor_sf=_r(9, 14),
    ),
    unit_costs=UnitCosts(
        design_docs_psf=_r(4, 8),
        permits_fees_psf=_r(2, 4),
        survey_geotech_lump=_r(2500, 6000),
        mobilization_lump=_r(3000, 9000),
        sitework_psf=_r(12, 22),
        utilities_stub_psf=_r(6, 12),
        foundation_psf=_r(22, 35),
        generator_rental_lump=_r(900, 1800),
        oculus_curb_lump_each=_r(900, 1600),
        exterior_finish_psf=_r(8, 16),
        transition_waterproofing_lump=_r(900, 1800),
        interior_framing_psf=_r(14, 22),
        insulation_drywall_psf=_r(12, 20),
        flooring_finishes_psf=_r(18, 35),
        millwork_doors_psf=_r(8, 16),
        plumbing_psf=_r(14, 22),
        electrical_psf=_r(14, 22),
        hvac_psf=_r(18, 32),
        special_systems_psf=_r(3, 6),
        kitchen_bath_psf=_r(20, 45),
        appliances_lump=_r(6000, 12000),
        lightning_protection_lump=_r(1200, 2200),
    ),
    option_costs=OptionCosts(
        solar=20000,
        battery_storage=18000,
        geothermal=45000,
        rainwater_collection=12000,
        hydronic_floors=20000,
        septic=35000,
        driveway_per_ft=80,
        driveway_max_ft=150,
    ),
    occupant_scaling=OccupantScaling(
        sf_per_expected_bathroom=900,
        plumbing_electrical=ScalingBand(slope=0.07, floor=0.85, ceiling=1.25),
        utilities=ScalingBand(slope=0.03, floor=0.90, ceiling=1.15),
        special_systems=ScalingBand(slope=0.03, floor=0.90, ceiling=1.15),
    ),
    dome_count_multipliers={1: 1.00, 2: 1.07, 3: 1.12},
    shell_height_multipliers={
        ShellHeight.STANDARD: 1.00,
        ShellHeight.TALL: 1.05,
    },
    site_staging_multipliers={
        SiteComplexity.FLAT: 1.00,
        SiteComplexity.MODERATE: 1.05,
        SiteComplexity.COMPLEX: 1.10,
    },
    shell_thickness_multipliers={4: 1.00, 5: 1.12, 6: 1.25},
    mix_type_multipliers={
        MixType.STANDARD: 1.00,
        MixType.POZZOLAN: 1.06,
        MixType.HEMP: 1.18,
    },
    site_item_multipliers={
        SiteComplexity.FLAT: 1.00,
        SiteComplexity.MODERATE: 1.20,
        SiteComplexity.COMPLEX: 1.45,
    },
    # Septic and driveway scale more gently with site difficulty
    site_option_multipliers={
        SiteComplexity.FLAT: 1.00,
        SiteComplexity.MODERATE: 1.08,
        SiteComplexity.COMPLEX: 1.15,
    },
    mechanical_multipliers={
        MechanicalTier.SIMPLE: 0.95,
        MechanicalTier.STANDARD: 1.00,
        MechanicalTier.ADVANCED: 1.12,
    },
    finish_multipliers={
        FinishLevel.ECONOMY: 0.95,
        FinishLevel.STANDARD: 1.00,
        FinishLevel.UPGRADED: 1.20,
        FinishLevel.PREMIUM: 1.35,
    },
    glazing_unit_costs={
        GlazingLevel.TEN: 110,
        GlazingLevel.TWENTY: 125,
        GlazingLevel.THIRTY: 160,
        GlazingLevel.FORTY: 200,
    },
    basement_adders_psf={
        BasementType.NONE: _r(0, 0),
        BasementType.PARTIAL: _r(35, 60),
        BasementType.FULL: _r(55, 95),
    },
    basement_coverage={
        BasementType.NONE: 0.0,
        BasementType.PARTIAL: 0.5,
        BasementType.FULL: 1.0,
    },
    remote_access_lumps={
        RemoteAccess.EASY: _r(0, 0),
        RemoteAccess.MODERATE: _r(1800, 3600),
        RemoteAccess.REMOTE: _r(6000, 12000),
    },
    connector_lumps={
        ConnectorType.NONE: _r(0, 0),
        ConnectorType.SHORT: _r(6000, 11000),
        ConnectorType.MEDIUM: _r(12000, 20000),
        ConnectorType.LONG: _r(24000, 42000),
    },
    range_low_adjustment=-0.05,
    range_high_adjustment=0.07,
)
