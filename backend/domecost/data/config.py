"""Schema for the estimator's static configuration table.

Every monetary figure is an uncalibrated national baseline; the engine
multiplies it by ``price_calibration`` before any other factor.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, NonNegativeFloat, model_validator

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


class ShellUnitCosts(BaseModel):
    """Per-area cost ranges of the four shell components.

    Membrane, foam and shotcrete are priced per SF of shell surface;
    reinforcement is priced per SF of floor area.
    """

    model_config = ConfigDict(frozen=True)

    membrane_per_shell_sf: CostRange
    foam_per_shell_sf: CostRange
    shotcrete_per_shell_sf: CostRange
    reinforcement_per_floor_sf: CostRange


class UnitCosts(BaseModel):
    """Per-SF (``*_psf``) and lump-sum (``*_lump``) line item ranges."""

    model_config = ConfigDict(frozen=True)

    # Pre-construction
    design_docs_psf: CostRange
    permits_fees_psf: CostRange
    survey_geotech_lump: CostRange
    mobilization_lump: CostRange
    # Site & foundation (shell excluded)
    sitework_psf: CostRange
    utilities_stub_psf: CostRange
    foundation_psf: CostRange
    generator_rental_lump: CostRange
    # Core structure
    oculus_curb_lump_each: CostRange
    # Exterior (non-glazing)
    exterior_finish_psf: CostRange
    transition_waterproofing_lump: CostRange
    # Interiors
    interior_framing_psf: CostRange
    insulation_drywall_psf: CostRange
    flooring_finishes_psf: CostRange
    millwork_doors_psf: CostRange
    # Systems
    plumbing_psf: CostRange
    electrical_psf: CostRange
    hvac_psf: CostRange
    special_systems_psf: CostRange
    # Allowances
    kitchen_bath_psf: CostRange
    appliances_lump: CostRange
    # Closeout
    lightning_protection_lump: CostRange


class OptionCosts(BaseModel):
    """Single-figure costs of the discretionary add-on systems."""

    model_config = ConfigDict(frozen=True)

    solar: NonNegativeFloat
    battery_storage: NonNegativeFloat
    geothermal: NonNegativeFloat
    rainwater_collection: NonNegativeFloat
    hydronic_floors: NonNegativeFloat
    septic: NonNegativeFloat
    driveway_per_ft: NonNegativeFloat
    driveway_max_ft: NonNegativeFloat


class ScalingBand(BaseModel):
    """A linear nudge ``1 + slope * delta`` clamped to ``[floor, ceiling]``."""

    model_config = ConfigDict(frozen=True)

    slope: float
    floor: NonNegativeFloat
    ceiling: NonNegativeFloat

    @model_validator(mode="after")
    def floor_le_ceiling(self) -> ScalingBand:
        if self.floor > self.ceiling:
            msg = f"Scaling floor {self.floor} exceeds ceiling {self.ceiling}"
            raise ValueError(msg)
        return self


class OccupantScaling(BaseModel):
    """Bathroom-count scaling of plumbing, utilities and special systems."""

    model_config = ConfigDict(frozen=True)

    sf_per_expected_bathroom: float = Field(gt=0)
    plumbing_electrical: ScalingBand
    utilities: ScalingBand
    special_systems: ScalingBand


class EstimatorConfig(BaseModel):
    """Complete, immutable configuration table for one engine instance."""

    model_config = ConfigDict(frozen=True)

    version: str
    price_calibration: NonNegativeFloat
    envelope_to_interior_ratio: NonNegativeFloat

    shell_unit_costs: ShellUnitCosts
    unit_costs: UnitCosts
    option_costs: OptionCosts
    occupant_scaling: OccupantScaling

    # Composite shell multiplier inputs
    dome_count_multipliers: dict[int, NonNegativeFloat]
    shell_height_multipliers: dict[ShellHeight, NonNegativeFloat]
    site_staging_multipliers: dict[SiteComplexity, NonNegativeFloat]
    shell_thickness_multipliers: dict[int, NonNegativeFloat]
    mix_type_multipliers: dict[MixType, NonNegativeFloat]

    # Category multipliers
    site_item_multipliers: dict[SiteComplexity, NonNegativeFloat]
    site_option_multipliers: dict[SiteComplexity, NonNegativeFloat]
    mechanical_multipliers: dict[MechanicalTier, NonNegativeFloat]
    finish_multipliers: dict[FinishLevel, NonNegativeFloat]

    glazing_unit_costs: dict[GlazingLevel, NonNegativeFloat]
    basement_adders_psf: dict[BasementType, CostRange]
    basement_coverage: dict[BasementType, NonNegativeFloat]
    remote_access_lumps: dict[RemoteAccess, CostRange]
    connector_lumps: dict[ConnectorType, CostRange]

    range_low_adjustment: float = Field(ge=-1.0, le=0.0)
    range_high_adjustment: float = Field(ge=0.0)
