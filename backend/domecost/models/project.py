"""Project input models for the domecost estimation engine."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from domecost.models.enums import (
    BasementType,
    ConnectorType,
    FinishLevel,
    GlazingLevel,
    InflationPower,
    MechanicalTier,
    MixType,
    RemoteAccess,
    ShellHeight,
    SiteComplexity,
)


class OptionalSystems(BaseModel):
    """Discretionary add-on systems, one flag per system.

    Field order is the order in which the systems are priced and labelled.
    """

    model_config = ConfigDict(
        frozen=True, alias_generator=to_camel, populate_by_name=True
    )

    solar: bool = False
    battery_storage: bool = False
    geothermal: bool = False
    rainwater_collection: bool = False
    hydronic_floors: bool = False
    septic: bool = False
    driveway: bool = False

    @property
    def selected(self) -> list[str]:
        """Names of the selected systems, in pricing order."""
        return [name for name, on in self if on]


class ProjectInput(BaseModel):
    """Normalized description of a proposed dome building.

    Build one with :func:`domecost.normalizer.normalize_input` from a raw
    key/value record; constructing it directly validates bounds strictly.
    """

    model_config = ConfigDict(
        frozen=True, alias_generator=to_camel, populate_by_name=True
    )

    floor_area_sf: float = Field(default=0.0, ge=0)
    region_factor: float = Field(default=1.0, ge=0)
    finish_level: FinishLevel = FinishLevel.STANDARD
    dome_count: int = Field(default=1, ge=1, le=3)
    shell_height: ShellHeight = ShellHeight.STANDARD
    glazing: GlazingLevel = GlazingLevel.TWENTY
    basement_type: BasementType = BasementType.NONE
    site_complexity: SiteComplexity = SiteComplexity.FLAT
    mechanical_tier: MechanicalTier = MechanicalTier.STANDARD
    bathroom_count: int = Field(default=2, ge=1)
    include_sitework: bool = True
    optional_systems: OptionalSystems = Field(default_factory=OptionalSystems)
    driveway_length_ft: float = Field(default=0.0, ge=0)
    contingency_fraction: float = Field(default=0.10, ge=0)
    shell_thickness_in: int = Field(default=4, ge=4, le=6)
    mix_type: MixType = MixType.STANDARD
    oculus_count: int = Field(default=0, ge=0)
    connector_type: ConnectorType = ConnectorType.NONE
    remote_access: RemoteAccess = RemoteAccess.EASY
    inflation_power: InflationPower = InflationPower.ONSITE
    non_conditioned_dome_count: int = Field(default=0, ge=0)
    non_conditioned_area_sf_each: float = Field(default=0.0, ge=0)
    lightning_protection: bool = False

    @property
    def has_non_conditioned_structures(self) -> bool:
        return (
            self.non_conditioned_dome_count > 0
            and self.non_conditioned_area_sf_each > 0
        )
