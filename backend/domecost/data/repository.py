"""Lookup table over the estimator configuration."""

from __future__ import annotations

from typing import TYPE_CHECKING

from domecost.models.estimate import CostRange

if TYPE_CHECKING:
    from domecost.data.config import (
        EstimatorConfig,
        OccupantScaling,
        OptionCosts,
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

NEUTRAL_MULTIPLIER = 1.0


class CostTable:
    """Read-only lookups over an :class:`EstimatorConfig`.

    Lookups never fail: a key missing from a multiplier table resolves to
    ``1.0`` and a key missing from a cost table resolves to a zero cost, so
    an unrecognized option is cost-neutral rather than an error.
    """

    def __init__(self, config: EstimatorConfig) -> None:
        self._config = config

    @property
    def config(self) -> EstimatorConfig:
        return self._config

    @property
    def version(self) -> str:
        return self._config.version

    @property
    def envelope_to_interior_ratio(self) -> float:
        return self._config.envelope_to_interior_ratio

    @property
    def shell_unit_costs(self) -> ShellUnitCosts:
        return self._config.shell_unit_costs

    @property
    def unit_costs(self) -> UnitCosts:
        return self._config.unit_costs

    @property
    def option_costs(self) -> OptionCosts:
        return self._config.option_costs

    @property
    def occupant_scaling(self) -> OccupantScaling:
        return self._config.occupant_scaling

    @property
    def range_adjustments(self) -> tuple[float, float]:
        return (
            self._config.range_low_adjustment,
            self._config.range_high_adjustment,
        )

    def calibrate(self, amount: float) -> float:
        """Apply the global price calibration to a baseline amount."""
        return amount * self._config.price_calibration

    # ------------------------------------------------------------------
    # Multiplier tables
    # ------------------------------------------------------------------

    def dome_count_multiplier(self, dome_count: int) -> float:
        return self._config.dome_count_multipliers.get(dome_count, NEUTRAL_MULTIPLIER)

    def shell_height_multiplier(self, height: ShellHeight) -> float:
        return self._config.shell_height_multipliers.get(height, NEUTRAL_MULTIPLIER)

    def site_staging_multiplier(self, site: SiteComplexity) -> float:
        return self._config.site_staging_multipliers.get(site, NEUTRAL_MULTIPLIER)

    def shell_thickness_multiplier(self, thickness_in: int) -> float:
        return self._config.shell_thickness_multipliers.get(
            thickness_in, NEUTRAL_MULTIPLIER
        )

    def mix_type_multiplier(self, mix: MixType) -> float:
        return self._config.mix_type_multipliers.get(mix, NEUTRAL_MULTIPLIER)

    def site_item_multiplier(self, site: SiteComplexity) -> float:
        return self._config.site_item_multipliers.get(site, NEUTRAL_MULTIPLIER)

    def site_option_multiplier(self, site: SiteComplexity) -> float:
        return self._config.site_option_multipliers.get(site, NEUTRAL_MULTIPLIER)

    def mechanical_multiplier(self, tier: MechanicalTier) -> float:
        return self._config.mechanical_multipliers.get(tier, NEUTRAL_MULTIPLIER)

    def finish_multiplier(self, finish: FinishLevel) -> float:
        return self._config.finish_multipliers.get(finish, NEUTRAL_MULTIPLIER)

    def basement_coverage(self, basement: BasementType) -> float:
        return self._config.basement_coverage.get(basement, 0.0)

    # ------------------------------------------------------------------
    # Cost tables
    # ------------------------------------------------------------------

    def glazing_unit_cost(self, glazing: GlazingLevel) -> float:
        """Glazing $/SF of glazed area; unknown fractions cost nothing."""
        return self._config.glazing_unit_costs.get(glazing, 0.0)

    def basement_adder(self, basement: BasementType) -> CostRange:
        return self._config.basement_adders_psf.get(basement, CostRange.zero())

    def remote_access_lump(self, access: RemoteAccess) -> CostRange:
        return self._config.remote_access_lumps.get(access, CostRange.zero())

    def connector_lump(self, connector: ConnectorType) -> CostRange:
        return self._config.connector_lumps.get(connector, CostRange.zero())
