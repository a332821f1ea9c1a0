"""Core estimation engine for monolithic dome construction costs.

The CostEngine runs a fixed, synchronous pipeline:

1. **Normalize**: Coerce the raw input record into a ``ProjectInput``,
   clamping numbers and defaulting unknown options.
2. **Resolve factors**: Region, composite shell, site/mechanical/finish
   category multipliers and bathroom-driven occupant factors.
3. **Shell**: Price the membrane/foam/shotcrete/rebar shell from surface
   and floor area.
4. **Line items**: Build the categorized cost lines in report order.
5. **Optional systems**: Price the discretionary add-ons.
6. **Totals**: Subtotal, contingency, global low/high range adjustment and
   per-SF metrics.

The engine holds only an immutable configuration table, so ``estimate`` is
a pure function of its input and safe to call from multiple threads.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from domecost.factors import resolve_factors
from domecost.line_items import LineItemBuilder
from domecost.models.estimate import EstimateMetadata
from domecost.normalizer import normalize_input
from domecost.options import add_optional_systems
from domecost.shell import compute_shell_cost
from domecost.totals import aggregate, empty_result

if TYPE_CHECKING:
    from collections.abc import Mapping

    from domecost.data.repository import CostTable
    from domecost.models.estimate import EstimateResult
    from domecost.models.project import ProjectInput

logger = logging.getLogger(__name__)

ENGINE_VERSION = "0.1.0"


class CostEngine:
    """Converts a project description into an ``EstimateResult``.

    Args:
        table: Lookups over the configuration table. The engine never
            mutates it.

    Example::

        from domecost.data import DEFAULT_CONFIG, CostTable

        engine = CostEngine(CostTable(DEFAULT_CONFIG))
        result = engine.estimate({"floor_area_sf": 2000, "bathroom_count": 2})
    """

    def __init__(self, table: CostTable) -> None:
        self._table = table
        self._builder = LineItemBuilder(table)

    @property
    def table(self) -> CostTable:
        return self._table

    def normalize(self, raw: Mapping[str, Any] | ProjectInput | None) -> ProjectInput:
        """Normalize a raw record against this engine's driveway cap."""
        return normalize_input(
            raw, driveway_max_ft=self._table.option_costs.driveway_max_ft
        )

    def estimate(self, raw: Mapping[str, Any] | ProjectInput | None) -> EstimateResult:
        """Produce a planning-level estimate.

        Args:
            raw: A ``ProjectInput`` or a plain key/value record. Missing or
                malformed fields are defaulted, never rejected.

        Returns:
            The complete estimate. A project with zero floor area yields the
            all-zero result with no line items. This method never raises.
        """
        project = self.normalize(raw)
        metadata = self._metadata()

        if project.floor_area_sf <= 0:
            logger.debug("Zero floor area; returning empty estimate")
            return empty_result(project, metadata)

        # 1. Multipliers
        factors = resolve_factors(project, self._table)
        logger.debug(
            "Resolved factors: region=%.3f shell=%.3f site=%.2f mep=%.2f finish=%.2f",
            factors.region,
            factors.composite_shell,
            factors.site,
            factors.mechanical,
            factors.finish,
        )

        # 2. Structural shell
        shell = compute_shell_cost(
            self._table,
            project.floor_area_sf,
            factors.composite_shell,
            project.shell_thickness_in,
            project.mix_type,
        )
        logger.debug("Shell midpoint %.2f over %.1f SF", shell.midpoint, shell.shell_surface_sf)

        # 3. Line items
        built = self._builder.build(project, factors, shell)

        # 4. Optional systems
        options = add_optional_systems(project, factors, self._table)

        # 5. Totals
        result = aggregate(
            project=project,
            items=built.items,
            options=options,
            shell=shell,
            sitework=built.sitework,
            factors=factors,
            table=self._table,
            metadata=metadata,
        )
        logger.debug("Estimate total %.2f - %.2f", result.total.low, result.total.high)
        return result

    def _metadata(self) -> EstimateMetadata:
        low_adj, high_adj = self._table.range_adjustments
        return EstimateMetadata(
            engine_version=ENGINE_VERSION,
            config_version=self._table.version,
            range_low_adjustment=low_adj,
            range_high_adjustment=high_adj,
        )
