"""domecost: planning-level cost estimation for monolithic dome homes.

Usage::

    from domecost import create_default_engine

    engine = create_default_engine()
    result = engine.estimate({"floor_area_sf": 2000, "bathroom_count": 2})
    print(result.total)
"""

from domecost.data.config import EstimatorConfig
from domecost.data.repository import CostTable
from domecost.data.seed import DEFAULT_CONFIG
from domecost.engine import CostEngine
from domecost.factory import create_default_engine, create_engine, create_engine_from_env
from domecost.models.enums import (
    BasementType,
    ConnectorType,
    FinishLevel,
    GlazingLevel,
    InflationPower,
    LineItemCategory,
    MechanicalTier,
    MixType,
    RemoteAccess,
    ShellHeight,
    SiteComplexity,
)
from domecost.models.estimate import CostRange, EstimateResult, LineItem
from domecost.models.project import OptionalSystems, ProjectInput
from domecost.normalizer import normalize_input

__all__ = [
    "DEFAULT_CONFIG",
    "BasementType",
    "ConnectorType",
    "CostEngine",
    "CostRange",
    "CostTable",
    "EstimateResult",
    "EstimatorConfig",
    "FinishLevel",
    "GlazingLevel",
    "InflationPower",
    "LineItem",
    "LineItemCategory",
    "MechanicalTier",
    "MixType",
    "OptionalSystems",
    "ProjectInput",
    "RemoteAccess",
    "ShellHeight",
    "SiteComplexity",
    "create_default_engine",
    "create_engine",
    "create_engine_from_env",
    "normalize_input",
]
