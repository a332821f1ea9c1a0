"""Domain models for the domecost estimation engine."""

from domecost.models.enums import (
    CATEGORY_ORDER,
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
from domecost.models.estimate import (
    AppliedFactors,
    CostRange,
    EstimateMetadata,
    EstimateResult,
    LineItem,
    ShellBreakdown,
    SiteworkSummary,
)
from domecost.models.project import OptionalSystems, ProjectInput

__all__ = [
    "CATEGORY_ORDER",
    "AppliedFactors",
    "BasementType",
    "ConnectorType",
    "CostRange",
    "EstimateMetadata",
    "EstimateResult",
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
    "ShellBreakdown",
    "ShellHeight",
    "SiteComplexity",
    "SiteworkSummary",
]
