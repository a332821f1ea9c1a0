"""Enums for the domecost domain models.

These enums represent the estimator's selectable options. Float-valued
options (finish tier, glazing fraction) are canonical discrete members so
that lookups never depend on float equality.
"""

from enum import StrEnum


class FinishLevel(StrEnum):
    """Interior/exterior finish tier (multiplier 0.95 / 1.00 / 1.20 / 1.35)."""

    ECONOMY = "economy"
    STANDARD = "standard"
    UPGRADED = "upgraded"
    PREMIUM = "premium"


class GlazingLevel(StrEnum):
    """Share of the shell surface that is glazed."""

    TEN = "0.10"
    TWENTY = "0.20"
    THIRTY = "0.30"
    FORTY = "0.40"

    @property
    def fraction(self) -> float:
        return float(self.value)


class ShellHeight(StrEnum):
    STANDARD = "standard"
    TALL = "tall"


class BasementType(StrEnum):
    NONE = "none"
    PARTIAL = "partial"
    FULL = "full"


class SiteComplexity(StrEnum):
    FLAT = "flat"
    MODERATE = "moderate"
    COMPLEX = "complex"


class MechanicalTier(StrEnum):
    SIMPLE = "simple"
    STANDARD = "standard"
    ADVANCED = "advanced"


class MixType(StrEnum):
    """Shotcrete mix design."""

    STANDARD = "standard"
    POZZOLAN = "pozzolan"
    HEMP = "hemp"


class ConnectorType(StrEnum):
    """Length tier of a shell connector/tunnel between domes."""

    NONE = "none"
    SHORT = "short"
    MEDIUM = "medium"
    LONG = "long"


class RemoteAccess(StrEnum):
    EASY = "easy"
    MODERATE = "moderate"
    REMOTE = "remote"


class InflationPower(StrEnum):
    """Power source for inflating the airform."""

    ONSITE = "onsite"
    GENERATOR = "generator"


class LineItemCategory(StrEnum):
    """Line item categories, declared in report order."""

    PRE_CONSTRUCTION = "Pre-Construction"
    SITE_FOUNDATION = "Site & Foundation"
    CORE_STRUCTURE = "Core Structure"
    EXTERIOR = "Exterior"
    INTERIORS = "Interiors"
    SYSTEMS = "Systems"
    ALLOWANCES = "Allowances"
    NON_CONDITIONED = "Non-Conditioned Structures"
    CLOSEOUT = "Closeout"


CATEGORY_ORDER: tuple[LineItemCategory, ...] = tuple(LineItemCategory)

DOME_COUNTS: tuple[int, ...] = (1, 2, 3)
SHELL_THICKNESSES_IN: tuple[int, ...] = (4, 5, 6)
