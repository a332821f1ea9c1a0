"""Input normalization: raw key/value records to a ``ProjectInput``.

The normalizer is the only place where user-supplied values are coerced.
It never raises: missing, unparsable or unrecognized values fall back to a
documented baseline, and out-of-range numbers are clamped. Keys may be
snake_case (``floor_area_sf``) or camelCase (``floorAreaSf``).
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable, Mapping
from enum import StrEnum
from typing import Any, TypeVar

from pydantic.alias_generators import to_camel

from domecost.data.seed import DEFAULT_CONFIG
from domecost.models.enums import (
    DOME_COUNTS,
    SHELL_THICKNESSES_IN,
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
from domecost.models.project import OptionalSystems, ProjectInput

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=StrEnum)

DEFAULT_CONTINGENCY_PCT = 10.0
DEFAULT_BATHROOMS = 2

# Numeric finish multipliers as entered on the estimate form
_FINISH_BY_MULTIPLIER: dict[float, FinishLevel] = {
    0.95: FinishLevel.ECONOMY,
    1.00: FinishLevel.STANDARD,
    1.20: FinishLevel.UPGRADED,
    1.35: FinishLevel.PREMIUM,
}

_HEIGHT_ALIASES = {"std": ShellHeight.STANDARD}
_MIX_ALIASES = {
    "std": MixType.STANDARD,
    "pozz": MixType.POZZOLAN,
    "hempcrete": MixType.HEMP,
}
_CONNECTOR_ALIASES = {"med": ConnectorType.MEDIUM}
_POWER_ALIASES = {"on-site": InflationPower.ONSITE, "on_site": InflationPower.ONSITE}

# Short option names found in older saved inputs
_OPTION_ALIASES: dict[str, str] = {
    "storage": "battery_storage",
    "geo": "geothermal",
    "rain": "rainwater_collection",
    "hydronic": "hydronic_floors",
}

# Persisted record names that differ from the field names
_FIELD_ALIASES: dict[str, tuple[str, ...]] = {
    "floor_area_sf": ("floor_area_sq_ft",),
    "finish_level": ("finish_multiplier",),
    "glazing": ("glazing_fraction",),
    "shell_thickness_in": ("shell_thickness_inches",),
    "remote_access": ("remote_access_tier",),
    "inflation_power": ("inflation_power_source",),
    "non_conditioned_area_sf_each": ("non_conditioned_area_sq_ft_each",),
}

# Upper bounds keeping every product of area, rate and multiplier finite
MAX_AREA_SF = 10_000_000.0
MAX_REGION_FACTOR = 10.0
MAX_CONTINGENCY_FRACTION = 10.0
MAX_COUNT = 1_000

_TRUE_STRINGS = {"true", "1", "yes", "on", "y"}
_FALSE_STRINGS = {"false", "0", "no", "off", "n", ""}


class _RawRecord:
    """Case-tolerant view over a raw input mapping.

    A field is looked up by its own name, then its camelCase form, then any
    persisted alias in ``_FIELD_ALIASES``; the first key present wins.
    """

    def __init__(self, raw: Mapping[str, Any]) -> None:
        self._raw = raw

    @staticmethod
    def _keys(name: str) -> tuple[str, ...]:
        aliases = _FIELD_ALIASES.get(name, ())
        return (name, to_camel(name), *aliases, *(to_camel(a) for a in aliases))

    def get(self, name: str) -> Any:
        for key in self._keys(name):
            if key in self._raw:
                return self._raw[key]
        return None

    def has(self, name: str) -> bool:
        return any(key in self._raw for key in self._keys(name))


def normalize_input(
    raw: Mapping[str, Any] | ProjectInput | None,
    *,
    driveway_max_ft: float | None = None,
) -> ProjectInput:
    """Build a fully populated ``ProjectInput`` from a raw record.

    Args:
        raw: A plain key/value record (as produced by deserializing a saved
            form), an existing ``ProjectInput``, or ``None`` for defaults.
            Contingency is read from ``contingency_pct`` (a percentage) or,
            when only that is present, ``contingency_fraction``.
        driveway_max_ft: Driveway length cap; defaults to the built-in
            configuration's maximum.

    Returns:
        A valid ``ProjectInput``. This function never raises.
    """
    if isinstance(raw, ProjectInput):
        raw = raw.model_dump()
    record = _RawRecord(raw if isinstance(raw, Mapping) else {})
    if driveway_max_ft is None:
        driveway_max_ft = DEFAULT_CONFIG.option_costs.driveway_max_ft

    floor_area = _capped(
        "floor_area_sf", max(0.0, _as_float(record, "floor_area_sf", 0.0)), MAX_AREA_SF
    )

    region = _as_float(record, "region_factor", 1.0)
    if region <= 0:
        logger.debug("region_factor %r is not positive; using 1.0", region)
        region = 1.0
    region = _capped("region_factor", region, MAX_REGION_FACTOR)

    if record.has("contingency_pct") or not record.has("contingency_fraction"):
        contingency = _as_float(record, "contingency_pct", DEFAULT_CONTINGENCY_PCT) / 100
    else:
        contingency = _as_float(record, "contingency_fraction", DEFAULT_CONTINGENCY_PCT / 100)
    contingency = _capped(
        "contingency", max(0.0, contingency), MAX_CONTINGENCY_FRACTION
    )

    driveway = _as_float(record, "driveway_length_ft", 0.0)
    driveway = min(max(0.0, driveway), max(0.0, driveway_max_ft))

    return ProjectInput(
        floor_area_sf=floor_area,
        region_factor=region,
        finish_level=_finish_level(record.get("finish_level")),
        dome_count=_as_choice(record, "dome_count", DOME_COUNTS, 1),
        shell_height=_as_enum(
            record, "shell_height", ShellHeight, ShellHeight.STANDARD, _HEIGHT_ALIASES
        ),
        glazing=_glazing_level(record.get("glazing")),
        basement_type=_as_enum(record, "basement_type", BasementType, BasementType.NONE),
        site_complexity=_as_enum(
            record, "site_complexity", SiteComplexity, SiteComplexity.FLAT
        ),
        mechanical_tier=_as_enum(
            record, "mechanical_tier", MechanicalTier, MechanicalTier.STANDARD
        ),
        bathroom_count=_count(record, "bathroom_count", DEFAULT_BATHROOMS, minimum=1),
        include_sitework=_as_bool(record.get("include_sitework"), default=True),
        optional_systems=_optional_systems(record.get("optional_systems")),
        driveway_length_ft=driveway,
        contingency_fraction=contingency,
        shell_thickness_in=_as_choice(
            record, "shell_thickness_in", SHELL_THICKNESSES_IN, 4
        ),
        mix_type=_as_enum(record, "mix_type", MixType, MixType.STANDARD, _MIX_ALIASES),
        oculus_count=_count(record, "oculus_count", 0),
        connector_type=_as_enum(
            record, "connector_type", ConnectorType, ConnectorType.NONE, _CONNECTOR_ALIASES
        ),
        remote_access=_as_enum(record, "remote_access", RemoteAccess, RemoteAccess.EASY),
        inflation_power=_as_enum(
            record, "inflation_power", InflationPower, InflationPower.ONSITE, _POWER_ALIASES
        ),
        non_conditioned_dome_count=_count(record, "non_conditioned_dome_count", 0),
        non_conditioned_area_sf_each=_capped(
            "non_conditioned_area_sf_each",
            max(0.0, _as_float(record, "non_conditioned_area_sf_each", 0.0)),
            MAX_AREA_SF,
        ),
        lightning_protection=_as_bool(record.get("lightning_protection"), default=False),
    )


# ---------------------------------------------------------------------------
# Scalar coercion
# ---------------------------------------------------------------------------


def _to_float(value: Any) -> float | None:
    if value is None or isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    return number if math.isfinite(number) else None


def _as_float(record: _RawRecord, name: str, default: float) -> float:
    value = record.get(name)
    number = _to_float(value)
    if number is None:
        if value is not None:
            logger.debug("%s=%r is not a number; using %s", name, value, default)
        return default
    return number


def _as_int(record: _RawRecord, name: str, default: int) -> int:
    number = _as_float(record, name, float(default))
    return int(number)


def _capped(name: str, value: float, maximum: float) -> float:
    if value > maximum:
        logger.debug("%s=%r exceeds %s; capping", name, value, maximum)
        return maximum
    return value


def _count(record: _RawRecord, name: str, default: int, minimum: int = 0) -> int:
    """Integer count truncated toward zero and kept within [minimum, MAX_COUNT]."""
    number = _as_int(record, name, default)
    return int(_capped(name, max(minimum, number), MAX_COUNT))


def _as_choice(
    record: _RawRecord, name: str, choices: tuple[int, ...], default: int
) -> int:
    value = record.get(name)
    number = _to_float(value)
    if number is not None and number.is_integer() and int(number) in choices:
        return int(number)
    if value is not None:
        logger.debug("%s=%r is not one of %s; using %s", name, value, choices, default)
    return default


def _as_bool(value: Any, *, default: bool) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, int | float):
        return value != 0
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in _TRUE_STRINGS:
            return True
        if lowered in _FALSE_STRINGS:
            return False
    return default


def _as_enum(
    record: _RawRecord,
    name: str,
    enum_cls: type[E],
    default: E,
    aliases: Mapping[str, E] | None = None,
) -> E:
    value = record.get(name)
    if isinstance(value, enum_cls):
        return value
    if isinstance(value, str):
        key = value.strip().lower()
        if aliases and key in aliases:
            return aliases[key]
        try:
            return enum_cls(key)
        except ValueError:
            pass
    if value is not None:
        logger.debug("%s=%r is not a known %s; using %s", name, value, enum_cls.__name__, default)
    return default


# ---------------------------------------------------------------------------
# Float-valued enums
# ---------------------------------------------------------------------------


def _finish_level(value: Any) -> FinishLevel:
    if isinstance(value, FinishLevel):
        return value
    if isinstance(value, str):
        try:
            return FinishLevel(value.strip().lower())
        except ValueError:
            pass
    number = _to_float(value)
    if number is not None:
        level = _FINISH_BY_MULTIPLIER.get(round(number, 2))
        if level is not None:
            return level
    if value is not None:
        logger.debug("finish_level=%r is not recognized; using standard", value)
    return FinishLevel.STANDARD


def _glazing_level(value: Any) -> GlazingLevel:
    if isinstance(value, GlazingLevel):
        return value
    number = _to_float(value)
    if number is not None:
        try:
            return GlazingLevel(f"{round(number, 2):.2f}")
        except ValueError:
            pass
    if value is not None:
        logger.debug("glazing=%r is not recognized; using 0.20", value)
    return GlazingLevel.TWENTY


# ---------------------------------------------------------------------------
# Optional systems
# ---------------------------------------------------------------------------


def _option_field(name: str) -> str | None:
    key = name.strip()
    key = _OPTION_ALIASES.get(key, key)
    # camelCase to snake_case for names such as "batteryStorage"
    snake = "".join(f"_{c.lower()}" if c.isupper() else c for c in key).lstrip("_")
    snake = _OPTION_ALIASES.get(snake, snake)
    return snake if snake in OptionalSystems.model_fields else None


def _optional_systems(value: Any) -> OptionalSystems:
    """Accept either a flag mapping or an iterable of selected names."""
    if isinstance(value, OptionalSystems):
        return value
    flags: dict[str, bool] = {}
    if isinstance(value, Mapping):
        for name, on in value.items():
            field = _option_field(str(name))
            if field is not None:
                flags[field] = _as_bool(on, default=False)
    elif isinstance(value, Iterable) and not isinstance(value, str | bytes):
        for name in value:
            field = _option_field(str(name))
            if field is not None:
                flags[field] = True
    return OptionalSystems(**flags)
