"""Factory functions for creating pre-configured CostEngine instances."""

from __future__ import annotations

import logging
import os
from typing import TYPE_CHECKING

from domecost.data.loader import load_config
from domecost.data.repository import CostTable
from domecost.data.seed import DEFAULT_CONFIG
from domecost.engine import CostEngine

if TYPE_CHECKING:
    from domecost.data.config import EstimatorConfig

logger = logging.getLogger(__name__)

CONFIG_PATH_ENV = "DOMECOST_CONFIG_PATH"


def create_engine(config: EstimatorConfig) -> CostEngine:
    """Create a CostEngine over the given configuration table."""
    return CostEngine(CostTable(config))


def create_default_engine() -> CostEngine:
    """Create a CostEngine wired up with the built-in configuration table.

    This is the recommended way to create a CostEngine for typical usage.

    Example::

        from domecost import create_default_engine

        engine = create_default_engine()
        result = engine.estimate({"floor_area_sf": 2000})
    """
    return create_engine(DEFAULT_CONFIG)


def create_engine_from_env() -> CostEngine:
    """Create a CostEngine from ``DOMECOST_CONFIG_PATH`` if it is set.

    Falls back to the built-in table when the variable is unset or empty.

    Raises:
        ConfigurationError: If the variable names an unreadable or invalid
            configuration file.
    """
    path = os.environ.get(CONFIG_PATH_ENV, "").strip()
    if not path:
        return create_default_engine()
    logger.info("Using estimator config from %s", path)
    return create_engine(load_config(path))
