"""Configuration layer for the domecost estimation engine."""

from domecost.data.config import EstimatorConfig
from domecost.data.loader import load_config
from domecost.data.repository import CostTable
from domecost.data.seed import DEFAULT_CONFIG

__all__ = [
    "DEFAULT_CONFIG",
    "CostTable",
    "EstimatorConfig",
    "load_config",
]
