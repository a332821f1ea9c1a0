"""Load an estimator configuration table from a JSON document."""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import ValidationError

from domecost.data.config import EstimatorConfig
from domecost.exceptions import ConfigurationError

logger = logging.getLogger(__name__)


def load_config(path: str | Path) -> EstimatorConfig:
    """Read and validate a configuration file.

    The document has the same shape as ``EstimatorConfig.model_dump()``;
    enum-keyed tables use the enum values as JSON object keys.

    Raises:
        ConfigurationError: If the file cannot be read or does not validate.
    """
    config_path = Path(path)
    try:
        raw = config_path.read_text(encoding="utf-8")
    except OSError as exc:
        msg = f"Cannot read estimator config '{config_path}': {exc}"
        raise ConfigurationError(msg) from exc

    try:
        config = EstimatorConfig.model_validate_json(raw)
    except ValidationError as exc:
        msg = f"Invalid estimator config '{config_path}': {exc}"
        raise ConfigurationError(msg) from exc

    logger.info("Loaded estimator config %s from %s", config.version, config_path)
    return config
