"""Rate table loading from rates.yaml.

Example rates.yaml:

    afp_rate: 0.0287
    ars_rate: 0.0304
    isr_brackets:
      - {up_to: 20000, rate: 0.0}
      - {up_to: 40000, rate: 0.05}
      - {up_to: null, rate: 0.10}

Keys left out keep their defaults.
"""

import logging
from pathlib import Path
from typing import Optional

import yaml
from pydantic import ValidationError

from ..config import get_rates_path
from ..errors import ConfigError
from .schemas import DEFAULT_RATES, RateTable

logger = logging.getLogger(__name__)


def load_rate_table(path: Optional[Path] = None) -> RateTable:
    """Load the rate table.

    Args:
        path: rates.yaml to read (default: config directory's rates.yaml)

    Returns:
        RateTable from the file, or DEFAULT_RATES if the file doesn't exist

    Raises:
        ConfigError: If the file is not valid YAML or fails validation
    """
    rates_path = Path(path) if path is not None else get_rates_path()

    if not rates_path.exists():
        if path is not None:
            raise ConfigError(f"Rates file not found: {rates_path}")
        return DEFAULT_RATES

    try:
        with open(rates_path, "r") as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {rates_path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Expected a mapping in {rates_path}")

    try:
        rates = RateTable.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid rate table in {rates_path}:\n{e}") from e

    logger.debug(f"loaded rate table from {rates_path}")
    return rates


def rate_table_to_dict(rates: RateTable) -> dict:
    """Plain dict form of a rate table, amounts as strings."""
    return rates.model_dump(mode="json")
