"""Configuration management for Payrun.

Configuration lives in the config directory:

1. settings.json - Machine-specific settings
   - data_dir: where the employee database is kept
   - db_url: full SQLAlchemy URL (overrides data_dir)

2. rates.yaml - Optional deduction rate table
   - afp_rate, ars_rate, isr_brackets
   - Defaults are used when the file is absent

Config directory resolution:
1. PAYRUN_CONFIG_PATH environment variable (if set)
2. ~/.config/payrun/ (XDG_CONFIG_HOME fallback)

Database URL resolution:
1. Explicit argument (CLI --db-url)
2. PAYRUN_DB_URL environment variable
3. settings.json "db_url" key
4. sqlite:///<data_dir>/payroll.db

Data path follows the XDG base directory layout:
- settings.json "data_dir" or XDG_DATA_HOME/payrun/ or ~/.local/share/payrun/
"""

import json
import logging
import os
from pathlib import Path
from typing import Any, Optional

from .errors import ConfigError

logger = logging.getLogger(__name__)


APP_NAME = "payrun"
SETTINGS_FILENAME = "settings.json"
RATES_FILENAME = "rates.yaml"
DB_FILENAME = "payroll.db"


def get_config_dir() -> Path:
    """Get the configuration directory path.

    Resolution order:
    1. PAYRUN_CONFIG_PATH environment variable
    2. ~/.config/payrun/ (XDG_CONFIG_HOME)

    Returns:
        Path to the configuration directory
    """
    env_path = os.environ.get("PAYRUN_CONFIG_PATH")
    if env_path:
        return Path(env_path)

    xdg_config_home = os.environ.get("XDG_CONFIG_HOME", Path.home() / ".config")
    return Path(xdg_config_home) / APP_NAME


def get_settings_path() -> Path:
    """Get the path to settings.json (may not exist yet)."""
    return get_config_dir() / SETTINGS_FILENAME


def get_rates_path() -> Path:
    """Get the path to rates.yaml (may not exist yet)."""
    return get_config_dir() / RATES_FILENAME


def load_settings() -> dict:
    """Load machine-specific settings from settings.json.

    Returns:
        Settings dictionary (empty dict if file doesn't exist)

    Raises:
        ConfigError: If the file exists but is not a JSON object
    """
    settings_file = get_settings_path()

    if not settings_file.exists():
        return {}

    try:
        with open(settings_file, "r") as f:
            settings = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigError(f"Invalid JSON in {settings_file}: {e}") from e

    if not isinstance(settings, dict):
        raise ConfigError(f"Expected a JSON object in {settings_file}")
    return settings


def save_settings(settings: dict) -> Path:
    """Save machine-specific settings to settings.json.

    Args:
        settings: Settings dictionary to save

    Returns:
        Path to the saved settings file
    """
    config_dir = get_config_dir()
    config_dir.mkdir(parents=True, exist_ok=True)

    settings_file = config_dir / SETTINGS_FILENAME

    with open(settings_file, "w") as f:
        json.dump(settings, f, indent=2)

    return settings_file


def get_setting(key: str, default: Any = None) -> Any:
    """Get a setting value from settings.json.

    Args:
        key: Setting key (e.g., "data_dir", "db_url")
        default: Default value if key not found

    Returns:
        Setting value or default
    """
    settings = load_settings()
    return settings.get(key, default)


def set_setting(key: str, value: Any) -> Path:
    """Set a setting value in settings.json.

    Returns:
        Path to the saved settings file
    """
    settings = load_settings()
    settings[key] = value
    return save_settings(settings)


def clear_setting(key: str) -> bool:
    """Remove a setting from settings.json.

    Returns:
        True if the key was present and removed
    """
    settings = load_settings()
    if key not in settings:
        return False
    del settings[key]
    save_settings(settings)
    return True


def get_data_path() -> Path:
    """Get the data directory path.

    Uses settings.json "data_dir" when set, else XDG_DATA_HOME/payrun/.

    Returns:
        Path to the data directory (created if doesn't exist)
    """
    custom = get_setting("data_dir")
    if custom:
        data_path = Path(custom).expanduser()
    else:
        xdg_data_home = os.environ.get("XDG_DATA_HOME", Path.home() / ".local" / "share")
        data_path = Path(xdg_data_home) / APP_NAME
    data_path.mkdir(parents=True, exist_ok=True)
    return data_path


def get_db_url(override: Optional[str] = None) -> str:
    """Resolve the SQLAlchemy URL of the employee database.

    Args:
        override: Explicit URL, wins over every other source

    Returns:
        SQLAlchemy database URL
    """
    if override:
        return override

    env_url = os.environ.get("PAYRUN_DB_URL")
    if env_url:
        return env_url

    configured = get_setting("db_url")
    if configured:
        return configured

    db_path = get_data_path() / DB_FILENAME
    logger.debug(f"using default database {db_path}")
    return f"sqlite:///{db_path}"
