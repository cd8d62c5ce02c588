"""Environment variable utilities for quant-monitor."""

import os
from pathlib import Path

CONFIG_ENV_VAR = "QUANT_MONITOR_CONFIG"
LOG_LEVEL_ENV_VAR = "QUANT_MONITOR_LOG_LEVEL"

DEFAULT_LOG_LEVEL = "INFO"


def get_config_path() -> Path | None:
    """Get config file path from QUANT_MONITOR_CONFIG environment variable.

    Returns:
        Path to the TOML config file, or None if the variable is not set or empty
    """
    value = os.environ.get(CONFIG_ENV_VAR, "").strip()
    if not value:
        return None
    return Path(value)
