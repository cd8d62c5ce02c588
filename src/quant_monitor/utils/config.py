"""Configuration loading utilities for quant-monitor."""

import tomllib
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from quant_monitor.exceptions import ConfigError
from quant_monitor.models.monitor_config import MonitorConfig
from quant_monitor.utils.env import get_config_path


def load_config_table(config_path: Path | None = None) -> dict[str, Any]:
    """Load the ``[monitor]`` table from a TOML file.

    Args:
        config_path: Optional path to the config file.
            If None, uses $QUANT_MONITOR_CONFIG when set.

    Returns:
        The ``[monitor]`` table, or an empty dict when no file is configured,
        the file does not exist or it has no ``[monitor]`` table.

    Raises:
        ConfigError: If the file is not valid TOML or ``monitor`` is not a table.
    """
    if config_path is None:
        config_path = get_config_path()
    if config_path is None or not config_path.exists():
        return {}

    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        raise ConfigError(f"Failed to read config {config_path}: {e}") from e

    table = data.get("monitor", {})
    if not isinstance(table, dict):
        raise ConfigError(f"[monitor] in {config_path} must be a table")
    return table


def load_monitor_config(config_path: Path | None = None, **overrides: Any) -> MonitorConfig:
    """Build a MonitorConfig from the TOML file and explicit overrides.

    Overrides whose value is None are ignored, so CLI options that were not
    given fall back to the file and then to the model defaults.

    Raises:
        ConfigError: If the file is invalid or the merged values fail validation.
    """
    data = load_config_table(config_path)
    data.update({key: value for key, value in overrides.items() if value is not None})
    try:
        return MonitorConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid monitor configuration: {e}") from e
