import os
import logging
from typing import Any, Dict, Optional

import yaml

CONFIG_ENV_VAR = "MKPASSWD_CONFIG"
LOG_LEVEL_ENV_VAR = "MKPASSWD_LOG_LEVEL"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
DEFAULT_CONFIG = {"logging": {"level": "WARNING"}}


def load_config(config_file: Optional[str] = None) -> Dict[str, Any]:
    """Load settings from a YAML file, falling back to the defaults.

    The path comes from MKPASSWD_CONFIG when not given. MKPASSWD_LOG_LEVEL
    overrides the level found in the file.
    """
    config_file = config_file or os.getenv(CONFIG_ENV_VAR)
    loaded: Dict[str, Any] = {}
    if config_file:
        with open(config_file, "r") as f:
            loaded = yaml.safe_load(f) or {}
        if not isinstance(loaded, dict):
            raise ValueError(f"Config file {config_file} must contain a mapping")

    logging_section = loaded.get("logging") or {}
    if not isinstance(logging_section, dict):
        raise ValueError("The 'logging' section must be a mapping")

    level = os.getenv(LOG_LEVEL_ENV_VAR) or logging_section.get(
        "level", DEFAULT_CONFIG["logging"]["level"]
    )
    level = str(level).upper()
    if level not in LOG_LEVELS:
        raise ValueError(f"Invalid log level: {level}")

    return {"logging": {"level": level}}


def setup_logging(log_level: str) -> None:
    logging.basicConfig(
        level=log_level, format="%(asctime)s - %(levelname)s - %(message)s"
    )
