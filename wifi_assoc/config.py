"""Configuration loading for wifi-assoc."""

import json
import logging
import os
import sys
from typing import Any, Dict, Optional

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

logger = logging.getLogger(__name__)

_CONFIG_KEYS = {"interface", "ssid", "timeout", "log_level"}


def load_config(config_path: Optional[str]) -> Dict[str, Any]:
    """Load configuration from a TOML or JSON file.

    Only an explicit path is read; there are no default locations.  A
    missing or unreadable file yields an empty dict.
    """
    if not config_path or not os.path.exists(config_path):
        return {}
    try:
        if config_path.endswith(".toml"):
            with open(config_path, "rb") as f:
                return tomllib.load(f)
        with open(config_path) as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.warning(f"Ignoring unreadable config {config_path}: {e}")
        return {}
    return data if isinstance(data, dict) else {}


def merge_with_cli(args, config: Dict[str, Any],
                   defaults: Optional[Dict[str, Any]] = None):
    """Merge config file values into the argparse namespace.

    CLI arguments take precedence when they differ from their argparse
    defaults.  Config values only fill in attributes that are still at the
    default value.  Unknown keys are ignored.
    """
    defaults = defaults or {}
    for key, value in config.items():
        if key not in _CONFIG_KEYS:
            logger.debug(f"Ignoring unknown config key {key!r}")
            continue
        if not hasattr(args, key):
            continue
        current = getattr(args, key)
        if current is None or current == defaults.get(key):
            setattr(args, key, value)
