"""Configuration loading and runtime overrides for tunables.

Precedence, highest first: CLI flags, environment variables, the YAML
config file, the defaults in constants.Constants.
"""

from __future__ import annotations

import logging
import os
from typing import Any, Callable, Dict, Optional

import yaml

from constants import Constants
from errors import FileError, InputError

logger = logging.getLogger(__name__)

# crates.io rejects per_page above this.
MAX_PAGE_SIZE = 100


def _bounded_int(low: int, high: Optional[int] = None) -> Callable[[Any], int]:
    def convert(raw: Any) -> int:
        value = int(raw)
        if value < low or (high is not None and value > high):
            raise ValueError(f"{value} out of range")
        return value
    return convert


# (section, key) -> (Constants attribute, converter)
_CONFIG_KEYS = {
    ("crates_io", "api_url"): ("CRATES_IO_API_URL", str),
    ("crates_io", "user_agent"): ("USER_AGENT", str),
    ("crates_io", "page_size"): ("CRATES_IO_PAGE_MAX", _bounded_int(1, MAX_PAGE_SIZE)),
    ("cargo", "binary"): ("CARGO_BIN", str),
    ("http", "timeout"): ("REQUEST_TIMEOUT", _bounded_int(1)),
    ("ranking", "top_k"): ("RANK_TOP_K", _bounded_int(0)),
}


def load_config(config_path: Optional[str]) -> Dict[str, Any]:
    """Load the YAML configuration file.

    Args:
        config_path: Path to a YAML file; None means no config.

    Returns:
        Configuration mapping (empty when no path was given).

    Raises:
        FileError: If the named file doesn't exist or can't be read.
        InputError: If the file isn't valid YAML or isn't a mapping.
    """
    if not config_path:
        return {}
    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except FileNotFoundError as e:
        raise FileError(f"Config file not found: {config_path}") from e
    except OSError as e:
        raise FileError(f"Failed to read config file: {config_path}") from e
    except yaml.YAMLError as e:
        raise InputError(f"Failed to parse config file: {config_path}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise InputError(f"Config file must contain a mapping: {config_path}")
    return data


def apply_config(config: Dict[str, Any]) -> None:
    """Copy recognised config values onto Constants."""
    for (section, key), (attr, convert) in _CONFIG_KEYS.items():
        block = config.get(section)
        if not isinstance(block, dict) or block.get(key) is None:
            continue
        try:
            value = convert(block[key])
        except (TypeError, ValueError) as e:
            raise InputError(f"Invalid value for {section}.{key}: {block[key]!r}") from e
        setattr(Constants, attr, value)
        logger.debug("Config override %s.%s applied", section, key)


def apply_env_overrides() -> None:
    """Apply environment overrides.

    cargo exports CARGO when it runs a subcommand, so ``cargo prefetch``
    drives the same cargo binary that invoked it.
    """
    cargo = os.environ.get(Constants.ENV_CARGO)
    if cargo and cargo.strip():
        Constants.CARGO_BIN = cargo.strip()
    user_agent = os.environ.get(Constants.ENV_USER_AGENT)
    if user_agent and user_agent.strip():
        Constants.USER_AGENT = user_agent.strip()


def load_and_apply(config_path: Optional[str]) -> None:
    """Apply config file then environment overrides."""
    path = config_path or os.environ.get(Constants.ENV_CONFIG)
    apply_config(load_config(path))
    apply_env_overrides()
    if path:
        logger.debug("Loaded config from: %s", path)
