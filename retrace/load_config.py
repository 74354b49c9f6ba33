"""Logic for loading and merging configuration files."""

import copy
import logging
from pathlib import Path
from typing import Any

import yaml

from retrace.deep_merge import deep_merge
from retrace.errors import ConfigError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG: dict[str, Any] = {
    "retrace": {
        # Regular expression template; None selects STACK_TRACE_EXPRESSION.
        "regex": None,
        # Plain template matched literally apart from placeholders.
        "pattern": None,
        "verbose": False,
    },
}


def load_config(path: str | None = None) -> dict[str, Any]:
    """Load configuration from a YAML file and merge it with defaults."""
    config = copy.deepcopy(DEFAULT_CONFIG)
    if not path:
        return config

    p = Path(path)
    if not p.exists():
        logger.warning("Config file %s not found, using defaults", p)
        return config

    try:
        user_config = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
    except (OSError, yaml.YAMLError) as e:
        msg = f"Can't read config file {p} ({e})"
        raise ConfigError(msg) from e

    if not isinstance(user_config, dict):
        kind = type(user_config).__name__
        msg = f"Config file {p} must contain a mapping, not {kind}"
        raise ConfigError(msg)

    config = deep_merge(config, user_config)
    _check_retrace_section(config, p)
    logger.info("Loaded config from %s", p)
    return config


def _check_retrace_section(config: dict[str, Any], p: Path) -> None:
    """Reject `retrace` settings whose values have the wrong type.

    An empty `retrace:` key, or an empty value, keeps the defaults.
    """
    section = config.get("retrace")
    if section is None:
        config["retrace"] = copy.deepcopy(DEFAULT_CONFIG["retrace"])
        return
    if not isinstance(section, dict):
        kind = type(section).__name__
        msg = f"Config file {p}: 'retrace' must be a mapping, not {kind}"
        raise ConfigError(msg)

    for key in ("regex", "pattern"):
        value = section.get(key)
        if value is not None and not isinstance(value, str):
            kind = type(value).__name__
            msg = f"Config file {p}: 'retrace.{key}' must be a string, not {kind}"
            raise ConfigError(msg)

    verbose = section.get("verbose")
    if verbose is not None and not isinstance(verbose, bool):
        kind = type(verbose).__name__
        msg = f"Config file {p}: 'retrace.verbose' must be true or false, not {kind}"
        raise ConfigError(msg)
