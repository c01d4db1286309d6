"""
User configuration for uni.

Settings are read from ``~/.uni/config.yaml`` and may be overridden with
``UNI_*`` environment variables:

    http_timeout: 10        # seconds, UNI_HTTP_TIMEOUT
    search_limit: 10        # results per search, UNI_SEARCH_LIMIT
    fallback_manager: pkgx  # last-resort manager, UNI_FALLBACK_MANAGER
"""

import logging
import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any

import yaml

from uni.exceptions import ConfigError
from uni.registry import DEFAULT_MANAGER

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path.home() / ".uni" / "config.yaml"

ENV_OVERRIDES = {
    "http_timeout": "UNI_HTTP_TIMEOUT",
    "search_limit": "UNI_SEARCH_LIMIT",
    "fallback_manager": "UNI_FALLBACK_MANAGER",
}


@dataclass
class UniConfig:
    http_timeout: float = 10.0
    search_limit: int = 10
    fallback_manager: str = DEFAULT_MANAGER


def _coerce(key: str, value: Any) -> Any:
    if key == "http_timeout":
        timeout = float(value)
        if timeout <= 0:
            raise ValueError("must be positive")
        return timeout
    if key == "search_limit":
        limit = int(value)
        if limit < 1:
            raise ValueError("must be at least 1")
        return limit
    return str(value).strip()


def load_config(path: Path | None = None, environ: dict[str, str] | None = None) -> UniConfig:
    """
    Load configuration from a YAML file and the environment.

    Args:
        path: Config file location, defaults to ~/.uni/config.yaml.
        environ: Environment mapping, defaults to os.environ.

    Returns:
        UniConfig: Defaults overlaid with file values, then env values.

    Raises:
        ConfigError: If the file is not valid YAML or a value has the wrong type.
    """
    path = path or DEFAULT_CONFIG_PATH
    environ = os.environ if environ is None else environ
    values: dict[str, Any] = {}

    if path.exists():
        try:
            with open(path) as f:
                data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            raise ConfigError(f"Could not read {path}: {e}") from e
        if not isinstance(data, dict):
            raise ConfigError(f"{path} must contain a mapping")
        known = {f.name for f in fields(UniConfig)}
        for key, value in data.items():
            if key not in known:
                logger.warning("Ignoring unknown config key '%s' in %s", key, path)
                continue
            values[key] = value

    for key, env_var in ENV_OVERRIDES.items():
        if environ.get(env_var):
            values[key] = environ[env_var]

    config = UniConfig()
    for key, value in values.items():
        try:
            setattr(config, key, _coerce(key, value))
        except (TypeError, ValueError) as e:
            raise ConfigError(f"Invalid value for '{key}': {value!r} ({e})") from e

    logger.debug("Loaded config: %s", config)
    return config
