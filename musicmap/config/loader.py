"""YAML configuration loader with environment variable overrides.

Configuration is loaded in layers (later layers override earlier):

  1. Field defaults on :class:`Settings`
  2. An optional YAML file (``musicmap.yaml`` by default)
  3. ``.env`` entries and ``MUSICMAP_*`` environment variables

The YAML file is a flat mapping of setting names, e.g.::

    max_parallel_downloads: 8
    request_timeout_seconds: 30
    page_parser: soup
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from musicmap.config.settings import Settings
from musicmap.utils.errors import ConfigurationError

DEFAULT_CONFIG_PATH = "musicmap.yaml"


def _read_yaml(config_path: Path) -> dict[str, Any]:
    try:
        with open(config_path, encoding="utf-8") as f:
            loaded = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as exc:
        raise ConfigurationError(f"Cannot read config file {config_path}: {exc}") from exc

    if loaded is None:
        return {}
    if not isinstance(loaded, dict):
        raise ConfigurationError(
            f"Config file {config_path} must contain a mapping, got {type(loaded).__name__}"
        )
    return loaded


def load_settings(path: str | Path | None = DEFAULT_CONFIG_PATH, **overrides: Any) -> Settings:
    """Build :class:`Settings` from YAML, environment and explicit overrides.

    Args:
        path: YAML file to read.  A missing file (or ``None``) is not an error.
        overrides: Values that beat every other layer, e.g. CLI flags.
            ``None`` values are ignored so unset flags fall through.

    Raises:
        ConfigurationError: If the YAML is malformed or a value fails validation.
    """
    yaml_values: dict[str, Any] = {}
    if path is not None and Path(path).exists():
        yaml_values = _read_yaml(Path(path))

    try:
        # Only fields that actually came from the environment count as set,
        # so defaults never mask a YAML value.
        env_values = Settings().model_dump(exclude_unset=True)
        merged = {**yaml_values, **env_values}
        merged.update({k: v for k, v in overrides.items() if v is not None})
        return Settings(**merged)
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid settings: {exc}") from exc
