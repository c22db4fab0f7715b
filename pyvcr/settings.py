"""Settings files — configure a recorder from a YAML document.

A settings file is a flat mapping; every key maps onto one Configuration
setter, so the same validation applies as when configuring in code::

    cassette_path: tests/fixtures
    storage: json
    library_hooks: [curl]
    request_matchers: [method, url, body]
    white_list: [src/]
    black_list: [src/legacy/]
"""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from pyvcr.configuration import Configuration
from pyvcr.errors import ConfigurationError

# Applied in this order so a bad cassette path is reported before name errors
SETTING_KEYS = (
    "cassette_path",
    "storage",
    "library_hooks",
    "request_matchers",
    "white_list",
    "black_list",
)


def _string_setting(data: Mapping[str, Any], key: str) -> str:
    value = data[key]
    if not isinstance(value, str) or not value:
        raise ConfigurationError(f"Setting '{key}' must be a non-empty string, got {value!r}")
    return value


def _names_setting(data: Mapping[str, Any], key: str, allow_empty: bool = False) -> list[str]:
    value = data[key]
    if value is None and allow_empty:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, list) and all(isinstance(item, str) for item in value):
        return value
    raise ConfigurationError(
        f"Setting '{key}' must be a string or a list of strings, got {value!r}"
    )


def apply_settings(config: Configuration, data: Mapping[str, Any]) -> Configuration:
    """Apply a settings mapping to ``config`` and return it.

    Either every setting is applied or, when one is rejected, ``config`` is
    left exactly as it was.
    """
    unknown = [key for key in data if key not in SETTING_KEYS]
    if unknown:
        raise ConfigurationError(
            f"Unknown settings: {', '.join(str(k) for k in unknown)}. "
            f"Valid settings are: {', '.join(SETTING_KEYS)}"
        )

    staged = config.copy()
    if "cassette_path" in data:
        staged.set_cassette_path(_string_setting(data, "cassette_path"))
    if "storage" in data:
        staged.set_storage(_string_setting(data, "storage"))
    if "library_hooks" in data:
        staged.enable_library_hooks(_names_setting(data, "library_hooks"))
    if "request_matchers" in data:
        staged.enable_request_matchers(_names_setting(data, "request_matchers"))
    if "white_list" in data:
        staged.set_white_list(_names_setting(data, "white_list", allow_empty=True))
    if "black_list" in data:
        staged.set_black_list(_names_setting(data, "black_list", allow_empty=True))

    # Commit only once every setting was accepted
    vars(config).update(vars(staged))
    return config


def load_settings(settings_path: str | Path, config: Configuration | None = None) -> Configuration:
    """Read a YAML settings file into ``config`` (a fresh Configuration by default)."""
    path = Path(settings_path)
    if not path.is_file():
        raise ConfigurationError(f"Settings file not found: {settings_path}")

    try:
        with open(path) as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in {settings_path}: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigurationError(f"Settings file {settings_path} must contain a mapping")

    return apply_settings(config if config is not None else Configuration(), data)


def settings_snapshot(config: Configuration) -> dict[str, Any]:
    """Describe the effective configuration by name.

    The cassette path is reported as configured, without checking that the
    directory exists.
    """
    return {
        "cassette_path": str(config.get_cassette_path(check=False)),
        "storage": config.get_storage_name(),
        "library_hooks": config.get_enabled_library_hook_names(),
        "request_matchers": config.get_enabled_request_matcher_names(),
        "white_list": config.get_white_list(),
        "black_list": config.get_black_list(),
    }
