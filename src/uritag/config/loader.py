"""Configuration loader for uritag.

Rendering itself reads no configuration.  This loader only feeds
:class:`~uritag.core.routes.RouteTable` and the ``uritag`` logger, from an
optional YAML file and the ``URITAG_BASE_URL`` / ``URITAG_LOG_LEVEL``
environment variables.
"""
from __future__ import annotations

import dataclasses
import logging
import os
from pathlib import Path
from typing import Any, TypeVar

from uritag.config.schema import LoggingConfig, RoutesConfig, UriTagConfig

DEFAULT_CONFIG_PATH = Path("uritag.yaml")


def _load_yaml_file(path: Path) -> dict[str, Any]:
    """Load a YAML file and return its contents as a dict."""
    try:
        import yaml  # type: ignore[import-untyped]
    except ImportError as err:
        raise ImportError(
            "PyYAML is required for loading YAML config files. "
            "Install it with: pip install pyyaml"
        ) from err
    text = path.read_text(encoding="utf-8")
    data = yaml.safe_load(text)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Expected a YAML mapping at top level in {path}, got {type(data).__name__}")
    return data


def _set_path(raw: dict[str, Any], key_path: list[str], value: Any) -> None:
    d = raw
    for part in key_path[:-1]:
        if part not in d or not isinstance(d[part], dict):
            d[part] = {}
        d = d[part]
    d[key_path[-1]] = value


def _apply_env_overrides(raw: dict[str, Any]) -> dict[str, Any]:
    """Overlay URITAG_* environment variables onto the raw config dict."""
    env_mappings: list[tuple[str, list[str]]] = [
        ("URITAG_BASE_URL", ["routes", "base_url"]),
        ("URITAG_LOG_LEVEL", ["logging", "level"]),
    ]

    for env_var, key_path in env_mappings:
        value = os.environ.get(env_var)
        if value is None:
            continue
        _set_path(raw, key_path, value)

    return raw


def _apply_overrides(raw: dict[str, Any], overrides: dict[str, Any]) -> dict[str, Any]:
    """Apply overrides using dot-notation keys (e.g., 'routes.base_url')."""
    for dotted_key, value in overrides.items():
        _set_path(raw, dotted_key.split("."), value)
    return raw


_T = TypeVar("_T")


_log = logging.getLogger(__name__)


def _build_section(cls: type[_T], data: Any, section: str) -> _T:
    """Build a dataclass from a raw dict, warning on unknown keys."""
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ValueError(f"Config section '{section}' must be a mapping, got {type(data).__name__}")
    known = {f.name for f in dataclasses.fields(cls)}  # type: ignore[arg-type]
    filtered: dict[str, Any] = {}
    for k, v in data.items():
        if k in known:
            filtered[k] = v
        else:
            _log.warning(
                "Unknown config key '%s' in %s (known: %s), ignored",
                k, section, ", ".join(sorted(known)),
            )
    return cls(**filtered)


def _build_routes_config(data: Any) -> RoutesConfig:
    routes = _build_section(RoutesConfig, data, "routes")
    if routes.patterns is None:
        routes.patterns = {}
    if not isinstance(routes.patterns, dict):
        raise ValueError(
            f"routes.patterns must be a mapping of name to pattern, "
            f"got {type(routes.patterns).__name__}"
        )
    routes.patterns = {str(name): str(pattern) for name, pattern in routes.patterns.items()}
    if routes.base_url is not None:
        routes.base_url = str(routes.base_url)
    return routes


def _build_logging_config(data: Any) -> LoggingConfig:
    cfg = _build_section(LoggingConfig, data, "logging")
    cfg.level = str(cfg.level).upper()
    return cfg


def _build_config(raw: dict[str, Any]) -> UriTagConfig:
    """Build a UriTagConfig from a raw dict."""
    for key in raw:
        if key not in ("routes", "logging"):
            _log.warning("Unknown top-level config key '%s', ignored", key)
    return UriTagConfig(
        routes=_build_routes_config(raw.get("routes")),
        logging=_build_logging_config(raw.get("logging")),
    )


def load_config(
    yaml_path: Path | None = None,
    overrides: dict[str, Any] | None = None,
) -> UriTagConfig:
    """Load configuration from YAML, environment variables, and overrides.

    Priority (highest to lowest):
        1. Explicit overrides (dot-notation keys, e.g., ``routes.base_url``)
        2. Environment variables (``URITAG_*``)
        3. YAML file values
        4. Dataclass defaults

    Args:
        yaml_path: Path to the YAML configuration file.  If ``None``, the
            loader attempts ``uritag.yaml`` in the current directory; if that
            does not exist, pure defaults are used.
        overrides: Optional dict of dot-notation key/value overrides.

    Returns:
        A fully-populated :class:`UriTagConfig` instance.
    """
    raw: dict[str, Any] = {}

    # 1. Load YAML file if available.
    if yaml_path is not None:
        if yaml_path.exists():
            raw = _load_yaml_file(yaml_path)
        else:
            raise FileNotFoundError(f"Config file not found: {yaml_path}")
    elif DEFAULT_CONFIG_PATH.exists():
        raw = _load_yaml_file(DEFAULT_CONFIG_PATH)

    # 2. Overlay environment variables.
    raw = _apply_env_overrides(raw)

    # 3. Overlay explicit overrides.
    if overrides:
        raw = _apply_overrides(raw, overrides)

    # 4. Build typed config from the merged dict.
    return _build_config(raw)


def configure_logging(config: UriTagConfig) -> None:
    """Set the level of the ``uritag`` logger from *config*."""
    level = logging.getLevelName(config.logging.level)
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {config.logging.level!r}")
    logging.getLogger("uritag").setLevel(level)
