"""Configuration: YAML + env overlay."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import yaml
from loguru import logger

from wallet_events.errors import WalletConfigurationError

ENV_VERBOSE = "WALLET_EVENTS_VERBOSE"
ENV_DETECTION_POLL_INTERVAL = "WALLET_EVENTS_DETECTION_POLL_INTERVAL"

_TRUTHY = {"1", "true", "yes", "on"}


def _deep_update(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge override into base."""
    result = dict(base)
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_update(result[key], value)
        else:
            result[key] = value
    return result


def load_config(path: str | Path) -> dict[str, Any]:
    """Load config from YAML file. Use SafeLoader. Returns raw dict."""
    path = Path(path)
    if not path.exists():
        logger.warning("Config file not found: {}", path)
        return {}

    try:
        with open(path) as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as exc:
        logger.error("Failed to parse config {}: {}", path, exc)
        raise
    if not isinstance(data, dict):
        if data is not None:
            logger.warning("Config file {} has invalid structure (expected dict)", path)
        return {}
    return data


def positive_interval(value: Any) -> float:
    """Parse a poll interval in seconds; it must be a positive number."""
    try:
        interval = float(value)
    except (TypeError, ValueError) as exc:
        raise WalletConfigurationError(
            f"Invalid detection.poll_interval_seconds: {value!r}",
            code="invalid_poll_interval",
            original_error=exc,
        ) from exc
    if interval <= 0:
        raise WalletConfigurationError(
            f"detection.poll_interval_seconds must be positive, got {interval}",
            code="invalid_poll_interval",
        )
    return interval


def _env_overrides() -> dict[str, Any]:
    """Config keys derived from process env."""
    overrides: dict[str, Any] = {}
    verbose = os.environ.get(ENV_VERBOSE)
    if verbose is not None:
        overrides["verbose"] = verbose.strip().lower() in _TRUTHY
    interval = os.environ.get(ENV_DETECTION_POLL_INTERVAL)
    if interval:
        overrides["detection"] = {"poll_interval_seconds": interval}
    return overrides


def load_config_with_env(path: str | Path) -> dict[str, Any]:
    """Load config from YAML and overlay env-derived values.

    Loads .env from the working directory (or a parent) via python-dotenv,
    so values there count as process env.
    """
    from dotenv import find_dotenv, load_dotenv

    load_dotenv(find_dotenv(usecwd=True))
    return _deep_update(load_config(path), _env_overrides())


class Config:
    """Config accessor with attribute-style access for nested keys."""

    def __init__(self, data: dict[str, Any] | None = None) -> None:
        self._data = data or {}

    def reload(self, data: dict[str, Any]) -> None:
        """Replace config data."""
        self._data = data or {}

    @property
    def raw(self) -> dict[str, Any]:
        return self._data

    def get(self, key: str, default: Any = None) -> Any:
        """Get value by dot-separated path (e.g. 'detection.poll_interval_seconds')."""
        parts = key.split(".")
        obj: Any = self._data
        for part in parts:
            if isinstance(obj, dict) and part in obj:
                obj = obj[part]
            else:
                return default
        return obj

    def __getitem__(self, key: str) -> Any:
        return self._data[key]

    def __contains__(self, key: str) -> bool:
        return key in self._data

    @property
    def verbose(self) -> bool:
        """Whether to log at DEBUG level."""
        return bool(self._data.get("verbose", False))

    @property
    def detection_poll_interval_seconds(self) -> float:
        """Seconds between wallet detection polls."""
        return positive_interval(self.get("detection.poll_interval_seconds", 1.0))


def reload_config(path: str | Path) -> Config:
    """Load config from path and update global cfg."""
    cfg.reload(load_config_with_env(path))
    return cfg


# Global config instance (set by reload_config)
cfg: Config = Config({})
