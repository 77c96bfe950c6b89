"""Logging setup: loguru sink on stderr, level taken from config."""

from __future__ import annotations

import sys
from pathlib import Path

from loguru import logger

from wallet_events.config import Config, cfg, reload_config

LOG_FORMAT = (
    "<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan> | {message}"
)


def setup_logging(verbose: bool | None = None) -> None:
    """Replace loguru's default sink; DEBUG when verbose (default: cfg.verbose)."""
    if verbose is None:
        verbose = cfg.verbose
    logger.remove()
    logger.add(sys.stderr, level="DEBUG" if verbose else "INFO", format=LOG_FORMAT)


def configure(config_path: str | Path) -> Config:
    """Load config into the global cfg, then set up logging from it."""
    config = reload_config(config_path)
    setup_logging(config.verbose)
    logger.info("Config loaded from {}", config_path)
    return config
