"""Configuration loading and validation."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from .classifiers.core import (
    DEFAULT_ASSUMED_PROBABILITY,
    DEFAULT_MEMORY_CAPACITY,
    DEFAULT_SMOOTHING,
)

LOGGER = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path("~/.config/bayes/config.yaml")
DEFAULT_LOG_LEVEL = "info"
CONFIG_ENV_VAR = "BAYES_CONFIG"


class ConfigError(ValueError):
    """Raised when configuration is invalid or missing."""


@dataclass(frozen=True)
class LoggingConfig:
    """Logging-related configuration."""

    level: str = DEFAULT_LOG_LEVEL
    file: Path | None = None


@dataclass(frozen=True)
class Config:
    """Fully parsed configuration."""

    memory_capacity: int = DEFAULT_MEMORY_CAPACITY
    smoothing: float = DEFAULT_SMOOTHING
    feature_weight: float = 0.0
    assumed_probability: float = DEFAULT_ASSUMED_PROBABILITY
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def load_config(path: Path | str | None = None) -> Config:
    """Load and validate configuration from YAML.

    An explicit path (argument or environment) must exist; a missing default
    file yields the built-in defaults.
    """

    config_path, explicit = _resolve_config_path(path)
    if not config_path.exists():
        if explicit:
            raise ConfigError(f"Config file not found: {config_path}")
        LOGGER.debug("No config file at %s; using defaults", config_path)
        return Config()

    try:
        with config_path.open("r", encoding="utf-8") as handle:
            raw = yaml.safe_load(handle) or {}
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in {config_path}: {exc}") from exc

    if not isinstance(raw, dict):
        raise ConfigError("Configuration root must be a mapping.")

    return _parse_config(raw)


def _resolve_config_path(explicit: Path | str | None) -> tuple[Path, bool]:
    if explicit:
        return Path(explicit).expanduser(), True
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        return Path(env_path).expanduser(), True
    return DEFAULT_CONFIG_PATH.expanduser(), False


def _parse_config(raw: dict[str, Any]) -> Config:
    return Config(
        memory_capacity=_parse_capacity(raw.get("memory_capacity")),
        smoothing=_parse_non_negative(raw.get("smoothing"), "smoothing", DEFAULT_SMOOTHING),
        feature_weight=_parse_non_negative(raw.get("feature_weight"), "feature_weight", 0.0),
        assumed_probability=_parse_probability(raw.get("assumed_probability")),
        logging=_parse_logging(raw.get("logging")),
    )


def _parse_capacity(value: Any) -> int:
    if value is None:
        return DEFAULT_MEMORY_CAPACITY
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigError("memory_capacity must be an integer.")
    if value < 1:
        raise ConfigError("memory_capacity must be positive.")
    return value


def _parse_number(value: Any, field_name: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ConfigError(f"{field_name} must be a number.")
    return float(value)


def _parse_non_negative(value: Any, field_name: str, default: float) -> float:
    if value is None:
        return default
    number = _parse_number(value, field_name)
    if number < 0:
        raise ConfigError(f"{field_name} must not be negative.")
    return number


def _parse_probability(value: Any) -> float:
    if value is None:
        return DEFAULT_ASSUMED_PROBABILITY
    number = _parse_number(value, "assumed_probability")
    if not 0.0 <= number <= 1.0:
        raise ConfigError("assumed_probability must lie between 0 and 1.")
    return number


def _parse_logging(value: Any) -> LoggingConfig:
    if value is None:
        return LoggingConfig()
    if not isinstance(value, dict):
        raise ConfigError("logging must be a mapping.")
    level = str(value.get("level", DEFAULT_LOG_LEVEL)).lower()
    raw_file = value.get("file")
    if raw_file is None:
        return LoggingConfig(level=level)
    if not isinstance(raw_file, str) or not raw_file.strip():
        raise ConfigError("logging.file must be a non-empty string path.")
    return LoggingConfig(level=level, file=Path(raw_file).expanduser())


__all__ = [
    "Config",
    "ConfigError",
    "LoggingConfig",
    "load_config",
]
