"""Configuration management for refcal_lite.

Configuration comes from environment variables, optionally seeded from a
``.env`` file that never overrides variables already set. Only the outer
surface (CLI, logging) is configurable; the parsing core takes no settings.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from ..domain.assignment_models import ParseConfidence
from ..exceptions import ConfigurationError

logger = logging.getLogger(__name__)

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
_TRUTHY = ("1", "true", "yes", "on")


def _coerce_bool(raw: Any, default: bool) -> bool:
    if raw is None:
        return default
    if isinstance(raw, bool):
        return raw
    return str(raw).strip().lower() in _TRUTHY


@dataclass
class Config:
    """Typed configuration for refcal_lite.

    Fields:
        log_level: logging level name
        debug: enable debug logging for refcal_lite modules
        min_confidence: lowest confidence kept when selecting assignments
        sort_by_start: order selected assignments by start time
    """

    log_level: str = "INFO"
    debug: bool = False
    min_confidence: str = ParseConfidence.MEDIUM.value
    sort_by_start: bool = True

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> Config:
        """Create Config from a plain mapping, applying defaults and validation.

        Unknown log levels fall back to INFO with a warning.

        Raises:
            ConfigurationError: If ``min_confidence`` is not low, medium or high
        """
        if data is None:
            data = {}

        log_level = str(data.get("log_level") or "INFO").upper()
        if log_level not in VALID_LOG_LEVELS:
            logger.warning("Config log_level=%r is not a valid level; using INFO", log_level)
            log_level = "INFO"

        min_confidence = str(data.get("min_confidence") or ParseConfidence.MEDIUM.value).lower()
        try:
            ParseConfidence(min_confidence)
        except ValueError as exc:
            raise ConfigurationError(
                f"Invalid min_confidence {min_confidence!r}; expected one of "
                f"{', '.join(level.value for level in ParseConfidence)}"
            ) from exc

        return cls(
            log_level=log_level,
            debug=_coerce_bool(data.get("debug"), False),
            min_confidence=min_confidence,
            sort_by_start=_coerce_bool(data.get("sort_by_start"), True),
        )


class ConfigManager:
    """Manages application configuration from environment variables and .env files."""

    def __init__(self, env_file_path: Path | None = None):
        """Initialize configuration manager.

        Args:
            env_file_path: Optional path to .env file (defaults to .env in current directory)
        """
        self.env_file_path = env_file_path or Path.cwd() / ".env"

    def load_env_file(self) -> list[str]:
        """Load .env file and set environment variables.

        Only sets variables that are not already in the environment.

        Returns:
            List of environment variable keys that were loaded from .env file
        """
        if not self.env_file_path.exists():
            logger.debug("No .env file found at %s", self.env_file_path)
            return []

        set_keys = []

        try:
            content = self.env_file_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError):
            logger.debug(
                "Failed to read .env file for defaults (continuing): %s",
                str(self.env_file_path),
                exc_info=True,
            )
            return []

        for raw_line in content.splitlines():
            line = raw_line.strip()

            # Skip empty lines and comments
            if not line or line.startswith("#") or "=" not in line:
                continue

            key, val = line.split("=", 1)
            key = key.strip()
            val = val.strip().strip('"').strip("'")

            if key and key not in os.environ:
                os.environ[key] = val
                set_keys.append(key)

        if set_keys:
            logger.debug("Loaded .env defaults for keys: %s", ", ".join(set_keys))

        return set_keys

    def build_config_from_env(self) -> dict[str, Any]:
        """Build configuration dictionary from environment variables.

        Recognizes:
        - REFCAL_LOG_LEVEL -> 'log_level'
        - REFCAL_DEBUG -> 'debug'
        - REFCAL_MIN_CONFIDENCE -> 'min_confidence'
        - REFCAL_SORT_BY_START -> 'sort_by_start'

        Returns:
            Configuration dictionary accepted by Config.from_dict
        """
        cfg: dict[str, Any] = {}

        env_keys = {
            "REFCAL_LOG_LEVEL": "log_level",
            "REFCAL_DEBUG": "debug",
            "REFCAL_MIN_CONFIDENCE": "min_confidence",
            "REFCAL_SORT_BY_START": "sort_by_start",
        }
        for env_key, cfg_key in env_keys.items():
            value = os.environ.get(env_key)
            if value:
                cfg[cfg_key] = value

        return cfg

    def load_config(self) -> Config:
        """Load .env defaults, then build Config from the environment.

        This is the main entry point for loading configuration.
        """
        self.load_env_file()
        return Config.from_dict(self.build_config_from_env())
