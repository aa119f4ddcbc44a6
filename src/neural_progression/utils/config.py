"""Configuration management for NeuralProgression."""

from __future__ import annotations

import os
from dataclasses import dataclass


@dataclass
class Config:
    """
    Application configuration.

    Loaded from environment variables with sensible defaults. Only the
    CLI and logging read it; the progression rules are fixed constants.
    """

    log_level: str = "WARNING"
    json_indent: int = 2
    debug: bool = False

    @classmethod
    def from_env(cls) -> Config:
        """Load configuration from environment variables."""

        def get_bool(key: str, default: bool) -> bool:
            value = os.getenv(key)
            if value is None:
                return default
            return value.lower() in ("true", "1", "yes")

        def get_int(key: str, default: int) -> int:
            value = os.getenv(key)
            if value is None:
                return default
            try:
                return int(value)
            except ValueError:
                return default

        debug = get_bool("NEURAL_PROGRESSION_DEBUG", False)
        log_level = os.getenv("NEURAL_PROGRESSION_LOG_LEVEL", "DEBUG" if debug else "WARNING")

        return cls(
            log_level=log_level.upper(),
            json_indent=get_int("NEURAL_PROGRESSION_JSON_INDENT", 2),
            debug=debug,
        )


# Singleton config instance
_config: Config | None = None


def get_config() -> Config:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = Config.from_env()
    return _config


def reset_config() -> None:
    """Reset the global configuration (useful for testing)."""
    global _config
    _config = None
