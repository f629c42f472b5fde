"""Runtime configuration model for Keel.

This module owns all environment variable parsing and validation.
Other modules consume a typed config object instead of raw env reads.
"""

from __future__ import annotations

from dataclasses import dataclass
import os
from pathlib import Path

from core.constants import DEFAULT_CONFIG_PATH, DEFAULT_LOG_LEVEL, SUPPORTED_LOG_LEVELS
from core.errors import KeelConfigError


@dataclass(frozen=True)
class KeelConfig:
    """Validated runtime configuration.

    Attributes:
        config_path: YAML file holding the storage section.
        log_level: Minimum structured log level.
    """

    config_path: Path
    log_level: str

    @classmethod
    def from_env(cls) -> "KeelConfig":
        """Build config from process environment variables.

        Returns:
            A validated config object.

        Raises:
            KeelConfigError: If environment values are invalid.
        """
        config_path_value = os.getenv("KEEL_CONFIG_PATH", str(DEFAULT_CONFIG_PATH))
        log_level = _parse_log_level(os.getenv("KEEL_LOG_LEVEL", DEFAULT_LOG_LEVEL))
        return cls(
            config_path=Path(config_path_value).expanduser().resolve(),
            log_level=log_level,
        )


def _parse_log_level(raw_value: str) -> str:
    """Parse the log level environment value.

    Args:
        raw_value: Raw string from environment.

    Returns:
        Normalized lowercase level name.

    Raises:
        KeelConfigError: If value is not a supported level.
    """
    normalized_value = raw_value.strip().lower()
    if normalized_value in SUPPORTED_LOG_LEVELS:
        return normalized_value
    supported_rows = ", ".join(SUPPORTED_LOG_LEVELS)
    raise KeelConfigError(
        "Invalid KEEL_LOG_LEVEL value: "
        f"expected one of {supported_rows}, got '{raw_value}'. "
        "Set KEEL_LOG_LEVEL to a supported level."
    )
