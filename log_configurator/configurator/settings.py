"""
Configurator settings

Settings of the configurator itself, not of the loggers it manages.
"""

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from log_configurator.core.log_level import LogLevel

ENV_PREFIX = "LOG_CONFIGURATOR_"


@dataclass
class ConfiguratorSettings:
    """Configurator settings."""

    # Context settings
    default_context_name: str = "Default"

    # Status logger settings
    status_level: LogLevel = LogLevel.ERROR
    status_history_size: int = 200

    # Monitoring
    enable_metrics: bool = True

    def __post_init__(self):
        """Validate settings after initialization."""
        if not self.default_context_name:
            raise ValueError("default_context_name must not be empty")
        if self.status_history_size <= 0:
            raise ValueError("status_history_size must be positive")

        # Accept level names
        if isinstance(self.status_level, str):
            self.status_level = LogLevel.from_string(self.status_level)

    @classmethod
    def default(cls) -> "ConfiguratorSettings":
        """Create default settings."""
        return cls()

    @classmethod
    def debug_config(cls) -> "ConfiguratorSettings":
        """Create settings that report every status event."""
        return cls(status_level=LogLevel.DEBUG, status_history_size=1000)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ConfiguratorSettings":
        """
        Create settings from LOG_CONFIGURATOR_* environment variables.

        Recognized: LOG_CONFIGURATOR_CONTEXT_NAME, LOG_CONFIGURATOR_STATUS_LEVEL,
        LOG_CONFIGURATOR_STATUS_HISTORY, LOG_CONFIGURATOR_METRICS.

        Args:
            environ: Mapping to read (default: os.environ)

        Returns:
            ConfiguratorSettings

        Raises:
            ValueError: If a variable holds an invalid value
        """
        env = os.environ if environ is None else environ
        defaults = cls()

        metrics = env.get(f"{ENV_PREFIX}METRICS")
        return cls(
            default_context_name=env.get(
                f"{ENV_PREFIX}CONTEXT_NAME", defaults.default_context_name
            ),
            status_level=env.get(f"{ENV_PREFIX}STATUS_LEVEL", defaults.status_level),
            status_history_size=int(
                env.get(f"{ENV_PREFIX}STATUS_HISTORY", defaults.status_history_size)
            ),
            enable_metrics=(
                defaults.enable_metrics if metrics is None
                else metrics.strip().lower() in ("1", "true", "yes", "on")
            ),
        )
