"""Configuration builder pattern"""

from typing import Any, List, Optional, Tuple

from log_configurator.core.configuration import Configuration
from log_configurator.core.log_level import LogLevel
from log_configurator.core.logger_config import LoggerConfig


class ConfigurationBuilder:
    """Builder pattern for configuration construction."""

    def __init__(self):
        self._name = "Default"
        self._root_level: Any = LogLevel.ERROR
        self._loggers: List[Tuple[str, Any, bool]] = []
        self._source: Optional[Any] = None

    def with_name(self, name: str) -> "ConfigurationBuilder":
        """Set configuration name."""
        self._name = name
        return self

    def with_root_level(self, level: Any) -> "ConfigurationBuilder":
        """Set root level."""
        self._root_level = level
        return self

    def with_logger(
        self,
        name: str,
        level: Any,
        additive: bool = True
    ) -> "ConfigurationBuilder":
        """
        Add a named logger entry.

        Args:
            name: Logger name (non-empty; use with_root_level for root)
            level: Level of the entry
            additive: Whether events also flow to ancestor scopes

        Returns:
            Self for method chaining

        Example:
            config = (ConfigurationBuilder()
                .with_root_level(LogLevel.WARN)
                .with_logger("com.foo", LogLevel.DEBUG, additive=False)
                .build())
        """
        if not name:
            raise ValueError("Logger name must not be empty; use with_root_level")
        self._loggers.append((name, level, additive))
        return self

    def with_source(self, source: Any) -> "ConfigurationBuilder":
        """Record the source the configuration came from."""
        self._source = source
        return self

    def build(self) -> Configuration:
        """Build and return the configuration."""
        config = Configuration(
            self._name,
            LoggerConfig.root(self._root_level),
            source=self._source,
        )
        for name, level, additive in self._loggers:
            config.add_logger(name, LoggerConfig(name, level, additive))
        return config
