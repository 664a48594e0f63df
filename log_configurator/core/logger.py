"""
Logger handle

The reader side of the level policy: every log call checks the handle's
cached LoggerConfig without taking a lock.
"""

from __future__ import annotations
from typing import Any, TYPE_CHECKING

from log_configurator.core.log_level import LogLevel
from log_configurator.core.log_entry import LogEntry
from log_configurator.core.logger_config import LoggerConfig

if TYPE_CHECKING:
    from log_configurator.core.logger_context import LoggerContext


class Logger:
    """
    Named logger bound to a LoggerContext.

    Handles are created by ``LoggerContext.get_logger``. The context calls
    ``update_config`` on every handle when level policy changes.
    """

    def __init__(self, name: str, context: "LoggerContext"):
        self._name = name
        self._context = context
        self._config: LoggerConfig = context.get_configuration().get_logger_config(name)

    @property
    def name(self) -> str:
        return self._name

    @property
    def context(self) -> "LoggerContext":
        return self._context

    @property
    def config(self) -> LoggerConfig:
        """The resolved LoggerConfig currently gating this handle."""
        return self._config

    @property
    def level(self) -> Any:
        """Effective level of this handle."""
        return self._config.level

    def update_config(self, config: LoggerConfig) -> None:
        """Swap the resolved LoggerConfig. Called by the owning context."""
        self._config = config

    def is_enabled(self, level: LogLevel) -> bool:
        """Check whether a message at ``level`` would be emitted."""
        return level.passes(self._config.level)

    def log(self, level: LogLevel, message: str, **kwargs) -> None:
        """Log a message."""
        if not self.is_enabled(level):
            return

        exc = kwargs.pop("exc", None)
        entry = LogEntry(
            level=level,
            message=message,
            logger_name=self._name,
            exception=exc,
            extra=kwargs,
        )
        self._context.dispatch(entry)

    def trace(self, message: str, **kwargs) -> None:
        """Log trace message."""
        self.log(LogLevel.TRACE, message, **kwargs)

    def debug(self, message: str, **kwargs) -> None:
        """Log debug message."""
        self.log(LogLevel.DEBUG, message, **kwargs)

    def info(self, message: str, **kwargs) -> None:
        """Log info message."""
        self.log(LogLevel.INFO, message, **kwargs)

    def warn(self, message: str, **kwargs) -> None:
        """Log warning message."""
        self.log(LogLevel.WARN, message, **kwargs)

    def error(self, message: str, **kwargs) -> None:
        """Log error message."""
        self.log(LogLevel.ERROR, message, **kwargs)

    def fatal(self, message: str, **kwargs) -> None:
        """Log fatal message."""
        self.log(LogLevel.FATAL, message, **kwargs)

    def __repr__(self) -> str:
        return f"Logger(name={self._name!r}, level={self.level})"
