"""
Status logger

Self-diagnostic channel of the configurator. Failures inside the
configurator are reported here instead of being raised to the application.
"""

from __future__ import annotations
import threading
from collections import deque
from typing import Any, Callable, Deque, List, Optional

from log_configurator.core.log_entry import LogEntry
from log_configurator.core.log_level import LogLevel
from log_configurator.writers.console_writer import ConsoleWriter

StatusListener = Callable[[LogEntry], None]


class StatusLogger:
    """
    Reports configurator events to a writer, listeners and a bounded history.

    Entries below ``level`` are dropped. History and listeners receive every
    entry that passes the level check.

    Example:
        status = StatusLogger(level=LogLevel.WARN)
        status.add_listener(lambda entry: alerts.append(entry))
        status.error("Could not load configuration", exc=err)
    """

    def __init__(
        self,
        level: LogLevel = LogLevel.ERROR,
        writer: Optional[Any] = None,
        history_size: int = 200,
        name: str = "StatusLogger"
    ):
        """
        Initialize status logger.

        Args:
            level: Minimum level to report
            writer: Writer with write(entry) (default: ConsoleWriter on stderr)
            history_size: Number of entries kept in memory
            name: Logger name stamped on entries
        """
        if history_size <= 0:
            raise ValueError("history_size must be positive")
        self.level = level
        self.name = name
        self._writer = writer if writer is not None else ConsoleWriter()
        self._listeners: List[StatusListener] = []
        self._history: Deque[LogEntry] = deque(maxlen=history_size)
        self._lock = threading.Lock()

    def add_listener(self, listener: StatusListener) -> None:
        """Register a callable that receives every reported entry."""
        with self._lock:
            self._listeners.append(listener)

    def remove_listener(self, listener: StatusListener) -> None:
        """Unregister a listener. Does nothing if it is not registered."""
        with self._lock:
            if listener in self._listeners:
                self._listeners.remove(listener)

    def is_enabled(self, level: LogLevel) -> bool:
        return level.passes(self.level)

    def log(
        self,
        level: LogLevel,
        message: str,
        exc: Optional[BaseException] = None,
        **extra: Any
    ) -> None:
        """
        Report a status message.

        Args:
            level: Severity
            message: Message text
            exc: Optional exception that caused the report
            **extra: Structured context stored on the entry
        """
        if not self.is_enabled(level):
            return

        entry = LogEntry(
            level=level,
            message=message,
            logger_name=self.name,
            exception=exc,
            extra=extra,
        )

        with self._lock:
            self._history.append(entry)
            listeners = list(self._listeners)

        try:
            self._writer.write(entry)
        except Exception:
            pass  # Nowhere left to report to

        for listener in listeners:
            try:
                listener(entry)
            except Exception:
                pass

    def debug(self, message: str, **kwargs) -> None:
        self.log(LogLevel.DEBUG, message, **kwargs)

    def info(self, message: str, **kwargs) -> None:
        self.log(LogLevel.INFO, message, **kwargs)

    def warn(self, message: str, **kwargs) -> None:
        self.log(LogLevel.WARN, message, **kwargs)

    def error(self, message: str, **kwargs) -> None:
        self.log(LogLevel.ERROR, message, **kwargs)

    def fatal(self, message: str, **kwargs) -> None:
        self.log(LogLevel.FATAL, message, **kwargs)

    def get_entries(self, min_level: Optional[LogLevel] = None) -> List[LogEntry]:
        """
        Get reported entries, oldest first.

        Args:
            min_level: Only return entries at or above this level

        Returns:
            List of LogEntry
        """
        with self._lock:
            entries = list(self._history)
        if min_level is None:
            return entries
        return [e for e in entries if e.level >= min_level]

    def clear(self) -> None:
        """Drop the in-memory history."""
        with self._lock:
            self._history.clear()


_default_status_logger: Optional[StatusLogger] = None
_default_lock = threading.Lock()


def get_status_logger() -> StatusLogger:
    """
    Get the process-wide status logger.

    Created on first use from ``ConfiguratorSettings.from_env()``.
    """
    global _default_status_logger
    with _default_lock:
        if _default_status_logger is None:
            from log_configurator.configurator.settings import ConfiguratorSettings

            try:
                settings = ConfiguratorSettings.from_env()
                invalid = None
            except ValueError as e:
                settings = ConfiguratorSettings.default()
                invalid = e
            _default_status_logger = StatusLogger(
                level=settings.status_level,
                history_size=settings.status_history_size,
            )
            if invalid is not None:
                _default_status_logger.error(
                    "Ignoring invalid LOG_CONFIGURATOR_* settings", exc=invalid
                )
        return _default_status_logger
