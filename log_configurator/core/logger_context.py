"""
Logger context

Runtime container owning one Configuration and the Logger handles that
read it.
"""

from __future__ import annotations
import threading
from enum import Enum
from typing import Any, Dict, List, Optional

from log_configurator.core.configuration import Configuration
from log_configurator.core.log_entry import LogEntry
from log_configurator.core.logger import Logger
from log_configurator.status.status_logger import StatusLogger, get_status_logger


class ContextState(Enum):
    """Lifecycle states of a LoggerContext."""

    INITIALIZED = "initialized"
    STARTED = "started"
    STOPPING = "stopping"
    STOPPED = "stopped"


class LoggerContext:
    """
    Named logging context.

    Thread Safety:
        ``get_logger``, ``update_loggers`` and ``stop`` serialize on an
        internal lock. Emission through Logger handles never takes it;
        ``dispatch`` only reads a published writer list.

    Example:
        context = LoggerContext("app", configuration)
        context.start()
        context.add_writer(ConsoleWriter())

        log = context.get_logger("com.foo.Bar")
        log.info("ready")
    """

    def __init__(
        self,
        name: str,
        configuration: Optional[Configuration] = None,
        external_context: Optional[Any] = None,
        loader: Optional[Any] = None,
        status_logger: Optional[StatusLogger] = None
    ):
        """
        Initialize logger context.

        Args:
            name: Context name
            configuration: Level policy (default: Configuration.default())
            external_context: Opaque object owned by the embedding application
            loader: Opaque loader reference the context was requested with
            status_logger: Where writer failures are reported
        """
        self.name = name
        self.external_context = external_context
        self.loader = loader
        self._configuration = configuration or Configuration.default()
        self._status = status_logger
        self._loggers: Dict[str, Logger] = {}
        self._writers: List[Any] = []
        self._state = ContextState.INITIALIZED
        self._update_count = 0
        self._lock = threading.RLock()

    @property
    def state(self) -> ContextState:
        return self._state

    @property
    def is_started(self) -> bool:
        return self._state is ContextState.STARTED

    @property
    def is_stopped(self) -> bool:
        return self._state is ContextState.STOPPED

    @property
    def update_count(self) -> int:
        """Number of update_loggers calls so far."""
        return self._update_count

    @property
    def status_logger(self) -> StatusLogger:
        return self._status if self._status is not None else get_status_logger()

    def get_configuration(self) -> Configuration:
        return self._configuration

    def start(self) -> None:
        """Start the context. Does nothing if already started."""
        with self._lock:
            if self._state is ContextState.STARTED:
                return
            if self._state is not ContextState.INITIALIZED:
                raise RuntimeError(f"Cannot start context {self.name!r} in state {self._state.value}")
            self._state = ContextState.STARTED
        self.status_logger.debug(f"Started LoggerContext {self.name!r}")

    def stop(self) -> bool:
        """
        Stop the context, closing writers and dropping logger handles.

        Returns:
            True if this call stopped the context, False if already stopped
        """
        with self._lock:
            if self._state in (ContextState.STOPPING, ContextState.STOPPED):
                return False
            self._state = ContextState.STOPPING
            writers = self._writers
            self._writers = []
            self._loggers = {}

        for writer in writers:
            if hasattr(writer, "close"):
                try:
                    writer.close()
                except Exception as e:
                    self.status_logger.error(
                        f"Error closing writer of LoggerContext {self.name!r}", exc=e
                    )

        with self._lock:
            self._state = ContextState.STOPPED
        self.status_logger.debug(f"Stopped LoggerContext {self.name!r}")
        return True

    def get_logger(self, name: str) -> Logger:
        """
        Get the Logger handle for ``name``, creating it on first use.

        Args:
            name: Logger name

        Returns:
            Cached Logger handle
        """
        logger = self._loggers.get(name)
        if logger is not None:
            return logger
        with self._lock:
            logger = self._loggers.get(name)
            if logger is None:
                logger = Logger(name, self)
                loggers = dict(self._loggers)
                loggers[name] = logger
                self._loggers = loggers
            return logger

    def has_logger(self, name: str) -> bool:
        return name in self._loggers

    def get_loggers(self) -> List[Logger]:
        """Snapshot of the cached Logger handles."""
        return list(self._loggers.values())

    def update_loggers(self) -> None:
        """
        Make current level policy effective on every Logger handle.

        Each handle re-resolves its LoggerConfig with ancestor fallback.
        Handles created concurrently resolve against the same configuration.
        """
        with self._lock:
            config = self._configuration
            for logger in self._loggers.values():
                logger.update_config(config.get_logger_config(logger.name))
            self._update_count += 1

    def set_configuration(self, configuration: Configuration) -> None:
        """
        Replace the whole configuration and propagate.

        Args:
            configuration: New level policy
        """
        with self._lock:
            self._configuration = configuration
            self.update_loggers()

    def add_writer(self, writer: Any) -> None:
        """Add a writer that receives every emitted entry."""
        with self._lock:
            self._writers = self._writers + [writer]

    def dispatch(self, entry: LogEntry) -> int:
        """
        Send an entry to every writer.

        Args:
            entry: Entry to write

        Returns:
            Number of writers that accepted the entry
        """
        count = 0
        for writer in self._writers:
            try:
                writer.write(entry)
                count += 1
            except Exception as e:
                self.status_logger.error(
                    f"Writer error in LoggerContext {self.name!r}", exc=e
                )
        return count

    def __repr__(self) -> str:
        return f"LoggerContext(name={self.name!r}, state={self._state.value})"
