"""
Logger configuration registry

Maps logger names to LoggerConfig entries for one logging context. The root
entry always exists.

Thread Safety:
    Readers never lock. Writers build a new mapping under ``write_lock`` and
    publish it with a single reference assignment, so a lookup sees either
    the old mapping or the new one, each fully built.
"""

from __future__ import annotations
import threading
from typing import Any, Dict, List, Mapping, Optional

from log_configurator.core.log_level import LogLevel
from log_configurator.core.logger_config import (
    ROOT_LOGGER_NAME,
    LevelAssignment,
    LoggerConfig,
)


def parent_name(name: str) -> str:
    """
    Get the dotted parent of a logger name.

    Args:
        name: Logger name such as "com.foo.Bar"

    Returns:
        "com.foo" for "com.foo.Bar", "" for a single segment
    """
    index = name.rfind(".")
    return name[:index] if index > 0 else ROOT_LOGGER_NAME


def is_descendant(name: str, ancestor: str) -> bool:
    """Check whether ``name`` lies strictly below ``ancestor``."""
    if ancestor == ROOT_LOGGER_NAME:
        return name != ROOT_LOGGER_NAME
    return name.startswith(ancestor + ".")


class Configuration:
    """
    Registry of LoggerConfig entries.

    Offers two distinct lookups: ``get_exact_logger_config`` (exact name or
    None) and ``get_logger_config`` (nearest dotted ancestor, then root).

    Example:
        config = Configuration("app")
        config.add_logger("com.foo", LoggerConfig("com.foo", LogLevel.DEBUG))

        config.get_logger_config("com.foo.Bar").name        # "com.foo"
        config.get_exact_logger_config("com.foo.Bar")       # None
    """

    def __init__(
        self,
        name: str = "Default",
        root: Optional[LoggerConfig] = None,
        source: Optional[Any] = None
    ):
        """
        Initialize configuration.

        Args:
            name: Configuration name
            root: Root entry (default: root at ERROR)
            source: ConfigurationSource this configuration was built from
        """
        root = root or LoggerConfig.root()
        if not root.is_root:
            raise ValueError(f"Root config must have an empty name, got {root.name!r}")
        self.name = name
        self.source = source
        self._root = root
        self._loggers: Dict[str, LoggerConfig] = {ROOT_LOGGER_NAME: root}
        self.write_lock = threading.RLock()

    @classmethod
    def default(cls) -> "Configuration":
        """Create the default configuration: root only, at ERROR."""
        return cls("Default", LoggerConfig.root(LogLevel.ERROR))

    def get_root_logger(self) -> LoggerConfig:
        """Get the root entry."""
        return self._root

    def get_exact_logger_config(self, name: str) -> Optional[LoggerConfig]:
        """
        Look up the entry registered under exactly ``name``.

        Args:
            name: Logger name

        Returns:
            LoggerConfig or None if no entry has this exact name
        """
        return self._loggers.get(name)

    def get_logger_config(self, name: str) -> LoggerConfig:
        """
        Look up the effective entry for ``name``.

        Walks dotted ancestors ("a.b.c" -> "a.b" -> "a") and falls back to
        root.

        Args:
            name: Logger name

        Returns:
            The nearest registered LoggerConfig
        """
        loggers = self._loggers
        current = name
        while current:
            config = loggers.get(current)
            if config is not None:
                return config
            current = parent_name(current)
        return self._root

    def add_logger(self, name: str, logger_config: LoggerConfig) -> None:
        """
        Insert or replace the entry for ``name``.

        Args:
            name: Logger name
            logger_config: Entry to store

        Raises:
            ValueError: If names disagree or the root would be replaced
        """
        if logger_config.name != name:
            raise ValueError(
                f"LoggerConfig name {logger_config.name!r} does not match {name!r}"
            )
        with self.write_lock:
            if name == ROOT_LOGGER_NAME:
                self._root = logger_config
            loggers = dict(self._loggers)
            loggers[name] = logger_config
            self._loggers = loggers

    def remove_logger(self, name: str) -> bool:
        """
        Remove the entry for ``name``.

        Args:
            name: Logger name

        Returns:
            True if removed. The root entry is never removed.
        """
        if name == ROOT_LOGGER_NAME:
            return False
        with self.write_lock:
            if name not in self._loggers:
                return False
            loggers = dict(self._loggers)
            del loggers[name]
            self._loggers = loggers
            return True

    def get_loggers(self) -> Mapping[str, LoggerConfig]:
        """Snapshot of all entries, root included."""
        return dict(self._loggers)

    def get_level_assignments(self) -> List[LevelAssignment]:
        """
        Snapshot of every entry's level.

        Returns:
            Sorted list of LevelAssignment
        """
        with self.write_lock:
            return sorted(c.assignment() for c in self._loggers.values())

    def __contains__(self, name: str) -> bool:
        return name in self._loggers

    def __len__(self) -> int:
        return len(self._loggers)

    def __repr__(self) -> str:
        return f"Configuration(name={self.name!r}, loggers={sorted(self._loggers)})"
