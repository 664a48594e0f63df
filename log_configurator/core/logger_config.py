"""
Per-logger level policy

A LoggerConfig holds the level and additivity of one logger name scope.
The empty name is the root scope.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any
import threading

from log_configurator.core.log_level import LogLevel

ROOT_LOGGER_NAME = ""


@dataclass(frozen=True, order=True)
class LevelAssignment:
    """
    Immutable (logger name, level) pair.

    Ordered by logger name first, then by level.
    """

    logger_name: str
    level: Any

    @property
    def is_root(self) -> bool:
        """True for the root scope."""
        return self.logger_name == ROOT_LOGGER_NAME

    def __str__(self) -> str:
        return f"{self.logger_name or '<root>'}={self.level}"


class LoggerConfig:
    """
    Mutable level policy for one logger name scope.

    Reads of ``level`` are plain attribute reads. Writes are serialized per
    instance so a reader sees either the old or the new level, never a mix.
    ``additive`` is fixed at creation.
    """

    __slots__ = ("_name", "_level", "_additive", "_lock")

    def __init__(
        self,
        name: str = ROOT_LOGGER_NAME,
        level: Any = LogLevel.ERROR,
        additive: bool = True
    ):
        """
        Initialize logger config.

        Args:
            name: Logger name, "" for root
            level: Initial level
            additive: Whether events also flow to ancestor scopes
        """
        if name is None:
            raise ValueError("name must not be None")
        self._name = name
        self._level = level
        self._additive = bool(additive)
        self._lock = threading.Lock()

    @classmethod
    def root(cls, level: Any = LogLevel.ERROR) -> "LoggerConfig":
        """Create a root logger config."""
        return cls(ROOT_LOGGER_NAME, level, additive=True)

    @property
    def name(self) -> str:
        return self._name

    @property
    def is_root(self) -> bool:
        return self._name == ROOT_LOGGER_NAME

    @property
    def additive(self) -> bool:
        return self._additive

    @property
    def level(self) -> Any:
        return self._level

    @level.setter
    def level(self, value: Any) -> None:
        with self._lock:
            self._level = value

    def update_level(self, level: Any) -> bool:
        """
        Assign ``level`` only if it differs from the current one.

        Args:
            level: Requested level

        Returns:
            True if the level changed
        """
        with self._lock:
            if self._level == level:
                return False
            self._level = level
            return True

    def assignment(self) -> LevelAssignment:
        """Snapshot of this config as a LevelAssignment."""
        return LevelAssignment(self._name, self._level)

    def __repr__(self) -> str:
        return (
            f"LoggerConfig(name={self._name!r}, level={self._level}, "
            f"additive={self._additive})"
        )
