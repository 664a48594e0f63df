"""
Log level enumeration

Levels are ordinal: a larger value is more severe.
"""

from enum import IntEnum
from typing import Dict


class LogLevel(IntEnum):
    """
    Log level enumeration.

    Values are compatible with Python's logging module. FATAL and CRITICAL
    are the same level.
    """

    ALL = 0         # Everything passes
    TRACE = 5       # Most verbose, detailed tracing
    DEBUG = 10      # Debug information
    INFO = 20       # Informational messages
    WARN = 30       # Warning messages
    ERROR = 40      # Error messages
    FATAL = 50      # Fatal errors
    CRITICAL = 50
    OFF = 100       # Logging disabled

    def __str__(self) -> str:
        """String representation of log level."""
        return self.name

    @classmethod
    def from_string(cls, level_str: str) -> "LogLevel":
        """
        Convert string to LogLevel.

        Args:
            level_str: Level name (case-insensitive)

        Returns:
            LogLevel enum value

        Raises:
            ValueError: If level_str is not valid
        """
        key = level_str.strip().upper()
        if key in LEVEL_ALIASES:
            return LEVEL_ALIASES[key]
        if key in cls.__members__:
            return cls[key]
        raise ValueError(f"Invalid log level: {level_str}")

    def passes(self, configured: "LogLevel") -> bool:
        """
        Check whether a message at this level passes a configured threshold.

        Args:
            configured: Level configured on the logger

        Returns:
            True if the message should be emitted
        """
        return configured != LogLevel.OFF and self >= configured

    @property
    def color_code(self) -> str:
        """
        Get ANSI color code for this level.

        Returns:
            ANSI escape sequence
        """
        colors = {
            LogLevel.TRACE: "\033[37m",     # White
            LogLevel.DEBUG: "\033[36m",     # Cyan
            LogLevel.INFO: "\033[32m",      # Green
            LogLevel.WARN: "\033[33m",      # Yellow
            LogLevel.ERROR: "\033[31m",     # Red
            LogLevel.FATAL: "\033[35m",     # Magenta
        }
        return colors.get(self, "\033[0m")

    @property
    def reset_code(self) -> str:
        """ANSI reset code."""
        return "\033[0m"


# Names accepted by from_string in addition to member names
LEVEL_ALIASES: Dict[str, LogLevel] = {
    "WARNING": LogLevel.WARN,
    "NOTSET": LogLevel.ALL,
}
