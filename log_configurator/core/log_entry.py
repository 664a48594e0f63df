"""
Log entry data structure

Contains all information about a single log message.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional, Dict, Any
import threading

from log_configurator.core.log_level import LogLevel


@dataclass
class LogEntry:
    """Log entry data structure."""

    level: LogLevel
    message: str
    timestamp: datetime = field(default_factory=datetime.now)
    thread_name: str = field(default_factory=lambda: threading.current_thread().name)
    logger_name: str = ""
    exception: Optional[BaseException] = None
    extra: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        """Validate log entry after initialization."""
        if not isinstance(self.level, LogLevel):
            raise TypeError("level must be LogLevel enum")
        if not isinstance(self.message, str):
            self.message = str(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert log entry to dictionary.

        Returns:
            Dictionary representation
        """
        return {
            "level": self.level.name,
            "message": self.message,
            "timestamp": self.timestamp.isoformat(),
            "thread_name": self.thread_name,
            "logger_name": self.logger_name,
            "exception": repr(self.exception) if self.exception else None,
            "extra": self.extra,
        }

    def __str__(self) -> str:
        """String representation."""
        text = (
            f"[{self.timestamp.strftime('%Y-%m-%d %H:%M:%S.%f')[:-3]}] "
            f"[{self.level.name:8}] "
            f"[{self.thread_name}] "
        )
        if self.logger_name:
            text += f"{self.logger_name} - "
        text += self.message
        if self.exception is not None:
            text += f" ({type(self.exception).__name__}: {self.exception})"
        return text
