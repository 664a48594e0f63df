"""Status module - self-diagnostic reporting"""

from log_configurator.status.status_logger import (
    StatusListener,
    StatusLogger,
    get_status_logger,
)

__all__ = ["StatusListener", "StatusLogger", "get_status_logger"]
