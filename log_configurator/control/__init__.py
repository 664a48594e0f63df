"""Control module - operator-facing triggers for level changes"""

from log_configurator.control.signal_handler import LevelSignalHandler

__all__ = ["LevelSignalHandler"]
