"""Writers module - Log output handlers"""

from log_configurator.writers.console_writer import ConsoleWriter

__all__ = ["ConsoleWriter"]
