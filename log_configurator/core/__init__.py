"""
Core module for log configurator

This module contains the level policy model:
- LogLevel: Log level enumeration
- LoggerConfig / LevelAssignment: per-logger level policy
- Configuration: registry of LoggerConfig entries
- ConfigurationBuilder: Builder pattern for configurations
- LoggerContext / Logger: runtime context and its logger handles
"""

from log_configurator.core.log_level import LogLevel
from log_configurator.core.log_entry import LogEntry
from log_configurator.core.logger_config import (
    ROOT_LOGGER_NAME,
    LevelAssignment,
    LoggerConfig,
)
from log_configurator.core.configuration import Configuration
from log_configurator.core.configuration_builder import ConfigurationBuilder
from log_configurator.core.logger import Logger
from log_configurator.core.logger_context import ContextState, LoggerContext

__all__ = [
    "LogLevel",
    "LogEntry",
    "ROOT_LOGGER_NAME",
    "LevelAssignment",
    "LoggerConfig",
    "Configuration",
    "ConfigurationBuilder",
    "Logger",
    "ContextState",
    "LoggerContext",
]
