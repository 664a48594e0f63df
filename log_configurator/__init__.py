"""
Log Configurator - runtime level management for logging contexts

Obtains named logging contexts from a configuration and changes logger
levels while the application runs, without a reload.
"""

__version__ = "1.0.0"
__author__ = "kcenon"
__email__ = "kcenon@naver.com"

from log_configurator.core import (
    Configuration,
    ConfigurationBuilder,
    LevelAssignment,
    LogEntry,
    Logger,
    LoggerConfig,
    LoggerContext,
    LogLevel,
)
from log_configurator.config import ConfigurationSource
from log_configurator.factory import ContextFactory, DefaultContextFactory
from log_configurator.configurator import (
    ConfiguratorSettings,
    ContextResolver,
    LevelController,
    get_configurator,
    initialize,
    set_level,
    set_levels,
    set_root_level,
    set_all_levels,
    shutdown,
)
from log_configurator.errors import (
    ConfiguratorError,
    ConfigurationError,
    ContextCreationError,
    IncompatibleFactoryError,
    InvalidLocationError,
)

# Import submodules (not all classes by default)
from log_configurator import control
from log_configurator import monitoring
from log_configurator import status

__all__ = [
    "Configuration",
    "ConfigurationBuilder",
    "LevelAssignment",
    "LogEntry",
    "Logger",
    "LoggerConfig",
    "LoggerContext",
    "LogLevel",
    "ConfigurationSource",
    "ContextFactory",
    "DefaultContextFactory",
    "ConfiguratorSettings",
    "ContextResolver",
    "LevelController",
    "get_configurator",
    "initialize",
    "set_level",
    "set_levels",
    "set_root_level",
    "set_all_levels",
    "shutdown",
    "ConfiguratorError",
    "ConfigurationError",
    "ContextCreationError",
    "IncompatibleFactoryError",
    "InvalidLocationError",
    "control",
    "monitoring",
    "status",
]
