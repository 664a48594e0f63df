"""
Configurator module

This module contains the runtime level management API:
- ContextResolver: obtains LoggerContext instances from a factory
- LevelController: sets logger levels on a running context
- ConfiguratorSettings: settings of the configurator itself
"""

from log_configurator.configurator.settings import ConfiguratorSettings
from log_configurator.configurator.resolver import ContextResolver, Resolution
from log_configurator.configurator.controller import LevelController
from log_configurator.configurator.defaults import (
    create_configurator,
    get_configurator,
    set_configurator,
    initialize,
    set_level,
    set_levels,
    set_root_level,
    set_all_levels,
    shutdown,
)

__all__ = [
    "ConfiguratorSettings",
    "ContextResolver",
    "Resolution",
    "LevelController",
    "create_configurator",
    "get_configurator",
    "set_configurator",
    "initialize",
    "set_level",
    "set_levels",
    "set_root_level",
    "set_all_levels",
    "shutdown",
]
