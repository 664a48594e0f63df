"""Config module - configuration sources, locations and parsing"""

from log_configurator.config.location import resolve_location
from log_configurator.config.source import ConfigurationSource
from log_configurator.config.parser import (
    configuration_from_dict,
    load_configuration,
    parse_configuration,
)

__all__ = [
    "resolve_location",
    "ConfigurationSource",
    "configuration_from_dict",
    "load_configuration",
    "parse_configuration",
]
