"""
JSON configuration parser

Builds a Configuration from a JSON document:

    {
        "name": "app",
        "root": {"level": "INFO"},
        "loggers": {
            "com.foo": {"level": "DEBUG", "additive": false},
            "com.bar": "WARN"
        }
    }
"""

import json
from typing import Any, Mapping, Optional

from log_configurator.config.source import ConfigurationSource
from log_configurator.core.configuration import Configuration
from log_configurator.core.configuration_builder import ConfigurationBuilder
from log_configurator.core.log_level import LogLevel
from log_configurator.errors import ConfigurationError


def parse_configuration(source: ConfigurationSource) -> Configuration:
    """
    Parse a JSON configuration source.

    Args:
        source: Source holding a JSON document

    Returns:
        Configuration built from the document

    Raises:
        ConfigurationError: On invalid JSON, structure or level names
    """
    try:
        document = json.loads(source.text())
    except json.JSONDecodeError as e:
        raise ConfigurationError(f"Invalid JSON in configuration {source}: {e}", e) from e

    if not isinstance(document, dict):
        raise ConfigurationError(f"Configuration {source} must be a JSON object")
    return configuration_from_dict(document, source)


def configuration_from_dict(document: Mapping[str, Any], source: Any = None) -> Configuration:
    """
    Build a Configuration from an already-decoded mapping.

    Args:
        document: Mapping in the JSON layout above
        source: Optional source to record on the configuration

    Returns:
        Configuration
    """
    builder = ConfigurationBuilder().with_source(source)

    name = document.get("name", "Default")
    if not isinstance(name, str) or not name:
        raise ConfigurationError("'name' must be a non-empty string")
    builder.with_name(name)

    root = document.get("root", {})
    builder.with_root_level(_entry_level(root, "root", default=LogLevel.ERROR))

    loggers = document.get("loggers", {})
    if not isinstance(loggers, dict):
        raise ConfigurationError("'loggers' must be an object")

    for logger_name, entry in loggers.items():
        if not logger_name:
            raise ConfigurationError("Logger names must not be empty; use 'root'")
        additive = True
        if isinstance(entry, dict):
            additive = entry.get("additive", True)
            if not isinstance(additive, bool):
                raise ConfigurationError(f"'additive' of logger {logger_name!r} must be a boolean")
        builder.with_logger(logger_name, _entry_level(entry, logger_name), additive)

    return builder.build()


def _entry_level(entry: Any, label: str, default: Optional[LogLevel] = None) -> LogLevel:
    if isinstance(entry, str):
        raw = entry
    elif isinstance(entry, dict):
        raw = entry.get("level")
    else:
        raise ConfigurationError(f"Entry {label!r} must be a level name or an object")

    if raw is None:
        if default is None:
            raise ConfigurationError(f"Logger {label!r} has no level")
        return default
    if not isinstance(raw, str):
        raise ConfigurationError(f"Level of {label!r} must be a string")
    try:
        return LogLevel.from_string(raw)
    except ValueError as e:
        raise ConfigurationError(f"Logger {label!r}: {e}", e) from e


def load_configuration(uri: str) -> Configuration:
    """Read and parse the configuration at ``uri``."""
    return parse_configuration(ConfigurationSource.from_uri(uri))
