"""
Process-wide default controller

Convenience functions for applications that do not wire their own
LevelController. Each one delegates to ``get_configurator()``.
"""

from __future__ import annotations
import threading
from pathlib import Path
from typing import Any, Mapping, Optional, Union

from log_configurator.config.source import ConfigurationSource
from log_configurator.configurator.controller import LevelController
from log_configurator.configurator.resolver import ContextResolver
from log_configurator.configurator.settings import ConfiguratorSettings
from log_configurator.core.logger_context import LoggerContext
from log_configurator.factory.context_factory import DefaultContextFactory
from log_configurator.monitoring.metrics import MetricsCollector
from log_configurator.status.status_logger import StatusLogger

_configurator: Optional[LevelController] = None
_lock = threading.Lock()


def create_configurator(
    settings: Optional[ConfiguratorSettings] = None,
    factory: Optional[Any] = None,
    status_logger: Optional[StatusLogger] = None
) -> LevelController:
    """
    Build a LevelController from settings.

    Args:
        settings: Configurator settings (default: from environment)
        factory: Context factory (default: DefaultContextFactory)
        status_logger: Status logger (default: process-wide)

    Returns:
        New LevelController
    """
    settings = settings or ConfiguratorSettings.from_env()
    if factory is None:
        factory = DefaultContextFactory(settings.default_context_name, status_logger)
    metrics = MetricsCollector() if settings.enable_metrics else None
    return LevelController(
        ContextResolver(factory), status_logger=status_logger, metrics=metrics
    )


def get_configurator() -> LevelController:
    """Get the process-wide LevelController, creating it on first use."""
    global _configurator
    with _lock:
        if _configurator is None:
            _configurator = create_configurator()
        return _configurator


def set_configurator(controller: Optional[LevelController]) -> None:
    """Replace the process-wide LevelController. None resets it."""
    global _configurator
    with _lock:
        _configurator = controller


def initialize(
    name: Optional[str] = None,
    config_location: Optional[Union[str, Path]] = None,
    source: Optional[ConfigurationSource] = None,
    loader: Optional[Any] = None,
    external_context: Optional[Any] = None
) -> Optional[LoggerContext]:
    return get_configurator().initialize(
        name=name,
        config_location=config_location,
        source=source,
        loader=loader,
        external_context=external_context,
    )


def set_level(logger_name: Optional[str], level: Any) -> bool:
    return get_configurator().set_level(logger_name, level)


def set_levels(levels: Mapping[Optional[str], Any]) -> bool:
    return get_configurator().set_levels(levels)


def set_root_level(level: Any) -> bool:
    return get_configurator().set_root_level(level)


def set_all_levels(parent_name: Optional[str], level: Any) -> bool:
    return get_configurator().set_all_levels(parent_name, level)


def shutdown(context: Optional[LoggerContext]) -> None:
    get_configurator().shutdown(context)
