"""
Level controller

Changes logger levels of a running LoggerContext without reloading its
configuration. A propagation (``LoggerContext.update_loggers``) is issued at
most once per operation, and only if some level actually changed.

Failures are never raised: they are reported to the status logger and the
operation has no effect.
"""

from __future__ import annotations
from pathlib import Path
from typing import Any, Mapping, Optional, Union

from log_configurator.config.source import ConfigurationSource
from log_configurator.configurator.resolver import ContextResolver, Resolution
from log_configurator.core.configuration import Configuration, is_descendant
from log_configurator.core.log_level import LogLevel
from log_configurator.core.logger_config import ROOT_LOGGER_NAME, LoggerConfig
from log_configurator.core.logger_context import LoggerContext
from log_configurator.monitoring.metrics import MetricsCollector
from log_configurator.status.status_logger import StatusLogger, get_status_logger


class LevelController:
    """
    Runtime level management for logging contexts.

    Every operation takes an optional ``context``. When it is omitted the
    current context is resolved through the injected ContextResolver.

    Thread Safety:
        Compare-then-write sequences run under the configuration's
        ``write_lock``, so concurrent controllers never lose updates.
        Propagation runs after the lock is released.

    Example:
        controller = LevelController(ContextResolver(DefaultContextFactory()))

        controller.set_level("com.foo", LogLevel.DEBUG)
        controller.set_levels({"com.foo": LogLevel.INFO, "com.bar": LogLevel.WARN})
        controller.set_root_level(LogLevel.ERROR)
    """

    def __init__(
        self,
        resolver: ContextResolver,
        status_logger: Optional[StatusLogger] = None,
        metrics: Optional[MetricsCollector] = None
    ):
        """
        Initialize level controller.

        Args:
            resolver: Resolver used to obtain contexts
            status_logger: Where failures are reported (default: process-wide)
            metrics: Optional metrics collector
        """
        self._resolver = resolver
        self._status = status_logger
        self._metrics = metrics

    @property
    def resolver(self) -> ContextResolver:
        return self._resolver

    @property
    def status_logger(self) -> StatusLogger:
        return self._status if self._status is not None else get_status_logger()

    @property
    def metrics(self) -> Optional[MetricsCollector]:
        return self._metrics

    def initialize(
        self,
        name: Optional[str] = None,
        config_location: Optional[Union[str, Path]] = None,
        source: Optional[ConfigurationSource] = None,
        loader: Optional[Any] = None,
        external_context: Optional[Any] = None
    ) -> Optional[LoggerContext]:
        """
        Obtain or create the named context from a configuration.

        Args:
            name: Context name (default: the factory's default context)
            config_location: Path or URI of the configuration
            source: Configuration source; takes precedence over config_location
            loader: Opaque loader reference passed to the factory
            external_context: Opaque object stored on a new context

        Returns:
            The LoggerContext, or None if it could not be obtained
        """
        resolution = self._resolver.resolve(
            name=name,
            loader=loader,
            source=source,
            config_location=config_location,
            external_context=external_context,
            current_context=False,
        )
        return self._accept(resolution)

    def get_context(self, context: Optional[LoggerContext] = None) -> Optional[LoggerContext]:
        """
        Return ``context`` if given, else resolve the current context.

        Returns:
            LoggerContext or None if resolution failed
        """
        if context is not None:
            return context
        return self._accept(self._resolver.resolve(current_context=True))

    def set_level(
        self,
        logger_name: Optional[str],
        level: Any,
        context: Optional[LoggerContext] = None
    ) -> bool:
        """
        Set the level of one logger.

        An empty name sets the root level. A name with no exact entry gets a
        new additive LoggerConfig, even if an ancestor entry exists.

        Args:
            logger_name: Logger name
            level: Requested level
            context: Target context (default: current context)

        Returns:
            True if the level changed
        """
        context = self.get_context(context)
        if context is None or not self._is_comparable(logger_name, level):
            return False
        if not logger_name:
            return self.set_root_level(level, context)

        configuration = context.get_configuration()
        with configuration.write_lock:
            changed = self._apply(configuration, logger_name, level)
        if changed:
            self._propagate(context)
        return changed

    def set_levels(
        self,
        levels: Optional[Mapping[Optional[str], Any]],
        context: Optional[LoggerContext] = None
    ) -> bool:
        """
        Set the levels of several loggers with a single propagation.

        Args:
            levels: Mapping of logger name to level; "" means root
            context: Target context (default: current context)

        Returns:
            True if any level changed
        """
        context = self.get_context(context)
        if context is None or not levels:
            return False

        configuration = context.get_configuration()
        changed = False
        with configuration.write_lock:
            for logger_name, level in list(levels.items()):
                if not self._is_comparable(logger_name, level):
                    continue
                if logger_name:
                    changed |= self._apply(configuration, logger_name, level)
                else:
                    changed |= self._apply_root(configuration, level)
        if changed:
            self._propagate(context)
        return changed

    def set_root_level(self, level: Any, context: Optional[LoggerContext] = None) -> bool:
        """
        Set the level of the root logger.

        Args:
            level: Requested level
            context: Target context (default: current context)

        Returns:
            True if the level changed
        """
        context = self.get_context(context)
        if context is None or not self._is_comparable(ROOT_LOGGER_NAME, level):
            return False

        configuration = context.get_configuration()
        with configuration.write_lock:
            changed = self._apply_root(configuration, level)
        if changed:
            self._propagate(context)
        return changed

    def set_all_levels(
        self,
        parent_name: Optional[str],
        level: Any,
        context: Optional[LoggerContext] = None
    ) -> bool:
        """
        Set the level of a logger and of every registered descendant.

        Args:
            parent_name: Ancestor logger name; "" means every entry
            level: Requested level
            context: Target context (default: current context)

        Returns:
            True if any level changed
        """
        context = self.get_context(context)
        if context is None or not self._is_comparable(parent_name, level):
            return False

        parent_name = parent_name or ROOT_LOGGER_NAME
        configuration = context.get_configuration()
        with configuration.write_lock:
            if parent_name == ROOT_LOGGER_NAME:
                changed = self._apply_root(configuration, level)
            else:
                changed = self._apply(configuration, parent_name, level)
            for name in list(configuration.get_loggers()):
                if is_descendant(name, parent_name):
                    changed |= self._apply(configuration, name, level)
        if changed:
            self._propagate(context)
        return changed

    def shutdown(self, context: Optional[LoggerContext]) -> None:
        """
        Stop a context. None is ignored.

        Args:
            context: Context to stop
        """
        if context is None:
            return
        try:
            context.stop()
        except Exception as e:
            self.status_logger.error(f"Error stopping LoggerContext {context.name!r}", exc=e)
            return
        if self._metrics:
            self._metrics.record_shutdown()

    def _is_comparable(self, logger_name: Optional[str], level: Any) -> bool:
        # Levels are not validated, but handles must be able to compare them
        try:
            level >= LogLevel.ALL
        except TypeError as e:
            self.status_logger.error(
                f"Ignoring level {level!r} for logger {logger_name or '<root>'!r}: "
                "not comparable with LogLevel",
                exc=e,
            )
            return False
        return True

    def _apply(self, configuration: Configuration, logger_name: str, level: Any) -> bool:
        logger_config = configuration.get_exact_logger_config(logger_name)
        if logger_config is None:
            configuration.add_logger(logger_name, LoggerConfig(logger_name, level, additive=True))
            self._record(True, created=True)
            return True
        return self._record(logger_config.update_level(level))

    def _apply_root(self, configuration: Configuration, level: Any) -> bool:
        return self._record(configuration.get_root_logger().update_level(level))

    def _record(self, changed: bool, created: bool = False) -> bool:
        if self._metrics:
            if changed:
                self._metrics.record_level_change(created=created)
            else:
                self._metrics.record_noop()
        return changed

    def _propagate(self, context: LoggerContext) -> None:
        try:
            context.update_loggers()
        except Exception as e:
            self.status_logger.error(
                f"Error updating loggers of LoggerContext {context.name!r}", exc=e
            )
            return
        if self._metrics:
            self._metrics.record_propagation()

    def _accept(self, resolution: Resolution) -> Optional[LoggerContext]:
        if resolution.ok:
            if self._metrics:
                self._metrics.record_resolved()
            return resolution.context

        error = resolution.error
        if self._metrics:
            self._metrics.record_resolution_failure(error.kind)
        if not resolution.repeated:
            self.status_logger.error(str(error), exc=error.cause, kind=error.kind)
        return None
