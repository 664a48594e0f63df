"""
LoggerContext factories

A factory creates and caches LoggerContext instances by name.
"""

from __future__ import annotations
import threading
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

from log_configurator.config.parser import load_configuration, parse_configuration
from log_configurator.config.source import ConfigurationSource
from log_configurator.core.configuration import Configuration
from log_configurator.core.logger_context import LoggerContext
from log_configurator.status.status_logger import StatusLogger, get_status_logger


class ContextFactory(ABC):
    """
    Abstract base class for LoggerContext factories.

    Only instances of this class are accepted by ContextResolver.
    """

    @abstractmethod
    def get_context(
        self,
        caller_id: str,
        loader: Optional[Any] = None,
        external_context: Optional[Any] = None,
        current_context: bool = False,
        source: Optional[ConfigurationSource] = None,
        config_location: Optional[str] = None,
        name: Optional[str] = None
    ) -> LoggerContext:
        """
        Obtain or create a LoggerContext.

        Args:
            caller_id: Identifier of the requesting component
            loader: Opaque loader reference
            external_context: Opaque object stored on a new context
            current_context: Return the caller's current context
            source: Configuration source for a new context
            config_location: Configuration URI for a new context
            name: Context name

        Returns:
            A started LoggerContext
        """
        pass

    @abstractmethod
    def remove_context(self, context: LoggerContext) -> None:
        """Forget a cached context."""
        pass

    @abstractmethod
    def has_context(self, name: str) -> bool:
        """Check whether a context with this name is cached."""
        pass


class DefaultContextFactory(ContextFactory):
    """
    Thread-safe factory caching contexts by name.

    A missing context is built from ``source``, else ``config_location``,
    else the default configuration. Cached contexts are returned as they are;
    stopped contexts are replaced.
    """

    def __init__(
        self,
        default_name: str = "Default",
        status_logger: Optional[StatusLogger] = None
    ):
        """
        Initialize factory.

        Args:
            default_name: Name of the current (default) context
            status_logger: Status logger handed to new contexts
        """
        self.default_name = default_name
        self._status = status_logger
        self._contexts: Dict[str, LoggerContext] = {}
        self._lock = threading.RLock()

    @property
    def status_logger(self) -> StatusLogger:
        return self._status if self._status is not None else get_status_logger()

    def get_context(
        self,
        caller_id: str,
        loader: Optional[Any] = None,
        external_context: Optional[Any] = None,
        current_context: bool = False,
        source: Optional[ConfigurationSource] = None,
        config_location: Optional[str] = None,
        name: Optional[str] = None
    ) -> LoggerContext:
        context_name = name or self.default_name

        with self._lock:
            context = self._contexts.get(context_name)
            if context is not None and not context.is_stopped:
                return context

            if current_context:
                configuration = Configuration.default()
            else:
                configuration = self._load(source, config_location)

            context = LoggerContext(
                context_name,
                configuration,
                external_context=external_context,
                loader=loader,
                status_logger=self._status,
            )
            context.start()
            self._contexts[context_name] = context

        self.status_logger.debug(
            f"{caller_id} created LoggerContext {context_name!r} "
            f"from {configuration.source or 'default configuration'}"
        )
        return context

    def _load(
        self,
        source: Optional[ConfigurationSource],
        config_location: Optional[str]
    ) -> Configuration:
        if source is not None:
            return parse_configuration(source)
        if config_location is not None:
            return load_configuration(config_location)
        return Configuration.default()

    def remove_context(self, context: LoggerContext) -> None:
        with self._lock:
            if self._contexts.get(context.name) is context:
                del self._contexts[context.name]

    def has_context(self, name: str) -> bool:
        with self._lock:
            return name in self._contexts

    def get_contexts(self) -> List[LoggerContext]:
        """Snapshot of cached contexts."""
        with self._lock:
            return list(self._contexts.values())

    def __repr__(self) -> str:
        with self._lock:
            return f"DefaultContextFactory(contexts={sorted(self._contexts)})"
