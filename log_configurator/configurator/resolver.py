"""
Context resolution

Obtains a LoggerContext from a ContextFactory and turns every failure into a
value instead of an exception.
"""

from __future__ import annotations
from dataclasses import dataclass
import threading
from pathlib import Path
from typing import Any, Optional, Union

from log_configurator.config.location import resolve_location
from log_configurator.config.source import ConfigurationSource
from log_configurator.core.logger_context import LoggerContext
from log_configurator.errors import (
    ConfiguratorError,
    ContextCreationError,
    IncompatibleFactoryError,
    InvalidLocationError,
)
from log_configurator.factory.context_factory import ContextFactory

CALLER_ID = "log_configurator.Configurator"


@dataclass(frozen=True)
class Resolution:
    """
    Outcome of a context resolution.

    Exactly one of ``context`` and ``error`` is set. ``repeated`` marks an
    error that was already returned by an earlier resolution.
    """

    context: Optional[LoggerContext] = None
    error: Optional[ConfiguratorError] = None
    repeated: bool = False

    @property
    def ok(self) -> bool:
        return self.context is not None


class ContextResolver:
    """
    Resolves LoggerContext instances through an injected factory.

    The factory is checked once, at construction. A factory that is not a
    ContextFactory makes every resolution fail with IncompatibleFactoryError.

    Example:
        resolver = ContextResolver(DefaultContextFactory())
        resolution = resolver.resolve(name="app", config_location="conf/log.json")
        if resolution.ok:
            context = resolution.context
    """

    def __init__(self, factory: Any, caller_id: str = CALLER_ID):
        """
        Initialize resolver.

        Args:
            factory: Context factory; anything else is reported as incompatible
            caller_id: Identifier passed to the factory
        """
        self._factory = factory
        self._caller_id = caller_id
        self._factory_error: Optional[IncompatibleFactoryError] = None
        self._factory_error_returned = False
        self._lock = threading.Lock()
        if not isinstance(factory, ContextFactory):
            self._factory_error = IncompatibleFactoryError(factory)

    @property
    def factory(self) -> Any:
        return self._factory

    @property
    def is_compatible(self) -> bool:
        return self._factory_error is None

    def resolve(
        self,
        name: Optional[str] = None,
        loader: Optional[Any] = None,
        source: Optional[ConfigurationSource] = None,
        config_location: Optional[Union[str, Path]] = None,
        external_context: Optional[Any] = None,
        current_context: bool = False
    ) -> Resolution:
        """
        Obtain or create a LoggerContext.

        Args:
            name: Context name (default: the factory's default context)
            loader: Opaque loader reference passed to the factory
            source: Configuration source; takes precedence over config_location
            config_location: Path or URI of the configuration
            external_context: Opaque object stored on a new context
            current_context: Return the caller's current context

        Returns:
            Resolution holding a context or an error
        """
        if self._factory_error is not None:
            with self._lock:
                repeated = self._factory_error_returned
                self._factory_error_returned = True
            return Resolution(error=self._factory_error, repeated=repeated)

        uri = None
        if source is None and config_location is not None:
            try:
                uri = resolve_location(config_location)
            except InvalidLocationError as e:
                return Resolution(error=e)

        try:
            context = self._factory.get_context(
                self._caller_id,
                loader=loader,
                external_context=external_context,
                current_context=current_context,
                source=source,
                config_location=uri,
                name=name,
            )
        except Exception as e:
            where = source or uri or "default configuration"
            return Resolution(error=ContextCreationError(
                f"There was a problem obtaining LoggerContext "
                f"{name or '<default>'} using {where}: {e}",
                e,
            ))

        if context is None:
            return Resolution(error=ContextCreationError(
                f"Factory {type(self._factory).__name__} returned no LoggerContext"
            ))
        return Resolution(context=context)
