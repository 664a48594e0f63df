"""
Configurator error taxonomy

These errors describe why a context could not be obtained. The configurator
reports them through the status logger and never raises them to callers.
"""

from typing import Any, Optional


class ConfiguratorError(Exception):
    """Base class for configurator failures."""

    kind = "configurator"

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause


class IncompatibleFactoryError(ConfiguratorError):
    """The registered factory is not a ContextFactory."""

    kind = "incompatible_factory"

    def __init__(self, factory: Any):
        if factory is None:
            message = "No LoggerContext factory is registered"
        else:
            message = (
                f"Factory of type {type(factory).__name__} does not implement "
                f"ContextFactory; unable to initialize logging"
            )
        super().__init__(message)
        self.factory = factory


class ContextCreationError(ConfiguratorError):
    """The factory raised while building or obtaining a context."""

    kind = "context_creation"


class InvalidLocationError(ConfiguratorError, ValueError):
    """A configuration location could not be resolved to a URI."""

    kind = "invalid_location"

    def __init__(self, location: Any, reason: str, cause: Optional[BaseException] = None):
        super().__init__(f"Invalid configuration location {location!r}: {reason}", cause)
        self.location = location


class ConfigurationError(ConfiguratorError, ValueError):
    """Configuration data could not be read or parsed."""

    kind = "configuration"
