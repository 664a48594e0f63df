"""Factory module - LoggerContext creation and caching"""

from log_configurator.factory.context_factory import (
    ContextFactory,
    DefaultContextFactory,
)

__all__ = ["ContextFactory", "DefaultContextFactory"]
