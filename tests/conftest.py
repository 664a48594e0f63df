"""Shared fixtures for log configurator tests"""

import pytest

from log_configurator import (
    ConfigurationBuilder,
    ContextFactory,
    ContextResolver,
    LevelController,
    LoggerContext,
    LogLevel,
)
from log_configurator.monitoring import MetricsCollector
from log_configurator.status import StatusLogger


class MockWriter:
    """Mock writer for testing."""

    def __init__(self):
        self.entries = []
        self.closed = False

    def write(self, entry) -> None:
        self.entries.append(entry)

    def flush(self) -> None:
        pass

    def close(self) -> None:
        self.closed = True

    def messages(self):
        return [e.message for e in self.entries]


class FixedContextFactory(ContextFactory):
    """Factory that always hands out the same context."""

    def __init__(self, context=None, error=None):
        self.context = context
        self.error = error
        self.calls = []

    def get_context(self, caller_id, loader=None, external_context=None,
                    current_context=False, source=None, config_location=None,
                    name=None):
        self.calls.append({
            "caller_id": caller_id,
            "loader": loader,
            "external_context": external_context,
            "current_context": current_context,
            "source": source,
            "config_location": config_location,
            "name": name,
        })
        if self.error is not None:
            raise self.error
        return self.context

    def remove_context(self, context):
        pass

    def has_context(self, name):
        return self.context is not None and self.context.name == name


@pytest.fixture
def status_writer():
    return MockWriter()


@pytest.fixture
def status_logger(status_writer):
    return StatusLogger(level=LogLevel.DEBUG, writer=status_writer)


@pytest.fixture
def configuration():
    return (ConfigurationBuilder()
        .with_name("test")
        .with_root_level(LogLevel.WARN)
        .with_logger("com.foo", LogLevel.INFO)
        .with_logger("com.foo.Baz", LogLevel.ERROR, additive=False)
        .build())


@pytest.fixture
def context(configuration, status_logger):
    ctx = LoggerContext("test", configuration, status_logger=status_logger)
    ctx.start()
    yield ctx
    ctx.stop()


@pytest.fixture
def factory(context):
    return FixedContextFactory(context)


@pytest.fixture
def metrics():
    return MetricsCollector()


@pytest.fixture
def controller(factory, status_logger, metrics):
    return LevelController(ContextResolver(factory), status_logger=status_logger, metrics=metrics)
