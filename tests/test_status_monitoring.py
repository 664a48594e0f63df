"""Tests for status logger, settings and metrics"""

import io

import pytest

from log_configurator import ConfiguratorSettings, LogLevel
from log_configurator.monitoring import ConfiguratorMetrics, MetricsCollector
from log_configurator.status import StatusLogger
from log_configurator.writers import ConsoleWriter


class TestStatusLogger:
    """Test the status side channel."""

    def test_level_filter(self, status_writer):
        status = StatusLogger(level=LogLevel.WARN, writer=status_writer)
        status.info("dropped")
        status.warn("kept")

        assert [e.message for e in status_writer.entries] == ["kept"]
        assert len(status.get_entries()) == 1

    def test_entry_fields(self, status_logger):
        err = RuntimeError("cause")
        status_logger.error("failed", exc=err, kind="test")

        entry = status_logger.get_entries()[-1]
        assert entry.level == LogLevel.ERROR
        assert entry.logger_name == "StatusLogger"
        assert entry.exception is err
        assert entry.extra == {"kind": "test"}

    def test_listeners(self, status_logger):
        seen = []
        status_logger.add_listener(seen.append)
        status_logger.fatal("one")
        status_logger.remove_listener(seen.append)
        status_logger.fatal("two")

        assert [e.message for e in seen] == ["one"]

    def test_listener_failure_is_contained(self, status_logger):
        def bad(entry):
            raise RuntimeError("listener")

        status_logger.add_listener(bad)
        status_logger.error("still fine")
        assert status_logger.get_entries()[-1].message == "still fine"

    def test_bounded_history(self, status_writer):
        status = StatusLogger(level=LogLevel.DEBUG, writer=status_writer, history_size=3)
        for i in range(5):
            status.debug(str(i))

        assert [e.message for e in status.get_entries()] == ["2", "3", "4"]
        status.clear()
        assert status.get_entries() == []

    def test_invalid_history_size(self):
        with pytest.raises(ValueError):
            StatusLogger(history_size=0)

    def test_console_output(self):
        stream = io.StringIO()
        status = StatusLogger(writer=ConsoleWriter(stream=stream))
        status.error("to the console")
        assert "StatusLogger - to the console" in stream.getvalue()


class TestConsoleWriter:
    """Test console writer."""

    def test_colored(self):
        stream = io.StringIO()
        writer = ConsoleWriter(colored=True, stream=stream)
        status = StatusLogger(writer=writer)
        status.error("red")

        assert stream.getvalue().startswith(LogLevel.ERROR.color_code)
        assert stream.getvalue().rstrip("\n").endswith(LogLevel.ERROR.reset_code)


class TestConfiguratorSettings:
    """Test configurator settings."""

    def test_defaults(self):
        settings = ConfiguratorSettings.default()
        assert settings.default_context_name == "Default"
        assert settings.status_level == LogLevel.ERROR
        assert settings.enable_metrics is True

    def test_debug_config(self):
        assert ConfiguratorSettings.debug_config().status_level == LogLevel.DEBUG

    def test_level_name(self):
        assert ConfiguratorSettings(status_level="warn").status_level == LogLevel.WARN

    @pytest.mark.parametrize("kwargs", [
        {"default_context_name": ""},
        {"status_history_size": 0},
        {"status_level": "LOUD"},
    ])
    def test_validation(self, kwargs):
        with pytest.raises(ValueError):
            ConfiguratorSettings(**kwargs)

    def test_from_env(self):
        settings = ConfiguratorSettings.from_env({
            "LOG_CONFIGURATOR_CONTEXT_NAME": "svc",
            "LOG_CONFIGURATOR_STATUS_LEVEL": "debug",
            "LOG_CONFIGURATOR_STATUS_HISTORY": "10",
            "LOG_CONFIGURATOR_METRICS": "off",
        })
        assert settings.default_context_name == "svc"
        assert settings.status_level == LogLevel.DEBUG
        assert settings.status_history_size == 10
        assert settings.enable_metrics is False

    def test_from_empty_env(self):
        assert ConfiguratorSettings.from_env({}) == ConfiguratorSettings()


class TestMetrics:
    """Test metrics collection."""

    def test_default_values(self):
        metrics = ConfiguratorMetrics()
        assert metrics.level_changes == 0
        assert metrics.resolution_failures == {}

    def test_collector(self):
        collector = MetricsCollector()
        collector.record_level_change(created=True)
        collector.record_level_change()
        collector.record_noop()
        collector.record_propagation()
        collector.record_resolution_failure("invalid_location")
        collector.record_resolution_failure("invalid_location")

        data = collector.get_metrics().to_dict()
        assert data["level_changes"] == 2
        assert data["loggers_created"] == 1
        assert data["noop_requests"] == 1
        assert data["propagations"] == 1
        assert data["resolution_failures"] == {"invalid_location": 2}
        assert data["started_at"] is not None

    def test_snapshot_is_copy(self):
        collector = MetricsCollector()
        snapshot = collector.get_metrics()
        collector.record_resolution_failure("x")
        assert snapshot.resolution_failures == {}

    def test_reset(self):
        collector = MetricsCollector()
        collector.record_shutdown()
        collector.reset()
        assert collector.get_metrics().shutdowns == 0
