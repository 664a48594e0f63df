"""Tests for the level policy model"""

import threading

import pytest

from log_configurator import (
    Configuration,
    ConfigurationBuilder,
    LevelAssignment,
    LogEntry,
    LoggerConfig,
    LogLevel,
)
from log_configurator.core.configuration import is_descendant, parent_name


class TestLogLevel:
    """Test log level functionality."""

    def test_log_levels(self):
        assert LogLevel.ALL < LogLevel.TRACE
        assert LogLevel.TRACE < LogLevel.DEBUG
        assert LogLevel.DEBUG < LogLevel.INFO
        assert LogLevel.INFO < LogLevel.WARN
        assert LogLevel.WARN < LogLevel.ERROR
        assert LogLevel.ERROR < LogLevel.FATAL
        assert LogLevel.FATAL < LogLevel.OFF

    def test_critical_is_fatal(self):
        assert LogLevel.CRITICAL is LogLevel.FATAL
        assert LogLevel(50).name == "FATAL"

    def test_from_string(self):
        assert LogLevel.from_string("DEBUG") == LogLevel.DEBUG
        assert LogLevel.from_string("info") == LogLevel.INFO
        assert LogLevel.from_string(" warning ") == LogLevel.WARN
        assert LogLevel.from_string("critical") == LogLevel.FATAL

    def test_from_string_invalid(self):
        with pytest.raises(ValueError):
            LogLevel.from_string("verbose")

    def test_passes(self):
        assert LogLevel.ERROR.passes(LogLevel.WARN)
        assert LogLevel.WARN.passes(LogLevel.WARN)
        assert not LogLevel.INFO.passes(LogLevel.WARN)
        assert not LogLevel.FATAL.passes(LogLevel.OFF)
        assert LogLevel.TRACE.passes(LogLevel.ALL)


class TestLevelAssignment:
    """Test LevelAssignment value type."""

    def test_immutable(self):
        assignment = LevelAssignment("com.foo", LogLevel.DEBUG)
        with pytest.raises(AttributeError):
            assignment.level = LogLevel.INFO

    def test_equality_and_hash(self):
        a = LevelAssignment("com.foo", LogLevel.DEBUG)
        b = LevelAssignment("com.foo", LogLevel.DEBUG)
        assert a == b
        assert hash(a) == hash(b)
        assert a != LevelAssignment("com.foo", LogLevel.INFO)

    def test_ordering(self):
        assignments = [
            LevelAssignment("com.foo", LogLevel.INFO),
            LevelAssignment("", LogLevel.WARN),
            LevelAssignment("com.foo", LogLevel.DEBUG),
        ]
        assert sorted(assignments) == [
            LevelAssignment("", LogLevel.WARN),
            LevelAssignment("com.foo", LogLevel.DEBUG),
            LevelAssignment("com.foo", LogLevel.INFO),
        ]

    def test_root(self):
        assert LevelAssignment("", LogLevel.WARN).is_root
        assert str(LevelAssignment("", LogLevel.WARN)) == "<root>=WARN"


class TestLoggerConfig:
    """Test LoggerConfig policy record."""

    def test_defaults(self):
        config = LoggerConfig("com.foo")
        assert config.name == "com.foo"
        assert config.level == LogLevel.ERROR
        assert config.additive is True
        assert not config.is_root

    def test_root(self):
        root = LoggerConfig.root(LogLevel.INFO)
        assert root.is_root
        assert root.level == LogLevel.INFO

    def test_none_name_rejected(self):
        with pytest.raises(ValueError):
            LoggerConfig(None)

    def test_update_level(self):
        config = LoggerConfig("a", LogLevel.INFO)
        assert config.update_level(LogLevel.DEBUG) is True
        assert config.level == LogLevel.DEBUG
        assert config.update_level(LogLevel.DEBUG) is False

    def test_accepts_any_comparable_level(self):
        config = LoggerConfig("a", 20)
        assert config.update_level(LogLevel.INFO) is False
        assert config.update_level(7) is True
        assert config.level == 7

    def test_additive_is_read_only(self):
        config = LoggerConfig("a", additive=False)
        with pytest.raises(AttributeError):
            config.additive = True

    def test_assignment(self):
        config = LoggerConfig("a", LogLevel.TRACE)
        assert config.assignment() == LevelAssignment("a", LogLevel.TRACE)


class TestNames:
    """Test dotted name helpers."""

    def test_parent_name(self):
        assert parent_name("com.foo.Bar") == "com.foo"
        assert parent_name("com") == ""
        assert parent_name("") == ""

    def test_is_descendant(self):
        assert is_descendant("com.foo.Bar", "com.foo")
        assert not is_descendant("com.foobar", "com.foo")
        assert not is_descendant("com.foo", "com.foo")
        assert is_descendant("com", "")
        assert not is_descendant("", "")


class TestConfiguration:
    """Test the LoggerConfig registry."""

    def test_default(self):
        config = Configuration.default()
        assert config.get_root_logger().level == LogLevel.ERROR
        assert len(config) == 1
        assert "" in config

    def test_root_must_be_root(self):
        with pytest.raises(ValueError):
            Configuration("x", LoggerConfig("com.foo"))

    def test_exact_lookup_miss(self, configuration):
        assert configuration.get_exact_logger_config("com.foo.Bar") is None
        assert configuration.get_exact_logger_config("com.foo").name == "com.foo"

    def test_ancestor_lookup(self, configuration):
        assert configuration.get_logger_config("com.foo.Bar").name == "com.foo"
        assert configuration.get_logger_config("com.foo.Baz.Qux").name == "com.foo.Baz"
        assert configuration.get_logger_config("org.other").is_root
        assert configuration.get_logger_config("").is_root

    def test_add_logger_replaces(self, configuration):
        replacement = LoggerConfig("com.foo", LogLevel.TRACE)
        configuration.add_logger("com.foo", replacement)
        assert configuration.get_exact_logger_config("com.foo") is replacement

    def test_add_logger_name_mismatch(self, configuration):
        with pytest.raises(ValueError):
            configuration.add_logger("com.bar", LoggerConfig("com.foo"))

    def test_add_root_replaces_root(self, configuration):
        root = LoggerConfig.root(LogLevel.TRACE)
        configuration.add_logger("", root)
        assert configuration.get_root_logger() is root
        assert configuration.get_exact_logger_config("") is root

    def test_remove_logger(self, configuration):
        assert configuration.remove_logger("com.foo") is True
        assert configuration.remove_logger("com.foo") is False
        assert configuration.remove_logger("") is False
        assert configuration.get_root_logger() is not None

    def test_get_loggers_is_snapshot(self, configuration):
        snapshot = configuration.get_loggers()
        configuration.add_logger("x", LoggerConfig("x"))
        assert "x" not in snapshot

    def test_level_assignments(self, configuration):
        assert configuration.get_level_assignments() == [
            LevelAssignment("", LogLevel.WARN),
            LevelAssignment("com.foo", LogLevel.INFO),
            LevelAssignment("com.foo.Baz", LogLevel.ERROR),
        ]

    def test_concurrent_inserts_are_not_lost(self):
        config = Configuration.default()

        def insert(prefix):
            for i in range(200):
                name = f"{prefix}.{i}"
                config.add_logger(name, LoggerConfig(name))

        threads = [threading.Thread(target=insert, args=(f"t{n}",)) for n in range(4)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert len(config) == 1 + 4 * 200


class TestConfigurationBuilder:
    """Test builder pattern."""

    def test_build(self):
        config = (ConfigurationBuilder()
            .with_name("app")
            .with_root_level(LogLevel.INFO)
            .with_logger("a", LogLevel.DEBUG, additive=False)
            .build())

        assert config.name == "app"
        assert config.get_root_logger().level == LogLevel.INFO
        entry = config.get_exact_logger_config("a")
        assert entry.level == LogLevel.DEBUG
        assert entry.additive is False

    def test_empty_logger_name_rejected(self):
        with pytest.raises(ValueError):
            ConfigurationBuilder().with_logger("", LogLevel.DEBUG)


class TestLogEntry:
    """Test log entry structure."""

    def test_create_entry(self):
        entry = LogEntry(level=LogLevel.INFO, message="Test message")
        assert entry.level == LogLevel.INFO
        assert entry.logger_name == ""

    def test_level_type_checked(self):
        with pytest.raises(TypeError):
            LogEntry(level=20, message="x")

    def test_str_includes_logger_and_exception(self):
        entry = LogEntry(
            level=LogLevel.ERROR,
            message="boom",
            logger_name="com.foo",
            exception=RuntimeError("bad"),
        )
        text = str(entry)
        assert "com.foo - boom" in text
        assert "RuntimeError: bad" in text

    def test_to_dict(self):
        data = LogEntry(level=LogLevel.DEBUG, message="Test").to_dict()
        assert data["level"] == "DEBUG"
        assert data["exception"] is None
