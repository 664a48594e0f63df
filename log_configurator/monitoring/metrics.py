"""
Configurator metrics collection

Counts level changes, propagations and context resolution failures.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from datetime import datetime
from typing import Dict, Optional
import threading


@dataclass
class ConfiguratorMetrics:
    """
    Metrics collected by the level controller.

    Contains counters and timing information for monitoring how often
    level policy is changed at runtime.
    """

    # Level operations
    level_changes: int = 0
    noop_requests: int = 0
    loggers_created: int = 0

    # Propagation
    propagations: int = 0

    # Context lifecycle
    contexts_resolved: int = 0
    resolution_failures: Dict[str, int] = field(default_factory=dict)
    shutdowns: int = 0

    # Timing
    started_at: Optional[datetime] = None
    last_change_at: Optional[datetime] = None

    def to_dict(self) -> Dict:
        """
        Convert to dictionary for JSON export.

        Returns:
            Dictionary representation of metrics
        """
        return {
            "level_changes": self.level_changes,
            "noop_requests": self.noop_requests,
            "loggers_created": self.loggers_created,
            "propagations": self.propagations,
            "contexts_resolved": self.contexts_resolved,
            "resolution_failures": dict(self.resolution_failures),
            "shutdowns": self.shutdowns,
            "started_at": self.started_at.isoformat() if self.started_at else None,
            "last_change_at": self.last_change_at.isoformat() if self.last_change_at else None,
        }


class MetricsCollector:
    """Thread-safe collector of ConfiguratorMetrics."""

    def __init__(self):
        self._metrics = ConfiguratorMetrics(started_at=datetime.now())
        self._lock = threading.Lock()

    def record_level_change(self, created: bool = False) -> None:
        """
        Record one applied level change.

        Args:
            created: True if the change inserted a new LoggerConfig
        """
        with self._lock:
            self._metrics.level_changes += 1
            if created:
                self._metrics.loggers_created += 1
            self._metrics.last_change_at = datetime.now()

    def record_noop(self) -> None:
        """Record a request whose level was already in effect."""
        with self._lock:
            self._metrics.noop_requests += 1

    def record_propagation(self) -> None:
        with self._lock:
            self._metrics.propagations += 1

    def record_resolved(self) -> None:
        with self._lock:
            self._metrics.contexts_resolved += 1

    def record_resolution_failure(self, kind: str) -> None:
        """
        Record a failed context resolution.

        Args:
            kind: Error kind, e.g. "incompatible_factory"
        """
        with self._lock:
            failures = self._metrics.resolution_failures
            failures[kind] = failures.get(kind, 0) + 1

    def record_shutdown(self) -> None:
        with self._lock:
            self._metrics.shutdowns += 1

    def get_metrics(self) -> ConfiguratorMetrics:
        """
        Get current metrics snapshot.

        Returns:
            Copy of current ConfiguratorMetrics
        """
        with self._lock:
            m = self._metrics
            return ConfiguratorMetrics(
                level_changes=m.level_changes,
                noop_requests=m.noop_requests,
                loggers_created=m.loggers_created,
                propagations=m.propagations,
                contexts_resolved=m.contexts_resolved,
                resolution_failures=dict(m.resolution_failures),
                shutdowns=m.shutdowns,
                started_at=m.started_at,
                last_change_at=m.last_change_at,
            )

    def reset(self) -> None:
        """Reset all metrics to initial values."""
        with self._lock:
            self._metrics = ConfiguratorMetrics(started_at=datetime.now())
