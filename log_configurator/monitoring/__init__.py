"""
Monitoring module for configurator metrics

Example:
    from log_configurator import LevelController
    from log_configurator.monitoring import MetricsCollector

    metrics = MetricsCollector()
    controller = LevelController(resolver, metrics=metrics)
    controller.set_level("com.foo", LogLevel.DEBUG)

    print(metrics.get_metrics().to_dict())
"""

from log_configurator.monitoring.metrics import ConfiguratorMetrics, MetricsCollector

__all__ = ["ConfiguratorMetrics", "MetricsCollector"]
