"""Basic usage example for log configurator"""

from log_configurator import (
    ConfigurationSource,
    ContextResolver,
    DefaultContextFactory,
    LevelController,
    LogLevel,
)
from log_configurator.monitoring import MetricsCollector
from log_configurator.writers import ConsoleWriter

CONFIG = """
{
    "name": "example",
    "root": {"level": "WARN"},
    "loggers": {"app.db": {"level": "INFO"}}
}
"""

metrics = MetricsCollector()
controller = LevelController(ContextResolver(DefaultContextFactory()), metrics=metrics)

context = controller.initialize(name="example", source=ConfigurationSource.from_string(CONFIG))
context.add_writer(ConsoleWriter(colored=True))

db = context.get_logger("app.db.pool")
web = context.get_logger("app.web")

db.debug("hidden: app.db is at INFO")
web.info("hidden: root is at WARN")

# Turn up verbosity without reloading
controller.set_levels({"app.db": LogLevel.DEBUG, "app.web": LogLevel.INFO}, context)

db.debug("now visible")
web.info("now visible")

print(metrics.get_metrics().to_dict())
controller.shutdown(context)
