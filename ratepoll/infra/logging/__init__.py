from ratepoll.infra.logging.console import ConsoleLogger
from ratepoll.infra.logging.logfire import LogfireLogger, configure_logfire

__all__ = ["ConsoleLogger", "LogfireLogger", "configure_logfire"]
