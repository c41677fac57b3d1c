from ratepoll.infra.clock import SystemClock
from ratepoll.infra.http import RequestsTransport
from ratepoll.infra.logging import ConsoleLogger, LogfireLogger, configure_logfire
from ratepoll.infra.notify import LoggerStatusNotifier
from ratepoll.infra.state import FileStateStore, PollingStateStore, RedisStateStore

__all__ = [
    'RequestsTransport',
    'ConsoleLogger',
    'LogfireLogger',
    'configure_logfire',
    'LoggerStatusNotifier',
    'SystemClock',
    'FileStateStore',
    'RedisStateStore',
    'PollingStateStore',
]
