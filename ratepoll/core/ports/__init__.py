from ratepoll.core.ports.clock import Clock
from ratepoll.core.ports.logger import Logger
from ratepoll.core.ports.notifier import StatusNotifier
from ratepoll.core.ports.polling_state import PollingState
from ratepoll.core.ports.state_store import StateStore
from ratepoll.core.ports.transport import Transport

__all__ = [
    "Logger",
    "Clock",
    "Transport",
    "StatusNotifier",
    "PollingState",
    "StateStore",
]
