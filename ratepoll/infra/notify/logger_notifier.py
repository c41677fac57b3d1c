from ratepoll.core.ports.logger import Logger
from ratepoll.core.ports.notifier import StatusNotifier


class LoggerStatusNotifier(StatusNotifier):
    def __init__(self, logger: Logger) -> None:
        self._logger = logger

    def notify(self, status: str) -> None:
        self._logger.info("Status changed", status=status)
