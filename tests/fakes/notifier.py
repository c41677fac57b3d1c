from ratepoll.core.ports.notifier import StatusNotifier


class RecordingNotifier(StatusNotifier):
    def __init__(self) -> None:
        self.statuses: list[str] = []

    def notify(self, status: str) -> None:
        self.statuses.append(status)
