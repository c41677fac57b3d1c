from typing import Protocol, runtime_checkable


@runtime_checkable
class StatusNotifier(Protocol):
    def notify(self, status: str) -> None:
        ...
