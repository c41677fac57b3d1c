from typing import Protocol, runtime_checkable

from ratepoll.core.schema.response import HttpResponse


@runtime_checkable
class Transport(Protocol):
    def send(self, target: str) -> HttpResponse:
        ...
