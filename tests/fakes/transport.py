from collections.abc import Iterable
from typing import Callable, Optional, Union

from ratepoll.core.ports.transport import Transport
from ratepoll.core.schema.response import HttpResponse

Step = Union[HttpResponse, BaseException]


def json_response(payload: object, status_code: int = 200) -> HttpResponse:
    return HttpResponse(
        status_code=status_code,
        payload=payload,
        url="https://api.example.test/status",
    )


class ScriptedTransport(Transport):
    def __init__(
        self,
        steps: Iterable[Step],
        on_send: Optional[Callable[[str], None]] = None,
    ) -> None:
        self._steps = list(steps)
        self._on_send = on_send
        self.targets: list[str] = []

    def send(self, target: str) -> HttpResponse:
        self.targets.append(target)
        if self._on_send is not None:
            self._on_send(target)
        if not self._steps:
            raise LookupError("transport script exhausted")
        step = self._steps.pop(0)
        if isinstance(step, BaseException):
            raise step
        return step
