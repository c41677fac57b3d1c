from datetime import datetime, timedelta

from ratepoll.core.ports.clock import Clock


class FakeClock(Clock):
    def __init__(self, start: datetime, tick: timedelta = timedelta(0)) -> None:
        self._now = start
        self._tick = tick
        self.slept: list[float] = []

    def now(self) -> datetime:
        current = self._now
        self._now = self._now + self._tick
        return current

    def sleep(self, seconds: float) -> None:
        self.slept.append(seconds)
        self._now = self._now + timedelta(seconds=seconds)

    def advance(self, delta: timedelta) -> None:
        self._now = self._now + delta

    @property
    def current(self) -> datetime:
        return self._now
