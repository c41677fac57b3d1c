from abc import ABC, abstractmethod
from typing import final

from ratepoll.core.ports.clock import Clock
from ratepoll.core.ports.logger import Logger
from ratepoll.core.schema.outcome import IterationOutcome, Stop


class BaseJob(ABC):
    def __init__(self, logger: Logger, clock: Clock) -> None:
        self._logger = logger
        self._clock = clock
        self._running = False

    @final
    def run(self) -> None:
        job_name = self.__class__.__name__
        self._running = True
        self._logger.info("Job starting", job=job_name)
        try:
            self.setup()
            while self._running and self.should_continue():
                outcome = self.execute_once()
                if isinstance(outcome, Stop):
                    raise outcome.error
        finally:
            try:
                self.teardown()
            finally:
                self._running = False
                self._logger.info("Job stopping", job=job_name)

    @abstractmethod
    def setup(self) -> None: ...

    @abstractmethod
    def execute_once(self) -> IterationOutcome: ...

    @abstractmethod
    def teardown(self) -> None: ...

    def should_continue(self) -> bool:
        return True

    def stop(self) -> None:
        self._running = False

    @property
    def running(self) -> bool:
        return self._running

    def _sleep(self, seconds: float) -> None:
        self._clock.sleep(seconds)
