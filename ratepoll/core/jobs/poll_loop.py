from dataclasses import replace
from datetime import datetime
from typing import Optional

from ratepoll.core.exceptions import StateWriteError, TransportError
from ratepoll.core.jobs.base import BaseJob
from ratepoll.core.ports.clock import Clock
from ratepoll.core.ports.logger import Logger
from ratepoll.core.ports.notifier import StatusNotifier
from ratepoll.core.ports.polling_state import PollingState
from ratepoll.core.ports.transport import Transport
from ratepoll.core.scheduling import ScheduleClock
from ratepoll.core.schema.outcome import (
    Continue,
    IterationOutcome,
    IterationState,
    Stop,
)
from ratepoll.core.schema.response import HttpResponse
from ratepoll.core.schema.state import (
    DEFAULT_PARAMETERS,
    LoadStatus,
    PersistedState,
    RuntimeParameters,
)
from ratepoll.core.status import extract_status


def _iso(value: Optional[datetime]) -> Optional[str]:
    return value.isoformat() if value is not None else None


class PollLoop(BaseJob):
    def __init__(
        self,
        logger: Logger,
        clock: Clock,
        transport: Transport,
        polling_state: PollingState,
        notifier: StatusNotifier,
        *,
        target: str,
        parameters: RuntimeParameters = DEFAULT_PARAMETERS,
    ) -> None:
        super().__init__(logger, clock)
        self._transport = transport
        self._polling_state = polling_state
        self._notifier = notifier
        self._target = target
        self._parameters = parameters
        self._schedule = ScheduleClock(parameters)
        self._state = PersistedState.empty()
        self._last_observed_status: Optional[str] = None
        self._iteration_state = IterationState.AWAITING_SCHEDULE

    @property
    def state(self) -> PersistedState:
        return self._state

    @property
    def iteration_state(self) -> IterationState:
        return self._iteration_state

    @property
    def last_observed_status(self) -> Optional[str]:
        return self._last_observed_status

    def setup(self) -> None:
        result = self._polling_state.load()
        if result.status is LoadStatus.CORRUPTED:
            delay = self._parameters.worst_case_wait
            self._logger.warning(
                "Persisted poll state is corrupted, delaying first query",
                delay_seconds=delay.total_seconds(),
            )
            self._sleep(delay.total_seconds())
        self._state = result.state
        self._last_observed_status = None
        self._iteration_state = IterationState.AWAITING_SCHEDULE
        self._logger.info(
            "Polling initialized",
            load_status=result.status.value,
            last_query_time=_iso(self._state.last_query_time),
            last_response_time=_iso(self._state.last_response_time),
            target=self._target,
        )

    def execute_once(self) -> IterationOutcome:
        self._iteration_state = IterationState.AWAITING_SCHEDULE
        wait = self._schedule.compute_wait(self._state, self._clock.now())
        self._logger.debug(
            "Waiting before next query",
            wait_seconds=wait.total_seconds(),
            anchor=self._schedule.anchor(self._state).value,
        )
        self._sleep(wait.total_seconds())

        self._state = replace(self._state, last_query_time=self._clock.now())
        self._persist()
        self._iteration_state = IterationState.QUERY_SENT
        self._logger.debug(
            "Sending query",
            target=self._target,
            last_query_time=_iso(self._state.last_query_time),
        )

        try:
            response = self._transport.send(self._target)
        except TransportError as error:
            self._record_response()
            self._iteration_state = IterationState.TRANSPORT_ERROR
            self._logger.warning(
                "Query failed at transport level",
                target=self._target,
                error=str(error),
                error_type=type(error).__name__,
            )
            return Continue(IterationState.TRANSPORT_ERROR)
        except Exception as error:
            self._logger.exception(
                "Query failed with unexpected error",
                target=self._target,
                error=str(error),
            )
            return Stop(error)

        self._record_response()
        self._iteration_state = IterationState.RESPONSE_RECEIVED
        self._report_status(response)
        return Continue(IterationState.RESPONSE_RECEIVED)

    def teardown(self) -> None:
        self._logger.info(
            "Polling finished",
            iteration_state=self._iteration_state.value,
            last_query_time=_iso(self._state.last_query_time),
            last_response_time=_iso(self._state.last_response_time),
        )

    def _record_response(self) -> None:
        self._state = replace(self._state, last_response_time=self._clock.now())
        self._persist()

    def _persist(self) -> None:
        try:
            self._polling_state.store(self._state)
        except StateWriteError as error:
            self._logger.warning(
                "Failed to persist poll state",
                key=error.key,
                error=str(error),
            )

    def _report_status(self, response: HttpResponse) -> None:
        status = extract_status(response.payload)
        self._logger.info(
            "Query answered",
            status_code=response.status_code,
            url=response.url,
            status=status,
        )
        if status is None or status == self._last_observed_status:
            return
        self._last_observed_status = status
        self._notifier.notify(status)
