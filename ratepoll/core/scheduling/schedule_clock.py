from datetime import datetime, timedelta
from enum import Enum

from ratepoll.core.schema.state import PersistedState, RuntimeParameters

NO_WAIT = timedelta(0)


class ScheduleAnchor(Enum):
    NONE = "none"
    RESPONSE = "response"
    QUERY = "query"


class ScheduleClock:
    """Decides how long to wait before the next query is safe to send.

    The remote side measures the interval between the moments it *receives*
    our queries. When the last query got a response we know it was received
    before ``last_response_time``, so waiting ``effective_interval`` from that
    instant is enough. Without a response we only know when the query left,
    so the wait is measured from ``last_query_time`` and widened by
    ``max_reception_delay``.
    """

    def __init__(self, parameters: RuntimeParameters) -> None:
        self._parameters = parameters

    @property
    def parameters(self) -> RuntimeParameters:
        return self._parameters

    def anchor(self, state: PersistedState) -> ScheduleAnchor:
        if state.last_query_time is None:
            return ScheduleAnchor.NONE
        if state.awaiting_response:
            return ScheduleAnchor.QUERY
        return ScheduleAnchor.RESPONSE

    def compute_wait(self, state: PersistedState, now: datetime) -> timedelta:
        anchor = self.anchor(state)
        if anchor is ScheduleAnchor.NONE:
            return NO_WAIT
        if anchor is ScheduleAnchor.RESPONSE:
            assert state.last_response_time is not None
            return self._remaining(
                self._parameters.effective_interval,
                now - state.last_response_time,
            )
        assert state.last_query_time is not None
        return self._remaining(
            self._parameters.worst_case_wait,
            now - state.last_query_time,
        )

    @staticmethod
    def _remaining(required: timedelta, elapsed: timedelta) -> timedelta:
        return max(NO_WAIT, required - elapsed)
