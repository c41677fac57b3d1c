import json
import math
from datetime import datetime
from typing import Any, Optional

from ratepoll.core.ports.polling_state import PollingState
from ratepoll.core.ports.state_store import StateStore
from ratepoll.core.schema.state import (
    LoadResult,
    PersistedState,
    from_epoch_ms,
    to_epoch_ms,
)

QUERY_TIME_FIELD = "lastAPIQueryTime"
RESPONSE_TIME_FIELD = "lastAPIResponseTime"


class _MalformedState(ValueError):
    pass


class PollingStateStore(PollingState):
    STATE_KEY = "poll_state"

    def __init__(self, state_store: StateStore) -> None:
        self._state_store = state_store

    def load(self) -> LoadResult:
        stored = self._state_store.read(self.STATE_KEY)
        if stored is None:
            return LoadResult.absent()
        if not stored.strip():
            return LoadResult.corrupted()
        try:
            return LoadResult.ok(self._deserialize(stored))
        except _MalformedState:
            return LoadResult.corrupted()

    def store(self, state: PersistedState) -> None:
        self._state_store.write(self.STATE_KEY, self._serialize(state))

    def _serialize(self, state: PersistedState) -> str:
        body = {
            QUERY_TIME_FIELD: _ms_or_none(state.last_query_time),
            RESPONSE_TIME_FIELD: _ms_or_none(state.last_response_time),
        }
        return json.dumps(body, indent=2)

    def _deserialize(self, stored: str) -> PersistedState:
        try:
            parsed = json.loads(stored)
        except ValueError as error:
            raise _MalformedState("state is not valid JSON") from error
        if not isinstance(parsed, dict):
            raise _MalformedState("state is not a JSON object")
        return PersistedState(
            last_query_time=_timestamp_field(parsed, QUERY_TIME_FIELD),
            last_response_time=_timestamp_field(parsed, RESPONSE_TIME_FIELD),
        )


def _ms_or_none(value: Optional[datetime]) -> Optional[int]:
    return to_epoch_ms(value) if value is not None else None


def _timestamp_field(parsed: dict[str, Any], name: str) -> Optional[datetime]:
    value = parsed.get(name)
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise _MalformedState(f"{name} is not a number")
    if not math.isfinite(value) or value < 0:
        raise _MalformedState(f"{name} is out of range")
    try:
        return from_epoch_ms(math.ceil(value))
    except OverflowError as error:
        raise _MalformedState(f"{name} is out of range") from error
