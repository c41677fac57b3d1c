from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from enum import Enum
from typing import Optional

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_ONE_MS = timedelta(milliseconds=1)


def to_epoch_ms(value: datetime) -> int:
    return -((EPOCH - value) // _ONE_MS)


def from_epoch_ms(value: int) -> datetime:
    return EPOCH + timedelta(milliseconds=value)


@dataclass(frozen=True, slots=True)
class PersistedState:
    last_query_time: Optional[datetime]
    last_response_time: Optional[datetime]

    @classmethod
    def empty(cls) -> "PersistedState":
        return cls(last_query_time=None, last_response_time=None)

    @property
    def awaiting_response(self) -> bool:
        if self.last_query_time is None:
            return False
        if self.last_response_time is None:
            return True
        return self.last_response_time < self.last_query_time


@dataclass(frozen=True, slots=True)
class RuntimeParameters:
    min_interval: timedelta
    clock_tolerance: timedelta
    max_reception_delay: timedelta

    @classmethod
    def from_min_interval(
        cls,
        min_interval: timedelta,
        max_reception_delay: timedelta,
        *,
        drift_ppm: int = 40,
    ) -> "RuntimeParameters":
        return cls(
            min_interval=min_interval,
            clock_tolerance=min_interval * drift_ppm / 1_000_000,
            max_reception_delay=max_reception_delay,
        )

    @property
    def effective_interval(self) -> timedelta:
        return self.min_interval + self.clock_tolerance

    @property
    def worst_case_wait(self) -> timedelta:
        return self.effective_interval + self.max_reception_delay


# Provider limit of one query per 5 minutes, with 20 ppm of assumed drift on
# each side and a 1 minute ceiling on the time for a query to reach the API.
DEFAULT_PARAMETERS = RuntimeParameters.from_min_interval(
    min_interval=timedelta(minutes=5),
    max_reception_delay=timedelta(minutes=1),
)


class LoadStatus(Enum):
    OK = "ok"
    ABSENT = "absent"
    CORRUPTED = "corrupted"


@dataclass(frozen=True, slots=True)
class LoadResult:
    status: LoadStatus
    state: PersistedState

    @classmethod
    def ok(cls, state: PersistedState) -> "LoadResult":
        return cls(status=LoadStatus.OK, state=state)

    @classmethod
    def absent(cls) -> "LoadResult":
        return cls(status=LoadStatus.ABSENT, state=PersistedState.empty())

    @classmethod
    def corrupted(cls) -> "LoadResult":
        return cls(status=LoadStatus.CORRUPTED, state=PersistedState.empty())
