from dataclasses import dataclass
from enum import Enum
from typing import Union


class IterationState(Enum):
    AWAITING_SCHEDULE = "awaiting_schedule"
    QUERY_SENT = "query_sent"
    RESPONSE_RECEIVED = "response_received"
    TRANSPORT_ERROR = "transport_error"


@dataclass(frozen=True, slots=True)
class Continue:
    state: IterationState


@dataclass(frozen=True, slots=True)
class Stop:
    error: Exception


IterationOutcome = Union[Continue, Stop]
