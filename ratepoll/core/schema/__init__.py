from ratepoll.core.schema.outcome import (
    Continue,
    IterationOutcome,
    IterationState,
    Stop,
)
from ratepoll.core.schema.response import HttpResponse
from ratepoll.core.schema.state import (
    DEFAULT_PARAMETERS,
    LoadResult,
    LoadStatus,
    PersistedState,
    RuntimeParameters,
)

__all__ = [
    "PersistedState",
    "RuntimeParameters",
    "DEFAULT_PARAMETERS",
    "LoadStatus",
    "LoadResult",
    "HttpResponse",
    "IterationState",
    "IterationOutcome",
    "Continue",
    "Stop",
]
