from ratepoll.core.exceptions.errors import (
    HttpStatusError,
    RatePollError,
    StateError,
    StateReadError,
    StateWriteError,
    TransportError,
    TransportTimeoutError,
)

__all__ = [
    "RatePollError",
    "TransportError",
    "TransportTimeoutError",
    "HttpStatusError",
    "StateError",
    "StateReadError",
    "StateWriteError",
]
