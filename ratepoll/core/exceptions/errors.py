from typing import Optional


class RatePollError(Exception):
    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class TransportError(RatePollError):
    def __init__(self, message: str, target: Optional[str] = None) -> None:
        self.target = target
        super().__init__(message)


class TransportTimeoutError(TransportError):
    pass


class HttpStatusError(TransportError):
    def __init__(
        self,
        message: str,
        status_code: int,
        target: Optional[str] = None,
    ) -> None:
        self.status_code = status_code
        super().__init__(message, target)


class StateError(RatePollError):
    def __init__(self, message: str, key: str) -> None:
        self.key = key
        super().__init__(message)


class StateReadError(StateError):
    pass


class StateWriteError(StateError):
    pass
