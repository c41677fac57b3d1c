from typing import Protocol, runtime_checkable


@runtime_checkable
class Logger(Protocol):
    def debug(self, message: str, **context: object) -> None: ...

    def info(self, message: str, **context: object) -> None: ...

    def warning(self, message: str, **context: object) -> None: ...

    def error(self, message: str, **context: object) -> None: ...

    def exception(self, message: str, **context: object) -> None: ...
