from typing import Protocol, runtime_checkable

from ratepoll.core.schema.state import LoadResult, PersistedState


@runtime_checkable
class PollingState(Protocol):
    def load(self) -> LoadResult: ...

    def store(self, state: PersistedState) -> None: ...
