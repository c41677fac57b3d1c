from ratepoll.infra.state.file_store import FileStateStore
from ratepoll.infra.state.polling_state import PollingStateStore
from ratepoll.infra.state.redis_store import RedisStateStore

__all__ = ["FileStateStore", "RedisStateStore", "PollingStateStore"]
