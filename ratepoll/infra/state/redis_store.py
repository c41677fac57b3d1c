from typing import Optional

from redis import Redis
from redis.exceptions import RedisError

from ratepoll.core.exceptions import StateReadError, StateWriteError
from ratepoll.core.ports.state_store import StateStore

DEFAULT_SOCKET_TIMEOUT = 5.0


class RedisStateStore(StateStore):
    def __init__(self, client: Redis, namespace: str = "ratepoll") -> None:
        self._redis = client
        self._namespace = namespace

    @classmethod
    def connect(
        cls,
        host: str = "localhost",
        port: int = 6379,
        db: int = 0,
        namespace: str = "ratepoll",
        timeout: float = DEFAULT_SOCKET_TIMEOUT,
    ) -> "RedisStateStore":
        client = Redis(
            host=host,
            port=port,
            db=db,
            socket_timeout=timeout,
            socket_connect_timeout=timeout,
        )
        return cls(client, namespace=namespace)

    def read(self, key: str) -> Optional[str]:
        try:
            value = self._redis.get(self._key(key))
        except RedisError as error:
            raise StateReadError(f"Failed to read {key} from redis", key) from error
        if value is None:
            return None
        if isinstance(value, bytes):
            return value.decode("utf-8", errors="replace")
        return value

    def write(self, key: str, value: str) -> None:
        try:
            self._redis.set(self._key(key), value)
        except RedisError as error:
            raise StateWriteError(f"Failed to write {key} to redis", key) from error

    def close(self) -> None:
        self._redis.close()

    def _key(self, key: str) -> str:
        return f"{self._namespace}:state:{key}"
