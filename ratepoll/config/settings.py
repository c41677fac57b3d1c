import os
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True, slots=True)
class TransportSettings:
    target_url: str
    request_timeout: float


@dataclass(frozen=True, slots=True)
class LoggingSettings:
    backend: str
    name: str
    level: str
    logfire_token: Optional[str]


@dataclass(frozen=True, slots=True)
class RedisSettings:
    host: str
    port: int
    db: int
    timeout: float


@dataclass(frozen=True, slots=True)
class StateSettings:
    backend: str
    base_dir: str
    redis: RedisSettings


@dataclass(frozen=True, slots=True)
class Settings:
    transport: TransportSettings
    logging: LoggingSettings
    state: StateSettings


def load_settings() -> Settings:
    from dotenv import find_dotenv, load_dotenv

    load_dotenv(find_dotenv(usecwd=True))

    target_url = _get_env_or_default("RATEPOLL_TARGET_URL")
    if not target_url:
        raise ValueError("RATEPOLL_TARGET_URL must be set to the endpoint to poll")
    request_timeout = _env_float("RATEPOLL_REQUEST_TIMEOUT", 30.0)

    logging_backend = _get_env_or_default("RATEPOLL_LOGGER_BACKEND", "console").lower()
    logging_name = _get_env_or_default("RATEPOLL_LOGGER_NAME", "ratepoll")
    logging_level = _get_env_or_default("RATEPOLL_LOG_LEVEL", "INFO").upper()
    logfire_token = _get_env_or_default("RATEPOLL_LOGFIRE_TOKEN")

    state_backend = _get_env_or_default("RATEPOLL_STATE_BACKEND", "file").lower()
    state_dir = _get_env_or_default("RATEPOLL_STATE_DIR", ".ratepoll/state")
    redis_host = _get_env_or_default("RATEPOLL_REDIS_HOST", "localhost")
    redis_port = _env_int("RATEPOLL_REDIS_PORT", 6379)
    redis_db = _env_int("RATEPOLL_REDIS_DB", 0)
    redis_timeout = _env_float("RATEPOLL_REDIS_TIMEOUT", 5.0)

    return Settings(
        transport=TransportSettings(
            target_url=target_url,
            request_timeout=request_timeout,
        ),
        logging=LoggingSettings(
            backend=logging_backend,
            name=logging_name,
            level=logging_level,
            logfire_token=logfire_token,
        ),
        state=StateSettings(
            backend=state_backend,
            base_dir=state_dir,
            redis=RedisSettings(
                host=redis_host,
                port=redis_port,
                db=redis_db,
                timeout=redis_timeout,
            ),
        ),
    )


def _get_env_or_default(name: str, default: Optional[str] = None) -> Optional[str]:
    value = os.getenv(name)
    if not value:
        return default
    return value


def _env_int(name: str, default: int) -> int:
    value = _get_env_or_default(name)
    if value is None:
        return default
    return int(value)


def _env_float(name: str, default: float) -> float:
    value = _get_env_or_default(name)
    if value is None:
        return default
    return float(value)
