from datetime import timedelta

from ratepoll.config.settings import (
    LoggingSettings,
    RedisSettings,
    Settings,
    StateSettings,
    TransportSettings,
)
from ratepoll.core.schema.state import RuntimeParameters

TEST_TARGET = "https://api.example.test/status"

# Effective interval of 300080 ms and a 60000 ms reception ceiling.
TEST_PARAMETERS = RuntimeParameters(
    min_interval=timedelta(minutes=5),
    clock_tolerance=timedelta(milliseconds=80),
    max_reception_delay=timedelta(minutes=1),
)


def get_test_settings() -> Settings:
    return Settings(
        transport=TransportSettings(
            target_url=TEST_TARGET,
            request_timeout=5.0,
        ),
        logging=LoggingSettings(
            backend="console",
            name="ratepoll-test",
            level="DEBUG",
            logfire_token=None,
        ),
        state=StateSettings(
            backend="file",
            base_dir="/tmp/ratepoll-test-state",
            redis=RedisSettings(host="localhost", port=6379, db=0, timeout=1.0),
        ),
    )
