from contextlib import ExitStack
from dataclasses import replace
from pathlib import Path

import pytest

from ratepoll import setup
from ratepoll.config import Settings
from ratepoll.infra import ConsoleLogger, FileStateStore, RedisStateStore
from tests.fakes import FakeLogger


class _InterruptedLoop:
    def __init__(self) -> None:
        self.stopped = False

    def run(self) -> None:
        raise KeyboardInterrupt

    def stop(self) -> None:
        self.stopped = True


class TestBuildLogger:
    def test_console_backend(self, test_settings: Settings) -> None:
        assert isinstance(setup._build_logger(test_settings), ConsoleLogger)

    def test_logfire_backend_requires_token(self, test_settings: Settings) -> None:
        settings = replace(
            test_settings,
            logging=replace(test_settings.logging, backend="logfire"),
        )

        with pytest.raises(ValueError, match="RATEPOLL_LOGFIRE_TOKEN"):
            setup._build_logger(settings)

    def test_unknown_backend(self, test_settings: Settings) -> None:
        settings = replace(
            test_settings,
            logging=replace(test_settings.logging, backend="syslog"),
        )

        with pytest.raises(ValueError, match="syslog"):
            setup._build_logger(settings)


class TestBuildStateStore:
    def test_file_backend(self, test_settings: Settings, tmp_path: Path) -> None:
        settings = replace(
            test_settings,
            state=replace(test_settings.state, base_dir=str(tmp_path)),
        )

        with ExitStack() as stack:
            store = setup._build_state_store(settings, stack)

        assert isinstance(store, FileStateStore)
        assert store.path_for("poll_state").parent == tmp_path

    def test_redis_backend(self, test_settings: Settings) -> None:
        settings = replace(
            test_settings,
            state=replace(test_settings.state, backend="redis"),
        )

        with ExitStack() as stack:
            store = setup._build_state_store(settings, stack)

        assert isinstance(store, RedisStateStore)
        pool_kwargs = store._redis.connection_pool.connection_kwargs
        assert pool_kwargs["socket_timeout"] == test_settings.state.redis.timeout
        assert pool_kwargs["socket_connect_timeout"] == test_settings.state.redis.timeout

    def test_unknown_backend(self, test_settings: Settings) -> None:
        settings = replace(
            test_settings,
            state=replace(test_settings.state, backend="sqlite"),
        )

        with ExitStack() as stack, pytest.raises(ValueError, match="sqlite"):
            setup._build_state_store(settings, stack)


class TestRunLoop:
    def test_keyboard_interrupt_stops_loop(self) -> None:
        logger = FakeLogger()
        loop = _InterruptedLoop()

        setup._run_loop(logger, loop)

        assert loop.stopped
        assert "Shutdown requested" in logger.messages("info")
