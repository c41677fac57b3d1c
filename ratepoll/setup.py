import signal
from contextlib import ExitStack

from ratepoll.config import Settings, load_settings
from ratepoll.core.jobs import PollLoop
from ratepoll.core.ports import Logger, StateStore
from ratepoll.core.schema import DEFAULT_PARAMETERS
from ratepoll.infra import (
    ConsoleLogger,
    FileStateStore,
    LogfireLogger,
    LoggerStatusNotifier,
    PollingStateStore,
    RedisStateStore,
    RequestsTransport,
    SystemClock,
    configure_logfire,
)


def main() -> None:
    settings = load_settings()
    logger = _build_logger(settings)
    clock = SystemClock()
    signal.signal(signal.SIGTERM, signal.default_int_handler)

    with ExitStack() as stack:
        state_store = _build_state_store(settings, stack)
        transport = stack.enter_context(
            RequestsTransport(timeout=settings.transport.request_timeout)
        )
        poll_loop = PollLoop(
            logger=logger,
            clock=clock,
            transport=transport,
            polling_state=PollingStateStore(state_store),
            notifier=LoggerStatusNotifier(logger),
            target=settings.transport.target_url,
            parameters=DEFAULT_PARAMETERS,
        )
        _run_loop(logger, poll_loop)


def _build_logger(settings: Settings) -> Logger:
    if settings.logging.backend == 'console':
        return ConsoleLogger(settings.logging.name, level=settings.logging.level)
    if settings.logging.backend == 'logfire':
        if not settings.logging.logfire_token:
            raise ValueError(
                'Logfire backend selected but RATEPOLL_LOGFIRE_TOKEN is not set'
            )
        configure_logfire(settings.logging.logfire_token, settings.logging.name)
        return LogfireLogger(settings.logging.name)
    raise ValueError(f'Unknown logging backend {settings.logging.backend}')


def _build_state_store(settings: Settings, stack: ExitStack) -> StateStore:
    if settings.state.backend == 'file':
        return FileStateStore(settings.state.base_dir)
    if settings.state.backend == 'redis':
        redis_settings = settings.state.redis
        store = RedisStateStore.connect(
            host=redis_settings.host,
            port=redis_settings.port,
            db=redis_settings.db,
            timeout=redis_settings.timeout,
        )
        stack.callback(store.close)
        return store
    raise ValueError(f'Unknown state backend {settings.state.backend}')


def _run_loop(logger: Logger, poll_loop: PollLoop) -> None:
    try:
        poll_loop.run()
    except KeyboardInterrupt:
        logger.info('Shutdown requested')
    finally:
        poll_loop.stop()


if __name__ == '__main__':
    main()
