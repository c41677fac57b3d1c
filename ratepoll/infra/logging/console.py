import logging
import sys
from datetime import datetime, timedelta
from typing import Any, Optional, TextIO

from ratepoll.core.ports.logger import Logger

_FORMAT = '%(asctime)s %(levelname)s %(name)s: %(message)s'


def _render(value: Any) -> str:
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, timedelta):
        return f'{value.total_seconds():.3f}s'
    return repr(value)


class _KeyValueFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        base = super().format(record)
        context = getattr(record, 'context', None)
        if not context:
            return base
        pairs = ' '.join(
            f'{key}={_render(value)}'
            for key, value in context.items()
            if value is not None
        )
        return f'{base} | {pairs}' if pairs else base


class ConsoleLogger(Logger):
    def __init__(
        self,
        name: str,
        level: str = 'INFO',
        stream: Optional[TextIO] = None,
    ) -> None:
        self._logger = logging.getLogger(name)
        self._logger.setLevel(logging.getLevelName(level.upper()))
        if not self._logger.handlers:
            handler = logging.StreamHandler(stream or sys.stderr)
            handler.setFormatter(_KeyValueFormatter(_FORMAT))
            self._logger.addHandler(handler)
        self._logger.propagate = False

    def debug(self, message: str, **context: Any) -> None:
        self._log(logging.DEBUG, message, context)

    def info(self, message: str, **context: Any) -> None:
        self._log(logging.INFO, message, context)

    def warning(self, message: str, **context: Any) -> None:
        self._log(logging.WARNING, message, context)

    def error(self, message: str, **context: Any) -> None:
        self._log(logging.ERROR, message, context)

    def exception(self, message: str, **context: Any) -> None:
        self._logger.exception(message, extra={'context': context})

    def _log(self, level: int, message: str, context: dict[str, Any]) -> None:
        self._logger.log(level, message, extra={'context': context})
