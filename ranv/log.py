"""Engine and client loggers writing coloured lines to standard output."""

from __future__ import annotations

import logging
import sys
from typing import Any

TRACE = 5
logging.addLevelName(TRACE, "TRACE")

CORE_LOGGER_NAME = "RANV"
CLIENT_LOGGER_NAME = "APP"

_PATTERN = " [%(asctime)s] %(name)s: %(message)s "
_DATE_FORMAT = "%H:%M:%S"
_RESET = "\033[0m"
_COLORS = {
    TRACE: "\033[37m",
    logging.DEBUG: "\033[36m",
    logging.INFO: "\033[32m",
    logging.WARNING: "\033[33m\033[1m",
    logging.ERROR: "\033[31m\033[1m",
    logging.CRITICAL: "\033[1m\033[41m",
}


class EngineLogger(logging.LoggerAdapter):
    """Logger adapter that adds a ``trace`` level below ``debug``."""

    def trace(self, msg: Any, *args: Any, **kwargs: Any) -> None:
        self.log(TRACE, msg, *args, **kwargs)


class _ColorFormatter(logging.Formatter):
    def __init__(self, use_color: bool) -> None:
        super().__init__(_PATTERN, datefmt=_DATE_FORMAT)
        self._use_color = use_color

    def format(self, record: logging.LogRecord) -> str:
        text = super().format(record)
        color = _COLORS.get(record.levelno) if self._use_color else None
        return f"{color}{text}{_RESET}" if color else text


_core = EngineLogger(logging.getLogger(CORE_LOGGER_NAME), {})
_client = EngineLogger(logging.getLogger(CLIENT_LOGGER_NAME), {})
_handlers: dict[str, logging.Handler] = {}


def init() -> None:
    """Attach a stdout handler to both loggers and open them to every level."""
    stream = sys.stdout
    isatty = getattr(stream, "isatty", None)
    use_color = bool(isatty and isatty())
    for adapter in (_core, _client):
        logger = adapter.logger
        previous = _handlers.pop(logger.name, None)
        if previous is not None:
            logger.removeHandler(previous)
        handler = logging.StreamHandler(stream)
        handler.setFormatter(_ColorFormatter(use_color))
        logger.addHandler(handler)
        logger.setLevel(TRACE)
        logger.propagate = False
        _handlers[logger.name] = handler


def core_logger() -> EngineLogger:
    """Logger used by the engine itself."""
    return _core


def client_logger() -> EngineLogger:
    """Logger used by applications built on the engine."""
    return _client