"""AppLogger implementations: a no-op default and a loguru adapter."""

from __future__ import annotations

import sys
from typing import Any

from loguru import logger as _loguru_logger


class NullLogger:
    """Discards every call. Used wherever no logger was injected."""

    def debug(self, message: str, *args: Any) -> None:
        pass

    def info(self, message: str, *args: Any) -> None:
        pass

    def warning(self, message: str, *args: Any) -> None:
        pass

    def error(self, message: str, *args: Any, exc: BaseException | None = None) -> None:
        pass


class LoguruLogger:
    """Forward AppLogger calls to loguru, tagged with a ``component`` extra."""

    def __init__(self, component: str = "confmigrate", base_logger: Any = None):
        base = base_logger if base_logger is not None else _loguru_logger
        self._logger = base.bind(component=component)
        self.component = component

    def debug(self, message: str, *args: Any) -> None:
        self._logger.opt(depth=1).debug(message, *args)

    def info(self, message: str, *args: Any) -> None:
        self._logger.opt(depth=1).info(message, *args)

    def warning(self, message: str, *args: Any) -> None:
        self._logger.opt(depth=1).warning(message, *args)

    def error(self, message: str, *args: Any, exc: BaseException | None = None) -> None:
        if exc is not None:
            self._logger.opt(depth=1, exception=exc).error(message, *args)
        else:
            self._logger.opt(depth=1).error(message, *args)


def configure_logging(level: str = "INFO") -> None:
    """Route loguru output to stderr at ``level``, replacing existing sinks."""
    _loguru_logger.remove()
    _loguru_logger.configure(extra={"component": "-"})
    _loguru_logger.add(
        sys.stderr,
        level=level.upper(),
        format="<green>{time:HH:mm:ss.SSS}</green> | <level>{level: <8}</level> | "
        "{extra[component]} | {message}",
    )
