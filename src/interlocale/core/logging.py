import logging
import sys
from typing import Any, TextIO

import structlog

from interlocale.core.config import Settings, get_settings

# Parent of every logger created through get_logger(__name__)
LIBRARY_LOGGER = "interlocale"

# Silent until the host application opts in through setup_logging()
logging.getLogger(LIBRARY_LOGGER).addHandler(logging.NullHandler())


class _LibraryHandler(logging.StreamHandler):  # type: ignore[type-arg]
    """Stream handler installed by setup_logging(), replaced on each call."""


def _renderer(settings: Settings) -> Any:
    if settings.ENVIRONMENT == "local":
        return structlog.dev.ConsoleRenderer(colors=True)
    return structlog.processors.JSONRenderer()


def setup_logging(settings: Settings | None = None, stream: TextIO = sys.stdout) -> None:
    """Route interlocale's structlog events to stream.

    Meant to be called once by the host application. Only the interlocale
    logger is configured; the root logger is left alone.
    """
    settings = settings or get_settings()
    log_level = logging.DEBUG if settings.DEBUG else logging.INFO

    library_logger = logging.getLogger(LIBRARY_LOGGER)
    for old in [h for h in library_logger.handlers if isinstance(h, _LibraryHandler)]:
        library_logger.removeHandler(old)
    handler = _LibraryHandler(stream)
    handler.setFormatter(logging.Formatter("%(message)s"))
    library_logger.addHandler(handler)
    library_logger.setLevel(log_level)
    library_logger.propagate = False

    processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]
    if settings.ENVIRONMENT != "local":
        processors.append(structlog.processors.format_exc_info)
    processors.append(_renderer(settings))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    # Wrap the stdlib logger directly so events go through the interlocale
    # logger hierarchy even when structlog is left unconfigured
    logger: structlog.stdlib.BoundLogger = structlog.wrap_logger(logging.getLogger(name))
    return logger
