"""Structured logging for the ratings service.

Both structlog loggers and plain stdlib loggers (uvicorn, psycopg) end up
on one stdout handler, rendered as JSON lines or as console output
depending on ``Settings.log_format``. Every line carries the app name and
version plus whatever request context the middleware has bound.
"""

import logging
import sys
from functools import lru_cache

import structlog

from ratings_spine import __version__
from ratings_spine.core.settings import Settings, get_settings

APP_NAME = "ratings-spine"

_HANDLER_NAME = "ratings_spine"

# uvicorn's access log duplicates request_completed from the middleware.
_QUIET_LOGGERS = {
    "uvicorn.access": logging.WARNING,
    "psycopg.pool": logging.WARNING,
}


def _add_app_info(logger, method_name, event_dict):
    event_dict.setdefault("app", APP_NAME)
    event_dict.setdefault("version", __version__)
    return event_dict


def _shared_processors() -> list:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        _add_app_info,
    ]


def _renderer(settings: Settings):
    if settings.log_format == "json":
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty())


def configure_logging(settings: Settings | None = None) -> None:
    """Route structlog and stdlib logging through a single stdout handler.

    Safe to call more than once; each call replaces the handler installed
    by the previous one and leaves other root handlers alone.
    """
    settings = settings or get_settings()
    shared = _shared_processors()

    structlog.configure(
        processors=[
            *shared,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=shared,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                _renderer(settings),
            ],
        )
    )

    root = logging.getLogger()
    for existing in root.handlers[:]:
        if existing.get_name() == _HANDLER_NAME:
            root.removeHandler(existing)
    root.addHandler(handler)
    root.setLevel(getattr(logging, settings.log_level.upper(), logging.INFO))

    for name, level in _QUIET_LOGGERS.items():
        logging.getLogger(name).setLevel(level)


@lru_cache(maxsize=100)
def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a logger instance."""
    return structlog.get_logger(name)


def bind_context(**kwargs) -> None:
    """Bind context variables for structured logging."""
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_context() -> None:
    """Clear context variables."""
    structlog.contextvars.clear_contextvars()
