"""
Logging setup shared by the showcase CLI, the query service and the sinks.

Two kinds of lines end up on stderr:

- diagnostics from modules under ``solid_showcase`` (query hits at DEBUG,
  demonstration failures at ERROR), and
- narration on the ``solid_showcase.activity`` logger, which is where a
  ``LoggingSink`` sends what the illustrations say they are doing.

Both go through a single root handler named ``default``. With ``LOG_JSON`` set
that handler writes one JSON object per line, and fields passed through
``extra=`` (``query``, ``argument``, ``matches``, ``demonstration`` ...) become
top-level keys.

Usage:
    from solid_showcase.utils.logging import configure_from_settings, get_logger

    configure_from_settings(get_settings())
    log = get_logger(__name__)
    log.debug("query", extra={"query": "find_by_metric", "matches": 2})
"""

from __future__ import annotations

import json
import logging
import logging.config
from typing import TYPE_CHECKING, Any, Dict, Iterator, Optional, Tuple

if TYPE_CHECKING:
    from solid_showcase.config import Settings

ACTIVITY_LOGGER = "solid_showcase.activity"
HANDLER_NAME = "default"
CONSOLE_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
CONSOLE_DATEFMT = "%Y-%m-%d %H:%M:%S"

# Attributes every LogRecord carries; anything else arrived through `extra=`.
_RESERVED_ATTRS = frozenset(
    vars(logging.LogRecord("", logging.INFO, "", 0, "", (), None)).keys()
) | {"message", "asctime", "extra"}


def _extra_fields(record: logging.LogRecord) -> Iterator[Tuple[str, Any]]:
    """Yield the fields a caller attached, flattening a nested ``extra`` dict last."""
    for key, value in vars(record).items():
        if key not in _RESERVED_ATTRS:
            yield key, value
    nested = getattr(record, "extra", None)
    if isinstance(nested, dict):
        yield from nested.items()


def _json_formatter(record: logging.LogRecord) -> str:
    payload: Dict[str, Any] = {
        "level": record.levelname,
        "logger": record.name,
        "message": record.getMessage(),
    }
    if record.exc_info:
        payload["exc_info"] = logging.Formatter().formatException(record.exc_info)
    if record.stack_info:
        payload["stack_info"] = record.stack_info
    payload.update(_extra_fields(record))
    # sets of metrics and pydantic models fall back to str()
    return json.dumps(payload, default=str)


class JsonFormatter(logging.Formatter):
    """One JSON object per record."""

    def format(self, record: logging.LogRecord) -> str:  # type: ignore[override]
        return _json_formatter(record)


def logging_config(level: str = "INFO", json_logs: bool = False) -> Dict[str, Any]:
    """
    Build the ``dictConfig`` mapping for the showcase.

    The activity logger has no handler of its own and propagates to root, so
    narration and diagnostics share one stream and one format.
    """
    level = level.upper()
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "console": {"format": CONSOLE_FORMAT, "datefmt": CONSOLE_DATEFMT},
            "json": {"()": JsonFormatter},
        },
        "handlers": {
            HANDLER_NAME: {
                "class": "logging.StreamHandler",
                "formatter": "json" if json_logs else "console",
                "level": level,
            }
        },
        "loggers": {
            ACTIVITY_LOGGER: {"level": "NOTSET", "propagate": True},
        },
        "root": {"handlers": [HANDLER_NAME], "level": level},
    }


def configure_logging(
    level: str = "INFO",
    json_logs: bool = False,
    force: bool = True,
) -> None:
    """
    Install the showcase handler on the root logger.

    Parameters
    ----------
    level : str
        Level name, case-insensitive ("debug" shows every query hit).
    json_logs : bool
        Emit JSON lines instead of the ``time | level | logger | message`` format.
    force : bool
        When False and root already has handlers (pytest's, an embedding
        application's), leave them alone.
    """
    if not force and logging.getLogger().handlers:
        return
    logging.config.dictConfig(logging_config(level, json_logs))


def configure_from_settings(settings: "Settings", force: bool = True) -> None:
    """Apply ``LOG_LEVEL`` and ``LOG_JSON`` from settings."""
    configure_logging(level=settings.log_level, json_logs=settings.log_json, force=force)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    return logging.getLogger(name)


__all__ = [
    "ACTIVITY_LOGGER",
    "JsonFormatter",
    "configure_from_settings",
    "configure_logging",
    "get_logger",
    "logging_config",
]
