# src/aideck/core/logging.py
from __future__ import annotations

import datetime as dt
import logging
import os
import sys
from typing import Optional

from aideck.core.ctx import get_ctx

DEFAULT_FORMAT = (
    "%(asctime)s %(levelname)s %(name)s "
    "req=%(request_id)s provider=%(provider)s msg=%(message)s"
)

# Loggers that drown out request logs at INFO
QUIET_LOGGERS = ("httpx", "httpcore", "asyncio")


class ContextFilter(logging.Filter):
    """Stamp request_id/provider from the current context onto each record."""
    def filter(self, record: logging.LogRecord) -> bool:
        for field, value in get_ctx().items():
            if not hasattr(record, field):
                setattr(record, field, value)
        return True


class UTCFormatter(logging.Formatter):
    def formatTime(self, record: logging.LogRecord, datefmt: Optional[str] = None) -> str:
        ts = dt.datetime.fromtimestamp(record.created, tz=dt.timezone.utc)
        return ts.strftime(datefmt) if datefmt else ts.isoformat(timespec="seconds").replace("+00:00", "Z")


_handler: Optional[logging.Handler] = None


def configure_logging(level: Optional[str] = None, fmt: Optional[str] = None) -> None:
    """
    Install the stdout handler on the root logger (once) and apply the level.
    Called at import with env defaults and again by create_app with Settings.
    """
    global _handler
    root = logging.getLogger()
    if _handler is None:
        _handler = logging.StreamHandler(sys.stdout)
        _handler.addFilter(ContextFilter())
        root.addHandler(_handler)
    _handler.setFormatter(UTCFormatter(fmt or os.getenv("LOG_FORMAT", DEFAULT_FORMAT)))
    root.setLevel((level or os.getenv("LOG_LEVEL", "INFO")).upper())

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


configure_logging()


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
