"""
File logging for petcli.

The dashboard owns the terminal while it runs, so log records never go to
stdout or stderr. configure_logging() attaches a single file handler to the
``petcli`` logger; every module logs through ``logging.getLogger(__name__)``
and inherits it.
"""

from __future__ import annotations

import json
import logging
from datetime import UTC, datetime
from pathlib import Path

from petcli.core.config import LoggingConfig

_ROOT_LOGGER = "petcli"
_TEXT_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"


class JsonFormatter(logging.Formatter):
    """One JSON object per line."""

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "ts": datetime.fromtimestamp(record.created, tz=UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        if record.exc_info:
            payload["exc"] = self.formatException(record.exc_info)
        return json.dumps(payload)


def configure_logging(cfg: LoggingConfig, log_path: Path) -> logging.Logger:
    """Route the petcli logger tree to *log_path*. Safe to call repeatedly."""
    logger = logging.getLogger(_ROOT_LOGGER)
    for handler in list(logger.handlers):
        if getattr(handler, "_petcli_handler", False):
            logger.removeHandler(handler)
            handler.close()

    log_path.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.FileHandler(log_path, encoding="utf-8")
    if cfg.format == "json":
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(logging.Formatter(_TEXT_FORMAT))
    handler._petcli_handler = True  # type: ignore[attr-defined]

    logger.addHandler(handler)
    logger.setLevel(cfg.level)
    logger.propagate = False
    return logger
