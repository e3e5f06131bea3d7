"""
Logging helpers. The client only ever logs through an injected (or package) logger;
handler/formatter setup is opt-in via setup_logging() and is meant for programs, not the library.
"""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any

PACKAGE_LOGGER = "accountapi"


def resolve_logger(logger: logging.Logger | None = None) -> logging.Logger:
    """Injected logger if given, else the package logger (no handlers attached here)."""
    return logger if logger is not None else logging.getLogger(PACKAGE_LOGGER)


class JsonFormatter(logging.Formatter):
    """One JSON object per record, with the caller's file:line."""

    def format(self, record: logging.LogRecord) -> str:
        log_data: dict[str, Any] = {
            "time": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname.lower(),
            "logger": record.name,
            "msg": record.getMessage(),
            "file": f"{record.pathname}:{record.lineno}",
            "func": record.funcName,
        }
        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_data)


def setup_logging(level: str = "INFO", json_format: bool = False) -> logging.Logger:
    """
    Attach a stdout handler to the package logger and return it.
    Does not touch the root logger; calling it twice replaces the previous handler.
    """
    log_level = getattr(logging, level.upper(), logging.INFO)
    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(log_level)
    if json_format:
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(logging.Formatter("%(levelname)s:     %(name)s: %(message)s"))

    logger = logging.getLogger(PACKAGE_LOGGER)
    for existing in logger.handlers[:]:
        logger.removeHandler(existing)
    logger.addHandler(handler)
    logger.setLevel(log_level)
    # urllib3 is chatty at DEBUG
    logging.getLogger("urllib3").setLevel(logging.WARNING)
    return logger
