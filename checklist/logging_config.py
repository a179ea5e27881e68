"""
Console logging for the checklist service.

Records go to stdout either as colored text or, with ``json_logs`` on, as
one JSON object per line.
"""

import json
import logging
import sys
from typing import Optional

from checklist.config import get_settings

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_RESET = "\x1b[0m"
_LEVEL_COLORS = {
    logging.DEBUG: "\x1b[38;20m",
    logging.INFO: "\x1b[32;20m",
    logging.WARNING: "\x1b[33;20m",
    logging.ERROR: "\x1b[31;20m",
    logging.CRITICAL: "\x1b[31;1m",
}

# Third-party loggers that flood DEBUG output
QUIET_LOGGERS = ("sqlalchemy.engine", "aiosqlite", "httpcore", "httpx")


class ColoredFormatter(logging.Formatter):
    def __init__(self):
        super().__init__(LOG_FORMAT, datefmt=DATE_FORMAT)

    def format(self, record):
        color = _LEVEL_COLORS.get(record.levelno, "")
        return f"{color}{super().format(record)}{_RESET if color else ''}"


class JsonFormatter(logging.Formatter):
    def format(self, record):
        payload = {
            "timestamp": self.formatTime(record, "%Y-%m-%dT%H:%M:%S"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload)


def setup_logging(
    level: Optional[str] = None,
    json_format: Optional[bool] = None,
) -> None:
    """
    Install a single stdout handler on the root logger.

    `level` wins over ``CHECKLIST_LOG_LEVEL``; without either, debug mode
    selects DEBUG and everything else INFO.
    """
    settings = get_settings()

    level_name = level or settings.log_level or ("DEBUG" if settings.debug else "INFO")
    numeric_level = getattr(logging, level_name.upper(), logging.INFO)
    if json_format is None:
        json_format = settings.json_logs

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(numeric_level)
    handler.setFormatter(JsonFormatter() if json_format else ColoredFormatter())

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)
    for existing in root_logger.handlers[:]:
        root_logger.removeHandler(existing)
    root_logger.addHandler(handler)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
    logging.getLogger("checklist").setLevel(numeric_level)


def get_logger(name: str) -> logging.Logger:
    """Logger under the ``checklist`` namespace."""
    if not name.startswith("checklist"):
        name = f"checklist.{name}"
    return logging.getLogger(name)
