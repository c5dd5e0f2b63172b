from __future__ import annotations

import json
import logging
import sys
from typing import Optional

from dronepath.config import settings


class _JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "ts": self.formatTime(record),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        if record.exc_info:
            payload["exc"] = self.formatException(record.exc_info)
        return json.dumps(payload)


def configure_logging(level: Optional[str] = None, json_lines: Optional[bool] = None) -> logging.Logger:
    """Attach a single stdout handler to the ``dronepath`` logger tree.

    Safe to call more than once; the handler is only installed the first time.
    """
    logger = logging.getLogger("dronepath")
    level = (level or settings.log_level).upper()
    json_lines = settings.log_json if json_lines is None else json_lines

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        if json_lines:
            handler.setFormatter(_JsonFormatter())
        else:
            handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
        logger.addHandler(handler)
        logger.propagate = False

    logger.setLevel(level)
    return logger
