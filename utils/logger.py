"""
Centralized structured logging.

Supports:
 - structured JSON lines (ts, level, logger, msg + any `extra` fields)
 - LOG_LEVEL from the environment
 - idempotent setup (safe to call per module)
"""

from __future__ import annotations

import datetime
import json
import logging
import os
import sys

# attributes every LogRecord carries; anything else came in through `extra`
_RESERVED = set(vars(logging.LogRecord("", 0, "", 0, "", (), None))) | {"message", "asctime"}


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "ts": datetime.datetime.now(datetime.UTC).isoformat(),
            "level": record.levelname.lower(),
            "logger": record.name,
            "msg": record.getMessage(),
        }

        # merge extra fields
        for k, v in record.__dict__.items():
            if k not in _RESERVED and not k.startswith("_"):
                payload[k] = v

        if record.exc_info:
            payload["exc"] = self.formatException(record.exc_info)

        return json.dumps(payload, default=str)


def setup_logger(name: str) -> logging.Logger:
    level = os.getenv("LOG_LEVEL", "INFO").upper()
    logger = logging.getLogger(name)
    logger.setLevel(level)

    if logger.handlers:
        return logger

    # stdout is reserved for CLI output
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(JsonFormatter())
    logger.addHandler(handler)
    logger.propagate = False
    return logger


def get_logger(name: str = "tradelog") -> logging.Logger:
    """Return a JSON logger for `name`, configuring it on first use."""
    return setup_logger(name)


def log_extra(**kwargs) -> dict:
    return {"extra": kwargs}
