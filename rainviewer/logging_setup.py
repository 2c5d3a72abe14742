from __future__ import annotations

import json
import logging
import os
import sys
import time
from typing import IO, Optional

_CONFIGURED_FLAG = "_rainviewer_configured"


class JsonFormatter(logging.Formatter):
    """
    One JSON object per line:
      { "t": 1700000000000, "lvl": "INFO", "name": "rainviewer.service", "msg": "text", "extra": {...} }

    `extra` is taken from `logger.info(..., extra={"extra": {...}})`.
    """

    def format(self, record: logging.LogRecord) -> str:  # type: ignore[override]
        payload = {
            "t": int(record.created * 1000) if record.created else int(time.time() * 1000),
            "lvl": record.levelname,
            "name": record.name,
            "msg": record.getMessage(),
        }
        extra = getattr(record, "extra", None)
        if isinstance(extra, dict):
            payload["extra"] = extra
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False, default=str)


def _resolve_level(level: Optional[str]) -> int:
    name = (level or os.environ.get("LOG_LEVEL") or "INFO").upper()
    lvl = logging.getLevelName(name)
    return lvl if isinstance(lvl, int) else logging.INFO


def setup_logging(level: Optional[str] = None, stream: Optional[IO[str]] = None, force: bool = False) -> None:
    """
    Configure the root logger with JSON output. Idempotent unless `force` is set.
    Level precedence: `level` arg, then env LOG_LEVEL, then INFO.

    The library itself never calls this; applications opt in.
    """
    root = logging.getLogger()
    if getattr(root, _CONFIGURED_FLAG, False) and not force:
        return

    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setFormatter(JsonFormatter())

    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(_resolve_level(level))
    setattr(root, _CONFIGURED_FLAG, True)


def get_logger(name: str) -> logging.Logger:
    """Module logger with the root configured."""
    setup_logging()
    return logging.getLogger(name)
