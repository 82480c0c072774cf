"""Application-wide logging configuration.

Log lines are single JSON objects carrying timestamp, level, logger, service,
environment and message, plus any structured extras passed through
``logger.info(msg, extra={...})``. Extras whose key names a credential
(``password``, ``secret``, ``token``) are masked before they are written, so
resolved connection values can be logged without leaking them.
"""

from __future__ import annotations

import json
import logging
import re
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from dbconfig.core.settings import Settings, get_settings

# Attributes every LogRecord carries; anything else came in through `extra=`.
_RECORD_ATTRS = frozenset(vars(logging.makeLogRecord({}))) | {"message", "asctime"}

_SECRET_KEY_RE = re.compile(r"password|secret|token", re.IGNORECASE)

MASK = "***"


def _mask(key: str, value: Any) -> Any:
    if value is not None and _SECRET_KEY_RE.search(key):
        return MASK
    if isinstance(value, dict):
        return {k: _mask(str(k), v) for k, v in value.items()}
    return value


class JsonFormatter(logging.Formatter):
    """One-line JSON log formatter with stable keys and UTC timestamps."""

    def __init__(self, service: str, environment: str) -> None:
        super().__init__()
        self.service = service
        self.environment = environment

    def format(self, record: logging.LogRecord) -> str:  # noqa: D401
        dt = datetime.fromtimestamp(record.created, tz=timezone.utc)
        payload: Dict[str, Any] = {
            "timestamp": dt.strftime("%Y-%m-%dT%H:%M:%S.%fZ"),
            "level": record.levelname,
            "logger": record.name,
            "service": self.service,
            "environment": self.environment,
            "message": record.getMessage(),
        }
        extras = {
            k: _mask(k, v)
            for k, v in record.__dict__.items()
            if k not in _RECORD_ATTRS and k not in payload
        }
        payload.update(extras)
        if record.exc_info and record.exc_info[0] is not None:
            payload["error"] = {
                "class": record.exc_info[0].__name__,
                "message": str(record.exc_info[1])[:500],
            }
        return json.dumps(payload, ensure_ascii=False, default=repr)


def setup_logging(settings: Optional[Settings] = None) -> None:
    """Configure root logger to output one-line JSON logs."""

    settings = settings or get_settings()
    level = getattr(logging, settings.log_level.upper(), logging.INFO)

    handler = logging.StreamHandler()
    handler.setFormatter(JsonFormatter(settings.service_name, settings.app_env))

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)


__all__ = ["JsonFormatter", "setup_logging", "MASK"]
