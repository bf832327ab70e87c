"""Process-wide logging for the API server and the CLI.

One stream handler on the root logger, plain or JSON lines. The HTTP
client libraries log every request at INFO; they are held at WARNING so
``pricing`` records stay readable when the CLI talks to a remote API.
"""

import json
import logging
from datetime import datetime, timezone
from typing import Optional

from pricing.infrastructure.config import Settings, get_settings

_PLAIN_FORMAT = "%(asctime)s %(levelname)-7s %(name)s - %(message)s"
_DATE_FORMAT = "%Y-%m-%dT%H:%M:%S"

_CHATTY_LOGGERS = ("httpx", "httpcore")


class JsonFormatter(logging.Formatter):
    """One JSON object per record, in UTC."""

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=True)


def _formatter(settings: Settings) -> logging.Formatter:
    if settings.LOG_JSON:
        return JsonFormatter()
    return logging.Formatter(fmt=_PLAIN_FORMAT, datefmt=_DATE_FORMAT)


def setup_logging(settings: Optional[Settings] = None) -> None:
    """Install the handler; calling it again replaces the previous one."""
    settings = settings or get_settings()
    level = getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO)

    handler = logging.StreamHandler()
    handler.setFormatter(_formatter(settings))

    root = logging.getLogger()
    root.setLevel(level)
    root.handlers.clear()
    root.addHandler(handler)

    for name in _CHATTY_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))
