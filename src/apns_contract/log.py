"""JSON logging for APNs delivery outcomes.

Library code only calls ``logging.getLogger(__name__)``; applications that
want structured output call ``setup_logging`` once at startup.
"""

import json
import logging
import sys
from collections.abc import Sequence
from datetime import datetime, timezone

from apns_contract.config import ResponseConfig
from apns_contract.enums import ErrorReason, StatusCode

# HTTP client loggers emit a line per request; an APNs sender makes many.
NOISY_LOGGERS: tuple[str, ...] = ("httpx", "httpcore", "hpack", "h2")

_RECORD_ATTRS = frozenset(
    logging.LogRecord("", 0, "", 0, "", (), None).__dict__.keys()
    | {"message", "asctime"}
)


def delivery_extra(
    status_code: int,
    apns_id: str | None,
    reason: ErrorReason | None = None,
) -> dict[str, object]:
    """Build the ``extra`` mapping for a log call about one delivery."""
    extra: dict[str, object] = {"apns_id": apns_id}
    try:
        extra["status"] = StatusCode(status_code)
    except ValueError:
        extra["status"] = status_code
    if reason is not None:
        extra["reason"] = reason
    return extra


class JsonFormatter(logging.Formatter):
    """One JSON object per line.

    ``ErrorReason`` and ``StatusCode`` extras are written as their wire
    value plus a ``<key>_description`` entry.
    """

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, object] = {
            "timestamp": datetime.fromtimestamp(
                record.created, tz=timezone.utc
            ).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        for key, value in record.__dict__.items():
            if key in _RECORD_ATTRS:
                continue
            if isinstance(value, ErrorReason):
                entry[key] = value.value
                entry[f"{key}_description"] = value.description
            elif isinstance(value, StatusCode):
                entry[key] = int(value)
                entry[f"{key}_description"] = value.description
            else:
                entry[key] = value

        if record.exc_info and record.exc_info[1]:
            entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(entry, default=str)


def setup_logging(
    config: ResponseConfig | None = None,
    suppress: Sequence[str] = NOISY_LOGGERS,
) -> None:
    """Send root logging to stdout as JSON at ``config.log_level``.

    Loggers named in *suppress* are raised to WARNING.
    """
    config = config or ResponseConfig()
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(JsonFormatter())

    root = logging.getLogger()
    root.setLevel(getattr(logging, config.log_level.upper(), logging.INFO))
    root.handlers.clear()
    root.addHandler(handler)

    for name in suppress:
        logging.getLogger(name).setLevel(logging.WARNING)
