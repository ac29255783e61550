"""Structured logging: JSON formatter and setup.

All log lines carry timestamp, level, logger name and message. Standard
fields (hostname, service name, instance id) are bound once at startup and
stamped on every record; per-event extras are surfaced when present.
"""

import json
import logging
from datetime import UTC, datetime

# Extra attributes surfaced in JSON output when set on a record
EXTRA_FIELDS = (
    "event",
    "mode",
    "data",
    "key",
    "fields",
    "code",
    "path",
    "method",
    "argv",
)


class StandardFieldsFilter(logging.Filter):
    """Attach the process-wide standard fields to every record."""

    def __init__(self, standard_fields: dict[str, str] | None = None):
        super().__init__()
        self.standard_fields = dict(standard_fields or {})

    def filter(self, record: logging.LogRecord) -> bool:
        record.standard_fields = self.standard_fields
        return True


class JSONFormatter(logging.Formatter):
    """Format log records as single-line JSON."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.fromtimestamp(record.created, UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        log.update(getattr(record, "standard_fields", {}))
        for key in EXTRA_FIELDS:
            val = record.__dict__.get(key)
            if val is not None:
                log[key] = val
        if record.levelno >= logging.ERROR:
            log["file"] = record.pathname
            log["line"] = record.lineno
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False, default=str)


def setup_logging(
    level: str = "INFO",
    fmt: str = "json",
    standard_fields: dict[str, str] | None = None,
) -> logging.Handler:
    """Configure the root logger.

    Replaces a handler installed by a previous call, so calling this again
    (tests, app reloads) never duplicates output.

    Args:
        level: Logging level name, case insensitive
        fmt: "json" for structured output, anything else for plain text
        standard_fields: Fields stamped on every record

    Returns:
        The installed handler
    """
    root = logging.getLogger()
    for existing in list(root.handlers):
        if getattr(existing, "_data_api_handler", False):
            root.removeHandler(existing)

    handler = logging.StreamHandler()
    handler._data_api_handler = True
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
        )
    handler.addFilter(StandardFieldsFilter(standard_fields))

    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    return handler


def log_error(
    logger: logging.Logger,
    event: str,
    message: str = "",
    data: object = None,
    **extra,
) -> None:
    """Log an error event, attributing file and line to the caller."""
    logger.error(
        message,
        extra={"event": event, "data": data, **extra},
        stacklevel=2,
    )
