"""Log output for the cycle CLI and any service embedding the engine.

The engine itself only emits DEBUG records (plate round-downs, per-lift
generation) carrying ``fto_*`` extras; this module decides how they are
rendered. FTO_LOG_FORMAT picks "json" (default) or "text".
"""

import json
import logging
import traceback
from datetime import datetime, timezone

LOG_FORMATS: tuple[str, ...] = ("json", "text")

EXTRA_PREFIX = "fto_"

TEXT_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def resolve_log_level(name: str) -> int:
    """Map a level name ("debug", "INFO", ...) to its numeric value.

    Raises ValueError for names the logging module does not know.
    """
    level = logging.getLevelName(name.strip().upper())
    if not isinstance(level, int):
        raise ValueError(f"not a logging level: {name!r}")
    return level


def _extras(record: logging.LogRecord) -> dict:
    return {key: value for key, value in record.__dict__.items() if key.startswith(EXTRA_PREFIX)}


class JSONFormatter(logging.Formatter):
    """One JSON object per line, with fto_* extras lifted to top-level keys."""

    def format(self, record: logging.LogRecord) -> str:
        log_entry: dict = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
        }

        if record.exc_info and record.exc_info[1] is not None:
            log_entry["exception"] = "".join(traceback.format_exception(*record.exc_info))

        log_entry.update(_extras(record))
        return json.dumps(log_entry, default=str)


class TextFormatter(logging.Formatter):
    """Plain text lines; fto_* extras are appended as key=value pairs."""

    def __init__(self) -> None:
        super().__init__(TEXT_FORMAT)

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        extras = _extras(record)
        if extras:
            line += " " + " ".join(f"{key}={value}" for key, value in sorted(extras.items()))
        return line


def setup_logging(log_format: str, level: int = logging.INFO) -> None:
    """Install a single stderr handler on the root logger.

    Raises ValueError when ``log_format`` is not one of LOG_FORMATS.
    """
    import sys

    if log_format not in LOG_FORMATS:
        raise ValueError(f"log format must be one of: {', '.join(LOG_FORMATS)}")

    root = logging.getLogger()
    root.setLevel(level)

    for handler in root.handlers[:]:
        root.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(JSONFormatter() if log_format == "json" else TextFormatter())
    root.addHandler(handler)
