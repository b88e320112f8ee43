"""JSON-lines logging for the hotel_gate logger tree."""

import logging
import json
import sys
from datetime import datetime, timezone


class JSONFormatter(logging.Formatter):
    """Format log records as JSON lines."""

    def format(self, record: logging.LogRecord) -> str:
        log_entry = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info and record.exc_info[1]:
            log_entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_entry)


def setup_logging(level: str = "INFO") -> None:
    """Attach the JSON handler to the hotel_gate logger at ``level``."""
    root = logging.getLogger("hotel_gate")
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    root.propagate = False

    # create_app() may run more than once per process (tests)
    if any(isinstance(h.formatter, JSONFormatter) for h in root.handlers):
        return

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(JSONFormatter())
    root.addHandler(handler)


def get_logger(name: str) -> logging.Logger:
    """Logger under hotel_gate, e.g. ``get_logger("hotels.router")``."""
    return logging.getLogger(f"hotel_gate.{name}")
