"""Logging setup for the command-line entry point.

Library modules only create loggers; handlers are installed here, once, by
whatever embeds the engine.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone

_HANDLER: logging.Handler | None = None


class JSONFormatter(logging.Formatter):
    """Format log records as single-line JSON objects."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False)


def setup_logging(level: str = "WARNING", fmt: str = "text") -> logging.Handler:
    """Attach a stderr handler to the root logger and set its level.

    Calling this again replaces the handler installed by the previous call.
    """

    global _HANDLER
    if _HANDLER is not None:
        logging.root.removeHandler(_HANDLER)
    handler = logging.StreamHandler()
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
        )
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.WARNING))
    _HANDLER = handler
    return handler


__all__ = ["JSONFormatter", "setup_logging"]
