"""Structured logging setup for builders."""

import json
import logging
import sys
from typing import Optional


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        data = {
            "level": record.levelname,
            "message": record.getMessage(),
            "logger": record.name,
        }
        # Common structured fields emitted by builders
        for attr in [
            "builder",
            "accessor",
            "capability",
            "value",
            "allowed",
            "error_code",
            "slot_size",
        ]:
            if hasattr(record, attr):
                data[attr] = getattr(record, attr)
        if record.exc_info:
            data["exception"] = self.formatException(record.exc_info)
        return json.dumps(data, ensure_ascii=False, default=str)


def setup_logging(level: Optional[str] = None, json_output: Optional[bool] = None) -> None:
    """Install a stdout handler on the ``esbuilders`` logger.

    Unset arguments fall back to ``LOG_LEVEL`` / ``LOG_JSON`` settings.
    """
    from esbuilders.core.config import get_settings

    settings = get_settings()
    level = level or settings.LOG_LEVEL
    if json_output is None:
        json_output = settings.LOG_JSON

    root = logging.getLogger("esbuilders")
    root.setLevel(level.upper())
    handler = logging.StreamHandler(sys.stdout)
    if json_output:
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
        )
    root.handlers = [handler]
