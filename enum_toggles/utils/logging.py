"""Structured logging setup for toggle loading."""

import json
import logging
import sys
from typing import Optional

from enum_toggles.config import get_settings


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        data = {
            "level": record.levelname,
            "message": record.getMessage(),
            "logger": record.name,
        }
        # Structured fields emitted while loading toggles
        for attr in [
            "file_path",
            "line_number",
            "toggle_name",
            "applied",
            "skipped",
        ]:
            if hasattr(record, attr):
                data[attr] = getattr(record, attr)
        if record.exc_info:
            data["exception"] = self.formatException(record.exc_info)
        return json.dumps(data, ensure_ascii=False)


def setup_logging(level: Optional[str] = None, json_format: Optional[bool] = None) -> None:
    settings = get_settings()
    if level is None:
        level = settings.TOGGLES_LOG_LEVEL
    if json_format is None:
        json_format = settings.TOGGLES_LOG_JSON

    root = logging.getLogger()
    root.setLevel(level.upper())
    handler = logging.StreamHandler(sys.stdout)
    if json_format:
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
        )
    root.handlers = [handler]
