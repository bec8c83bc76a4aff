# frontend/board_app/core/observability.py
# SPDX-License-Identifier: Apache-2.0
"""Operator logging: one stream handler, text or JSON lines.

Modules log through ``logging.getLogger(__name__)``; this module only decides
where those records go. ``setup_logging`` is idempotent so that Streamlit
reruns of ``app.py`` do not stack handlers.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone

# Extra attributes surfaced in JSON output when a record carries them.
_EXTRA_FIELDS = ("operation", "status", "error_code", "view", "raw_body")

_HANDLER_NAME = "board_app"


class JSONFormatter(logging.Formatter):
    """Format log records as single-line JSON objects."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in _EXTRA_FIELDS:
            val = record.__dict__.get(key)
            if val is not None:
                log[key] = val
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False, default=str)


def setup_logging(level: str = "INFO", fmt: str = "text") -> logging.Handler:
    """Install (or reconfigure) the application's root log handler.

    Args:
        level: Level name, e.g. "DEBUG" or "INFO". Unknown names mean INFO.
        fmt: "json" for JSON lines, anything else for plain text.

    Returns:
        The handler attached to the root logger.
    """
    root = logging.getLogger()
    handler = next((h for h in root.handlers if h.get_name() == _HANDLER_NAME), None)
    if handler is None:
        handler = logging.StreamHandler()
        handler.set_name(_HANDLER_NAME)
        root.addHandler(handler)

    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
        )
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    return handler
