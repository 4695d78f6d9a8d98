"""Logging configuration for command-line use.

Library modules only call ``logging.getLogger(__name__)`` and pass
context through ``extra``. This module installs a root handler that
renders those fields, either appended to a text line or as JSON.
"""

from __future__ import annotations

import json
import logging
import sys
from typing import Any, Dict, Optional, TextIO

from .config import ObservabilityConfig, get_config

# Attributes every LogRecord has; anything else came from ``extra``.
_RESERVED_ATTRS = frozenset(
    vars(logging.LogRecord("", logging.INFO, "", 0, "", (), None)).keys()
) | {"message", "asctime"}


def _extra_fields(record: logging.LogRecord) -> Dict[str, Any]:
    return {
        key: value
        for key, value in vars(record).items()
        if key not in _RESERVED_ATTRS and not key.startswith("_")
    }


class ContextFormatter(logging.Formatter):
    """Text formatter that appends ``extra`` fields as ``key=value``."""

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        fields = _extra_fields(record)
        if fields:
            context = " ".join(f"{k}={v}" for k, v in fields.items())
            line = f"{line} [{context}]"
        return line


class JSONFormatter(logging.Formatter):
    """One JSON object per record, ``extra`` fields included."""

    def format(self, record: logging.LogRecord) -> str:
        payload: Dict[str, Any] = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        payload.update(_extra_fields(record))
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False, default=str)


def configure_logging(
    config: Optional[ObservabilityConfig] = None,
    stream: Optional[TextIO] = None,
) -> logging.Handler:
    """Install a single root handler according to *config*.

    Args:
        config: Logging configuration. Defaults to the app config.
        stream: Output stream. Defaults to stderr.

    Returns:
        The installed handler.
    """
    config = config or get_config().observability

    handler = logging.StreamHandler(stream or sys.stderr)
    if config.structured:
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(ContextFormatter(config.format))

    root = logging.getLogger()
    for existing in list(root.handlers):
        root.removeHandler(existing)
    root.addHandler(handler)
    root.setLevel(config.level.upper())
    return handler
