"""
Logging setup for Layoff Risk.

Call ``configure_logging(config.logging, debug=config.debug)`` once at CLI
entry.  Library modules only use ``logging.getLogger(__name__)``.

Console output goes to stderr so that ``layoff-risk assess --json`` keeps
stdout machine-readable.  ``debug=True`` forces DEBUG on the ``layoff_risk``
loggers, which surfaces per-call scoring details and default-impact fallbacks.

JSON format (``json_format = true`` in the ``[logging]`` config section)
emits one object per line::

    {"ts": "2026-10-18T09:00:00.120Z", "level": "INFO", "logger": "layoff_risk.assessment", "msg": "..."}
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import TYPE_CHECKING, Any, Optional, TextIO

if TYPE_CHECKING:
    from layoff_risk.config import LoggingConfig

PACKAGE_LOGGER = "layoff_risk"

TEXT_FORMAT = "%(asctime)s %(levelname)-8s %(name)s | %(message)s"
TEXT_DATE_FORMAT = "%Y-%m-%dT%H:%M:%S"

# Attributes every LogRecord carries; anything else came in through ``extra=``.
_STANDARD_RECORD_ATTRS = frozenset(
    vars(logging.LogRecord("", logging.INFO, "", 0, "", None, None))
) | {"message", "asctime"}


class JsonFormatter(logging.Formatter):
    """Render records as single-line JSON with ``extra=`` fields merged in."""

    def format(self, record: logging.LogRecord) -> str:
        created = datetime.fromtimestamp(record.created, tz=timezone.utc)
        payload: dict[str, Any] = {
            "ts": created.isoformat(timespec="milliseconds").replace("+00:00", "Z"),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        payload.update(
            (key, val)
            for key, val in vars(record).items()
            if key not in _STANDARD_RECORD_ATTRS and not key.startswith("_")
        )
        if record.exc_info:
            payload["exc"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str)


def build_formatter(config: "LoggingConfig") -> logging.Formatter:
    if config.json_format:
        return JsonFormatter()
    return logging.Formatter(TEXT_FORMAT, datefmt=TEXT_DATE_FORMAT)


def build_handlers(
    config: "LoggingConfig",
    stream: Optional[TextIO] = None,
) -> list[logging.Handler]:
    """Console handler plus a file handler when ``config.log_file`` is set."""
    handlers: list[logging.Handler] = [logging.StreamHandler(stream or sys.stderr)]
    if config.log_file:
        log_path = Path(config.log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_path, encoding="utf-8"))

    formatter = build_formatter(config)
    for handler in handlers:
        handler.setFormatter(formatter)
    return handlers


def configure_logging(
    config: "LoggingConfig",
    debug:  bool = False,
    stream: Optional[TextIO] = None,
) -> None:
    """Install handlers on the root logger, replacing any existing ones.

    Args:
        config: Logging section of ``AppConfig``.
        debug:  ``AppConfig.debug``; lowers the package loggers to DEBUG.
        stream: Console stream; defaults to ``sys.stderr``.
    """
    level = logging.getLevelName(config.level)
    logging.basicConfig(
        level=level,
        handlers=build_handlers(config, stream),
        force=True,
    )
    logging.getLogger(PACKAGE_LOGGER).setLevel(logging.DEBUG if debug else logging.NOTSET)
