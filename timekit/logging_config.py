"""
Tool: Timekit Logging
Purpose: Route the client's log records through structlog

The timekit modules (config, transport, client) log through plain
``logging.getLogger(__name__)``: request lines and status codes at DEBUG,
API errors and config fallbacks at WARNING, logins at INFO. Nothing is
configured on import. The ``timekit`` CLI, or an application embedding the
client, calls ``setup_logging()`` once. Records then render as console or
JSON lines on stderr, keeping stdout free for the CLI's JSON output.

Environment:
    TIMEKIT_LOG_LEVEL: Root level (default WARNING)
    TIMEKIT_LOG_FORMAT: "json" for JSON lines, anything else for console

Usage:
    from timekit.logging_config import setup_logging
    setup_logging(level="DEBUG")
"""

from __future__ import annotations

import logging
import os
import sys

import structlog


def setup_logging(level: str | None = None, json_output: bool | None = None) -> None:
    if level is None:
        level = os.environ.get("TIMEKIT_LOG_LEVEL", "WARNING")

    if json_output is None:
        json_output = os.environ.get("TIMEKIT_LOG_FORMAT", "").lower() == "json"

    numeric_level = getattr(logging, level.upper(), logging.WARNING)

    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if json_output:
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer()

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    # Library modules log through stdlib; foreign_pre_chain gives their
    # records the same level/name/timestamp fields as structlog events
    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )

    # Requests and responses go to stderr so CLI output on stdout stays clean JSON
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(numeric_level)


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(name)


__all__ = ["get_logger", "setup_logging"]
