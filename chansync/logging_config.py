# ChannelSync - Notification Channel Reconciliation
# Copyright (C) 2026 ChannelSync Authors
# SPDX-License-Identifier: Apache-2.0
#
# This file is part of ChannelSync, licensed under Apache-2.0.
# See LICENSE for the full license text.

"""Centralized logging configuration for ChannelSync.

Uses structlog in stdlib-compatible mode so that plain
``logging.getLogger("chansync.xxx")`` calls gain structured output
(context binding, JSON file output) without changing call sites.

Provides:
- setup_logging(): structlog + stdlib unified setup (console + file)
- bind_sync_context() / clear_sync_context(): per-run context helpers
"""

from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

import orjson
import structlog


def bind_sync_context(**values: object) -> None:
    """Attach key/value pairs (e.g. ``run_id``) to every subsequent log line."""
    structlog.contextvars.bind_contextvars(**values)


def clear_sync_context() -> None:
    structlog.contextvars.clear_contextvars()


# ── Processors and handlers ────────────────────────────────────

# Runs for structlog loggers and, via foreign_pre_chain, for plain stdlib records.
_SHARED_PROCESSORS: tuple = (
    structlog.contextvars.merge_contextvars,
    structlog.stdlib.add_log_level,
    structlog.stdlib.add_logger_name,
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.processors.StackInfoRenderer(),
    structlog.processors.format_exc_info,
)

_LOG_FILE_NAME = "chansync.log"
_LOG_FILE_MAX_BYTES = 10 * 1024 * 1024
_LOG_FILE_BACKUPS = 5


def _orjson_serializer(obj: object, **_kw) -> str:  # noqa: ANN001
    return orjson.dumps(obj, default=str).decode("utf-8")


def _attach(root: logging.Logger, handler: logging.Handler, renderer) -> None:  # noqa: ANN001
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
            foreign_pre_chain=list(_SHARED_PROCESSORS),
        )
    )
    root.addHandler(handler)


# ── Main Setup ─────────────────────────────────────────────────


def setup_logging(
    level: str = "INFO",
    log_dir: Path | None = None,
    json_file: bool = True,
) -> None:
    """Configure logging for the whole ChannelSync process.

    Console output is always human-readable.  With *log_dir* set, records are
    also written to a rotating ``chansync.log``, one JSON object per line
    unless *json_file* is False.
    """
    structlog.configure(
        processors=[*_SHARED_PROCESSORS, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    root.handlers.clear()

    _attach(root, logging.StreamHandler(), structlog.dev.ConsoleRenderer())

    if log_dir is None:
        return
    log_dir.mkdir(parents=True, exist_ok=True)
    file_handler = RotatingFileHandler(
        log_dir / _LOG_FILE_NAME,
        maxBytes=_LOG_FILE_MAX_BYTES,
        backupCount=_LOG_FILE_BACKUPS,
        encoding="utf-8",
    )
    if json_file:
        renderer = structlog.processors.JSONRenderer(serializer=_orjson_serializer)
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=False)
    _attach(root, file_handler, renderer)
