"""Unit tests for chansync/logging_config.py — structlog-based logging setup."""
# ChannelSync - Notification Channel Reconciliation
# Copyright (C) 2026 ChannelSync Authors
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

import json
import logging

import pytest
import structlog

from chansync.logging_config import bind_sync_context, clear_sync_context, setup_logging


@pytest.fixture(autouse=True)
def _reset_logging():
    """Restore the root logger after each test."""
    root = logging.getLogger()
    saved_handlers = list(root.handlers)
    saved_level = root.level
    yield
    for handler in root.handlers:
        if handler not in saved_handlers:
            handler.close()
    root.handlers[:] = saved_handlers
    root.setLevel(saved_level)
    structlog.contextvars.clear_contextvars()


# ── setup_logging ─────────────────────────────────────────


class TestSetupLogging:
    def test_console_only(self):
        setup_logging(level="DEBUG", log_dir=None)
        root = logging.getLogger()
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0], logging.StreamHandler)

    def test_with_file_handler(self, tmp_path):
        setup_logging(level="INFO", log_dir=tmp_path, json_file=True)
        root = logging.getLogger()
        handler_types = [type(h).__name__ for h in root.handlers]
        assert handler_types.count("RotatingFileHandler") == 1
        assert (tmp_path / "chansync.log").exists()

    def test_creates_log_dir(self, tmp_path):
        log_dir = tmp_path / "logs" / "deep"
        setup_logging(log_dir=log_dir)
        assert log_dir.is_dir()

    def test_invalid_level_defaults_to_info(self):
        setup_logging(level="LOUD")
        assert logging.getLogger().level == logging.INFO

    def test_structlog_processor_formatter_used(self, tmp_path):
        setup_logging(log_dir=tmp_path)
        for handler in logging.getLogger().handlers:
            assert isinstance(handler.formatter, structlog.stdlib.ProcessorFormatter)

    def test_file_handler_writes_json_with_context(self, tmp_path):
        setup_logging(level="DEBUG", log_dir=tmp_path, json_file=True)
        bind_sync_context(run_id="run-42")

        logging.getLogger("chansync.test").info("channel %s synced", "OS_a")
        for handler in logging.getLogger().handlers:
            handler.flush()

        lines = (tmp_path / "chansync.log").read_text(encoding="utf-8").strip().splitlines()
        data = json.loads(lines[-1])
        assert data["event"] == "channel OS_a synced"
        assert data["run_id"] == "run-42"
        assert data["logger"] == "chansync.test"

    def test_clear_sync_context(self, tmp_path):
        setup_logging(level="DEBUG", log_dir=tmp_path, json_file=True)
        bind_sync_context(run_id="run-1")
        clear_sync_context()

        logging.getLogger("chansync.test").warning("after clear")
        for handler in logging.getLogger().handlers:
            handler.flush()

        lines = (tmp_path / "chansync.log").read_text(encoding="utf-8").strip().splitlines()
        assert "run_id" not in json.loads(lines[-1])

    def test_plain_file_output(self, tmp_path):
        setup_logging(level="INFO", log_dir=tmp_path, json_file=False)

        logging.getLogger("chansync.test").info("plain line")
        for handler in logging.getLogger().handlers:
            handler.flush()

        content = (tmp_path / "chansync.log").read_text(encoding="utf-8")
        assert "plain line" in content
        assert not content.lstrip().startswith("{")
