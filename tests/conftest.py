# ChannelSync - Notification Channel Reconciliation
# Copyright (C) 2026 ChannelSync Authors
# SPDX-License-Identifier: Apache-2.0
"""Global test fixtures for ChannelSync.

Provides runtime data directory isolation, config cache management and
ready-made channel environments backed by the in-memory host store.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from tests.helpers.factories import FakeSoundResolver, make_environment


@pytest.fixture
def data_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Create an isolated ChannelSync runtime data directory.

    - Redirects ``CHANSYNC_DATA_DIR`` to a temp directory
    - Invalidates the config cache before and after the test
    """
    from chansync.config import invalidate_cache

    d = tmp_path / ".chansync"
    d.mkdir()
    monkeypatch.setenv("CHANSYNC_DATA_DIR", str(d))

    invalidate_cache()
    yield d
    invalidate_cache()


@pytest.fixture
def sounds() -> FakeSoundResolver:
    return FakeSoundResolver({"tone.mp3": "file:///sounds/tone.mp3"})


@pytest.fixture
def env(sounds: FakeSoundResolver):
    """Channel environment with an empty in-memory host and language ``en``."""
    return make_environment(sound_resolver=sounds)
