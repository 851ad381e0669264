# ChannelSync - Notification Channel Reconciliation
# Copyright (C) 2026 ChannelSync Authors
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from chansync.config.models import (
    ChannelSyncConfig,
    HostConfig,
    SoundConfig,
    SystemConfig,
    get_config_path,
    invalidate_cache,
    load_config,
    resolve_sounds_dir,
    resolve_store_path,
    save_config,
)

__all__ = [
    "ChannelSyncConfig",
    "HostConfig",
    "SoundConfig",
    "SystemConfig",
    "get_config_path",
    "invalidate_cache",
    "load_config",
    "resolve_sounds_dir",
    "resolve_store_path",
    "save_config",
]
