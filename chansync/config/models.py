# ChannelSync - Notification Channel Reconciliation
# Copyright (C) 2026 ChannelSync Authors
# SPDX-License-Identifier: Apache-2.0
#
# This file is part of ChannelSync, licensed under Apache-2.0.
# See LICENSE for the full license text.

"""Central configuration module for ChannelSync.

Defines Pydantic models for config.json and provides load / save helpers
with a module-level singleton cache.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ValidationError, field_validator

from chansync.exceptions import ConfigValidationError

logger = logging.getLogger("chansync.config")

# ---------------------------------------------------------------------------
# Pydantic models
# ---------------------------------------------------------------------------


class SystemConfig(BaseModel):
    log_level: str = "INFO"
    json_log_file: bool = True


class HostConfig(BaseModel):
    """Where the local host channel store lives and what it supports."""

    store_file: str = "channels.json"  # relative to the data dir
    supports_channels: bool = True


class SoundConfig(BaseModel):
    sounds_dir: str | None = None  # None = <data_dir>/sounds
    default_sound: str | None = "default_sound"


class ChannelSyncConfig(BaseModel):
    version: int = 1
    language: str = "en"
    system: SystemConfig = SystemConfig()
    host: HostConfig = HostConfig()
    sound: SoundConfig = SoundConfig()

    @field_validator("language")
    @classmethod
    def _normalize_language(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("language must not be empty")
        return value


# ---------------------------------------------------------------------------
# Singleton cache
# ---------------------------------------------------------------------------

_config: ChannelSyncConfig | None = None
_config_path: Path | None = None
_config_mtime: float = 0.0


def invalidate_cache() -> None:
    """Reset the module-level singleton cache."""
    global _config, _config_path, _config_mtime
    _config = None
    _config_path = None
    _config_mtime = 0.0


# ---------------------------------------------------------------------------
# Path helpers
# ---------------------------------------------------------------------------


def get_config_path(data_dir: Path | None = None) -> Path:
    """Return the path to config.json inside *data_dir*.

    If *data_dir* is not given, it is resolved via ``chansync.paths.get_data_dir``.
    """
    if data_dir is None:
        from chansync.paths import get_data_dir

        data_dir = get_data_dir()
    return data_dir / "config.json"


# ---------------------------------------------------------------------------
# Load / Save
# ---------------------------------------------------------------------------


def load_config(path: Path | None = None) -> ChannelSyncConfig:
    """Load configuration from disk, returning cached instance when possible.

    When the file does not exist the default configuration is returned.
    The cache is invalidated when the file's mtime changes.

    Raises:
        ConfigValidationError: The file exists but is not valid JSON or
            does not match the schema.
    """
    global _config, _config_path, _config_mtime

    if path is None:
        path = get_config_path()

    if _config is not None and _config_path == path:
        try:
            disk_mtime = path.stat().st_mtime
        except OSError:
            disk_mtime = 0.0
        if disk_mtime == _config_mtime:
            return _config
        logger.debug("Config file changed on disk (mtime %.3f → %.3f); reloading", _config_mtime, disk_mtime)

    if path.is_file():
        logger.debug("Loading config from %s", path)
        try:
            data: dict[str, Any] = json.loads(path.read_text(encoding="utf-8"))
            config = ChannelSyncConfig.model_validate(data)
        except json.JSONDecodeError as exc:
            logger.error("Failed to parse %s: %s", path, exc)
            raise ConfigValidationError(f"Invalid JSON in {path}: {exc}") from exc
        except ValidationError as exc:
            logger.error("Invalid configuration in %s: %s", path, exc)
            raise ConfigValidationError(str(exc)) from exc
    else:
        logger.info("Config file not found at %s; using defaults", path)
        config = ChannelSyncConfig()

    _config = config
    _config_path = path
    try:
        _config_mtime = path.stat().st_mtime
    except OSError:
        _config_mtime = 0.0
    return config


def save_config(config: ChannelSyncConfig, path: Path | None = None) -> None:
    """Persist *config* to disk as pretty-printed JSON and refresh the cache."""
    global _config, _config_path, _config_mtime

    if path is None:
        path = get_config_path()

    path.parent.mkdir(parents=True, exist_ok=True)

    payload = config.model_dump(mode="json")
    text = json.dumps(payload, indent=2, ensure_ascii=False) + "\n"
    path.write_text(text, encoding="utf-8")

    logger.debug("Config saved to %s", path)

    _config = config
    _config_path = path
    try:
        _config_mtime = path.stat().st_mtime
    except OSError:
        _config_mtime = 0.0


# ---------------------------------------------------------------------------
# Resolution helpers
# ---------------------------------------------------------------------------


def resolve_store_path(config: ChannelSyncConfig, data_dir: Path) -> Path:
    """Return the absolute host store path for *config*."""
    store = Path(config.host.store_file).expanduser()
    return store if store.is_absolute() else data_dir / store


def resolve_sounds_dir(config: ChannelSyncConfig, data_dir: Path) -> Path:
    if config.sound.sounds_dir:
        return Path(config.sound.sounds_dir).expanduser()
    return data_dir / "sounds"
