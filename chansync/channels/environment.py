# ChannelSync - Notification Channel Reconciliation
# Copyright (C) 2026 ChannelSync Authors
# SPDX-License-Identifier: Apache-2.0

"""Collaborators injected into every channel operation."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from chansync.channels.host import (
    FixedLanguage,
    HostChannelStore,
    JsonFileHostStore,
    LanguageProvider,
    SoundResolver,
    VibrationParser,
)
from chansync.channels.sound import DirectorySoundResolver
from chansync.channels.vibration import JsonVibrationParser
from chansync.config.models import ChannelSyncConfig, resolve_sounds_dir, resolve_store_path


@dataclass(frozen=True)
class ChannelEnvironment:
    """Host store, language, sound and vibration services for one process.

    ``supports_channels`` is computed once by the caller (platform capability
    detection lives outside this package); when False every channel
    operation is a no-op.
    """

    host: HostChannelStore
    language: LanguageProvider
    sound_resolver: SoundResolver
    vibration_parser: VibrationParser
    supports_channels: bool = True

    @classmethod
    def from_config(
        cls,
        config: ChannelSyncConfig,
        data_dir: Path,
        *,
        host: HostChannelStore | None = None,
    ) -> ChannelEnvironment:
        """Wire the bundled collaborator implementations from *config*."""
        return cls(
            host=host or JsonFileHostStore(resolve_store_path(config, data_dir)),
            language=FixedLanguage(config.language),
            sound_resolver=DirectorySoundResolver(
                resolve_sounds_dir(config, data_dir),
                config.sound.default_sound,
            ),
            vibration_parser=JsonVibrationParser(),
            supports_channels=config.host.supports_channels,
        )
