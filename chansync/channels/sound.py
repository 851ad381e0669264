# ChannelSync - Notification Channel Reconciliation
# Copyright (C) 2026 ChannelSync Authors
# SPDX-License-Identifier: Apache-2.0

"""Directory-backed sound resolution."""

from __future__ import annotations

import logging
import re
from pathlib import Path

from chansync.channels.host import SoundResolver

logger = logging.getLogger("chansync.sound")

# Resource names may not start with a digit.
_VALID_NAME_RE = re.compile(r"^[^0-9]")


class DirectorySoundResolver(SoundResolver):
    """Resolve sound names to ``file://`` URIs inside *sounds_dir*.

    Names are matched by stem, so ``"tone.mp3"`` finds ``tone.wav`` as well.
    When the named sound is missing the configured *default_sound* is used;
    if that is missing too the result is None.
    """

    def __init__(self, sounds_dir: Path, default_sound: str | None = "default_sound") -> None:
        self._sounds_dir = sounds_dir
        self._default_sound = default_sound

    def _find(self, name: str) -> Path | None:
        if not self._sounds_dir.is_dir():
            return None
        stem = Path(name).stem
        for candidate in sorted(self._sounds_dir.iterdir()):
            if candidate.is_file() and candidate.stem == stem:
                return candidate
        return None

    def resolve(self, sound: str | None) -> str | None:
        if sound and _VALID_NAME_RE.match(sound):
            found = self._find(sound)
            if found is not None:
                return found.resolve().as_uri()
            logger.debug("Sound '%s' not found in %s", sound, self._sounds_dir)

        if self._default_sound:
            fallback = self._find(self._default_sound)
            if fallback is not None:
                return fallback.resolve().as_uri()
        return None
