# ChannelSync - Notification Channel Reconciliation
# Copyright (C) 2026 ChannelSync Authors
# SPDX-License-Identifier: Apache-2.0

"""Vibration pattern parsing for the ``vib_pt`` payload field."""

from __future__ import annotations

import json
import logging
from typing import Any

from chansync.channels.host import VibrationParser

logger = logging.getLogger("chansync.vibration")


def _to_int(value: Any) -> int:
    # Non-numeric entries count as 0 ms rather than invalidating the pattern.
    try:
        return int(value)
    except (TypeError, ValueError):
        return 0


def parse_vibration_pattern(raw: Any) -> tuple[int, ...] | None:
    """Parse a list (or JSON-encoded list) of millisecond durations.

    Returns None when *raw* is missing or cannot be decoded into a list.
    """
    if raw is None:
        return None
    if isinstance(raw, (str, bytes)):
        try:
            raw = json.loads(raw)
        except json.JSONDecodeError:
            logger.debug("Ignoring undecodable vibration pattern: %r", raw)
            return None
    if not isinstance(raw, list):
        return None
    return tuple(_to_int(v) for v in raw)


class JsonVibrationParser(VibrationParser):
    def parse(self, raw: Any) -> tuple[int, ...] | None:
        return parse_vibration_pattern(raw)
