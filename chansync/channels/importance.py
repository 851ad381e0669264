# ChannelSync - Notification Channel Reconciliation
# Copyright (C) 2026 ChannelSync Authors
# SPDX-License-Identifier: Apache-2.0

"""Payload priority (0-10) to host importance mapping."""

from __future__ import annotations

from chansync.channels.models import Importance

# (exclusive lower bound, importance), checked from the top down.
_THRESHOLDS: tuple[tuple[int, Importance], ...] = (
    (9, Importance.MAX),
    (7, Importance.HIGH),
    (5, Importance.DEFAULT),
    (3, Importance.LOW),
    (1, Importance.MIN),
)


def priority_to_importance(priority: int) -> Importance:
    """Map a payload priority to an importance level.

    Total over all integers; values outside 0-10 are not rejected and simply
    land in the nearest bucket.
    """
    for lower, importance in _THRESHOLDS:
        if priority > lower:
            return importance
    return Importance.NONE
