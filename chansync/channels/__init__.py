# ChannelSync - Notification Channel Reconciliation
# Copyright (C) 2026 ChannelSync Authors
# SPDX-License-Identifier: Apache-2.0

"""Notification channel resolution and reconciliation.

Provides ``create_notification_channel`` for single notifications and
``process_channel_list`` for full channel-list syncs, both driven by a
``ChannelEnvironment`` of injected host collaborators.
"""

from __future__ import annotations

from chansync.channels.environment import ChannelEnvironment
from chansync.channels.identity import NotificationJob, create_notification_channel
from chansync.channels.reconciler import process_channel_list

__all__ = [
    "ChannelEnvironment",
    "NotificationJob",
    "create_notification_channel",
    "process_channel_list",
]
