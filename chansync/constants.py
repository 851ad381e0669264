# ChannelSync - Notification Channel Reconciliation
# Copyright (C) 2026 ChannelSync Authors
# SPDX-License-Identifier: Apache-2.0

"""Reserved channel identifiers and payload defaults."""

from __future__ import annotations

# ── Reserved identifiers ─────────────────────────────────────

# The host refuses (or silently drops notifications for) its own default id.
HOST_DEFAULT_CHANNEL_ID = "miscellaneous"

DEFAULT_CHANNEL_ID = "fcm_fallback_notification_channel"
RESTORE_CHANNEL_ID = "restored_OS_notifications"

# Only ids carrying this prefix are deleted during reconciliation.
CHANNEL_PREFIX = "OS_"

# ── Channel defaults ─────────────────────────────────────────

DEFAULT_CHANNEL_NAME = "Miscellaneous"
RESTORE_CHANNEL_NAME = "Restored"
DEFAULT_PRIORITY = 6

# Lock screen visibility values understood by the host.
VISIBILITY_SECRET = -1
VISIBILITY_PRIVATE = 0
VISIBILITY_PUBLIC = 1

# ── Wire format ──────────────────────────────────────────────

LED_COLOR_FALLBACK = "FFFFFFFF"
SILENT_SOUND_SENTINELS = frozenset({"null", "nil"})
