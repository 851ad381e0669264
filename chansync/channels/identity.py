# ChannelSync - Notification Channel Reconciliation
# Copyright (C) 2026 ChannelSync Authors
# SPDX-License-Identifier: Apache-2.0

"""Decide which channel a single notification is posted to.

Precedence, first match wins:

1. restore job              → the reserved restore channel
2. ``oth_chnl`` exists      → that externally owned channel, untouched
3. no ``chnl`` in payload   → the library default channel
4. otherwise                → build and register the channel from ``chnl``

``oth_chnl`` only wins when the host already has that channel; otherwise
the payload falls through to steps 3 and 4.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from chansync.channels.builder import build_channel, register_channel
from chansync.channels.environment import ChannelEnvironment
from chansync.channels.host import HostChannelStore
from chansync.channels.models import ChannelConfig, ChannelPayload, Importance
from chansync.constants import (
    DEFAULT_CHANNEL_ID,
    DEFAULT_CHANNEL_NAME,
    RESTORE_CHANNEL_ID,
    RESTORE_CHANNEL_NAME,
)
from chansync.exceptions import PayloadError

logger = logging.getLogger("chansync.identity")


@dataclass(frozen=True)
class NotificationJob:
    """One notification being processed."""

    payload: Mapping[str, Any] = field(default_factory=dict)
    restoring: bool = False


def create_default_channel(host: HostChannelStore) -> str:
    host.create_channel(
        ChannelConfig(
            id=DEFAULT_CHANNEL_ID,
            name=DEFAULT_CHANNEL_NAME,
            importance=Importance.DEFAULT,
            led_enabled=True,
            vibration_enabled=True,
        )
    )
    return DEFAULT_CHANNEL_ID


def create_restore_channel(host: HostChannelStore) -> str:
    host.create_channel(
        ChannelConfig(
            id=RESTORE_CHANNEL_ID,
            name=RESTORE_CHANNEL_NAME,
            importance=Importance.LOW,
        )
    )
    return RESTORE_CHANNEL_ID


def create_notification_channel(env: ChannelEnvironment, job: NotificationJob) -> str:
    """Return the channel id *job* should be posted to, creating it if needed."""
    if not env.supports_channels:
        return DEFAULT_CHANNEL_ID

    if job.restoring:
        return create_restore_channel(env.host)

    payload = job.payload

    other_channel = payload.get("oth_chnl")
    if other_channel is not None and env.host.get_channel(str(other_channel)) is not None:
        return str(other_channel)

    if payload.get("chnl") is None:
        return create_default_channel(env.host)

    try:
        config, group = build_channel(env, ChannelPayload.parse(payload))
    except PayloadError as exc:
        logger.error("Could not create notification channel due to payload error: %s", exc)
        return create_default_channel(env.host)

    channel_id = register_channel(env.host, config, group)
    if channel_id is None:
        return create_default_channel(env.host)
    return channel_id
