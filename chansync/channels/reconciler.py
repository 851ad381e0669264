# ChannelSync - Notification Channel Reconciliation
# Copyright (C) 2026 ChannelSync Authors
# SPDX-License-Identifier: Apache-2.0

"""Batch channel synchronization.

The server sends the complete list of channels it wants.  Every entry is
built and registered; afterwards any owned channel (``OS_`` prefix) that
the list no longer declares is deleted.  Channels without the prefix are
never touched, and a sync that registered nothing deletes nothing.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any

from chansync.channels.builder import build_channel, register_channel
from chansync.channels.environment import ChannelEnvironment
from chansync.channels.host import HostChannelStore
from chansync.channels.models import ChannelConfig, ChannelPayload, ListStatus, SyncResult
from chansync.constants import CHANNEL_PREFIX
from chansync.exceptions import HostTeardownError, HostUnavailableError, PayloadError

logger = logging.getLogger("chansync.reconciler")


def _existing_channels(host: HostChannelStore) -> tuple[ChannelConfig, ...] | None:
    """Return the host's channels, or None when deletion must be skipped.

    Raises:
        BaseException: Any listing error other than host teardown.
    """
    listing = host.list_channels()
    if listing.status is ListStatus.OK:
        return listing.channels

    if listing.status is ListStatus.UNAVAILABLE:
        logger.error(
            "Could not list notification channels; skipping deletion: %s",
            listing.reason,
        )
        return None

    if isinstance(listing.error, HostTeardownError):
        return None
    if listing.error is None:
        raise HostUnavailableError(listing.reason or "Channel listing failed")
    raise listing.error


def process_channel_list(
    env: ChannelEnvironment,
    channel_list: Sequence[Mapping[str, Any] | str] | None,
) -> SyncResult:
    """Converge the host's owned channels to *channel_list*."""
    result = SyncResult()
    if not env.supports_channels or not channel_list:
        return result

    for entry in channel_list:
        try:
            config, group = build_channel(env, ChannelPayload.parse(entry))
        except PayloadError as exc:
            logger.error("Could not create notification channel due to payload error: %s", exc)
            result.failed += 1
            continue

        channel_id = register_channel(env.host, config, group)
        if channel_id is None:
            result.failed += 1
        else:
            result.synced.add(channel_id)

    if not result.synced:
        logger.warning(
            "No channels synced from %d entries; skipping deletion",
            len(channel_list),
        )
        result.deletion_skipped = True
        return result

    existing = _existing_channels(env.host)
    if existing is None:
        result.deletion_skipped = True
        return result

    for channel in existing:
        if channel.id.startswith(CHANNEL_PREFIX) and channel.id not in result.synced:
            env.host.delete_channel(channel.id)
            result.deleted.append(channel.id)

    logger.info(
        "Channel sync complete: synced=%d deleted=%d failed=%d",
        len(result.synced),
        len(result.deleted),
        result.failed,
    )
    return result
