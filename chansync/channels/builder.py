# ChannelSync - Notification Channel Reconciliation
# Copyright (C) 2026 ChannelSync Authors
# SPDX-License-Identifier: Apache-2.0

"""Assemble channel configurations and register them with the host."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from chansync.channels.importance import priority_to_importance
from chansync.channels.models import ChannelConfig, ChannelGroup, ChannelPayload, ChannelSpec
from chansync.channels.properties import resolve_channel_properties
from chansync.channels.text import select_channel_text
from chansync.constants import DEFAULT_CHANNEL_ID, HOST_DEFAULT_CHANNEL_ID
from chansync.exceptions import ChannelRejectedError, PayloadError

if TYPE_CHECKING:
    from chansync.channels.environment import ChannelEnvironment
    from chansync.channels.host import HostChannelStore

logger = logging.getLogger("chansync.builder")


def resolve_channel_id(spec: ChannelSpec) -> str:
    """Return the id declared by *spec*, coerced away from reserved values."""
    channel_id = spec.id or DEFAULT_CHANNEL_ID
    if channel_id == HOST_DEFAULT_CHANNEL_ID:
        return DEFAULT_CHANNEL_ID
    return channel_id


def build_channel(
    env: ChannelEnvironment,
    payload: ChannelPayload,
) -> tuple[ChannelConfig, ChannelGroup | None]:
    """Resolve *payload* into a channel and its optional group.

    Identity, text and group come from the ``chnl`` object; priority and
    the visual/audio attributes come from the payload itself.

    Raises:
        PayloadError: The payload carries no channel specification.
    """
    spec = payload.channel
    if spec is None:
        raise PayloadError("Payload has no channel specification")

    text = select_channel_text(spec, env.language.get_language())
    props = resolve_channel_properties(payload, env.sound_resolver, env.vibration_parser)

    group = None
    if spec.group_id is not None:
        group = ChannelGroup(id=spec.group_id, name=text.group_name)

    config = ChannelConfig(
        id=resolve_channel_id(spec),
        name=text.name,
        importance=priority_to_importance(payload.priority),
        description=text.description,
        group_id=group.id if group is not None else None,
        led_color=props.led_color,
        led_enabled=props.led_enabled,
        vibration_pattern=props.vibration_pattern,
        vibration_enabled=props.vibration_enabled,
        sound=props.sound,
        visibility=props.visibility,
        show_badge=props.show_badge,
        bypass_dnd=props.bypass_dnd,
    )
    return config, group


def register_channel(
    host: HostChannelStore,
    config: ChannelConfig,
    group: ChannelGroup | None = None,
) -> str | None:
    """Register *group* (if any) and then *config* with the host.

    Returns the channel id, or None when the host rejected either call.
    Rejections are logged with the full resolved configuration.
    """
    logger.debug("Creating notification channel: %s", config)
    try:
        if group is not None:
            host.create_channel_group(group)
        host.create_channel(config)
    except ChannelRejectedError as exc:
        logger.error(
            "Host rejected notification channel '%s': %s (group=%s, config=%s)",
            config.id,
            exc,
            group,
            config.to_dict(),
        )
        return None
    return config.id
