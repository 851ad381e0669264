# ChannelSync - Notification Channel Reconciliation
# Copyright (C) 2026 ChannelSync Authors
# SPDX-License-Identifier: Apache-2.0

"""Localized channel text selection."""

from __future__ import annotations

from chansync.channels.models import ChannelSpec, ChannelText, ResolvedText
from chansync.constants import DEFAULT_CHANNEL_NAME


def select_channel_text(spec: ChannelSpec, language: str) -> ResolvedText:
    """Pick name, description and group name for *language*.

    A matching ``langs`` entry replaces the base fields as a whole; fields
    missing from that entry fall back to the defaults, not to the base text.
    """
    source: ChannelText = spec.langs.get(language, spec)
    return ResolvedText(
        name=source.name if source.name is not None else DEFAULT_CHANNEL_NAME,
        description=source.description,
        group_name=source.group_name or "",
    )
