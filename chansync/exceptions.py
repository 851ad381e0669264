# ChannelSync - Notification Channel Reconciliation
# Copyright (C) 2026 ChannelSync Authors
# SPDX-License-Identifier: Apache-2.0
#
# This file is part of ChannelSync, licensed under Apache-2.0.
# See LICENSE for the full license text.

"""Unified exception hierarchy for ChannelSync.

All domain-specific exceptions derive from :class:`ChannelSyncError`,
enabling callers to catch the entire family with a single clause::

    try:
        ...
    except ChannelSyncError as e:
        logger.error("Channel sync error: %s", e)
"""


class ChannelSyncError(Exception):
    """Base exception for all ChannelSync errors."""


# ── Payload ──────────────────────────────────────────────────


class PayloadError(ChannelSyncError):
    """A channel payload could not be decoded or validated."""


# ── Host subsystem ───────────────────────────────────────────


class HostError(ChannelSyncError):
    """Errors raised by a host notification subsystem."""


class ChannelRejectedError(HostError):
    """The host refused a channel or group configuration."""

    def __init__(self, message: str, *, channel_id: str = "") -> None:
        super().__init__(message)
        self.channel_id = channel_id


class HostUnavailableError(HostError):
    """The host could not be reached or returned inconsistent state."""


class HostTeardownError(HostError):
    """The host subsystem is shutting down together with the process.

    Reconciliation swallows this condition: the process is already
    terminating for an unrelated reason.
    """


# ── Configuration ────────────────────────────────────────────


class ConfigError(ChannelSyncError):
    """Configuration errors."""


class ConfigValidationError(ConfigError):
    """Configuration validation failure."""
