# ChannelSync - Notification Channel Reconciliation
# Copyright (C) 2026 ChannelSync Authors
# SPDX-License-Identifier: Apache-2.0

"""ChannelSync: converge host notification channels to server-declared state."""

__version__ = "0.3.0"
