"""CLI commands for syncing and inspecting notification channels."""

# ChannelSync - Notification Channel Reconciliation
# Copyright (C) 2026 ChannelSync Authors
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

import argparse
import dataclasses
import json
import logging
import sys
import uuid
from pathlib import Path
from typing import Any

from chansync.channels import (
    ChannelEnvironment,
    NotificationJob,
    create_notification_channel,
    process_channel_list,
)
from chansync.channels.host import InMemoryHostStore
from chansync.channels.models import ListStatus
from chansync.config import load_config
from chansync.constants import CHANNEL_PREFIX
from chansync.exceptions import ChannelSyncError
from chansync.logging_config import bind_sync_context, clear_sync_context
from chansync.paths import get_data_dir

logger = logging.getLogger("chansync.cli")


# ── Helpers ───────────────────────────────────────────────


def _fail(message: str) -> None:
    print(f"Error: {message}", file=sys.stderr)
    sys.exit(1)


def _load_json(path_str: str) -> Any:
    path = Path(path_str)
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except OSError as exc:
        _fail(f"cannot read {path}: {exc}")
    except json.JSONDecodeError as exc:
        _fail(f"{path} is not valid JSON: {exc}")


def _extract_channel_list(data: Any) -> list[Any]:
    """Accept a bare list or a sync response carrying ``chnl_lst``."""
    if isinstance(data, list):
        return data
    if isinstance(data, dict) and isinstance(data.get("chnl_lst"), list):
        return data["chnl_lst"]
    _fail("payload must be a JSON list or an object with a 'chnl_lst' list")
    return []


def _environment() -> ChannelEnvironment:
    return ChannelEnvironment.from_config(load_config(), get_data_dir())


# ── Commands ──────────────────────────────────────────────


def cmd_sync(args: argparse.Namespace) -> None:
    """Reconcile the host store against a channel list file."""
    channel_list = _extract_channel_list(_load_json(args.payload))
    env = _environment()

    if args.dry_run:
        listing = env.host.list_channels()
        if listing.status is not ListStatus.OK:
            _fail(f"cannot read channel store: {listing.reason}")
        env = dataclasses.replace(env, host=InMemoryHostStore(listing.channels))

    bind_sync_context(run_id=uuid.uuid4().hex[:8])
    try:
        result = process_channel_list(env, channel_list)
    except (ChannelSyncError, OSError) as exc:
        logger.error("Channel sync failed: %s", exc)
        _fail(f"sync failed: {exc}")
        return
    finally:
        clear_sync_context()

    prefix = "[dry-run] " if args.dry_run else ""
    for channel_id in sorted(result.synced):
        print(f"{prefix}synced   {channel_id}")
    for channel_id in result.deleted:
        print(f"{prefix}deleted  {channel_id}")
    if result.failed:
        print(f"{prefix}failed   {result.failed} entr{'y' if result.failed == 1 else 'ies'}")
    if result.deletion_skipped:
        print(f"{prefix}deletion skipped")


def cmd_resolve(args: argparse.Namespace) -> None:
    """Print the channel id one notification payload resolves to."""
    payload = _load_json(args.payload)
    if not isinstance(payload, dict):
        _fail("notification payload must be a JSON object")

    job = NotificationJob(payload=payload, restoring=args.restore)
    try:
        channel_id = create_notification_channel(_environment(), job)
    except ChannelSyncError as exc:
        _fail(str(exc))
        return
    print(channel_id)


def cmd_list(args: argparse.Namespace) -> None:
    listing = _environment().host.list_channels()
    if listing.status is not ListStatus.OK:
        _fail(f"cannot read channel store: {listing.reason}")

    channels = sorted(listing.channels, key=lambda c: c.id)
    if args.owned:
        channels = [c for c in channels if c.id.startswith(CHANNEL_PREFIX)]

    if not channels:
        print("No channels.")
        return

    width = max(len(c.id) for c in channels)
    for channel in channels:
        print(f"{channel.id:<{width}}  {channel.importance.name.lower():<8}  {channel.name}")


def cmd_delete(args: argparse.Namespace) -> None:
    host = _environment().host
    try:
        if host.get_channel(args.channel_id) is None:
            _fail(f"channel '{args.channel_id}' not found")
        host.delete_channel(args.channel_id)
    except ChannelSyncError as exc:
        _fail(str(exc))
        return
    print(f"Deleted {args.channel_id}")
