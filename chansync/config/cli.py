# ChannelSync - Notification Channel Reconciliation
# Copyright (C) 2026 ChannelSync Authors
# SPDX-License-Identifier: Apache-2.0
#
# This file is part of ChannelSync, licensed under Apache-2.0.
# See LICENSE for the full license text.

"""CLI handlers for the ``chansync config`` subcommand."""

from __future__ import annotations

import argparse
import re
import sys
from collections.abc import Iterator
from typing import Any

from pydantic import ValidationError

from chansync.config.models import (
    ChannelSyncConfig,
    invalidate_cache,
    load_config,
    save_config,
)


# ---------------------------------------------------------------------------
# Helper utilities
# ---------------------------------------------------------------------------

_LITERALS: dict[str, Any] = {"null": None, "none": None, "true": True, "false": False}
_INT_RE = re.compile(r"-?\d+")


def _iter_items(data: dict, prefix: str = "") -> Iterator[tuple[str, Any]]:
    """Yield ``section.field`` keys with their values, depth first."""
    for name, value in data.items():
        key = f"{prefix}.{name}" if prefix else name
        if isinstance(value, dict):
            yield from _iter_items(value, key)
        else:
            yield key, value


def _coerce_value(value: str) -> Any:
    lowered = value.lower()
    if lowered in _LITERALS:
        return _LITERALS[lowered]
    return int(value) if _INT_RE.fullmatch(value) else value


def _assign(data: dict, key: str, value: Any) -> None:
    """Replace the value at an existing dot-notation *key*."""
    *sections, leaf = key.split(".")
    for section in sections:
        data = data[section]
    data[leaf] = value


def _lookup(data: dict, key: str) -> Any:
    """Return the value at dot-notation *key*, exiting with status 1 if absent."""
    current: Any = data
    for part in key.split("."):
        if not isinstance(current, dict) or part not in current:
            print(f"Error: key '{key}' not found in configuration", file=sys.stderr)
            sys.exit(1)
        current = current[part]
    return current


# ---------------------------------------------------------------------------
# Command handlers
# ---------------------------------------------------------------------------


def cmd_config_dispatch(args: argparse.Namespace) -> None:
    """Entry point for ``chansync config`` without a subcommand."""
    if not getattr(args, "config_command", None):
        args.config_parser.print_help()


def cmd_config_get(args: argparse.Namespace) -> None:
    print(_lookup(load_config().model_dump(), args.key))


def cmd_config_set(args: argparse.Namespace) -> None:
    """Set an existing configuration key; the result must still validate."""
    data = load_config().model_dump()
    _lookup(data, args.key)

    value = _coerce_value(args.value)
    _assign(data, args.key, value)
    try:
        updated = ChannelSyncConfig.model_validate(data)
    except ValidationError as exc:
        print(f"Error: invalid value for '{args.key}': {exc}", file=sys.stderr)
        sys.exit(1)

    invalidate_cache()
    save_config(updated)
    print(f"Set {args.key} = {value}")


def cmd_config_list(args: argparse.Namespace) -> None:
    """Print ``key = value`` lines, optionally limited to one section."""
    section: str | None = getattr(args, "section", None)
    for key, value in _iter_items(load_config().model_dump()):
        if section and key != section and not key.startswith(f"{section}."):
            continue
        print(f"{key} = {value}")
