# ChannelSync - Notification Channel Reconciliation
# Copyright (C) 2026 ChannelSync Authors
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

import argparse
import os
import sys


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="ChannelSync - notification channel reconciliation"
    )
    parser.add_argument(
        "--data-dir",
        default=None,
        help="Override runtime data directory (default: ~/.chansync or CHANSYNC_DATA_DIR)",
    )
    sub = parser.add_subparsers(dest="command")

    # ── Sync ──────────────────────────────────────────────
    p_sync = sub.add_parser("sync", help="Reconcile host channels with a channel list")
    p_sync.add_argument("payload", help="JSON file: a channel list or an object with 'chnl_lst'")
    p_sync.add_argument(
        "--dry-run", action="store_true",
        help="Reconcile against an in-memory copy of the store",
    )
    p_sync.set_defaults(func=_lazy_sync)

    # ── Resolve ───────────────────────────────────────────
    p_resolve = sub.add_parser("resolve", help="Resolve the channel for one notification payload")
    p_resolve.add_argument("payload", help="JSON file with one notification payload")
    p_resolve.add_argument(
        "--restore", action="store_true",
        help="Treat the notification as a restore job",
    )
    p_resolve.set_defaults(func=_lazy_resolve)

    # ── List ──────────────────────────────────────────────
    p_list = sub.add_parser("list", help="List channels in the host store")
    p_list.add_argument(
        "--owned", action="store_true",
        help="Only show channels owned by ChannelSync",
    )
    p_list.set_defaults(func=_lazy_list)

    # ── Delete ────────────────────────────────────────────
    p_delete = sub.add_parser("delete", help="Delete a channel from the host store")
    p_delete.add_argument("channel_id", help="Channel id")
    p_delete.set_defaults(func=_lazy_delete)

    # ── Config ────────────────────────────────────────────
    from chansync.config.cli import (
        cmd_config_dispatch,
        cmd_config_get,
        cmd_config_list,
        cmd_config_set,
    )

    p_config = sub.add_parser("config", help="Manage configuration")
    p_config.set_defaults(func=cmd_config_dispatch, config_parser=p_config)
    config_sub = p_config.add_subparsers(dest="config_command")

    p_cfg_get = config_sub.add_parser("get", help="Get a config value")
    p_cfg_get.add_argument("key", help="Dot-notation key (e.g. host.store_file)")
    p_cfg_get.set_defaults(func=cmd_config_get)

    p_cfg_set = config_sub.add_parser("set", help="Set a config value")
    p_cfg_set.add_argument("key", help="Dot-notation key")
    p_cfg_set.add_argument("value", help="Value to set")
    p_cfg_set.set_defaults(func=cmd_config_set)

    p_cfg_list = config_sub.add_parser("list", help="List all config values")
    p_cfg_list.add_argument("--section", default=None, help="Filter by section")
    p_cfg_list.set_defaults(func=cmd_config_list)

    return parser


def cli_main(argv: list[str] | None = None) -> None:
    from dotenv import load_dotenv

    load_dotenv()

    parser = build_parser()
    args = parser.parse_args(argv)

    # Apply --data-dir override before any command
    if args.data_dir:
        os.environ["CHANSYNC_DATA_DIR"] = args.data_dir

    from chansync.config import load_config
    from chansync.exceptions import ConfigError
    from chansync.logging_config import setup_logging
    from chansync.paths import get_log_dir

    try:
        config = load_config()
    except ConfigError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(1)
    setup_logging(
        level=os.environ.get("CHANSYNC_LOG_LEVEL", config.system.log_level),
        log_dir=get_log_dir(),
        json_file=config.system.json_log_file,
    )

    if hasattr(args, "func"):
        args.func(args)
    else:
        parser.print_help()


# ── Lazy import wrappers ──────────────────────────────────


def _lazy_sync(args: argparse.Namespace) -> None:
    from cli.commands.channels import cmd_sync

    cmd_sync(args)


def _lazy_resolve(args: argparse.Namespace) -> None:
    from cli.commands.channels import cmd_resolve

    cmd_resolve(args)


def _lazy_list(args: argparse.Namespace) -> None:
    from cli.commands.channels import cmd_list

    cmd_list(args)


def _lazy_delete(args: argparse.Namespace) -> None:
    from cli.commands.channels import cmd_delete

    cmd_delete(args)
