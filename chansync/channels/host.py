# ChannelSync - Notification Channel Reconciliation
# Copyright (C) 2026 ChannelSync Authors
# SPDX-License-Identifier: Apache-2.0

"""Collaborator interfaces and the bundled host channel stores.

The core never talks to an OS notification service directly; it goes
through ``HostChannelStore``.  Two stores ship with the package:

* ``InMemoryHostStore``: dict-backed, used for dry runs and tests.
* ``JsonFileHostStore``: persists channels to a JSON file so the CLI can
  reconcile across runs.

Both reject the same illegal configurations a real host does.
"""

from __future__ import annotations

import json
import logging
import os
from abc import ABC, abstractmethod
from collections.abc import Iterable
from pathlib import Path
from typing import Any

from chansync.channels.models import ChannelConfig, ChannelGroup, ChannelListResult
from chansync.constants import HOST_DEFAULT_CHANNEL_ID
from chansync.exceptions import ChannelRejectedError, HostUnavailableError

logger = logging.getLogger("chansync.host")


# ── Abstract collaborators ──────────────────────────────────


class HostChannelStore(ABC):
    """The host notification subsystem's channel storage."""

    @abstractmethod
    def create_channel(self, config: ChannelConfig) -> None:
        """Create or update a channel.

        Raises:
            ChannelRejectedError: The host refused the configuration.
        """

    @abstractmethod
    def create_channel_group(self, group: ChannelGroup) -> None:
        """Create or update a channel group."""

    @abstractmethod
    def list_channels(self) -> ChannelListResult:
        """Return every channel the host currently knows about."""

    @abstractmethod
    def delete_channel(self, channel_id: str) -> None:
        """Delete a channel; unknown ids are ignored."""

    @abstractmethod
    def get_channel(self, channel_id: str) -> ChannelConfig | None:
        """Return the channel with *channel_id*, or None."""


class LanguageProvider(ABC):
    @abstractmethod
    def get_language(self) -> str:
        """Return the active language code (e.g. ``"en"``)."""


class SoundResolver(ABC):
    @abstractmethod
    def resolve(self, sound: str | None) -> str | None:
        """Return a URI for the named sound, or None if it cannot be found."""


class VibrationParser(ABC):
    @abstractmethod
    def parse(self, raw: Any) -> tuple[int, ...] | None:
        """Return a vibration pattern in milliseconds, or None."""


class FixedLanguage(LanguageProvider):
    """Language provider returning a configured code."""

    def __init__(self, language: str) -> None:
        self._language = language

    def get_language(self) -> str:
        return self._language


# ── Validation ──────────────────────────────────────────────


def validate_channel(config: ChannelConfig) -> None:
    """Raise ``ChannelRejectedError`` for configurations a host refuses."""
    if not config.id:
        raise ChannelRejectedError("Channel id must not be empty")
    if config.id == HOST_DEFAULT_CHANNEL_ID:
        raise ChannelRejectedError(
            f"Channel id '{HOST_DEFAULT_CHANNEL_ID}' is reserved by the host",
            channel_id=config.id,
        )
    if not config.name:
        raise ChannelRejectedError("Channel name must not be empty", channel_id=config.id)


def validate_group(group: ChannelGroup) -> None:
    if not group.id:
        raise ChannelRejectedError("Channel group id must not be empty")


# ── In-memory store ─────────────────────────────────────────


class InMemoryHostStore(HostChannelStore):
    """Dict-backed host store."""

    def __init__(
        self,
        channels: Iterable[ChannelConfig] = (),
        groups: Iterable[ChannelGroup] = (),
    ) -> None:
        self._channels: dict[str, ChannelConfig] = {c.id: c for c in channels}
        self._groups: dict[str, ChannelGroup] = {g.id: g for g in groups}

    @property
    def channel_ids(self) -> set[str]:
        return set(self._channels)

    @property
    def groups(self) -> dict[str, ChannelGroup]:
        return dict(self._groups)

    def create_channel(self, config: ChannelConfig) -> None:
        validate_channel(config)
        self._channels[config.id] = config

    def create_channel_group(self, group: ChannelGroup) -> None:
        validate_group(group)
        self._groups[group.id] = group

    def list_channels(self) -> ChannelListResult:
        return ChannelListResult.ok(list(self._channels.values()))

    def delete_channel(self, channel_id: str) -> None:
        self._channels.pop(channel_id, None)

    def get_channel(self, channel_id: str) -> ChannelConfig | None:
        return self._channels.get(channel_id)


# ── JSON file store ─────────────────────────────────────────


class JsonFileHostStore(HostChannelStore):
    """Host store persisted as a single JSON document.

    Layout::

        {"version": 1,
         "channels": {"<id>": {...ChannelConfig.to_dict()...}},
         "groups": {"<id>": "<name>"}}

    A file that exists but cannot be decoded is reported by
    :meth:`list_channels` as *unavailable* (typically a concurrent writer
    left it half-written); OS-level failures are reported as errors.
    """

    def __init__(self, path: Path) -> None:
        self._path = path

    @property
    def path(self) -> Path:
        return self._path

    def _read(self) -> dict[str, Any]:
        if not self._path.is_file():
            return {"version": 1, "channels": {}, "groups": {}}
        data = json.loads(self._path.read_text(encoding="utf-8"))
        if not isinstance(data, dict):
            raise ValueError(f"Unexpected store root type: {type(data).__name__}")
        data.setdefault("channels", {})
        data.setdefault("groups", {})
        return data

    def _load(self) -> dict[str, Any]:
        try:
            return self._read()
        except (json.JSONDecodeError, ValueError) as exc:
            raise HostUnavailableError(f"Channel store {self._path} is unreadable: {exc}") from exc

    def _save(self, data: dict[str, Any]) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        tmp = self._path.with_suffix(self._path.suffix + ".tmp")
        tmp.write_text(json.dumps(data, indent=2, ensure_ascii=False) + "\n", encoding="utf-8")
        os.replace(tmp, self._path)

    def create_channel(self, config: ChannelConfig) -> None:
        validate_channel(config)
        data = self._load()
        data["channels"][config.id] = config.to_dict()
        self._save(data)

    def create_channel_group(self, group: ChannelGroup) -> None:
        validate_group(group)
        data = self._load()
        data["groups"][group.id] = group.name
        self._save(data)

    def list_channels(self) -> ChannelListResult:
        try:
            data = self._read()
            channels = [ChannelConfig.from_dict(v) for v in data["channels"].values()]
        except (ValueError, KeyError, TypeError) as exc:
            logger.warning("Channel store %s is inconsistent: %s", self._path, exc)
            return ChannelListResult.unavailable(str(exc))
        except OSError as exc:
            return ChannelListResult.failed(exc)
        return ChannelListResult.ok(channels)

    def delete_channel(self, channel_id: str) -> None:
        data = self._load()
        if data["channels"].pop(channel_id, None) is not None:
            self._save(data)

    def get_channel(self, channel_id: str) -> ChannelConfig | None:
        raw = self._load()["channels"].get(channel_id)
        return ChannelConfig.from_dict(raw) if raw is not None else None

    def list_groups(self) -> list[ChannelGroup]:
        return [ChannelGroup(gid, name) for gid, name in self._load()["groups"].items()]
