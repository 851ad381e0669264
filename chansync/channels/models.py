# ChannelSync - Notification Channel Reconciliation
# Copyright (C) 2026 ChannelSync Authors
# SPDX-License-Identifier: Apache-2.0

"""Channel data model.

Two families of types live here:

* Wire models (``ChannelPayload``, ``ChannelSpec``, ``ChannelText``): Pydantic
  models that decode one server-delivered JSON object.  Field aliases are the
  wire names and must not change.
* Resolved models (``ChannelConfig``, ``ChannelGroup``, ``SoundPolicy``, ...):
  frozen dataclasses handed to the host subsystem.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from dataclasses import asdict, dataclass, field
from enum import Enum, IntEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, ValidationInfo, field_validator

from chansync.constants import DEFAULT_PRIORITY, VISIBILITY_PRIVATE
from chansync.exceptions import PayloadError

logger = logging.getLogger("chansync.models")


# ── Enumerations ─────────────────────────────────────────────


class Importance(IntEnum):
    """Discrete urgency levels understood by the host."""

    NONE = 0
    MIN = 1
    LOW = 2
    DEFAULT = 3
    HIGH = 4
    MAX = 5


class SoundMode(Enum):
    DEFAULT = "default"  # host picks its default tone
    SILENT = "silent"  # explicitly no sound
    CUSTOM = "custom"


# ── Wire models ──────────────────────────────────────────────

_WIRE_CONFIG = ConfigDict(frozen=True, extra="ignore", coerce_numbers_to_str=True)


class ChannelText(BaseModel):
    """Per-language text block inside ``chnl.langs``."""

    model_config = _WIRE_CONFIG

    name: str | None = Field(None, alias="nm")
    description: str | None = Field(None, alias="dscr")
    group_name: str | None = Field(None, alias="grp_nm")


class ChannelSpec(ChannelText):
    """The ``chnl`` object: identity, text and group of one channel."""

    id: str | None = None
    group_id: str | None = Field(None, alias="grp_id")
    langs: dict[str, ChannelText] = Field(default_factory=dict)

    @field_validator("langs", mode="before")
    @classmethod
    def _null_langs(cls, value: Any) -> Any:
        return {} if value is None else value


class ChannelPayload(BaseModel):
    """One notification payload or channel-list entry.

    ``chnl`` arrives as a JSON-encoded string from push delivery and as a
    nested object from a cold-start sync; both are accepted.
    """

    model_config = _WIRE_CONFIG

    channel: ChannelSpec | None = Field(None, alias="chnl")
    other_channel: str | None = Field(None, alias="oth_chnl")
    priority: int = Field(DEFAULT_PRIORITY, alias="pri")
    led_color: str | None = Field(None, alias="ledc")
    led: int = Field(1, alias="led")
    vibration_pattern: Any = Field(None, alias="vib_pt")
    vibration: int = Field(1, alias="vib")
    sound: str | None = Field(None, alias="sound")
    visibility: int = Field(VISIBILITY_PRIVATE, alias="vis")
    badge: int = Field(1, alias="bdg")
    bypass_dnd: int = Field(0, alias="bdnd")

    @field_validator("channel", mode="before")
    @classmethod
    def _decode_channel(cls, value: Any) -> Any:
        if isinstance(value, (str, bytes)):
            return json.loads(value)
        return value

    @field_validator("priority", "led", "vibration", "visibility", "badge", "bypass_dnd", mode="before")
    @classmethod
    def _lenient_int(cls, value: Any, info: ValidationInfo) -> int:
        """Truncate fractional numbers; anything non-numeric means the default."""
        default = cls.model_fields[info.field_name].default
        if value is None or isinstance(value, bool):
            return default
        if isinstance(value, int):
            return value
        try:
            return int(float(value))
        except (TypeError, ValueError, OverflowError):
            logger.debug("Ignoring non-numeric %s=%r; using %r", info.field_name, value, default)
            return default

    def has(self, field_name: str) -> bool:
        """Return True if *field_name* was present in the decoded JSON."""
        return field_name in self.model_fields_set

    @classmethod
    def parse(cls, raw: Mapping[str, Any] | str) -> ChannelPayload:
        """Decode *raw* (a mapping or JSON text) into a payload.

        Raises:
            PayloadError: The payload is not valid JSON or does not match
                the wire schema.
        """
        try:
            if isinstance(raw, str):
                return cls.model_validate_json(raw)
            return cls.model_validate(raw)
        except ValidationError as exc:
            raise PayloadError(f"Invalid channel payload: {exc}") from exc


# ── Resolved models ──────────────────────────────────────────


@dataclass(frozen=True)
class ResolvedText:
    name: str
    description: str | None = None
    group_name: str = ""


@dataclass(frozen=True)
class SoundPolicy:
    """Tri-state sound setting: host default, silent, or a custom URI."""

    mode: SoundMode = SoundMode.DEFAULT
    uri: str | None = None

    @classmethod
    def default(cls) -> SoundPolicy:
        return cls(SoundMode.DEFAULT)

    @classmethod
    def silent(cls) -> SoundPolicy:
        return cls(SoundMode.SILENT)

    @classmethod
    def custom(cls, uri: str) -> SoundPolicy:
        return cls(SoundMode.CUSTOM, uri)


@dataclass(frozen=True)
class ChannelGroup:
    id: str
    name: str = ""


@dataclass(frozen=True)
class ChannelConfig:
    """A fully resolved channel, ready to register with the host.

    Defaults mirror a bare host channel; payload-driven defaults (lights and
    vibration on, private visibility) are applied by the property resolver.
    """

    id: str
    name: str
    importance: Importance = Importance.DEFAULT
    description: str | None = None
    group_id: str | None = None
    led_color: int | None = None  # unsigned 32-bit ARGB
    led_enabled: bool = False
    vibration_pattern: tuple[int, ...] | None = None
    vibration_enabled: bool = False
    sound: SoundPolicy = SoundPolicy()
    visibility: int | None = None  # None = host default
    show_badge: bool = True
    bypass_dnd: bool = False

    def to_dict(self) -> dict[str, Any]:
        data = asdict(self)
        data["importance"] = self.importance.name.lower()
        data["sound"] = {"mode": self.sound.mode.value, "uri": self.sound.uri}
        if self.vibration_pattern is not None:
            data["vibration_pattern"] = list(self.vibration_pattern)
        return data

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ChannelConfig:
        values = dict(data)
        values["importance"] = Importance[str(values.get("importance", "default")).upper()]
        sound = values.get("sound") or {}
        values["sound"] = SoundPolicy(SoundMode(sound.get("mode", "default")), sound.get("uri"))
        if values.get("vibration_pattern") is not None:
            values["vibration_pattern"] = tuple(values["vibration_pattern"])
        return cls(**values)


# ── Results ──────────────────────────────────────────────────


class ListStatus(Enum):
    OK = "ok"
    UNAVAILABLE = "unavailable"  # known, benign host defect
    ERROR = "error"


@dataclass(frozen=True)
class ChannelListResult:
    """Outcome of ``HostChannelStore.list_channels``."""

    status: ListStatus
    channels: tuple[ChannelConfig, ...] = ()
    reason: str = ""
    error: BaseException | None = None

    @classmethod
    def ok(cls, channels: list[ChannelConfig] | tuple[ChannelConfig, ...]) -> ChannelListResult:
        return cls(ListStatus.OK, tuple(channels))

    @classmethod
    def unavailable(cls, reason: str) -> ChannelListResult:
        return cls(ListStatus.UNAVAILABLE, reason=reason)

    @classmethod
    def failed(cls, error: BaseException) -> ChannelListResult:
        return cls(ListStatus.ERROR, reason=str(error), error=error)


@dataclass
class SyncResult:
    """Outcome of one batch reconciliation."""

    synced: set[str] = field(default_factory=set)
    deleted: list[str] = field(default_factory=list)
    failed: int = 0
    deletion_skipped: bool = False
