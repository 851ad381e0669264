# ChannelSync - Notification Channel Reconciliation
# Copyright (C) 2026 ChannelSync Authors
# SPDX-License-Identifier: Apache-2.0

"""Visual and audio channel attributes derived from a payload.

Each helper owns one attribute family and its fallbacks:

* LED color: ``ledc`` must be exactly eight hex digits (ARGB).  Anything else
  is replaced by opaque white with a warning.
* Vibration: ``vib_pt`` goes through the injected ``VibrationParser``; an
  unparseable pattern keeps the host default pattern.
* Sound: tri-state.  A missing ``sound`` field leaves the host default tone,
  ``"null"``/``"nil"`` (or JSON null) and unresolvable names mean silence,
  and a resolvable name becomes a custom URI.  "Unset" and "silent" are
  different host states and must never be merged.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass

from chansync.channels.host import SoundResolver, VibrationParser
from chansync.channels.models import ChannelPayload, SoundPolicy
from chansync.constants import LED_COLOR_FALLBACK, SILENT_SOUND_SENTINELS

logger = logging.getLogger("chansync.properties")

_ARGB_HEX_RE = re.compile(r"[A-Fa-f0-9]{8}")


@dataclass(frozen=True)
class ChannelProperties:
    led_color: int | None
    led_enabled: bool
    vibration_pattern: tuple[int, ...] | None
    vibration_enabled: bool
    sound: SoundPolicy
    visibility: int
    show_badge: bool
    bypass_dnd: bool


def is_valid_argb_hex(value: str | None) -> bool:
    return value is not None and _ARGB_HEX_RE.fullmatch(value) is not None


def resolve_led_color(payload: ChannelPayload) -> int | None:
    """Return the LED color as an unsigned ARGB integer, or None if unset."""
    if not payload.has("led_color"):
        return None

    ledc = payload.led_color
    if not is_valid_argb_hex(ledc):
        logger.warning(
            "LED color settings: ARGB hex value has incorrect format (e.g. FF9900FF): %r",
            ledc,
        )
        ledc = LED_COLOR_FALLBACK

    try:
        return int(ledc, 16)
    except ValueError:
        logger.exception("Could not convert ARGB hex value %r", ledc)
        return None


def resolve_vibration(
    payload: ChannelPayload,
    parser: VibrationParser,
) -> tuple[tuple[int, ...] | None, bool]:
    """Return ``(pattern, enabled)``; a None pattern keeps the host default."""
    pattern = None
    if payload.has("vibration_pattern"):
        pattern = parser.parse(payload.vibration_pattern)
    return pattern, payload.vibration == 1


def resolve_sound(payload: ChannelPayload, resolver: SoundResolver) -> SoundPolicy:
    if not payload.has("sound"):
        return SoundPolicy.default()

    sound = payload.sound
    if sound is None or sound in SILENT_SOUND_SENTINELS:
        return SoundPolicy.silent()

    uri = resolver.resolve(sound)
    if uri is None:
        logger.debug("Sound '%s' did not resolve; channel will be silent", sound)
        return SoundPolicy.silent()
    return SoundPolicy.custom(uri)


def resolve_channel_properties(
    payload: ChannelPayload,
    sound_resolver: SoundResolver,
    vibration_parser: VibrationParser,
) -> ChannelProperties:
    pattern, vibration_enabled = resolve_vibration(payload, vibration_parser)
    return ChannelProperties(
        led_color=resolve_led_color(payload),
        led_enabled=payload.led == 1,
        vibration_pattern=pattern,
        vibration_enabled=vibration_enabled,
        sound=resolve_sound(payload, sound_resolver),
        visibility=payload.visibility,
        show_badge=payload.badge == 1,
        bypass_dnd=payload.bypass_dnd == 1,
    )
