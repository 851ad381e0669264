"""Tests for chansync.channels.properties — visual and audio attributes."""
# ChannelSync - Notification Channel Reconciliation
# Copyright (C) 2026 ChannelSync Authors
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

import logging
from unittest.mock import MagicMock

import pytest

from chansync.channels.models import ChannelPayload, SoundMode, SoundPolicy
from chansync.channels.properties import (
    is_valid_argb_hex,
    resolve_channel_properties,
    resolve_led_color,
    resolve_sound,
    resolve_vibration,
)
from chansync.channels.vibration import JsonVibrationParser
from chansync.constants import VISIBILITY_PRIVATE, VISIBILITY_PUBLIC
from tests.helpers.factories import FakeSoundResolver


def _payload(**data) -> ChannelPayload:
    return ChannelPayload.parse(data)


# ── LED color ────────────────────────────────────────────────


class TestLedColor:
    @pytest.mark.parametrize("value", ["FF9900FF", "ff9900ff", "00000000", "AbCdEf01"])
    def test_valid_hex(self, value):
        assert is_valid_argb_hex(value)

    @pytest.mark.parametrize(
        "value",
        ["", "FF9900", "FF9900FF0", "GG9900FF", "#FF9900F", "FF9900FF\n", None],
    )
    def test_invalid_hex(self, value):
        assert not is_valid_argb_hex(value)

    def test_absent_leaves_color_unset(self):
        assert resolve_led_color(_payload()) is None

    def test_valid_color_parsed(self):
        assert resolve_led_color(_payload(ledc="FF9900FF")) == 0xFF9900FF

    def test_invalid_color_substitutes_white_with_warning(self, caplog):
        with caplog.at_level(logging.WARNING, logger="chansync.properties"):
            color = resolve_led_color(_payload(ledc="orange"))
        assert color == 0xFFFFFFFF
        assert any("incorrect format" in r.message for r in caplog.records)

    def test_null_color_substitutes_white(self):
        assert resolve_led_color(_payload(ledc=None)) == 0xFFFFFFFF

    def test_numeric_color_is_validated_as_text(self):
        # 12345678 arrives as a number and is coerced to its digits
        assert resolve_led_color(_payload(ledc=12345678)) == 0x12345678


# ── Vibration ────────────────────────────────────────────────


class TestVibration:
    def test_absent_pattern_does_not_call_parser(self):
        parser = MagicMock()
        pattern, enabled = resolve_vibration(_payload(), parser)
        assert pattern is None
        assert enabled is True
        parser.parse.assert_not_called()

    def test_pattern_delegated_to_parser(self):
        parser = MagicMock()
        parser.parse.return_value = (0, 100, 200)
        pattern, _ = resolve_vibration(_payload(vib_pt=[0, 100, 200]), parser)
        assert pattern == (0, 100, 200)
        parser.parse.assert_called_once_with([0, 100, 200])

    def test_unparseable_pattern_keeps_enabled_flag(self):
        pattern, enabled = resolve_vibration(_payload(vib_pt="not json", vib=1), JsonVibrationParser())
        assert pattern is None
        assert enabled is True

    def test_disabled(self):
        _, enabled = resolve_vibration(_payload(vib=0), JsonVibrationParser())
        assert enabled is False


# ── Sound ────────────────────────────────────────────────────


class TestSound:
    def test_absent_is_default(self, sounds):
        assert resolve_sound(_payload(), sounds) == SoundPolicy.default()
        assert sounds.calls == []

    @pytest.mark.parametrize("sentinel", ["null", "nil"])
    def test_sentinel_is_silent(self, sounds, sentinel):
        assert resolve_sound(_payload(sound=sentinel), sounds).mode is SoundMode.SILENT

    def test_json_null_is_silent(self, sounds):
        assert resolve_sound(_payload(sound=None), sounds).mode is SoundMode.SILENT

    def test_resolvable_sound_is_custom(self, sounds):
        policy = resolve_sound(_payload(sound="tone.mp3"), sounds)
        assert policy == SoundPolicy.custom("file:///sounds/tone.mp3")

    def test_unresolvable_sound_is_silent(self):
        policy = resolve_sound(_payload(sound="tone.mp3"), FakeSoundResolver())
        assert policy.mode is SoundMode.SILENT
        assert policy != SoundPolicy.default()

    def test_sentinel_never_reaches_resolver(self):
        resolver = FakeSoundResolver({"null": "file:///sounds/null.wav"})
        assert resolve_sound(_payload(sound="null"), resolver).mode is SoundMode.SILENT
        assert resolver.calls == []


# ── Combined ─────────────────────────────────────────────────


class TestResolveChannelProperties:
    def test_defaults(self, sounds):
        props = resolve_channel_properties(_payload(), sounds, JsonVibrationParser())
        assert props.led_color is None
        assert props.led_enabled is True
        assert props.vibration_pattern is None
        assert props.vibration_enabled is True
        assert props.sound == SoundPolicy.default()
        assert props.visibility == VISIBILITY_PRIVATE
        assert props.show_badge is True
        assert props.bypass_dnd is False

    def test_explicit_flags(self, sounds):
        props = resolve_channel_properties(
            _payload(led=0, vib=0, vis=VISIBILITY_PUBLIC, bdg=0, bdnd=1),
            sounds,
            JsonVibrationParser(),
        )
        assert props.led_enabled is False
        assert props.vibration_enabled is False
        assert props.visibility == VISIBILITY_PUBLIC
        assert props.show_badge is False
        assert props.bypass_dnd is True

    def test_null_flags_use_defaults(self, sounds):
        props = resolve_channel_properties(
            _payload(led=None, bdg=None, bdnd=None, vis=None),
            sounds,
            JsonVibrationParser(),
        )
        assert props.led_enabled is True
        assert props.show_badge is True
        assert props.bypass_dnd is False
        assert props.visibility == VISIBILITY_PRIVATE
