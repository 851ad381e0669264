"""Tests for chansync.channels.text — localized channel text."""
# ChannelSync - Notification Channel Reconciliation
# Copyright (C) 2026 ChannelSync Authors
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from chansync.channels.models import ChannelSpec, ResolvedText
from chansync.channels.text import select_channel_text


def _spec(**data) -> ChannelSpec:
    return ChannelSpec.model_validate(data)


class TestSelectChannelText:
    def test_base_fields(self):
        spec = _spec(nm="News", dscr="Daily news", grp_nm="Media")
        assert select_channel_text(spec, "en") == ResolvedText("News", "Daily news", "Media")

    def test_language_entry_wins(self):
        spec = _spec(
            nm="News",
            dscr="Daily news",
            langs={"de": {"nm": "Nachrichten", "dscr": "Tägliche Nachrichten"}},
        )
        text = select_channel_text(spec, "de")
        assert text.name == "Nachrichten"
        assert text.description == "Tägliche Nachrichten"

    def test_missing_language_falls_back_to_base(self):
        spec = _spec(nm="News", langs={"de": {"nm": "Nachrichten"}})
        assert select_channel_text(spec, "fr").name == "News"

    def test_language_entry_replaces_base_as_a_whole(self):
        # The entry has no description; the base description is not borrowed.
        spec = _spec(nm="News", dscr="Daily news", langs={"de": {"nm": "Nachrichten"}})
        text = select_channel_text(spec, "de")
        assert text.name == "Nachrichten"
        assert text.description is None

    def test_name_defaults_to_miscellaneous(self):
        assert select_channel_text(_spec(), "en").name == "Miscellaneous"

    def test_language_entry_without_name_defaults(self):
        spec = _spec(nm="News", langs={"de": {"dscr": "Beschreibung"}})
        assert select_channel_text(spec, "de").name == "Miscellaneous"

    def test_description_is_none_not_empty(self):
        text = select_channel_text(_spec(nm="News"), "en")
        assert text.description is None
        assert text.group_name == ""

    def test_localized_group_name(self):
        spec = _spec(grp_nm="Media", langs={"ja": {"nm": "ニュース", "grp_nm": "メディア"}})
        assert select_channel_text(spec, "ja").group_name == "メディア"
