"""Tests for chansync.channels.importance — priority to importance mapping."""
# ChannelSync - Notification Channel Reconciliation
# Copyright (C) 2026 ChannelSync Authors
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

import pytest

from chansync.channels.importance import priority_to_importance
from chansync.channels.models import Importance
from chansync.constants import DEFAULT_PRIORITY


class TestPriorityToImportance:
    @pytest.mark.parametrize(
        ("priority", "expected"),
        [
            (0, Importance.NONE),
            (1, Importance.NONE),
            (2, Importance.MIN),
            (3, Importance.MIN),
            (4, Importance.LOW),
            (5, Importance.LOW),
            (6, Importance.DEFAULT),
            (7, Importance.DEFAULT),
            (8, Importance.HIGH),
            (9, Importance.HIGH),
            (10, Importance.MAX),
        ],
    )
    def test_table(self, priority, expected):
        assert priority_to_importance(priority) is expected

    def test_monotonic_over_domain(self):
        levels = [priority_to_importance(p) for p in range(0, 11)]
        assert levels == sorted(levels)

    def test_out_of_domain_values_are_not_rejected(self):
        assert priority_to_importance(-5) is Importance.NONE
        assert priority_to_importance(42) is Importance.MAX

    def test_default_priority_maps_to_default(self):
        assert priority_to_importance(DEFAULT_PRIORITY) is Importance.DEFAULT
