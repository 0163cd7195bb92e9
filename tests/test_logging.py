# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for user-facing logging helpers."""

from __future__ import annotations

import pytest

from hookqa.logging import emoji, fail, ok


def test_emoji_toggle() -> None:
    assert emoji("✅ ", True) == "✅ "
    assert emoji("✅ ", False) == ""


def test_messages_reach_stdout(capsys: pytest.CaptureFixture[str]) -> None:
    ok("all good", use_emoji=False, use_color=False)
    fail("broken", use_emoji=True, use_color=False)

    out = capsys.readouterr().out
    assert "all good" in out
    assert "❌ broken" in out
