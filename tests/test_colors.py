"""Tests for doomtype.ui.colors – palette and color blending."""

from __future__ import annotations

import pytest

from doomtype.ui.colors import Theme, accuracy_color, blend_hex


class TestTheme:
    @pytest.mark.parametrize("name", ["BACKGROUND", "TEXT", "ACCENT", "SUCCESS", "ERROR", "CURSOR_TEXT"])
    def test_is_hex(self, name):
        value = getattr(Theme, name)
        assert value.startswith("#")
        assert len(value) == 7


class TestBlendHex:
    def test_t_zero_returns_a(self):
        assert blend_hex("#FF0000", "#0000FF", 0.0) == "#FF0000"

    def test_t_one_returns_b(self):
        assert blend_hex("#FF0000", "#0000FF", 1.0) == "#0000FF"

    def test_clamps_t(self):
        assert blend_hex("#000000", "#FFFFFF", 2.0) == "#FFFFFF"

    def test_invalid_input_returns_a(self):
        assert blend_hex("red", "#FFFFFF", 0.5) == "red"
        assert blend_hex("#GGGGGG", "#FFFFFF", 0.5) == "#GGGGGG"


class TestAccuracyColor:
    def test_endpoints(self):
        assert accuracy_color(100.0).lower() == Theme.SUCCESS
        assert accuracy_color(0.0).lower() == Theme.ERROR
