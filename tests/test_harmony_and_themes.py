"""
Tests for harmony rules and seeded theme palettes.
"""

import re

import pytest

from palettelab.services.colors.conversion import InvalidFormat, hex_to_hsl
from palettelab.services.colors.harmony import HARMONY_RULES, generate_harmony, rotate_hue
from palettelab.services.colors.themes import (
    GENERATORS, PALETTE_SIZE, SUNSET_COLORS, THEMES, VINTAGE_POOL, generate_palette, new_seed
)

HEX_RE = re.compile(r"^#[0-9a-f]{6}$")


class TestRotateHue:

    def test_rotate_hue_basic(self):
        assert rotate_hue(0, 180) == 180
        assert rotate_hue(90, 90) == 180

    def test_rotate_hue_wraparound(self):
        assert rotate_hue(350, 20) == 10
        assert rotate_hue(10, -30) == 340
        assert rotate_hue(180, 360) == 180


class TestHarmony:
    """Test harmony sets derived from pure red"""

    def test_complementary(self):
        assert generate_harmony("#ff0000", "complementary") == ["#ff0000", "#00ffff"]

    def test_triadic(self):
        assert generate_harmony("#ff0000", "triadic") == ["#ff0000", "#00ff00", "#0000ff"]

    def test_tetradic(self):
        assert generate_harmony("#ff0000", "tetradic") == ["#ff0000", "#80ff00", "#00ffff", "#8000ff"]

    def test_analogous(self):
        assert generate_harmony("#ff0000", "analogous") == ["#ff0080", "#ff0000", "#ff8000", "#ffff00"]

    def test_split_complementary(self):
        assert generate_harmony("#ff0000", "split-complementary") == ["#ff0000", "#00ff80", "#0080ff"]

    def test_monochromatic(self):
        assert generate_harmony("#ff0000", "monochromatic") == [
            "#660000", "#b30000", "#ff0000", "#ff4d4d", "#ff9999"
        ]

    def test_monochromatic_keeps_hue(self):
        colors = generate_harmony("#3b82f6", "monochromatic")

        assert colors[2] == "#3b82f6"
        for color in colors[:2] + colors[3:4]:
            h, _, _ = hex_to_hsl(color)
            assert abs(h - 217) <= 1

    def test_base_is_normalized(self):
        assert generate_harmony("F00")[0] == "#ff0000"

    @pytest.mark.parametrize("kind", list(HARMONY_RULES))
    def test_all_rules_return_hex(self, kind):
        colors = generate_harmony("#3b82f6", kind)

        assert "#3b82f6" in colors
        assert all(HEX_RE.match(c) for c in colors)

    def test_unknown_kind(self):
        with pytest.raises(ValueError, match="Unknown harmony type"):
            generate_harmony("#ff0000", "pentadic")

    def test_invalid_base(self):
        with pytest.raises(InvalidFormat):
            generate_harmony("#zzzzzz")


class TestThemes:
    """Test seeded theme palette generation"""

    def test_every_theme_has_a_generator(self):
        assert set(GENERATORS) == set(THEMES)
        assert len(THEMES) == 12

    @pytest.mark.parametrize("theme", list(THEMES))
    def test_same_seed_same_palette(self, theme):
        first = generate_palette(theme, seed=42)
        second = generate_palette(theme, seed=42)

        assert first == second
        assert len(first) == PALETTE_SIZE
        assert all(HEX_RE.match(c) for c in first)

    def test_different_seeds_differ(self):
        assert generate_palette("random", seed=1) != generate_palette("random", seed=2)

    def test_fixed_themes(self):
        assert generate_palette("sunset", seed=7) == SUNSET_COLORS

    def test_pool_themes_draw_distinct_pool_colors(self):
        colors = generate_palette("vintage", seed=3)

        assert len(set(colors)) == PALETTE_SIZE
        assert set(colors) <= set(VINTAGE_POOL)

    def test_warm_palette_lightness_range(self):
        for color in generate_palette("warm", seed=11):
            _, _, l = hex_to_hsl(color)
            assert 44 <= l <= 76

    def test_unknown_theme(self):
        with pytest.raises(ValueError, match="Unknown palette theme"):
            generate_palette("neon", seed=1)

    def test_new_seed(self):
        seed = new_seed()
        assert isinstance(seed, int)
        assert 0 <= seed < 2 ** 32
