"""
Unit tests for color space conversion.

Covers HEX parsing, RGB/HSL/HSV/CMYK conversion, clamping of out-of-range
input and the clipboard string formats.
"""

import pytest

from palettelab.services.colors.conversion import (
    InvalidFormat, format_cmyk, format_css, format_hsl, format_rgb,
    hex_to_hsl, hex_to_rgb, hsl_to_hex, hsl_to_hsv, hsl_to_rgb, normalize_hex,
    rgb_to_cmyk, rgb_to_hex, rgb_to_hsl, round_half_up
)


class TestHexParsing:
    """Test HEX string parsing and normalization"""

    def test_hex_to_rgb_six_digits(self):
        assert hex_to_rgb("#3b82f6") == (59, 130, 246)
        assert hex_to_rgb("3B82F6") == (59, 130, 246)

    def test_hex_to_rgb_three_digits_expand(self):
        """Each digit of the short form is duplicated"""
        assert hex_to_rgb("#abc") == (170, 187, 204)
        assert hex_to_rgb("f00") == (255, 0, 0)

    @pytest.mark.parametrize("value", [
        "", "#", "#abcd", "#12345", "#1234567", "#ggg", "#12345z",
        " #abc", "#abc\n", "rgb(1,2,3)"
    ])
    def test_hex_to_rgb_rejects_malformed(self, value):
        with pytest.raises(InvalidFormat):
            hex_to_rgb(value)

    def test_hex_to_rgb_rejects_non_strings(self):
        with pytest.raises(InvalidFormat):
            hex_to_rgb(None)
        with pytest.raises(InvalidFormat):
            hex_to_rgb(0x3b82f6)

    def test_invalid_format_is_value_error(self):
        assert issubclass(InvalidFormat, ValueError)

    def test_normalize_hex(self):
        assert normalize_hex("#ABC") == "#aabbcc"
        assert normalize_hex("3B82F6") == "#3b82f6"


class TestRgbToHex:
    """Test RGB to hex conversion"""

    def test_basic_colors(self):
        assert rgb_to_hex(255, 0, 0) == "#ff0000"
        assert rgb_to_hex(0, 0, 0) == "#000000"
        assert rgb_to_hex(255, 255, 255) == "#ffffff"

    def test_rounds_and_clamps(self):
        """Fractional channels round half up, out-of-range channels clamp"""
        assert rgb_to_hex(255.4, -3, 127.5) == "#ff0080"
        assert rgb_to_hex(300, 0.49, 1000) == "#ff00ff"

    def test_hex_round_trip(self):
        for value in ["#000000", "#ffffff", "#3b82f6", "#0a2a43", "#d3b58f"]:
            assert rgb_to_hex(*hex_to_rgb(value)) == value

    def test_rgb_round_trip_is_exact(self):
        for r in range(0, 256, 15):
            for g in range(0, 256, 51):
                for b in (0, 1, 127, 128, 254, 255):
                    assert hex_to_rgb(rgb_to_hex(r, g, b)) == (r, g, b)


class TestHsl:
    """Test RGB <-> HSL conversion"""

    def test_primaries(self):
        assert rgb_to_hsl(255, 0, 0) == (0, 100, 50)
        assert rgb_to_hsl(0, 255, 0) == (120, 100, 50)
        assert rgb_to_hsl(0, 0, 255) == (240, 100, 50)

    def test_achromatic_has_zero_hue_and_saturation(self):
        assert rgb_to_hsl(0, 0, 0) == (0, 0, 0)
        assert rgb_to_hsl(255, 255, 255) == (0, 0, 100)
        assert rgb_to_hsl(128, 128, 128) == (0, 0, 50)

    def test_hex_to_hsl(self):
        assert hex_to_hsl("#3b82f6") == (217, 91, 60)

    def test_hsl_to_hex_primaries(self):
        assert hsl_to_hex(0, 100, 50) == "#ff0000"
        assert hsl_to_hex(120, 100, 50) == "#00ff00"
        assert hsl_to_hex(240, 100, 50) == "#0000ff"

    def test_hue_wraps(self):
        """Negative and >= 360 hues wrap around the circle"""
        assert hsl_to_hex(-30, 100, 50) == hsl_to_hex(330, 100, 50) == "#ff0080"
        assert hsl_to_hex(360, 100, 50) == "#ff0000"
        assert hsl_to_hex(480, 100, 50) == "#00ff00"

    def test_saturation_and_lightness_clamp(self):
        assert hsl_to_hex(0, 150, 50) == "#ff0000"
        assert hsl_to_hex(0, 100, -10) == "#000000"
        assert hsl_to_hex(0, 100, 120) == "#ffffff"

    def test_hsl_to_rgb_is_unrounded(self):
        r, g, b = hsl_to_rgb(330, 100, 50)
        assert r == pytest.approx(255.0)
        assert g == pytest.approx(0.0)
        assert b == pytest.approx(127.5)

    def test_round_trip_within_one_degree(self):
        """HSL -> HEX -> HSL recovers the hue within 1 degree for saturated colors"""
        for h in range(0, 360, 30):
            for s in (60, 80, 100):
                for l in (40, 50, 60):
                    h2, s2, l2 = hex_to_hsl(hsl_to_hex(h, s, l))
                    distance = min(abs(h - h2), 360 - abs(h - h2))
                    assert distance <= 1, (h, s, l, h2)
                    assert abs(s - s2) <= 1
                    assert abs(l - l2) <= 1


class TestHsvAndCmyk:
    """Test HSV and CMYK derivations"""

    def test_hsl_to_hsv(self):
        assert hsl_to_hsv(0, 100, 50) == (0, 100, 100)
        assert hsl_to_hsv(217, 91, 60) == (217, 76, 96)

    def test_hsl_to_hsv_black(self):
        """Zero value gives zero saturation instead of dividing by zero"""
        assert hsl_to_hsv(0, 0, 0) == (0, 0, 0)

    def test_rgb_to_cmyk(self):
        assert rgb_to_cmyk(255, 0, 0) == (0, 100, 100, 0)
        assert rgb_to_cmyk(255, 255, 255) == (0, 0, 0, 0)
        assert rgb_to_cmyk(59, 130, 246) == (76, 47, 0, 4)

    def test_rgb_to_cmyk_black(self):
        assert rgb_to_cmyk(0, 0, 0) == (0, 0, 0, 100)


class TestFormats:
    """Test clipboard string formats"""

    def test_formats(self):
        assert format_rgb(59, 130, 246) == "rgb(59, 130, 246)"
        assert format_hsl(217, 91, 60) == "hsl(217, 91%, 60%)"
        assert format_cmyk(76, 47, 0, 4) == "cmyk(76%, 47%, 0%, 4%)"
        assert format_css("#3B82F6") == "color: #3b82f6;"


def test_round_half_up():
    assert round_half_up(0.5) == 1
    assert round_half_up(1.5) == 2
    assert round_half_up(2.5) == 3
    assert round_half_up(2.49) == 2
