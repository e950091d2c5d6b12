"""
Color Space Conversion

Deterministic conversions between HEX, RGB, HSL, HSV and CMYK representations,
plus WCAG relative luminance and contrast scoring. Every function is pure:
malformed HEX strings raise InvalidFormat, out-of-range numbers are clamped.
"""

import math
import re
from enum import Enum
from typing import Tuple, Union

Number = Union[int, float]

_HEX_RE = re.compile(r"#?([0-9a-fA-F]{3}|[0-9a-fA-F]{6})")

# WCAG 2.x thresholds
AAA_THRESHOLD = 7.0
AA_THRESHOLD = 4.5
LARGE_TEXT_THRESHOLD = 3.0


class InvalidFormat(ValueError):
    """Raised when a HEX color string is malformed."""
    pass


class ComplianceLevel(str, Enum):
    """WCAG contrast compliance classification."""
    AAA = "AAA"
    AA = "AA"
    FAIL = "Fail"


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves rounding up."""
    return int(math.floor(value + 0.5))


def _clamp(value: Number, low: Number, high: Number) -> Number:
    return max(low, min(high, value))


def hex_to_rgb(hex_color: str) -> Tuple[int, int, int]:
    """
    Convert a HEX color string to an RGB tuple.

    Accepts 3 or 6 hex digits with an optional leading '#'. A 3-digit value
    has each digit duplicated (#abc -> #aabbcc).

    Args:
        hex_color: Color such as "#3b82f6", "3B82F6" or "#abc"

    Returns:
        Tuple of (R, G, B) integers in [0, 255]

    Raises:
        InvalidFormat: If the string has the wrong length or non-hex digits
    """
    if not isinstance(hex_color, str):
        raise InvalidFormat(f"Invalid hex color format: {hex_color!r}")

    match = _HEX_RE.fullmatch(hex_color)
    if not match:
        raise InvalidFormat(f"Invalid hex color format: {hex_color!r}")

    digits = match.group(1)
    if len(digits) == 3:
        digits = "".join(ch * 2 for ch in digits)

    return tuple(int(digits[i:i + 2], 16) for i in (0, 2, 4))


def rgb_to_hex(r: Number, g: Number, b: Number) -> str:
    """
    Convert RGB channels to a lowercase '#rrggbb' string.

    Channels are rounded to the nearest integer and clamped to [0, 255].
    """
    channels = [_clamp(round_half_up(c), 0, 255) for c in (r, g, b)]
    return "#{:02x}{:02x}{:02x}".format(*channels)


def normalize_hex(hex_color: str) -> str:
    """Return the canonical lowercase 6-digit form of a HEX color."""
    return rgb_to_hex(*hex_to_rgb(hex_color))


def rgb_to_hsl(r: Number, g: Number, b: Number) -> Tuple[int, int, int]:
    """
    Convert RGB channels to HSL.

    Returns:
        Tuple of (H, S, L) with H in [0, 360) degrees and S, L in [0, 100] percent
    """
    r_n, g_n, b_n = (_clamp(c, 0, 255) / 255.0 for c in (r, g, b))
    c_max = max(r_n, g_n, b_n)
    c_min = min(r_n, g_n, b_n)
    lightness = (c_max + c_min) / 2.0

    if c_max == c_min:
        # Achromatic: hue and saturation undefined, reported as 0
        return 0, 0, round_half_up(lightness * 100)

    chroma = c_max - c_min
    if lightness > 0.5:
        saturation = chroma / (2.0 - c_max - c_min)
    else:
        saturation = chroma / (c_max + c_min)

    if c_max == r_n:
        hue = (g_n - b_n) / chroma + (6.0 if g_n < b_n else 0.0)
    elif c_max == g_n:
        hue = (b_n - r_n) / chroma + 2.0
    else:
        hue = (r_n - g_n) / chroma + 4.0

    hue_degrees = round_half_up(hue * 60.0) % 360
    return hue_degrees, round_half_up(saturation * 100), round_half_up(lightness * 100)


def hex_to_hsl(hex_color: str) -> Tuple[int, int, int]:
    """Convert a HEX color to HSL (degrees, percent, percent)."""
    return rgb_to_hsl(*hex_to_rgb(hex_color))


def hsl_to_rgb(h: Number, s: Number, l: Number) -> Tuple[float, float, float]:
    """
    Convert HSL to unrounded RGB channels in [0, 255].

    Hue wraps modulo 360 (so -30 becomes 330); saturation and lightness are
    clamped to [0, 100].
    """
    hue = h % 360
    sat = _clamp(s, 0, 100) / 100.0
    light = _clamp(l, 0, 100) / 100.0

    chroma = (1 - abs(2 * light - 1)) * sat
    x = chroma * (1 - abs((hue / 60.0) % 2 - 1))
    m = light - chroma / 2.0

    if hue < 60:
        r1, g1, b1 = chroma, x, 0.0
    elif hue < 120:
        r1, g1, b1 = x, chroma, 0.0
    elif hue < 180:
        r1, g1, b1 = 0.0, chroma, x
    elif hue < 240:
        r1, g1, b1 = 0.0, x, chroma
    elif hue < 300:
        r1, g1, b1 = x, 0.0, chroma
    else:
        r1, g1, b1 = chroma, 0.0, x

    return (r1 + m) * 255.0, (g1 + m) * 255.0, (b1 + m) * 255.0


def hsl_to_hex(h: Number, s: Number, l: Number) -> str:
    """Convert HSL (degrees, percent, percent) to a lowercase HEX string."""
    return rgb_to_hex(*hsl_to_rgb(h, s, l))


def hsl_to_hsv(h: Number, s: Number, l: Number) -> Tuple[Number, int, int]:
    """
    Convert HSL to HSV.

    Uses v = l + s*min(l, 1-l) and s_v = 2*(1 - l/v), with s_v = 0 when v = 0.
    Hue passes through unchanged; S and V are integer percent.
    """
    sat = _clamp(s, 0, 100) / 100.0
    light = _clamp(l, 0, 100) / 100.0

    value = light + sat * min(light, 1 - light)
    sat_v = 0.0 if value == 0 else 2 * (1 - light / value)

    return h, round_half_up(sat_v * 100), round_half_up(value * 100)


def rgb_to_cmyk(r: Number, g: Number, b: Number) -> Tuple[int, int, int, int]:
    """
    Convert RGB channels to CMYK percentages.

    Pure black yields (0, 0, 0, 100) instead of dividing by zero.
    """
    r_n, g_n, b_n = (_clamp(round_half_up(c), 0, 255) / 255.0 for c in (r, g, b))
    k = 1 - max(r_n, g_n, b_n)

    if k >= 1:
        return 0, 0, 0, 100

    c = (1 - r_n - k) / (1 - k)
    m = (1 - g_n - k) / (1 - k)
    y = (1 - b_n - k) / (1 - k)

    return round_half_up(c * 100), round_half_up(m * 100), round_half_up(y * 100), round_half_up(k * 100)


def _linearize(channel: float) -> float:
    if channel <= 0.03928:
        return channel / 12.92
    return ((channel + 0.055) / 1.055) ** 2.4


def relative_luminance(hex_color: str) -> float:
    """WCAG relative luminance of a HEX color, in [0, 1]."""
    r, g, b = (_linearize(c / 255.0) for c in hex_to_rgb(hex_color))
    return 0.2126 * r + 0.7152 * g + 0.0722 * b


def contrast_ratio(hex_a: str, hex_b: str) -> float:
    """
    WCAG contrast ratio between two colors.

    The result is at least 1.0 and independent of argument order.

    Raises:
        InvalidFormat: If either color is malformed
    """
    lum_a = relative_luminance(hex_a)
    lum_b = relative_luminance(hex_b)
    lighter, darker = max(lum_a, lum_b), min(lum_a, lum_b)
    return (lighter + 0.05) / (darker + 0.05)


def compliance_level(ratio: float) -> ComplianceLevel:
    """Classify a contrast ratio as AAA (>= 7), AA (>= 4.5) or Fail."""
    if ratio >= AAA_THRESHOLD:
        return ComplianceLevel.AAA
    if ratio >= AA_THRESHOLD:
        return ComplianceLevel.AA
    return ComplianceLevel.FAIL


# Clipboard-ready string formats

def format_rgb(r: int, g: int, b: int) -> str:
    return f"rgb({r}, {g}, {b})"


def format_hsl(h: Number, s: Number, l: Number) -> str:
    return f"hsl({h}, {s}%, {l}%)"


def format_hsv(h: Number, s: Number, v: Number) -> str:
    return f"hsv({h}, {s}%, {v}%)"


def format_cmyk(c: int, m: int, y: int, k: int) -> str:
    return f"cmyk({c}%, {m}%, {y}%, {k}%)"


def format_css(hex_color: str) -> str:
    return f"color: {normalize_hex(hex_color)};"
