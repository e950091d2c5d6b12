"""
PaletteLab Color Harmony

Color theory rules for deriving harmonious sets from one base color by
rotating its hue or stepping its lightness in HSL space.
"""

from typing import Callable, Dict, List, Tuple

from .conversion import hex_to_hsl, hsl_to_hex, normalize_hex


def rotate_hue(h: float, degrees: float) -> float:
    """
    Rotate hue by specified degrees.

    Args:
        h: Original hue in degrees
        degrees: Rotation in degrees (can be negative)

    Returns:
        Rotated hue in [0, 360) with proper wraparound
    """
    return (h + degrees) % 360


def _rotations(base: str, hsl: Tuple[int, int, int], offsets: List[float]) -> List[str]:
    """Base color (at offset 0) plus one color per hue offset."""
    h, s, l = hsl
    return [base if offset == 0 else hsl_to_hex(rotate_hue(h, offset), s, l)
            for offset in offsets]


def _complementary(base: str, hsl: Tuple[int, int, int]) -> List[str]:
    return _rotations(base, hsl, [0, 180])


def _triadic(base: str, hsl: Tuple[int, int, int]) -> List[str]:
    return _rotations(base, hsl, [0, 120, 240])


def _tetradic(base: str, hsl: Tuple[int, int, int]) -> List[str]:
    return _rotations(base, hsl, [0, 90, 180, 270])


def _analogous(base: str, hsl: Tuple[int, int, int]) -> List[str]:
    return _rotations(base, hsl, [-30, 0, 30, 60])


def _split_complementary(base: str, hsl: Tuple[int, int, int]) -> List[str]:
    return _rotations(base, hsl, [0, 150, 210])


def _monochromatic(base: str, hsl: Tuple[int, int, int]) -> List[str]:
    # Lightness steps are floored/capped so the darkest and lightest stay visible
    h, s, l = hsl
    return [
        hsl_to_hex(h, s, max(10, l - 30)),
        hsl_to_hex(h, s, max(20, l - 15)),
        base,
        hsl_to_hex(h, s, min(90, l + 15)),
        hsl_to_hex(h, s, min(100, l + 30)),
    ]


HARMONY_RULES: Dict[str, Callable[[str, Tuple[int, int, int]], List[str]]] = {
    "complementary": _complementary,
    "triadic": _triadic,
    "tetradic": _tetradic,
    "analogous": _analogous,
    "split-complementary": _split_complementary,
    "monochromatic": _monochromatic,
}


def generate_harmony(hex_color: str, kind: str = "complementary") -> List[str]:
    """
    Generate a harmonious color set from a base color.

    Args:
        hex_color: Base color in HEX
        kind: One of HARMONY_RULES

    Returns:
        Lowercase HEX colors; the base color appears unchanged in the set

    Raises:
        InvalidFormat: If the base color is malformed
        ValueError: If the harmony kind is unknown
    """
    rule = HARMONY_RULES.get(kind)
    if rule is None:
        raise ValueError(f"Unknown harmony type: {kind}. Valid types: {list(HARMONY_RULES)}")

    base = normalize_hex(hex_color)
    return rule(base, hex_to_hsl(base))
