"""
Theme palette generators.

Each generator is a pure function of its seed: the same seed always yields
the same five colors, so generated palettes can be reproduced and shared.
"""

from typing import Callable, Dict, List, Optional

import numpy as np

from .conversion import hsl_to_hex

PALETTE_SIZE = 5

THEMES: Dict[str, str] = {
    "random": "Random Colors",
    "warm": "Warm Tones",
    "cool": "Cool Tones",
    "monochromatic": "Monochromatic",
    "analogous": "Analogous",
    "complementary": "Complementary",
    "vintage": "Vintage",
    "modern": "Modern",
    "nature": "Nature Inspired",
    "sunset": "Sunset",
    "ocean": "Ocean",
    "forest": "Forest",
}

VINTAGE_POOL = [
    "#8b4513", "#a0522d", "#cd853f", "#deb887", "#f5deb3",
    "#d2691e", "#bc8f8f", "#f4a460", "#daa520", "#b8860b",
]
MODERN_POOL = [
    "#2563eb", "#7c3aed", "#dc2626", "#059669", "#ea580c",
    "#6366f1", "#8b5cf6", "#ef4444", "#10b981", "#f59e0b",
]
NATURE_POOL = [
    "#228b22", "#32cd32", "#90ee90", "#8fbc8f", "#556b2f",
    "#9acd32", "#adff2f", "#00ff7f", "#2e8b57", "#3cb371",
]
SUNSET_COLORS = ["#ff4500", "#ff6347", "#ffd700", "#ffa500", "#dc143c"]
OCEAN_COLORS = ["#006994", "#0892d0", "#00bfff", "#87ceeb", "#e0f6ff"]
FOREST_COLORS = ["#013220", "#228b22", "#32cd32", "#90ee90", "#f0fff0"]


def _uniform(rng: np.random.Generator, low: float, span: float) -> float:
    return low + float(rng.random()) * span


def _sample_pool(pool: List[str], seed: Optional[int]) -> List[str]:
    rng = np.random.default_rng(seed)
    return [pool[i] for i in rng.permutation(len(pool))[:PALETTE_SIZE]]


def random_palette(seed: Optional[int] = None) -> List[str]:
    rng = np.random.default_rng(seed)
    return [f"#{int(n):06x}" for n in rng.integers(0, 0x1000000, size=PALETTE_SIZE)]


def warm_palette(seed: Optional[int] = None) -> List[str]:
    """Reds, oranges and yellows."""
    rng = np.random.default_rng(seed)
    return [hsl_to_hex(hue, _uniform(rng, 60, 30), _uniform(rng, 45, 30))
            for hue in (0, 30, 60, 15, 45)]


def cool_palette(seed: Optional[int] = None) -> List[str]:
    """Cyans, blues and purples."""
    rng = np.random.default_rng(seed)
    return [hsl_to_hex(hue, _uniform(rng, 50, 40), _uniform(rng, 40, 35))
            for hue in (180, 210, 240, 270, 200)]


def monochromatic_palette(seed: Optional[int] = None) -> List[str]:
    rng = np.random.default_rng(seed)
    base_hue = _uniform(rng, 0, 360)
    base_saturation = _uniform(rng, 60, 30)
    return [hsl_to_hex(base_hue, base_saturation, lightness)
            for lightness in (20, 35, 50, 65, 80)]


def analogous_palette(seed: Optional[int] = None) -> List[str]:
    rng = np.random.default_rng(seed)
    base_hue = _uniform(rng, 0, 360)
    return [hsl_to_hex((base_hue + offset) % 360, _uniform(rng, 60, 25), _uniform(rng, 45, 25))
            for offset in (-30, -15, 0, 15, 30)]


def complementary_palette(seed: Optional[int] = None) -> List[str]:
    rng = np.random.default_rng(seed)
    base_hue = _uniform(rng, 0, 360)
    complement = (base_hue + 180) % 360
    return [
        hsl_to_hex(base_hue, 70, 30),
        hsl_to_hex(base_hue, 60, 50),
        hsl_to_hex(base_hue, 50, 70),
        hsl_to_hex(complement, 60, 50),
        hsl_to_hex(complement, 70, 30),
    ]


def vintage_palette(seed: Optional[int] = None) -> List[str]:
    return _sample_pool(VINTAGE_POOL, seed)


def modern_palette(seed: Optional[int] = None) -> List[str]:
    return _sample_pool(MODERN_POOL, seed)


def nature_palette(seed: Optional[int] = None) -> List[str]:
    return _sample_pool(NATURE_POOL, seed)


def sunset_palette(seed: Optional[int] = None) -> List[str]:
    return list(SUNSET_COLORS)


def ocean_palette(seed: Optional[int] = None) -> List[str]:
    return list(OCEAN_COLORS)


def forest_palette(seed: Optional[int] = None) -> List[str]:
    return list(FOREST_COLORS)


GENERATORS: Dict[str, Callable[[Optional[int]], List[str]]] = {
    "random": random_palette,
    "warm": warm_palette,
    "cool": cool_palette,
    "monochromatic": monochromatic_palette,
    "analogous": analogous_palette,
    "complementary": complementary_palette,
    "vintage": vintage_palette,
    "modern": modern_palette,
    "nature": nature_palette,
    "sunset": sunset_palette,
    "ocean": ocean_palette,
    "forest": forest_palette,
}


def new_seed() -> int:
    """Draw a fresh seed from OS entropy, small enough to round-trip through JSON."""
    return int(np.random.SeedSequence().entropy % (2 ** 32))


def generate_palette(theme: str, seed: Optional[int] = None) -> List[str]:
    """
    Generate a five-color palette for a theme.

    Args:
        theme: One of THEMES
        seed: RNG seed; the same (theme, seed) pair always gives the same colors

    Raises:
        ValueError: If the theme is unknown
    """
    generator = GENERATORS.get(theme)
    if generator is None:
        raise ValueError(f"Unknown palette theme: {theme}. Valid themes: {list(THEMES)}")
    return generator(seed)
