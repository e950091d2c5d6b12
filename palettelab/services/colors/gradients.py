"""
Gradient CSS builder.
"""

from dataclasses import dataclass
from typing import Iterable, List

from .conversion import normalize_hex

GRADIENT_TYPES = ("linear", "radial", "conic")


@dataclass
class GradientStop:
    """A color at a position (percent) along the gradient."""
    color: str
    position: int


def sort_stops(stops: Iterable[GradientStop]) -> List[GradientStop]:
    """Stops ordered by position; equal positions keep their input order."""
    return sorted(stops, key=lambda stop: stop.position)


def build_gradient_css(stops: Iterable[GradientStop],
                       direction: int = 135,
                       kind: str = "linear") -> str:
    """
    Build a CSS gradient value such as `linear-gradient(135deg, #667eea 0%, #764ba2 100%)`.

    Args:
        stops: Color stops in any order
        direction: Angle in degrees, used by linear gradients only
        kind: "linear", "radial" or "conic"

    Raises:
        ValueError: If there are no stops or the kind is unknown
        InvalidFormat: If a stop color is malformed
    """
    ordered = sort_stops(stops)
    if not ordered:
        raise ValueError("A gradient needs at least one color stop")

    stop_list = ", ".join(f"{normalize_hex(stop.color)} {stop.position}%" for stop in ordered)

    if kind == "linear":
        return f"linear-gradient({direction}deg, {stop_list})"
    if kind == "radial":
        return f"radial-gradient(circle, {stop_list})"
    if kind == "conic":
        return f"conic-gradient({stop_list})"
    raise ValueError(f"Unknown gradient type: {kind}. Valid types: {list(GRADIENT_TYPES)}")


def css_declaration(css: str) -> str:
    """Clipboard form of a gradient: `background: <css>;`."""
    return f"background: {css};"


def next_stop_position(stops: Iterable[GradientStop]) -> int:
    """Position for a newly added stop: 20 past the last stop, capped at 100."""
    positions = [stop.position for stop in stops]
    if not positions:
        return 50
    return min(100, max(positions) + 20)
