"""
Swatch Rendering Module

Provides utilities for creating visual color palette representations.
Generates the downloadable palette strip shown next to extracted and
generated palettes.
"""

import base64
import io
from typing import List, Tuple

from loguru import logger
from PIL import Image, ImageDraw, ImageFont

from .conversion import hex_to_rgb, normalize_hex


def _label_position(draw: ImageDraw.ImageDraw, text: str, font,
                    center: Tuple[float, float]) -> Tuple[float, float]:
    """Top-left corner that centers `text` on `center`."""
    left, top, right, bottom = draw.textbbox((0, 0), text, font=font)
    return center[0] - (right - left) / 2, center[1] - (bottom - top) / 2


def render_swatch_strip(hex_colors: List[str],
                        width: int = 1000,
                        height: int = 200,
                        label: bool = True,
                        text_color: Tuple[int, int, int] = (255, 255, 255),
                        shadow_color: Tuple[int, int, int] = (0, 0, 0)) -> bytes:
    """
    Render a horizontal strip of equal-width color chips.

    Args:
        hex_colors: List of hex color strings
        width: Total strip width in pixels
        height: Strip height in pixels
        label: Draw each chip's hex code centred on it
        text_color: RGB color of the label text
        shadow_color: RGB color of the 1px label shadow

    Returns:
        PNG image bytes

    Raises:
        ValueError: If the color list is empty or the size is not positive
        InvalidFormat: If a color is not a valid hex string
    """
    if not hex_colors:
        raise ValueError("Empty hex_colors list provided")

    if width <= 0 or height <= 0:
        raise ValueError(f"Swatch size must be positive: {width}×{height}")

    k = len(hex_colors)
    colors = [normalize_hex(c) for c in hex_colors]
    logger.debug(f"Rendering swatch strip with {k} colors at {width}×{height}")

    img = Image.new("RGB", (width, height), (255, 255, 255))
    draw = ImageDraw.Draw(img)
    font = ImageFont.load_default()
    chip_width = width / k

    for i, hex_color in enumerate(colors):
        x_start = round(i * chip_width)
        x_end = round((i + 1) * chip_width)
        draw.rectangle([x_start, 0, x_end - 1, height - 1], fill=hex_to_rgb(hex_color))

        if label:
            x, y = _label_position(draw, hex_color, font,
                                   ((x_start + x_end) / 2, height / 2))
            draw.text((x + 1, y + 1), hex_color, font=font, fill=shadow_color)
            draw.text((x, y), hex_color, font=font, fill=text_color)

    buffer = io.BytesIO()
    img.save(buffer, format="PNG")
    png_bytes = buffer.getvalue()
    logger.debug(f"Encoded swatch strip: {width}×{height} -> {len(png_bytes)} bytes")

    return png_bytes


def render_swatch_strip_b64(hex_colors: List[str], **kwargs) -> str:
    """Render a swatch strip and return it as a base64 PNG string."""
    return base64.b64encode(render_swatch_strip(hex_colors, **kwargs)).decode('ascii')
