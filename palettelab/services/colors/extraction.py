"""
Dominant color extraction for decoded images.

This module implements the image palette pipeline for PaletteLab: strided
pixel sampling, alpha filtering, per-channel quantization and frequency
ranking of the quantized colors.
"""

import base64
import binascii
import time
from dataclasses import dataclass, field, asdict
from typing import Any, Dict, List, Sequence, Union

import numpy as np
from loguru import logger

from .conversion import rgb_to_hex, round_half_up

# Sample every Nth pixel (skip N-1 of every N); not derived from image size
SAMPLE_STRIDE = 10
# Channels snap to the nearest multiple of this step (16 levels per channel)
QUANTIZATION_STEP = 17
# Sampled pixels with alpha below this are treated as transparent
ALPHA_THRESHOLD = 128
# Size of the ranked palette
MAX_COLORS = 12

PixelBuffer = Union[bytes, bytearray, memoryview, np.ndarray, Sequence[int]]


class MalformedBuffer(ValueError):
    """Raised when a pixel buffer is inconsistent with its declared size."""
    pass


@dataclass
class ExtractedColor:
    """A quantized color with its sample count and share of the palette."""
    color: str
    count: int
    percentage: int

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class ExtractionResult:
    """Ranked palette plus sampling statistics for one image."""
    width: int
    height: int
    sampled_pixels: int
    opaque_pixels: int
    colors: List[ExtractedColor] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.colors


def decode_pixel_buffer(b64_data: str) -> bytes:
    """
    Decode a base64 raw RGBA buffer.

    A `data:` URL prefix is tolerated. The payload is raw pixel bytes, not an
    encoded image file.

    Raises:
        MalformedBuffer: If the payload is not valid base64
    """
    if ',' in b64_data and b64_data.lstrip().startswith('data:'):
        b64_data = b64_data.split(',', 1)[1]

    try:
        return base64.b64decode(b64_data, validate=True)
    except (binascii.Error, ValueError) as e:
        raise MalformedBuffer(f"Invalid base64 pixel data: {str(e)}")


def _as_pixel_array(pixels: PixelBuffer) -> np.ndarray:
    """Flatten any supported buffer type into a uint8 vector."""
    if isinstance(pixels, (bytes, bytearray, memoryview)):
        return np.frombuffer(pixels, dtype=np.uint8)

    values = np.asarray(pixels).reshape(-1)
    if values.dtype == np.uint8:
        return values

    if values.size and (not np.issubdtype(values.dtype, np.integer)
                        or values.min() < 0 or values.max() > 255):
        raise MalformedBuffer("Pixel values must be integers in [0, 255]")
    return values.astype(np.uint8)


def validate_buffer_dimensions(buffer_length: int, width: int, height: int) -> None:
    """
    Check that a flat RGBA buffer matches its declared dimensions.

    Raises:
        MalformedBuffer: On negative dimensions, a length that is not a
            multiple of 4, or width*height*4 != length
    """
    if width < 0 or height < 0:
        raise MalformedBuffer(f"Image dimensions must be non-negative: {width}×{height}")

    if buffer_length % 4 != 0:
        raise MalformedBuffer(f"Buffer length {buffer_length} is not a multiple of 4")

    expected = width * height * 4
    if expected != buffer_length:
        raise MalformedBuffer(
            f"Buffer length mismatch: {width}×{height}×4 = {expected}, got {buffer_length}"
        )


def extract_with_stats(pixels: PixelBuffer,
                       width: int,
                       height: int,
                       stride: int = SAMPLE_STRIDE,
                       quantization_step: int = QUANTIZATION_STEP,
                       alpha_threshold: int = ALPHA_THRESHOLD,
                       max_colors: int = MAX_COLORS) -> ExtractionResult:
    """
    Rank the dominant colors of a decoded RGBA image.

    Args:
        pixels: Flat row-major RGBA buffer, 4 bytes per pixel
        width: Image width in pixels
        height: Image height in pixels
        stride: Sample pixel indexes 0, stride, 2*stride, ...
        quantization_step: Channel bucket size, round(c / step) * step
        alpha_threshold: Minimum alpha for a sampled pixel to count
        max_colors: Number of ranked colors to keep

    Returns:
        ExtractionResult whose colors are sorted by count descending. Equal
        counts keep the order in which the colors were first sampled.
        Percentages are relative to the retained colors only.

    Raises:
        MalformedBuffer: If the buffer does not match the dimensions or a
            sampling parameter is not positive
    """
    if stride < 1 or quantization_step < 1 or max_colors < 1:
        raise MalformedBuffer(
            f"stride, quantization_step and max_colors must be positive: "
            f"{stride}, {quantization_step}, {max_colors}"
        )

    start_time = time.time()
    flat = _as_pixel_array(pixels)
    validate_buffer_dimensions(flat.size, width, height)

    rgba = flat.reshape(-1, 4)
    sampled = rgba[::stride]
    opaque = sampled[sampled[:, 3] >= alpha_threshold]

    logger.debug(f"Sampled {len(sampled)} of {len(rgba)} pixels, {len(opaque)} opaque")

    if len(opaque) == 0:
        logger.info(f"No opaque pixels in {width}×{height} image")
        return ExtractionResult(width=width, height=height,
                                sampled_pixels=int(len(sampled)), opaque_pixels=0)

    # Quantize with half-up rounding; clip for steps that overshoot 255
    channels = opaque[:, :3].astype(np.float64)
    quantized = np.floor(channels / quantization_step + 0.5) * quantization_step
    quantized = np.clip(quantized, 0, 255).astype(np.int64)

    keys = (quantized[:, 0] << 16) | (quantized[:, 1] << 8) | quantized[:, 2]
    unique_keys, first_seen, counts = np.unique(keys, return_index=True, return_counts=True)

    # Count descending, then first-encountered sample ascending
    order = np.lexsort((first_seen, -counts))[:max_colors]
    retained_total = int(counts[order].sum())

    colors = []
    for idx in order:
        key = int(unique_keys[idx])
        count = int(counts[idx])
        colors.append(ExtractedColor(
            color=rgb_to_hex((key >> 16) & 0xFF, (key >> 8) & 0xFF, key & 0xFF),
            count=count,
            percentage=round_half_up(100 * count / retained_total)
        ))

    duration_ms = (time.time() - start_time) * 1000
    logger.info(f"Extracted {len(colors)} dominant colors from {len(unique_keys)} buckets "
                f"in {duration_ms:.1f}ms")

    return ExtractionResult(width=width, height=height,
                            sampled_pixels=int(len(sampled)),
                            opaque_pixels=int(len(opaque)),
                            colors=colors)


def extract_dominant_colors(pixels: PixelBuffer,
                            width: int,
                            height: int,
                            stride: int = SAMPLE_STRIDE,
                            quantization_step: int = QUANTIZATION_STEP,
                            alpha_threshold: int = ALPHA_THRESHOLD,
                            max_colors: int = MAX_COLORS) -> List[ExtractedColor]:
    """Return the ranked dominant colors of an RGBA image (empty if fully transparent)."""
    return extract_with_stats(
        pixels, width, height,
        stride=stride,
        quantization_step=quantization_step,
        alpha_threshold=alpha_threshold,
        max_colors=max_colors
    ).colors
