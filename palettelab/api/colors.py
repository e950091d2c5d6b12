"""
PaletteLab Color Tool API Routes
Conversion, contrast checking, harmony and theme palettes, dominant color
extraction and palette strip rendering.
"""
import asyncio
import time
from typing import List, Optional, Tuple

from fastapi import APIRouter, HTTPException, Query
from fastapi.responses import Response

from palettelab.config import config
from palettelab.schemas import (
    ColorExtractRequest, ColorExtractResponse, ContrastResponse, ConversionResponse,
    GeneratedPaletteResponse, HarmonyResponse, SwatchRequest, ThemeInfo
)
from palettelab.services.colors.accessibility import evaluate_contrast
from palettelab.services.colors.conversion import (
    InvalidFormat, format_cmyk, format_css, format_hsl, format_hsv, format_rgb,
    hex_to_rgb, hsl_to_hex, hsl_to_hsv, normalize_hex, rgb_to_cmyk, rgb_to_hex, rgb_to_hsl, round_half_up
)
from palettelab.services.colors.extraction import MalformedBuffer, decode_pixel_buffer, extract_with_stats
from palettelab.services.colors.harmony import HARMONY_RULES, generate_harmony
from palettelab.services.colors.swatches import render_swatch_strip, render_swatch_strip_b64
from palettelab.services.colors.themes import THEMES, generate_palette, new_seed
from palettelab.utils.ids import generate_request_id
from palettelab.utils.logging import get_logger
from palettelab.utils.metrics import get_metrics

router = APIRouter(prefix="/api/colors", tags=["colors"])

NO_COLORS_MESSAGE = "No colors found"


def _invalid_format(e: InvalidFormat) -> HTTPException:
    get_metrics().increment_failure_count("invalid_format")
    return HTTPException(status_code=400, detail=f"Invalid color format: {e}")


def _conversion_bundle(hex_color: str,
                       hsl: Optional[Tuple[float, int, int]] = None) -> ConversionResponse:
    """Every representation of a canonical hex color.

    `hsl` overrides the HSL derived from the hex value, so a color entered
    as HSL is echoed as entered instead of after 8-bit quantization.
    """
    r, g, b = hex_to_rgb(hex_color)
    h, s, l = hsl if hsl is not None else rgb_to_hsl(r, g, b)
    hsv_h, hsv_s, hsv_v = hsl_to_hsv(h, s, l)
    c, m, y, k = rgb_to_cmyk(r, g, b)

    return ConversionResponse(
        hex=hex_color,
        rgb={"r": r, "g": g, "b": b},
        hsl={"h": h, "s": s, "l": l},
        hsv={"h": hsv_h, "s": hsv_s, "v": hsv_v},
        cmyk={"c": c, "m": m, "y": y, "k": k},
        formats={
            "hex": hex_color,
            "rgb": format_rgb(r, g, b),
            "hsl": format_hsl(h, s, l),
            "hsv": format_hsv(hsv_h, hsv_s, hsv_v),
            "cmyk": format_cmyk(c, m, y, k),
            "css": format_css(hex_color),
        }
    )


@router.get("/convert", response_model=ConversionResponse)
def convert_hex(hex: str = Query(..., description="Color as #rgb or #rrggbb")):
    """Convert a HEX color to RGB, HSL, HSV and CMYK."""
    try:
        canonical = rgb_to_hex(*hex_to_rgb(hex))
    except InvalidFormat as e:
        raise _invalid_format(e)

    get_metrics().increment_conversion_count("hex")
    return _conversion_bundle(canonical)


@router.get("/convert/rgb", response_model=ConversionResponse)
def convert_rgb(r: float = Query(..., allow_inf_nan=False),
                g: float = Query(..., allow_inf_nan=False),
                b: float = Query(..., allow_inf_nan=False)):
    """Convert RGB channels; values are rounded and clamped to [0, 255]."""
    get_metrics().increment_conversion_count("rgb")
    return _conversion_bundle(rgb_to_hex(r, g, b))


@router.get("/convert/hsl", response_model=ConversionResponse)
def convert_hsl(h: float = Query(..., allow_inf_nan=False),
                s: float = Query(..., allow_inf_nan=False),
                l: float = Query(..., allow_inf_nan=False)):
    """Convert HSL; hue wraps modulo 360, saturation and lightness are clamped to [0, 100]."""
    get_metrics().increment_conversion_count("hsl")
    entered = (
        h % 360,
        round_half_up(max(0.0, min(100.0, s))),
        round_half_up(max(0.0, min(100.0, l)))
    )
    return _conversion_bundle(hsl_to_hex(h, s, l), hsl=entered)


@router.get("/contrast", response_model=ContrastResponse)
def check_contrast(foreground: str = Query("#000000"), background: str = Query("#ffffff")):
    """WCAG contrast ratio and compliance level of a text/background pair."""
    try:
        report = evaluate_contrast(foreground, background)
    except InvalidFormat as e:
        raise _invalid_format(e)

    data = report.to_dict()
    data["ratio"] = round(report.ratio, 2)
    return ContrastResponse(**data)


@router.get("/harmony", response_model=HarmonyResponse)
def color_harmony(
    hex: str = Query(..., description="Base color"),
    kind: str = Query("complementary", description=f"One of: {', '.join(HARMONY_RULES)}")
):
    """Harmonious color set derived from a base color."""
    if kind not in HARMONY_RULES:
        raise HTTPException(status_code=400, detail=f"Unknown harmony type: {kind}")

    try:
        colors = generate_harmony(hex, kind)
    except InvalidFormat as e:
        raise _invalid_format(e)

    return HarmonyResponse(base=normalize_hex(hex), kind=kind, colors=colors)


@router.get("/themes", response_model=List[ThemeInfo])
def list_themes():
    """Palette generator themes."""
    return [ThemeInfo(key=key, label=label) for key, label in THEMES.items()]


@router.get("/generate", response_model=GeneratedPaletteResponse)
def generate_theme_palette(
    theme: str = Query("random"),
    seed: Optional[int] = Query(None, ge=0, description="Reuse a seed to reproduce a palette")
):
    """Generate a five-color palette for a theme."""
    if theme not in THEMES:
        raise HTTPException(status_code=400, detail=f"Unknown palette theme: {theme}")

    if seed is None:
        seed = new_seed()

    get_metrics().increment("palettes_generated_total")
    return GeneratedPaletteResponse(theme=theme, seed=seed, colors=generate_palette(theme, seed))


def _decode_and_extract(pixels_b64: str, width: int, height: int, **params):
    """Decode the base64 buffer and rank its colors; runs off the event loop."""
    return extract_with_stats(decode_pixel_buffer(pixels_b64), width, height, **params)


@router.post("/extract", response_model=ColorExtractResponse)
async def extract_colors(body: ColorExtractRequest):
    """
    Extract the dominant colors of a decoded image.

    The image arrives as a base64 flat RGBA buffer with its dimensions. Every
    10th pixel is sampled, pixels with alpha below 128 are skipped, channels
    are quantized to multiples of 17 and the 12 most frequent colors are
    returned with percentages relative to those 12.

    **Errors:**
    - 400 when the buffer is not valid base64 or does not match width×height×4
    - 413 when the buffer exceeds the configured size limit
    """
    request_id = generate_request_id("extract")
    log = get_logger()
    metrics = get_metrics()
    start_time = time.time()

    # base64 expands by 4/3
    if len(body.pixels_b64) * 3 // 4 > config.max_buffer_bytes():
        metrics.increment_failure_count("buffer_too_large")
        raise HTTPException(
            status_code=413,
            detail=f"Pixel buffer too large. Maximum size: {config.MAX_BUFFER_MB}MB"
        )

    log.info("Starting color extraction",
             extra={"request_id": request_id, "width": body.width, "height": body.height})

    try:
        result = await asyncio.to_thread(
            _decode_and_extract,
            body.pixels_b64, body.width, body.height,
            stride=config.EXTRACT_SAMPLE_STRIDE,
            quantization_step=config.EXTRACT_QUANTIZATION_STEP,
            alpha_threshold=config.EXTRACT_ALPHA_THRESHOLD,
            max_colors=config.EXTRACT_MAX_COLORS
        )
    except MalformedBuffer as e:
        metrics.increment_failure_count("malformed_buffer")
        log.warning(f"Malformed pixel buffer: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=400, detail=str(e))

    duration_ms = (time.time() - start_time) * 1000
    metrics.increment_extraction_count()
    metrics.record_timing("extraction", duration_ms)
    metrics.record_palette_size(len(result.colors))

    message = None
    swatch_b64 = None
    if result.is_empty:
        metrics.increment_empty_extraction_count()
        message = NO_COLORS_MESSAGE
    elif body.include_swatch:
        swatch_b64 = render_swatch_strip_b64(
            [entry.color for entry in result.colors],
            width=800, height=400
        )

    log.info(f"Color extraction complete: {len(result.colors)} colors",
             extra={"request_id": request_id, "ms_total": round(duration_ms, 2)})

    return ColorExtractResponse(
        width=result.width,
        height=result.height,
        sampled_pixels=result.sampled_pixels,
        opaque_pixels=result.opaque_pixels,
        colors=[entry.to_dict() for entry in result.colors],
        message=message,
        swatch_png_b64=swatch_b64,
        params={
            "stride": config.EXTRACT_SAMPLE_STRIDE,
            "quantization_step": config.EXTRACT_QUANTIZATION_STEP,
            "alpha_threshold": config.EXTRACT_ALPHA_THRESHOLD,
            "max_colors": config.EXTRACT_MAX_COLORS,
        }
    )


@router.post("/swatch", response_class=Response)
def download_swatch(body: SwatchRequest):
    """Render a palette as a downloadable PNG strip."""
    png = render_swatch_strip(body.colors, width=body.width, height=body.height)
    return Response(
        content=png,
        media_type="image/png",
        headers={"Content-Disposition": f'attachment; filename="{body.filename}.png"'}
    )
