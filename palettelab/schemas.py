"""
PaletteLab API Schemas
Pydantic models for palette, gradient, conversion and extraction request/response validation.
"""
from typing import List, Literal, Optional, Dict
from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from palettelab.services.colors.conversion import normalize_hex

HEX_PATTERN = r"^#?([0-9A-Fa-f]{3}|[0-9A-Fa-f]{6})$"


def _canonical_colors(colors: List[str]) -> List[str]:
    """Normalize a list of hex colors to lowercase #rrggbb."""
    return [normalize_hex(c) for c in colors]


class HealthResponse(BaseModel):
    """Health check response."""
    status: str = Field("ok", description="Service health status")
    version: str = Field(..., description="Service version")
    service: str = Field("palettelab-backend", description="Service name")


class MessageResponse(BaseModel):
    """Plain acknowledgement response."""
    message: str


# ============================================================================
# CATALOG SCHEMAS (palettes and gradients)
# ============================================================================

class CatalogModel(BaseModel):
    """Catalog records are exchanged with camelCase keys (usageCount, isTrending)."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class PaletteCreate(CatalogModel):
    """Palette submitted by a client."""
    name: str = Field(..., min_length=1, max_length=100, description="Palette name")
    description: str = Field("", max_length=500, description="Optional description")
    colors: List[str] = Field(..., min_length=1, max_length=32, description="Hex colors")
    tags: List[str] = Field(default_factory=list, max_length=20, description="Free-form tags")

    @field_validator("colors")
    @classmethod
    def validate_colors(cls, v):
        return _canonical_colors(v)

    @field_validator("tags")
    @classmethod
    def validate_tags(cls, v):
        return [tag.strip() for tag in v if tag.strip()]


class Palette(PaletteCreate):
    """Stored palette."""
    id: int
    usage_count: int = 0
    is_trending: bool = False


class GradientStopModel(CatalogModel):
    """A gradient color stop."""
    color: str = Field(..., pattern=HEX_PATTERN, description="Stop color in hex")
    position: int = Field(..., ge=0, le=100, description="Stop position in percent")

    @field_validator("color")
    @classmethod
    def validate_color(cls, v):
        return normalize_hex(v)


class GradientSpec(CatalogModel):
    """Geometry and stops of a gradient."""
    colors: List[GradientStopModel] = Field(..., min_length=2, max_length=16, description="Color stops")
    direction: int = Field(135, ge=0, le=360, description="Angle in degrees (linear only)")
    type: Literal["linear", "radial", "conic"] = Field("linear", description="Gradient type")


class GradientCreate(GradientSpec):
    """Gradient submitted by a client."""
    name: str = Field(..., min_length=1, max_length=100, description="Gradient name")
    description: str = Field("", max_length=500, description="Optional description")


class Gradient(GradientCreate):
    """Stored gradient."""
    id: int
    usage_count: int = 0
    is_trending: bool = False


class GradientCSSResponse(BaseModel):
    """CSS forms of a gradient."""
    css: str = Field(..., description="CSS gradient value")
    declaration: str = Field(..., description="Clipboard form: background: <css>;")
    next_stop_position: int = Field(..., description="Suggested position for an added stop")


# ============================================================================
# CONVERSION SCHEMAS
# ============================================================================

class RGBValue(BaseModel):
    r: int = Field(..., ge=0, le=255)
    g: int = Field(..., ge=0, le=255)
    b: int = Field(..., ge=0, le=255)


class HSLValue(BaseModel):
    h: float = Field(..., description="Hue in degrees [0, 360)")
    s: int = Field(..., ge=0, le=100, description="Saturation percent")
    l: int = Field(..., ge=0, le=100, description="Lightness percent")


class HSVValue(BaseModel):
    h: float = Field(..., description="Hue in degrees [0, 360)")
    s: int = Field(..., ge=0, le=100, description="Saturation percent")
    v: int = Field(..., ge=0, le=100, description="Value percent")


class CMYKValue(BaseModel):
    c: int = Field(..., ge=0, le=100)
    m: int = Field(..., ge=0, le=100)
    y: int = Field(..., ge=0, le=100)
    k: int = Field(..., ge=0, le=100)


class ColorFormats(BaseModel):
    """Clipboard-ready strings for each representation."""
    hex: str
    rgb: str
    hsl: str
    hsv: str
    cmyk: str
    css: str


class ConversionResponse(BaseModel):
    """A color in every supported representation."""
    hex: str = Field(..., description="Canonical lowercase #rrggbb")
    rgb: RGBValue
    hsl: HSLValue
    hsv: HSVValue
    cmyk: CMYKValue
    formats: ColorFormats


class ContrastResponse(BaseModel):
    """WCAG contrast report for a foreground/background pair."""
    foreground: str
    background: str
    ratio: float = Field(..., ge=1.0, description="Contrast ratio rounded to 2 decimals")
    level: Literal["AAA", "AA", "Fail"]
    aa_normal: bool
    aaa_normal: bool
    aa_large: bool
    aaa_large: bool


class HarmonyResponse(BaseModel):
    base: str
    kind: str
    colors: List[str]


class ThemeInfo(BaseModel):
    key: str
    label: str


class GeneratedPaletteResponse(BaseModel):
    """Theme palette with the seed that reproduces it."""
    theme: str
    seed: int
    colors: List[str]


# ============================================================================
# EXTRACTION SCHEMAS
# ============================================================================

class ColorExtractRequest(BaseModel):
    """Decoded image supplied as raw RGBA bytes."""
    pixels_b64: str = Field(
        ...,
        description="Base64-encoded flat RGBA buffer, row-major, 4 bytes per pixel"
    )
    width: int = Field(..., ge=0, description="Image width in pixels")
    height: int = Field(..., ge=0, description="Image height in pixels")
    include_swatch: bool = Field(False, description="Include a palette strip PNG in the response")


class ExtractedColorEntry(BaseModel):
    """Single dominant color with its sample count and share."""
    color: str = Field(..., pattern=r"^#[0-9a-f]{6}$", description="Quantized color")
    count: int = Field(..., ge=1, description="Number of sampled pixels in this bucket")
    percentage: int = Field(..., ge=0, le=100, description="Share of the retained colors")


class ColorExtractResponse(BaseModel):
    """Main color extraction response."""
    width: int
    height: int
    sampled_pixels: int = Field(..., description="Pixels visited by the sampling stride")
    opaque_pixels: int = Field(..., description="Sampled pixels that passed the alpha filter")
    colors: List[ExtractedColorEntry] = Field(
        ...,
        description="Colors ordered by count (most to least dominant)"
    )
    message: Optional[str] = Field(None, description="Set to 'No colors found' for empty results")
    swatch_png_b64: Optional[str] = Field(None, description="Base64 PNG palette strip")
    params: Dict[str, int] = Field(..., description="Sampling parameters used")


class SwatchRequest(BaseModel):
    """Colors to render into a downloadable palette strip."""
    colors: List[str] = Field(..., min_length=1, max_length=32)
    width: int = Field(1000, ge=50, le=4000)
    height: int = Field(200, ge=20, le=2000)
    filename: str = Field("palette", pattern=r"^[A-Za-z0-9_-]{1,64}$")

    @field_validator("colors")
    @classmethod
    def validate_colors(cls, v):
        return _canonical_colors(v)
