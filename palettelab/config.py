"""
PaletteLab Configuration
Manages environment variables and defaults for the color tooling services.
"""
import os
from typing import List


def env_flag(name: str, default: bool) -> bool:
    """Read a boolean env var; accepts 1/0, true/false, yes/no and on/off."""
    value = os.environ.get(name)
    if value is None or not value.strip():
        return default

    normalized = value.strip().lower()
    if normalized in ("1", "true", "yes", "on"):
        return True
    if normalized in ("0", "false", "no", "off"):
        return False
    raise ValueError(f"Invalid boolean for {name}: {value!r}")


class Config:
    """Configuration class for PaletteLab services."""

    # Service identity
    SERVICE_NAME: str = "palettelab-backend"
    VERSION: str = "1.0.0"

    # Logging
    LOG_LEVEL: str = os.environ.get("PALETTELAB_LOG_LEVEL", "INFO")

    # Dominant color extraction
    EXTRACT_SAMPLE_STRIDE: int = int(os.environ.get("PALETTELAB_EXTRACT_SAMPLE_STRIDE", "10"))
    EXTRACT_QUANTIZATION_STEP: int = int(os.environ.get("PALETTELAB_EXTRACT_QUANTIZATION_STEP", "17"))
    EXTRACT_ALPHA_THRESHOLD: int = int(os.environ.get("PALETTELAB_EXTRACT_ALPHA_THRESHOLD", "128"))
    EXTRACT_MAX_COLORS: int = int(os.environ.get("PALETTELAB_EXTRACT_MAX_COLORS", "12"))
    MAX_BUFFER_MB: int = int(os.environ.get("PALETTELAB_MAX_BUFFER_MB", "32"))

    # Catalog
    TRENDING_PALETTES_LIMIT: int = int(os.environ.get("PALETTELAB_TRENDING_PALETTES_LIMIT", "6"))
    TRENDING_GRADIENTS_LIMIT: int = int(os.environ.get("PALETTELAB_TRENDING_GRADIENTS_LIMIT", "4"))
    SEED_SAMPLE_DATA: bool = env_flag("PALETTELAB_SEED_SAMPLE_DATA", True)

    # CORS settings
    ALLOWED_ORIGINS: str = os.environ.get(
        "PALETTELAB_ALLOWED_ORIGINS",
        "http://localhost:3000,http://localhost:5000,http://localhost:5173"
    )

    @classmethod
    def allowed_origins(cls) -> List[str]:
        """Split the comma separated CORS origins."""
        return [origin.strip() for origin in cls.ALLOWED_ORIGINS.split(",") if origin.strip()]

    @classmethod
    def max_buffer_bytes(cls) -> int:
        """Largest accepted raw RGBA buffer in bytes."""
        return cls.MAX_BUFFER_MB * 1024 * 1024

    @classmethod
    def validate_stride(cls, stride: int) -> bool:
        """Validate pixel sampling stride."""
        return 1 <= stride <= 1000

    @classmethod
    def validate_quantization_step(cls, step: int) -> bool:
        """Validate channel quantization step."""
        return 1 <= step <= 255

    @classmethod
    def validate_max_colors(cls, max_colors: int) -> bool:
        """Validate number of extracted colors."""
        return 1 <= max_colors <= 64


# Global config instance
config = Config()
