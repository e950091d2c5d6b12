"""
PaletteLab Colors Module

Provides color space conversion, WCAG contrast scoring, dominant color
extraction, harmony and theme palette generation, gradient CSS building and
palette swatch rendering.
"""

__version__ = "1.0.0"
