"""
Accessibility (WCAG contrast) checks for foreground/background color pairs.
"""

from dataclasses import dataclass, asdict
from typing import Any, Dict

from .conversion import (
    AA_THRESHOLD, AAA_THRESHOLD, LARGE_TEXT_THRESHOLD,
    ComplianceLevel, compliance_level, contrast_ratio, normalize_hex
)


@dataclass
class ContrastReport:
    """Contrast ratio of a color pair with its WCAG pass/fail flags."""
    foreground: str
    background: str
    ratio: float
    level: ComplianceLevel
    aa_normal: bool  # normal text, ratio >= 4.5
    aaa_normal: bool  # normal text, ratio >= 7
    aa_large: bool  # large text, ratio >= 3
    aaa_large: bool  # large text, ratio >= 4.5

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["level"] = self.level.value
        return data


def evaluate_contrast(foreground: str, background: str) -> ContrastReport:
    """
    Score a foreground/background pair against the WCAG thresholds.

    The large-text flags are informational only; `level` always follows
    the three-way AAA / AA / Fail classification for normal text.

    Raises:
        InvalidFormat: If either color is malformed
    """
    ratio = contrast_ratio(foreground, background)

    return ContrastReport(
        foreground=normalize_hex(foreground),
        background=normalize_hex(background),
        ratio=ratio,
        level=compliance_level(ratio),
        aa_normal=ratio >= AA_THRESHOLD,
        aaa_normal=ratio >= AAA_THRESHOLD,
        aa_large=ratio >= LARGE_TEXT_THRESHOLD,
        aaa_large=ratio >= AA_THRESHOLD,
    )
