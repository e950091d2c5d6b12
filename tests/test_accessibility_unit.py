"""
Unit tests for WCAG luminance, contrast ratio and compliance levels.
"""

import pytest

from palettelab.services.colors.accessibility import evaluate_contrast
from palettelab.services.colors.conversion import (
    ComplianceLevel, InvalidFormat, compliance_level, contrast_ratio, relative_luminance
)


class TestLuminance:

    def test_extremes(self):
        assert relative_luminance("#000000") == pytest.approx(0.0)
        assert relative_luminance("#ffffff") == pytest.approx(1.0)

    def test_green_dominates(self):
        assert relative_luminance("#00ff00") > relative_luminance("#ff0000") > relative_luminance("#0000ff")


class TestContrastRatio:

    def test_black_on_white(self):
        assert contrast_ratio("#000000", "#ffffff") == 21.0

    def test_same_color_is_one(self):
        assert contrast_ratio("#3b82f6", "#3b82f6") == pytest.approx(1.0)

    def test_order_independent(self):
        assert contrast_ratio("#777777", "#ffffff") == contrast_ratio("#ffffff", "#777777")

    def test_known_grays(self):
        assert contrast_ratio("#777777", "#ffffff") == pytest.approx(4.48, abs=0.01)
        assert contrast_ratio("#767676", "#ffffff") == pytest.approx(4.54, abs=0.01)

    def test_malformed_color(self):
        with pytest.raises(InvalidFormat):
            contrast_ratio("#12", "#ffffff")


class TestComplianceLevel:

    @pytest.mark.parametrize("ratio, level", [
        (21.0, ComplianceLevel.AAA),
        (7.0, ComplianceLevel.AAA),
        (6.99, ComplianceLevel.AA),
        (4.5, ComplianceLevel.AA),
        (4.49999, ComplianceLevel.FAIL),
        (1.0, ComplianceLevel.FAIL),
    ])
    def test_thresholds(self, ratio, level):
        assert compliance_level(ratio) == level

    def test_fail_value(self):
        assert ComplianceLevel.FAIL.value == "Fail"


class TestEvaluateContrast:

    def test_report_fields(self):
        report = evaluate_contrast("#777", "#FFFFFF")

        assert report.foreground == "#777777"
        assert report.background == "#ffffff"
        assert report.level == ComplianceLevel.FAIL
        assert report.aa_normal is False
        assert report.aaa_normal is False
        assert report.aa_large is True
        assert report.aaa_large is False

    def test_to_dict_uses_level_value(self):
        data = evaluate_contrast("#000000", "#ffffff").to_dict()

        assert data["level"] == "AAA"
        assert data["aaa_normal"] is True
        assert data["ratio"] == 21.0
