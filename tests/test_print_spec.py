"""Tests for PrintSpec configuration."""

import pytest
from pydantic import ValidationError

from kdp_cover.config.print_spec import KDP_PRINT_SPEC, PrintSpec, load_print_spec
from kdp_cover.config.sizes import BindingType, PaperColor
from kdp_cover.cover.geometry import SpineGeometryCalculator
from kdp_cover.errors import InvalidArgument


class TestPrintSpec:
    """Tests for the PrintSpec model."""

    def test_kdp_defaults(self):
        assert KDP_PRINT_SPEC.bleed == 0.125
        assert KDP_PRINT_SPEC.cover_safe_margin == 0.25
        assert KDP_PRINT_SPEC.spine_safe_margin == 0.0625
        assert KDP_PRINT_SPEC.min_spine_width == 0.06
        assert KDP_PRINT_SPEC.thickness(PaperColor.WHITE, BindingType.PAPERBACK) == 0.002252
        assert KDP_PRINT_SPEC.thickness(PaperColor.CREAM, BindingType.HARDCOVER) == 0.00275

    def test_frozen(self):
        with pytest.raises(ValidationError):
            KDP_PRINT_SPEC.bleed = 0.5

    def test_incomplete_thickness_table_rejected(self):
        with pytest.raises(ValidationError, match="missing binding 'hardcover'"):
            PrintSpec(paper_thickness={
                "white": {"paperback": 0.002},
                "cream": {"paperback": 0.002, "hardcover": 0.003},
            })

    def test_negative_margin_rejected(self):
        with pytest.raises(ValidationError):
            PrintSpec(cover_safe_margin=-0.1)

    def test_unknown_field_rejected(self):
        with pytest.raises(ValidationError):
            PrintSpec(bleeed=0.2)

    def test_injected_spec_changes_results(self):
        """Another vendor's numbers flow through without code changes."""
        vendor = PrintSpec(
            bleed=0.25,
            min_spine_width=0.1,
            paper_thickness={
                "white": {"paperback": 0.003, "hardcover": 0.004},
                "cream": {"paperback": 0.0035, "hardcover": 0.0045},
            },
        )
        calc = SpineGeometryCalculator(vendor)

        assert calc.calculate_spine_width(100, "white") == pytest.approx(0.3)
        assert calc.calculate_spine_width(10, "white") == 0.1
        g = calc.calculate_cover_dimensions("6x9", 0.3)
        assert g.total_width == pytest.approx(12.8)
        assert g.total_height == pytest.approx(9.5)


class TestLoadPrintSpec:
    """Tests for load_print_spec."""

    def test_partial_override(self, write_json):
        spec = load_print_spec(write_json({
            "bleed": 0.2,
            "paper_thickness": {"cream": {"hardcover": 0.003}},
        }))

        assert spec.bleed == 0.2
        assert spec.cover_safe_margin == 0.25
        assert spec.thickness(PaperColor.CREAM, BindingType.HARDCOVER) == 0.003
        assert spec.thickness(PaperColor.WHITE, BindingType.PAPERBACK) == 0.002252

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{not json", encoding="utf-8")

        with pytest.raises(InvalidArgument, match="not valid JSON"):
            load_print_spec(path)

    def test_missing_file(self, tmp_path):
        with pytest.raises(InvalidArgument, match="cannot be read"):
            load_print_spec(tmp_path / "missing.json")

    def test_not_utf8(self, tmp_path):
        path = tmp_path / "latin1.json"
        path.write_bytes(b"{\"bleed\": \"\xff\"}")

        with pytest.raises(InvalidArgument, match="cannot be read"):
            load_print_spec(path)

    def test_not_an_object(self, write_json):
        with pytest.raises(InvalidArgument, match="expected a JSON object"):
            load_print_spec(write_json([1, 2, 3]))

    def test_invalid_value(self, write_json):
        with pytest.raises(InvalidArgument, match="print spec"):
            load_print_spec(write_json({"paper_thickness": {"white": {"paperback": 0}}}))
