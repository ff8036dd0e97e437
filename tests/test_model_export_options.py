"""Tests for export options module."""

import pytest

from resumefit.model.export_options import (
    A4,
    PRINT_STYLES,
    CompressOptions,
    ExportOptions,
    FitOptions,
)
from resumefit.types import PageSize


class TestFitOptions:
    """Test FitOptions validation."""

    def test_defaults(self) -> None:
        fit = FitOptions()
        assert (fit.min_size, fit.max_size, fit.step, fit.fine_step) == (10, 24, 1, 0.5)
        assert fit.tolerance == 0.95
        fit.validate()

    def test_inverted_bounds_rejected(self) -> None:
        with pytest.raises(ValueError, match="font bounds"):
            FitOptions(min_size=20, max_size=12).validate()

    @pytest.mark.parametrize("tolerance", [0, 1.5, -0.1])
    def test_tolerance_range(self, tolerance: float) -> None:
        with pytest.raises(ValueError):
            FitOptions(tolerance=tolerance).validate()


class TestCompressOptions:
    """Test CompressOptions validation."""

    def test_defaults(self) -> None:
        options = CompressOptions()
        assert options.start_quality == 0.8
        assert options.min_quality == 0.3
        assert options.budget == 1_000_000

    def test_floor_above_start_rejected(self) -> None:
        with pytest.raises(ValueError, match="min_quality"):
            CompressOptions(start_quality=0.5, min_quality=0.6).validate()

    def test_non_positive_budget_rejected(self) -> None:
        with pytest.raises(ValueError, match="Budget"):
            CompressOptions(budget=0).validate()


class TestExportOptions:
    """Test ExportOptions dataclass."""

    def test_default_values(self) -> None:
        options = ExportOptions()
        assert options.page_size == A4
        assert options.margin == 10.0
        assert options.root_selector == "#resume-page"
        assert options.print_styles == PRINT_STYLES
        options.validate()

    def test_print_styles_are_copied(self) -> None:
        options = ExportOptions()
        options.print_styles["padding"] = "5px"
        assert PRINT_STYLES["padding"] == "0"

    def test_from_cli_builds_letter_page(self) -> None:
        options = ExportOptions.from_cli(
            page_width=215.9, page_height=279.4, margin=12.5, budget=500_000, min_quality=0.4
        )
        assert options.page_size == PageSize(215.9, 279.4)
        assert options.margin == 12.5
        assert options.compress.budget == 500_000
        assert options.compress.min_quality == 0.4
        assert options.compress.start_quality == 0.8

    def test_from_cli_raises_start_quality_to_floor(self) -> None:
        options = ExportOptions.from_cli(min_quality=0.9)
        assert options.compress.start_quality == 0.9

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"margin": 105},
            {"margin": -1},
            {"page_width": 0},
            {"target_height": 0},
            {"capture_scale": 0},
            {"budget": 0},
            {"min_quality": 0},
        ],
    )
    def test_from_cli_rejects_invalid_values(self, kwargs: dict[str, float]) -> None:
        with pytest.raises(ValueError):
            ExportOptions.from_cli(**kwargs)

    def test_to_dict(self) -> None:
        data = ExportOptions().to_dict()
        assert data["page_size"] == [210.0, 297.0]
        assert data["font_bounds"] == [10.0, 24.0]
        assert data["quality_range"] == [0.3, 0.8]
        assert data["budget"] == 1_000_000

    def test_repr(self) -> None:
        text = repr(ExportOptions())
        assert text.startswith("ExportOptions(")
        assert "page_size=210.0x297.0" in text
        assert "root_selector='#resume-page'" in text
