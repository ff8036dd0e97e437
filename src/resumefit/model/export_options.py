"""Export options for resumefit.

Defaults reproduce a single A4 page (210 × 297 mm, 10 mm margin) captured at
2x device scale and compressed under one megabyte.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from resumefit.types import PageSize

A4 = PageSize(width=210.0, height=297.0)

# Flattens the preview "card" look before capture
PRINT_STYLES: dict[str, str] = {
    "padding": "0",
    "border": "none",
    "border-radius": "0",
    "margin": "0",
    "box-shadow": "none",
    "background": "white",
    "transform": "none",
    "transform-origin": "top left",
}


@dataclass(frozen=True)
class FitOptions:
    """Bounds for the font-size search, in CSS pixels."""

    min_size: float = 10.0
    max_size: float = 24.0
    step: float = 1.0
    fine_step: float = 0.5
    tolerance: float = 0.95

    def validate(self) -> None:
        if self.min_size <= 0 or self.max_size < self.min_size:
            raise ValueError(
                f"Invalid font bounds: min={self.min_size}, max={self.max_size}"
            )
        if self.step <= 0 or self.fine_step <= 0:
            raise ValueError("Font steps must be positive")
        if not 0 < self.tolerance <= 1:
            raise ValueError(f"Tolerance must be in (0, 1], got {self.tolerance}")


@dataclass(frozen=True)
class CompressOptions:
    """JPEG quality search settings; qualities are in [0, 1]."""

    start_quality: float = 0.8
    step: float = 0.1
    min_quality: float = 0.3
    budget: int = 1_000_000

    def validate(self) -> None:
        if not 0 < self.min_quality <= self.start_quality <= 1:
            raise ValueError(
                "Qualities must satisfy 0 < min_quality <= start_quality <= 1 "
                f"(got min={self.min_quality}, start={self.start_quality})"
            )
        if self.step <= 0:
            raise ValueError(f"Quality step must be positive, got {self.step}")
        if self.budget <= 0:
            raise ValueError(f"Budget must be positive, got {self.budget}")


@dataclass(frozen=True)
class TextLayerOptions:
    font_size: float = 0.1  # points
    color: tuple[float, float, float] = (1.0, 1.0, 1.0)
    wrap_width: float = 180.0  # page units
    origin: tuple[float, float] = (5.0, 5.0)  # page units
    font_name: str = "Helvetica"


@dataclass
class ExportOptions:
    """Pipeline configuration for one export.

    Page geometry is in millimetres; target_height is in CSS pixels of the
    live layout (1123 px is a full A4 page at 96 dpi).
    """

    page_size: PageSize = A4
    margin: float = 10.0
    target_height: float = 1120.0
    capture_scale: float = 2.0
    root_selector: str = "#resume-page"
    print_styles: dict[str, str] = field(default_factory=lambda: dict(PRINT_STYLES))
    fit: FitOptions = field(default_factory=FitOptions)
    compress: CompressOptions = field(default_factory=CompressOptions)
    text_layer: TextLayerOptions = field(default_factory=TextLayerOptions)

    def validate(self) -> None:
        if self.page_size.width <= 0 or self.page_size.height <= 0:
            raise ValueError(f"Invalid page size {self.page_size}")
        if self.margin < 0 or 2 * self.margin >= min(self.page_size.width, self.page_size.height):
            raise ValueError(f"Margin {self.margin} does not fit page {self.page_size}")
        if self.target_height <= 0:
            raise ValueError(f"Target height must be positive, got {self.target_height}")
        if self.capture_scale <= 0:
            raise ValueError(f"Capture scale must be positive, got {self.capture_scale}")
        self.fit.validate()
        self.compress.validate()

    @classmethod
    def from_cli(
        cls,
        *,
        page_width: float = A4.width,
        page_height: float = A4.height,
        margin: float = 10.0,
        target_height: float = 1120.0,
        capture_scale: float = 2.0,
        budget: int = 1_000_000,
        min_quality: float = 0.3,
        selector: str = "#resume-page",
    ) -> ExportOptions:
        """Build ExportOptions from CLI argument values.

        Raises:
            ValueError: If any argument has an invalid value
        """
        options = cls(
            page_size=PageSize(width=page_width, height=page_height),
            margin=margin,
            target_height=target_height,
            capture_scale=capture_scale,
            root_selector=selector,
            compress=CompressOptions(
                start_quality=max(CompressOptions.start_quality, min_quality),
                min_quality=min_quality,
                budget=budget,
            ),
        )
        options.validate()
        return options

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization/logging."""
        return {
            "page_size": [self.page_size.width, self.page_size.height],
            "margin": self.margin,
            "target_height": self.target_height,
            "capture_scale": self.capture_scale,
            "root_selector": self.root_selector,
            "font_bounds": [self.fit.min_size, self.fit.max_size],
            "budget": self.compress.budget,
            "quality_range": [self.compress.min_quality, self.compress.start_quality],
        }

    def __repr__(self) -> str:
        return (
            f"ExportOptions("
            f"page_size={self.page_size.width}x{self.page_size.height}, "
            f"margin={self.margin}, "
            f"target_height={self.target_height}, "
            f"capture_scale={self.capture_scale}, "
            f"root_selector={self.root_selector!r}, "
            f"budget={self.compress.budget}"
            f")"
        )


__all__ = [
    "A4",
    "PRINT_STYLES",
    "CompressOptions",
    "ExportOptions",
    "FitOptions",
    "TextLayerOptions",
]
