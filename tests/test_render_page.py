from __future__ import annotations

import fitz
import pytest

from resumefit.model.export_options import A4
from resumefit.render.compose import compose_page
from resumefit.render.compress import compress_raster
from resumefit.render.page import OutputPage
from resumefit.render.text_layer import build_text_layer
from resumefit.types import PT_PER_MM, PlacedRegion, RasterImage


def _page(regions: tuple[PlacedRegion, ...] = (), text: str = "") -> OutputPage:
    raster = RasterImage(width=40, height=50, pixels=b"\x20\x40\x60\xff" * (40 * 50))
    encoded = compress_raster(raster)
    return OutputPage(
        page_size=A4,
        margin=10,
        image=encoded,
        placement=compose_page(raster, A4, 10),
        regions=regions,
        text_layer=build_text_layer(text),
        metadata={"title": "Jane Doe"},
    )


def test_pdf_has_single_a4_page_with_one_image() -> None:
    doc = fitz.open(stream=_page().to_pdf_bytes(), filetype="pdf")
    assert doc.page_count == 1
    page = doc[0]
    assert page.rect.width == pytest.approx(210 * PT_PER_MM, abs=0.01)
    assert page.rect.height == pytest.approx(297 * PT_PER_MM, abs=0.01)
    assert len(page.get_images()) == 1
    assert doc.metadata["title"] == "Jane Doe"


def test_image_is_drawn_at_placement() -> None:
    out = _page()
    doc = fitz.open(stream=out.to_pdf_bytes(), filetype="pdf")
    rects = doc[0].get_image_rects(doc[0].get_images()[0][0])
    assert len(rects) == 1
    p = out.placement
    assert rects[0].x0 == pytest.approx(p.x * PT_PER_MM, abs=0.05)
    assert rects[0].y0 == pytest.approx(p.y * PT_PER_MM, abs=0.05)
    assert rects[0].width == pytest.approx(p.width * PT_PER_MM, abs=0.05)


def test_links_written_per_region() -> None:
    regions = (
        PlacedRegion(url="https://a.example", x=20, y=30, w=15, h=4),
        PlacedRegion(url="https://a.example", x=12, y=34.5, w=6, h=4),
    )
    doc = fitz.open(stream=_page(regions).to_pdf_bytes(), filetype="pdf")
    links = doc[0].get_links()
    assert [link["uri"] for link in links] == ["https://a.example", "https://a.example"]
    first = links[0]["from"]
    assert first.x0 == pytest.approx(20 * PT_PER_MM, abs=0.05)
    assert first.y0 == pytest.approx(30 * PT_PER_MM, abs=0.05)
    assert first.width == pytest.approx(15 * PT_PER_MM, abs=0.05)
    assert first.height == pytest.approx(4 * PT_PER_MM, abs=0.05)


def test_text_layer_written_to_pdf() -> None:
    doc = fitz.open(stream=_page(text="Jane Doe\nPython, SQL").to_pdf_bytes(), filetype="pdf")
    text = doc[0].get_text()
    assert "Jane Doe" in text
    assert "Python, SQL" in text
