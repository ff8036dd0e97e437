from __future__ import annotations

import pytest

from resumefit.model.export_options import A4
from resumefit.render.compose import compose_page
from resumefit.render.regions import project_region, project_regions
from resumefit.types import InteractiveRegion, PageSize, Placement, RasterImage


def _image(width: int, height: int) -> RasterImage:
    return RasterImage(width=width, height=height, pixels=b"")


def test_compose_square_image_on_a4() -> None:
    placement = compose_page(_image(1000, 1000), A4, 10)
    assert placement.scale == pytest.approx(0.19)
    assert placement.width == pytest.approx(190)
    assert placement.height == pytest.approx(190)
    assert placement.x == pytest.approx(10)
    assert placement.y == 10


def test_compose_tall_image_is_centred_horizontally() -> None:
    placement = compose_page(_image(800, 2000), A4, 10)
    # height-bound: 277 / 2000
    assert placement.scale == pytest.approx(0.1385)
    assert placement.height == pytest.approx(277)
    assert placement.width == pytest.approx(110.8)
    assert placement.x == pytest.approx((210 - 110.8) / 2)
    assert placement.y == 10


def test_compose_preserves_aspect_ratio() -> None:
    placement = compose_page(_image(1588, 2240), PageSize(215.9, 279.4), 12.5)
    assert placement.width / placement.height == pytest.approx(1588 / 2240)
    assert placement.width <= 215.9 - 25 + 1e-9
    assert placement.height <= 279.4 - 25 + 1e-9


def test_compose_rejects_empty_image() -> None:
    with pytest.raises(ValueError):
        compose_page(_image(0, 10), A4, 10)


def test_project_region_maps_into_placed_image() -> None:
    placement = Placement(x=10, y=10, width=180, height=225, scale=0.225)
    region = InteractiveRegion(url="https://example.com", x=100, y=200, w=50, h=20)
    placed = project_region(region, 800, 1000, placement)
    assert placed.url == "https://example.com"
    assert placed.x == pytest.approx(32.5)
    assert placed.y == pytest.approx(55)
    assert placed.w == pytest.approx(11.25)
    assert placed.h == pytest.approx(4.5)
    assert placed.rect == pytest.approx((32.5, 55, 43.75, 59.5))


def test_project_regions_drops_zero_area_and_keeps_fragments() -> None:
    placement = Placement(x=0, y=0, width=100, height=100, scale=1)
    regions = [
        InteractiveRegion(url="https://a.example", x=10, y=10, w=30, h=5),
        InteractiveRegion(url="https://a.example", x=0, y=15, w=12, h=5),
        InteractiveRegion(url="https://b.example", x=50, y=50, w=0, h=5),
        InteractiveRegion(url="https://c.example", x=50, y=60, w=5, h=0),
    ]
    placed = project_regions(regions, 100, 100, placement)
    assert [p.url for p in placed] == ["https://a.example", "https://a.example"]
    assert placed[0].x == pytest.approx(10)
    assert placed[1].y == pytest.approx(15)


def test_project_regions_rejects_empty_capture() -> None:
    placement = Placement(x=0, y=0, width=1, height=1, scale=1)
    with pytest.raises(ValueError):
        project_regions([], 0, 100, placement)
