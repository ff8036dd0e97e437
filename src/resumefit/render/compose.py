from __future__ import annotations

from resumefit.types import PageSize, Placement, RasterImage


def compose_page(image: RasterImage, page_size: PageSize, margin: float) -> Placement:
    """Fit a raster inside the page margins.

    The scale is uniform, the image is centred horizontally and pinned to the
    top margin so the resume header stays at the top of the page.
    """
    if image.width <= 0 or image.height <= 0:
        raise ValueError(f"Cannot place an empty image ({image.width}x{image.height})")

    scale_x = (page_size.width - 2 * margin) / image.width
    scale_y = (page_size.height - 2 * margin) / image.height
    scale = min(scale_x, scale_y)

    width = image.width * scale
    height = image.height * scale
    x = (page_size.width - width) / 2
    y = margin
    return Placement(x=x, y=y, width=width, height=height, scale=scale)


__all__ = ["compose_page"]
