"""Projection of link rectangles from layout pixels into page coordinates."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from resumefit.types import InteractiveRegion, PlacedRegion, Placement

logger = logging.getLogger(__name__)


def project_region(
    region: InteractiveRegion,
    capture_width: float,
    capture_height: float,
    placement: Placement,
) -> PlacedRegion:
    sx = placement.width / capture_width
    sy = placement.height / capture_height
    return PlacedRegion(
        url=region.url,
        x=placement.x + region.x * sx,
        y=placement.y + region.y * sy,
        w=region.w * sx,
        h=region.h * sy,
    )


def project_regions(
    regions: Iterable[InteractiveRegion],
    capture_width: float,
    capture_height: float,
    placement: Placement,
) -> list[PlacedRegion]:
    """Map link fragments onto the placed image.

    ``capture_width``/``capture_height`` must be the node's size at the moment
    the raster was captured, not its current size. Zero-area fragments are
    dropped; fragments sharing a URL are kept as separate hotspots.
    """
    if capture_width <= 0 or capture_height <= 0:
        raise ValueError(f"Invalid capture size {capture_width}x{capture_height}")

    placed: list[PlacedRegion] = []
    skipped = 0
    for region in regions:
        if region.is_empty:
            skipped += 1
            continue
        placed.append(project_region(region, capture_width, capture_height, placement))
    if skipped:
        logger.debug("Skipped %d zero-area link fragment(s)", skipped)
    return placed


__all__ = ["project_region", "project_regions"]
