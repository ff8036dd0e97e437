"""Centralized decision logging for the export pipeline.

These helpers log what the pipeline decided (fit phase, compression outcome,
placement) for troubleshooting. User-facing progress goes through
``ProgressReporter`` instead.
"""

from __future__ import annotations

import logging
from typing import Any

from resumefit.model.export_options import ExportOptions
from resumefit.types import EncodedImage, Placement

logger = logging.getLogger(__name__)


def log_export_configuration(options: ExportOptions) -> None:
    """Log the export configuration for debugging.

    Args:
        options: Export options to log
    """
    logger.info("Export configuration:")
    logger.info(
        "  Page: %gx%g, margin %g", options.page_size.width, options.page_size.height, options.margin
    )
    logger.info("  Target height: %.0fpx", options.target_height)
    logger.info("  Capture scale: %g", options.capture_scale)
    logger.info(
        "  Font bounds: %g-%gpx", options.fit.min_size, options.fit.max_size
    )
    logger.info(
        "  Image budget: %d bytes (quality %.2f..%.2f)",
        options.compress.budget,
        options.compress.start_quality,
        options.compress.min_quality,
    )
    logger.debug("Export options: %s", options.to_dict())


def log_fit_decision(phase: str, context: dict[str, Any] | None = None) -> None:
    """Log the auto-fit outcome.

    Args:
        phase: "grow", "shrink" or "keep"
        context: Optional context information
    """
    if context:
        context_str = ", ".join(f"{k}={v}" for k, v in context.items())
        logger.info("Auto-fit: %s (%s)", phase, context_str)
    else:
        logger.info("Auto-fit: %s", phase)


def log_compression_result(encoded: EncodedImage, attempts: int, budget: int) -> None:
    if encoded.size <= budget:
        logger.info(
            "Compression: %d bytes at quality %.2f after %d attempt(s)",
            encoded.size,
            encoded.quality,
            attempts,
        )
    else:
        logger.warning(
            "Compression: %d bytes exceeds budget %d at floor quality %.2f",
            encoded.size,
            budget,
            encoded.quality,
        )


def log_placement(placement: Placement, regions: int) -> None:
    logger.info(
        "Placement: image at (%.2f, %.2f) size %.2fx%.2f scale %.5f, %d hotspot(s)",
        placement.x,
        placement.y,
        placement.width,
        placement.height,
        placement.scale,
        regions,
    )


__all__ = [
    "log_compression_result",
    "log_export_configuration",
    "log_fit_decision",
    "log_placement",
]
