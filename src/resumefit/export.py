"""Export pipeline: fit, capture, compress, compose, project and embed text.

The live layout is only touched inside one ``scoped_styles`` block. Link
regions, the capture size and the raster are all read inside that block,
after fitting and before any style is restored, so hotspots line up with
the image.
"""

from __future__ import annotations

import logging
from contextlib import suppress
from dataclasses import dataclass

from resumefit import __version__
from resumefit.diagnostics import log_export_configuration, log_placement
from resumefit.errors import ExportFailedError, PreviewNotFoundError
from resumefit.layout.autofit import fit_font_size
from resumefit.layout.styles import scoped_styles
from resumefit.model.export_options import ExportOptions
from resumefit.render.compose import compose_page
from resumefit.render.compress import compress_raster
from resumefit.render.page import OutputPage
from resumefit.render.regions import project_regions
from resumefit.render.text_layer import build_text_layer
from resumefit.types import LayoutMetrics, ProgressCallback, RenderingSurface

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ExportResult:
    pdf: bytes
    page: OutputPage
    font_size: float
    capture: LayoutMetrics


def _safe_emit(on_progress: ProgressCallback, event: str, payload: dict[str, int | str]) -> None:
    if on_progress is None:
        return
    with suppress(Exception):
        on_progress(event, payload)


def export_resume(
    surface: RenderingSurface,
    options: ExportOptions | None = None,
    on_progress: ProgressCallback = None,
    *,
    title: str | None = None,
) -> ExportResult:
    """Export the resume rendered on ``surface`` to a one-page PDF.

    Precondition: no other export runs against the same surface at the same
    time.

    Raises:
        PreviewNotFoundError: The root node is missing; nothing was mutated.
        ExportFailedError: Any later step failed; styles were restored first.
    """
    opts = options or ExportOptions()
    opts.validate()
    log_export_configuration(opts)

    root = surface.find_root(opts.root_selector)
    if root is None:
        logger.error("Resume root %r not found; aborting export", opts.root_selector)
        raise PreviewNotFoundError(opts.root_selector)

    _safe_emit(on_progress, "export:start", {"selector": opts.root_selector})
    stage = "style"
    try:
        with scoped_styles(surface, root, opts.print_styles) as scope:
            stage = "fit"
            font_size = fit_font_size(scope, opts.target_height, opts.fit)
            _safe_emit(on_progress, "fit:done", {"font_size": f"{font_size:g}px"})

            stage = "capture"
            regions = surface.link_regions(root)
            metrics = surface.measure(root)
            raster = surface.capture(root, opts.capture_scale)
            text = surface.text_content(root)
            _safe_emit(
                on_progress,
                "capture:done",
                {"width": raster.width, "height": raster.height, "links": len(regions)},
            )

            stage = "compress"
            encoded = compress_raster(raster, opts.compress)
            _safe_emit(
                on_progress,
                "compress:done",
                {"bytes": encoded.size, "quality": f"{encoded.quality:.2f}"},
            )

            stage = "compose"
            placement = compose_page(raster, opts.page_size, opts.margin)
            placed = project_regions(regions, metrics.width, metrics.height, placement)
            layer = build_text_layer(text, opts.text_layer)
            log_placement(placement, len(placed))

            metadata = {"creator": f"resumefit {__version__}"}
            if title:
                metadata["title"] = title
            page = OutputPage(
                page_size=opts.page_size,
                margin=opts.margin,
                image=encoded,
                placement=placement,
                regions=tuple(placed),
                text_layer=layer,
                metadata=metadata,
            )

            stage = "write"
            pdf = page.to_pdf_bytes()
            stage = "restore"
    except Exception as exc:
        logger.error("Export failed during %s: %s", stage, exc)
        raise ExportFailedError(stage, exc) from exc

    _safe_emit(on_progress, "export:finalized", {"bytes": len(pdf), "links": len(placed)})
    return ExportResult(pdf=pdf, page=page, font_size=font_size, capture=metrics)


__all__ = ["ExportResult", "export_resume"]
