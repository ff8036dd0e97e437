"""Font-size search that brings a layout's rendered height to a target.

The search has two mutually exclusive phases. When the content is shorter
than ``target * tolerance`` the font grows by ``step``; when it is taller than
``target`` the font shrinks by ``fine_step``. Within the band nothing changes.
Growth may overshoot the target by one step, and shrinking stops at
``min_size`` even if the content still overflows.
"""

from __future__ import annotations

import logging

from resumefit.diagnostics import log_fit_decision
from resumefit.layout.styles import StyleScope
from resumefit.model.export_options import FitOptions

logger = logging.getLogger(__name__)


def _font_patch(size: float) -> dict[str, str]:
    return {"font-size": f"{size:g}px"}


def fit_font_size(
    scope: StyleScope,
    target_height: float,
    options: FitOptions | None = None,
) -> float:
    """Adjust the scoped node's font size and return the size applied.

    The node keeps the final size until the scope is restored.
    """
    opts = options or FitOptions()
    font_size = scope.computed_font_size()
    height = scope.measure().scroll_height
    start_size = font_size
    steps = 0

    if height < target_height * opts.tolerance:
        phase = "grow"
        while height < target_height * opts.tolerance and font_size + opts.step <= opts.max_size:
            font_size += opts.step
            scope.apply(_font_patch(font_size))
            height = scope.measure().scroll_height
            steps += 1
    elif height > target_height:
        phase = "shrink"
        while height > target_height and font_size - opts.fine_step >= opts.min_size:
            font_size -= opts.fine_step
            scope.apply(_font_patch(font_size))
            height = scope.measure().scroll_height
            steps += 1
        if height > target_height:
            logger.info(
                "Font floor %.1fpx reached; content height %.0f still exceeds target %.0f",
                font_size,
                height,
                target_height,
            )
    else:
        phase = "keep"

    log_fit_decision(
        phase,
        {
            "start": f"{start_size:g}px",
            "final": f"{font_size:g}px",
            "steps": steps,
            "height": f"{height:.0f}",
            "target": f"{target_height:.0f}",
        },
    )
    return font_size


__all__ = ["fit_font_size"]
