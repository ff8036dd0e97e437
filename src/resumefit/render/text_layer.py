"""Invisible, machine-extractable text layer.

The resume's plain text is written at a near-zero font size in the page
background colour. It does not show on screen or in print but remains in the
PDF text stream for applicant tracking systems and other text scanners.

Only base-14 fonts are used and nothing is embedded, so the layer covers the
Latin-1 repertoire. Characters outside it, such as ``Ł``, ``•`` or CJK text,
come back from text extraction as ``·``. The raster is unaffected.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from reportlab.lib.utils import simpleSplit

from resumefit.model.export_options import TextLayerOptions
from resumefit.types import PT_PER_MM

logger = logging.getLogger(__name__)

# Base-14 font names understood by PyMuPDF's insert_text
_FITZ_FONTS = {
    "Helvetica": "helv",
    "Times-Roman": "tiro",
    "Courier": "cour",
}


@dataclass(frozen=True)
class TextLayer:
    lines: tuple[str, ...]
    font_size: float
    color: tuple[float, float, float]
    origin: tuple[float, float]
    font_name: str

    @property
    def is_empty(self) -> bool:
        return not any(line.strip() for line in self.lines)


def normalize_text(text: str) -> str:
    """Strip trailing spaces and collapse runs of blank lines."""
    out: list[str] = []
    blank = False
    for raw in (text or "").replace("\r\n", "\n").replace("\r", "\n").split("\n"):
        line = raw.rstrip()
        if not line.strip():
            if out and not blank:
                out.append("")
            blank = True
            continue
        out.append(line)
        blank = False
    while out and not out[-1]:
        out.pop()
    return "\n".join(out)


def wrap_text(text: str, font_name: str, font_size: float, wrap_width: float) -> list[str]:
    """Wrap ``text`` to ``wrap_width`` page units (millimetres)."""
    if not text:
        return []
    return list(simpleSplit(text, font_name, font_size, wrap_width * PT_PER_MM))


def build_text_layer(text: str, options: TextLayerOptions | None = None) -> TextLayer:
    opts = options or TextLayerOptions()
    if opts.font_name not in _FITZ_FONTS:
        raise ValueError(
            f"Unsupported text layer font {opts.font_name!r}. Valid values: {sorted(_FITZ_FONTS)}"
        )
    normalized = normalize_text(text)
    lines = wrap_text(normalized, opts.font_name, opts.font_size, opts.wrap_width)
    if not lines:
        logger.info("No text extracted from layout; text layer left empty")
    return TextLayer(
        lines=tuple(lines),
        font_size=opts.font_size,
        color=opts.color,
        origin=opts.origin,
        font_name=opts.font_name,
    )


def embed_text_layer(page: Any, layer: TextLayer) -> int:
    """Write the layer onto a PyMuPDF page and return the number of lines written."""
    if layer.is_empty:
        return 0
    import fitz

    x, y = layer.origin
    point = fitz.Point(x * PT_PER_MM, y * PT_PER_MM)
    page.insert_text(
        point,
        list(layer.lines),
        fontsize=layer.font_size,
        fontname=_FITZ_FONTS[layer.font_name],
        color=layer.color,
    )
    return len(layer.lines)


__all__ = ["TextLayer", "build_text_layer", "embed_text_layer", "normalize_text", "wrap_text"]
