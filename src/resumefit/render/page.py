"""Fixed-size output page and its PDF serialization (PyMuPDF)."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from resumefit.render.text_layer import TextLayer, embed_text_layer
from resumefit.types import PT_PER_MM, EncodedImage, PageSize, PlacedRegion, Placement

logger = logging.getLogger(__name__)


def _mm_rect(x0: float, y0: float, x1: float, y1: float):  # type: ignore[no-untyped-def]
    import fitz

    return fitz.Rect(x0 * PT_PER_MM, y0 * PT_PER_MM, x1 * PT_PER_MM, y1 * PT_PER_MM)


@dataclass(frozen=True)
class OutputPage:
    """One composed page. Geometry is in millimetres, top-left origin."""

    page_size: PageSize
    margin: float
    image: EncodedImage
    placement: Placement
    regions: tuple[PlacedRegion, ...] = ()
    text_layer: TextLayer | None = None
    metadata: dict[str, str] = field(default_factory=dict)

    def to_pdf_bytes(self) -> bytes:
        import fitz

        doc = fitz.open()
        try:
            page = doc.new_page(
                width=self.page_size.width * PT_PER_MM,
                height=self.page_size.height * PT_PER_MM,
            )
            p = self.placement
            page.insert_image(
                _mm_rect(p.x, p.y, p.x + p.width, p.y + p.height),
                stream=self.image.data,
                keep_proportion=False,
            )
            for region in self.regions:
                page.insert_link(
                    {
                        "kind": fitz.LINK_URI,
                        "from": _mm_rect(*region.rect),
                        "uri": region.url,
                    }
                )
            lines = embed_text_layer(page, self.text_layer) if self.text_layer else 0
            if self.metadata:
                doc.set_metadata(dict(self.metadata))
            data = doc.tobytes(garbage=3, deflate=True)
        finally:
            doc.close()

        logger.debug(
            "Wrote PDF page: %d bytes, %d link(s), %d text line(s)",
            len(data),
            len(self.regions),
            lines,
        )
        return data


__all__ = ["OutputPage"]
