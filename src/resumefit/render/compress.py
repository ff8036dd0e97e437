"""Size-budgeted JPEG encoding of captured rasters."""

from __future__ import annotations

import io
import logging
import warnings

from PIL import Image

from resumefit.diagnostics import log_compression_result
from resumefit.errors import BudgetNotMetWarning
from resumefit.model.export_options import CompressOptions
from resumefit.types import EncodedImage, RasterImage

logger = logging.getLogger(__name__)

JPEG_MIME = "image/jpeg"


def raster_to_rgb(image: RasterImage) -> Image.Image:
    """Decode an RGBA raster and flatten it onto a white background."""
    expected = image.width * image.height * 4
    if len(image.pixels) != expected:
        raise ValueError(
            f"Raster buffer is {len(image.pixels)} bytes, expected {expected} "
            f"for {image.width}x{image.height} RGBA"
        )
    rgba = Image.frombytes("RGBA", (image.width, image.height), image.pixels)
    background = Image.new("RGB", rgba.size, (255, 255, 255))
    background.paste(rgba, mask=rgba.getchannel("A"))
    return background


def encode_jpeg(rgb: Image.Image, quality: float) -> bytes:
    buf = io.BytesIO()
    # Pillow takes an integer quality in 1..95
    pil_quality = max(1, min(95, int(round(quality * 100))))
    rgb.save(buf, format="JPEG", quality=pil_quality, optimize=True)
    return buf.getvalue()


def compress_raster(
    image: RasterImage, options: CompressOptions | None = None
) -> EncodedImage:
    """Encode ``image`` as JPEG, lowering quality until it fits the budget.

    At least one encode is always performed. If the floor quality is reached
    while still over budget, the last encoding is returned and a
    ``BudgetNotMetWarning`` is issued.
    """
    opts = options or CompressOptions()
    rgb = raster_to_rgb(image)

    quality = opts.start_quality
    data = encode_jpeg(rgb, quality)
    attempts = 1
    while len(data) > opts.budget and quality > opts.min_quality:
        # Rounded to keep 0.8 - 5 * 0.1 from landing just above the floor
        quality = max(opts.min_quality, round(quality - opts.step, 6))
        data = encode_jpeg(rgb, quality)
        attempts += 1
        logger.debug("Re-encoded at quality %.2f: %d bytes", quality, len(data))

    encoded = EncodedImage(data=data, mime_type=JPEG_MIME, quality=quality)
    log_compression_result(encoded, attempts, opts.budget)
    if encoded.size > opts.budget:
        warnings.warn(
            BudgetNotMetWarning(encoded.size, opts.budget, quality), stacklevel=2
        )
    return encoded


__all__ = ["JPEG_MIME", "compress_raster", "encode_jpeg", "raster_to_rgb"]
