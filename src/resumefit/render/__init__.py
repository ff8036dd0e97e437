from __future__ import annotations

__all__ = [
    "OutputPage",
    "TextLayer",
    "build_text_layer",
    "compose_page",
    "compress_raster",
    "embed_text_layer",
    "project_regions",
]

# Re-export primary functions from submodules (explicit alias)
from .compose import compose_page as compose_page
from .compress import compress_raster as compress_raster
from .page import OutputPage as OutputPage
from .regions import project_regions as project_regions
from .text_layer import TextLayer as TextLayer
from .text_layer import build_text_layer as build_text_layer
from .text_layer import embed_text_layer as embed_text_layer
