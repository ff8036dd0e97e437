from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any, Protocol

# Opaque handle owned by the rendering surface (e.g. a Playwright ElementHandle)
LayoutNode = Any

StylePatch = Mapping[str, str]
UndoFn = Callable[[], None]


@dataclass(frozen=True)
class LayoutMetrics:
    """Measured geometry of a layout node, in CSS pixels.

    - width/height: bounding box of the node at measurement time
    - scroll_height: full content height including overflow
    """

    width: float
    height: float
    scroll_height: float


@dataclass(frozen=True)
class RasterImage:
    width: int
    height: int
    pixels: bytes  # RGBA, row-major, width * height * 4 bytes


@dataclass(frozen=True)
class EncodedImage:
    data: bytes
    mime_type: str
    quality: float

    @property
    def size(self) -> int:
        return len(self.data)


@dataclass(frozen=True)
class InteractiveRegion:
    """A link fragment rectangle relative to the captured node's top-left."""

    url: str
    x: float
    y: float
    w: float
    h: float

    @property
    def is_empty(self) -> bool:
        return self.w <= 0 or self.h <= 0


@dataclass(frozen=True)
class PageSize:
    width: float
    height: float


@dataclass(frozen=True)
class Placement:
    x: float
    y: float
    width: float
    height: float
    scale: float


@dataclass(frozen=True)
class PlacedRegion:
    url: str
    x: float
    y: float
    w: float
    h: float

    @property
    def rect(self) -> tuple[float, float, float, float]:
        return (self.x, self.y, self.x + self.w, self.y + self.h)


class RenderingSurface(Protocol):
    """Capability interface over the engine that lays out the resume."""

    def find_root(self, selector: str) -> LayoutNode | None:  # pragma: no cover - typing
        ...

    def measure(self, node: LayoutNode) -> LayoutMetrics:  # pragma: no cover - typing
        ...

    def computed_font_size(self, node: LayoutNode) -> float:  # pragma: no cover - typing
        ...

    def mutate_style(
        self, node: LayoutNode, patch: StylePatch
    ) -> UndoFn:  # pragma: no cover - typing
        ...

    def link_regions(
        self, node: LayoutNode
    ) -> list[InteractiveRegion]:  # pragma: no cover - typing
        ...

    def text_content(self, node: LayoutNode) -> str:  # pragma: no cover - typing
        ...

    def capture(self, node: LayoutNode, scale: float) -> RasterImage:  # pragma: no cover - typing
        ...


ProgressCallback = Callable[[str, dict[str, int | str]], None] | None

PT_PER_MM = 72.0 / 25.4
