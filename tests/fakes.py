"""In-memory RenderingSurface used by the tests.

The fake node's content height scales linearly with its font size, which is
enough to drive the auto-fit search deterministically.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from resumefit.types import InteractiveRegion, LayoutMetrics, RasterImage


@dataclass
class FakeNode:
    width: float = 800.0
    base_height: float = 1000.0
    base_font: float = 14.0
    style: dict[str, str] = field(default_factory=dict)
    text: str = ""
    regions: list[InteractiveRegion] = field(default_factory=list)

    @property
    def font_size(self) -> float:
        value = self.style.get("font-size")
        if value:
            return float(value.removesuffix("px"))
        return self.base_font

    @property
    def scroll_height(self) -> float:
        return self.base_height * self.font_size / self.base_font


class FakeSurface:
    def __init__(
        self,
        node: FakeNode | None = None,
        *,
        capture_error: Exception | None = None,
        pixel: bytes = b"\xff\xff\xff\xff",
    ) -> None:
        self.node = node
        self.capture_error = capture_error
        self.pixel = pixel
        self.mutations: list[dict[str, str]] = []
        self.events: list[tuple[str, dict[str, str]]] = []

    # context manager support so the fake can stand in for PlaywrightSurface
    def __enter__(self) -> FakeSurface:
        return self

    def __exit__(self, *exc_info: object) -> None:
        return None

    def find_root(self, selector: str) -> FakeNode | None:
        return self.node

    def measure(self, node: FakeNode) -> LayoutMetrics:
        return LayoutMetrics(width=node.width, height=node.scroll_height, scroll_height=node.scroll_height)

    def computed_font_size(self, node: FakeNode) -> float:
        return node.font_size

    def mutate_style(self, node: FakeNode, patch: Any) -> Any:
        saved = {prop: node.style.get(prop) for prop in patch}
        node.style.update(patch)
        self.mutations.append(dict(patch))

        def undo() -> None:
            for prop, value in saved.items():
                if value is None:
                    node.style.pop(prop, None)
                else:
                    node.style[prop] = value

        return undo

    def link_regions(self, node: FakeNode) -> list[InteractiveRegion]:
        self.events.append(("link_regions", dict(node.style)))
        return list(node.regions)

    def text_content(self, node: FakeNode) -> str:
        return node.text

    def capture(self, node: FakeNode, scale: float) -> RasterImage:
        self.events.append(("capture", dict(node.style)))
        if self.capture_error is not None:
            raise self.capture_error
        width = max(1, round(node.width * scale))
        height = max(1, round(node.scroll_height * scale))
        return RasterImage(width=width, height=height, pixels=self.pixel * (width * height))
