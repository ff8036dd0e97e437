"""RenderingSurface backed by headless Chromium through Playwright.

Playwright is imported lazily so the rest of the package (and its tests) work
without a browser installed.
"""

from __future__ import annotations

import io
import logging
from contextlib import suppress
from typing import Any

from PIL import Image

from resumefit.preview.html import A4_HEIGHT_PX, A4_WIDTH_PX
from resumefit.types import InteractiveRegion, LayoutMetrics, RasterImage, StylePatch, UndoFn

logger = logging.getLogger(__name__)

_MEASURE_JS = """
el => {
  const r = el.getBoundingClientRect();
  return { width: r.width, height: r.height, scrollHeight: el.scrollHeight };
}
"""

_APPLY_STYLE_JS = """
(el, patch) => {
  const saved = {};
  for (const [prop, value] of Object.entries(patch)) {
    saved[prop] = [el.style.getPropertyValue(prop), el.style.getPropertyPriority(prop)];
    el.style.setProperty(prop, value);
  }
  return saved;
}
"""

_RESTORE_STYLE_JS = """
(el, saved) => {
  for (const [prop, [value, priority]] of Object.entries(saved)) {
    if (value) {
      el.style.setProperty(prop, value, priority);
    } else {
      el.style.removeProperty(prop);
    }
  }
}
"""

# One rectangle per client rect so wrapped links yield one region per line
_LINKS_JS = """
el => {
  const origin = el.getBoundingClientRect();
  const out = [];
  for (const a of el.querySelectorAll("a[href]")) {
    for (const r of a.getClientRects()) {
      out.push({
        url: a.href,
        x: r.left - origin.left,
        y: r.top - origin.top,
        w: r.width,
        h: r.height,
      });
    }
  }
  return out;
}
"""


def parse_css_px(value: str) -> float:
    text = (value or "").strip().lower()
    if text.endswith("px"):
        text = text[:-2]
    try:
        return float(text)
    except ValueError as exc:
        raise ValueError(f"Cannot parse CSS pixel value {value!r}") from exc


class PlaywrightSurface:
    """Loads resume HTML into a headless page and exposes it as a surface.

    Use as a context manager; the browser is closed on exit.
    """

    def __init__(
        self,
        html: str,
        *,
        device_scale: float = 2.0,
        viewport: tuple[int, int] = (A4_WIDTH_PX + 100, A4_HEIGHT_PX),
    ) -> None:
        self.html = html
        self.device_scale = device_scale
        self.viewport = viewport
        self._playwright: Any = None
        self._browser: Any = None
        self._page: Any = None

    def __enter__(self) -> PlaywrightSurface:
        from playwright.sync_api import sync_playwright

        self._playwright = sync_playwright().start()
        try:
            self._browser = self._playwright.chromium.launch(headless=True)
            context = self._browser.new_context(
                viewport={"width": self.viewport[0], "height": self.viewport[1]},
                device_scale_factor=self.device_scale,
            )
            self._page = context.new_page()
            self._page.set_content(self.html, wait_until="load")
        except Exception:
            self.close()
            raise
        logger.debug("Loaded resume HTML into headless Chromium (scale %g)", self.device_scale)
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        if self._browser is not None:
            with suppress(Exception):
                self._browser.close()
            self._browser = None
        if self._playwright is not None:
            with suppress(Exception):
                self._playwright.stop()
            self._playwright = None
        self._page = None

    @property
    def page(self) -> Any:
        if self._page is None:
            raise RuntimeError("PlaywrightSurface is not open; use it as a context manager")
        return self._page

    def find_root(self, selector: str) -> Any | None:
        return self.page.query_selector(selector)

    def measure(self, node: Any) -> LayoutMetrics:
        data = node.evaluate(_MEASURE_JS)
        return LayoutMetrics(
            width=float(data["width"]),
            height=float(data["height"]),
            scroll_height=float(data["scrollHeight"]),
        )

    def computed_font_size(self, node: Any) -> float:
        return parse_css_px(node.evaluate("el => getComputedStyle(el).fontSize"))

    def mutate_style(self, node: Any, patch: StylePatch) -> UndoFn:
        saved = node.evaluate(_APPLY_STYLE_JS, dict(patch))

        def undo() -> None:
            node.evaluate(_RESTORE_STYLE_JS, saved)

        return undo

    def link_regions(self, node: Any) -> list[InteractiveRegion]:
        return [
            InteractiveRegion(
                url=str(item["url"]),
                x=float(item["x"]),
                y=float(item["y"]),
                w=float(item["w"]),
                h=float(item["h"]),
            )
            for item in node.evaluate(_LINKS_JS)
        ]

    def text_content(self, node: Any) -> str:
        return str(node.evaluate("el => el.innerText || ''"))

    def capture(self, node: Any, scale: float) -> RasterImage:
        png = node.screenshot(type="png", scale="device", animations="disabled")
        img = Image.open(io.BytesIO(png)).convert("RGBA")
        if abs(scale - self.device_scale) > 1e-9:
            factor = scale / self.device_scale
            size = (max(1, round(img.width * factor)), max(1, round(img.height * factor)))
            logger.debug("Resampling capture from %s to %s", img.size, size)
            img = img.resize(size, Image.Resampling.LANCZOS)
        return RasterImage(width=img.width, height=img.height, pixels=img.tobytes())


__all__ = ["PlaywrightSurface", "parse_css_px"]
