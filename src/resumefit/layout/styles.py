"""Scoped style mutation for the live layout node.

All style changes made during an export go through a ``StyleScope`` so the
original inline values are restored on every exit path, including errors.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager

from resumefit.types import LayoutMetrics, LayoutNode, RenderingSurface, StylePatch, UndoFn

logger = logging.getLogger(__name__)


class StyleScope:
    """Tracks the undo callbacks for every mutation applied to one node."""

    def __init__(self, surface: RenderingSurface, node: LayoutNode) -> None:
        self.surface = surface
        self.node = node
        self._undo: list[UndoFn] = []

    def apply(self, patch: StylePatch) -> None:
        if not patch:
            return
        undo = self.surface.mutate_style(self.node, patch)
        self._undo.append(undo)

    def measure(self) -> LayoutMetrics:
        return self.surface.measure(self.node)

    def computed_font_size(self) -> float:
        return self.surface.computed_font_size(self.node)

    @property
    def mutation_count(self) -> int:
        return len(self._undo)

    def restore(self) -> None:
        """Undo all mutations in reverse order.

        Every undo is attempted even if an earlier one fails; the first
        failure is re-raised afterwards.
        """
        first_error: Exception | None = None
        while self._undo:
            undo = self._undo.pop()
            try:
                undo()
            except Exception as exc:
                logger.error("Failed to restore layout style: %s", exc)
                if first_error is None:
                    first_error = exc
        if first_error is not None:
            raise first_error


@contextmanager
def scoped_styles(
    surface: RenderingSurface, node: LayoutNode, patch: StylePatch | None = None
) -> Iterator[StyleScope]:
    """Apply ``patch`` to ``node`` for the duration of the block.

    Further mutations made through the yielded scope are restored together
    with the initial patch when the block exits. When the block itself fails,
    that error propagates and a failed restore is only logged.
    """
    scope = StyleScope(surface, node)
    try:
        if patch:
            scope.apply(patch)
        yield scope
    except BaseException:
        logger.debug("Restoring %d style mutation(s) after error", scope.mutation_count)
        try:
            scope.restore()
        except Exception as restore_exc:
            logger.error("Style restore also failed: %s", restore_exc)
        raise
    logger.debug("Restoring %d style mutation(s)", scope.mutation_count)
    scope.restore()


__all__ = ["StyleScope", "scoped_styles"]
