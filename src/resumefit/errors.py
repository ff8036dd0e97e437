"""Exception and warning types raised by the export pipeline."""

from __future__ import annotations


class ResumeFitError(Exception):
    """Base class for export pipeline errors."""


class PreviewNotFoundError(ResumeFitError):
    """The resume root node could not be located; nothing was mutated."""

    def __init__(self, selector: str) -> None:
        self.selector = selector
        super().__init__(f"Resume preview not found (selector {selector!r})")


class ExportFailedError(ResumeFitError):
    """A capture, encode, compose or write step failed.

    Raised only after the layout styles have been restored.
    """

    def __init__(self, stage: str, cause: Exception | None = None) -> None:
        self.stage = stage
        self.cause = cause
        message = f"Export failed during {stage}"
        if cause is not None:
            message += f": {cause}"
        super().__init__(message)


class BudgetNotMetWarning(UserWarning):
    """The compressor hit its quality floor while still over the byte budget."""

    def __init__(self, size: int, budget: int, quality: float) -> None:
        self.size = size
        self.budget = budget
        self.quality = quality
        super().__init__(
            f"Encoded image is {size} bytes, over budget {budget} at floor quality {quality:.2f}"
        )


__all__ = [
    "BudgetNotMetWarning",
    "ExportFailedError",
    "PreviewNotFoundError",
    "ResumeFitError",
]
