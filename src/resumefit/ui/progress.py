"""Rich progress display driven by export pipeline events."""

from __future__ import annotations

from rich.console import Console
from rich.progress import (
    BarColumn,
    Progress,
    SpinnerColumn,
    TaskID,
    TextColumn,
    TimeElapsedColumn,
)

# Events that complete one pipeline step, with the label shown afterwards
_STEP_EVENTS: dict[str, str] = {
    "fit:done": "Fitted layout (font {font_size})",
    "capture:done": "Captured {width}x{height} raster, {links} link fragment(s)",
    "compress:done": "Compressed to {bytes} bytes (quality {quality})",
    "export:finalized": "Wrote PDF ({bytes} bytes, {links} hotspot(s))",
}


class ProgressReporter:
    def __init__(self, console: Console | None = None) -> None:
        self.progress = Progress(
            SpinnerColumn(),
            TextColumn("{task.description}"),
            BarColumn(),
            TimeElapsedColumn(),
            console=console,
        )
        self._tasks: dict[str, TaskID] = {}
        self._totals: dict[str, int] = {}

    def __enter__(self) -> ProgressReporter:
        self.progress.start()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.progress.stop()

    def add_step(self, description: str, total: int | None = None) -> TaskID:
        return self.progress.add_task(description, total=total)

    def finish_task(self, task_id: TaskID) -> None:
        task = self.progress.tasks[self.progress.task_ids.index(task_id)]
        if task.total is not None:
            self.progress.update(task_id, completed=task.total)
        self.progress.remove_task(task_id)

    def emit(self, event: str, payload: dict[str, int | str]) -> None:
        if event == "export:start":
            total = len(_STEP_EVENTS)
            self._tasks["export"] = self.add_step(
                f"Exporting {payload.get('selector', 'resume')}…", total=total
            )
            self._totals["export"] = total
            return

        task_id = self._tasks.get("export")
        label = _STEP_EVENTS.get(event)
        if task_id is None or label is None:
            return
        try:
            description = label.format(**payload)
        except (KeyError, IndexError):
            description = event
        self.progress.update(task_id, advance=1, description=description)
        if event == "export:finalized":
            self.progress.console.print(f"✅ {description}")
            self.finish_task(task_id)
            del self._tasks["export"]
            self._totals.pop("export", None)


__all__ = ["ProgressReporter"]
