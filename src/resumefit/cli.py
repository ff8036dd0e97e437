"""CLI interface for resumefit."""

import logging
from pathlib import Path
from typing import Annotated

import typer

from resumefit import __version__
from resumefit.errors import ExportFailedError, PreviewNotFoundError
from resumefit.export import export_resume
from resumefit.model.export_options import A4, ExportOptions
from resumefit.preview.html import render_preview_html, write_preview_html
from resumefit.preview.resume import load_resume
from resumefit.ui.progress import ProgressReporter

app = typer.Typer(
    name="resumefit",
    help="Export a resume layout to a single-page PDF with clickable links and searchable text.",
    no_args_is_help=True,
)


def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.WARNING
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
    logging.basicConfig(level=level, handlers=[handler], force=True)


ResumeArg = Annotated[
    Path,
    typer.Argument(
        help="Path to resume JSON (name, email, skills, experience, ...)",
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
    ),
]


@app.command()
def export(
    resume: ResumeArg,
    out: Annotated[
        Path,
        typer.Option("--out", "-o", help="Output PDF path (default: Resume.pdf)"),
    ] = Path("Resume.pdf"),
    page_width: Annotated[
        float, typer.Option("--page-width", help="Page width in mm (default: A4)")
    ] = A4.width,
    page_height: Annotated[
        float, typer.Option("--page-height", help="Page height in mm (default: A4)")
    ] = A4.height,
    margin: Annotated[float, typer.Option("--margin", help="Page margin in mm")] = 10.0,
    target_height: Annotated[
        float,
        typer.Option("--target-height", help="Layout height in CSS px the font is fitted to"),
    ] = 1120.0,
    capture_scale: Annotated[
        float, typer.Option("--capture-scale", help="Device scale factor for the raster")
    ] = 2.0,
    budget: Annotated[
        int, typer.Option("--budget", help="Maximum embedded image size in bytes")
    ] = 1_000_000,
    min_quality: Annotated[
        float, typer.Option("--min-quality", help="Lowest JPEG quality to try (0-1)")
    ] = 0.3,
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Enable debug logging")
    ] = False,
) -> None:
    """
    Render a resume and export it as a one-page PDF.

    Examples:

        # Basic export
        resumefit export resume.json

        # US Letter with a tighter image budget
        resumefit export resume.json -o cv.pdf --page-width 215.9 --page-height 279.4 \\
            --budget 500000
    """
    _setup_logging(verbose)
    try:
        options = ExportOptions.from_cli(
            page_width=page_width,
            page_height=page_height,
            margin=margin,
            target_height=target_height,
            capture_scale=capture_scale,
            budget=budget,
            min_quality=min_quality,
        )
        data = load_resume(resume)
    except ValueError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(1) from exc

    typer.echo(f"📄 Resume: {resume}")
    typer.echo(f"📁 Output: {out}")
    typer.echo(f"📐 Page: {page_width:g} x {page_height:g} mm, margin {margin:g} mm")

    from resumefit.surface.playwright_surface import PlaywrightSurface

    try:
        with PlaywrightSurface(
            render_preview_html(data), device_scale=capture_scale
        ) as surface, ProgressReporter() as pr:
            result = export_resume(surface, options, on_progress=pr.emit, title=data.name or None)
    except PreviewNotFoundError as exc:
        typer.echo(f"\n❌ {exc}", err=True)
        raise typer.Exit(1) from exc
    except ExportFailedError as exc:
        typer.echo(f"\n❌ Error generating PDF: {exc}", err=True)
        raise typer.Exit(1) from exc
    except ModuleNotFoundError as exc:  # pragma: no cover - environment dependent
        typer.echo("\n⚠️  Playwright not installed; run: pip install playwright", err=True)
        raise typer.Exit(1) from exc
    except Exception as exc:  # pragma: no cover - browser launch/runtime errors
        typer.echo(f"\n⚠️  Rendering failed: {exc}", err=True)
        raise typer.Exit(1) from exc

    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_bytes(result.pdf)
    typer.echo(
        f"\n✅ Wrote {out} (font {result.font_size:g}px, "
        f"image quality {result.page.image.quality:.2f}, "
        f"{len(result.page.regions)} link(s))"
    )


@app.command()
def preview(
    resume: ResumeArg,
    out: Annotated[
        Path,
        typer.Option("--out", "-o", help="Output HTML path (default: preview.html)"),
    ] = Path("preview.html"),
) -> None:
    """Write the resume preview HTML without exporting."""
    try:
        data = load_resume(resume)
    except ValueError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(1) from exc
    write_preview_html(data, out)
    typer.echo(f"✅ Wrote preview to {out}")


@app.command()
def version() -> None:
    """Show version information."""
    typer.echo(f"resumefit version {__version__}")


def version_callback(value: bool) -> None:
    """Version callback for --version flag."""
    if value:
        typer.echo(f"resumefit version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit",
        ),
    ] = None,
) -> None:
    """
    resumefit - Export a resume to a single printable PDF page.

    The exported page carries three layers:
    - A compressed image of the rendered resume
    - Clickable link hotspots positioned over the image
    - An invisible text layer for applicant tracking systems

    For detailed usage, run: resumefit export --help
    """
    pass


if __name__ == "__main__":  # pragma: no cover - executed only via `python -m`
    app()
