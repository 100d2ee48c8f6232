#!/usr/bin/env python3
"""
Resume Rendering CLI

Renders resume text into preview HTML and exports it to PDF using the rendering context.

Commands:
    parse    - Show the parsed structure of a resume text file
    preview  - Write preview HTML for a resume
    export   - Export a resume to PDF through the hosted converter

Examples:\n

    render_resume.py parse resume.md                            # Show parsed sections

    render_resume.py preview resume.md --template modern        # Write preview HTML

    render_resume.py preview resume.md --primary red --font roboto

    render_resume.py export resume.md --title "Jane Doe"        # Export to PDF
"""

import json
import os
from pathlib import Path
from typing import Optional

import typer
from dotenv import load_dotenv
from typing_extensions import Annotated

from quire.contexts.rendering import RenderProfile, export_resume, preview_resume
from quire.contexts.rendering.logger import setup_rendering_logger
from quire.contexts.templating import (
    StyleConfigError,
    Template,
    coerce_enum,
    default_style,
    parse,
    resolve_color,
    resolve_font,
)
from quire.utils.timestamp import now

load_dotenv()
PROJECT_ROOT = Path(os.getenv("PROJECT_ROOT", Path.cwd()))
LOGS_PATH = Path(os.getenv("LOGS_PATH", "outs/logs"))


def display_path(path: Path) -> str:
    """Return path relative to PROJECT_ROOT for cleaner display."""
    try:
        return str(Path(path).resolve().relative_to(PROJECT_ROOT.resolve()))
    except ValueError:
        return str(path)


app = typer.Typer(
    help="Render resume text to preview HTML and export it to PDF",
    add_completion=False,
    invoke_without_command=True,
)

TemplateOption = Annotated[
    str, typer.Option("--template", "-t", help="Template: classic or modern")
]
PrimaryOption = Annotated[
    Optional[str], typer.Option("--primary", help="Primary color (palette name or color token)")
]
AccentOption = Annotated[
    Optional[str], typer.Option("--accent", help="Accent color (palette name or color token)")
]
FontOption = Annotated[
    Optional[str], typer.Option("--font", help="Font option name or font stack")
]
HeaderStyleOption = Annotated[
    Optional[str], typer.Option("--header-style", help="Header background: solid or gradient")
]


def _read_source(source: Path) -> str:
    if not source.exists():
        typer.secho(f"Error: file not found: {source}\n", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)
    return source.read_text(encoding="utf-8")


def _build_style(template: str, primary, accent, font, header_style):
    """Template default style with the user's overrides applied."""
    try:
        style = default_style(template)
        return style.with_overrides(
            primary_color=resolve_color(primary) if primary else None,
            accent_color=resolve_color(accent) if accent else None,
            font_family=resolve_font(font) if font else None,
            header_style=header_style,
        )
    except StyleConfigError as e:
        typer.secho(f"Error: {e}\n", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)


@app.callback()
def main(ctx: typer.Context):
    """Show help by default when no command is provided."""
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


@app.command("parse")
def parse_command(
    source: Annotated[Path, typer.Argument(help="Resume text file")],
    as_json: Annotated[bool, typer.Option("--json", help="Print the document as JSON")] = False,
):
    """
    Show how a resume text file is split into title and sections.

    Examples:\n

        $ render_resume.py parse resume.md

        $ render_resume.py parse resume.md --json
    """
    document = parse(_read_source(source))

    if as_json:
        typer.echo(json.dumps(document.to_dict(), indent=2))
        raise typer.Exit(code=0)

    typer.secho(f"\nTitle: {document.title or '(none)'}", fg=typer.colors.BLUE, bold=True)
    for section in document.sections:
        typer.echo(f"  {section.heading or '(untitled)'}: {len(section.lines)} lines")
    typer.echo("")


@app.command("preview")
def preview_command(
    source: Annotated[Path, typer.Argument(help="Resume text file")],
    output: Annotated[
        Optional[Path], typer.Option("--output", "-o", help="HTML output path")
    ] = None,
    template: TemplateOption = "classic",
    primary: PrimaryOption = None,
    accent: AccentOption = None,
    font: FontOption = None,
    header_style: HeaderStyleOption = None,
    plain: Annotated[
        bool, typer.Option("--plain", help="Keep **bold markers** as literal text")
    ] = False,
):
    """
    Write preview HTML for a resume.

    Examples:\n

        $ render_resume.py preview resume.md                        # resume.html next to source

        $ render_resume.py preview resume.md -t modern --header-style solid
    """
    text = _read_source(source)
    style = _build_style(template, primary, accent, font, header_style)
    profile = RenderProfile.PLAIN if plain else RenderProfile.EMPHASIS_AWARE

    html = preview_resume(text, template=template, style=style, profile=profile)

    if output is None:
        output = source.with_suffix(".html")
    output.write_text(html, encoding="utf-8")

    typer.secho("✓ Preview written", fg=typer.colors.GREEN, bold=True)
    typer.echo(f"  HTML: {display_path(output)}")


@app.command("export")
def export_command(
    source: Annotated[Path, typer.Argument(help="Resume text file")],
    title: Annotated[
        Optional[str], typer.Option("--title", help="Resume title (default: file name)")
    ] = None,
    output_dir: Annotated[
        Optional[Path], typer.Option("--output-dir", "-o", help="Directory for the PDF")
    ] = None,
    template: TemplateOption = "classic",
    primary: PrimaryOption = None,
    accent: AccentOption = None,
    font: FontOption = None,
    header_style: HeaderStyleOption = None,
    emphasis: Annotated[
        bool, typer.Option("--emphasis", help="Promote **bold** lines like the preview does")
    ] = False,
):
    """
    Export a resume to PDF through the hosted HTML-to-PDF converter.

    Requires PDFCO_API_KEY in the environment.

    Examples:\n

        $ render_resume.py export resume.md --title "Jane Doe"

        $ render_resume.py export resume.md -t modern --emphasis
    """
    text = _read_source(source)
    style = _build_style(template, primary, accent, font, header_style)
    profile = RenderProfile.EMPHASIS_AWARE if emphasis else RenderProfile.PLAIN
    title = title or source.stem

    try:
        template_name = coerce_enum(Template, template, "template").value
    except StyleConfigError as e:
        typer.secho(f"Error: {e}\n", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    log_dir = LOGS_PATH / f"render_{now()}"
    setup_rendering_logger(log_dir, template=template_name)

    typer.secho(f"\nExporting: {title}", fg=typer.colors.BLUE, bold=True)
    result = export_resume(
        text,
        title=title,
        template=template_name,
        style=style,
        profile=profile,
        output_dir=output_dir,
    )

    typer.echo("")
    if result.success:
        typer.secho("✓ Export succeeded", fg=typer.colors.GREEN, bold=True)
        typer.echo(f"  PDF: {display_path(result.pdf_path)}")
        if result.page_count is not None:
            typer.echo(f"  Pages: {result.page_count}")
    else:
        typer.secho("✗ Export failed", fg=typer.colors.RED, bold=True)
        for error in result.errors:
            typer.secho(f"  - {error}", fg=typer.colors.RED)

    typer.echo(f"  Log: {display_path(log_dir / 'render.log')}")
    typer.echo("")

    raise typer.Exit(code=0 if result.success else 1)


if __name__ == "__main__":
    app()
