#!/usr/bin/env python3
"""
Resume Generation CLI

Writes resume text with the generation context and optionally saves it to the resume store.

Commands:
    generate - Write a resume from career fields
    enhance  - Improve an existing resume (text or PDF upload)

Examples:\n

    generate_resume.py generate --name "Jane Doe" --experience "Acme Corp, 2019-2024"

    generate_resume.py generate --name "Jane Doe" --tone creative --save --template modern

    generate_resume.py enhance old_resume.pdf -o enhanced.md
"""

import os
from pathlib import Path
from typing import Optional

import typer
from dotenv import load_dotenv
from typing_extensions import Annotated

from quire.contexts.generation import (
    CareerProfile,
    GenerationError,
    ResumeGenerator,
    Tone,
    resolve_tone,
)
from quire.contexts.generation.logger import setup_generation_logger
from quire.contexts.templating import StyleConfigError, Template, coerce_enum
from quire.utils.pdf_processing import read_upload_text
from quire.utils.resume_store import ResumeStore
from quire.utils.timestamp import now

load_dotenv()
LOGS_PATH = Path(os.getenv("LOGS_PATH", "outs/logs"))

app = typer.Typer(
    help="Generate or enhance resume text with an LLM",
    add_completion=False,
    invoke_without_command=True,
)


@app.callback()
def main(ctx: typer.Context):
    """Show help by default when no command is provided."""
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


def _check_options(template: str, tone: str) -> tuple[Template, Tone]:
    """Validate template and tone before any provider request is made."""
    try:
        return coerce_enum(Template, template, "template"), resolve_tone(tone)
    except (StyleConfigError, GenerationError) as e:
        typer.secho(f"Error: {e}\n", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)


def _make_generator() -> ResumeGenerator:
    log_dir = LOGS_PATH / f"generate_{now()}"
    try:
        generator = ResumeGenerator()
    except (ValueError, ImportError) as e:
        typer.secho(f"Error: {e}\n", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)
    setup_generation_logger(log_dir, provider=generator.provider.name)
    return generator


def _finish(
    text: str, output: Optional[Path], save: bool, title: str, template: Template
) -> None:
    """Write, store, or print generated text."""
    if output is not None:
        output.write_text(text + "\n", encoding="utf-8")
        typer.echo(f"  Output: {output}")

    if save:
        record = ResumeStore().save(title=title, content=text, template=template.value)
        typer.echo(f"  Saved as: {record.resume_id}")

    if output is None and not save:
        typer.echo("")
        typer.echo(text)


@app.command("generate")
def generate_command(
    name: Annotated[str, typer.Option("--name", help="Full name")],
    email: Annotated[str, typer.Option("--email")] = "",
    phone: Annotated[str, typer.Option("--phone")] = "",
    summary: Annotated[str, typer.Option("--summary", help="Professional summary")] = "",
    experience: Annotated[str, typer.Option("--experience", help="Work experience")] = "",
    education: Annotated[str, typer.Option("--education")] = "",
    skills: Annotated[str, typer.Option("--skills")] = "",
    tone: Annotated[
        str, typer.Option("--tone", help="professional, creative, or simple")
    ] = "professional",
    output: Annotated[Optional[Path], typer.Option("--output", "-o")] = None,
    save: Annotated[bool, typer.Option("--save", help="Save to the resume store")] = False,
    template: Annotated[str, typer.Option("--template", "-t")] = "classic",
):
    """
    Write a resume from career fields.

    Examples:\n

        $ generate_resume.py generate --name "Jane Doe" --skills "Python, Go" -o jane.md
    """
    template_choice, tone_choice = _check_options(template, tone)
    profile = CareerProfile(
        name=name,
        email=email,
        phone=phone,
        summary=summary,
        experience=experience,
        education=education,
        skills=skills,
    )
    generator = _make_generator()

    try:
        text = generator.generate(profile, tone=tone_choice)
    except GenerationError as e:
        typer.secho(f"✗ Generation failed: {e.message}", fg=typer.colors.RED, bold=True)
        raise typer.Exit(code=1)

    typer.secho("✓ Resume generated", fg=typer.colors.GREEN, bold=True)
    _finish(text, output, save, title=name, template=template_choice)


@app.command("enhance")
def enhance_command(
    source: Annotated[Path, typer.Argument(help="Existing resume (.pdf or text)")],
    tone: Annotated[str, typer.Option("--tone")] = "professional",
    output: Annotated[Optional[Path], typer.Option("--output", "-o")] = None,
    save: Annotated[bool, typer.Option("--save", help="Save to the resume store")] = False,
    template: Annotated[str, typer.Option("--template", "-t")] = "classic",
):
    """
    Improve an existing resume.

    Examples:\n

        $ generate_resume.py enhance old_resume.pdf --save -t modern
    """
    template_choice, tone_choice = _check_options(template, tone)
    try:
        text = read_upload_text(source)
    except FileNotFoundError as e:
        typer.secho(f"Error: {e}\n", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    generator = _make_generator()

    try:
        enhanced = generator.enhance(text, tone=tone_choice)
    except GenerationError as e:
        typer.secho(f"✗ Enhancement failed: {e.message}", fg=typer.colors.RED, bold=True)
        raise typer.Exit(code=1)

    typer.secho("✓ Resume enhanced", fg=typer.colors.GREEN, bold=True)
    _finish(enhanced, output, save, title=source.stem, template=template_choice)


if __name__ == "__main__":
    app()
