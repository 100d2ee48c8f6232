#!/usr/bin/env python3
"""
Resume Store Management CLI

Commands:
    list   - List saved resumes, most recently updated first
    show   - Print a saved resume's text
    update - Replace a saved resume's text and/or title
    delete - Remove a saved resume

Examples:\n

    manage_resumes.py list

    manage_resumes.py show 3f2a...

    manage_resumes.py update 3f2a... --content edited.md --title "Jane Doe - Backend"

    manage_resumes.py delete 3f2a... --yes
"""

from pathlib import Path
from typing import Optional

import typer
from typing_extensions import Annotated

from quire.utils.pdf_processing import read_upload_text
from quire.utils.resume_store import ResumeStore
from quire.utils.timestamp import format_timestamp

app = typer.Typer(
    help="List, show, update, and delete saved resumes",
    add_completion=False,
    invoke_without_command=True,
)


def _not_found(resume_id: str) -> None:
    typer.secho(f"Error: no resume with id {resume_id}\n", fg=typer.colors.RED, err=True)
    raise typer.Exit(code=1)


@app.callback()
def main(ctx: typer.Context):
    """Show help by default when no command is provided."""
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


@app.command("list")
def list_command():
    """List saved resumes, most recently updated first."""
    records = ResumeStore().list()
    if not records:
        typer.echo("No saved resumes.")
        raise typer.Exit(code=0)

    typer.secho(f"\n{len(records)} saved resumes", fg=typer.colors.BLUE, bold=True)
    for record in records:
        updated = format_timestamp(record.updated_at, relative=True)
        typer.echo(f"  {record.resume_id}  {record.template:<8} {updated:>10}  {record.title}")
    typer.echo("")


@app.command("show")
def show_command(resume_id: Annotated[str, typer.Argument(help="Resume id")]):
    """Print a saved resume's text."""
    record = ResumeStore().get(resume_id)
    if record is None:
        _not_found(resume_id)

    typer.secho(f"{record.title} ({record.template})", fg=typer.colors.BLUE, bold=True)
    typer.echo(f"Updated: {format_timestamp(record.updated_at)}\n")
    typer.echo(record.content)


@app.command("update")
def update_command(
    resume_id: Annotated[str, typer.Argument(help="Resume id")],
    content: Annotated[
        Optional[Path], typer.Option("--content", "-c", help="File with the new resume text")
    ] = None,
    title: Annotated[Optional[str], typer.Option("--title", help="New title")] = None,
):
    """
    Replace a saved resume's text and/or title.

    Examples:\n

        $ manage_resumes.py update 3f2a... -c enhanced.md
    """
    if content is None and title is None:
        typer.secho(
            "Error: nothing to update (use --content or --title)\n", fg=typer.colors.RED, err=True
        )
        raise typer.Exit(code=1)

    text = None
    if content is not None:
        try:
            text = read_upload_text(content)
        except FileNotFoundError as e:
            typer.secho(f"Error: {e}\n", fg=typer.colors.RED, err=True)
            raise typer.Exit(code=1)

    record = ResumeStore().update(resume_id, content=text, title=title)
    if record is None:
        _not_found(resume_id)

    typer.secho("✓ Resume updated", fg=typer.colors.GREEN, bold=True)
    typer.echo(f"  {record.title} ({format_timestamp(record.updated_at)})")


@app.command("delete")
def delete_command(
    resume_id: Annotated[str, typer.Argument(help="Resume id")],
    yes: Annotated[bool, typer.Option("--yes", "-y", help="Skip confirmation")] = False,
):
    """Remove a saved resume."""
    if not yes:
        typer.confirm(f"Delete resume {resume_id}?", abort=True)

    if not ResumeStore().delete(resume_id):
        _not_found(resume_id)

    typer.secho("✓ Resume deleted", fg=typer.colors.GREEN, bold=True)


if __name__ == "__main__":
    app()
