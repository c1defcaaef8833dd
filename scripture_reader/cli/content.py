"""CLI commands for browsing the content tree."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from scripture_reader.apps import commands
from scripture_reader.bootstrap import build_default_service_container
from scripture_reader.core.logging import send_console_logs_to_stderr
from scripture_reader.services import runtime

app = typer.Typer(
    name="scripture-reader",
    help="Browse languages, translations, books and chapters on disk",
    no_args_is_help=True,
)
console = Console()


@app.callback()
def configure(
    content_root: Optional[Path] = typer.Option(
        None,
        "--content-root",
        "-r",
        help="Content directory to read instead of the configured execution mode",
    ),
) -> None:
    """Register the service container used by every command."""
    send_console_logs_to_stderr()
    runtime.set_services(build_default_service_container(content_root=content_root))


def _unwrap(result: commands.CommandResult):  # type: ignore[no-untyped-def]
    if not result.ok:
        console.print(f"[red]Error:[/red] {result.error}")
        raise typer.Exit(1)
    return result.data


@app.command("languages")
def list_languages() -> None:
    """List languages and their translations."""
    languages = _unwrap(commands.get_translations_manifest())

    if not languages:
        console.print("[dim]No languages found.[/dim]")
        return

    table = Table(title="Translations")
    table.add_column("Language", style="cyan")
    table.add_column("Code")
    table.add_column("Translation")
    table.add_column("ID")
    table.add_column("Year")
    table.add_column("Folder")

    for language in languages:
        for translation in language.translations:
            table.add_row(
                language.name,
                language.code,
                translation.name,
                translation.id,
                str(translation.year) if translation.year is not None else "-",
                translation.folder,
            )

    console.print(table)


@app.command("books")
def list_books(
    language_code: str = typer.Argument(..., help="Language code, e.g. eng"),
    translation_folder: str = typer.Argument(..., help="Translation folder, e.g. KJV"),
) -> None:
    """List the books of a translation."""
    books = _unwrap(commands.get_book_manifest(language_code, translation_folder))

    if not books:
        console.print("[dim]No books found.[/dim]")
        return

    table = Table(title=f"{language_code}/{translation_folder}")
    table.add_column("Abbr", style="cyan")
    table.add_column("Name")
    table.add_column("Chapters", justify="right")
    for book in books:
        table.add_row(book.abbr, book.name, str(book.chapters))

    console.print(table)


@app.command("chapter")
def show_chapter(
    language_code: str = typer.Argument(..., help="Language code, e.g. eng"),
    translation_folder: str = typer.Argument(..., help="Translation folder, e.g. KJV"),
    book_abbr: str = typer.Argument(..., help="Book abbreviation, e.g. gen"),
    chapter_number: int = typer.Argument(..., min=1, help="1-based chapter number"),
) -> None:
    """Print the verses of a chapter."""
    verses = _unwrap(
        commands.get_chapter_content(
            language_code, translation_folder, book_abbr, chapter_number
        )
    )

    table = Table(title=f"{book_abbr} {chapter_number}", show_header=False)
    table.add_column("Verse", style="cyan", justify="right")
    table.add_column("Text")
    for verse in verses:
        table.add_row(verse.verse, verse.text)

    console.print(table)


__all__ = ["app"]
