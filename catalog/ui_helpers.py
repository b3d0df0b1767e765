import json
import os
from typing import List, Optional

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from catalog.book import Book
from catalog.config import settings

# Environment variable to control CLI output mode
# Allowed values: 'plain', 'json', 'rich'
OUTPUT_MODE_ENV = "CATALOG_OUTPUT"
OUTPUT_MODES = {"plain", "json", "rich"}

console = Console()


def set_output_mode(mode: str) -> None:
    mode = (mode or "").lower().strip()
    if mode in OUTPUT_MODES:
        os.environ[OUTPUT_MODE_ENV] = mode


def get_output_mode() -> str:
    mode = os.environ.get(OUTPUT_MODE_ENV, settings.output_mode).lower()
    return mode if mode in OUTPUT_MODES else "plain"


def print_book_list(books: List[Book]) -> None:
    """Print the catalog in the current output mode.
    - plain: one 'ID: .., Title: .., ...' line per book, or 'No books available.'
    - json: JSON array of book dicts
    - rich: Rich table
    """
    mode = get_output_mode()

    if not books:
        console.print("No books available.")
        return

    if mode == "json":
        print(json.dumps([b.to_dict() for b in books], ensure_ascii=False))
    elif mode == "rich":
        table = Table(title="📚 Books", show_lines=True, header_style="bold cyan")
        table.add_column("ID", style="cyan", justify="right")
        table.add_column("Title", style="white")
        table.add_column("Author", style="white")
        table.add_column("ISBN", style="magenta", no_wrap=True)
        table.add_column("Year", justify="right")
        for b in books:
            table.add_row(str(b.id), escape(b.title), escape(b.author), b.isbn, str(b.year))
        console.print(table)
        console.print(f"[dim]📊 {len(books)} book(s)[/]")
    else:
        for b in books:
            print(f"ID: {b.id}, Title: {b.title}, Author: {b.author}, ISBN: {b.isbn}, Year: {b.year}")


def print_book_details(book: Optional[Book]) -> None:
    mode = get_output_mode()

    if book is None:
        console.print("[yellow]Book not found.[/]")
        return

    if mode == "json":
        print(json.dumps(book.to_dict(), ensure_ascii=False))
    elif mode == "rich":
        console.print(Panel.fit(
            f"[bold]ID:[/] {book.id}\n"
            f"[bold]Title:[/] {escape(book.title)}\n"
            f"[bold]Author:[/] {escape(book.author)}\n"
            f"[bold]ISBN:[/] {book.isbn}\n"
            f"[bold]Year:[/] {book.year}",
            title="🔍 Book Details",
            border_style="green",
        ))
    else:
        print(f"Book {book.id}: {book}")
        print(f"Title: {book.title}")
        print(f"Author: {book.author}")
        print(f"ISBN: {book.isbn}")
        print(f"Year: {book.year}")


def print_success(message: str) -> None:
    console.print(f"[green]✅ {escape(message)}[/]")


def print_error(message: str) -> None:
    console.print(f"[bold red]Error:[/] {escape(message)}")
