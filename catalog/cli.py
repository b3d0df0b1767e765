from typing import Callable, Optional, Tuple

import typer
from rich import box
from rich.panel import Panel
from rich.prompt import Confirm, Prompt
from rich.table import Table

from catalog.book import Book
from catalog.config import configure_logging, settings
from catalog.errors import ValidationError
from catalog.prompts import prompt_book_id, prompt_isbn, prompt_text, prompt_year
from catalog.repository import InMemoryBookRepository
from catalog.service import BookService
from catalog.ui_helpers import (
    console,
    print_book_details,
    print_book_list,
    print_error,
    print_success,
    set_output_mode,
)
from catalog.validators import ISBNValidator


MENU_ITEMS = [
    ("1", "Add a new book", "➕"),
    ("2", "Update an existing book by ISBN or Id", "✏️"),
    ("3", "Delete a book by ISBN or Id", "🗑️"),
    ("4", "List all books", "📚"),
    ("5", "View details of a specific book by ISBN or Id", "🔎"),
    ("6", "Exit", "🚪"),
]

# --- Typer CLI Application ---
app = typer.Typer(help="Book catalog manager")


@app.callback(invoke_without_command=True)
def _global_options(
    ctx: typer.Context,
    output: Optional[str] = typer.Option(
        None,
        "--output",
        "-o",
        help="Output format: plain | json | rich (default: rich)",
    ),
    log_level: Optional[str] = typer.Option(None, "--log-level", help="Logging level, e.g. INFO or DEBUG"),
):
    """Open the interactive menu when no subcommand is given."""
    if output:
        set_output_mode(output)
    configure_logging(log_level)
    if ctx.invoked_subcommand is None:
        # One catalog per session
        run_menu(BookService(InMemoryBookRepository()))


@app.command("validate-isbn")
def cli_validate_isbn(isbn: str):
    """Check an ISBN against the accepted format."""
    if ISBNValidator.is_valid_isbn(isbn.strip()):
        print(f"Valid ISBN: {isbn}")
    else:
        print(f"Invalid ISBN: {isbn}")
        raise typer.Exit(code=1)


# ------------------------- Menu sections ------------------------- #
def select_book(service: BookService) -> Tuple[Optional[Book], str]:
    """Ask how to look the book up, then look it up. Returns the book (or None) and 'id' or 'isbn'."""
    console.print("Would you like to search for the book by ID or ISBN?")
    console.print("1. By ID")
    console.print("2. By ISBN")
    choice = Prompt.ask("Enter your choice", choices=["1", "2"], console=console)

    if choice == "1":
        book_id = prompt_book_id()
        return (service.get_book_by_id(book_id) if book_id is not None else None), "id"
    return service.get_book_by_isbn(prompt_isbn()), "isbn"


def add_book(service: BookService) -> None:
    try:
        book = Book(
            title=prompt_text("Enter Title"),
            author=prompt_text("Enter Author"),
            isbn=prompt_isbn(),
            year=prompt_year(),
        )
    except ValidationError as e:
        print_error(e.message)
        return

    result = service.add_book(book)
    if result.ok:
        print_success(f"Book added successfully with the ID: {result.value.id}")
    else:
        print_error(result.message)


def update_book(service: BookService) -> None:
    book, _ = select_book(service)
    if book is None:
        console.print("[yellow]Book not found.[/]")
        return

    console.print(f"Current ISBN: {book.isbn}")
    new_isbn = prompt_isbn(default=book.isbn)
    title = prompt_text("Enter new Title", default=book.title)
    author = prompt_text("Enter new Author", default=book.author)
    year = prompt_year(default=book.year)

    if new_isbn != book.isbn:
        changed = service.change_book_isbn(book.id, new_isbn)
        if not changed.ok:
            print_error(changed.message)
            return

    result = service.update_book(Book(title=title, author=author, isbn=new_isbn, year=year, id=book.id))
    if result.ok:
        print_success("Book updated successfully.")
    else:
        print_error(result.message)


def delete_book(service: BookService) -> None:
    book, selected_by = select_book(service)
    if book is None:
        console.print("[yellow]Book not found.[/]")
        return

    print_book_details(book)
    if not Confirm.ask("Are you sure you want to delete this book?", default=False, console=console):
        console.print("[blue]🚫 Deletion cancelled.[/]")
        return

    if selected_by == "id":
        result = service.delete_book_by_id(book.id)
    else:
        result = service.delete_book_by_isbn(book.isbn)

    if result.ok and result.value:
        print_success("Book deleted successfully.")
    else:
        print_error(result.message or "Book could not be deleted.")


def view_book(service: BookService) -> None:
    book, _ = select_book(service)
    print_book_details(book)


def list_books(service: BookService) -> None:
    print_book_list(service.get_all_books())


# ------------------------- Menu loop ------------------------- #
def run_section(title: str, action: Callable[[BookService], None], service: BookService) -> None:
    """Run ``action`` until the user declines another operation in this section."""
    while True:
        console.rule(title)
        action(service)
        if not Confirm.ask(
            "Do you want to perform another operation in this section?", default=False, console=console
        ):
            break


def show_instructions() -> None:
    console.print(Panel(
        "1. You can add, update, delete, list, and view books.\n"
        "2. Follow the prompts for each option to enter the required details.\n"
        "3. Make sure to enter valid data, especially for ISBN and Year.\n"
        "4. To exit, select the appropriate option from the main menu.",
        title=f"Welcome to the {settings.app_name}",
        subtitle=f"v{settings.app_version}",
        border_style="cyan",
    ))


def render_menu() -> None:
    table = Table.grid(padding=(0, 2))
    table.add_column(justify="right", style="bold cyan", width=4)
    table.add_column(justify="left", style="white")
    for key, label, icon in MENU_ITEMS:
        table.add_row(f"[reverse]{key}[/]", f"{icon} {label}")

    console.print(Panel(
        table,
        title=settings.app_name,
        border_style="cyan",
        box=box.HEAVY,
        padding=(1, 2),
    ))


def run_menu(service: BookService) -> None:
    """Interactive six-option menu over ``service``."""
    show_instructions()
    sections = {
        "1": ("Add a New Book", add_book),
        "2": ("Update an Existing Book", update_book),
        "3": ("Delete a Book", delete_book),
        "5": ("View Book Details", view_book),
    }

    while True:
        render_menu()
        choice = Prompt.ask(
            "Enter your choice", choices=[key for key, _, _ in MENU_ITEMS], console=console
        ).strip()

        if choice == "6":
            console.print("[green]Exiting the application. Thank You![/]")
            break
        if choice == "4":
            console.rule("List of All Books")
            list_books(service)
        else:
            title, action = sections[choice]
            run_section(title, action, service)
        console.print()
