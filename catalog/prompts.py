"""Input collectors for the interactive menu.

Each helper keeps asking until it gets an acceptable value, so callers never
see malformed input.
"""
from datetime import date
from typing import Optional

from rich.prompt import IntPrompt, Prompt

from catalog.ui_helpers import console
from catalog.validators import ISBNValidator, TextValidator, YearValidator


def prompt_text(label: str, default: Optional[str] = None) -> str:
    while True:
        if default is None:
            value = Prompt.ask(label, console=console)
        else:
            value = Prompt.ask(label, default=default, console=console)
        if TextValidator.validate_text(value):
            return value.strip()
        console.print("[yellow]Input cannot be empty or longer than 100 characters. Please try again.[/]")


def prompt_isbn(default: Optional[str] = None) -> str:
    label = "Enter ISBN (e.g., 978-3-16-148410-0)"
    while True:
        if default is None:
            value = Prompt.ask(label, console=console)
        else:
            value = Prompt.ask(label, default=default, console=console)
        value = (value or "").strip()
        if ISBNValidator.is_valid_isbn(value):
            return value
        console.print("[yellow]Invalid ISBN format. Please enter a valid ISBN.[/]")


def prompt_year(default: Optional[int] = None) -> int:
    current_year = date.today().year
    label = "Enter Year (e.g., 2000, 1995)"
    while True:
        if default is None:
            year = IntPrompt.ask(label, console=console)
        else:
            year = IntPrompt.ask(label, default=default, console=console)
        if YearValidator.is_valid_input_year(year, current_year):
            return year
        console.print(
            f"[yellow]Invalid input. Please enter a valid 4-digit year not greater than {current_year}.[/]"
        )


def prompt_book_id() -> Optional[int]:
    raw = prompt_text("Enter Book ID")
    try:
        return int(raw)
    except ValueError:
        console.print("[yellow]Book ID must be a number.[/]")
        return None
