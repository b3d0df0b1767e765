from __future__ import annotations

from catalog.errors import ValidationError
from catalog.validators import MAX_TEXT_LENGTH, TextValidator, YearValidator


class Book:
    """Represents a single book record in the catalog."""

    def __init__(self, title: str, author: str, isbn: str, year: int, id: int | None = None) -> None:
        if not TextValidator.validate_title(title):
            raise ValidationError(f"Title must be between 1 and {MAX_TEXT_LENGTH} characters.")
        if not TextValidator.validate_author(author):
            raise ValidationError(f"Author must be between 1 and {MAX_TEXT_LENGTH} characters.")
        if not YearValidator.is_positive_year(year):
            raise ValidationError("Year must be a positive number.")

        self.id = id
        self.title = title.strip()
        self.author = author.strip()
        self.isbn = (isbn or "").strip()
        self.year = year

    def __str__(self) -> str:
        return f"{self.title} by {self.author} (ISBN: {self.isbn}, {self.year})"

    def __repr__(self) -> str:
        return (
            f"Book(id={self.id!r}, title={self.title!r}, author={self.author!r}, "
            f"isbn={self.isbn!r}, year={self.year!r})"
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Book):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "title": self.title,
            "author": self.author,
            "isbn": self.isbn,
            "year": self.year,
        }

    @staticmethod
    def from_dict(data: dict) -> "Book":
        return Book(
            title=data["title"],
            author=data["author"],
            isbn=data["isbn"],
            year=data["year"],
            id=data.get("id"),
        )

    def copy(self) -> "Book":
        return Book.from_dict(self.to_dict())
