import logging
from typing import List, Optional

from catalog.book import Book
from catalog.errors import CatalogError, ErrorKind, Result
from catalog.repository import BookRepository
from catalog.validators import ISBNValidator

logger = logging.getLogger(__name__)

INVALID_ISBN_MESSAGE = "Invalid ISBN format"


class BookService:
    """Validation layer in front of a BookRepository.

    Mutations check the ISBN format before anything reaches the repository and
    report failures as ``Result`` values. Reads are passed straight through.
    """

    def __init__(self, repository: BookRepository) -> None:
        self._repository = repository

    # ------------------------- Reads ------------------------- #
    def get_all_books(self) -> List[Book]:
        return self._repository.get_all()

    def get_book_by_isbn(self, isbn: str) -> Optional[Book]:
        return self._repository.get_by_isbn(isbn)

    def get_book_by_id(self, book_id: int) -> Optional[Book]:
        return self._repository.get_by_id(book_id)

    # ------------------------- Mutations ------------------------- #
    def add_book(self, book: Book) -> Result[Book]:
        if book is not None and not self._isbn_ok(book.isbn):
            return self._invalid_isbn()
        return self._call(self._repository.add, book)

    def update_book(self, book: Book) -> Result[bool]:
        if book is not None and not self._isbn_ok(book.isbn):
            return self._invalid_isbn()
        return self._call(self._repository.update, book)

    def delete_book_by_isbn(self, isbn: str) -> Result[bool]:
        if not self._isbn_ok(isbn):
            return self._invalid_isbn()
        return self._call(self._repository.delete_by_isbn, isbn)

    def delete_book_by_id(self, book_id: int) -> Result[bool]:
        return self._call(self._repository.delete_by_id, book_id)

    def change_book_isbn(self, book_id: int, new_isbn: str) -> Result[Book]:
        if not self._isbn_ok(new_isbn):
            return self._invalid_isbn()
        return self._call(self._repository.change_isbn, book_id, new_isbn)

    # ------------------------- Helpers ------------------------- #
    @staticmethod
    def _isbn_ok(isbn: Optional[str]) -> bool:
        if ISBNValidator.is_valid_isbn(isbn):
            return True
        logger.warning(f"Rejected ISBN with invalid format: {isbn!r}")
        return False

    @staticmethod
    def _invalid_isbn() -> Result:
        return Result.failure(ErrorKind.VALIDATION, INVALID_ISBN_MESSAGE)

    @staticmethod
    def _call(operation, *args) -> Result:
        # Only catalog errors become results; anything else is a bug and propagates.
        try:
            return Result.success(operation(*args))
        except CatalogError as exc:
            return Result.from_error(exc)
