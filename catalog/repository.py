import logging
from typing import List, Optional, Protocol

from catalog.book import Book
from catalog.errors import ConflictError, InvalidArgumentError, NotFoundError

logger = logging.getLogger(__name__)


class BookRepository(Protocol):
    """Storage contract for book records. Alternative backing stores implement the same methods."""

    def get_all(self) -> List[Book]: ...

    def get_by_isbn(self, isbn: str) -> Optional[Book]: ...

    def get_by_id(self, book_id: int) -> Optional[Book]: ...

    def add(self, book: Book) -> Book: ...

    def update(self, book: Book) -> bool: ...

    def delete_by_isbn(self, isbn: str) -> bool: ...

    def delete_by_id(self, book_id: int) -> bool: ...

    def change_isbn(self, book_id: int, new_isbn: str) -> Book: ...


class InMemoryBookRepository:
    """Owns the book records for one session and enforces id and ISBN uniqueness.

    Every read hands back a copy, so the stored records only change through
    this class. Ids come from a counter that is never decremented, so an id is
    not reused after its book is deleted.
    """

    def __init__(self) -> None:
        self._books: List[Book] = []
        self._last_id = 0

    def __len__(self) -> int:
        return len(self._books)

    # ------------------------- Lookups ------------------------- #
    def get_all(self) -> List[Book]:
        return [book.copy() for book in self._books]

    def get_by_isbn(self, isbn: str) -> Optional[Book]:
        stored = self._find_by_isbn(isbn)
        return stored.copy() if stored else None

    def get_by_id(self, book_id: int) -> Optional[Book]:
        stored = self._find_by_id(book_id)
        return stored.copy() if stored else None

    # ------------------------- Mutations ------------------------- #
    def add(self, book: Book) -> Book:
        """Store a copy of ``book`` under the next id and return the stored record."""
        if book is None:
            raise InvalidArgumentError("Book cannot be None.")
        if self._find_by_isbn(book.isbn) is not None:
            logger.warning(f"Rejected duplicate ISBN {book.isbn}")
            raise ConflictError(f"A book with ISBN {book.isbn} already exists.")

        stored = book.copy()
        self._last_id += 1
        stored.id = self._last_id
        self._books.append(stored)
        logger.info(f"Book stored: id={stored.id}, isbn={stored.isbn}")
        return stored.copy()

    def update(self, book: Book) -> bool:
        """Overwrite title, author and year of the record with the same ISBN."""
        if book is None:
            raise InvalidArgumentError("Book cannot be None.")
        existing = self._find_by_isbn(book.isbn)
        if existing is None:
            raise NotFoundError(f"Book with ISBN {book.isbn} not found.")

        existing.title = book.title
        existing.author = book.author
        existing.year = book.year
        logger.info(f"Book updated: id={existing.id}, isbn={existing.isbn}")
        return True

    def change_isbn(self, book_id: int, new_isbn: str) -> Book:
        """Give the record ``book_id`` a new ISBN, keeping its id."""
        self._require_isbn(new_isbn)
        existing = self._find_by_id(book_id)
        if existing is None:
            raise NotFoundError(f"Book with ID {book_id} not found.")

        holder = self._find_by_isbn(new_isbn)
        if holder is not None and holder is not existing:
            logger.warning(f"Rejected ISBN change of id={book_id} to taken ISBN {new_isbn}")
            raise ConflictError(f"A book with ISBN {new_isbn} already exists.")

        old_isbn, existing.isbn = existing.isbn, new_isbn
        logger.info(f"Book id={book_id} ISBN changed: {old_isbn} -> {new_isbn}")
        return existing.copy()

    def delete_by_isbn(self, isbn: str) -> bool:
        existing = self._find_by_isbn(isbn)
        if existing is None:
            raise NotFoundError(f"Book with ISBN {isbn} not found.")
        return self._remove(existing)

    def delete_by_id(self, book_id: int) -> bool:
        existing = self._find_by_id(book_id)
        if existing is None:
            raise NotFoundError(f"Book with ID {book_id} not found.")
        return self._remove(existing)

    # ------------------------- Internals ------------------------- #
    @staticmethod
    def _require_isbn(isbn: str) -> None:
        if isbn is None or not isbn.strip():
            raise InvalidArgumentError("ISBN cannot be null or empty.")

    def _find_by_isbn(self, isbn: str) -> Optional[Book]:
        self._require_isbn(isbn)
        for book in self._books:
            if book.isbn == isbn:
                return book
        return None

    def _find_by_id(self, book_id: int) -> Optional[Book]:
        for book in self._books:
            if book.id == book_id:
                return book
        return None

    def _remove(self, book: Book) -> bool:
        self._books = [b for b in self._books if b is not book]
        logger.info(f"Book removed: id={book.id}, isbn={book.isbn}")
        return True
