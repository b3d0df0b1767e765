from unittest.mock import MagicMock

import pytest

from catalog.book import Book
from catalog.errors import (
    ConflictError,
    ErrorKind,
    NotFoundError,
    Result,
    ValidationError,
)
from catalog.repository import BookRepository
from catalog.service import INVALID_ISBN_MESSAGE, BookService


@pytest.fixture
def mock_repo():
    return MagicMock(spec=BookRepository)


@pytest.fixture
def mocked_service(mock_repo):
    return BookService(mock_repo)


def invalid_book():
    return Book(title="Test Book", author="Test Author", isbn="InvalidISBN", year=2020)


# ------------------------- Validation before delegation ------------------------- #
def test_add_book_rejects_invalid_isbn(mocked_service, mock_repo):
    result = mocked_service.add_book(invalid_book())

    assert not result.ok
    assert result.error is ErrorKind.VALIDATION
    assert result.message == INVALID_ISBN_MESSAGE
    mock_repo.add.assert_not_called()


def test_update_book_rejects_invalid_isbn(mocked_service, mock_repo):
    result = mocked_service.update_book(invalid_book())

    assert result.error is ErrorKind.VALIDATION
    mock_repo.update.assert_not_called()


def test_delete_book_by_isbn_rejects_invalid_isbn(mocked_service, mock_repo):
    result = mocked_service.delete_book_by_isbn("InvalidISBN")

    assert result.error is ErrorKind.VALIDATION
    mock_repo.delete_by_isbn.assert_not_called()


def test_change_book_isbn_rejects_invalid_isbn(mocked_service, mock_repo):
    result = mocked_service.change_book_isbn(1, "InvalidISBN")

    assert result.error is ErrorKind.VALIDATION
    mock_repo.change_isbn.assert_not_called()


# ------------------------- Delegation ------------------------- #
def test_add_book_delegates_when_valid(mocked_service, mock_repo, make_book):
    book = make_book()
    stored = Book(book.title, book.author, book.isbn, book.year, id=1)
    mock_repo.add.return_value = stored

    result = mocked_service.add_book(book)

    assert result.ok
    assert result.value is stored
    mock_repo.add.assert_called_once_with(book)


def test_update_book_delegates_when_valid(mocked_service, mock_repo, make_book):
    mock_repo.update.return_value = True
    updated = make_book(title="Updated Title", year=2021)

    result = mocked_service.update_book(updated)

    assert result.ok and result.value is True
    mock_repo.update.assert_called_once_with(updated)


def test_delete_book_by_isbn_delegates(mocked_service, mock_repo):
    mock_repo.delete_by_isbn.return_value = True

    result = mocked_service.delete_book_by_isbn("978-3-16-148410-0")

    assert result.ok and result.value is True
    mock_repo.delete_by_isbn.assert_called_once_with("978-3-16-148410-0")


def test_delete_book_by_id_delegates_without_validation(mocked_service, mock_repo):
    mock_repo.delete_by_id.return_value = True

    assert mocked_service.delete_book_by_id(5).value is True
    mock_repo.delete_by_id.assert_called_once_with(5)


def test_reads_are_pure_delegation(mocked_service, mock_repo, make_book):
    books = [make_book("978-3-16-148410-1"), make_book("978-3-16-148410-2")]
    mock_repo.get_all.return_value = books
    mock_repo.get_by_isbn.return_value = None
    mock_repo.get_by_id.return_value = books[0]

    assert mocked_service.get_all_books() is books
    assert mocked_service.get_book_by_isbn("whatever") is None
    assert mocked_service.get_book_by_id(1) is books[0]
    mock_repo.get_by_isbn.assert_called_once_with("whatever")


def test_repository_errors_become_results(mocked_service, mock_repo, make_book):
    mock_repo.add.side_effect = ConflictError("A book with ISBN 978-3-16-148410-0 already exists.")
    mock_repo.delete_by_id.side_effect = NotFoundError("Book with ID 3 not found.")

    added = mocked_service.add_book(make_book())
    deleted = mocked_service.delete_book_by_id(3)

    assert added.error is ErrorKind.CONFLICT
    assert "already exists" in added.message
    assert deleted.error is ErrorKind.NOT_FOUND


def test_unexpected_errors_propagate(mocked_service, mock_repo, make_book):
    mock_repo.add.side_effect = RuntimeError("boom")
    with pytest.raises(RuntimeError):
        mocked_service.add_book(make_book())


# ------------------------- Against the in-memory repository ------------------------- #
def test_add_none_reports_invalid_argument(service):
    assert service.add_book(None).error is ErrorKind.INVALID_ARGUMENT
    assert service.update_book(None).error is ErrorKind.INVALID_ARGUMENT


def test_end_to_end_crud(service, make_book):
    added = service.add_book(make_book())
    assert added.ok and added.value.id == 1

    duplicate = service.add_book(make_book(title="Another"))
    assert duplicate.error is ErrorKind.CONFLICT
    assert len(service.get_all_books()) == 1

    assert service.update_book(make_book(title="Renamed")).ok
    assert service.get_book_by_id(1).title == "Renamed"

    missing = service.update_book(make_book("978-0-00-000000-0"))
    assert missing.error is ErrorKind.NOT_FOUND

    assert service.delete_book_by_id(1).value is True
    assert service.get_book_by_id(1) is None
    assert service.delete_book_by_id(1).error is ErrorKind.NOT_FOUND


def test_delete_by_isbn_twice(service, make_book):
    service.add_book(make_book())

    assert service.delete_book_by_isbn("978-3-16-148410-0").value is True
    assert service.delete_book_by_isbn("978-3-16-148410-0").error is ErrorKind.NOT_FOUND


def test_change_book_isbn(service, make_book):
    service.add_book(make_book("978-3-16-148410-0"))
    service.add_book(make_book("978-3-16-148410-1"))

    changed = service.change_book_isbn(1, "978316148419")
    assert changed.ok and changed.value.id == 1

    taken = service.change_book_isbn(1, "978-3-16-148410-1")
    assert taken.error is ErrorKind.CONFLICT


def test_all_digit_isbn_is_accepted(service, make_book):
    assert service.add_book(make_book("978316148410")).ok


@pytest.mark.parametrize("isbn", ["978-3-16-148410", "978-3-16-148410-0000", "12345"])
def test_add_book_rejects_isbn_with_wrong_grouping(service, make_book, isbn):
    result = service.add_book(make_book(isbn))

    assert result.error is ErrorKind.VALIDATION
    assert service.get_all_books() == []


def test_unwrap_raises_matching_exception(service):
    result = service.delete_book_by_isbn("InvalidISBN")
    with pytest.raises(ValidationError, match="Invalid ISBN format"):
        result.unwrap()


def test_result_helpers():
    assert Result.success(3).unwrap() == 3
    failure = Result.failure(ErrorKind.NOT_FOUND, "gone")
    assert not failure.ok
    with pytest.raises(LookupError):
        failure.unwrap()
