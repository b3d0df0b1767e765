import pytest

from catalog.book import Book
from catalog.repository import InMemoryBookRepository
from catalog.service import BookService
from catalog.ui_helpers import OUTPUT_MODE_ENV


@pytest.fixture(autouse=True)
def plain_output(monkeypatch):
    # Plain output keeps CLI assertions independent of terminal styling
    monkeypatch.setenv(OUTPUT_MODE_ENV, "plain")


@pytest.fixture
def repo():
    # A fresh catalog per test; nothing is shared between tests
    return InMemoryBookRepository()


@pytest.fixture
def service(repo):
    return BookService(repo)


@pytest.fixture
def make_book():
    def _make(isbn="978-3-16-148410-0", title="Test Book", author="Test Author", year=2020):
        return Book(title=title, author=author, isbn=isbn, year=year)
    return _make
