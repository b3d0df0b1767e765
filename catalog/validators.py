import re
from datetime import date
from typing import Optional

MAX_TEXT_LENGTH = 100

# Hyphenated: optional 978/979 prefix, then five hyphen-separated digit groups.
# Unhyphenated: optional 978/979 prefix, then 9 or 10 digits.
ISBN_PATTERN = re.compile(
    r"(?:97[89]-?)?\d{1,5}-\d{1,7}-\d{1,7}-\d{1,7}-\d{1,3}"
    r"|(?:97[89])?\d{9,10}",
    re.ASCII,
)


class ISBNValidator:
    """ISBN format check shared by the prompt layer and the service layer."""

    @staticmethod
    def is_valid_isbn(isbn: Optional[str]) -> bool:
        if not isbn:
            return False
        return ISBN_PATTERN.fullmatch(isbn) is not None


class TextValidator:
    """Title and author checks applied when a Book is constructed."""

    @staticmethod
    def validate_text(text: Optional[str], max_length: int = MAX_TEXT_LENGTH) -> bool:
        if text is None:
            return False
        t = text.strip()
        return 0 < len(t) <= max_length

    @staticmethod
    def validate_title(title: Optional[str]) -> bool:
        return TextValidator.validate_text(title)

    @staticmethod
    def validate_author(author: Optional[str]) -> bool:
        return TextValidator.validate_text(author)


class YearValidator:

    @staticmethod
    def is_positive_year(year) -> bool:
        # bool is an int subclass; True is not a year
        return isinstance(year, int) and not isinstance(year, bool) and year > 0

    @staticmethod
    def is_valid_input_year(year: int, current_year: Optional[int] = None) -> bool:
        """Stricter rule for interactive input: four digits, not in the future."""
        current_year = current_year or date.today().year
        return YearValidator.is_positive_year(year) and len(str(year)) == 4 and year <= current_year
