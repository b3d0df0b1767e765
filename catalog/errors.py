from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Generic, Optional, Type, TypeVar

T = TypeVar("T")


class ErrorKind(str, Enum):
    INVALID_ARGUMENT = "invalid_argument"
    CONFLICT = "conflict"
    NOT_FOUND = "not_found"
    VALIDATION = "validation"


class CatalogError(Exception):
    """Base exception for catalog errors. Subclasses carry their ErrorKind."""

    kind: ErrorKind

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InvalidArgumentError(CatalogError, ValueError):
    """A required input was missing or blank (no book, empty ISBN)."""

    kind = ErrorKind.INVALID_ARGUMENT


class ConflictError(CatalogError, ValueError):
    """A book with the same ISBN already exists."""

    kind = ErrorKind.CONFLICT


class NotFoundError(CatalogError, LookupError):
    """No book matched the given key."""

    kind = ErrorKind.NOT_FOUND


class ValidationError(CatalogError, ValueError):
    """A field failed its format or range check."""

    kind = ErrorKind.VALIDATION


_EXCEPTIONS: dict = {
    ErrorKind.INVALID_ARGUMENT: InvalidArgumentError,
    ErrorKind.CONFLICT: ConflictError,
    ErrorKind.NOT_FOUND: NotFoundError,
    ErrorKind.VALIDATION: ValidationError,
}


def exception_for(kind: ErrorKind) -> Type[CatalogError]:
    return _EXCEPTIONS[kind]


@dataclass(frozen=True)
class Result(Generic[T]):
    """Outcome of a service operation: either a value or an error kind with a message.

    Callers branch on ``ok`` (or on ``error``) instead of catching exceptions.
    ``unwrap()`` is available for code that would rather have the exception.
    """

    value: Optional[T] = None
    error: Optional[ErrorKind] = None
    message: str = ""

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: T) -> "Result[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, kind: ErrorKind, message: str) -> "Result[T]":
        return cls(error=kind, message=message)

    @classmethod
    def from_error(cls, exc: CatalogError) -> "Result[T]":
        return cls.failure(exc.kind, exc.message)

    def unwrap(self) -> T:
        if self.error is not None:
            raise exception_for(self.error)(self.message)
        return self.value  # type: ignore[return-value]
