"""
Domain Exceptions

Every failure the storage and service layers can report is one of the
classes below. They carry their own HTTP status and message, and are
translated into the JSON error envelope in exactly one place: the
exception handlers registered by app.main.create_app().

    BookAPIError
    ├── BookValidationError   400  malformed, missing or wrongly-typed input
    ├── BookNotFoundError     404  no row for the given ISBN
    └── DuplicateBookError    409  ISBN already exists on create

Anything else (SQLAlchemyError, bugs) is reported as a 500.
"""

from fastapi import status


class BookAPIError(Exception):
    """Base exception for errors reported to API clients."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str | list[str]) -> None:
        super().__init__(message)
        self.message = message

    def to_dict(self) -> dict:
        """Render the error envelope returned to the client."""
        return {"error": {"message": self.message, "status": self.status_code}}


class BookValidationError(BookAPIError):
    """Raised when a payload does not match the book schema."""

    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, violations: list[str]) -> None:
        super().__init__(violations)
        self.violations = violations


class BookNotFoundError(BookAPIError):
    """Raised when no book matches the requested ISBN."""

    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, isbn: str) -> None:
        super().__init__(f"Book with isbn '{isbn}' not found")
        self.isbn = isbn


class DuplicateBookError(BookAPIError):
    """Raised when creating a book whose ISBN is already stored."""

    status_code = status.HTTP_409_CONFLICT

    def __init__(self, isbn: str) -> None:
        super().__init__(f"Book with isbn '{isbn}' already exists")
        self.isbn = isbn


__all__ = [
    "BookAPIError",
    "BookValidationError",
    "BookNotFoundError",
    "DuplicateBookError",
]
