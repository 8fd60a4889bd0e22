"""
Books Service

Business operations on books, kept separate from HTTP handling.

Each function takes the BookRepository as its first argument and works
with plain records: Pydantic request models (or dicts) in, BookResponse
out. Failures from the repository (BookNotFoundError, DuplicateBookError)
propagate unchanged; the application maps them to status codes.
"""

import logging
from typing import Any

from pydantic import BaseModel

from app.repositories import BookRepository
from app.schemas import BookResponse

logger = logging.getLogger(__name__)


def _as_values(data: BaseModel | dict[str, Any], exclude_unset: bool = False) -> dict[str, Any]:
    if isinstance(data, BaseModel):
        return data.model_dump(exclude_unset=exclude_unset)
    return dict(data)


def _to_record(row: Any) -> BookResponse:
    return BookResponse.model_validate(dict(row))


def create_book(repo: BookRepository, data: BaseModel | dict[str, Any]) -> BookResponse:
    """
    Store a new book.

    Args:
        repo: Book repository
        data: Validated book attributes, isbn included

    Returns:
        The stored book

    Raises:
        DuplicateBookError: If a book with the same ISBN exists
    """
    values = _as_values(data)
    row = repo.insert(values)
    logger.info(f"Created book {values['isbn']}")
    return _to_record(row)


def list_books(repo: BookRepository) -> list[BookResponse]:
    """Return every book ordered by title; empty if there are none."""
    return [_to_record(row) for row in repo.fetch_all()]


def get_book(repo: BookRepository, isbn: str) -> BookResponse:
    """
    Return one book.

    Raises:
        BookNotFoundError: If no book has this ISBN
    """
    return _to_record(repo.fetch_one(isbn))


def update_book(
    repo: BookRepository,
    isbn: str,
    data: BaseModel | dict[str, Any],
) -> BookResponse:
    """
    Replace every mutable attribute of a book.

    The ISBN is the primary key and is never rewritten; an isbn in the
    payload is ignored here (the router checks it matches the URL).

    Raises:
        BookNotFoundError: If no book has this ISBN
    """
    values = _as_values(data)
    values.pop("isbn", None)
    row = repo.update(isbn, values)
    logger.info(f"Updated book {isbn}")
    return _to_record(row)


def patch_book(
    repo: BookRepository,
    isbn: str,
    data: BaseModel | dict[str, Any],
) -> BookResponse:
    """
    Replace only the attributes present in the payload.

    An empty payload changes nothing and returns the stored book.

    Raises:
        BookNotFoundError: If no book has this ISBN
    """
    values = _as_values(data, exclude_unset=True)
    values.pop("isbn", None)

    if not values:
        return get_book(repo, isbn)

    row = repo.update(isbn, values)
    logger.info(f"Patched book {isbn}: {sorted(values)}")
    return _to_record(row)


def remove_book(repo: BookRepository, isbn: str) -> None:
    """
    Permanently delete a book.

    Raises:
        BookNotFoundError: If no book has this ISBN
    """
    repo.delete(isbn)
    logger.info(f"Deleted book {isbn}")
