"""
Book Repository

Storage accessor for the books table.

All statements are built with SQLAlchemy Core (insert/select/update/delete)
so values always travel as bound parameters, never as SQL text. Rows come
back as RowMapping objects, which behave like read-only dicts.

Each mutating method commits its own transaction. When a statement fails
or matches no row, the transaction is rolled back before the domain
exception is raised, so the session stays usable.
"""

import logging
from collections.abc import Sequence
from typing import Any

from sqlalchemy import delete, insert, select, update
from sqlalchemy.engine import RowMapping
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.exceptions import BookNotFoundError, DuplicateBookError
from app.models import Book

logger = logging.getLogger(__name__)

books_table = Book.__table__


class BookRepository:
    """Repository for book-related database operations."""

    def __init__(self, db: Session) -> None:
        """
        Initialize the repository with a database session.

        Args:
            db: Session owned by the caller (one per request)
        """
        self.db = db

    def fetch_all(self) -> Sequence[RowMapping]:
        """Return every book row ordered by title."""
        stmt = select(books_table).order_by(books_table.c.title, books_table.c.isbn)
        return self.db.execute(stmt).mappings().all()

    def fetch_one(self, isbn: str) -> RowMapping:
        """
        Return the row for an ISBN.

        Raises:
            BookNotFoundError: If no row matches
        """
        stmt = select(books_table).where(books_table.c.isbn == isbn)
        row = self.db.execute(stmt).mappings().one_or_none()

        if row is None:
            raise BookNotFoundError(isbn)

        return row

    def insert(self, values: dict[str, Any]) -> RowMapping:
        """
        Insert a new row and return it as stored.

        Raises:
            DuplicateBookError: If the ISBN is already present
        """
        try:
            self.db.execute(insert(books_table).values(**values))
            self.db.commit()
        except IntegrityError as exc:
            self.db.rollback()
            logger.debug(f"Insert rejected by database: {exc.orig}")
            raise DuplicateBookError(values["isbn"]) from exc

        return self.fetch_one(values["isbn"])

    def update(self, isbn: str, values: dict[str, Any]) -> RowMapping:
        """
        Overwrite the given columns of the row for an ISBN.

        Raises:
            BookNotFoundError: If no row matches
        """
        stmt = (
            update(books_table)
            .where(books_table.c.isbn == isbn)
            .values(**values)
        )
        result = self.db.execute(stmt)

        if result.rowcount == 0:
            self.db.rollback()
            raise BookNotFoundError(isbn)

        self.db.commit()
        return self.fetch_one(isbn)

    def delete(self, isbn: str) -> None:
        """
        Delete the row for an ISBN.

        Raises:
            BookNotFoundError: If no row matches
        """
        stmt = delete(books_table).where(books_table.c.isbn == isbn)
        result = self.db.execute(stmt)

        if result.rowcount == 0:
            self.db.rollback()
            raise BookNotFoundError(isbn)

        self.db.commit()

    def delete_all(self) -> int:
        """Delete every row and return how many were removed."""
        result = self.db.execute(delete(books_table))
        self.db.commit()
        return result.rowcount
