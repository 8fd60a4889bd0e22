"""
Book Model

The only model of the Books API: one flat row per book, keyed by ISBN.

The repository layer issues Core statements against Book.__table__,
so this class mainly declares the table; there are no relationships.
"""

from sqlalchemy import Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base


class Book(Base):
    """
    Book model representing books in the library.

    Table: books

    Fields:
    - isbn: International Standard Book Number (primary key)
    - amazon_url: Link to the book's store page
    - author: Author name
    - language: Language the book is written in
    - pages: Number of pages
    - publisher: Publisher name
    - title: Book title (indexed, used for list ordering)
    - year: Publication year

    Example:
        Book(
            isbn="0691161518",
            amazon_url="http://a.co/eobPtX2",
            author="Matthew Lane",
            language="english",
            pages=264,
            publisher="Princeton University Press",
            title="Power-Up: Unlocking the Hidden Mathematics in Video Games",
            year=2017,
        )
    """

    __tablename__ = "books"

    # The caller supplies the ISBN; it is never generated
    isbn: Mapped[str] = mapped_column(
        Text,
        primary_key=True,
        comment="International Standard Book Number"
    )

    amazon_url: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        comment="Store page for the book"
    )

    author: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        comment="Author name"
    )

    language: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        comment="Language the book is written in"
    )

    pages: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        comment="Number of pages in the book"
    )

    publisher: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        comment="Publisher name"
    )

    title: Mapped[str] = mapped_column(
        Text,
        index=True,
        nullable=False,
        comment="Book title"
    )

    year: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        comment="Publication year"
    )

    def __repr__(self) -> str:
        return f"Book(isbn='{self.isbn}', title='{self.title}')"
