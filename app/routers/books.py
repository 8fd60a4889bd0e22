"""
Books Router

CRUD endpoints for books, keyed by ISBN.

Request bodies are declared as strict schemas, so FastAPI validates them
before the handler runs: no mutation is attempted on invalid input.
Handlers only call the books service; errors it raises are turned into
responses by the exception handlers in app.main.
"""

from fastapi import APIRouter, status

from app.dependencies import BookRepo
from app.exceptions import BookValidationError
from app.schemas import (
    BookCreate,
    BookEnvelope,
    BookListEnvelope,
    BookPatch,
    BookUpdate,
    ErrorResponse,
    MessageResponse,
)
from app.services import books as book_service

# =============================================================================
# Router Configuration
# =============================================================================
router = APIRouter(
    prefix="/books",
    tags=["Books"],
    responses={
        400: {"model": ErrorResponse, "description": "Invalid book data"},
        404: {"model": ErrorResponse, "description": "Book not found"},
    },
)


# =============================================================================
# Helper Functions
# =============================================================================
def ensure_isbn_matches(isbn: str, body_isbn: str | None) -> None:
    """
    Reject a body ISBN that differs from the one in the URL.

    The ISBN is the primary key, so PUT and PATCH can repeat it but not
    change it. Callers look the book up first so an unknown ISBN is a 404.

    Raises:
        BookValidationError: If the two ISBNs differ
    """
    if body_isbn is not None and body_isbn != isbn:
        raise BookValidationError(
            [f"isbn: must match the isbn in the URL ('{isbn}')"]
        )


# =============================================================================
# CRUD Endpoints
# =============================================================================
@router.get(
    "",
    response_model=BookListEnvelope,
    summary="List all books",
    description="Get every book, ordered by title.",
)
def list_books(repo: BookRepo) -> BookListEnvelope:
    """List all books ordered by title."""
    return BookListEnvelope(books=book_service.list_books(repo))


@router.get(
    "/{isbn}",
    response_model=BookEnvelope,
    summary="Get a book by ISBN",
)
def get_book(isbn: str, repo: BookRepo) -> BookEnvelope:
    """
    Get a single book by its ISBN.

    Raises:
        BookNotFoundError: 404 if no book has this ISBN
    """
    return BookEnvelope(book=book_service.get_book(repo, isbn))


@router.post(
    "",
    response_model=BookEnvelope,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new book",
    responses={409: {"model": ErrorResponse, "description": "ISBN already exists"}},
)
def create_book(book_data: BookCreate, repo: BookRepo) -> BookEnvelope:
    """
    Create a new book.

    Args:
        book_data: Validated book data from request body
        repo: Book repository (injected)

    Returns:
        The stored book, with 201 Created

    Raises:
        DuplicateBookError: 409 if the ISBN already exists
    """
    return BookEnvelope(book=book_service.create_book(repo, book_data))


@router.put(
    "/{isbn}",
    response_model=BookEnvelope,
    summary="Replace a book",
    description="Replace every attribute of an existing book.",
)
def update_book(isbn: str, book_data: BookUpdate, repo: BookRepo) -> BookEnvelope:
    """
    Replace an existing book.

    Uses full PUT semantics: every attribute, isbn included, is required.
    A missing book is reported before an isbn mismatch.

    Raises:
        BookNotFoundError: 404 if no book has this ISBN
        BookValidationError: 400 if the body isbn differs from the URL
    """
    book_service.get_book(repo, isbn)
    ensure_isbn_matches(isbn, book_data.isbn)
    return BookEnvelope(book=book_service.update_book(repo, isbn, book_data))


@router.patch(
    "/{isbn}",
    response_model=BookEnvelope,
    summary="Partially update a book",
    description="Change only the attributes supplied in the body.",
)
def patch_book(isbn: str, book_data: BookPatch, repo: BookRepo) -> BookEnvelope:
    """
    Update some attributes of an existing book.

    Raises:
        BookNotFoundError: 404 if no book has this ISBN
        BookValidationError: 400 if the body isbn differs from the URL
    """
    book_service.get_book(repo, isbn)
    ensure_isbn_matches(isbn, book_data.isbn)
    return BookEnvelope(book=book_service.patch_book(repo, isbn, book_data))


@router.delete(
    "/{isbn}",
    response_model=MessageResponse,
    summary="Delete a book",
    description="Permanently delete a book from the database.",
)
def delete_book(isbn: str, repo: BookRepo) -> MessageResponse:
    """
    Delete a book.

    Returns 200 with a confirmation message rather than 204, so clients
    always get a JSON body.

    Raises:
        BookNotFoundError: 404 if no book has this ISBN
    """
    book_service.remove_book(repo, isbn)
    return MessageResponse(message="Book deleted")
