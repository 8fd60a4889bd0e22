"""
pytest Fixtures for Books API Tests

This file contains shared fixtures used across all test files.

FIXTURE SCOPES USED HERE:
- session: settings, app and client. The client runs the application
  lifespan, so the database engine is created once and disposed once,
  after the whole suite finishes.
- function: sessions, repositories and the reference book, so every
  test starts from the same table contents.

We use SQLite in-memory for tests because:
- Fast: No disk I/O, runs in memory
- Simple: No external database needed
"""

from collections.abc import Generator

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from app.config import Settings
from app.database import create_tables
from app.main import create_app
from app.repositories import BookRepository
from app.schemas import BookResponse
from app.services import books as book_service

# =============================================================================
# SAMPLE DATA
# =============================================================================
TEST_BOOK = {
    "isbn": "0691161518",
    "amazon_url": "http://a.co/eobPtX2",
    "author": "Fake Author",
    "language": "english",
    "pages": 500,
    "publisher": "Penguin Bird Publisher",
    "title": "Test Title for a Test book",
    "year": 2020,
}

NEW_BOOK = {
    "isbn": "12345678",
    "amazon_url": "http://anothertest.book",
    "author": "Fake Author",
    "language": "spanish",
    "pages": 456,
    "publisher": "Fake Test Publisher",
    "title": "Another Title for a Test book",
    "year": 2019,
}


# =============================================================================
# APPLICATION FIXTURES
# =============================================================================
@pytest.fixture(scope="session")
def settings() -> Settings:
    """Settings pointing at a private in-memory SQLite database."""
    return Settings(
        _env_file=None,
        database_url="sqlite://",
        environment="test",
        log_level="WARNING",
        debug=False,
    )


@pytest.fixture(scope="session")
def app(settings: Settings) -> FastAPI:
    """A fresh application instance built for the test settings."""
    return create_app(settings)


@pytest.fixture(scope="session")
def client(app: FastAPI) -> Generator[TestClient, None, None]:
    """
    Test client for the whole session.

    Entering the TestClient context runs the lifespan startup (engine
    created), leaving it runs the shutdown (engine disposed).
    """
    with TestClient(app) as test_client:
        create_tables(app.state.engine)
        yield test_client


# =============================================================================
# DATABASE FIXTURES
# =============================================================================
@pytest.fixture
def db_session(client: TestClient) -> Generator[Session, None, None]:
    """A session from the application's own session factory."""
    session = client.app.state.session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def repo(db_session: Session) -> BookRepository:
    """Book repository around the test session."""
    return BookRepository(db_session)


@pytest.fixture
def empty_books(client: TestClient) -> None:
    """Remove every book before the test runs."""
    with client.app.state.session_factory() as session:
        BookRepository(session).delete_all()


@pytest.fixture
def test_book(empty_books: None, client: TestClient) -> BookResponse:
    """
    Empty the books table, then store the reference book.

    Goes through the books service, the same path the API uses.
    """
    with client.app.state.session_factory() as session:
        return book_service.create_book(BookRepository(session), TEST_BOOK)
