#!/usr/bin/env python3
"""
Database Seed Script

Populates the database with sample books for development.

USAGE:
    # Make sure you're in the project root with venv activated
    python scripts/seed_data.py

This script:
1. Connects to the database using app settings
2. Creates the books table if it does not exist
3. Clears existing books (optional)
4. Creates sample books through the books service
"""

import sys
from pathlib import Path

# Add project root to Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from app.config import get_settings
from app.database import create_db_engine, create_session_factory, create_tables
from app.repositories import BookRepository
from app.schemas import BookCreate, BookResponse
from app.services import books as book_service

SAMPLE_BOOKS = [
    {
        "isbn": "0691161518",
        "amazon_url": "http://a.co/eobPtX2",
        "author": "Matthew Lane",
        "language": "english",
        "pages": 264,
        "publisher": "Princeton University Press",
        "title": "Power-Up: Unlocking the Hidden Mathematics in Video Games",
        "year": 2017,
    },
    {
        "isbn": "9780451524935",
        "amazon_url": "http://a.co/d/1984",
        "author": "George Orwell",
        "language": "english",
        "pages": 328,
        "publisher": "Signet Classic",
        "title": "1984",
        "year": 1961,
    },
    {
        "isbn": "9780141439518",
        "amazon_url": "http://a.co/d/pride",
        "author": "Jane Austen",
        "language": "english",
        "pages": 480,
        "publisher": "Penguin Classics",
        "title": "Pride and Prejudice",
        "year": 2002,
    },
    {
        "isbn": "9788420412146",
        "amazon_url": "http://a.co/d/quijote",
        "author": "Miguel de Cervantes",
        "language": "spanish",
        "pages": 1376,
        "publisher": "Alfaguara",
        "title": "Don Quijote de la Mancha",
        "year": 2015,
    },
]


def create_books(repo: BookRepository) -> list[BookResponse]:
    """Create the sample books."""
    print("Creating books...")
    books = [
        book_service.create_book(repo, BookCreate.model_validate(data))
        for data in SAMPLE_BOOKS
    ]
    print(f"Created {len(books)} books.")
    return books


def seed_database(clear_existing: bool = True) -> None:
    """
    Seed the database with sample data.

    Args:
        clear_existing: If True, clears existing books before seeding.
    """
    print("=" * 60)
    print("Starting database seed...")
    print("=" * 60)

    settings = get_settings()
    engine = create_db_engine(settings)
    create_tables(engine)
    db = create_session_factory(engine)()

    try:
        repo = BookRepository(db)
        if clear_existing:
            print("Clearing existing books...")
            removed = repo.delete_all()
            print(f"Removed {removed} books.")

        books = create_books(repo)

        print("=" * 60)
        print("Database seeding completed successfully!")
        print("=" * 60)
        print("\nSummary:")
        print(f"  - Books: {len(books)}")
        print(f"\nYou can now access the API at http://localhost:{settings.port}/books")
        print(f"API documentation at http://localhost:{settings.port}/docs")

    except Exception as e:
        print(f"Error seeding database: {e}")
        db.rollback()
        raise
    finally:
        db.close()
        engine.dispose()


if __name__ == "__main__":
    seed_database()
