"""
Repositories Package

Repositories own the SQL: each one wraps a Session and issues
parameterized SQLAlchemy Core statements against a single table.
Services call repositories; routers never touch SQL directly.
"""

from app.repositories.books import BookRepository

__all__ = ["BookRepository"]
