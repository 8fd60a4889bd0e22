"""
Pydantic Schemas Package

This package contains Pydantic models for request/response validation.

WHY Separate Schemas from SQLAlchemy Models?
============================================
1. Validation: Different rules for create vs update vs patch
2. Decoupling: Database schema can evolve independently of API
3. Documentation: Schemas generate OpenAPI documentation

Schema Naming Convention:
- XxxBase: Shared fields
- XxxCreate / XxxUpdate / XxxPatch: Request bodies per operation
- XxxResponse: Fields returned in API responses
- XxxEnvelope: The JSON object wrapping a response
"""

from app.schemas.book import (
    BookBase,
    BookCreate,
    BookEnvelope,
    BookListEnvelope,
    BookOperation,
    BookPatch,
    BookResponse,
    BookUpdate,
    ErrorResponse,
    MessageResponse,
    validate_book,
    violation_messages,
)

__all__ = [
    "BookBase",
    "BookCreate",
    "BookUpdate",
    "BookPatch",
    "BookResponse",
    "BookEnvelope",
    "BookListEnvelope",
    "BookOperation",
    "MessageResponse",
    "ErrorResponse",
    "validate_book",
    "violation_messages",
]
