"""
Book Pydantic Schemas

Request schemas are strict: every attribute has a declared type, numeric
strings are not coerced to integers, and unknown attributes are rejected.
The same models back both FastAPI's body validation and validate_book(),
so a payload is judged identically wherever it is checked.

Schema roles:
- BookCreate: POST body, all attributes required
- BookUpdate: PUT body, all attributes required except isbn (taken from URL)
- BookPatch: PATCH body, every attribute optional
- BookResponse: a stored book
- BookEnvelope / BookListEnvelope / MessageResponse: response bodies
"""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

BookOperation = Literal["create", "update", "patch"]

# Payloads are checked structurally: exact types, no extra attributes
STRICT_PAYLOAD = ConfigDict(strict=True, extra="forbid")


class BookBase(BaseModel):
    """Shared book attributes."""

    isbn: str = Field(
        ...,
        min_length=1,
        description="International Standard Book Number (primary key)",
        examples=["0691161518"],
    )
    amazon_url: str = Field(
        ...,
        description="Store page for the book",
        examples=["http://a.co/eobPtX2"],
    )
    author: str = Field(..., description="Author name", examples=["Matthew Lane"])
    language: str = Field(..., description="Language", examples=["english"])
    pages: int = Field(..., description="Number of pages", examples=[264])
    publisher: str = Field(
        ...,
        description="Publisher name",
        examples=["Princeton University Press"],
    )
    title: str = Field(
        ...,
        description="Book title",
        examples=["Power-Up: Unlocking the Hidden Mathematics in Video Games"],
    )
    year: int = Field(..., description="Publication year", examples=[2017])


class BookCreate(BookBase):
    """Schema for creating a new book. All attributes are required."""

    model_config = STRICT_PAYLOAD


class BookUpdate(BookBase):
    """
    Schema for replacing a book (PUT).

    Every attribute is required, isbn included. The isbn must repeat the one
    in the URL; the primary key itself never changes.
    """

    model_config = STRICT_PAYLOAD


class BookPatch(BaseModel):
    """Schema for a partial update (PATCH). Only supplied attributes change."""

    model_config = STRICT_PAYLOAD

    isbn: str | None = Field(default=None, min_length=1)
    amazon_url: str | None = None
    author: str | None = None
    language: str | None = None
    pages: int | None = None
    publisher: str | None = None
    title: str | None = None
    year: int | None = None

    @field_validator("*")
    @classmethod
    def not_null(cls, v: Any) -> Any:
        # Defaults are not validated, so this only fires for explicit nulls
        if v is None:
            raise ValueError("may not be null")
        return v


class BookResponse(BookBase):
    """A stored book, built from a database row."""

    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={
            "example": {
                "isbn": "0691161518",
                "amazon_url": "http://a.co/eobPtX2",
                "author": "Matthew Lane",
                "language": "english",
                "pages": 264,
                "publisher": "Princeton University Press",
                "title": "Power-Up: Unlocking the Hidden Mathematics in Video Games",
                "year": 2017,
            }
        },
    )


class BookEnvelope(BaseModel):
    """Response body wrapping a single book."""

    book: BookResponse


class BookListEnvelope(BaseModel):
    """Response body wrapping every stored book, ordered by title."""

    books: list[BookResponse]


class MessageResponse(BaseModel):
    """Response body carrying a plain message."""

    message: str = Field(..., examples=["Book deleted"])


class ErrorDetail(BaseModel):
    """Message and HTTP status carried by an error response."""

    message: str | list[str]
    status: int


class ErrorResponse(BaseModel):
    """Error envelope returned for every non-2xx response."""

    error: ErrorDetail


# =============================================================================
# Validation Helpers
# =============================================================================
_PAYLOAD_SCHEMAS: dict[str, type[BaseModel]] = {
    "create": BookCreate,
    "update": BookUpdate,
    "patch": BookPatch,
}


def violation_messages(errors: list[dict[str, Any]]) -> list[str]:
    """
    Turn Pydantic error dicts into "<field>: <message>" strings.

    Works for both ValidationError.errors() and FastAPI's
    RequestValidationError.errors(), whose locations start with "body".

    Args:
        errors: Error dicts with "loc" and "msg" keys

    Returns:
        One message per violation, in the order Pydantic reported them
    """
    messages = []
    for error in errors:
        loc = [str(part) for part in error.get("loc", ())]
        if len(loc) > 1 and loc[0] == "body":
            loc = loc[1:]
        field = ".".join(loc) or "body"
        messages.append(f"{field}: {error['msg']}")
    return messages


def validate_book(payload: Any, operation: BookOperation = "create") -> list[str]:
    """
    Check a candidate payload against the schema for an operation.

    Checks that required attributes are present, that pages and year are
    integers and the other attributes strings, and that no unknown
    attributes are supplied. No business rules (such as a year range)
    are applied.

    Args:
        payload: Decoded JSON body
        operation: "create", "update" or "patch"

    Returns:
        Ordered list of violation messages; empty when the payload is valid

    Raises:
        ValueError: If the operation is unknown
    """
    try:
        schema = _PAYLOAD_SCHEMAS[operation]
    except KeyError:
        raise ValueError(f"Unknown book operation: {operation!r}") from None

    try:
        schema.model_validate(payload)
    except ValidationError as exc:
        return violation_messages(exc.errors())
    return []
