"""
Tests for Books API Endpoints

This module tests all operations on the /books endpoints.

Every test starts with a table holding exactly TEST_BOOK.

TEST NAMING CONVENTION:
- test_<action>_<scenario>
- Examples: test_create_book_success, test_get_book_not_found
"""

import pytest
from fastapi import status
from sqlalchemy.exc import OperationalError

from app.services import books as book_service
from tests.conftest import NEW_BOOK, TEST_BOOK

pytestmark = pytest.mark.usefixtures("test_book")


UPDATED_BOOK = {
    "isbn": "0691161518",
    "amazon_url": "http://a.co/eobPtX2",
    "author": "Fake Author",
    "language": "english",
    "pages": 2000,
    "publisher": "Early Publishers",
    "title": "Test Title for a Test book",
    "year": 1904,
}


class TestListBooks:
    """Tests for GET /books endpoint."""

    def test_list_books_with_data(self, client):
        """Test listing books returns the stored book."""
        response = client.get("/books")

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert "year" in data["books"][0]
        assert data == {"books": [TEST_BOOK]}

    def test_list_books_empty(self, client):
        """Test listing books when the table is empty."""
        client.delete(f"/books/{TEST_BOOK['isbn']}")

        response = client.get("/books")

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {"books": []}

    def test_list_books_ordered_by_title(self, client):
        """Test books come back sorted by title."""
        client.post("/books", json=NEW_BOOK)

        response = client.get("/books")

        titles = [book["title"] for book in response.json()["books"]]
        assert titles == [NEW_BOOK["title"], TEST_BOOK["title"]]


class TestGetBook:
    """Tests for GET /books/{isbn} endpoint."""

    def test_get_book_success(self, client):
        """Test getting a book by ISBN."""
        response = client.get(f"/books/{TEST_BOOK['isbn']}")

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {"book": TEST_BOOK}

    def test_get_book_twice_is_identical(self, client):
        """Test reading the same book twice gives the same record."""
        first = client.get(f"/books/{TEST_BOOK['isbn']}")
        second = client.get(f"/books/{TEST_BOOK['isbn']}")

        assert first.json() == second.json()

    def test_get_book_not_found(self, client):
        """Test getting a non-existent book returns 404."""
        response = client.get("/books/error")

        assert response.status_code == status.HTTP_404_NOT_FOUND
        error = response.json()["error"]
        assert error["status"] == 404
        assert "not found" in error["message"].lower()


class TestCreateBook:
    """Tests for POST /books endpoint."""

    def test_create_book_success(self, client):
        """Test creating a book with every attribute."""
        response = client.post("/books", json=NEW_BOOK)

        assert response.status_code == status.HTTP_201_CREATED
        assert response.json() == {"book": NEW_BOOK}

    def test_create_book_then_get(self, client):
        """Test a created book can be read back unchanged."""
        client.post("/books", json=NEW_BOOK)

        response = client.get(f"/books/{NEW_BOOK['isbn']}")

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {"book": NEW_BOOK}

    def test_create_book_pages_as_string(self, client):
        """Test that a numeric string for pages is rejected."""
        book_data = {**NEW_BOOK, "pages": "199999"}

        response = client.post("/books", json=book_data)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        messages = response.json()["error"]["message"]
        assert len(messages) == 1
        assert messages[0].startswith("pages:")

    def test_create_book_missing_fields(self, client):
        """Test that a payload missing attributes is rejected."""
        book_data = {
            "isbn": "12345678",
            "amazon_url": "http://anothertest.book",
            "author": "Fake Author",
            "language": "spanish",
        }

        response = client.post("/books", json=book_data)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        error = response.json()["error"]
        assert error["status"] == 400
        assert error["message"] == [
            "pages: Field required",
            "publisher: Field required",
            "title: Field required",
            "year: Field required",
        ]

    def test_create_book_unknown_field(self, client):
        """Test that attributes outside the schema are rejected."""
        book_data = {**NEW_BOOK, "rating": 5}

        response = client.post("/books", json=book_data)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["error"]["message"][0].startswith("rating:")

    @pytest.mark.parametrize(
        "field,value",
        [
            ("year", "2019"),
            ("year", True),
            ("title", 42),
            ("isbn", ""),
            ("author", None),
        ],
    )
    def test_create_book_wrong_type(self, client, field, value):
        """Test that each attribute must have its declared type."""
        book_data = {**NEW_BOOK, field: value}

        response = client.post("/books", json=book_data)

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_create_book_invalid_does_not_store(self, client):
        """Test that a rejected payload writes nothing."""
        client.post("/books", json={**NEW_BOOK, "pages": "199999"})

        response = client.get(f"/books/{NEW_BOOK['isbn']}")

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_create_book_duplicate_isbn(self, client):
        """Test that a second book with the same ISBN is rejected."""
        book_data = {**NEW_BOOK, "isbn": TEST_BOOK["isbn"]}

        response = client.post("/books", json=book_data)

        assert response.status_code == status.HTTP_409_CONFLICT
        assert response.json()["error"]["status"] == 409

        # The stored book is untouched
        stored = client.get(f"/books/{TEST_BOOK['isbn']}").json()
        assert stored == {"book": TEST_BOOK}


class TestUpdateBook:
    """Tests for PUT /books/{isbn} endpoint."""

    def test_update_book_success(self, client):
        """Test replacing every attribute of a book."""
        response = client.put(f"/books/{TEST_BOOK['isbn']}", json=UPDATED_BOOK)

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {"book": UPDATED_BOOK}

        stored = client.get(f"/books/{TEST_BOOK['isbn']}").json()
        assert stored == {"book": UPDATED_BOOK}

    def test_update_book_without_isbn_in_body(self, client):
        """Test PUT requires the ISBN in the body as well."""
        book_data = {k: v for k, v in UPDATED_BOOK.items() if k != "isbn"}

        response = client.put(f"/books/{TEST_BOOK['isbn']}", json=book_data)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["error"]["message"] == ["isbn: Field required"]
        stored = client.get(f"/books/{TEST_BOOK['isbn']}").json()
        assert stored == {"book": TEST_BOOK}

    def test_update_book_not_found(self, client):
        """Test replacing a non-existent book returns 404."""
        response = client.put("/books/error", json=UPDATED_BOOK)

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_update_book_not_found_with_other_isbn_in_body(self, client):
        """Test a missing book is reported before an ISBN mismatch."""
        response = client.put("/books/error", json={**UPDATED_BOOK, "isbn": "error"})

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json()["error"]["status"] == 404

    def test_update_book_isbn_mismatch(self, client):
        """Test the body cannot change the ISBN."""
        book_data = {**UPDATED_BOOK, "isbn": "9999999999"}

        response = client.put(f"/books/{TEST_BOOK['isbn']}", json=book_data)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert client.get("/books/9999999999").status_code == status.HTTP_404_NOT_FOUND

    def test_update_book_missing_fields(self, client):
        """Test PUT requires every mutable attribute."""
        response = client.put(
            f"/books/{TEST_BOOK['isbn']}",
            json={"pages": 2000},
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        stored = client.get(f"/books/{TEST_BOOK['isbn']}").json()
        assert stored == {"book": TEST_BOOK}


class TestPatchBook:
    """Tests for PATCH /books/{isbn} endpoint."""

    def test_patch_book_single_field(self, client):
        """Test only the supplied attributes change."""
        response = client.patch(
            f"/books/{TEST_BOOK['isbn']}",
            json={"pages": 750},
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {"book": {**TEST_BOOK, "pages": 750}}

    def test_patch_book_empty_body(self, client):
        """Test an empty patch leaves the book unchanged."""
        response = client.patch(f"/books/{TEST_BOOK['isbn']}", json={})

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {"book": TEST_BOOK}

    def test_patch_book_not_found(self, client):
        """Test patching a non-existent book returns 404."""
        response = client.patch("/books/error", json={"pages": 2000})

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_patch_book_not_found_with_full_payload(self, client):
        """Test patching a non-existent book with a whole record returns 404."""
        response = client.patch("/books/error", json=UPDATED_BOOK)

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert client.get(f"/books/{TEST_BOOK['isbn']}").json() == {"book": TEST_BOOK}

    def test_patch_book_isbn_mismatch(self, client):
        """Test the patch body cannot change the ISBN."""
        response = client.patch(
            f"/books/{TEST_BOOK['isbn']}",
            json={"isbn": "9999999999"},
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_patch_book_null_value(self, client):
        """Test attributes cannot be cleared with null."""
        response = client.patch(
            f"/books/{TEST_BOOK['isbn']}",
            json={"title": None},
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_patch_book_pages_as_string(self, client):
        """Test patch payloads are type-checked too."""
        response = client.patch(
            f"/books/{TEST_BOOK['isbn']}",
            json={"pages": "750"},
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST


class TestDeleteBook:
    """Tests for DELETE /books/{isbn} endpoint."""

    def test_delete_book_success(self, client):
        """Test deleting a book returns a confirmation message."""
        response = client.delete(f"/books/{TEST_BOOK['isbn']}")

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {"message": "Book deleted"}

        # Verify book is deleted
        get_response = client.get(f"/books/{TEST_BOOK['isbn']}")
        assert get_response.status_code == status.HTTP_404_NOT_FOUND

    def test_delete_book_not_found(self, client):
        """Test deleting a non-existent book returns 404."""
        response = client.delete("/books/error")

        assert response.status_code == status.HTTP_404_NOT_FOUND


class TestErrorResponses:
    """Tests for the shared error envelope."""

    def test_unknown_route(self, client):
        response = client.get("/authors")

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json()["error"]["status"] == 404

    def test_method_not_allowed(self, client):
        response = client.post(f"/books/{TEST_BOOK['isbn']}", json=TEST_BOOK)

        assert response.status_code == status.HTTP_405_METHOD_NOT_ALLOWED
        assert response.json()["error"]["status"] == 405

    def test_database_error_returns_500(self, client, monkeypatch):
        """Test unexpected database failures are hidden behind a 500."""

        def broken_list_books(repo):
            raise OperationalError("SELECT", {}, Exception("connection lost"))

        monkeypatch.setattr(book_service, "list_books", broken_list_books)

        response = client.get("/books")

        assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
        assert response.json() == {
            "error": {"message": "A database error occurred.", "status": 500}
        }
