"""
Test Suite for Books API

Test Organization:
- conftest.py: Shared fixtures (test app, client, sample books)
- test_books.py: Tests for /books endpoints
- test_book_service.py: Tests for the books service and repository
- test_validation.py: Tests for payload validation
- test_config.py: Tests for settings
- test_app.py: Tests for root, health and lifespan

Running Tests:
    pip install -e ".[test]"
    pytest
"""
