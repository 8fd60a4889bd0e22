"""
Services Package

This package contains business logic that is:
- Separate from HTTP handling (routers)
- Separate from SQL (repositories)
- Easier to test in isolation

Current services:
- books.py: create, list, get, update, patch and delete books
"""
