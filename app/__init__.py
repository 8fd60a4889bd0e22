"""
Books API Application Package

A REST API for managing book records, keyed by ISBN.

Package Structure:
- config.py: Application configuration using Pydantic Settings
- database.py: Engine, session factory and per-request sessions
- exceptions.py: Domain errors and their HTTP status codes
- main.py: FastAPI application factory and configuration
- dependencies.py: Dependency injection functions
- models/: SQLAlchemy ORM models
- schemas/: Pydantic request/response schemas and payload validation
- repositories/: Parameterized SQL against each table
- services/: Business operations used by the routers
- routers/: API route handlers
"""

__version__ = "1.0.0"
