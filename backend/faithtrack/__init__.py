"""
Faithtrack Backend: Application Package Initializer
=====================================================

What: Marks the `faithtrack` directory as a Python package.
Who:  Imported by uvicorn (`faithtrack.main:app`), Alembic and pytest.

Architecture Note:
    The backend is layered the same way for every resource:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns, caller resolution
    ├─────────────────────────────────────┤
    │         Services (Business Logic)   │  ← ownership checks, one store call
    ├─────────────────────────────────────┤
    │       Models & Schemas (Data)       │  ← SQLAlchemy ORM + Pydantic
    ├─────────────────────────────────────┤
    │        Database (Persistence)       │  ← Async SQLAlchemy sessions
    └─────────────────────────────────────┘

    Services receive the caller identity as an explicit argument, so they can
    be exercised in tests without an identity provider.
"""

__version__ = "1.0.0"
