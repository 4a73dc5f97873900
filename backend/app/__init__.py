"""
Rural Sports Backend: Application Package
==========================================

What:  Marks the `app` directory as a Python package.
Who:   Imported by uvicorn (`app.main:app`), Alembic, and pytest.

Architecture Note:
    The backend is a flat set of REST resources layered the same way:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns, auth dependency
    ├─────────────────────────────────────┤
    │         Services (one per resource) │  ← existence checks, status flips
    ├─────────────────────────────────────┤
    │   Repository (generic data access)  │  ← get / list / add / delete
    ├─────────────────────────────────────┤
    │   Models & Schemas (ORM + Pydantic) │
    └─────────────────────────────────────┘

    Resources do not call each other. The only shared lookup is the user
    repository, used to resolve foreign keys (organizer, donor, holder, ...).
"""

__version__ = "1.0.0"
