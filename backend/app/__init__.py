"""
Employee Directory Backend - Application Package Initializer
============================================================

What: Marks the `app` directory as a Python package.
Who:  Used implicitly by Python's import system and explicitly by pytest and uvicorn.

Architecture Note:
    The backend is layered the same way top to bottom:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← status codes, path/body parsing
    ├─────────────────────────────────────┤
    │     Services (Persistence Gateway)  │  ← one store statement per call
    ├─────────────────────────────────────┤
    │       Models & Schemas (Data)       │  ← SQLAlchemy ORM + Pydantic
    ├─────────────────────────────────────┤
    │        Database (Connection Pool)   │  ← async engine, startup probe
    └─────────────────────────────────────┘

    Routes never touch SQL; the gateway never builds HTTP responses.
"""

__version__ = "1.0.0"
