"""
Journal API: Application Package Initializer
=============================================

What: Marks the `journal_api` directory as a Python package.
Who:  Imported by uvicorn (`uvicorn journal_api.main:app`) and by pytest.

Architecture Note:
    The backend is layered the same way top to bottom:

    ┌─────────────────────────────────────┐
    │        Routes (HTTP handlers)       │  ← status codes only
    ├─────────────────────────────────────┤
    │   Services (User, JournalEntry)     │  ← owner-sequence consistency
    ├─────────────────────────────────────┤
    │   Repositories (generic CRUD)       │  ← one per collection
    ├─────────────────────────────────────┤
    │   Database (motor / MongoDB)        │  ← client, transactions, indexes
    └─────────────────────────────────────┘

    Routes receive the database handle through dependency injection and hand
    it to the stateless service singletons on every call.
"""

__version__ = "1.0.0"
