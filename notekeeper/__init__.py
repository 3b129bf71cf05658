"""
Notekeeper — Application Package Initializer
==============================================

Architecture Note:
    The backend is a small layered stack:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns, response envelope
    ├─────────────────────────────────────┤
    │         Services (Business Logic)   │  ← Validation, ids, ordering, locking
    ├─────────────────────────────────────┤
    │       Models & Schemas (Data)       │  ← Pydantic Note + API contracts
    ├─────────────────────────────────────┤
    │           Store (Persistence)       │  ← One JSON document on disk
    └─────────────────────────────────────┘

    create_app() in main.py composes Store → Service for each application
    instance; nothing below the routes is a module-level singleton.
"""

__version__ = "1.0.0"
