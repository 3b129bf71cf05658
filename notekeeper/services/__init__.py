# Services package init
"""
Notekeeper — Services Layer
=============================

Business logic between the routes (HTTP) and the store (persistence).

Service Inventory:
    - NoteService: validation, id/timestamp assignment, newest-first ordering
      and write serialization over a NoteStore.
"""
