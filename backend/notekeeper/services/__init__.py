# Services package init
"""
NoteKeeper Backend — Services Layer
=====================================

What:  Business logic sitting between routes (HTTP) and the NoteStore.
Why:   Routes handle HTTP; services handle the note rules and can be
       unit-tested without a running app.

Service Inventory:
    - NoteService: CRUD, dashboard split, bulk delete, audit logging
    - formatting: relative-age labels for the HTML views
"""
