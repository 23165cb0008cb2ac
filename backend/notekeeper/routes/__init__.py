# Routes package init
"""
NoteKeeper Backend — Routes Package
=====================================

Route Inventory:
    - notes.py:   /api/notes, /api/notes/{id}, /api/dashboard (JSON API)
    - pages.py:   /, /note/{id}, /new, /empty               (HTML views)
    - health.py:  /health                                   (health check)

Routes stay thin: pull data out of the request, call NoteService, shape
the response. Note rules live in services.
"""
