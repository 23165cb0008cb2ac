"""
NoteKeeper Backend — HTML Views
=================================

What:  Server-rendered pages for the browser UI.
How:   Jinja2 templates via FastAPI's Jinja2Templates. The editor page
       talks to the JSON API from static/js/editor.js.

Views:
    GET /            dashboard: pinned notes, then recent notes
    GET /note/{id}   editor for an existing note (404 text if missing)
    GET /new         editor in new-note mode
    GET /empty       empty-state page
"""

from pathlib import Path

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse, PlainTextResponse
from fastapi.templating import Jinja2Templates

from notekeeper.exceptions import NotFoundError
from notekeeper.services.formatting import format_relative_age
from notekeeper.services.note_service import note_service
from notekeeper.store import NoteStore, get_note_store

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))
templates.env.globals["format_date"] = format_relative_age

router = APIRouter(tags=["Pages"], include_in_schema=False)


@router.get("/", response_class=HTMLResponse)
async def index(request: Request, store: NoteStore = Depends(get_note_store)):
    pinned, recent = note_service.dashboard(store)
    return templates.TemplateResponse(
        request,
        "index.html",
        {"pinned_notes": pinned, "recent_notes": recent},
    )


@router.get("/note/{note_id}", response_class=HTMLResponse)
async def edit_note(
    note_id: str, request: Request, store: NoteStore = Depends(get_note_store)
):
    try:
        note = note_service.get_note(store, note_id)
    except NotFoundError as exc:
        # Browsers get plain text here, not the JSON error body
        return PlainTextResponse(exc.message, status_code=404)
    return templates.TemplateResponse(request, "editor.html", {"note": note})


@router.get("/new", response_class=HTMLResponse)
async def new_note(request: Request):
    return templates.TemplateResponse(request, "editor.html", {"note": None})


@router.get("/empty", response_class=HTMLResponse)
async def empty(request: Request):
    return templates.TemplateResponse(request, "empty.html", {})
